"""Pushover delivery: a single form-encoded POST per notification."""

from termin_watch.pushover.client import PUSHOVER_API_URL, send_notification, send_pushover

__all__ = ["PUSHOVER_API_URL", "send_notification", "send_pushover"]
