"""Data models for a single check run."""

from termin_watch.models.notification import NotificationPayload, build_message, build_payload
from termin_watch.models.outcome import CheckOutcome, CheckResult
from termin_watch.models.slots import SlotCandidate

__all__ = [
    "SlotCandidate",
    "NotificationPayload",
    "build_message",
    "build_payload",
    "CheckOutcome",
    "CheckResult",
]
