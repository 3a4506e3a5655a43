"""Termin Watch: scheduled appointment-slot checker with Pushover alerts."""

__version__ = "0.1.0"
