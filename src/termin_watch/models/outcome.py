"""Run outcome model. Used for logs and tests only; never affects the exit code."""

from enum import Enum

from pydantic import BaseModel

from termin_watch.models.notification import NotificationPayload


class CheckOutcome(str, Enum):
    """Terminal state of one check run."""

    NOTIFIED = "notified"
    NO_SLOTS = "no_slots"
    DRY_RUN = "dry_run"
    MISSING_CREDENTIALS = "missing_credentials"
    CHECK_FAILED = "check_failed"
    DELIVERY_FAILED = "delivery_failed"


class CheckResult(BaseModel):
    """What a run found and what it did about it."""

    outcome: CheckOutcome
    slots: list[str] = []
    location: str = ""
    payload: NotificationPayload | None = None
    error: str | None = None  # Human-readable failure detail
