"""One check run: fetch the page, pick slots, notify.

Every failure ends the run quietly with an error log. The returned
CheckResult describes what happened; it never changes the exit status.
"""

import logging

import httpx
from playwright.async_api import Error as PlaywrightError

from termin_watch.browser.fetcher import open_page
from termin_watch.config import Settings
from termin_watch.errors import MissingCredentialsError, PushoverError
from termin_watch.extraction.location import extract_location
from termin_watch.extraction.slots import extract_slots
from termin_watch.models.notification import build_payload
from termin_watch.models.outcome import CheckOutcome, CheckResult
from termin_watch.pushover.client import send_notification

logger = logging.getLogger(__name__)


def require_credentials(settings: Settings) -> None:
    """Raise MissingCredentialsError unless both Pushover values are set."""
    if not settings.has_credentials:
        raise MissingCredentialsError("Missing Pushover credentials")


async def run_check(settings: Settings, dry_run: bool = False) -> CheckResult:
    """Run a single availability check.

    Args:
        settings: Loaded application settings.
        dry_run: Build the notification and log it instead of sending it.
            Credentials are not required in this mode.
    """
    if not dry_run:
        try:
            require_credentials(settings)
        except MissingCredentialsError as exc:
            logger.error("%s", exc)
            return CheckResult(outcome=CheckOutcome.MISSING_CREDENTIALS, error=str(exc))

    try:
        async with open_page(settings) as page:
            slots = await extract_slots(
                page, limit=settings.max_slots, window=settings.check_window
            )
            location = await extract_location(page) if slots else ""
    except PlaywrightError as exc:
        logger.error("Check failed: %s", exc)
        return CheckResult(outcome=CheckOutcome.CHECK_FAILED, error=str(exc))

    if not slots:
        logger.info("No free slots found")
        return CheckResult(outcome=CheckOutcome.NO_SLOTS)

    payload = build_payload(slots, location, title=settings.notification_title)

    if dry_run:
        logger.warning("Dry run, notification not sent: %s", payload.message)
        return CheckResult(
            outcome=CheckOutcome.DRY_RUN, slots=slots, location=location, payload=payload
        )

    try:
        await send_notification(
            payload, user=settings.pushover_user, token=settings.pushover_token
        )
    except (PushoverError, httpx.HTTPError) as exc:
        logger.error("Check failed: %s", exc)
        return CheckResult(
            outcome=CheckOutcome.DELIVERY_FAILED,
            slots=slots,
            location=location,
            payload=payload,
            error=str(exc),
        )

    return CheckResult(
        outcome=CheckOutcome.NOTIFIED, slots=slots, location=location, payload=payload
    )
