"""Async Pushover client built on httpx."""

import logging

import httpx

from termin_watch.errors import PushoverError
from termin_watch.models.notification import NotificationPayload

logger = logging.getLogger(__name__)

PUSHOVER_API_URL = "https://api.pushover.net/1/messages.json"
NORMAL_PRIORITY = "0"


async def send_pushover(
    title: str,
    message: str,
    *,
    user: str,
    token: str,
    client: httpx.AsyncClient | None = None,
) -> None:
    """POST one notification to Pushover.

    Args:
        title: Notification title.
        message: Notification body.
        user: Pushover user key.
        token: Pushover application token.
        client: Optional shared client; a short-lived one is created otherwise.

    Raises:
        PushoverError: on a non-success HTTP status, carrying status and body.
        httpx.HTTPError: on transport failures.
    """
    data = {
        "token": token,
        "user": user,
        "title": title,
        "message": message,
        "priority": NORMAL_PRIORITY,
    }
    if client is None:
        async with httpx.AsyncClient(timeout=httpx.Timeout(15.0)) as own_client:
            response = await own_client.post(PUSHOVER_API_URL, data=data)
    else:
        response = await client.post(PUSHOVER_API_URL, data=data)

    if not response.is_success:
        raise PushoverError(response.status_code, response.text)
    logger.info("Pushover notification sent: %s", title)


async def send_notification(
    payload: NotificationPayload,
    *,
    user: str,
    token: str,
    client: httpx.AsyncClient | None = None,
) -> None:
    """Send a NotificationPayload. See send_pushover."""
    await send_pushover(payload.title, payload.message, user=user, token=token, client=client)
