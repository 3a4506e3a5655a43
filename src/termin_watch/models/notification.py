"""Push notification payload and message formatting."""

from collections.abc import Sequence

from pydantic import BaseModel

DEFAULT_TITLE = "Slot available – Dresden Bürgerbüro"


class NotificationPayload(BaseModel):
    """Title and body of a single push notification."""

    title: str = DEFAULT_TITLE
    message: str


def build_message(slots: Sequence[str], location: str = "") -> str:
    """Format the notification body.

    First line is ``Time: <primary>``. A ``More:`` line lists the remaining
    slots comma-joined, and a ``Place:`` line carries the location. Both
    optional lines are omitted when empty.

    Raises:
        ValueError: if ``slots`` is empty.
    """
    if not slots:
        raise ValueError("at least one slot is required to build a message")

    lines = [f"Time: {slots[0]}"]
    more = ", ".join(slots[1:])
    if more:
        lines.append(f"More: {more}")
    if location:
        lines.append(f"Place: {location}")
    return "\n".join(lines)


def build_payload(
    slots: Sequence[str], location: str = "", title: str = DEFAULT_TITLE
) -> NotificationPayload:
    """Build the payload for a non-empty slot list."""
    return NotificationPayload(title=title, message=build_message(slots, location))
