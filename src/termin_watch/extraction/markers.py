"""Text classification for slot candidates: time pattern and exclusion keywords."""

import functools
import re
from pathlib import Path

import yaml

_CONFIG_PATH = Path(__file__).resolve().parent / "slot_markers.yaml"

# 00:00-23:59, single-digit hour allowed
TIME_PATTERN = re.compile(r"\b([01]?\d|2[0-3]):([0-5]\d)\b")


@functools.lru_cache
def load_exclusion_keywords() -> tuple[str, ...]:
    """Load exclusion keywords (lower-cased) from the YAML marker file. Result is cached."""
    with open(_CONFIG_PATH, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return tuple(str(k).lower() for k in data.get("exclusion_keywords", []))


def has_time(text: str) -> bool:
    return TIME_PATTERN.search(text) is not None


def is_excluded(text: str) -> bool:
    """True when the text contains any exclusion keyword, ignoring case."""
    lowered = text.lower()
    return any(keyword in lowered for keyword in load_exclusion_keywords())


def is_slot_text(text: str) -> bool:
    """Default classifier: a time substring and no exclusion keyword."""
    return has_time(text) and not is_excluded(text)


def first_time_minutes(text: str) -> int | None:
    """Minutes since midnight of the first time in ``text``, or None."""
    match = TIME_PATTERN.search(text)
    if match is None:
        return None
    return int(match.group(1)) * 60 + int(match.group(2))


def parse_hhmm(value: str) -> int:
    """Parse an ``H:MM``/``HH:MM`` string into minutes since midnight.

    Raises:
        ValueError: if the value is not a valid time of day.
    """
    match = TIME_PATTERN.fullmatch(value.strip())
    if match is None:
        raise ValueError(f"invalid time of day: {value!r}")
    return int(match.group(1)) * 60 + int(match.group(2))


def within_window(text: str, start: int, end: int) -> bool:
    """True when the first time in ``text`` lies in the inclusive [start, end] window.

    Bounds are minutes since midnight, as returned by ``parse_hhmm``.
    """
    minutes = first_time_minutes(text)
    if minutes is None:
        return False
    return start <= minutes <= end
