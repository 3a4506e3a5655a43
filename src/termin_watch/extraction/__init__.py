"""Slot and location extraction from the rendered booking page.

Public API:
    extract_slots(page) -> list[str]
    select_slots(texts) -> list[str]
    extract_location(page) -> str
"""

from termin_watch.extraction.location import LOCATION_SELECTOR, extract_location
from termin_watch.extraction.markers import is_slot_text
from termin_watch.extraction.slots import MAX_SLOTS, SLOT_SELECTOR, extract_slots, select_slots

__all__ = [
    "LOCATION_SELECTOR",
    "MAX_SLOTS",
    "SLOT_SELECTOR",
    "extract_location",
    "extract_slots",
    "is_slot_text",
    "select_slots",
]
