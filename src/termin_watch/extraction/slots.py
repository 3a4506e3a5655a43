"""Heuristic slot extraction from a rendered page.

The scan has no knowledge of the target site's markup: it reads the visible
text of broad element sets and filters it with a text classifier. Selectors
and the classifier can be swapped without touching the control flow.
"""

import logging
from collections.abc import Callable, Iterable

from playwright.async_api import Page

from termin_watch.extraction.markers import is_slot_text, within_window
from termin_watch.models.slots import SlotCandidate

logger = logging.getLogger(__name__)

# Placeholder selectors; narrow them once the calendar markup is known.
SLOT_SELECTOR = "a, button, td, div"
MAX_SLOTS = 4

_INNER_TEXTS_JS = "nodes => nodes.map(n => n.innerText || '')"


def select_slots(
    texts: Iterable[str],
    limit: int = MAX_SLOTS,
    classify: Callable[[str], bool] = is_slot_text,
    window: tuple[int, int] | None = None,
) -> list[str]:
    """Filter element texts down to at most ``limit`` unique slot strings.

    Texts are trimmed, classified, optionally restricted to a check window
    (first time in the text, inclusive bounds in minutes since midnight),
    then deduplicated preserving first-seen order and truncated.

    Raises:
        ValueError: if ``limit`` is less than 1.
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    candidates: list[SlotCandidate] = []
    for raw in texts:
        candidate = SlotCandidate(text=raw)
        if not classify(candidate.text):
            continue
        if window is not None and not within_window(candidate.text, *window):
            continue
        candidates.append(candidate)

    unique = list(dict.fromkeys(candidates))
    return [c.text for c in unique[:limit]]


async def read_element_texts(page: Page, selector: str = SLOT_SELECTOR) -> list[str]:
    """Read ``innerText`` of every element matching ``selector`` in one round trip."""
    texts = await page.eval_on_selector_all(selector, _INNER_TEXTS_JS)
    return [t for t in texts if isinstance(t, str)]


async def extract_slots(
    page: Page,
    selector: str = SLOT_SELECTOR,
    limit: int = MAX_SLOTS,
    classify: Callable[[str], bool] = is_slot_text,
    window: tuple[int, int] | None = None,
) -> list[str]:
    """Scan the page and return 0..``limit`` slot strings."""
    texts = await read_element_texts(page, selector)
    slots = select_slots(texts, limit=limit, classify=classify, window=window)
    logger.debug("Scanned %d elements, %d slot(s) selected", len(texts), len(slots))
    return slots
