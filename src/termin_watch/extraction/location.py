"""Best-effort location lookup for the notification body."""

import logging

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

logger = logging.getLogger(__name__)

# Placeholder selector; adjust after inspecting the site.
LOCATION_SELECTOR = "h1, .location, .office, .breadcrumb"


async def extract_location(page: Page, selector: str = LOCATION_SELECTOR) -> str:
    """Return the trimmed text of the first matching element, or "".

    Lookup failures are logged at debug level and never raised.
    """
    try:
        element = await page.query_selector(selector)
        if element is None:
            return ""
        return (await element.inner_text()).strip()
    except PlaywrightError:
        logger.debug("Location lookup failed for %r", selector, exc_info=True)
        return ""
