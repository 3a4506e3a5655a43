"""Playwright page fetcher.

Opens a headless Chromium session with a realistic user agent, navigates to
the booking page and hands the rendered page to the caller. Context and
browser are closed on every exit path.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from playwright.async_api import Browser, BrowserContext, Page, async_playwright
from playwright.async_api import Error as PlaywrightError

from termin_watch.config import Settings

logger = logging.getLogger(__name__)


async def _close_quietly(resource: Browser | BrowserContext, name: str) -> None:
    """Close a browser resource. Close failures are logged, never raised."""
    try:
        await resource.close()
    except PlaywrightError:
        logger.warning("Failed to close %s", name, exc_info=True)


@asynccontextmanager
async def open_page(settings: Settings) -> AsyncIterator[Page]:
    """Yield a page navigated to ``settings.start_url``.

    Waits for ``domcontentloaded`` only, bounded by
    ``settings.navigation_timeout_ms``. Navigation errors (including
    Playwright's ``TimeoutError``) propagate to the caller after cleanup.
    """
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True)
        try:
            context = await browser.new_context(user_agent=settings.user_agent)
            try:
                page = await context.new_page()
                logger.debug("Navigating to %s", settings.start_url)
                await page.goto(
                    settings.start_url,
                    wait_until="domcontentloaded",
                    timeout=settings.navigation_timeout_ms,
                )
                yield page
            finally:
                await _close_quietly(context, "browser context")
        finally:
            await _close_quietly(browser, "browser")
