"""Headless browser session for loading the booking page."""

from termin_watch.browser.fetcher import open_page

__all__ = ["open_page"]
