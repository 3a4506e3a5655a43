"""Shared test fixtures."""

import pytest
from playwright.async_api import Error as PlaywrightError

from termin_watch.config import Settings


class FakeElement:
    """Minimal stand-in for a Playwright ElementHandle."""

    def __init__(self, text: str = "", error: Exception | None = None):
        self._text = text
        self._error = error

    async def inner_text(self) -> str:
        if self._error is not None:
            raise self._error
        return self._text


class FakePage:
    """Minimal stand-in for a Playwright Page.

    ``texts`` is what the element scan returns; ``location`` is the first
    heading element (None for no match, an exception to fail the lookup).
    """

    def __init__(self, texts: list | None = None, location: "str | Exception | None" = None):
        self.texts = texts or []
        self.location = location
        self.selectors: list[str] = []

    async def eval_on_selector_all(self, selector: str, expression: str) -> list:
        self.selectors.append(selector)
        return list(self.texts)

    async def query_selector(self, selector: str):
        self.selectors.append(selector)
        if isinstance(self.location, Exception):
            raise self.location
        if self.location is None:
            return None
        return FakeElement(self.location)


@pytest.fixture
def settings() -> Settings:
    """Settings with credentials and no .env lookup."""
    return Settings(_env_file=None, pushover_user="user-key", pushover_token="app-token")


@pytest.fixture
def playwright_error() -> PlaywrightError:
    return PlaywrightError("Timeout 60000ms exceeded")


@pytest.fixture
def make_page():
    """Factory for FakePage instances."""
    return FakePage
