"""Tests for best-effort location lookup."""

from termin_watch.extraction.location import LOCATION_SELECTOR, extract_location


async def test_extract_location_trims_text(make_page):
    page = make_page(location="  Bürgerbüro Altstadt \n")

    assert await extract_location(page) == "Bürgerbüro Altstadt"
    assert page.selectors == [LOCATION_SELECTOR]


async def test_extract_location_no_match(make_page):
    assert await extract_location(make_page(location=None)) == ""


async def test_extract_location_swallows_playwright_error(make_page, playwright_error):
    """Lookup failures never propagate."""
    assert await extract_location(make_page(location=playwright_error)) == ""
