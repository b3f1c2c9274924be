"""
Fixtures for component tests.

Component tests render a small HTML document with ``page.set_content`` and
drive the page objects against it. No application server is needed, only a
Playwright browser.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from playwright.sync_api import Page

RenderFn = Callable[[str], Page]


@pytest.fixture
def render(page: Page) -> RenderFn:
    """
    Provide a function that loads an HTML body into the test page.

    Returns:
        Function taking the body markup and returning the page.
    """

    def _render(body: str) -> Page:
        page.set_content(f"<!doctype html><html><body>{body}</body></html>")
        return page

    return _render
