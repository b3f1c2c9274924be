"""Browser context creation bound to the suite configuration."""

from __future__ import annotations

from typing import Any

from playwright.sync_api import Browser, BrowserContext

from config import Config


def new_context(
    browser: Browser, context_args: dict[str, Any], config: Config, **overrides: Any
) -> BrowserContext:
    """
    Create a browser context whose actions wait up to the configured timeout.

    Locator actions and ``wait_for`` calls made without an explicit timeout
    fall back to this default.

    Args:
        browser: Launched Playwright browser.
        context_args: Options for ``browser.new_context`` (base_url, viewport...).
        config: Supplies ``default_timeout_ms``.
        **overrides: Extra context options, e.g. ``storage_state``.

    Returns:
        The new browser context. The caller is responsible for closing it.
    """
    context = browser.new_context(**{**context_args, **overrides})
    context.set_default_timeout(config.default_timeout_ms)
    return context
