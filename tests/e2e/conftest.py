"""Authenticated-session fixtures for E2E tests against a running application."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from config import Config
from shared.auth import AuthSession, authenticate
from shared.browser import new_context
from tests.e2e.pages.login_page import LoginPage


@pytest.fixture(scope="session")
def auth_session(
    request: pytest.FixtureRequest, app_config: Config, browser_context_args: dict
) -> AuthSession:
    """
    Log in once through the UI and save the storage state for reuse.

    Runs in its own context so the login does not leak into the context
    of the test that first requests it. Skips when EMAIL/PASSWORD are unset.
    """
    if not app_config.has_credentials:
        pytest.skip("EMAIL and PASSWORD must be set to run authenticated E2E tests")

    browser: Browser = request.getfixturevalue("browser")
    context = new_context(browser, browser_context_args, app_config)
    try:
        page = context.new_page()
        return authenticate(page, LoginPage(page), app_config)
    finally:
        context.close()


@pytest.fixture(scope="session")
def authed_config(app_config: Config, auth_session: AuthSession) -> Config:
    """Configuration carrying the access token derived from the UI login."""
    return app_config.with_access_token(auth_session.access_token)


@pytest.fixture(scope="function")
def authenticated_context(
    browser: Browser, browser_context_args: dict, app_config: Config, auth_session: AuthSession
) -> Generator[BrowserContext, None, None]:
    """Browser context restored from the saved storage state."""
    context = new_context(
        browser,
        browser_context_args,
        app_config,
        storage_state=str(auth_session.storage_state_path),
    )
    yield context
    context.close()


@pytest.fixture(scope="function")
def authenticated_page(authenticated_context: BrowserContext) -> Generator[Page, None, None]:
    """Page that starts already logged in."""
    page = authenticated_context.new_page()
    yield page
    page.close()
