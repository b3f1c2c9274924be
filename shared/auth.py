"""One-time UI login that produces a reusable authenticated session."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from playwright.sync_api import Page

from config import Config

logger = logging.getLogger(__name__)


class LoginForm(Protocol):
    """Anything that can open the login screen and submit credentials."""

    def open(self) -> Any: ...

    def login(self, email: str, password: str) -> None: ...


class AuthenticationError(RuntimeError):
    """Raised when a UI login does not yield an access token."""


@dataclass(frozen=True)
class AuthSession:
    """
    Result of a successful login.

    Attributes:
        access_token: Token read from the auth cookie.
        storage_state_path: Snapshot file other contexts can be created from.
    """

    access_token: str
    storage_state_path: Path


def read_access_token(page: Page, cookie_name: str) -> str | None:
    """Return the value of ``cookie_name`` in the page's context, if set."""
    for cookie in page.context.cookies():
        if cookie.get("name") == cookie_name:
            return cookie.get("value") or None
    return None


def authenticate(page: Page, login_page: LoginForm, config: Config) -> AuthSession:
    """
    Log in through the UI and persist the session for reuse.

    Args:
        page: Page in a fresh, unauthenticated context.
        login_page: Login page object bound to ``page``.
        config: Provides credentials, cookie name and snapshot path.

    Returns:
        AuthSession with the token and the written snapshot path.

    Raises:
        AuthenticationError: If credentials are missing or no token cookie
            was set after submitting the form.
    """
    if not config.has_credentials:
        raise AuthenticationError("EMAIL and PASSWORD must be set to authenticate")

    logger.info("Logging in through the UI as %s", config.email)
    login_page.open()
    login_page.login(config.email, config.password)
    page.wait_for_load_state("networkidle")

    token = read_access_token(page, config.auth_cookie_name)
    if not token:
        raise AuthenticationError(
            f"Access token cookie {config.auth_cookie_name!r} not found after UI login"
        )

    state_path = config.storage_state_path
    state_path.parent.mkdir(parents=True, exist_ok=True)
    page.context.storage_state(path=str(state_path))
    logger.info("Saved authenticated storage state to %s", state_path)

    return AuthSession(access_token=token, storage_state_path=state_path)
