"""
Test suite configuration module.

This module defines configuration classes for the environments the suite
runs in (local workstation, CI). Values are read from environment variables
with sensible defaults and passed to fixtures as an explicit object rather
than read ad hoc from ``os.environ`` inside page objects or API helpers.
"""

from __future__ import annotations

import copy
import os
from collections.abc import Mapping
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    DEFAULT_TIMEOUT_MS: int = 5000

    def __init__(self, environ: Mapping[str, str] | None = None):
        """
        Load configuration values.

        Args:
            environ: Mapping to read values from. Defaults to ``os.environ``.
        """
        env = os.environ if environ is None else environ

        self.base_url: str = env.get("BASE_URL", "http://localhost:3000").rstrip("/")
        self.api_url: str = env.get("API_URL", self.base_url).rstrip("/")
        self.email: str | None = env.get("EMAIL") or None
        self.password: str | None = env.get("PASSWORD") or None
        self.access_token: str | None = env.get("ACCESS_TOKEN") or None
        self.auth_cookie_name: str = env.get("AUTH_COOKIE_NAME", "token")
        self.storage_state_path: Path = Path(
            env.get("STORAGE_STATE_PATH", str(BASE_DIR / ".auth" / "userSession.json"))
        )
        self.default_timeout_ms: int = int(
            env.get("DEFAULT_TIMEOUT_MS", self.DEFAULT_TIMEOUT_MS)
        )

    @property
    def has_credentials(self) -> bool:
        """Whether the UI login flow has an email and password to use."""
        return bool(self.email and self.password)

    def with_access_token(self, token: str) -> "Config":
        """
        Return a copy of this configuration carrying a derived access token.

        Args:
            token: Access token read after a successful login.

        Returns:
            New configuration object; the original is left untouched.
        """
        updated = copy.copy(self)
        updated.access_token = token
        return updated

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self.base_url!r}, "
            f"api_url={self.api_url!r}, email={self.email!r})"
        )


class LocalConfig(Config):
    """Local workstation configuration."""

    DEFAULT_TIMEOUT_MS: int = 5000


class CIConfig(Config):
    """Continuous integration configuration."""

    # Shared CI runners are slower than a developer machine
    DEFAULT_TIMEOUT_MS: int = 10000


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses TEST_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("TEST_ENV", "local")
    return config.get(env, config["default"])
