"""Page objects for the application under test."""

from tests.e2e.pages.base_page import BasePage, RowNotFoundError
from tests.e2e.pages.login_page import LoginPage

__all__ = ["BasePage", "LoginPage", "RowNotFoundError"]
