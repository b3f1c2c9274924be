"""Helpers shared by the API and browser test suites."""
