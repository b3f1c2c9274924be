"""Component tests that render HTML fixtures in a real browser."""
