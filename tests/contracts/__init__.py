"""Contract document and schema validator tests."""
