"""Exception handler tests."""
