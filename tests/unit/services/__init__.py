"""Service unit tests."""
