"""Repository tests."""
