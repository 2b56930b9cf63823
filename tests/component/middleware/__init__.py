"""Middleware integration tests."""
