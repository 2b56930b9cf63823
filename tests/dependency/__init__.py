"""Dependency tests: real HTTP against a live server."""
