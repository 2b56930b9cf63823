"""Unit tests for logging configuration and processors."""
