"""Unit tests for request and response schemas."""
