"""Pytest configuration and shared fixtures."""

import os

from django.test import Client

import pytest

# pytest-django reads the same value from pyproject.toml
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "notification_relay.settings_test")


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()
