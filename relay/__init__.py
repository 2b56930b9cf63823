"""Notification relay Django application."""
