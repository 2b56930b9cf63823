"""Django project package for the notification relay service."""
