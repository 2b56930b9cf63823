#!/usr/bin/env python
"""Script to run the Django development server."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Run the Django development server on ``PORT`` (default 3000).

    The autoreloader is disabled so the in-memory code store is not split
    between the reloader and the serving process.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "notification_relay.settings")
    port = os.getenv("PORT", "3000")
    execute_from_command_line(
        [sys.argv[0], "runserver", f"0.0.0.0:{port}", "--noreload"]
    )


if __name__ == "__main__":
    main()
