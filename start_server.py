"""Production server startup script for the notification relay.

This module provides the entry point for starting the Django application
with Gunicorn in production environments (Docker containers, Render).
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the notification relay using Gunicorn.

    One-time codes live in process memory, so the relay runs as a single
    worker process and gets its concurrency from threads:
    - Binds to 0.0.0.0:$PORT (default 3000)
    - 1 worker process with ``GUNICORN_THREADS`` threads (default 8)
    - 60-second timeout for long-running fan-outs
    - Logs to stdout/stderr for container log aggregation
    """
    sys.argv = [
        "gunicorn",
        "notification_relay.wsgi:application",
        "--bind",
        f"0.0.0.0:{os.getenv('PORT', '3000')}",
        "--workers",
        "1",
        "--threads",
        os.getenv("GUNICORN_THREADS", "8"),
        "--timeout",
        "60",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
