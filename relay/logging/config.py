"""Structlog configuration for dual output: JSON files and colored console."""

import logging
import logging.handlers
import os
from pathlib import Path

import structlog

from relay.logging.filters import RequestIDFilter
from relay.logging.processors import (
    add_process_info,
    add_request_context,
    add_service_context,
    console_renderer,
)

LOG_MAX_BYTES = 50 * 1024 * 1024
LOG_BACKUP_COUNT = 20


def setup_logging() -> None:
    """Configure structlog with a JSON file handler and a coloured console.

    Environment Variables:
    - LOG_FILE_PATH: Path to log file (default: ./logs/notification-relay.log)
    - LOG_LEVEL: Logging level (default: INFO)
    - SERVICE_NAME / ENVIRONMENT: metadata added to every event
    """
    log_file_path = os.getenv("LOG_FILE_PATH", "./logs/notification-relay.log")
    log_level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)

    Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)

    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_request_context,
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_service_context,
            add_process_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file_path,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(ensure_ascii=False),
            foreign_pre_chain=[
                *shared_processors,
                add_service_context,
                add_process_info,
            ],
        )
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    for handler in (file_handler, console_handler):
        handler.addFilter(RequestIDFilter())
        root_logger.addHandler(handler)

    structlog.get_logger(__name__).info(
        "logging_configured",
        log_file=log_file_path,
        log_level=logging.getLevelName(log_level),
    )
