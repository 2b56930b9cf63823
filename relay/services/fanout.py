"""Bounded best-effort fan-out.

``run_all`` launches independent units of work on a thread pool, waits for
every one of them, and reports each as an ``Outcome``. A failing unit never
cancels or hides its siblings: exceptions are captured, not raised.
"""

import contextvars
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Generic, TypeVar

from django.conf import settings
from django.db import connections

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of one unit of fan-out work: a value or the error it raised."""

    value: T | None = None
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "Outcome[T]":
        return cls(error=error)


def _run_unit(task: Callable[[], T]) -> Outcome[T]:
    try:
        return Outcome.success(task())
    except Exception as e:
        return Outcome.failure(e)
    finally:
        # Worker threads own their DB connections
        connections.close_all()


def run_all(
    tasks: Sequence[Callable[[], T]],
    max_workers: int | None = None,
) -> list[Outcome[T]]:
    """Run every task concurrently and join all of them.

    Each task runs in a copy of the caller's context, so the request id
    bound by the middleware follows the work into the pool.

    Args:
        tasks: Zero-argument callables, one per unit of work
        max_workers: Pool bound (default: ``FANOUT_MAX_WORKERS`` setting)

    Returns:
        One Outcome per task, in task order
    """
    if not tasks:
        return []

    bound = max_workers or getattr(settings, "FANOUT_MAX_WORKERS", 16)
    workers = max(1, min(bound, len(tasks)))

    with ThreadPoolExecutor(
        max_workers=workers, thread_name_prefix="relay-fanout"
    ) as executor:
        futures = [
            executor.submit(contextvars.copy_context().run, _run_unit, task)
            for task in tasks
        ]
        outcomes = [future.result() for future in futures]

    failed = sum(1 for outcome in outcomes if not outcome.is_success)
    logger.debug(
        "fanout_joined",
        unit_count=len(outcomes),
        failed_count=failed,
        workers=workers,
    )
    return outcomes
