"""Health check service with cached database checks."""

import logging
import time

from django.db import connection
from django.db.utils import OperationalError

from relay.enums import HealthStatus
from relay.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)


class HealthService:
    """Service for performing health checks with caching."""

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        """Initialize the health service.

        Args:
            cache_ttl_seconds: Time to live for cached health check results
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self._db_health_cache: DependencyHealth | None = None
        self._db_health_cache_time: float = 0.0

    def get_liveness_status(self) -> LivenessResponse:
        """Get liveness status (always healthy while the process serves)."""
        return LivenessResponse(status=HealthStatus.HEALTHY.value)

    def get_readiness_status(self) -> ReadinessResponse:
        """Get readiness status from the database check.

        A database outage degrades the service instead of failing readiness:
        pushes can still be sent, only lookups and records are affected.
        """
        db_health = self.check_database_health()

        return ReadinessResponse(
            ready=True,
            status="ready" if db_health.healthy else "degraded",
            degraded=not db_health.healthy,
            dependencies={"database": db_health},
        )

    def check_database_health(self) -> DependencyHealth:
        """Check database connectivity with caching.

        Uses ``ensure_connection()`` to validate the socket without running a
        query. Results are cached for ``cache_ttl_seconds``.
        """
        current_time = time.time()
        if (
            self._db_health_cache is not None
            and (current_time - self._db_health_cache_time) < self.cache_ttl_seconds
        ):
            return self._db_health_cache

        start_time = time.perf_counter()
        try:
            connection.ensure_connection()
            new_health = DependencyHealth(
                healthy=True,
                status=HealthStatus.HEALTHY,
                message="Database connection successful",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
            if self._db_health_cache is not None and not self._db_health_cache.healthy:
                logger.info("Database connection recovered")

        except OperationalError as e:
            new_health = DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Database connection failed: {e!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
            logger.warning(f"Database health check failed: {e}")

        except Exception as e:
            new_health = DependencyHealth(
                healthy=False,
                status=HealthStatus.ERROR,
                message=f"Unexpected error checking database: {e!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
            logger.error(f"Unexpected error checking database: {e}")

        self._db_health_cache = new_health
        self._db_health_cache_time = current_time
        return new_health


# Global health service instance
health_service = HealthService()
