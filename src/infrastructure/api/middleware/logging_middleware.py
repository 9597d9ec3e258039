"""Logging middleware for structured request/response logging.

Logs every HTTP request with its correlation ID, duration and status code.
Probe and scrape endpoints are logged at debug level only.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

# Polled by orchestrators and Prometheus; logging them at info floods the output
QUIET_PATHS = frozenset({"/api/v1/health", "/api/v1/metrics"})


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log HTTP requests and responses.

    Logs:
    - Request method, path and query string
    - Response status code and duration
    - Correlation ID set by the error handler, when present
    - Client IP address
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and log details.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            HTTP response
        """
        start_time = time.perf_counter()

        path = request.url.path
        log = logger.bind(
            method=request.method,
            path=path,
            client_ip=self._get_client_ip(request),
            correlation_id=getattr(request.state, "correlation_id", None),
        )
        emit = log.debug if path in QUIET_PATHS else log.info

        emit(
            "HTTP request received",
            query_params=str(request.query_params) if request.query_params else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            log.error(
                "HTTP request failed",
                duration_ms=self._elapsed_ms(start_time),
                error=str(e),
                exc_info=True,
            )
            raise

        emit(
            "HTTP request completed",
            status_code=response.status_code,
            duration_ms=self._elapsed_ms(start_time),
        )
        return response

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.perf_counter() - start_time) * 1000, 2)

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address from request.

        Checks X-Forwarded-For first (proxy/load balancer), then falls back
        to the direct client address.
        """
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        if request.client:
            return request.client.host

        return "unknown"
