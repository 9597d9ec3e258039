"""Metrics middleware for recording HTTP request metrics.

Records Prometheus metrics for all HTTP requests including duration,
status codes, and endpoints.
"""

import re
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.infrastructure.observability.metrics import record_http_request

MONITOR_ID_PATTERN = re.compile(r"/monitors/\d+(?=/|$)")


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware to record HTTP request metrics.

    Labels: method, endpoint, status_code
    Note: the endpoint label is the full request path with monitor ids
    replaced by a placeholder, keeping cardinality bounded
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and record metrics.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            HTTP response
        """
        start_time = time.perf_counter()

        response = await call_next(request)

        record_http_request(
            method=request.method,
            endpoint=self._normalize_endpoint(request),
            status_code=response.status_code,
            duration=time.perf_counter() - start_time,
        )

        return response

    def _normalize_endpoint(self, request: Request) -> str:
        """Normalize endpoint path for metrics.

        Examples:
            /api/v1/monitors/42/uptime -> /api/v1/monitors/{monitor_id}/uptime
        """
        return MONITOR_ID_PATTERN.sub("/monitors/{monitor_id}", request.url.path)
