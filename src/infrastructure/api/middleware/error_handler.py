"""Global error handling middleware.

Converts exceptions that escape the route handlers to RFC 7807 Problem
Details. Every response carries an X-Correlation-ID header.
"""

import logging
import uuid

from fastapi import Request, status
from fastapi.exceptions import HTTPException
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from src.domain.repositories.outage_history_reader import (
    HistoryPaginationError,
    InvalidOutagePayloadError,
    OutageHistoryUnavailableError,
)
from src.infrastructure.api.schemas.error_schema import ProblemDetails

logger = logging.getLogger(__name__)

STATUS_TEXTS = {
    400: "Bad Request",
    404: "Not Found",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware to handle all exceptions and return RFC 7807 Problem Details."""

    async def dispatch(self, request: Request, call_next):
        """Catch all exceptions and convert to Problem Details format.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response with Problem Details format on error
        """
        correlation_id = str(uuid.uuid4())
        request.state.correlation_id = correlation_id

        try:
            response = await call_next(request)
            response.headers["X-Correlation-ID"] = correlation_id
            return response

        except Exception as exc:
            logger.error(
                f"Request failed with correlation_id={correlation_id}",
                exc_info=exc,
                extra={
                    "correlation_id": correlation_id,
                    "path": request.url.path,
                    "method": request.method,
                },
            )

            problem = self._exception_to_problem(exc, request, correlation_id)
            return self._create_response(problem)

    def _exception_to_problem(
        self, exc: Exception, request: Request, correlation_id: str
    ) -> ProblemDetails:
        """Convert exception to RFC 7807 Problem Details.

        Args:
            exc: Exception that was raised
            request: Request that caused the exception
            correlation_id: Correlation ID for tracing

        Returns:
            ProblemDetails object
        """
        if isinstance(exc, HTTPException):
            return self._problem(
                exc.status_code,
                exc.detail if isinstance(exc.detail, str) else str(exc.detail),
                request,
                correlation_id,
                type_uri="about:blank",
            )

        if isinstance(exc, ValueError):
            return self._problem(
                status.HTTP_400_BAD_REQUEST, str(exc), request, correlation_id
            )

        if isinstance(exc, OutageHistoryUnavailableError):
            return self._problem(
                status.HTTP_503_SERVICE_UNAVAILABLE,
                "Outage history is temporarily unavailable",
                request,
                correlation_id,
            )

        if isinstance(exc, (InvalidOutagePayloadError, HistoryPaginationError)):
            return self._problem(
                status.HTTP_502_BAD_GATEWAY, str(exc), request, correlation_id
            )

        return self._problem(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
            request,
            correlation_id,
        )

    def _problem(
        self,
        status_code: int,
        detail: str,
        request: Request,
        correlation_id: str,
        type_uri: str | None = None,
    ) -> ProblemDetails:
        return ProblemDetails(
            type=type_uri or f"https://httpstatuses.com/{status_code}",
            title=STATUS_TEXTS.get(status_code, "Error"),
            status=status_code,
            detail=detail,
            instance=request.url.path,
            correlation_id=correlation_id,
        )

    def _create_response(self, problem: ProblemDetails) -> JSONResponse:
        """Create JSONResponse from ProblemDetails.

        Args:
            problem: Problem Details object

        Returns:
            JSONResponse with appropriate status code and headers
        """
        return JSONResponse(
            status_code=problem.status,
            content=problem.model_dump(exclude_none=True),
            headers={
                "Content-Type": "application/problem+json",
                "X-Correlation-ID": problem.correlation_id or "",
            },
        )
