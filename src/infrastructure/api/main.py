"""
FastAPI application entry point.

Implements the API layer of the Infrastructure following Clean Architecture.
This module sets up the FastAPI app, registers routes, middleware, and exception handlers.
"""

import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.infrastructure.api.dependencies import close_history_backends
from src.infrastructure.api.middleware import (
    ErrorHandlerMiddleware,
    LoggingMiddleware,
    MetricsMiddleware,
)
from src.infrastructure.api.middleware.error_handler import STATUS_TEXTS
from src.infrastructure.api.routes import health, uptime
from src.infrastructure.api.schemas.error_schema import ProblemDetails
from src.infrastructure.observability import (
    configure_logging,
    get_logger,
    instrument_fastapi_app,
    setup_tracing,
)

API_VERSION = "1.0.0"

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Startup:
    - Configure observability (logging, tracing)
    - Install the tracer provider used by the FastAPI instrumentation

    Shutdown:
    - Close the status API client, if one was opened
    """
    configure_logging()
    setup_tracing()
    logger.info("Uptime engine started", version=API_VERSION)

    yield

    await close_history_backends()
    logger.info("Uptime engine stopped")


def _problem_response(
    request: Request, status_code: int, detail: str
) -> JSONResponse:
    """Build an RFC 7807 response carrying the request's correlation ID."""
    correlation_id = getattr(request.state, "correlation_id", None) or str(
        uuid.uuid4()
    )
    problem = ProblemDetails(
        type="about:blank",
        title=STATUS_TEXTS.get(status_code, "Error"),
        status=status_code,
        detail=detail,
        instance=request.url.path,
        correlation_id=correlation_id,
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers={
            "Content-Type": "application/problem+json",
            "X-Correlation-ID": correlation_id,
        },
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title="Uptime Engine API",
        description=(
            "Reduces raw outage records to disjoint downtime, aggregates daily "
            "and range uptime, and classifies it on an ordered severity scale."
        ),
        version=API_VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,  # Cannot use credentials with wildcard origins
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Last added = outermost; the error handler sets the correlation ID first
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    app.include_router(health.router, prefix="/api/v1")
    app.include_router(uptime.router, prefix="/api/v1/monitors", tags=["Uptime"])

    # Instrumentation adds middleware, which must happen before the app starts
    instrument_fastapi_app(app)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Convert HTTPException to RFC 7807 Problem Details."""
        return _problem_response(
            request,
            exc.status_code,
            exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        """Convert query/path validation errors to RFC 7807 Problem Details."""
        return _problem_response(
            request,
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            f"Validation failed: {exc.errors()}",
        )

    @app.get("/", status_code=status.HTTP_200_OK)
    async def root():
        """Root endpoint - API information."""
        return {
            "name": "Uptime Engine API",
            "version": API_VERSION,
            "status": "operational",
            "docs": "/docs",
        }

    return app


# Create app instance
app = create_app()
