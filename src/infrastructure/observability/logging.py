"""Structured logging configuration with OpenTelemetry integration.

Configures structlog for JSON logging with trace correlation IDs and the
service identity. Status API tokens are masked before rendering.
"""

import logging
import sys
from typing import Any

import structlog
from opentelemetry import trace

from src.infrastructure.config import get_settings

SENSITIVE_KEYS = frozenset(
    {
        "api_token",
        "token",
        "authorization",
        "password",
        "secret",
    }
)


def configure_logging() -> None:
    """Configure structured logging with structlog.

    Sets up:
    - JSON or console rendering from configuration
    - Service name and environment on every event
    - Correlation IDs from OpenTelemetry trace context
    - Standard library logging integration, so modules using
      logging.getLogger() share the same output
    """
    settings = get_settings()
    otel_config = settings.observability

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, otel_config.log_level.upper()),
    )

    processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _bind_service(otel_config.service_name, settings.environment),
        _add_trace_context,
        _mask_sensitive_data,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    if otel_config.log_json_format:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _bind_service(service_name: str, environment: str):
    """Build a processor that stamps the service identity on each event."""

    def processor(
        logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        event_dict.setdefault("environment", environment)
        return event_dict

    return processor


def _add_trace_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add OpenTelemetry trace_id and span_id when a span is active."""
    span = trace.get_current_span()
    span_context = span.get_span_context()
    if span_context.is_valid:
        event_dict["trace_id"] = format(span_context.trace_id, "032x")
        event_dict["span_id"] = format(span_context.span_id, "016x")

    return event_dict


def _mask_sensitive_data(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Mask token-like values, including inside nested dicts.

    Strings longer than four characters keep their first four characters;
    everything else is replaced entirely.
    """

    def mask(key: Any, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: mask(k, v) for k, v in value.items()}
        if isinstance(key, str) and key.lower() in SENSITIVE_KEYS:
            if isinstance(value, str) and len(value) > 4:
                return f"{value[:4]}{'*' * (len(value) - 4)}"
            return "***REDACTED***"
        return value

    return {k: mask(k, v) for k, v in event_dict.items()}


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Timeline computed", monitor_id=7, range="30d")
    """
    return structlog.get_logger(name)
