"""OpenTelemetry distributed tracing setup.

Configures the OpenTelemetry SDK with an OTLP exporter. FastAPI and the HTTPX
client used by the status API reader are auto-instrumented.
"""

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from src.infrastructure.config import get_settings

logger = logging.getLogger(__name__)

SERVICE_VERSION = "0.1.0"


def setup_tracing() -> TracerProvider:
    """Setup OpenTelemetry tracing.

    Configures:
    - TracerProvider with service name, version and environment
    - OTLP exporter when tracing is enabled
    - Trace sampling based on configured sample rate
    - HTTPX auto-instrumentation for the status API reader

    Returns:
        TracerProvider instance

    Note:
        FastAPI must be instrumented separately after app creation
        using instrument_fastapi_app()
    """
    settings = get_settings()
    otel_config = settings.observability

    resource = Resource.create(
        {
            "service.name": otel_config.service_name,
            "service.version": SERVICE_VERSION,
            "deployment.environment": settings.environment,
        }
    )

    sampler = TraceIdRatioBased(otel_config.trace_sample_rate)
    provider = TracerProvider(resource=resource, sampler=sampler)

    if otel_config.tracing_enabled:
        try:
            otlp_exporter = OTLPSpanExporter(
                endpoint=otel_config.exporter_otlp_endpoint,
                insecure=True,  # Use False in production with TLS
            )
            provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

            logger.info(
                "OpenTelemetry tracing configured: service_name=%s endpoint=%s sample_rate=%s",
                otel_config.service_name,
                otel_config.exporter_otlp_endpoint,
                otel_config.trace_sample_rate,
            )
        except Exception as e:
            logger.warning(
                "Failed to configure OTLP exporter, tracing will be disabled: %s", e
            )

    trace.set_tracer_provider(provider)

    try:
        HTTPXClientInstrumentor().instrument()
    except Exception as e:
        logger.warning("Failed to enable HTTPX auto-instrumentation: %s", e)

    return provider


def instrument_fastapi_app(app) -> None:
    """Instrument FastAPI application with OpenTelemetry.

    Must be called after FastAPI app is created.

    Args:
        app: FastAPI application instance
    """
    try:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI auto-instrumentation enabled")
    except Exception as e:
        logger.warning("Failed to instrument FastAPI app: %s", e)


def get_tracer(name: str):
    """Get OpenTelemetry tracer for manual instrumentation.

    Example:
        >>> tracer = get_tracer(__name__)
        >>> with tracer.start_as_current_span("compute_timeline") as span:
        ...     span.set_attribute("monitor.range", "30d")
    """
    return trace.get_tracer(name)
