"""Prometheus metrics instrumentation.

Defines and exports Prometheus metrics for monitoring the application.
Avoids high cardinality by omitting monitor_id from labels.
"""

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# HTTP Request Metrics
http_requests_total = Counter(
    name="uptime_engine_http_requests_total",
    documentation="Total number of HTTP requests",
    labelnames=["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    name="uptime_engine_http_request_duration_seconds",
    documentation="HTTP request duration in seconds",
    labelnames=["method", "endpoint", "status_code"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

# Timeline Metrics
uptime_timelines_computed_total = Counter(
    name="uptime_engine_timelines_computed_total",
    documentation="Total number of uptime timelines computed",
    labelnames=["range"],
)

uptime_timeline_duration_seconds = Histogram(
    name="uptime_engine_timeline_duration_seconds",
    documentation="Uptime timeline computation duration in seconds (including history reads)",
    labelnames=["range"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

# Outage History Metrics
outage_pages_fetched_total = Counter(
    name="uptime_engine_outage_pages_fetched_total",
    documentation="Total number of outage history pages fetched",
    labelnames=["backend"],
)

outage_records_fetched_total = Counter(
    name="uptime_engine_outage_records_fetched_total",
    documentation="Total number of outage records fetched",
    labelnames=["backend"],
)

outage_history_errors_total = Counter(
    name="uptime_engine_outage_history_errors_total",
    documentation="Total number of failed outage history reads",
    labelnames=["backend", "error_type"],
)


def get_metrics_content() -> tuple[bytes, str]:
    """Generate Prometheus metrics in exposition format.

    Returns:
        Tuple of (metrics_bytes, content_type)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


def record_http_request(
    method: str,
    endpoint: str,
    status_code: int,
    duration: float,
) -> None:
    """Record HTTP request metrics.

    Args:
        method: HTTP method (GET, POST, etc.)
        endpoint: Normalized API endpoint path
        status_code: HTTP status code
        duration: Request duration in seconds
    """
    labels = {"method": method, "endpoint": endpoint, "status_code": str(status_code)}
    http_requests_total.labels(**labels).inc()
    http_request_duration_seconds.labels(**labels).observe(duration)


def record_timeline_computed(range_label: str, duration: float) -> None:
    """Record a computed uptime timeline.

    Args:
        range_label: Range of the timeline ("24h", "7d", "30d", "90d", "custom")
        duration: Computation duration in seconds
    """
    uptime_timelines_computed_total.labels(range=range_label).inc()
    uptime_timeline_duration_seconds.labels(range=range_label).observe(duration)


def record_outage_page(backend: str, record_count: int) -> None:
    """Record one fetched outage history page.

    Args:
        backend: History backend ("memory" or "http")
        record_count: Number of records on the page
    """
    outage_pages_fetched_total.labels(backend=backend).inc()
    outage_records_fetched_total.labels(backend=backend).inc(record_count)


def record_outage_history_error(backend: str, error_type: str) -> None:
    """Record a failed outage history read.

    Args:
        backend: History backend ("memory" or "http")
        error_type: Exception class name
    """
    outage_history_errors_total.labels(backend=backend, error_type=error_type).inc()
