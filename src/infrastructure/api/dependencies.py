"""
Dependency injection for FastAPI routes.

Provides factory functions for creating use cases with their required dependencies.
Uses FastAPI's Depends() for dependency injection.
"""

from fastapi import Depends

from src.application.use_cases.compute_uptime_timeline import (
    ComputeUptimeTimelineUseCase,
)
from src.application.use_cases.list_monitor_outages import ListMonitorOutagesUseCase
from src.application.use_cases.rank_monitors_by_severity import (
    RankMonitorsBySeverityUseCase,
)
from src.domain.repositories.monitoring_coverage_provider import (
    MonitoringCoverageProviderInterface,
)
from src.domain.repositories.outage_history_reader import (
    OutageHistoryReaderInterface,
)
from src.domain.services.day_windowing import DayWindowingService
from src.domain.services.uptime_aggregator import UptimeAggregator
from src.infrastructure.config import get_settings
from src.infrastructure.integrations.status_api_client import StatusApiClient
from src.infrastructure.stores.in_memory_outage_store import (
    InMemoryCoverageProvider,
    InMemoryOutageHistoryReader,
)

# Process-wide history backends (created on first use)
_memory_history: InMemoryOutageHistoryReader | None = None
_memory_coverage: InMemoryCoverageProvider | None = None
_status_api_client: StatusApiClient | None = None


def get_memory_history() -> InMemoryOutageHistoryReader:
    """Get the shared in-memory outage store."""
    global _memory_history
    if _memory_history is None:
        _memory_history = InMemoryOutageHistoryReader()
    return _memory_history


def get_memory_coverage() -> InMemoryCoverageProvider:
    """Get the shared in-memory coverage provider."""
    global _memory_coverage
    if _memory_coverage is None:
        _memory_coverage = InMemoryCoverageProvider()
    return _memory_coverage


def get_status_api_client() -> StatusApiClient:
    """Get the shared status API client."""
    global _status_api_client
    if _status_api_client is None:
        _status_api_client = StatusApiClient()
    return _status_api_client


async def close_history_backends() -> None:
    """Close network clients held by the history backends."""
    global _status_api_client
    if _status_api_client is not None:
        await _status_api_client.close()
        _status_api_client = None


# Collaborator factories


def get_history_reader() -> OutageHistoryReaderInterface:
    """Get the configured outage history reader."""
    if get_settings().history.backend == "http":
        return get_status_api_client()
    return get_memory_history()


def get_coverage_provider() -> MonitoringCoverageProviderInterface:
    """Get the configured monitoring coverage provider."""
    if get_settings().history.backend == "http":
        return get_status_api_client()
    return get_memory_coverage()


# Domain service factories


def get_day_windowing_service() -> DayWindowingService:
    """Get DayWindowingService instance."""
    return DayWindowingService()


def get_uptime_aggregator(
    windowing: DayWindowingService = Depends(get_day_windowing_service),
) -> UptimeAggregator:
    """Get UptimeAggregator instance."""
    return UptimeAggregator(windowing)


# Use case factories


def get_compute_uptime_timeline_use_case(
    history_reader: OutageHistoryReaderInterface = Depends(get_history_reader),
    coverage_provider: MonitoringCoverageProviderInterface = Depends(
        get_coverage_provider
    ),
    windowing: DayWindowingService = Depends(get_day_windowing_service),
    aggregator: UptimeAggregator = Depends(get_uptime_aggregator),
) -> ComputeUptimeTimelineUseCase:
    """Get ComputeUptimeTimelineUseCase instance."""
    history_settings = get_settings().history
    return ComputeUptimeTimelineUseCase(
        history_reader=history_reader,
        coverage_provider=coverage_provider,
        windowing=windowing,
        aggregator=aggregator,
        page_size=history_settings.page_size,
        max_pages=history_settings.max_pages,
    )


def get_list_monitor_outages_use_case(
    history_reader: OutageHistoryReaderInterface = Depends(get_history_reader),
    windowing: DayWindowingService = Depends(get_day_windowing_service),
) -> ListMonitorOutagesUseCase:
    """Get ListMonitorOutagesUseCase instance."""
    return ListMonitorOutagesUseCase(history_reader=history_reader, windowing=windowing)


def get_rank_monitors_by_severity_use_case(
    timeline_use_case: ComputeUptimeTimelineUseCase = Depends(
        get_compute_uptime_timeline_use_case
    ),
) -> RankMonitorsBySeverityUseCase:
    """Get RankMonitorsBySeverityUseCase instance."""
    return RankMonitorsBySeverityUseCase(timeline_use_case=timeline_use_case)
