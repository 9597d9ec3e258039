"""Repository interfaces - Abstract data access contracts."""

from src.domain.repositories.monitoring_coverage_provider import (
    MonitoringCoverageProviderInterface,
)
from src.domain.repositories.outage_history_reader import (
    HistoryPaginationError,
    InvalidOutagePayloadError,
    OutageHistoryError,
    OutageHistoryReaderInterface,
    OutageHistoryUnavailableError,
    iter_outage_pages,
    read_all_outages,
)

__all__ = [
    "OutageHistoryReaderInterface",
    "MonitoringCoverageProviderInterface",
    "iter_outage_pages",
    "read_all_outages",
    # Errors
    "OutageHistoryError",
    "OutageHistoryUnavailableError",
    "InvalidOutagePayloadError",
    "HistoryPaginationError",
]
