"""Interface for querying monitoring coverage.

Coverage is the number of seconds during which a monitor was active, and
unknown seconds are the gaps inside that coverage with no probe results. Both
come from the probe history, never from outage records.
"""

from abc import ABC, abstractmethod

from src.domain.entities.uptime import CoverageSample


class MonitoringCoverageProviderInterface(ABC):
    """Interface for monitoring coverage data."""

    @abstractmethod
    async def get_coverage(
        self, monitor_id: int, window_start: int, window_end: int
    ) -> CoverageSample:
        """Returns coverage for [window_start, window_end).

        Args:
            monitor_id: Identifier of the monitored target
            window_start: Window start (epoch seconds)
            window_end: Window end (epoch seconds)

        Returns:
            CoverageSample; coverage_sec is 0 when the monitor has no data
        """
        pass
