"""In-memory outage history and monitoring coverage (development and tests).

This module provides simple in-memory implementations of the outage history
reader and the coverage provider. Data is cleared on application restart.
For production, point the history backend at the status API instead.
"""

from collections import defaultdict
from dataclasses import dataclass, field

from src.domain.entities.outage import Interval, OutagePage, OutageRecord
from src.domain.entities.uptime import CoverageSample
from src.domain.repositories.monitoring_coverage_provider import (
    MonitoringCoverageProviderInterface,
)
from src.domain.repositories.outage_history_reader import (
    OutageHistoryReaderInterface,
)
from src.domain.services.interval_merger import IntervalMerger
from src.infrastructure.observability.metrics import record_outage_page


class InMemoryOutageHistoryReader(OutageHistoryReaderInterface):
    """Outage history kept in memory, paginated newest first.

    The cursor is the offset of the next record, encoded as a string. Callers
    must treat it as opaque.
    """

    BACKEND = "memory"

    def __init__(self, outages: dict[int, list[OutageRecord]] | None = None):
        """Initialize the store.

        Args:
            outages: Optional initial records keyed by monitor id
        """
        self._outages: dict[int, list[OutageRecord]] = defaultdict(list)
        for monitor_id, records in (outages or {}).items():
            self._outages[monitor_id].extend(records)

    def add_outage(self, monitor_id: int, outage: OutageRecord) -> None:
        """Append an outage record for a monitor."""
        self._outages[monitor_id].append(outage)

    def clear(self) -> None:
        """Remove every stored record."""
        self._outages.clear()

    async def fetch_outages(
        self,
        monitor_id: int,
        range_start: int,
        range_end: int,
        cursor: str | None = None,
        limit: int = 50,
    ) -> OutagePage:
        """Return one page of records overlapping [range_start, range_end).

        Raises:
            ValueError: If the cursor is malformed or limit is not positive
        """
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")

        offset = self._decode_cursor(cursor)
        matching = sorted(
            (
                o
                for o in self._outages.get(monitor_id, [])
                if self._overlaps(o, range_start, range_end)
            ),
            key=lambda o: (o.started_at, o.id),
            reverse=True,
        )

        page = matching[offset : offset + limit]
        next_offset = offset + len(page)
        next_cursor = str(next_offset) if next_offset < len(matching) else None

        record_outage_page(self.BACKEND, len(page))
        return OutagePage(outages=page, next_cursor=next_cursor)

    @staticmethod
    def _overlaps(outage: OutageRecord, range_start: int, range_end: int) -> bool:
        if outage.started_at >= range_end:
            return False
        return outage.ended_at is None or outage.ended_at > range_start

    @staticmethod
    def _decode_cursor(cursor: str | None) -> int:
        if cursor is None:
            return 0
        if not cursor.isdigit():
            raise ValueError(f"Invalid cursor: {cursor!r}")
        return int(cursor)


@dataclass
class MonitorProbeProfile:
    """Probe history of a monitor.

    Attributes:
        monitoring_since: First probe (epoch seconds); no coverage before it
        probe_gaps: Periods after monitoring_since with no probe results
    """

    monitoring_since: int
    probe_gaps: list[Interval] = field(default_factory=list)


class InMemoryCoverageProvider(MonitoringCoverageProviderInterface):
    """Monitoring coverage derived from in-memory probe profiles.

    Coverage is the part of the window after the monitor's first probe.
    Unknown seconds are the merged probe gaps inside that part. Monitors
    without a profile have no data.
    """

    def __init__(self, profiles: dict[int, MonitorProbeProfile] | None = None):
        self._profiles: dict[int, MonitorProbeProfile] = dict(profiles or {})

    def register_monitor(
        self,
        monitor_id: int,
        monitoring_since: int,
        probe_gaps: list[Interval] | None = None,
    ) -> None:
        """Register or replace the probe profile of a monitor."""
        self._profiles[monitor_id] = MonitorProbeProfile(
            monitoring_since=monitoring_since,
            probe_gaps=list(probe_gaps or []),
        )

    def clear(self) -> None:
        self._profiles.clear()

    async def get_coverage(
        self, monitor_id: int, window_start: int, window_end: int
    ) -> CoverageSample:
        profile = self._profiles.get(monitor_id)
        covered_start = (
            max(window_start, profile.monitoring_since) if profile else window_end
        )
        if covered_start >= window_end:
            return CoverageSample(
                window_start=window_start,
                window_end=window_end,
                coverage_sec=0,
                unknown_sec=0,
            )

        clipped = [
            Interval(start=max(gap.start, covered_start), end=min(gap.end, window_end))
            for gap in profile.probe_gaps
            if min(gap.end, window_end) > max(gap.start, covered_start)
        ]

        return CoverageSample(
            window_start=window_start,
            window_end=window_end,
            coverage_sec=window_end - covered_start,
            unknown_sec=IntervalMerger.total_seconds(IntervalMerger.merge(clipped)),
        )
