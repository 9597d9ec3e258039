"""Compute Uptime Timeline Use Case.

Reads a monitor's outage history for a range, reduces it to per-day disjoint
downtime, aggregates availability and classifies severity for the uptime bar.
"""

import asyncio
import logging
import time
from datetime import datetime, timezone

from src.application.dtos.uptime_dto import (
    DayBucketDTO,
    RangeSummaryDTO,
    UptimeTimelineRequest,
    UptimeTimelineResponse,
)
from src.domain.entities.time_range import AnalyticsRange, TimeRange
from src.domain.entities.uptime import DayBucket, RangeSummary
from src.domain.repositories.monitoring_coverage_provider import (
    MonitoringCoverageProviderInterface,
)
from src.domain.repositories.outage_history_reader import (
    OutageHistoryReaderInterface,
    read_all_outages,
)
from src.domain.services.day_windowing import DayWindowingService
from src.domain.services.severity_classifier import SeverityClassifier
from src.domain.services.uptime_aggregator import UptimeAggregator
from src.domain.services.uptime_bar_layout import UptimeBarLayout

logger = logging.getLogger(__name__)

CUSTOM_RANGE_LABEL = "custom"


class ComputeUptimeTimelineUseCase:
    """Compute the uptime timeline of a monitor.

    Flow:
    1. Resolve the requested range (preset or explicit day boundaries)
    2. Accumulate every page of outage history for the range
    3. Fetch monitoring coverage per day (in parallel)
    4. Clip, merge and aggregate each day into a DayBucket
    5. Sum the buckets into a RangeSummary (24h uses the raw-window path)
    6. Classify severities and lay out the right-aligned bar slots
    """

    def __init__(
        self,
        history_reader: OutageHistoryReaderInterface,
        coverage_provider: MonitoringCoverageProviderInterface,
        windowing: DayWindowingService | None = None,
        aggregator: UptimeAggregator | None = None,
        page_size: int = 50,
        max_pages: int = 200,
    ) -> None:
        """Initialize use case with injected dependencies.

        Args:
            history_reader: Paginated outage history source
            coverage_provider: Monitoring coverage source
            windowing: Day windowing service
            aggregator: Uptime aggregation service
            page_size: Records requested per history page
            max_pages: Page budget before pagination is aborted
        """
        self._history = history_reader
        self._coverage = coverage_provider
        self._windowing = windowing or DayWindowingService()
        self._aggregator = aggregator or UptimeAggregator(self._windowing)
        self._page_size = page_size
        self._max_pages = max_pages

    async def execute(self, request: UptimeTimelineRequest) -> UptimeTimelineResponse:
        """Execute timeline computation.

        Args:
            request: Timeline request

        Returns:
            UptimeTimelineResponse with day buckets, summary and bar slots

        Raises:
            ValueError: If the range is invalid
            OutageHistoryError: If the outage history cannot be read
        """
        now = request.now if request.now is not None else int(time.time())
        time_range, range_label = self._resolve_range(request, now)

        outages = await read_all_outages(
            self._history,
            monitor_id=request.monitor_id,
            range_start=time_range.start,
            range_end=time_range.end,
            page_size=self._page_size,
            max_pages=self._max_pages,
        )

        if time_range.is_daily:
            coverages = await asyncio.gather(
                *[
                    self._coverage.get_coverage(
                        request.monitor_id, day, day + DayWindowingService.DAY_SECONDS
                    )
                    for day in time_range.day_starts
                ]
            )
            buckets = [
                self._aggregator.build_day_bucket(day, outages, coverage)
                for day, coverage in zip(time_range.day_starts, coverages)
            ]
            summary = self._aggregator.summarize_range(
                buckets,
                outage_count=self._windowing.count_outages_in_window(
                    time_range.start, time_range.end, outages
                ),
                mttr_sec=self._aggregator.compute_mttr(outages),
            )
        else:
            coverage = await self._coverage.get_coverage(
                request.monitor_id, time_range.start, time_range.end
            )
            buckets = []
            summary = self._aggregator.summarize_window(
                time_range.start, time_range.end, outages, coverage
            )

        logger.info(
            f"Computed uptime timeline: monitor_id={request.monitor_id}, "
            f"range={range_label}, outages={len(outages)}, days={len(buckets)}, "
            f"uptime_pct={summary.uptime_pct}"
        )

        day_dtos = [to_day_bucket_dto(bucket) for bucket in buckets]
        by_day = {dto.day_start_at: dto for dto in day_dtos}
        slots = [
            by_day[bucket.day_start_at] if bucket is not None else None
            for bucket in UptimeBarLayout.pad_slots(buckets, request.max_bars)
        ]

        return UptimeTimelineResponse(
            monitor_id=request.monitor_id,
            range=range_label,
            range_start=time_range.start,
            range_end=time_range.end,
            computed_at=datetime.now(timezone.utc).isoformat(),
            summary=to_range_summary_dto(summary),
            days=day_dtos,
            slots=slots,
        )

    def _resolve_range(
        self, request: UptimeTimelineRequest, now: int
    ) -> tuple[TimeRange, str]:
        """Resolve the request into a TimeRange and its label."""
        if request.start_day is not None or request.end_day is not None:
            if request.start_day is None or request.end_day is None:
                raise ValueError("start_day and end_day must be provided together")
            return (
                self._windowing.resolve_days(request.start_day, request.end_day),
                CUSTOM_RANGE_LABEL,
            )

        preset = AnalyticsRange(request.range)
        return self._windowing.resolve_preset(preset, now), preset.value


def to_day_bucket_dto(bucket: DayBucket) -> DayBucketDTO:
    """Convert a domain DayBucket to its DTO."""
    return DayBucketDTO(
        day_start_at=bucket.day_start_at,
        uptime_pct=UptimeAggregator.round_pct(bucket.uptime_pct),
        downtime_sec=bucket.downtime_sec,
        unknown_sec=bucket.unknown_sec,
        coverage_sec=bucket.coverage_sec,
        outage_count=bucket.outage_count,
        severity=bucket.severity.value,
        health_level=SeverityClassifier.health_level(bucket.uptime_pct).value,
        uptime_label=UptimeBarLayout.format_pct(bucket.uptime_pct),
        downtime_label=UptimeBarLayout.format_duration(bucket.downtime_sec),
    )


def to_range_summary_dto(summary: RangeSummary) -> RangeSummaryDTO:
    """Convert a domain RangeSummary to its DTO."""
    return RangeSummaryDTO(
        uptime_pct=UptimeAggregator.round_pct(summary.uptime_pct),
        unknown_pct=UptimeAggregator.round_pct(summary.unknown_pct),
        downtime_sec=summary.downtime_sec,
        unknown_sec=summary.unknown_sec,
        coverage_sec=summary.coverage_sec,
        outage_count=summary.outage_count,
        mttr_sec=summary.mttr_sec,
        severity=summary.severity.value,
    )
