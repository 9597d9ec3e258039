"""Uptime aggregation service.

Turns merged downtime intervals and monitoring coverage into per-day buckets
and range summaries.
"""

from collections.abc import Iterable, Sequence

from src.domain.entities.outage import Interval, OutageRecord
from src.domain.entities.uptime import CoverageSample, DayBucket, RangeSummary
from src.domain.services.day_windowing import DayWindowingService
from src.domain.services.interval_merger import IntervalMerger


class UptimeAggregator:
    """Computes downtime totals and uptime percentages.

    Formula:
        uptime_pct = 100 * (coverage - downtime - unknown) / coverage

    clamped to [0, 100]. A window with zero coverage has no data and yields
    uptime_pct = None, which is distinct from a fully-down window (0.0).

    Unknown seconds come from the coverage provider and are assumed not to
    overlap downtime. Percentages keep full precision; rounding happens only
    at the presentation boundary via round_pct().
    """

    PRESENTATION_DIGITS: int = 3

    def __init__(self, windowing: DayWindowingService | None = None) -> None:
        self._windowing = windowing or DayWindowingService()

    @staticmethod
    def uptime_pct(
        coverage_sec: float, downtime_sec: float, unknown_sec: float
    ) -> float | None:
        """Compute the uptime percentage for a window.

        Args:
            coverage_sec: Monitoring coverage in seconds
            downtime_sec: Merged downtime in seconds
            unknown_sec: Seconds without probe data

        Returns:
            Uptime percentage in [0, 100], or None if coverage is zero
        """
        if coverage_sec == 0:
            return None

        pct = 100.0 * (coverage_sec - downtime_sec - unknown_sec) / coverage_sec
        return min(100.0, max(0.0, pct))

    def summarize_day(
        self,
        day_start_at: int,
        merged_intervals: Sequence[Interval],
        monitoring_coverage_sec: float,
        unknown_sec: float = 0.0,
        outage_count: int = 0,
    ) -> DayBucket:
        """Aggregate one day's merged downtime into a DayBucket.

        Args:
            day_start_at: Day boundary (epoch seconds)
            merged_intervals: Disjoint downtime intervals for the day
            monitoring_coverage_sec: Seconds of the day with monitoring active
            unknown_sec: Seconds of the day without probe data
            outage_count: Number of outages touching the day

        Returns:
            DayBucket for the day

        Raises:
            ValueError: If coverage or unknown seconds are negative
        """
        if monitoring_coverage_sec < 0:
            raise ValueError(
                f"monitoring_coverage_sec must be non-negative, got {monitoring_coverage_sec}"
            )
        if unknown_sec < 0:
            raise ValueError(f"unknown_sec must be non-negative, got {unknown_sec}")

        downtime_sec = IntervalMerger.total_seconds(merged_intervals)

        return DayBucket(
            day_start_at=day_start_at,
            downtime_sec=downtime_sec,
            unknown_sec=unknown_sec,
            uptime_pct=self.uptime_pct(monitoring_coverage_sec, downtime_sec, unknown_sec),
            coverage_sec=monitoring_coverage_sec,
            outage_count=outage_count,
            downtime_intervals=list(merged_intervals),
        )

    def build_day_bucket(
        self,
        day_start_at: int,
        outages: Sequence[OutageRecord],
        coverage: CoverageSample,
    ) -> DayBucket:
        """Clip, merge and summarize outages for one day."""
        day_end = day_start_at + self._windowing.DAY_SECONDS
        return self.summarize_day(
            day_start_at=day_start_at,
            merged_intervals=self._windowing.compute_day_downtime_intervals(
                day_start_at, outages
            ),
            monitoring_coverage_sec=coverage.coverage_sec,
            unknown_sec=coverage.unknown_sec,
            outage_count=self._windowing.count_outages_in_window(
                day_start_at, day_end, outages
            ),
        )

    def summarize_range(
        self,
        buckets: Iterable[DayBucket],
        outage_count: int | None = None,
        mttr_sec: float | None = None,
    ) -> RangeSummary:
        """Aggregate day buckets into a RangeSummary.

        Downtime, unknown and coverage seconds are summed and the uptime
        percentage is recomputed from the sums. Per-day percentages are never
        averaged: days have unequal coverage.

        Args:
            buckets: Day buckets in the range
            outage_count: Distinct outages in the range. Defaults to the sum of
                per-bucket counts, which counts a multi-day outage once per day.
            mttr_sec: Mean time to recovery for the range, if known

        Returns:
            RangeSummary over the buckets
        """
        downtime_sec = 0
        unknown_sec = 0.0
        coverage_sec = 0.0
        bucket_outages = 0

        for bucket in buckets:
            downtime_sec += bucket.downtime_sec
            unknown_sec += bucket.unknown_sec
            coverage_sec += bucket.coverage_sec
            bucket_outages += bucket.outage_count

        return RangeSummary(
            uptime_pct=self.uptime_pct(coverage_sec, downtime_sec, unknown_sec),
            downtime_sec=downtime_sec,
            unknown_sec=unknown_sec,
            outage_count=bucket_outages if outage_count is None else outage_count,
            coverage_sec=coverage_sec,
            mttr_sec=mttr_sec,
        )

    def summarize_window(
        self,
        window_start: int,
        window_end: int,
        outages: Sequence[OutageRecord],
        coverage: CoverageSample,
    ) -> RangeSummary:
        """Aggregate outages directly over a raw window.

        Args:
            window_start: Window start (epoch seconds)
            window_end: Window end (epoch seconds)
            outages: Outage records for the monitor
            coverage: Coverage reported for the same window

        Returns:
            RangeSummary over the window
        """
        raw = self._windowing.clip_to_window(window_start, window_end, outages)
        downtime_sec = IntervalMerger.total_seconds(IntervalMerger.merge(raw))

        return RangeSummary(
            uptime_pct=self.uptime_pct(
                coverage.coverage_sec, downtime_sec, coverage.unknown_sec
            ),
            downtime_sec=downtime_sec,
            unknown_sec=coverage.unknown_sec,
            outage_count=len(raw),
            coverage_sec=coverage.coverage_sec,
            mttr_sec=self.compute_mttr(outages),
        )

    @staticmethod
    def compute_mttr(outages: Iterable[OutageRecord]) -> float | None:
        """Mean time to recovery over resolved outages.

        Returns:
            Mean duration in seconds, None if no outage has ended
        """
        durations = [o.duration_sec for o in outages if o.duration_sec is not None]
        if not durations:
            return None
        return sum(durations) / len(durations)

    @classmethod
    def round_pct(cls, value: float | None, digits: int | None = None) -> float | None:
        """Round a percentage for presentation, passing None through."""
        if value is None:
            return None
        return round(value, cls.PRESENTATION_DIGITS if digits is None else digits)
