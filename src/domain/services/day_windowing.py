"""Day windowing service module.

Clips outage records against a window, most often a single day of
86,400 seconds, and enumerates the aligned days of a range. The service works
on whatever epoch-second axis the caller supplies; it performs no timezone
conversion.
"""

from collections.abc import Iterable

from src.domain.entities.outage import Interval, OutageRecord
from src.domain.entities.time_range import DAY_SECONDS, AnalyticsRange, TimeRange
from src.domain.services.interval_merger import IntervalMerger


class DayWindowingService:
    """Clips outage records to day windows.

    An ongoing outage (ended_at is None) is treated as running to the end of
    the window being evaluated and never beyond. Callers that want an ongoing
    outage truncated at "now" must pass ended_at=now themselves.
    """

    DAY_SECONDS: int = DAY_SECONDS

    def clip_to_window(
        self,
        window_start: int,
        window_end: int,
        outages: Iterable[OutageRecord],
    ) -> list[Interval]:
        """Clip outage records to [window_start, window_end).

        Args:
            window_start: Window start (epoch seconds)
            window_end: Window end (epoch seconds)
            outages: Outage records in any order

        Returns:
            Raw (unmerged) non-empty intervals inside the window

        Raises:
            ValueError: If window_end is not after window_start
        """
        if window_end <= window_start:
            raise ValueError(
                f"window_end ({window_end}) must be after window_start ({window_start})"
            )

        intervals: list[Interval] = []
        for outage in outages:
            effective_end = outage.ended_at if outage.ended_at is not None else window_end
            start = max(outage.started_at, window_start)
            end = min(effective_end, window_end)
            if end > start:
                intervals.append(Interval(start=start, end=end))

        return intervals

    def clip_to_day(
        self, day_start_at: int, outages: Iterable[OutageRecord]
    ) -> list[Interval]:
        """Clip outage records to the day [day_start_at, day_start_at + 86400)."""
        return self.clip_to_window(day_start_at, day_start_at + self.DAY_SECONDS, outages)

    def compute_day_downtime_intervals(
        self, day_start_at: int, outages: Iterable[OutageRecord]
    ) -> list[Interval]:
        """Canonical per-day disjoint downtime set: merge(clip_to_day(...))."""
        return IntervalMerger.merge(self.clip_to_day(day_start_at, outages))

    def count_outages_in_window(
        self,
        window_start: int,
        window_end: int,
        outages: Iterable[OutageRecord],
    ) -> int:
        """Count records that have a non-empty intersection with the window."""
        return len(self.clip_to_window(window_start, window_end, outages))

    def align_to_day(self, ts: int) -> int:
        """Floor a timestamp to its day boundary."""
        return (ts // self.DAY_SECONDS) * self.DAY_SECONDS

    def day_starts_between(self, start: int, end: int) -> list[int]:
        """Aligned day starts of every day intersecting [start, end).

        Args:
            start: Range start (epoch seconds)
            end: Range end (epoch seconds)

        Returns:
            Day boundaries ordered oldest to newest, empty if end <= start
        """
        if end <= start:
            return []

        first = self.align_to_day(start)
        last = self.align_to_day(end - 1)
        return list(range(first, last + self.DAY_SECONDS, self.DAY_SECONDS))

    def resolve_preset(self, preset: AnalyticsRange, now: int) -> TimeRange:
        """Resolve a preset range relative to now.

        24h is a rolling window [now - 86400, now) without daily rollups.
        Longer presets cover the last N aligned days ending with the day that
        contains now.
        """
        if not preset.has_daily_rollup:
            return TimeRange(start=now - self.DAY_SECONDS, end=now)

        today = self.align_to_day(now)
        first_day = today - (preset.days - 1) * self.DAY_SECONDS
        end = today + self.DAY_SECONDS
        return TimeRange(
            start=first_day,
            end=end,
            day_starts=self.day_starts_between(first_day, end),
        )

    def resolve_days(self, start_day: int, end_day: int) -> TimeRange:
        """Resolve explicit day boundaries; end_day is inclusive.

        Raises:
            ValueError: If end_day is before start_day
        """
        first_day = self.align_to_day(start_day)
        last_day = self.align_to_day(end_day)
        if last_day < first_day:
            raise ValueError(
                f"end_day ({end_day}) must not be before start_day ({start_day})"
            )

        end = last_day + self.DAY_SECONDS
        return TimeRange(
            start=first_day,
            end=end,
            day_starts=self.day_starts_between(first_day, end),
        )
