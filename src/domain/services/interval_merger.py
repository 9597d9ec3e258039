"""Interval merger service module.

This module defines the IntervalMerger for collapsing raw downtime intervals
into a minimal sorted set of disjoint intervals.
"""

from collections.abc import Iterable

from src.domain.entities.outage import Interval


class IntervalMerger:
    """Domain service for merging downtime intervals.

    Merge policy:
    - Overlapping intervals are joined
    - Adjacent intervals (next.start == current.end) are joined as well, so a
      single outage reported in touching pieces counts as one continuous period
    - Zero-length intervals are dropped
    """

    @staticmethod
    def merge(intervals: Iterable[Interval]) -> list[Interval]:
        """Merge intervals into a sorted, disjoint, minimal sequence.

        Args:
            intervals: Intervals in any order, possibly overlapping or adjacent

        Returns:
            Intervals sorted by start with no two overlapping or touching.
            Merging an already-merged sequence returns it unchanged.
        """
        ordered = sorted(
            (it for it in intervals if not it.is_empty),
            key=lambda it: (it.start, it.end),
        )
        if not ordered:
            return []

        merged: list[Interval] = []
        current_start, current_end = ordered[0].start, ordered[0].end

        for it in ordered[1:]:
            if it.start <= current_end:
                current_end = max(current_end, it.end)
                continue

            merged.append(Interval(start=current_start, end=current_end))
            current_start, current_end = it.start, it.end

        merged.append(Interval(start=current_start, end=current_end))
        return merged

    @staticmethod
    def total_seconds(intervals: Iterable[Interval]) -> int:
        """Sum the durations of intervals.

        Args:
            intervals: Intervals to sum (normally the output of merge())

        Returns:
            Total seconds, never negative
        """
        return sum(max(0, it.end - it.start) for it in intervals)
