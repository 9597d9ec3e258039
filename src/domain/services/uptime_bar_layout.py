"""Uptime bar layout service.

Shapes day buckets for the fixed-width uptime bar: the most recent buckets are
right-aligned and missing positions on the left are placeholders.
"""

from collections.abc import Sequence

from src.domain.entities.uptime import DayBucket


class UptimeBarLayout:
    """Presentation-boundary helpers for uptime bars."""

    DEFAULT_MAX_BARS = 30

    @staticmethod
    def pad_slots(
        buckets: Sequence[DayBucket], max_bars: int = DEFAULT_MAX_BARS
    ) -> list[DayBucket | None]:
        """Lay out the most recent buckets right-aligned in max_bars slots.

        Args:
            buckets: Day buckets ordered oldest to newest
            max_bars: Number of slots in the bar

        Returns:
            List of length max_bars; None marks a placeholder slot

        Raises:
            ValueError: If max_bars is not positive
        """
        if max_bars <= 0:
            raise ValueError(f"max_bars must be positive, got {max_bars}")

        recent = list(buckets[-max_bars:])
        return [None] * (max_bars - len(recent)) + recent

    @staticmethod
    def format_duration(total_seconds: float) -> str:
        """Format a duration for tooltips.

        Examples:
            45 -> "45s", 185 -> "3m 5s", 18180 -> "5h 3m", 187200 -> "2d 4h"
        """
        s = max(0, int(total_seconds))
        if s < 60:
            return f"{s}s"
        m = s // 60
        if m < 60:
            return f"{m}m {s % 60}s"
        h = m // 60
        if h < 48:
            return f"{h}h {m % 60}m"
        d = h // 24
        return f"{d}d {h % 24}h"

    @staticmethod
    def format_pct(value: float | None) -> str:
        """Format an uptime percentage with three decimals."""
        if value is None:
            return "No data"
        return f"{value:.3f}%"
