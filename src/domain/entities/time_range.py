"""Domain value objects for analytics time ranges."""

from dataclasses import dataclass, field
from enum import Enum

DAY_SECONDS = 86400


class AnalyticsRange(str, Enum):
    """Preset ranges offered by the dashboard."""

    LAST_24H = "24h"
    LAST_7D = "7d"
    LAST_30D = "30d"
    LAST_90D = "90d"

    @property
    def days(self) -> int:
        return {
            AnalyticsRange.LAST_24H: 1,
            AnalyticsRange.LAST_7D: 7,
            AnalyticsRange.LAST_30D: 30,
            AnalyticsRange.LAST_90D: 90,
        }[self]

    @property
    def has_daily_rollup(self) -> bool:
        """Daily buckets are produced for 7d and longer ranges only."""
        return self is not AnalyticsRange.LAST_24H


@dataclass
class TimeRange:
    """A resolved range of epoch seconds [start, end).

    Attributes:
        start: Range start (epoch seconds)
        end: Range end (epoch seconds)
        day_starts: Aligned day boundaries covered by the range, oldest first
    """

    start: int
    end: int
    day_starts: list[int] = field(default_factory=list)

    def __post_init__(self):
        if self.end <= self.start:
            raise ValueError(f"Range end ({self.end}) must be after start ({self.start})")

    @property
    def is_daily(self) -> bool:
        return bool(self.day_starts)
