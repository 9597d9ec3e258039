"""Domain entities for uptime aggregation.

This module defines the per-day and per-range availability values produced by
the uptime engine, and the severity scale used to color and rank them:
- SeverityTier: Ordered classification of an uptime percentage
- HealthLevel: Coarse three-level highlight scale
- DayBucket: Availability of one aligned day
- RangeSummary: Availability over a set of days or a raw window
- CoverageSample: Monitoring coverage reported for a window
"""

from dataclasses import dataclass, field
from enum import Enum

from src.domain.entities.outage import Interval


class SeverityTier(str, Enum):
    """Severity tier for an uptime percentage, ordered best to worst."""

    EXCELLENT = "excellent"  # >= 99.99%
    GOOD = "good"  # >= 99.95%
    FAIR = "fair"  # >= 99.9%
    DEGRADED = "degraded"  # >= 99.5%
    POOR = "poor"  # >= 99.0%
    BAD = "bad"  # >= 98.0%
    SEVERE = "severe"  # >= 95.0%
    CRITICAL = "critical"  # < 95.0%
    NO_DATA = "no_data"  # no monitoring data

    @property
    def rank(self) -> int:
        """Position in the scale (0 = EXCELLENT, 8 = NO_DATA)."""
        return _TIER_ORDER.index(self)

    @classmethod
    def from_uptime(cls, uptime_pct: float | None) -> "SeverityTier":
        """Best tier whose lower bound the percentage meets."""
        if uptime_pct is None:
            return cls.NO_DATA

        for lower_bound, tier in SEVERITY_THRESHOLDS:
            if uptime_pct >= lower_bound:
                return tier
        return cls.CRITICAL


_TIER_ORDER = list(SeverityTier)

# Lower bounds, best tier first; anything below the last bound is CRITICAL
SEVERITY_THRESHOLDS: tuple[tuple[float, SeverityTier], ...] = (
    (99.99, SeverityTier.EXCELLENT),
    (99.95, SeverityTier.GOOD),
    (99.9, SeverityTier.FAIR),
    (99.5, SeverityTier.DEGRADED),
    (99.0, SeverityTier.POOR),
    (98.0, SeverityTier.BAD),
    (95.0, SeverityTier.SEVERE),
)


class HealthLevel(str, Enum):
    """Coarse health level used to highlight a selected bar."""

    HEALTHY = "healthy"  # >= 99.95%
    WARNING = "warning"  # >= 99.0%
    CRITICAL = "critical"  # < 99.0%
    NONE = "none"  # no monitoring data


@dataclass
class CoverageSample:
    """Monitoring coverage reported for a window.

    Attributes:
        window_start: Start of the window (epoch seconds)
        window_end: End of the window (epoch seconds)
        coverage_sec: Seconds of the window during which the monitor was active
        unknown_sec: Seconds within the coverage that have no probe results
    """

    window_start: int
    window_end: int
    coverage_sec: float
    unknown_sec: float = 0.0

    def __post_init__(self):
        """Validate coverage constraints."""
        if self.window_end <= self.window_start:
            raise ValueError("window_end must be after window_start")
        if self.coverage_sec < 0:
            raise ValueError(f"coverage_sec must be non-negative, got {self.coverage_sec}")
        if self.coverage_sec > self.window_end - self.window_start:
            raise ValueError(
                f"coverage_sec ({self.coverage_sec}) cannot exceed the window length "
                f"({self.window_end - self.window_start})"
            )
        if self.unknown_sec < 0:
            raise ValueError(f"unknown_sec must be non-negative, got {self.unknown_sec}")


@dataclass
class DayBucket:
    """Availability of a single aligned day.

    Attributes:
        day_start_at: Day boundary (epoch seconds)
        downtime_sec: Seconds covered by merged downtime intervals
        unknown_sec: Seconds without probe data, supplied by the coverage provider
        uptime_pct: Uptime percentage, None when the day has no monitoring data
        coverage_sec: Monitoring coverage used as the denominator
        outage_count: Number of outages touching the day
        downtime_intervals: Disjoint downtime intervals within the day
    """

    day_start_at: int
    downtime_sec: int
    unknown_sec: float
    uptime_pct: float | None
    coverage_sec: float = 0.0
    outage_count: int = 0
    downtime_intervals: list[Interval] = field(default_factory=list)

    @property
    def severity(self) -> SeverityTier:
        """Severity tier, recomputed on every read."""
        return SeverityTier.from_uptime(self.uptime_pct)


@dataclass
class RangeSummary:
    """Availability aggregated over several days or a raw window.

    Attributes:
        uptime_pct: Uptime percentage from summed coverage, None without data
        downtime_sec: Total downtime seconds
        unknown_sec: Total seconds without probe data
        outage_count: Number of outages touching the range
        coverage_sec: Total monitoring coverage
        mttr_sec: Mean time to recovery of resolved outages, None if none resolved
    """

    uptime_pct: float | None
    downtime_sec: int
    unknown_sec: float
    outage_count: int
    coverage_sec: float = 0.0
    mttr_sec: float | None = None

    @property
    def unknown_pct(self) -> float | None:
        """Share of the coverage without probe data, as a percentage."""
        if self.coverage_sec <= 0:
            return None
        return 100.0 * self.unknown_sec / self.coverage_sec

    @property
    def severity(self) -> SeverityTier:
        return SeverityTier.from_uptime(self.uptime_pct)
