"""Domain entities - Core business objects."""

from src.domain.entities.outage import (
    Interval,
    InvalidIntervalError,
    OutagePage,
    OutageRecord,
)
from src.domain.entities.time_range import DAY_SECONDS, AnalyticsRange, TimeRange
from src.domain.entities.uptime import (
    CoverageSample,
    DayBucket,
    HealthLevel,
    RangeSummary,
    SeverityTier,
)

__all__ = [
    # Outage history
    "OutageRecord",
    "Interval",
    "InvalidIntervalError",
    "OutagePage",
    # Time ranges
    "DAY_SECONDS",
    "AnalyticsRange",
    "TimeRange",
    # Uptime aggregates
    "CoverageSample",
    "DayBucket",
    "RangeSummary",
    "SeverityTier",
    "HealthLevel",
]
