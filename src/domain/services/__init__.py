"""Domain services - Business logic that doesn't fit in entities."""

from src.domain.services.day_windowing import DayWindowingService
from src.domain.services.interval_merger import IntervalMerger
from src.domain.services.severity_classifier import SeverityClassifier
from src.domain.services.uptime_aggregator import UptimeAggregator
from src.domain.services.uptime_bar_layout import UptimeBarLayout

__all__ = [
    "IntervalMerger",
    "DayWindowingService",
    "UptimeAggregator",
    "SeverityClassifier",
    "UptimeBarLayout",
]
