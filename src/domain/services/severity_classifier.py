"""Severity classification for uptime percentages.

Maps an uptime percentage to an ordered severity tier used both for bar colors
and for urgency-based ordering of monitors.
"""

from collections.abc import Callable, Iterable
from typing import TypeVar

from src.domain.entities.uptime import HealthLevel, SeverityTier

T = TypeVar("T")


class SeverityClassifier:
    """Classifies uptime percentages into severity tiers.

    Thresholds (fixed, skewed toward high availability; the table lives
    beside SeverityTier as SEVERITY_THRESHOLDS):
    - >= 99.99: EXCELLENT
    - >= 99.95: GOOD
    - >= 99.9:  FAIR
    - >= 99.5:  DEGRADED
    - >= 99.0:  POOR
    - >= 98.0:  BAD
    - >= 95.0:  SEVERE
    - below:    CRITICAL
    - None:     NO_DATA
    """

    HEALTHY_THRESHOLD: float = 99.95
    WARNING_THRESHOLD: float = 99.0

    @staticmethod
    def classify(uptime_pct: float | None) -> SeverityTier:
        """Classify an uptime percentage.

        Args:
            uptime_pct: Uptime percentage (0-100), or None for no data

        Returns:
            The best tier whose lower bound the percentage meets
        """
        return SeverityTier.from_uptime(uptime_pct)

    @classmethod
    def health_level(cls, uptime_pct: float | None) -> HealthLevel:
        """Coarse health level for highlighting a bar.

        Args:
            uptime_pct: Uptime percentage (0-100), or None for no data

        Returns:
            HealthLevel enum (HEALTHY, WARNING, CRITICAL, NONE)
        """
        if uptime_pct is None:
            return HealthLevel.NONE
        if uptime_pct >= cls.HEALTHY_THRESHOLD:
            return HealthLevel.HEALTHY
        elif uptime_pct >= cls.WARNING_THRESHOLD:
            return HealthLevel.WARNING
        else:
            return HealthLevel.CRITICAL

    @staticmethod
    def urgency(tier: SeverityTier) -> int:
        """Sort key where lower values are more urgent.

        CRITICAL is the most urgent tier and EXCELLENT the least urgent data
        tier. NO_DATA sorts after every data tier.
        """
        if tier is SeverityTier.NO_DATA:
            return len(SeverityTier)
        return SeverityTier.CRITICAL.rank - tier.rank

    @classmethod
    def sort_by_urgency(
        cls, items: Iterable[T], key: Callable[[T], SeverityTier]
    ) -> list[T]:
        """Order items most urgent first.

        Args:
            items: Items to order (e.g., monitor summaries)
            key: Extracts the severity tier of an item

        Returns:
            New list ordered by urgency; items with equal tiers keep their
            relative order
        """
        return sorted(items, key=lambda item: cls.urgency(key(item)))
