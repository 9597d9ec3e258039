"""Unit tests for SeverityClassifier."""

import pytest

from src.domain.entities.uptime import HealthLevel, SeverityTier
from src.domain.services.severity_classifier import SeverityClassifier


class TestClassify:
    """Test classify method."""

    @pytest.mark.parametrize(
        "uptime_pct,expected",
        [
            (100.0, SeverityTier.EXCELLENT),
            (99.999, SeverityTier.EXCELLENT),
            (99.99, SeverityTier.EXCELLENT),
            (99.989, SeverityTier.GOOD),
            (99.95, SeverityTier.GOOD),
            (99.9711, SeverityTier.GOOD),
            (99.949, SeverityTier.FAIR),
            (99.9, SeverityTier.FAIR),
            (99.5, SeverityTier.DEGRADED),
            (99.0, SeverityTier.POOR),
            (98.0, SeverityTier.BAD),
            (95.0, SeverityTier.SEVERE),
            (94.999, SeverityTier.CRITICAL),
            (0.0, SeverityTier.CRITICAL),
        ],
    )
    def test_thresholds(self, uptime_pct: float, expected: SeverityTier):
        assert SeverityClassifier.classify(uptime_pct) is expected

    def test_none_is_no_data(self):
        assert SeverityClassifier.classify(None) is SeverityTier.NO_DATA

    def test_classification_is_monotonic(self):
        values = [0.0, 50.0, 95.0, 97.0, 98.0, 99.0, 99.5, 99.9, 99.95, 99.99, 100.0]
        ranks = [SeverityClassifier.classify(v).rank for v in values]

        assert ranks == sorted(ranks, reverse=True)


class TestHealthLevel:
    """Test health_level method."""

    @pytest.mark.parametrize(
        "uptime_pct,expected",
        [
            (100.0, HealthLevel.HEALTHY),
            (99.95, HealthLevel.HEALTHY),
            (99.94, HealthLevel.WARNING),
            (99.0, HealthLevel.WARNING),
            (98.99, HealthLevel.CRITICAL),
            (None, HealthLevel.NONE),
        ],
    )
    def test_levels(self, uptime_pct, expected: HealthLevel):
        assert SeverityClassifier.health_level(uptime_pct) is expected


class TestUrgency:
    """Test urgency ordering."""

    def test_critical_is_most_urgent(self):
        urgencies = {tier: SeverityClassifier.urgency(tier) for tier in SeverityTier}

        assert min(urgencies, key=urgencies.get) is SeverityTier.CRITICAL
        assert max(urgencies, key=urgencies.get) is SeverityTier.NO_DATA

    def test_no_data_after_excellent(self):
        assert SeverityClassifier.urgency(SeverityTier.NO_DATA) > SeverityClassifier.urgency(
            SeverityTier.EXCELLENT
        )

    def test_sort_by_urgency(self):
        items = [
            ("a", 100.0),
            ("b", None),
            ("c", 90.0),
            ("d", 99.5),
            ("e", 100.0),
        ]

        ordered = SeverityClassifier.sort_by_urgency(
            items, key=lambda item: SeverityClassifier.classify(item[1])
        )

        assert [name for name, _ in ordered] == ["c", "d", "a", "e", "b"]

    def test_sort_is_stable_for_equal_tiers(self):
        items = [("x", 99.91), ("y", 99.94), ("z", 99.90)]

        ordered = SeverityClassifier.sort_by_urgency(
            items, key=lambda item: SeverityClassifier.classify(item[1])
        )

        assert [name for name, _ in ordered] == ["x", "y", "z"]
