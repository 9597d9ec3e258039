"""Unit tests for UptimeAggregator."""

import pytest

from src.domain.entities.outage import Interval, OutageRecord
from src.domain.entities.time_range import DAY_SECONDS
from src.domain.entities.uptime import CoverageSample, DayBucket, SeverityTier
from src.domain.services.day_windowing import DayWindowingService
from src.domain.services.uptime_aggregator import UptimeAggregator


@pytest.fixture
def aggregator() -> UptimeAggregator:
    """Fixture providing UptimeAggregator instance."""
    return UptimeAggregator()


def _bucket(day: int, coverage: float, downtime: int, unknown: float = 0.0) -> DayBucket:
    return DayBucket(
        day_start_at=day,
        downtime_sec=downtime,
        unknown_sec=unknown,
        uptime_pct=UptimeAggregator.uptime_pct(coverage, downtime, unknown),
        coverage_sec=coverage,
    )


class TestUptimePct:
    """Test uptime_pct helper."""

    def test_zero_coverage_has_no_data(self):
        assert UptimeAggregator.uptime_pct(0, 0, 0) is None

    def test_full_uptime(self):
        assert UptimeAggregator.uptime_pct(86400, 0, 0) == 100.0

    def test_unknown_seconds_reduce_uptime(self):
        assert UptimeAggregator.uptime_pct(100, 10, 10) == pytest.approx(80.0)

    def test_result_is_clamped_to_zero(self):
        """Inconsistent inputs (downtime beyond coverage) never go negative."""
        assert UptimeAggregator.uptime_pct(100, 80, 50) == 0.0


class TestSummarizeDay:
    """Test summarize_day method."""

    def test_end_to_end_example(self, aggregator: UptimeAggregator):
        bucket = aggregator.summarize_day(
            day_start_at=0,
            merged_intervals=[Interval(10, 25), Interval(100, 110)],
            monitoring_coverage_sec=86400,
        )

        assert bucket.downtime_sec == 25
        assert bucket.uptime_pct == pytest.approx(100 * (86400 - 25) / 86400)
        assert bucket.uptime_pct == pytest.approx(99.9711, abs=1e-4)
        assert bucket.severity is SeverityTier.GOOD

    def test_full_day_without_downtime(self, aggregator: UptimeAggregator):
        bucket = aggregator.summarize_day(0, [], monitoring_coverage_sec=86400)

        assert bucket.uptime_pct == 100.0
        assert bucket.severity is SeverityTier.EXCELLENT

    def test_zero_coverage_is_no_data_regardless_of_outages(
        self, aggregator: UptimeAggregator
    ):
        bucket = aggregator.summarize_day(
            0, [Interval(0, 5000)], monitoring_coverage_sec=0
        )

        assert bucket.uptime_pct is None
        assert bucket.downtime_sec == 5000
        assert bucket.severity is SeverityTier.NO_DATA

    def test_full_precision_is_kept(self, aggregator: UptimeAggregator):
        bucket = aggregator.summarize_day(0, [Interval(0, 1)], monitoring_coverage_sec=86400)

        assert bucket.uptime_pct == 100 * 86399 / 86400

    def test_negative_coverage_raises(self, aggregator: UptimeAggregator):
        with pytest.raises(ValueError, match="monitoring_coverage_sec"):
            aggregator.summarize_day(0, [], monitoring_coverage_sec=-1)

    def test_negative_unknown_raises(self, aggregator: UptimeAggregator):
        with pytest.raises(ValueError, match="unknown_sec"):
            aggregator.summarize_day(0, [], monitoring_coverage_sec=100, unknown_sec=-1)


class TestBuildDayBucket:
    """Test build_day_bucket method."""

    def test_clips_merges_and_counts(self, aggregator: UptimeAggregator):
        outages = [
            OutageRecord(id=1, started_at=10, ended_at=20),
            OutageRecord(id=2, started_at=15, ended_at=25),
            OutageRecord(id=3, started_at=100, ended_at=110),
            OutageRecord(id=4, started_at=DAY_SECONDS + 10, ended_at=DAY_SECONDS + 20),
        ]
        coverage = CoverageSample(
            window_start=0, window_end=DAY_SECONDS, coverage_sec=86400
        )

        bucket = aggregator.build_day_bucket(0, outages, coverage)

        assert bucket.downtime_sec == 25
        assert bucket.outage_count == 3
        assert [(i.start, i.end) for i in bucket.downtime_intervals] == [
            (10, 25),
            (100, 110),
        ]

    def test_ongoing_outage_counts_until_day_end(self, aggregator: UptimeAggregator):
        coverage = CoverageSample(
            window_start=0, window_end=DAY_SECONDS, coverage_sec=86400
        )

        bucket = aggregator.build_day_bucket(
            0, [OutageRecord(id=1, started_at=86000)], coverage
        )

        assert bucket.downtime_sec == 400

    def test_uses_canonical_day_set(self, aggregator: UptimeAggregator):
        windowing = DayWindowingService()
        outages = [
            OutageRecord(id=1, started_at=-50, ended_at=30),
            OutageRecord(id=2, started_at=30, ended_at=60),
            OutageRecord(id=3, started_at=DAY_SECONDS - 10),
        ]
        coverage = CoverageSample(
            window_start=0, window_end=DAY_SECONDS, coverage_sec=86400
        )

        bucket = aggregator.build_day_bucket(0, outages, coverage)

        assert bucket.downtime_intervals == windowing.compute_day_downtime_intervals(
            0, outages
        )
        assert [(i.start, i.end) for i in bucket.downtime_intervals] == [
            (0, 60),
            (DAY_SECONDS - 10, DAY_SECONDS),
        ]
        assert bucket.outage_count == windowing.count_outages_in_window(
            0, DAY_SECONDS, outages
        )
        assert bucket.outage_count == 3


class TestSummarizeRange:
    """Test summarize_range method."""

    def test_range_is_not_an_average_of_days(self, aggregator: UptimeAggregator):
        buckets = [_bucket(0, 100, 0), _bucket(DAY_SECONDS, 100, 50)]

        summary = aggregator.summarize_range(buckets)

        assert summary.uptime_pct == pytest.approx(75.0)
        assert summary.downtime_sec == 50
        assert summary.coverage_sec == 200

    def test_days_without_coverage_do_not_dilute(self, aggregator: UptimeAggregator):
        buckets = [_bucket(0, 0, 0), _bucket(DAY_SECONDS, 86400, 0)]

        summary = aggregator.summarize_range(buckets)

        assert summary.uptime_pct == 100.0

    def test_no_buckets_is_no_data(self, aggregator: UptimeAggregator):
        summary = aggregator.summarize_range([])

        assert summary.uptime_pct is None
        assert summary.severity is SeverityTier.NO_DATA
        assert summary.unknown_pct is None

    def test_outage_count_defaults_to_bucket_sum(self, aggregator: UptimeAggregator):
        first = _bucket(0, 100, 0)
        first.outage_count = 2
        second = _bucket(DAY_SECONDS, 100, 0)
        second.outage_count = 1

        assert aggregator.summarize_range([first, second]).outage_count == 3
        assert aggregator.summarize_range([first, second], outage_count=2).outage_count == 2

    def test_unknown_seconds_are_summed(self, aggregator: UptimeAggregator):
        buckets = [_bucket(0, 100, 0, unknown=10), _bucket(DAY_SECONDS, 100, 0, unknown=30)]

        summary = aggregator.summarize_range(buckets, mttr_sec=12.5)

        assert summary.unknown_sec == 40
        assert summary.unknown_pct == pytest.approx(20.0)
        assert summary.uptime_pct == pytest.approx(80.0)
        assert summary.mttr_sec == 12.5


class TestSummarizeWindow:
    """Test summarize_window method."""

    def test_raw_window_path(self, aggregator: UptimeAggregator):
        outages = [
            OutageRecord(id=1, started_at=900, ended_at=1100),
            OutageRecord(id=2, started_at=1050, ended_at=1200),
            OutageRecord(id=3, started_at=1900),
        ]
        coverage = CoverageSample(window_start=1000, window_end=2000, coverage_sec=1000)

        summary = aggregator.summarize_window(1000, 2000, outages, coverage)

        # [1000, 1200) merged plus the ongoing [1900, 2000)
        assert summary.downtime_sec == 300
        assert summary.outage_count == 3
        assert summary.uptime_pct == pytest.approx(70.0)
        assert summary.mttr_sec == pytest.approx(175.0)


class TestComputeMttr:
    """Test compute_mttr method."""

    def test_mean_of_resolved_outages(self):
        outages = [
            OutageRecord(id=1, started_at=0, ended_at=60),
            OutageRecord(id=2, started_at=100, ended_at=220),
            OutageRecord(id=3, started_at=500),
        ]

        assert UptimeAggregator.compute_mttr(outages) == pytest.approx(90.0)

    def test_no_resolved_outages(self):
        assert UptimeAggregator.compute_mttr([OutageRecord(id=1, started_at=0)]) is None
        assert UptimeAggregator.compute_mttr([]) is None


class TestRoundPct:
    """Test round_pct method."""

    def test_rounds_to_three_digits(self):
        assert UptimeAggregator.round_pct(99.971064) == 99.971

    def test_custom_digits(self):
        assert UptimeAggregator.round_pct(99.971064, digits=1) == 100.0

    def test_none_passes_through(self):
        assert UptimeAggregator.round_pct(None) is None
