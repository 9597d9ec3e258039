"""Unit tests for UptimeBarLayout."""

import pytest

from src.domain.entities.time_range import DAY_SECONDS
from src.domain.entities.uptime import DayBucket
from src.domain.services.uptime_bar_layout import UptimeBarLayout


def _buckets(count: int) -> list[DayBucket]:
    return [
        DayBucket(
            day_start_at=i * DAY_SECONDS,
            downtime_sec=0,
            unknown_sec=0,
            uptime_pct=100.0,
            coverage_sec=DAY_SECONDS,
        )
        for i in range(count)
    ]


class TestPadSlots:
    """Test pad_slots method."""

    def test_short_history_is_right_aligned(self):
        buckets = _buckets(3)

        slots = UptimeBarLayout.pad_slots(buckets, max_bars=5)

        assert slots[:2] == [None, None]
        assert slots[2:] == buckets

    def test_long_history_keeps_most_recent(self):
        buckets = _buckets(40)

        slots = UptimeBarLayout.pad_slots(buckets, max_bars=30)

        assert len(slots) == 30
        assert slots[0] is buckets[10]
        assert slots[-1] is buckets[-1]

    def test_default_width(self):
        assert len(UptimeBarLayout.pad_slots([])) == 30

    def test_empty_history_is_all_placeholders(self):
        assert UptimeBarLayout.pad_slots([], max_bars=3) == [None, None, None]

    @pytest.mark.parametrize("max_bars", [0, -1])
    def test_non_positive_width_raises(self, max_bars: int):
        with pytest.raises(ValueError, match="max_bars"):
            UptimeBarLayout.pad_slots(_buckets(1), max_bars=max_bars)


class TestFormatDuration:
    """Test format_duration method."""

    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (0, "0s"),
            (45, "45s"),
            (60, "1m 0s"),
            (185, "3m 5s"),
            (3600, "1h 0m"),
            (18180, "5h 3m"),
            (47 * 3600, "47h 0m"),
            (48 * 3600, "2d 0h"),
            (187200, "2d 4h"),
            (-5, "0s"),
        ],
    )
    def test_format(self, seconds: int, expected: str):
        assert UptimeBarLayout.format_duration(seconds) == expected


class TestFormatPct:
    """Test format_pct method."""

    def test_three_decimals(self):
        assert UptimeBarLayout.format_pct(100 * (86400 - 25) / 86400) == "99.971%"

    def test_no_data(self):
        assert UptimeBarLayout.format_pct(None) == "No data"
