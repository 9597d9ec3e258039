"""Unit tests for outage history value objects."""

import pytest

from src.domain.entities.outage import (
    Interval,
    InvalidIntervalError,
    OutagePage,
    OutageRecord,
)


class TestOutageRecord:
    """Test OutageRecord validation and helpers."""

    def test_create_resolved_outage(self):
        outage = OutageRecord(id=1, started_at=100, ended_at=160)

        assert outage.is_ongoing is False
        assert outage.duration_sec == 60

    def test_create_ongoing_outage(self):
        outage = OutageRecord(id=2, started_at=100, initial_error="timeout")

        assert outage.is_ongoing is True
        assert outage.duration_sec is None
        assert outage.initial_error == "timeout"
        assert outage.last_error is None

    def test_zero_length_outage_is_valid(self):
        outage = OutageRecord(id=3, started_at=100, ended_at=100)

        assert outage.duration_sec == 0

    def test_end_before_start_raises(self):
        with pytest.raises(InvalidIntervalError, match="ends before it starts"):
            OutageRecord(id=4, started_at=200, ended_at=100)

    def test_invalid_interval_error_is_value_error(self):
        """Domain validation errors surface as ValueError to the API layer."""
        with pytest.raises(ValueError):
            OutageRecord(id=5, started_at=200, ended_at=199)

    def test_is_immutable(self):
        outage = OutageRecord(id=6, started_at=0, ended_at=10)

        with pytest.raises(AttributeError):
            outage.ended_at = 20  # type: ignore[misc]


class TestInterval:
    """Test Interval validation."""

    def test_duration(self):
        assert Interval(start=10, end=25).duration_sec == 15

    def test_zero_length_interval_is_empty(self):
        interval = Interval(start=10, end=10)

        assert interval.is_empty is True
        assert interval.duration_sec == 0

    def test_end_before_start_raises(self):
        with pytest.raises(InvalidIntervalError):
            Interval(start=20, end=10)

    def test_intervals_compare_by_value(self):
        assert Interval(start=1, end=2) == Interval(start=1, end=2)


class TestOutagePage:
    """Test OutagePage helpers."""

    def test_last_page_has_no_cursor(self):
        assert OutagePage(outages=[]).is_last is True

    def test_page_with_cursor_is_not_last(self):
        page = OutagePage(outages=[OutageRecord(id=1, started_at=0)], next_cursor="1")

        assert page.is_last is False
