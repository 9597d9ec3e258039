"""Unit tests for RankMonitorsBySeverityUseCase."""

from unittest.mock import AsyncMock

import pytest

from src.application.dtos.uptime_dto import (
    RangeSummaryDTO,
    SeverityRankingRequest,
    UptimeTimelineRequest,
    UptimeTimelineResponse,
)
from src.application.use_cases.rank_monitors_by_severity import (
    RankMonitorsBySeverityUseCase,
)

NOW = 1704844800

# monitor_id -> (uptime_pct, severity)
SUMMARIES = {
    1: (100.0, "excellent"),
    2: (None, "no_data"),
    3: (90.0, "critical"),
    4: (99.6, "degraded"),
    5: (99.995, "excellent"),
    6: (99.99, "good"),
}


def _timeline(request: UptimeTimelineRequest) -> UptimeTimelineResponse:
    uptime_pct, severity = SUMMARIES[request.monitor_id]
    return UptimeTimelineResponse(
        monitor_id=request.monitor_id,
        range=request.range,
        range_start=NOW - 86400,
        range_end=NOW,
        computed_at="2024-01-10T00:00:00+00:00",
        summary=RangeSummaryDTO(
            uptime_pct=uptime_pct,
            unknown_pct=None if uptime_pct is None else 0.0,
            downtime_sec=0,
            unknown_sec=0.0,
            coverage_sec=0.0 if uptime_pct is None else 86400.0,
            outage_count=0,
            mttr_sec=None,
            severity=severity,
        ),
    )


@pytest.fixture
def mock_timeline():
    """Mock timeline use case."""
    mock = AsyncMock()
    mock.execute.side_effect = _timeline
    return mock


@pytest.fixture
def use_case(mock_timeline) -> RankMonitorsBySeverityUseCase:
    """Fixture providing the use case."""
    return RankMonitorsBySeverityUseCase(timeline_use_case=mock_timeline)


class TestRankMonitorsBySeverity:
    """Test RankMonitorsBySeverityUseCase."""

    @pytest.mark.asyncio
    async def test_most_urgent_first_no_data_last(self, use_case):
        result = await use_case.execute(
            SeverityRankingRequest(monitor_ids=[1, 2, 3, 4, 5], range="7d", now=NOW)
        )

        assert [m.monitor_id for m in result.monitors] == [3, 4, 1, 5, 2]
        assert result.range == "7d"

    @pytest.mark.asyncio
    async def test_duplicate_ids_are_ranked_once(self, use_case, mock_timeline):
        result = await use_case.execute(
            SeverityRankingRequest(monitor_ids=[1, 3, 1], now=NOW)
        )

        assert [m.monitor_id for m in result.monitors] == [3, 1]
        assert mock_timeline.execute.await_count == 2

    @pytest.mark.asyncio
    async def test_timeline_requests_use_range_and_now(self, use_case, mock_timeline):
        await use_case.execute(SeverityRankingRequest(monitor_ids=[4], range="30d", now=NOW))

        request = mock_timeline.execute.await_args.args[0]
        assert request.monitor_id == 4
        assert request.range == "30d"
        assert request.now == NOW

    @pytest.mark.asyncio
    async def test_empty_request(self, use_case):
        result = await use_case.execute(SeverityRankingRequest(monitor_ids=[], now=NOW))

        assert result.monitors == []

    @pytest.mark.asyncio
    async def test_ranks_by_tier_not_rounded_percentage(self, use_case):
        # 6 shows 99.99 after rounding but was classified GOOD at full precision
        result = await use_case.execute(
            SeverityRankingRequest(monitor_ids=[5, 6, 1], now=NOW)
        )

        assert [m.monitor_id for m in result.monitors] == [6, 5, 1]
        assert result.monitors[0].severity == "good"
