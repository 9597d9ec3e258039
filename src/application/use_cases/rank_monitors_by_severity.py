"""Rank Monitors By Severity Use Case.

Computes a range summary per monitor and orders monitors most urgent first.
"""

import asyncio
import logging
from datetime import datetime, timezone

from src.application.dtos.uptime_dto import (
    MonitorSeverityDTO,
    SeverityRankingRequest,
    SeverityRankingResponse,
    UptimeTimelineRequest,
)
from src.application.use_cases.compute_uptime_timeline import (
    ComputeUptimeTimelineUseCase,
)
from src.domain.entities.uptime import SeverityTier
from src.domain.services.severity_classifier import SeverityClassifier

logger = logging.getLogger(__name__)

# Limit concurrent timeline computations to avoid flooding the history reader
MAX_CONCURRENT_TIMELINES = 10


class RankMonitorsBySeverityUseCase:
    """Rank monitors by the severity of their uptime over a range.

    CRITICAL monitors come first, EXCELLENT last among monitors with data,
    and monitors without data after all of them. Ties keep request order.
    """

    def __init__(self, timeline_use_case: ComputeUptimeTimelineUseCase) -> None:
        """Initialize use case with dependencies.

        Args:
            timeline_use_case: Use case computing each monitor's summary
        """
        self._timeline = timeline_use_case

    async def execute(self, request: SeverityRankingRequest) -> SeverityRankingResponse:
        """Compute and rank monitor severities.

        Args:
            request: Ranking request with monitor ids and range

        Returns:
            SeverityRankingResponse with monitors ordered most urgent first
        """
        semaphore = asyncio.Semaphore(MAX_CONCURRENT_TIMELINES)

        async def summarize(monitor_id: int) -> MonitorSeverityDTO:
            async with semaphore:
                timeline = await self._timeline.execute(
                    UptimeTimelineRequest(
                        monitor_id=monitor_id,
                        range=request.range,
                        max_bars=1,
                        now=request.now,
                    )
                )
            return MonitorSeverityDTO(
                monitor_id=monitor_id,
                uptime_pct=timeline.summary.uptime_pct,
                downtime_sec=timeline.summary.downtime_sec,
                outage_count=timeline.summary.outage_count,
                severity=timeline.summary.severity,
            )

        # De-duplicate while keeping request order
        monitor_ids = list(dict.fromkeys(request.monitor_ids))
        summaries = await asyncio.gather(*[summarize(m) for m in monitor_ids])

        # Tiers were classified at full precision before rounding
        ranked = SeverityClassifier.sort_by_urgency(
            summaries, key=lambda s: SeverityTier(s.severity)
        )

        logger.info(
            f"Ranked {len(ranked)} monitors by severity: range={request.range}"
        )

        return SeverityRankingResponse(
            range=request.range,
            computed_at=datetime.now(timezone.utc).isoformat(),
            monitors=ranked,
        )
