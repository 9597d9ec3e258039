"""Application layer DTOs.

This package contains data transfer objects (DTOs) for the application layer.
Uses dataclasses (not Pydantic) per Clean Architecture principles.
"""

from src.application.dtos.uptime_dto import (
    DayBucketDTO,
    MonitorSeverityDTO,
    OutageDTO,
    OutageListRequest,
    OutageListResponse,
    RangeSummaryDTO,
    SeverityRankingRequest,
    SeverityRankingResponse,
    UptimeTimelineRequest,
    UptimeTimelineResponse,
)

__all__ = [
    # Timeline
    "UptimeTimelineRequest",
    "UptimeTimelineResponse",
    "DayBucketDTO",
    "RangeSummaryDTO",
    # Outages
    "OutageListRequest",
    "OutageListResponse",
    "OutageDTO",
    # Ranking
    "SeverityRankingRequest",
    "SeverityRankingResponse",
    "MonitorSeverityDTO",
]
