"""Pydantic API schemas for uptime endpoints.

This module defines the response models for the uptime timeline, outage
listing and severity ranking endpoints.
"""

from pydantic import BaseModel, Field


# ==================== Uptime Timeline ====================


class DayBucketApiModel(BaseModel):
    """API model for one day of the uptime bar."""

    day_start_at: int
    uptime_pct: float | None = Field(
        description="Uptime percentage (3 decimals), null when the day has no data"
    )
    downtime_sec: int
    unknown_sec: float
    coverage_sec: float
    outage_count: int
    severity: str  # "excellent" ... "critical" | "no_data"
    health_level: str  # "healthy" | "warning" | "critical" | "none"
    uptime_label: str
    downtime_label: str


class RangeSummaryApiModel(BaseModel):
    """API model for the aggregate over a range."""

    uptime_pct: float | None
    unknown_pct: float | None
    downtime_sec: int
    unknown_sec: float
    coverage_sec: float
    outage_count: int
    mttr_sec: float | None
    severity: str


class UptimeTimelineApiResponse(BaseModel):
    """Response for GET /monitors/{monitor_id}/uptime."""

    monitor_id: int
    range: str
    range_start: int
    range_end: int
    computed_at: str
    summary: RangeSummaryApiModel
    days: list[DayBucketApiModel] = Field(
        default_factory=list, description="Day buckets ordered oldest to newest"
    )
    slots: list[DayBucketApiModel | None] = Field(
        default_factory=list,
        description="Right-aligned bar layout; null marks a placeholder slot",
    )


# ==================== Outages ====================


class OutageApiModel(BaseModel):
    """API model for an outage record."""

    id: int
    started_at: int
    ended_at: int | None
    ongoing: bool
    duration_sec: int | None
    initial_error: str | None = None
    last_error: str | None = None


class OutageListApiResponse(BaseModel):
    """Response for GET /monitors/{monitor_id}/outages."""

    monitor_id: int
    range: str
    outages: list[OutageApiModel]
    next_cursor: str | None = Field(
        None, description="Cursor for the next page, null on the last page"
    )


# ==================== Severity Ranking ====================


class MonitorSeverityApiModel(BaseModel):
    """API model for one ranked monitor."""

    monitor_id: int
    uptime_pct: float | None
    downtime_sec: int
    outage_count: int
    severity: str


class SeverityRankingApiResponse(BaseModel):
    """Response for GET /monitors/severity-ranking."""

    range: str
    computed_at: str
    monitors: list[MonitorSeverityApiModel]
