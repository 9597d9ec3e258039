"""Application DTOs for uptime timelines, outage listings and severity ranking.

These DTOs are used for communication between the application layer (use cases)
and the infrastructure layer (API routes). They follow dataclass conventions,
use the _pct suffix for percentages and the _sec suffix for durations.
Percentages are rounded to three decimals here, at the presentation boundary.
"""

from dataclasses import dataclass, field


@dataclass
class UptimeTimelineRequest:
    """Request for a monitor's uptime timeline.

    Attributes:
        monitor_id: Identifier of the monitored target
        range: Preset range ("24h", "7d", "30d", "90d"); ignored when explicit
               day boundaries are given
        start_day: First day (epoch seconds, aligned down to a day boundary)
        end_day: Last day, inclusive (epoch seconds)
        max_bars: Number of slots in the uptime bar
        now: Evaluation instant (epoch seconds), defaults to the current time
    """

    monitor_id: int
    range: str = "30d"
    start_day: int | None = None
    end_day: int | None = None
    max_bars: int = 30
    now: int | None = None


@dataclass
class DayBucketDTO:
    """Availability of one day.

    Attributes:
        day_start_at: Day boundary (epoch seconds)
        uptime_pct: Uptime percentage, None when the day has no data
        downtime_sec: Merged downtime seconds
        unknown_sec: Seconds without probe data
        coverage_sec: Monitoring coverage seconds
        outage_count: Outages touching the day
        severity: Severity tier value (e.g., "fair")
        health_level: Coarse highlight level ("healthy", "warning", "critical", "none")
        uptime_label: Formatted uptime (e.g., "99.971%" or "No data")
        downtime_label: Formatted downtime (e.g., "25s")
    """

    day_start_at: int
    uptime_pct: float | None
    downtime_sec: int
    unknown_sec: float
    coverage_sec: float
    outage_count: int
    severity: str
    health_level: str
    uptime_label: str
    downtime_label: str


@dataclass
class RangeSummaryDTO:
    """Availability aggregated over the requested range.

    Attributes:
        uptime_pct: Uptime percentage from summed coverage, None without data
        unknown_pct: Share of coverage without probe data, None without data
        downtime_sec: Total downtime seconds
        unknown_sec: Total seconds without probe data
        coverage_sec: Total monitoring coverage
        outage_count: Outages touching the range
        mttr_sec: Mean time to recovery, None if no outage has ended
        severity: Severity tier value
    """

    uptime_pct: float | None
    unknown_pct: float | None
    downtime_sec: int
    unknown_sec: float
    coverage_sec: float
    outage_count: int
    mttr_sec: float | None
    severity: str


@dataclass
class UptimeTimelineResponse:
    """Uptime timeline for a monitor.

    Attributes:
        monitor_id: Identifier of the monitored target
        range: Range label ("24h", "7d", "30d", "90d" or "custom")
        range_start: Range start (epoch seconds)
        range_end: Range end (epoch seconds)
        computed_at: ISO 8601 timestamp of the computation
        summary: Aggregate over the range
        days: Day buckets, oldest to newest (empty for 24h)
        slots: Right-aligned bar layout; None marks a placeholder slot
    """

    monitor_id: int
    range: str
    range_start: int
    range_end: int
    computed_at: str
    summary: RangeSummaryDTO
    days: list[DayBucketDTO] = field(default_factory=list)
    slots: list[DayBucketDTO | None] = field(default_factory=list)


@dataclass
class OutageListRequest:
    """Request for one page of a monitor's outage history."""

    monitor_id: int
    range: str = "24h"
    cursor: str | None = None
    limit: int = 50
    now: int | None = None


@dataclass
class OutageDTO:
    """A single outage record.

    Attributes:
        id: Outage identifier
        started_at: Start (epoch seconds)
        ended_at: End (epoch seconds), None while ongoing
        ongoing: Whether the outage is still open
        duration_sec: Duration of a resolved outage, None while ongoing
        initial_error: First error reported
        last_error: Most recent error reported
    """

    id: int
    started_at: int
    ended_at: int | None
    ongoing: bool
    duration_sec: int | None
    initial_error: str | None = None
    last_error: str | None = None


@dataclass
class OutageListResponse:
    """One page of outages."""

    monitor_id: int
    range: str
    outages: list[OutageDTO] = field(default_factory=list)
    next_cursor: str | None = None


@dataclass
class SeverityRankingRequest:
    """Request to rank monitors by urgency over a range."""

    monitor_ids: list[int]
    range: str = "24h"
    now: int | None = None


@dataclass
class MonitorSeverityDTO:
    """Severity of one monitor over the ranked range."""

    monitor_id: int
    uptime_pct: float | None
    downtime_sec: int
    outage_count: int
    severity: str


@dataclass
class SeverityRankingResponse:
    """Monitors ordered most urgent first."""

    range: str
    computed_at: str
    monitors: list[MonitorSeverityDTO] = field(default_factory=list)
