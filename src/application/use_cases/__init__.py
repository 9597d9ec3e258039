"""Use cases - Application-specific business rules.

This package contains use cases that orchestrate domain logic
and implement application-specific workflows.
"""

from src.application.use_cases.compute_uptime_timeline import (
    ComputeUptimeTimelineUseCase,
)
from src.application.use_cases.list_monitor_outages import ListMonitorOutagesUseCase
from src.application.use_cases.rank_monitors_by_severity import (
    RankMonitorsBySeverityUseCase,
)

__all__ = [
    "ComputeUptimeTimelineUseCase",
    "ListMonitorOutagesUseCase",
    "RankMonitorsBySeverityUseCase",
]
