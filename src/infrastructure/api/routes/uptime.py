"""
Uptime API routes.

Implements the REST API for uptime timelines, outage history pages and
severity ranking of monitors.
"""

import logging
import time
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from src.application.dtos.uptime_dto import (
    OutageListRequest,
    SeverityRankingRequest,
    UptimeTimelineRequest,
)
from src.application.use_cases.compute_uptime_timeline import (
    ComputeUptimeTimelineUseCase,
)
from src.application.use_cases.list_monitor_outages import ListMonitorOutagesUseCase
from src.application.use_cases.rank_monitors_by_severity import (
    RankMonitorsBySeverityUseCase,
)
from src.domain.entities.time_range import DAY_SECONDS
from src.domain.repositories.outage_history_reader import (
    HistoryPaginationError,
    InvalidOutagePayloadError,
    OutageHistoryUnavailableError,
)
from src.infrastructure.api.dependencies import (
    get_compute_uptime_timeline_use_case,
    get_list_monitor_outages_use_case,
    get_rank_monitors_by_severity_use_case,
)
from src.infrastructure.api.schemas.error_schema import ProblemDetails
from src.infrastructure.api.schemas.uptime_schema import (
    OutageListApiResponse,
    SeverityRankingApiResponse,
    UptimeTimelineApiResponse,
)
from src.infrastructure.config import get_settings
from src.infrastructure.observability.metrics import record_timeline_computed
from src.infrastructure.observability.tracing import get_tracer

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

router = APIRouter()

RANGE_PATTERN = "^(24h|7d|30d|90d)$"

# Explicit day ranges are limited to a year of buckets
MAX_EXPLICIT_RANGE_DAYS = 366

HISTORY_ERROR_RESPONSES = {
    400: {"model": ProblemDetails, "description": "Invalid query parameters"},
    500: {"model": ProblemDetails, "description": "Internal server error"},
    502: {
        "model": ProblemDetails,
        "description": "Outage history returned an invalid payload",
    },
    503: {"model": ProblemDetails, "description": "Outage history unavailable"},
}


def _to_http_error(e: Exception, context: str) -> HTTPException:
    """Map a use case failure to the HTTP error returned to the client."""
    if isinstance(e, ValueError):
        logger.warning(f"Validation error for {context}: {e}")
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if isinstance(e, OutageHistoryUnavailableError):
        logger.warning(f"Outage history unavailable for {context}: {e}")
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)
        )
    if isinstance(e, (InvalidOutagePayloadError, HistoryPaginationError)):
        logger.error(f"Outage history error for {context}: {e}")
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    logger.error(f"Unexpected error for {context}: {e}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred while processing the request",
    )


@router.get(
    "/severity-ranking",
    response_model=SeverityRankingApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Rank monitors by severity",
    description="Compute uptime for several monitors and order them most urgent first",
    responses={200: {"description": "Monitors ranked"}, **HISTORY_ERROR_RESPONSES},
)
async def rank_monitors(
    monitor_id: list[int] = Query(
        ..., description="Monitor identifiers (repeat the parameter)"
    ),
    range_label: str = Query(
        "24h", alias="range", description="Preset range", pattern=RANGE_PATTERN
    ),
    use_case: RankMonitorsBySeverityUseCase = Depends(
        get_rank_monitors_by_severity_use_case
    ),
) -> SeverityRankingApiResponse:
    """
    Rank monitors by severity.

    CRITICAL monitors come first and EXCELLENT last. Monitors without data
    are listed after every monitor with data.
    """
    try:
        logger.info(
            f"GET /monitors/severity-ranking "
            f"(monitors={len(monitor_id)}, range={range_label})"
        )
        result = await use_case.execute(
            SeverityRankingRequest(monitor_ids=monitor_id, range=range_label)
        )
        return SeverityRankingApiResponse(**asdict(result))
    except Exception as e:
        raise _to_http_error(e, "severity ranking") from e


@router.get(
    "/{monitor_id}/uptime",
    response_model=UptimeTimelineApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Get uptime timeline for a monitor",
    description="Per-day uptime buckets, range summary and bar layout for a monitor",
    responses={200: {"description": "Timeline computed"}, **HISTORY_ERROR_RESPONSES},
)
async def get_uptime_timeline(
    monitor_id: int = Path(..., ge=1, description="Monitor identifier"),
    range_label: str | None = Query(
        None,
        alias="range",
        description="Preset range (24h, 7d, 30d, 90d). Defaults to the configured range.",
        pattern=RANGE_PATTERN,
    ),
    start_day: int | None = Query(
        None, ge=0, description="First day of an explicit range (epoch seconds)"
    ),
    end_day: int | None = Query(
        None, ge=0, description="Last day of an explicit range, inclusive (epoch seconds)"
    ),
    max_bars: int | None = Query(
        None, ge=1, le=365, description="Number of slots in the uptime bar"
    ),
    use_case: ComputeUptimeTimelineUseCase = Depends(
        get_compute_uptime_timeline_use_case
    ),
) -> UptimeTimelineApiResponse:
    """
    Get the uptime timeline of a monitor.

    **Ranges:**
    - `24h`: rolling window ending now, summary only
    - `7d`, `30d`, `90d`: one bucket per day ending with today
    - `start_day` + `end_day`: explicit inclusive day range (at most 366 days)

    Days without monitoring coverage are reported as "No data", never as 100%.
    """
    timeline_settings = get_settings().timeline
    context = f"monitor {monitor_id}"
    try:
        logger.info(
            f"GET /monitors/{monitor_id}/uptime "
            f"(range={range_label}, start_day={start_day}, end_day={end_day}, "
            f"max_bars={max_bars})"
        )
        if (
            start_day is not None
            and end_day is not None
            and end_day // DAY_SECONDS - start_day // DAY_SECONDS + 1
            > MAX_EXPLICIT_RANGE_DAYS
        ):
            raise ValueError(
                f"Explicit day ranges are limited to {MAX_EXPLICIT_RANGE_DAYS} days"
            )

        request = UptimeTimelineRequest(
            monitor_id=monitor_id,
            range=range_label or timeline_settings.default_range,
            start_day=start_day,
            end_day=end_day,
            max_bars=max_bars or timeline_settings.default_max_bars,
        )

        started = time.perf_counter()
        with tracer.start_as_current_span("compute_uptime_timeline") as span:
            span.set_attribute("monitor.id", monitor_id)
            span.set_attribute("uptime.range", request.range)
            result = await use_case.execute(request)
        record_timeline_computed(result.range, time.perf_counter() - started)

        return UptimeTimelineApiResponse(**asdict(result))
    except Exception as e:
        raise _to_http_error(e, context) from e


@router.get(
    "/{monitor_id}/outages",
    response_model=OutageListApiResponse,
    status_code=status.HTTP_200_OK,
    summary="List outages for a monitor",
    description="One page of a monitor's outage history, newest first",
    responses={200: {"description": "Outage page returned"}, **HISTORY_ERROR_RESPONSES},
)
async def list_outages(
    monitor_id: int = Path(..., ge=1, description="Monitor identifier"),
    range_label: str = Query(
        "24h", alias="range", description="Preset range", pattern=RANGE_PATTERN
    ),
    cursor: str | None = Query(
        None, description="Cursor returned by the previous page"
    ),
    limit: int = Query(50, ge=1, le=500, description="Page size"),
    use_case: ListMonitorOutagesUseCase = Depends(get_list_monitor_outages_use_case),
) -> OutageListApiResponse:
    """
    List outages for a monitor one page at a time.

    Keep requesting with `cursor=next_cursor` until `next_cursor` is null.
    """
    try:
        logger.info(
            f"GET /monitors/{monitor_id}/outages "
            f"(range={range_label}, cursor={cursor}, limit={limit})"
        )
        result = await use_case.execute(
            OutageListRequest(
                monitor_id=monitor_id, range=range_label, cursor=cursor, limit=limit
            )
        )
        return OutageListApiResponse(**asdict(result))
    except Exception as e:
        raise _to_http_error(e, f"monitor {monitor_id}") from e
