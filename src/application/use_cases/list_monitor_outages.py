"""Use case for listing a monitor's outage history one page at a time."""

import time

from src.application.dtos.uptime_dto import (
    OutageDTO,
    OutageListRequest,
    OutageListResponse,
)
from src.domain.entities.time_range import AnalyticsRange
from src.domain.repositories.outage_history_reader import (
    OutageHistoryReaderInterface,
)
from src.domain.services.day_windowing import DayWindowingService


class ListMonitorOutagesUseCase:
    """Return one page of outages for a monitor and preset range.

    The cursor is passed through untouched; the caller keeps requesting pages
    until next_cursor is None.
    """

    def __init__(
        self,
        history_reader: OutageHistoryReaderInterface,
        windowing: DayWindowingService | None = None,
    ) -> None:
        self._history = history_reader
        self._windowing = windowing or DayWindowingService()

    async def execute(self, request: OutageListRequest) -> OutageListResponse:
        """Fetch a single page of outages.

        Args:
            request: Listing request with optional cursor

        Returns:
            OutageListResponse with the page and the next cursor

        Raises:
            ValueError: If the range or limit is invalid
        """
        if request.limit <= 0:
            raise ValueError(f"limit must be positive, got {request.limit}")

        now = request.now if request.now is not None else int(time.time())
        preset = AnalyticsRange(request.range)
        time_range = self._windowing.resolve_preset(preset, now)

        page = await self._history.fetch_outages(
            monitor_id=request.monitor_id,
            range_start=time_range.start,
            range_end=time_range.end,
            cursor=request.cursor,
            limit=request.limit,
        )

        return OutageListResponse(
            monitor_id=request.monitor_id,
            range=preset.value,
            outages=[
                OutageDTO(
                    id=outage.id,
                    started_at=outage.started_at,
                    ended_at=outage.ended_at,
                    ongoing=outage.is_ongoing,
                    duration_sec=outage.duration_sec,
                    initial_error=outage.initial_error,
                    last_error=outage.last_error,
                )
                for outage in page.outages
            ],
            next_cursor=page.next_cursor,
        )
