"""Status API integration.

This module provides a client for the status service's admin API, which owns
the outage and probe tables. It implements both the outage history reader and
the monitoring coverage provider:

- GET /api/v1/admin/monitors/{id}/outages?start=&end=&limit=&cursor=
  -> {"outages": [...], "next_cursor": "..." | null}
- GET /api/v1/admin/monitors/{id}/coverage?start=&end=
  -> {"coverage_sec": ..., "unknown_sec": ...}

Transport errors are retried here; the uptime engine itself never retries.
"""

import logging
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.domain.entities.outage import OutagePage, OutageRecord
from src.domain.entities.uptime import CoverageSample
from src.domain.repositories.monitoring_coverage_provider import (
    MonitoringCoverageProviderInterface,
)
from src.domain.repositories.outage_history_reader import (
    InvalidOutagePayloadError,
    OutageHistoryReaderInterface,
    OutageHistoryUnavailableError,
)
from src.infrastructure.config.settings import get_settings
from src.infrastructure.observability.metrics import (
    record_outage_history_error,
    record_outage_page,
)

logger = logging.getLogger(__name__)


class StatusApiClient(OutageHistoryReaderInterface, MonitoringCoverageProviderInterface):
    """Client for the status service's outage and coverage endpoints.

    Attributes:
        base_url: Status API base URL
        timeout: Request timeout in seconds
    """

    BACKEND = "http"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int | None = None,
        api_token: str | None = None,
    ) -> None:
        """Initialize the status API client.

        Args:
            base_url: Status API base URL (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
            api_token: Bearer token (defaults to settings)
        """
        settings = get_settings()
        self.base_url = (base_url or settings.history.base_url).rstrip("/")
        self.timeout = timeout or settings.history.timeout_seconds
        token = api_token or settings.history.api_token
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self.client = httpx.AsyncClient(timeout=self.timeout, headers=headers)

    async def close(self) -> None:
        """Close the HTTP client connection."""
        await self.client.aclose()

    async def __aenter__(self) -> "StatusApiClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    @retry(
        retry=retry_if_exception_type(httpx.RequestError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    async def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        """GET a JSON document, retrying transport errors.

        Raises:
            OutageHistoryUnavailableError: On HTTP error status codes
            InvalidOutagePayloadError: If the body is not a JSON object
            httpx.RequestError: If the connection still fails after retries
        """
        try:
            response = await self.client.get(f"{self.base_url}{path}", params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Status API HTTP error: path=%s status_code=%s",
                path,
                e.response.status_code,
            )
            record_outage_history_error(self.BACKEND, "HTTPStatusError")
            raise OutageHistoryUnavailableError(
                f"Status API returned error: {e.response.status_code}"
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            record_outage_history_error(self.BACKEND, "InvalidJSON")
            raise InvalidOutagePayloadError("Status API returned invalid JSON") from e

        if not isinstance(data, dict):
            record_outage_history_error(self.BACKEND, "InvalidPayload")
            raise InvalidOutagePayloadError("Status API response must be a JSON object")
        return data

    async def _get_or_unavailable(
        self, path: str, params: dict[str, Any]
    ) -> dict[str, Any]:
        try:
            return await self._get(path, params)
        except httpx.RequestError as e:
            logger.error("Status API connection error: %s", str(e))
            record_outage_history_error(self.BACKEND, type(e).__name__)
            raise OutageHistoryUnavailableError(
                f"Failed to connect to status API: {e}"
            ) from e

    async def fetch_outages(
        self,
        monitor_id: int,
        range_start: int,
        range_end: int,
        cursor: str | None = None,
        limit: int = 50,
    ) -> OutagePage:
        """Fetch one page of outages from the status API."""
        params: dict[str, Any] = {"start": range_start, "end": range_end, "limit": limit}
        if cursor is not None:
            params["cursor"] = cursor

        data = await self._get_or_unavailable(
            f"/api/v1/admin/monitors/{monitor_id}/outages", params
        )
        page = self._parse_outage_page(data)

        record_outage_page(self.BACKEND, len(page.outages))
        return page

    async def get_coverage(
        self, monitor_id: int, window_start: int, window_end: int
    ) -> CoverageSample:
        """Fetch monitoring coverage for a window from the status API."""
        data = await self._get_or_unavailable(
            f"/api/v1/admin/monitors/{monitor_id}/coverage",
            {"start": window_start, "end": window_end},
        )
        try:
            return CoverageSample(
                window_start=window_start,
                window_end=window_end,
                coverage_sec=float(data["coverage_sec"]),
                unknown_sec=float(data.get("unknown_sec") or 0),
            )
        except (KeyError, TypeError, ValueError) as e:
            record_outage_history_error(self.BACKEND, "InvalidPayload")
            raise InvalidOutagePayloadError(f"Invalid coverage payload: {e}") from e

    def _parse_outage_page(self, data: dict[str, Any]) -> OutagePage:
        """Parse an outage page payload.

        Invalid records (including records that end before they start) make
        the whole page invalid; they are never silently dropped.
        """
        raw_outages = data.get("outages")
        if not isinstance(raw_outages, list):
            record_outage_history_error(self.BACKEND, "InvalidPayload")
            raise InvalidOutagePayloadError("Outage page is missing the 'outages' list")

        try:
            outages = [
                OutageRecord(
                    id=int(item["id"]),
                    started_at=int(item["started_at"]),
                    ended_at=(
                        int(item["ended_at"]) if item.get("ended_at") is not None else None
                    ),
                    initial_error=item.get("initial_error"),
                    last_error=item.get("last_error"),
                )
                for item in raw_outages
            ]
        except (KeyError, TypeError, ValueError) as e:
            record_outage_history_error(self.BACKEND, "InvalidPayload")
            raise InvalidOutagePayloadError(f"Invalid outage record: {e}") from e

        next_cursor = data.get("next_cursor")
        return OutagePage(
            outages=outages,
            next_cursor=str(next_cursor) if next_cursor is not None else None,
        )
