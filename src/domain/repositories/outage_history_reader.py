"""Interface for reading outage history page by page.

This interface abstracts the outage store (a status API, a database, an
in-memory fixture) so the uptime engine never holds more than the records of
the requested range and never inspects cursor internals.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from src.domain.entities.outage import OutagePage, OutageRecord


class OutageHistoryError(Exception):
    """Base exception for outage history failures."""

    pass


class OutageHistoryUnavailableError(OutageHistoryError):
    """The outage store is unavailable or unresponsive."""

    pass


class InvalidOutagePayloadError(OutageHistoryError):
    """The outage store returned data that cannot be parsed."""

    pass


class HistoryPaginationError(OutageHistoryError):
    """Pagination did not terminate within the configured page budget."""

    pass


class OutageHistoryReaderInterface(ABC):
    """Interface for cursor-based outage history retrieval."""

    @abstractmethod
    async def fetch_outages(
        self,
        monitor_id: int,
        range_start: int,
        range_end: int,
        cursor: str | None = None,
        limit: int = 50,
    ) -> OutagePage:
        """Fetch one page of outages overlapping [range_start, range_end).

        Args:
            monitor_id: Identifier of the monitored target
            range_start: Range start (epoch seconds)
            range_end: Range end (epoch seconds)
            cursor: Opaque cursor from a previous page, None for the first page
            limit: Maximum number of records on the page

        Returns:
            OutagePage; next_cursor is None when there are no more pages

        Raises:
            OutageHistoryUnavailableError: If the store cannot be reached
            InvalidOutagePayloadError: If the store response is malformed
        """
        pass


async def iter_outage_pages(
    reader: OutageHistoryReaderInterface,
    monitor_id: int,
    range_start: int,
    range_end: int,
    page_size: int = 50,
    max_pages: int = 200,
) -> AsyncIterator[OutagePage]:
    """Yield pages until the reader reports no further pages.

    Raises:
        HistoryPaginationError: If more than max_pages pages are returned
    """
    cursor: str | None = None
    for _ in range(max_pages):
        page = await reader.fetch_outages(
            monitor_id=monitor_id,
            range_start=range_start,
            range_end=range_end,
            cursor=cursor,
            limit=page_size,
        )
        yield page
        if page.is_last:
            return
        cursor = page.next_cursor

    raise HistoryPaginationError(
        f"Outage history for monitor {monitor_id} exceeded {max_pages} pages"
    )


async def read_all_outages(
    reader: OutageHistoryReaderInterface,
    monitor_id: int,
    range_start: int,
    range_end: int,
    page_size: int = 50,
    max_pages: int = 200,
) -> list[OutageRecord]:
    """Accumulate every page of outages for a range.

    Merging is associative over the full record set, so accumulating pages
    before windowing yields the same result as any page-by-page strategy.

    Returns:
        All outage records returned by the reader, in page order
    """
    outages: list[OutageRecord] = []
    async for page in iter_outage_pages(
        reader, monitor_id, range_start, range_end, page_size, max_pages
    ):
        outages.extend(page.outages)
    return outages
