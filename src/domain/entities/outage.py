"""Domain value objects for outage history.

This module defines the raw outage records delivered by the outage store and
the half-open time intervals the uptime engine derives from them.
"""

from dataclasses import dataclass


class InvalidIntervalError(ValueError):
    """Raised when a record or interval ends before it starts."""

    pass


@dataclass(frozen=True)
class OutageRecord:
    """A period during which a monitored target was considered down.

    Attributes:
        id: Identifier assigned by the outage store
        started_at: Outage start (epoch seconds)
        ended_at: Outage end (epoch seconds), None while still ongoing
        initial_error: Error reported by the first failing probe
        last_error: Error reported by the most recent failing probe
    """

    id: int
    started_at: int
    ended_at: int | None = None
    initial_error: str | None = None
    last_error: str | None = None

    def __post_init__(self):
        """Validate outage record constraints."""
        if self.ended_at is not None and self.ended_at < self.started_at:
            raise InvalidIntervalError(
                f"Outage {self.id} ends before it starts: "
                f"started_at={self.started_at}, ended_at={self.ended_at}"
            )

    @property
    def is_ongoing(self) -> bool:
        return self.ended_at is None

    @property
    def duration_sec(self) -> int | None:
        """Duration of a resolved outage, None while ongoing."""
        if self.ended_at is None:
            return None
        return self.ended_at - self.started_at


@dataclass(frozen=True)
class Interval:
    """Half-open downtime interval [start, end) in epoch seconds.

    Zero-length intervals can be constructed as raw input but are never
    emitted by the merger or the windowing service.
    """

    start: int
    end: int

    def __post_init__(self):
        if self.end < self.start:
            raise InvalidIntervalError(
                f"Interval end ({self.end}) is before start ({self.start})"
            )

    @property
    def duration_sec(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start


@dataclass
class OutagePage:
    """One page of outage history returned by a history reader.

    Attributes:
        outages: Outage records on this page
        next_cursor: Opaque cursor for the next page, None when exhausted
    """

    outages: list[OutageRecord]
    next_cursor: str | None = None

    @property
    def is_last(self) -> bool:
        return self.next_cursor is None
