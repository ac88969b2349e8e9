from __future__ import annotations

from datetime import datetime
from typing import NamedTuple


class WireTimestamp(NamedTuple):
    """Naive timestamp half of the storage composite."""

    date: tuple[int, int, int]
    time: tuple[int, int, int, int]

    def to_datetime(self) -> datetime:
        """Naive datetime suitable for binding through a database driver."""
        return datetime(*self.date, *self.time)


class WireComposite(NamedTuple):
    """Storage composite: ((date, time-with-microseconds), timezone name)."""

    timestamp: WireTimestamp
    timezone_name: str
