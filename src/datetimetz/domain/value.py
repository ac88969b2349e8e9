from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, time

from datetimetz.domain.timezone import UTC, TimezoneDescriptor


@dataclass(frozen=True)
class CanonicalDateTime:
    """Calendar date and time-of-day at millisecond precision, plus timezone.

    ``timezone`` may be None only on values built directly by callers; cast and
    decode always return values carrying a descriptor.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    timezone: TimezoneDescriptor | None = None

    def __post_init__(self) -> None:
        if isinstance(self.millisecond, bool) or not isinstance(self.millisecond, int):
            raise TypeError("millisecond must be an int")
        if not 0 <= self.millisecond <= 999:
            raise ValueError(f"millisecond must be in 0..999, got {self.millisecond}")
        # datetime validates the calendar and time-of-day ranges
        self.naive()

    @classmethod
    def from_datetime(
        cls,
        value: datetime,
        timezone: TimezoneDescriptor | None = None,
    ) -> "CanonicalDateTime":
        """Build from a stdlib datetime, truncating microseconds to milliseconds.

        Any tzinfo on ``value`` is ignored; pass the resolved descriptor instead.
        """
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            millisecond=value.microsecond // 1000,
            timezone=timezone,
        )

    @property
    def date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def time(self) -> time:
        return time(self.hour, self.minute, self.second, self.millisecond * 1000)

    @property
    def microsecond(self) -> int:
        return self.millisecond * 1000

    def naive(self) -> datetime:
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000,
        )

    def to_datetime(self) -> datetime:
        """Aware datetime using the offset resolved for this instant (UTC when unset)."""
        tz = self.timezone or UTC
        return self.naive().replace(tzinfo=tz.tzinfo())

    def with_timezone(self, timezone: TimezoneDescriptor) -> "CanonicalDateTime":
        return replace(self, timezone=timezone)
