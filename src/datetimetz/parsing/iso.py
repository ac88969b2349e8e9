from __future__ import annotations

import re
from datetime import datetime

from datetimetz.domain.value import CanonicalDateTime
from datetimetz.errors import ParseError, ResolutionError
from datetimetz.interfaces import ISO_PROFILE, DateParser, TimezoneResolver
from datetimetz.resolvers.tzdb import ZoneInfoResolver

_ISO_RE = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[T ]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d{1,6}))?"
    r"(?P<zone>Z|[+-]\d{2}:\d{2})?$",
    re.ASCII,
)


class IsoDateParser(DateParser):
    """Parse ``YYYY-MM-DDTHH:MM:SS[.ffffff][Z|±HH:MM]`` text.

    A space is accepted in place of ``T``. Fractions finer than a millisecond
    are truncated. A zone suffix is resolved through ``resolver`` at the
    parsed wall-clock instant; text without one yields a value with no
    timezone, which the caster normalizes to UTC.
    """

    def __init__(self, resolver: TimezoneResolver | None = None) -> None:
        self.resolver = resolver or ZoneInfoResolver()

    def parse(self, text: str, profile: str = ISO_PROFILE) -> CanonicalDateTime:
        if profile != ISO_PROFILE:
            raise ParseError(f"Unsupported profile '{profile}'")
        if not isinstance(text, str):
            raise ParseError(f"expected text, got {type(text).__name__}")
        match = _ISO_RE.fullmatch(text.strip())
        if match is None:
            raise ParseError(f"not an ISO-8601 datetime: {text!r}")

        fraction = (match.group("fraction") or "").ljust(6, "0")
        try:
            naive = datetime(
                int(match.group("year")),
                int(match.group("month")),
                int(match.group("day")),
                int(match.group("hour")),
                int(match.group("minute")),
                int(match.group("second")),
                int(fraction),
            )
        except ValueError as exc:
            raise ParseError(f"invalid datetime {text!r}: {exc}") from exc

        value = CanonicalDateTime.from_datetime(naive)
        zone = match.group("zone")
        if zone is None:
            return value
        try:
            # resolve at the millisecond instant the value actually holds
            tz = self.resolver.resolve(zone, value.naive())
        except ResolutionError as exc:
            raise ParseError(f"invalid zone in {text!r}: {exc}") from exc
        return value.with_timezone(tz)
