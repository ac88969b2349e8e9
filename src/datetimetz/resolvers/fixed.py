from __future__ import annotations

from datetime import datetime, timedelta
from typing import Mapping, Union

from datetimetz.domain.timezone import TimezoneDescriptor
from datetimetz.errors import ResolutionError
from datetimetz.interfaces import TimezoneResolver
from datetimetz.resolvers.tzdb import resolve_offset_token
from datetimetz.timezones import parse_offset

OffsetSpec = Union[str, int, timedelta]


def _coerce_offset(name: str, value: OffsetSpec) -> timedelta:
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise TypeError(f"offset for {name!r} must be a string, minutes or timedelta")
    if isinstance(value, int):
        return timedelta(minutes=value)
    if isinstance(value, str):
        parsed = parse_offset(value)
        if parsed is None:
            raise ValueError(f"offset for {name!r} must look like +HH:MM, got {value!r}")
        return parsed
    raise TypeError(f"offset for {name!r} must be a string, minutes or timedelta")


class FixedOffsetResolver(TimezoneResolver):
    """Deterministic resolver backed by a static name -> offset table.

    Never consults a calendar: a name always maps to the same offset whatever
    the instant. ``UTC`` and ``±HH:MM`` tokens are understood without a
    table entry.
    """

    def __init__(self, offsets: Mapping[str, OffsetSpec] | None = None) -> None:
        self.offsets = {
            str(name): _coerce_offset(str(name), value)
            for name, value in (offsets or {}).items()
        }

    def resolve(self, name: str, at: datetime) -> TimezoneDescriptor:
        if not isinstance(name, str) or not name.strip():
            raise ResolutionError("timezone name is empty")
        name = name.strip()
        if name in self.offsets:
            return TimezoneDescriptor(full_name=name, offset=self.offsets[name])
        fixed = resolve_offset_token(name)
        if fixed is not None:
            return fixed
        available = ", ".join(sorted(self.offsets)) or "(none)"
        raise ResolutionError(f"Unknown timezone: {name!r}. Available: {available}")
