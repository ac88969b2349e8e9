"""Timezone normalization shared by the codec, the parser and the resolvers."""

from __future__ import annotations

import re
from datetime import timedelta

from datetimetz.domain.timezone import UTC, UTC_NAME, TimezoneDescriptor

_OFFSET_RE = re.compile(r"^(?P<sign>[+-])(?P<hours>\d{2}):?(?P<minutes>\d{2})$", re.ASCII)
_UTC_ALIASES = frozenset({UTC_NAME, "Z"})


def normalize_timezone(tz: TimezoneDescriptor | None) -> TimezoneDescriptor:
    """Return the canonical UTC descriptor for an absent timezone."""
    return UTC if tz is None else tz


def is_utc_token(name: str) -> bool:
    return name.strip().upper() in _UTC_ALIASES


def parse_offset(token: str) -> timedelta | None:
    """Parse a ``±HH:MM`` / ``±HHMM`` token; None when ``token`` is not an offset."""
    match = _OFFSET_RE.fullmatch(token.strip())
    if match is None:
        return None
    hours = int(match.group("hours"))
    minutes = int(match.group("minutes"))
    if hours > 23 or minutes > 59:
        raise ValueError(f"offset out of range: {token!r}")
    delta = timedelta(hours=hours, minutes=minutes)
    return -delta if match.group("sign") == "-" else delta


def format_offset(offset: timedelta) -> str:
    total = int(offset.total_seconds()) // 60
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def offset_descriptor(offset: timedelta) -> TimezoneDescriptor:
    """Descriptor for a fixed UTC offset; a zero offset is the canonical UTC."""
    if offset == timedelta(0):
        return UTC
    return TimezoneDescriptor(full_name=format_offset(offset), offset=offset)


def timezone_name(tz: TimezoneDescriptor | None) -> str:
    """Name stored on the wire: ``"UTC"`` for absent or UTC, else the full name."""
    tz = normalize_timezone(tz)
    if tz.is_utc:
        return UTC_NAME
    return tz.full_name
