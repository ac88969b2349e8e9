from __future__ import annotations

import logging
from datetime import datetime, timedelta
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datetimetz.domain.timezone import UTC, TimezoneDescriptor
from datetimetz.errors import ResolutionError
from datetimetz.interfaces import TimezoneResolver
from datetimetz.timezones import is_utc_token, offset_descriptor, parse_offset

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def _zone(name: str) -> ZoneInfo:
    return ZoneInfo(name)


def resolve_offset_token(name: str) -> TimezoneDescriptor | None:
    """Shared UTC / ``±HH:MM`` handling; None when ``name`` is neither."""
    if is_utc_token(name):
        return UTC
    try:
        offset = parse_offset(name)
    except ValueError as exc:
        raise ResolutionError(str(exc)) from exc
    if offset is None:
        return None
    return offset_descriptor(offset)


class ZoneInfoResolver(TimezoneResolver):
    """Resolve IANA names through the system tz database (``zoneinfo``).

    Offsets are computed for the requested instant, so names with daylight
    saving rules resolve to different descriptors across the year. Ambiguous
    wall-clock times take the first occurrence (``fold=0``).
    """

    def resolve(self, name: str, at: datetime) -> TimezoneDescriptor:
        if not isinstance(name, str) or not name.strip():
            raise ResolutionError("timezone name is empty")
        name = name.strip()
        fixed = resolve_offset_token(name)
        if fixed is not None:
            return fixed
        try:
            zone = _zone(name)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise ResolutionError(f"Unknown timezone: {name!r}") from exc

        local = at.replace(tzinfo=zone)
        offset = local.utcoffset() or timedelta(0)
        dst = local.dst() or timedelta(0)
        logger.debug("Resolved timezone %s at %s: offset=%s dst=%s", name, at, offset, dst)
        return TimezoneDescriptor(
            full_name=name,
            offset=offset,
            dst=dst,
            abbreviation=local.tzname(),
        )
