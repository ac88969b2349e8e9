from __future__ import annotations

from datetime import date, datetime, time
from typing import Any

from datetimetz.domain.timezone import TimezoneDescriptor
from datetimetz.domain.value import CanonicalDateTime
from datetimetz.domain.wire import WireComposite, WireTimestamp
from datetimetz.errors import (
    InvalidFormat,
    InvalidValue,
    MalformedComposite,
    ParseError,
    ResolutionError,
    UnknownTimezone,
    Unsupported,
)
from datetimetz.interfaces import ISO_PROFILE, DateParser, TimezoneResolver
from datetimetz.observability import SUBMILLISECOND_TRUNCATED, CodecEvent, Observer
from datetimetz.parsing.iso import IsoDateParser
from datetimetz.resolvers.tzdb import ZoneInfoResolver
from datetimetz.schema import TYPE_NAME, is_blank
from datetimetz.timezones import normalize_timezone, timezone_name


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _int_fields(value: Any, arity: int, label: str) -> tuple[int, ...]:
    if not isinstance(value, (tuple, list)) or len(value) != arity:
        raise MalformedComposite(f"{label} must be a {arity}-tuple, got {value!r}")
    if not all(_is_int(v) for v in value):
        raise MalformedComposite(f"{label} fields must be integers, got {value!r}")
    return tuple(value)


def _date_fields(value: Any) -> tuple[int, ...]:
    # datetime is a date subclass; a full timestamp in the date slot is a shape error
    if isinstance(value, date) and not isinstance(value, datetime):
        return (value.year, value.month, value.day)
    return _int_fields(value, 3, "date")


def _time_fields(value: Any) -> tuple[int, ...]:
    if isinstance(value, time):
        if value.tzinfo is not None:
            raise MalformedComposite("time-of-day must be naive")
        return (value.hour, value.minute, value.second, value.microsecond)
    return _int_fields(value, 4, "time")


def _naive_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            raise MalformedComposite("timestamp must be naive")
        return value
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        raise MalformedComposite(f"timestamp must be a (date, time) pair, got {value!r}")
    date_part, time_part = value
    fields = _date_fields(date_part) + _time_fields(time_part)
    try:
        return datetime(*fields)
    except ValueError as exc:
        raise MalformedComposite(f"timestamp out of range: {exc}") from exc


def _split_composite(wire: Any) -> tuple[datetime, str]:
    if not isinstance(wire, (tuple, list)) or len(wire) != 2:
        raise MalformedComposite(
            f"composite must be a (timestamp, timezone_name) pair, got {wire!r}"
        )
    timestamp, name = wire
    if not isinstance(name, str):
        raise MalformedComposite(
            f"timezone name must be text, got {type(name).__name__}"
        )
    return _naive_timestamp(timestamp), name


class DateTimeTzType:
    """Storage type converting CanonicalDateTime to and from its wire composite.

    Holds only its collaborators; every call is a pure function of its input.

    - ``cast`` validates application input (ISO text or a CanonicalDateTime).
    - ``load``/``decode`` builds a value from the stored composite, resolving the
      timezone name at the stored instant.
    - ``dump``/``encode`` produces the stored composite.
    """

    def __init__(
        self,
        resolver: TimezoneResolver | None = None,
        parser: DateParser | None = None,
        observer: Observer | None = None,
    ) -> None:
        self.resolver = resolver or ZoneInfoResolver()
        self.parser = parser or IsoDateParser(self.resolver)
        self.observer = observer

    @staticmethod
    def type() -> str:
        return TYPE_NAME

    @staticmethod
    def blank(value: Any) -> bool:
        return is_blank(value)

    def cast(self, value: Any) -> CanonicalDateTime:
        if isinstance(value, str):
            return self._cast_text(value)
        if isinstance(value, CanonicalDateTime):
            return self._cast_value(value)
        raise Unsupported(f"cannot cast {type(value).__name__} to {TYPE_NAME}")

    def _cast_text(self, text: str) -> CanonicalDateTime:
        try:
            parsed = self.parser.parse(text, ISO_PROFILE)
        except ParseError as exc:
            raise InvalidFormat(str(exc)) from exc
        return self._cast_value(parsed)

    @staticmethod
    def _cast_value(value: CanonicalDateTime) -> CanonicalDateTime:
        if value.timezone is None:
            return value.with_timezone(normalize_timezone(None))
        return value

    def decode(self, wire: Any) -> CanonicalDateTime:
        naive, name = _split_composite(wire)
        # Milliseconds are the value's precision; the remainder is dropped, not rounded.
        value = CanonicalDateTime.from_datetime(naive)
        try:
            tz = self.resolver.resolve(name, value.naive())
        except ResolutionError as exc:
            raise UnknownTimezone(str(exc)) from exc
        if self.observer is not None and naive.microsecond % 1000:
            self.observer(
                CodecEvent(
                    type=SUBMILLISECOND_TRUNCATED,
                    payload={"microsecond": naive.microsecond, "timezone": name},
                )
            )
        return value.with_timezone(tz)

    def encode(self, value: Any) -> WireComposite:
        if not isinstance(value, CanonicalDateTime):
            raise InvalidValue(f"expected CanonicalDateTime, got {type(value).__name__}")
        tz = value.timezone
        if tz is not None and (not isinstance(tz, TimezoneDescriptor) or not tz.full_name):
            raise InvalidValue(f"invalid timezone descriptor: {tz!r}")
        if not _is_int(value.millisecond) or not 0 <= value.millisecond <= 999:
            raise InvalidValue(f"millisecond out of range: {value.millisecond!r}")
        try:
            naive = value.naive()
        except (TypeError, ValueError) as exc:
            raise InvalidValue(str(exc)) from exc
        return WireComposite(
            timestamp=WireTimestamp(
                date=(naive.year, naive.month, naive.day),
                time=(naive.hour, naive.minute, naive.second, value.millisecond * 1000),
            ),
            timezone_name=timezone_name(tz),
        )

    load = decode
    dump = encode


def cast(value: Any, *, resolver: TimezoneResolver | None = None) -> CanonicalDateTime:
    return DateTimeTzType(resolver=resolver).cast(value)


def decode(wire: Any, *, resolver: TimezoneResolver | None = None) -> CanonicalDateTime:
    return DateTimeTzType(resolver=resolver).decode(wire)


def encode(value: Any) -> WireComposite:
    return DateTimeTzType().encode(value)
