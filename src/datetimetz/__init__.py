from .codec import DateTimeTzType, cast, decode, encode
from .domain.timezone import UTC, TimezoneDescriptor
from .domain.value import CanonicalDateTime
from .domain.wire import WireComposite, WireTimestamp
from .errors import (
    CastError,
    DateTimeTzError,
    DecodeError,
    EncodeError,
    InvalidFormat,
    InvalidValue,
    MalformedComposite,
    ParseError,
    ResolutionError,
    UnknownTimezone,
    Unsupported,
)
from .factory import build_codec
from .interfaces import DateParser, TimezoneResolver
from .resolvers.fixed import FixedOffsetResolver
from .resolvers.tzdb import ZoneInfoResolver
from .schema import TYPE_NAME, composite_type_ddl, is_blank

__all__ = [
    "CanonicalDateTime",
    "CastError",
    "DateParser",
    "DateTimeTzError",
    "DateTimeTzType",
    "DecodeError",
    "EncodeError",
    "FixedOffsetResolver",
    "InvalidFormat",
    "InvalidValue",
    "MalformedComposite",
    "ParseError",
    "ResolutionError",
    "TYPE_NAME",
    "TimezoneDescriptor",
    "TimezoneResolver",
    "UTC",
    "UnknownTimezone",
    "Unsupported",
    "WireComposite",
    "WireTimestamp",
    "ZoneInfoResolver",
    "build_codec",
    "cast",
    "composite_type_ddl",
    "decode",
    "encode",
    "is_blank",
]
