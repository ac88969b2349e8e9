from __future__ import annotations


class DateTimeTzError(Exception):
    """Base class for errors raised by the datetimetz codec."""


class CastError(DateTimeTzError, ValueError):
    """Raised when input cannot be cast to a CanonicalDateTime."""


class InvalidFormat(CastError):
    """Text input does not match the ISO-8601 profile."""


class Unsupported(CastError):
    """Input is of a shape the caster does not recognize."""


class DecodeError(DateTimeTzError, ValueError):
    """Raised when a stored composite cannot be loaded."""


class MalformedComposite(DecodeError):
    """Stored composite does not have the expected tuple shape."""


class UnknownTimezone(DecodeError):
    """Stored timezone name could not be resolved."""


class EncodeError(DateTimeTzError, ValueError):
    """Raised when a value cannot be dumped to its storage composite."""


class InvalidValue(EncodeError):
    """Value violates the CanonicalDateTime invariants."""


class ParseError(ValueError):
    """Raised by date parsers when text does not match the requested profile."""


class ResolutionError(LookupError):
    """Raised by timezone resolvers when a name or offset is unknown."""
