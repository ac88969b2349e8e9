from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from datetimetz.domain.timezone import TimezoneDescriptor
from datetimetz.domain.value import CanonicalDateTime

ISO_PROFILE = "iso"


class TimezoneResolver(ABC):
    """Resolve a timezone name or offset token at a given naive instant."""

    def __call__(self, name: str, at: datetime) -> TimezoneDescriptor:
        return self.resolve(name, at)

    @abstractmethod
    def resolve(self, name: str, at: datetime) -> TimezoneDescriptor:
        """Return the descriptor valid at ``at``; raise ResolutionError when unknown."""
        ...


class DateParser(ABC):
    """Parse text into a CanonicalDateTime using a named format profile."""

    def __call__(self, text: str, profile: str = ISO_PROFILE) -> CanonicalDateTime:
        return self.parse(text, profile)

    @abstractmethod
    def parse(self, text: str, profile: str = ISO_PROFILE) -> CanonicalDateTime:
        """Return the parsed value; raise ParseError when the text does not match."""
        ...
