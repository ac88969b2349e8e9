from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta, timezone

UTC_NAME = "UTC"


@dataclass(frozen=True)
class TimezoneDescriptor:
    """Timezone identity resolved for one specific instant.

    ``offset`` and ``dst`` are only valid for the instant the descriptor was
    resolved at; zones whose offset varies by date must be resolved again for
    every value. Identity is the name plus the offset; ``dst`` and
    ``abbreviation`` are informational and excluded from equality.
    """

    full_name: str
    offset: timedelta = timedelta(0)
    dst: timedelta = field(default=timedelta(0), compare=False)
    abbreviation: str | None = field(default=None, compare=False)

    @property
    def is_utc(self) -> bool:
        return self.full_name == UTC_NAME and self.offset == timedelta(0)

    def tzinfo(self) -> timezone:
        """Fixed-offset tzinfo matching this descriptor's resolved offset."""
        if self.is_utc:
            return timezone.utc
        return timezone(self.offset, self.abbreviation or self.full_name)


UTC = TimezoneDescriptor(full_name=UTC_NAME, abbreviation=UTC_NAME)
