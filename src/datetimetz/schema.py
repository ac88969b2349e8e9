"""Storage-type metadata for the ``datetimetz`` composite column type."""

from __future__ import annotations

import re
from typing import Any

TYPE_NAME = "datetimetz"

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$", re.ASCII)


def is_blank(value: Any) -> bool:
    """True for values a storage layer should treat as "no value" before casting."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def composite_type_ddl(type_name: str = TYPE_NAME) -> str:
    """Return the PostgreSQL DDL declaring the composite type.

    Columns declared with this type store ``(dt timestamptz, tz varchar)``;
    the codec's wire composite maps onto those two fields in order.
    """
    if not _IDENTIFIER_RE.fullmatch(type_name or ""):
        raise ValueError(f"type_name must be a plain SQL identifier, got {type_name!r}")
    return (
        f"CREATE TYPE {type_name} AS (\n"
        "    dt timestamptz,\n"
        "    tz varchar\n"
        ");"
    )
