import pytest

from datetimetz.codec import DateTimeTzType
from datetimetz.schema import TYPE_NAME, composite_type_ddl, is_blank


def test_type_name() -> None:
    assert DateTimeTzType.type() == TYPE_NAME == "datetimetz"


@pytest.mark.parametrize("value, expected", [(None, True), ("", True), ("  \t", True), ("x", False), (0, False)])
def test_is_blank(value, expected: bool) -> None:
    assert is_blank(value) is expected
    assert DateTimeTzType.blank(value) is expected


def test_composite_type_ddl() -> None:
    assert composite_type_ddl() == (
        "CREATE TYPE datetimetz AS (\n"
        "    dt timestamptz,\n"
        "    tz varchar\n"
        ");"
    )
    assert composite_type_ddl("event_time").startswith("CREATE TYPE event_time AS (")


@pytest.mark.parametrize("name", ["", "1type", "drop table; --", "a-b"])
def test_composite_type_ddl_rejects_non_identifiers(name: str) -> None:
    with pytest.raises(ValueError):
        composite_type_ddl(name)
