from datetime import timedelta

import pytest

from datetimetz.codec import DateTimeTzType, cast, decode, encode
from datetimetz.domain.timezone import UTC, TimezoneDescriptor
from datetimetz.domain.value import CanonicalDateTime
from datetimetz.domain.wire import WireComposite, WireTimestamp


@pytest.mark.parametrize(
    "value",
    [
        CanonicalDateTime(2021, 3, 15, 10, 30, 0, 0, timezone=UTC),
        CanonicalDateTime(1999, 12, 31, 23, 59, 59, 999, timezone=UTC),
        CanonicalDateTime(
            2024, 2, 29, 6, 0, 0, 1,
            timezone=TimezoneDescriptor(full_name="Europe/Helsinki", offset=timedelta(hours=2)),
        ),
        CanonicalDateTime(
            2024, 7, 4, 18, 15, 0, 500,
            timezone=TimezoneDescriptor(full_name="-03:00", offset=timedelta(hours=-3)),
        ),
    ],
)
def test_encode_then_decode_restores_value(codec, value: CanonicalDateTime) -> None:
    assert codec.decode(codec.encode(value)) == value


def test_round_trip_of_naive_value_gains_utc(codec) -> None:
    value = CanonicalDateTime(2021, 3, 15, 10, 30)

    restored = codec.decode(codec.encode(value))

    assert restored == value.with_timezone(UTC)


def test_decode_then_encode_zero_pads_sub_millisecond_input(codec) -> None:
    wire = codec.encode(codec.decode((((2021, 3, 15), (10, 30, 0, 123456)), "UTC")))

    assert wire.timestamp.time == (10, 30, 0, 123000)


def test_text_cast_then_encode_end_to_end() -> None:
    value = cast("2021-03-15T10:30:00Z")

    assert value == CanonicalDateTime(2021, 3, 15, 10, 30, 0, 0, timezone=UTC)
    assert encode(value) == WireComposite(
        timestamp=WireTimestamp(date=(2021, 3, 15), time=(10, 30, 0, 0)),
        timezone_name="UTC",
    )
    assert decode(encode(value)) == value


def test_round_trip_through_real_tz_database() -> None:
    codec = DateTimeTzType()
    value = codec.decode((((2024, 7, 1), (12, 0, 0, 0)), "Europe/Helsinki"))

    assert codec.decode(codec.encode(value)) == value
    assert value.timezone.offset == timedelta(hours=3)


@pytest.mark.parametrize(
    "tz",
    [
        TimezoneDescriptor(full_name="UTC"),
        TimezoneDescriptor(full_name="Europe/Helsinki", offset=timedelta(hours=2)),
    ],
)
def test_round_trip_of_hand_built_descriptor_through_tz_database(tz: TimezoneDescriptor) -> None:
    codec = DateTimeTzType()
    value = CanonicalDateTime(2024, 1, 15, 12, timezone=tz)

    restored = codec.decode(codec.encode(value))

    assert restored == value
    assert restored.timezone.abbreviation is not None
