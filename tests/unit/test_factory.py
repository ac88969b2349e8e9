import logging
from datetime import timedelta

import pytest

from datetimetz.config.settings import CodecConfig, ResolverConfig
from datetimetz.factory import build_codec, build_resolver
from datetimetz.observability import SUBMILLISECOND_TRUNCATED, CodecEvent, ObserverRegistry
from datetimetz.resolvers.fixed import FixedOffsetResolver
from datetimetz.resolvers.tzdb import ZoneInfoResolver
from datetimetz.utils.load import load_ep


@pytest.fixture(autouse=True)
def _restore_package_logger():
    package_logger = logging.getLogger("datetimetz")
    level = package_logger.level
    yield
    package_logger.setLevel(level)


def test_default_codec_uses_zoneinfo_resolver() -> None:
    codec = build_codec()

    assert isinstance(codec.resolver, ZoneInfoResolver)
    assert codec.parser.resolver is codec.resolver
    assert codec.observer is None


def test_fixed_resolver_built_from_options() -> None:
    config = CodecConfig(
        resolver=ResolverConfig(name="fixed", options={"offsets": {"Europe/Helsinki": "+02:00"}})
    )

    codec = build_codec(config)

    assert isinstance(codec.resolver, FixedOffsetResolver)
    value = codec.decode((((2024, 7, 1), (0, 0, 0, 0)), "Europe/Helsinki"))
    assert value.timezone.offset == timedelta(hours=2)


def test_unknown_resolver_name_lists_available() -> None:
    with pytest.raises(ValueError, match="fixed"):
        build_resolver(ResolverConfig(name="nonexistent"))


def test_resolver_factory_must_build_a_resolver(monkeypatch) -> None:
    monkeypatch.setattr("datetimetz.factory.load_ep", lambda group, name: dict)

    with pytest.raises(TypeError):
        build_resolver(ResolverConfig(name="zoneinfo"))


def test_builtin_fallbacks_resolve_classes() -> None:
    assert load_ep("datetimetz.resolvers", "zoneinfo") is ZoneInfoResolver
    assert load_ep("datetimetz.resolvers", "fixed") is FixedOffsetResolver


def test_log_level_applied_to_package_logger() -> None:
    build_codec(CodecConfig(log_level="ERROR"))
    assert logging.getLogger("datetimetz").level == logging.ERROR

    build_codec(CodecConfig(log_level="ERROR"), log_level="DEBUG")
    assert logging.getLogger("datetimetz").level == logging.DEBUG


def test_truncation_observer_attached_when_enabled() -> None:
    events: list[CodecEvent] = []
    registry = ObserverRegistry()
    registry.register("truncation", lambda logger: events.append)

    codec = build_codec(CodecConfig(observe_truncation=True), observers=registry)
    codec.decode((((2024, 1, 1), (0, 0, 0, 1500)), "UTC"))
    codec.decode((((2024, 1, 1), (0, 0, 0, 2000)), "UTC"))

    assert [e.type for e in events] == [SUBMILLISECOND_TRUNCATED]
    assert events[0].payload == {"microsecond": 1500, "timezone": "UTC"}
