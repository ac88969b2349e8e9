from __future__ import annotations

import logging
from typing import Any

from datetimetz.codec import DateTimeTzType
from datetimetz.config.resolution import cascade, resolve_log_level
from datetimetz.config.settings import CodecConfig, ResolverConfig
from datetimetz.interfaces import TimezoneResolver
from datetimetz.observability import ObserverRegistry, default_observer_registry
from datetimetz.parsing.iso import IsoDateParser
from datetimetz.utils.load import load_ep

RESOLVER_GROUP = "datetimetz.resolvers"
PACKAGE_LOGGER = "datetimetz"

logger = logging.getLogger(__name__)


def build_resolver(config: ResolverConfig) -> TimezoneResolver:
    factory = load_ep(RESOLVER_GROUP, config.name)
    resolver = factory(**config.options)
    if not isinstance(resolver, TimezoneResolver):
        raise TypeError(
            f"Resolver '{config.name}' must build a TimezoneResolver, got {type(resolver).__name__}"
        )
    logger.debug("Loaded timezone resolver '%s' (%s)", config.name, type(resolver).__name__)
    return resolver


def build_codec(
    config: CodecConfig | None = None,
    *,
    log_level: Any = None,
    observers: ObserverRegistry | None = None,
) -> DateTimeTzType:
    """Assemble a codec from config: resolver plugin, ISO parser, optional observer.

    ``log_level`` overrides ``config.log_level``; when either is set it is applied
    to the package logger.
    """
    config = config or CodecConfig()
    level = cascade(log_level, config.log_level)
    if level is not None:
        decision = resolve_log_level(level)
        logging.getLogger(PACKAGE_LOGGER).setLevel(decision.value)

    resolver = build_resolver(config.resolver)
    observer = None
    if config.observe_truncation:
        registry = observers or default_observer_registry()
        observer = registry.get("truncation", logging.getLogger(f"{PACKAGE_LOGGER}.codec"))
    return DateTimeTzType(
        resolver=resolver,
        parser=IsoDateParser(resolver),
        observer=observer,
    )
