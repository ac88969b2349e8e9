from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional


@dataclass(frozen=True)
class CodecEvent:
    type: str
    payload: Mapping[str, object]


SUBMILLISECOND_TRUNCATED = "submillisecond_truncated"

# Observer receives a structured event.
Observer = Callable[[CodecEvent], None]
# Factory builds an observer for a given logger (may return None if not active at current level).
ObserverFactory = Callable[[logging.Logger], Optional[Observer]]


class ObserverRegistry:
    def __init__(self, factories: Optional[Mapping[str, ObserverFactory]] = None) -> None:
        self._factories: dict[str, ObserverFactory] = dict(factories or {})

    def register(self, name: str, factory: ObserverFactory) -> None:
        self._factories[name] = factory

    def get(self, name: str, logger: logging.Logger) -> Optional[Observer]:
        factory = self._factories.get(name)
        if not factory:
            return None
        return factory(logger)


def _truncation_observer_factory(logger: logging.Logger) -> Optional[Observer]:
    if not logger.isEnabledFor(logging.DEBUG):
        return None

    def _observer(event: CodecEvent) -> None:
        if event.type != SUBMILLISECOND_TRUNCATED:
            return
        logger.debug(
            "Dropped sub-millisecond precision on load: microsecond=%s timezone=%s",
            event.payload.get("microsecond"),
            event.payload.get("timezone"),
        )

    return _observer


def default_observer_registry() -> ObserverRegistry:
    registry = ObserverRegistry()
    registry.register("truncation", _truncation_observer_factory)
    return registry
