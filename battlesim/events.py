"""A type-keyed event bus and the events carried on it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from battlesim.ecs import Entity


class Event:
    """Base class for events carried by the bus."""


@dataclass
class AttackEvent(Event):
    attacker: Entity
    target: Entity
    damage_hit_points: int


class EventBus:
    """Delivers events to the callbacks subscribed to their type."""

    def __init__(self) -> None:
        self._subscribers: dict[type, list[Callable[[Any], None]]] = {}

    def subscribe(self, event_type: type, callback: Callable[[Any], None]) -> None:
        self._subscribers.setdefault(event_type, []).append(callback)

    def emit(self, event_type: type, *args: Any, **kwargs: Any) -> None:
        """Build a fresh event for each subscriber and call it, in subscription order."""
        for handler in list(self._subscribers.get(event_type, ())):
            handler(event_type(*args, **kwargs))

    def reset(self) -> None:
        self._subscribers.clear()