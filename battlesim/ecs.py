"""Entity-component-system core: component pools, entities, systems and the registry."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Pool(Generic[T]):
    """A growable sequence of component slots indexed by entity id."""

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError(f"pool size must not be negative, got {size}")
        self._data: list[T | None] = [None] * size

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def resize(self, size: int) -> None:
        """Grow with empty slots or shrink by dropping trailing slots."""
        if size < 0:
            raise ValueError(f"pool size must not be negative, got {size}")
        if size < len(self._data):
            del self._data[size:]
        else:
            self._data.extend([None] * (size - len(self._data)))

    def clear(self) -> None:
        self._data.clear()

    def add(self, item: T) -> None:
        self._data.append(item)

    def set(self, index: int, item: T) -> None:
        self._check(index)
        self._data[index] = item

    def get(self, index: int) -> T | None:
        self._check(index)
        return self._data[index]

    def remove(self, index: int) -> None:
        self._check(index)
        del self._data[index]

    def __getitem__(self, index: int) -> T | None:
        return self.get(index)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._data):
            raise IndexError(f"pool index {index} out of range")


@dataclass(frozen=True, order=True)
class Entity:
    """A handle to an entity; equality, ordering and hashing use the id only."""

    id: int
    registry: Registry | None = field(default=None, compare=False, repr=False)

    def _owner(self) -> Registry:
        if self.registry is None:
            raise RuntimeError(f"entity {self.id} is not attached to a registry")
        return self.registry

    def kill(self) -> None:
        self._owner().kill_entity(self)

    def add_component(self, component: Any) -> None:
        self._owner().add_component(self, component)

    def remove_component(self, component_type: type) -> None:
        self._owner().remove_component(self, component_type)

    def has_component(self, component_type: type) -> bool:
        return self._owner().has_component(self, component_type)

    def get_component(self, component_type: type[T]) -> T:
        return self._owner().get_component(self, component_type)


class System:
    """Holds the entities whose components match its required signature."""

    def __init__(self) -> None:
        self._signature: set[type] = set()
        self._entities: list[Entity] = []

    def add_entity(self, entity: Entity) -> None:
        self._entities.append(entity)

    def remove_entity(self, entity: Entity) -> None:
        self._entities = [other for other in self._entities if other != entity]

    @property
    def entities(self) -> list[Entity]:
        """A copy of the entities currently in the system."""
        return list(self._entities)

    @property
    def component_signature(self) -> frozenset[type]:
        return frozenset(self._signature)

    def require_component(self, component_type: type) -> None:
        self._signature.add(component_type)


class Registry:
    """Creates entities, stores their components and dispatches them to systems."""

    def __init__(self) -> None:
        self._num_entities = 0
        self._freed_ids: deque[int] = deque()
        self._pools: dict[type, Pool[Any]] = {}
        self._signatures: list[set[type]] = []
        self._systems: dict[type, System] = {}
        self._to_add: set[Entity] = set()
        self._to_kill: set[Entity] = set()

    def update(self) -> None:
        """Apply pending entity additions and removals."""
        for entity in sorted(self._to_add):
            self.add_entity_to_systems(entity)
        self._to_add.clear()

        for entity in sorted(self._to_kill):
            self.remove_entity_from_systems(entity)
            self._signatures[entity.id].clear()
            self._freed_ids.append(entity.id)
        self._to_kill.clear()

    def create_entity(self) -> Entity:
        if self._freed_ids:
            entity_id = self._freed_ids.popleft()
        else:
            entity_id = self._num_entities
            self._num_entities += 1
        while entity_id >= len(self._signatures):
            self._signatures.append(set())
        entity = Entity(entity_id, self)
        self._to_add.add(entity)
        return entity

    def kill_entity(self, entity: Entity) -> None:
        self._to_kill.add(entity)

    def add_component(self, entity: Entity, component: Any) -> None:
        pool = self._pools.setdefault(type(component), Pool())
        if entity.id >= len(pool):
            pool.resize(max(self._num_entities, entity.id + 1))
        pool.set(entity.id, component)
        self._signatures[entity.id].add(type(component))

    def remove_component(self, entity: Entity, component_type: type) -> None:
        self._signatures[entity.id].discard(component_type)

    def has_component(self, entity: Entity, component_type: type) -> bool:
        return component_type in self._signatures[entity.id]

    def get_component(self, entity: Entity, component_type: type[T]) -> T:
        pool = self._pools.get(component_type)
        if pool is None or entity.id >= len(pool) or pool[entity.id] is None:
            raise KeyError(f"entity {entity.id} has no {component_type.__name__}")
        return pool[entity.id]

    def add_system(self, system: System) -> None:
        """Register a system; an existing system of the same type is kept."""
        self._systems.setdefault(type(system), system)

    def remove_system(self, system_type: type) -> None:
        try:
            del self._systems[system_type]
        except KeyError:
            raise KeyError(f"no system {system_type.__name__}") from None

    def has_system(self, system_type: type) -> bool:
        return system_type in self._systems

    def get_system(self, system_type: type[T]) -> T:
        try:
            return self._systems[system_type]
        except KeyError:
            raise KeyError(f"no system {system_type.__name__}") from None

    def add_entity_to_systems(self, entity: Entity) -> None:
        signature = self._signatures[entity.id]
        for system in self._systems.values():
            if system.component_signature <= signature:
                system.add_entity(entity)

    def remove_entity_from_systems(self, entity: Entity) -> None:
        for system in self._systems.values():
            system.remove_entity(entity)