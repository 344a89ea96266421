"""The battle simulation: units, the map and the turn loop."""

from __future__ import annotations

from typing import TextIO

from battlesim.ai import AISystem
from battlesim.components import (
    AgilityComponent,
    AIComponent,
    HealthComponent,
    MeleeAttackComponent,
    MovementTargetComponent,
    PositionComponent,
    RangeAttackComponent,
    StrengthComponent,
    UnitComponent,
)
from battlesim.ecs import Entity, Registry
from battlesim.eventlog import EventLog
from battlesim.events import EventBus
from battlesim.gamemap import GameMap
from battlesim.records import MapCreated, MarchStarted, UnitSpawned


class Simulation:
    """Holds the battlefield and plays turns until at most one unit is left."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._event_log = EventLog(stream)
        self._units: dict[int, Entity] = {}
        self._map: GameMap | None = None
        self._spawn_order = 0
        self._turn = 1
        self._running = False
        self.init()

    def init(self) -> None:
        """Start afresh with a new registry and turn counter."""
        self._event_bus = EventBus()
        self._registry = Registry()
        self._registry.add_system(AISystem(self._event_log, lambda: self._turn))
        self._running = True
        self._turn = 1

    @property
    def turn_number(self) -> int:
        return self._turn

    @property
    def game_map(self) -> GameMap | None:
        return self._map

    @property
    def is_running(self) -> bool:
        return self._running

    def run(self) -> None:
        """Place units on the map, then play turns until the battle is over."""
        self.update_map()
        while self._running:
            self._turn += 1
            self._update()

    def stop(self) -> None:
        self._running = False

    def _update(self) -> None:
        self._event_bus.reset()
        self._registry.update()
        if not self._registry.get_system(AISystem).update(self._map):
            self._running = False

    def update_map(self) -> None:
        """Mark every unit's tile with its game id."""
        if not self._units:
            return
        if self._map is None:
            raise RuntimeError("no map has been created")
        for entity in self._units.values():
            position = entity.get_component(PositionComponent)
            unit = entity.get_component(UnitComponent)
            self._map.set_tile(position.x, position.y, unit.game_id)

    def create_map(self, width: int, height: int) -> None:
        self._map = GameMap(width, height)
        self._event_log.log(self._turn, MapCreated(width, height))

    def _spawn(self, game_id: int, x: int, y: int, hp: int, strength: int) -> Entity:
        entity = self._registry.create_entity()
        entity.add_component(UnitComponent(game_id, self._spawn_order))
        self._spawn_order += 1
        entity.add_component(PositionComponent(x, y))
        entity.add_component(HealthComponent(hp))
        entity.add_component(MeleeAttackComponent(hp))
        entity.add_component(StrengthComponent(strength))
        return entity

    def add_warrior(self, game_id: int, x: int, y: int, hp: int, strength: int) -> None:
        warrior = self._spawn(game_id, x, y, hp, strength)
        warrior.add_component(AIComponent())
        # An id already in use keeps its original unit.
        self._units.setdefault(game_id, warrior)
        self._event_log.log(self._turn, UnitSpawned(game_id, "Swordsman", x, y))

    def add_archer(
        self, game_id: int, x: int, y: int, hp: int, agility: int, strength: int, reach: int
    ) -> None:
        archer = self._spawn(game_id, x, y, hp, strength)
        archer.add_component(AgilityComponent(agility))
        archer.add_component(RangeAttackComponent(reach))
        archer.add_component(AIComponent())
        self._units.setdefault(game_id, archer)
        self._event_log.log(self._turn, UnitSpawned(game_id, "Hunter", x, y))

    def add_march_command(self, game_id: int, target_x: int, target_y: int) -> None:
        try:
            unit = self._units[game_id]
        except KeyError:
            raise LookupError(f"Unit with gameId {game_id} not found") from None
        unit.add_component(MovementTargetComponent(target_x, target_y))
        position = unit.get_component(PositionComponent)
        self._event_log.log(
            self._turn, MarchStarted(game_id, position.x, position.y, target_x, target_y)
        )