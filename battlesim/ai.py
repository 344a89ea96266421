"""Turn-by-turn behaviour of every unit on the battlefield."""

from __future__ import annotations

from typing import Callable, Iterator

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
from battlesim.ecs import Entity, System
from battlesim.eventlog import EventLog
from battlesim.gamemap import GameMap
from battlesim.mathutil import normalize
from battlesim.records import UnitAttacked, UnitDied, UnitMoved

# Health points are unsigned 32-bit values: damage past zero wraps around.
_UINT32_MASK = 0xFFFFFFFF


class AISystem(System):
    """Lets each living unit attack whatever it can reach, or else march on."""

    def __init__(self, event_log: EventLog, turn: Callable[[], int]) -> None:
        super().__init__()
        for component_type in (AIComponent, PositionComponent, HealthComponent, UnitComponent):
            self.require_component(component_type)
        self._event_log = event_log
        self._turn = turn

    def update(self, game_map: GameMap | None) -> bool:
        """Play one turn for every living unit; return whether the battle goes on."""
        ordered = sorted(self.entities, key=lambda e: e.get_component(UnitComponent).spawn_order)
        for entity in ordered:
            if not entity.get_component(AIComponent).alive:
                continue
            if entity.has_component(RangeAttackComponent):
                self.range_behavior(entity, game_map)
            elif entity.has_component(MeleeAttackComponent):
                self.melee_behavior(entity, game_map)
        return not self.check_if_finish()

    def check_if_finish(self) -> bool:
        """True when fewer than two units are still alive."""
        alive = sum(1 for entity in self.entities if entity.get_component(AIComponent).alive)
        return alive < 2

    def melee_behavior(self, entity: Entity, game_map: GameMap | None) -> None:
        finished_turn = False
        strength = entity.get_component(StrengthComponent).strength
        for other in self._others(entity):
            if self.are_in_range(entity, other, 1):
                finished_turn = True
                self._strike(entity, other, strength)

        if not finished_turn and entity.has_component(MovementTargetComponent):
            self.move_behavior(entity, game_map)

    def range_behavior(self, entity: Entity, game_map: GameMap | None) -> None:
        finished_turn = False
        strength = entity.get_component(StrengthComponent).strength
        for other in self._others(entity):
            if self.are_in_range(entity, other, 0):
                finished_turn = True
                self._strike(entity, other, strength)

        if not finished_turn:
            reach = entity.get_component(RangeAttackComponent).range
            agility = entity.get_component(AgilityComponent).agility
            for other in self._others(entity):
                if self.are_in_range(entity, other, reach):
                    finished_turn = True
                    self._strike(entity, other, agility)

        if not finished_turn and entity.has_component(MovementTargetComponent):
            self.move_behavior(entity, game_map)

    def move_behavior(self, entity: Entity, game_map: GameMap | None) -> None:
        """Take one step toward the movement target, if the map allows it."""
        position = entity.get_component(PositionComponent)
        target = entity.get_component(MovementTargetComponent)
        unit_id = entity.get_component(UnitComponent).game_id
        dx, dy = normalize(target.x - position.x, target.y - position.y)
        if dx == 0 and dy == 0:
            return
        if game_map is None:
            raise RuntimeError("no map has been created")
        if game_map.check_bounds(position.x + dx, position.y + dy):
            position.x += dx
            position.y += dy
        self._event_log.log(self._turn(), UnitMoved(unit_id, position.x, position.y))

    def are_in_range(self, entity: Entity, other: Entity, reach: int) -> bool:
        """Chebyshev distance check: each straight or diagonal step counts as one."""
        here = entity.get_component(PositionComponent)
        there = other.get_component(PositionComponent)
        distance = max(abs(here.x - there.x), abs(here.y - there.y))
        return distance <= reach + 1

    def _others(self, entity: Entity) -> Iterator[Entity]:
        return (other for other in self.entities if other != entity)

    def _strike(self, attacker: Entity, target: Entity, damage: int) -> None:
        health = target.get_component(HealthComponent)
        health.health_points = (health.health_points - damage) & _UINT32_MASK
        attacker_id = attacker.get_component(UnitComponent).game_id
        target_id = target.get_component(UnitComponent).game_id
        turn = self._turn()
        self._event_log.log(turn, UnitAttacked(attacker_id, target_id, damage, health.health_points))
        if health.health_points == 0:
            target.get_component(AIComponent).alive = False
            self._event_log.log(turn, UnitDied(target_id))
            target.kill()