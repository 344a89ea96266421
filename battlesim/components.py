"""Component data attached to simulated units."""

from dataclasses import dataclass


@dataclass
class AIComponent:
    alive: bool = True


@dataclass
class AgilityComponent:
    agility: int = 0


@dataclass
class HealthComponent:
    health_points: int = 0


@dataclass
class MeleeAttackComponent:
    health_points: int = 0


@dataclass
class MovementTargetComponent:
    x: int = 0
    y: int = 0


@dataclass
class PositionComponent:
    x: int = 0
    y: int = 0


@dataclass
class RangeAttackComponent:
    range: int = 0


@dataclass
class StrengthComponent:
    strength: int = 0


@dataclass
class UnitComponent:
    game_id: int = 0
    spawn_order: int = 0