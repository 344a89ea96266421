"""Commands read from a scenario file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from battlesim.records import _labelled


@dataclass
class CreateMap:
    NAME: ClassVar[str] = "CREATE_MAP"

    width: int = _labelled("width")
    height: int = _labelled("height")


@dataclass
class March:
    NAME: ClassVar[str] = "MARCH"

    unit_id: int = _labelled("unitId")
    target_x: int = _labelled("targetX")
    target_y: int = _labelled("targetY")


@dataclass
class SpawnHunter:
    NAME: ClassVar[str] = "SPAWN_HUNTER"

    unit_id: int = _labelled("unitId")
    x: int = _labelled("x")
    y: int = _labelled("y")
    hp: int = _labelled("hp")
    agility: int = _labelled("agility")
    strength: int = _labelled("strength")
    range: int = _labelled("range")


@dataclass
class SpawnSwordsman:
    NAME: ClassVar[str] = "SPAWN_SWORDSMAN"

    unit_id: int = _labelled("unitId")
    x: int = _labelled("x")
    y: int = _labelled("y")
    hp: int = _labelled("hp")
    strength: int = _labelled("strength")