"""Records written to the event log, and helpers that print their fields."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, TextIO


def _labelled(label: str, default: Any = 0) -> Any:
    """A dataclass field that is printed and parsed under ``label``."""
    return field(default=default, metadata={"label": label})


def _field_items(record: Any) -> list[tuple[str, Any]]:
    """The (label, value) pairs of a record, in declaration order."""
    return [(f.metadata.get("label", f.name), getattr(record, f.name)) for f in fields(record)]


def format_fields(record: Any) -> str:
    """Render every field as ``label=value`` followed by a space."""
    return "".join(f"{label}={value} " for label, value in _field_items(record))


def print_debug(stream: TextIO, record: Any) -> None:
    """Write the record's name and fields on one line."""
    stream.write(f"{record.NAME} {format_fields(record)}\n")


@dataclass
class MapCreated:
    NAME: ClassVar[str] = "MAP_CREATED"

    width: int = _labelled("width")
    height: int = _labelled("height")


@dataclass
class MarchEnded:
    NAME: ClassVar[str] = "MARCH_ENDED"

    unit_id: int = _labelled("unitId")
    x: int = _labelled("x")
    y: int = _labelled("y")


@dataclass
class MarchStarted:
    NAME: ClassVar[str] = "MARCH_STARTED"

    unit_id: int = _labelled("unitId")
    x: int = _labelled("x")
    y: int = _labelled("y")
    target_x: int = _labelled("targetX")
    target_y: int = _labelled("targetY")


@dataclass
class UnitAttacked:
    NAME: ClassVar[str] = "UNIT_ATTACKED"

    attacker_unit_id: int = _labelled("attackerUnitId")
    target_unit_id: int = _labelled("targetUnitId")
    damage: int = _labelled("damage")
    target_hp: int = _labelled("targetHp")


@dataclass
class UnitDied:
    NAME: ClassVar[str] = "UNIT_DIED"

    unit_id: int = _labelled("unitId")


@dataclass
class UnitMoved:
    NAME: ClassVar[str] = "UNIT_MOVED"

    unit_id: int = _labelled("unitId")
    x: int = _labelled("x")
    y: int = _labelled("y")


@dataclass
class UnitSpawned:
    NAME: ClassVar[str] = "UNIT_SPAWNED"

    unit_id: int = _labelled("unitId")
    unit_type: str = _labelled("unitType", "")
    x: int = _labelled("x")
    y: int = _labelled("y")