import io

import pytest

from battlesim.commands import CreateMap, March, SpawnHunter, SpawnSwordsman
from battlesim.records import format_fields, print_debug


def _labels(record):
    return [item.split("=", 1)[0] for item in format_fields(record).split()]


@pytest.mark.parametrize(
    "command_type, name",
    [
        (CreateMap, "CREATE_MAP"),
        (March, "MARCH"),
        (SpawnHunter, "SPAWN_HUNTER"),
        (SpawnSwordsman, "SPAWN_SWORDSMAN"),
    ],
)
def test_command_names(command_type, name):
    assert command_type.NAME == name


def test_spawn_hunter_field_order():
    assert _labels(SpawnHunter()) == ["unitId", "x", "y", "hp", "agility", "strength", "range"]


def test_spawn_swordsman_field_order():
    assert _labels(SpawnSwordsman()) == ["unitId", "x", "y", "hp", "strength"]


def test_march_field_order():
    assert _labels(March()) == ["unitId", "targetX", "targetY"]


def test_defaults_are_zero():
    hunter = SpawnHunter()
    assert (hunter.unit_id, hunter.x, hunter.y, hunter.hp, hunter.agility, hunter.strength, hunter.range) == (
        0, 0, 0, 0, 0, 0, 0,
    )


def test_positional_construction_follows_order():
    command = SpawnSwordsman(1, 2, 3, 4, 5)
    assert command.unit_id == 1
    assert command.hp == 4
    assert command.strength == 5


def test_print_debug_on_command():
    buffer = io.StringIO()
    print_debug(buffer, CreateMap(10, 10))
    assert buffer.getvalue() == "CREATE_MAP width=10 height=10 \n"