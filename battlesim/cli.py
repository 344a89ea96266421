"""Command line entry point: run a battle scenario file."""

from __future__ import annotations

import sys
from typing import Sequence

from battlesim.commands import CreateMap, March, SpawnHunter, SpawnSwordsman
from battlesim.parser import CommandParser
from battlesim.simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Read the scenario named on the command line and play the battle."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        raise SystemExit("Error: No file specified in command line argument")
    path = args[0]
    try:
        scenario = open(path, encoding="utf-8")
    except OSError:
        raise SystemExit(f"Error: File not found - {path}") from None

    with scenario:
        simulation = Simulation()
        sys.stdout.write("Commands:\n")

        parser = CommandParser()
        parser.add(CreateMap, lambda c: simulation.create_map(c.width, c.height))
        parser.add(
            SpawnSwordsman,
            lambda c: simulation.add_warrior(c.unit_id, c.x, c.y, c.hp, c.strength),
        )
        parser.add(
            SpawnHunter,
            lambda c: simulation.add_archer(
                c.unit_id, c.x, c.y, c.hp, c.agility, c.strength, c.range
            ),
        )
        parser.add(
            March,
            lambda c: simulation.add_march_command(c.unit_id, c.target_x, c.target_y),
        )
        sys.stdout.write("\n")
        sys.stdout.flush()

        parser.parse(scenario)

    simulation.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())