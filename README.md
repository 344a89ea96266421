# battlesim

A small turn-based battle simulation. Units are spawned on a rectangular map
and given march orders. They then fight turn by turn until fewer than two
remain. Every event is written to standard output as a tick-stamped line.

## Installation

```
pip install .
```

## Running a scenario

Write a command file and pass its path as the only argument:

```
battlesim scenario.txt
```

Exactly one argument is expected. If it is missing, or the file cannot be
opened, the program exits with an error message.

### Command file format

The file holds one command per line, with fields separated by whitespace.
Blank lines are ignored, and so are lines starting with `//`. An unknown
command name raises `ValueError`.

| Command           | Fields                                          |
|-------------------|-------------------------------------------------|
| `CREATE_MAP`      | `width height`                                  |
| `SPAWN_SWORDSMAN` | `unitId x y hp strength`                        |
| `SPAWN_HUNTER`    | `unitId x y hp agility strength range`          |
| `MARCH`           | `unitId targetX targetY`                        |

Fields are read as unsigned 32-bit integers:

- A negative number wraps around.
- Once a field fails to read, that field and every field after it default to `0`.

Example:

```
// a small skirmish
CREATE_MAP 10 10
SPAWN_SWORDSMAN 1 0 0 5 2
SPAWN_HUNTER 2 9 0 10 5 1 4
MARCH 1 9 0
```

A `MARCH` for a unit that has not been spawned raises `LookupError`. If a
second unit is spawned under an id that is already in use, the first unit
keeps that id.

### Output

On start the program prints `Commands:`, then a `Command added NAME` line for
each recognised command, then a blank line. Each event is then printed as:

```
[tick] EVENT_NAME field=value field=value ...
```

The events printed are `MAP_CREATED`, `UNIT_SPAWNED`, `MARCH_STARTED`,
`UNIT_MOVED`, `UNIT_ATTACKED` and `UNIT_DIED`.

### Rules of a turn

Units act in the order they were spawned. Distance is counted in steps, and a
straight step and a diagonal step each count as one.

- A swordsman hits every other unit within 2 steps, and each hit does damage equal to its strength.
- A hunter first hits every unit within 1 step, doing damage equal to its strength.
- If no unit is within 1 step, the hunter shoots every unit within `range + 1` steps, doing damage equal to its agility.
- A unit that attacked nothing takes one step toward its march target:
  - The step is the direction to the target divided by its whole-number length, with the result truncated.
  - If that step comes out as zero, the unit stays put and nothing is logged.
  - If the step would leave the map, the unit stays where it is, but `UNIT_MOVED` is still logged.
- Health is an unsigned 32-bit value, and a unit dies when its health becomes exactly zero.
- Damage that would take health below zero wraps around instead, so the unit survives.
- A unit killed during a turn can still be hit by units acting later in that same turn.

The simulation ends once fewer than two units are alive. Units are placed on
the map when the run starts. A unit placed outside the map raises
`IndexError`. If units exist but no map was created, `RuntimeError` is raised.

## Using it as a library

```python
import sys

from battlesim.simulation import Simulation

sim = Simulation(sys.stdout)
sim.create_map(10, 10)
sim.add_warrior(1, 0, 0, 5, 2)
sim.add_archer(2, 9, 0, 10, 5, 1, 4)
sim.add_march_command(1, 9, 0)
sim.run()
```

`Simulation.init()` starts afresh with a new registry and resets the turn
counter. The constructor already calls it.

The building blocks each live in their own module:

| Module                | Contents                                                     |
|-----------------------|--------------------------------------------------------------|
| `battlesim.ecs`       | `Registry`, `Entity`, `System`, `Pool`                       |
| `battlesim.events`    | `EventBus`, `Event`, `AttackEvent`                           |
| `battlesim.parser`    | `CommandParser`                                              |
| `battlesim.eventlog`  | `EventLog`                                                   |
| `battlesim.records`   | the event records, plus `format_fields` and `print_debug`    |
| `battlesim.commands`  | the command records                                          |
| `battlesim.gamemap`   | `GameMap`                                                    |
| `battlesim.ai`        | `AISystem`                                                   |

## What it does not do

- The map is never drawn or printed. It only holds unit ids on their starting tiles and bounds movement.
- A `MarchEnded` record is defined in `battlesim.records`, but the simulation never logs it.
- Units keep stepping toward their target for as long as the battle lasts.

## Running the tests

```
pip install .[test]
pytest
```