# vyprava

A turn-based fantasy adventure played in the terminal. The game text is in Czech.

You choose one of five classes, and a randomly rolled backstory adjusts your
starting stats. From there you fight your way through a fixed chain of
encounters, with a fork in the road and an optional side quest, resting in
villages between them.

## Classes

| Choice | Class   | Trait | Ability (2 energy unless noted) |
|--------|---------|-------|---------------------------------|
| 1      | slepec  | Cannot see enemies or their health; normal attacks deal 1.5x damage | Hits every living enemy for 2-4 |
| 2      | mnich   | Starts with a 100% chance of being saved by god | Prays to heal 6-10, sometimes +10% blessing chance |
| 3      | upir    | Heals a quarter of max health after a killing blow; cannot enter the church | Blood ritual: +4 energy (unless full), -2 health |
| 4      | gambler | Gets a random amount of gold (0-150) on entering a village | Coin flip: half health, or full health and energy |
| 5      | zlodej  | Dodges more often and finds gold more often after fights | Steals gold from fallen enemies |

## Installing and playing

```
pip install .
vyprava
```

Options:

- `--seed N` seeds the random generator, so a run can be repeated;
- `--fast` skips the pauses between lines.

`vyprava` exits with status 0 when the adventure ends (including when the hero
dies) and 1 when input runs out or the game is interrupted.

In a fight, each turn you can:

- attack (1),
- cast a spell for 3 energy, dealing twice your attack (2),
- use an item from your inventory (3): healing potion, Holy Hand Grenade,
  Crucifix or Totem,
- use your class ability (4).

Every action earns experience; each 50 points is a level, raising max health,
max energy and attack. When your health reaches zero your blessing chance
decides whether god brings you back (the chance then halves) or the game ends.

In a village you can:

- drink in the tavern, which restores you and raises charisma; higher charisma
  makes it cheaper, but order a fourth drink and you wake up outside the village;
- pray in the church once per visit to raise your blessing chance (up to 100%);
- buy upgrades (each one costs a quarter more the next time) and items in the shop.

Fight events are appended to `debug_log.txt` in the working directory. Ascii
art is read from `resources/ascii.txt` relative to the working directory; when
the file or a picture is missing, a note goes to standard error and play goes
on. Sounds from `resources/` are played only where the standard `winsound`
module is available (Windows); elsewhere the game is silent.

## Using it as a library

- `vyprava.console.Console` wraps an input and an output stream, with
  `read_int`, `read_char`, `wait_for_key_press`, ANSI colours via `set_color`
  and the `Color` palette, and `load_ascii_art` for reading art sections.
- `vyprava.character` has `Character`, `Monster` and `create_character(choice)`.
- `vyprava.backstory` has `roll_backstory(rng)` and `generate_backstory(player, console, rng)`.
- `vyprava.fight` has `fight(player, monsters, console, rng)`, which raises
  `PlayerDied` when the hero falls, plus `add_xp` and `check_if_player_died`.
- `vyprava.village` has `village(player, console, rng)` and `tavern_price(charisma)`.
- `vyprava.game` has `choose_class(console)`, `run(console, rng)` and `main(argv)`.

```python
import io
import random

from vyprava.character import create_character, Monster
from vyprava.console import Console
from vyprava.fight import fight

console = Console(stdin=io.StringIO("1\n1\n1\n"), stdout=io.StringIO(), width=40, delay=False)
player = create_character(1)
fight(player, [Monster("Goblin", 5, 1, 3)], console, random.Random(0))
```

## What it does not do

There is no saving or loading: a run is played from start to finish in one
sitting. The story ends after the final village that follows the knight and
dragon fight.

## Running the tests

```
pip install .[test]
pytest
```