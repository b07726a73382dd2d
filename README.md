# litchhunt

A short text-mode dungeon crawl that you play in the terminal.

An evil litch has stolen the stone of rituals and is hiding somewhere in a
5×5 dungeon. You have to find it and kill it. On the way you will run into
mechanical spike traps and undead flying skulls.

## Installing

```
pip install .
```

## Playing

```
litchhunt
```

To get a repeatable dungeon, pass a seed:

```
litchhunt --seed 42
```

The game prints its story and the help text. After each prompt it reads
commands from standard input, one character at a time. Whitespace is
ignored, so you can type one command per line or several on one line.
Commands are not case-sensitive. If input runs out before the game ends,
the game stops and counts as a failure.

| Key | Action                       |
|-----|------------------------------|
| N   | Move north                   |
| S   | Move south                   |
| E   | Move east                    |
| W   | Move west                    |
| 1   | Attack with your sword       |
| 2   | Attack with magic            |
| 3   | Search the room for scrolls  |
| M   | Show the map                 |
| H   | Show the help text           |
| Q   | Quit                         |

Any other character prints "Invalid input, please try again."

### What to listen for

After every move, the game reports what you sense in each neighbouring
room. Where there is no room, it tells you that you can't go any further in
that direction.

- *turning gears*: a spike trap is next door. Traps strike as soon as you
  enter the room, and they strike again every time you come back in.
- *chattering teeth*: a flying skull is nearby. Skulls have 10 health. Magic
  hits them more easily than the sword does.
- *a deathly aura*: the litch is close. It has 35 health and resists magic,
  so the sword is the better choice.

Moving out of a room never gives a monster an attack. Attacking or searching
in a room with a monster does: the monster strikes back after your action
unless that action killed it.

You start with 35 health. Rooms sometimes hide scrolls, and searching with
`3` picks one up. Picking up a scroll raises your scroll count.

### The map

`M` prints the dungeon using these symbols:

```
# = you   * = litch   ~ = flying skull   ^ = spike trap   . = empty room
```

You win when the litch's health reaches zero. You lose if your own health
reaches zero, or if you quit.

## Using it from Python

You can also drive the game from Python:

- `litchhunt.game.Game(rng=None)` builds a fresh dungeon from a
  `random.Random` and places the player in it.
  - `Game.step(command)` carries out one single-character command and
    returns `True` once the game is over. It raises `ValueError` for a
    command that is not exactly one character. It raises `RuntimeError` if
    the game has already ended.
  - `Game.run(commands)` plays through an iterable of strings and returns
    `True` on victory.
- `litchhunt.game.main(argv=None)` is what the `litchhunt` command runs.

The parts of the game live in these modules:

- `litchhunt.dungeon`: `DungeonMap`, `MapCell` and `Direction`.
- `litchhunt.player`: `PlayerCharacter`.
- `litchhunt.hazards`: `SpikeTrap`, `Litch` and `FlyingSkull`.

The game does not save or load games, and it has no high-score table.

## Running the tests

```
pip install ".[test]"
pytest
```