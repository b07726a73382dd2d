"""Rooms of the dungeon and the grid that joins them."""

from __future__ import annotations

import random
from enum import Enum

from litchhunt.hazards import FlyingSkull, Litch, Monster, SpikeTrap

LITCH = "*"
SKULL = "~"
SPIKE = "^"
EMPTY = "."
PLAYER = "#"

_WARNINGS = {
    LITCH: "You feel a deathly aura nearby.",
    SKULL: "You hear the chittering of teeth coming from nearby.",
    SPIKE: "You hear the sounds of turning gears from nearby.",
}


class Direction(str, Enum):
    """Compass directions between rooms."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def label(self) -> str:
        return self.name.title()

    @classmethod
    def parse(cls, value) -> "Direction":
        """Accept a Direction or its letter in either case."""
        try:
            return cls(str.upper(value))
        except (TypeError, ValueError):
            raise ValueError(f"unknown direction: {value!r}") from None


class MapCell:
    """One room: what lurks in it, whether a scroll is hidden, and its neighbours."""

    def __init__(self, symbol: str, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self.symbol = symbol
        self.has_player = False
        self.hazard: SpikeTrap | None = None
        self.monster: Monster | None = None
        if symbol == LITCH:
            self.monster = Litch(rng)
        elif symbol == SKULL:
            self.monster = FlyingSkull(rng)
        elif symbol == SPIKE:
            self.hazard = SpikeTrap(rng)
        self.has_scroll = rng.randrange(3) == 1
        self.neighbors: dict[Direction, MapCell | None] = dict.fromkeys(Direction)

    def set_neighbors(self, north, south, east, west) -> None:
        self.neighbors = {
            Direction.NORTH: north,
            Direction.SOUTH: south,
            Direction.EAST: east,
            Direction.WEST: west,
        }

    def next_room(self, direction) -> MapCell | None:
        """Return the neighbouring room in that direction, or None at a wall."""
        return self.neighbors[Direction.parse(direction)]

    def player_enter(self) -> None:
        self.has_player = True

    def player_exit(self) -> None:
        self.has_player = False

    def remove_monster(self) -> None:
        """Mark the room as cleared."""
        self.symbol = EMPTY

    def render(self) -> str:
        """Return the map character for this room."""
        return PLAYER if self.has_player else self.symbol

    def search(self) -> bool:
        """Look for a scroll; return True if one was found."""
        if self.has_scroll:
            print("You found a scroll!")
            self.has_scroll = False
            return True
        print("You found nothing in this musty room.")
        return False

    def print_warning(self) -> None:
        """Describe what can be sensed from next door."""
        warning = _WARNINGS.get(self.symbol)
        if warning is not None:
            print(warning)

    def has_hazard(self) -> bool:
        return self.symbol == SPIKE

    def has_monster(self) -> bool:
        return self.monster is not None


class DungeonMap:
    """A square grid of rooms."""

    SIDE_LENGTH = 5

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.cells: list[list[MapCell]] = []

    def _make_cell(self, is_litch: bool) -> MapCell:
        roll = self.rng.randrange(12)
        if is_litch:
            symbol = LITCH
        elif roll < 1:
            symbol = SPIKE
        elif roll < 3:
            symbol = SKULL
        else:
            symbol = EMPTY
        return MapCell(symbol, self.rng)

    def load(self, pc) -> None:
        """Populate the grid, link the rooms and place the player."""
        size = self.SIDE_LENGTH
        litch_index = self.rng.randrange(size * size)
        flat = [self._make_cell(index == litch_index) for index in range(size * size)]
        self.cells = [flat[row * size:(row + 1) * size] for row in range(size)]

        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                cell.set_neighbors(
                    self.cells[r - 1][c] if r > 0 else None,
                    self.cells[r + 1][c] if r < size - 1 else None,
                    row[c + 1] if c < size - 1 else None,
                    row[c - 1] if c > 0 else None,
                )

        empties = [cell for cell in flat if not cell.has_hazard() and not cell.has_monster()]
        if len(empties) >= 4:
            start = empties[len(empties) // 2 - 2]
        else:
            start = self.rng.choice([cell for cell in flat if cell.symbol != LITCH])
        pc.current_cell = start
        start.player_enter()

    def show(self) -> None:
        """Print the map with its key."""
        print("Key: # = Player, * = Litch, ~ = Flying Skull, ^ = Spike Trap")
        for row in self.cells:
            print("".join(cell.render() for cell in row))