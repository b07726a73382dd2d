"""The adventurer exploring the dungeon."""

from __future__ import annotations

import random

from litchhunt.dungeon import Direction


class PlayerCharacter:
    """Health, scrolls and the room the adventurer stands in."""

    MAX_HEALTH = 35
    ARMOR_CLASS = 15
    MAX_ATTACK = 7

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.health = self.MAX_HEALTH
        self.armor_class = self.ARMOR_CLASS
        self.scroll_count = 1
        self.current_cell = None

    def add_scroll(self) -> int:
        """Gain a scroll and return how many are now held."""
        self.scroll_count += 1
        return self.scroll_count

    def get_attacked(self, to_hit: int, damage: int) -> int:
        """Take damage if the attack beats armour; return remaining health."""
        if to_hit >= self.armor_class:
            self.health -= damage
        self.health = max(self.health, 0)
        return self.health

    def _require_cell(self):
        if self.current_cell is None:
            raise RuntimeError("the player has not been placed in the dungeon")
        return self.current_cell

    def print_warnings(self) -> None:
        """Describe what can be sensed in each neighbouring room."""
        cell = self._require_cell()
        for direction in Direction:
            neighbour = cell.next_room(direction)
            if neighbour is None:
                print(f"You can't go any further {direction.label}.")
            else:
                neighbour.print_warning()

    def move(self, direction) -> None:
        """Walk into the neighbouring room, if there is one."""
        heading = Direction.parse(direction)
        cell = self._require_cell()
        target = cell.next_room(heading)
        if target is not None:
            cell.player_exit()
            self.current_cell = target
            target.player_enter()
            if target.has_hazard():
                print("You have entered a room with a spike trap!")
            if target.has_monster():
                if target.symbol == "*":
                    print("You have entered a room with the litch!")
                else:
                    print("You have entered a room with a flying skull!")
        else:
            print(f"You can't go that way. You are already as far {heading.label} as you can go.")
        self.print_warnings()

    def magic_attack(self) -> int:
        """Spend a scroll for a magic attack's damage, or 0 without scrolls."""
        if self.scroll_count > 0:
            self.scroll_count -= 1
            return self.rng.randrange(self.MAX_ATTACK + 1)
        print("You have no magic scrolls left to use.")
        return 0

    def sword_attack(self) -> int:
        """Return the damage of a sword swing."""
        return self.rng.randrange(self.MAX_ATTACK + 1)