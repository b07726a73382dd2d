"""Traps and undead monsters that inhabit the dungeon."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum


class AttackKind(str, Enum):
    """How the player strikes a monster."""

    SWORD = "s"
    MAGIC = "m"


@dataclass(frozen=True)
class _AttackText:
    name: str
    magic_hit: str
    magic_miss: str
    sword_hit: str
    sword_miss: str
    defeated: str


class Hazard:
    """Anything in a room that can hurt the player."""

    max_damage = 0

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def roll_damage(self) -> int:
        """Return the damage this hazard deals."""
        return 0


class SpikeTrap(Hazard):
    """A mechanical trap that stabs whoever enters its room."""

    max_damage = 10

    def roll_damage(self) -> int:
        return self.rng.randrange(self.max_damage + 1)


class Monster(Hazard):
    """A hazard that can be fought back."""

    max_health = 0
    magic_armor = 0
    physical_armor = 0

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        self.health = self.max_health

    def roll_damage(self) -> int:
        return 0

    def get_attacked(self, kind: str, to_hit: int, damage: int) -> bool:
        """Apply an attack; return True when the monster is defeated."""
        return False

    def _resolve_attack(self, kind: str, to_hit: int, damage: int, text: _AttackText) -> bool:
        magic = kind == AttackKind.MAGIC
        armor = self.magic_armor if magic else self.physical_armor
        if to_hit >= armor:
            print(text.magic_hit if magic else text.sword_hit)
            self.health = max(self.health - damage, 0)
            print(f"{text.name} Health: {self.health}/{self.max_health}")
        else:
            print(text.magic_miss if magic else text.sword_miss)
        if self.health <= 0:
            print(text.defeated)
            return True
        return False


_LITCH_TEXT = _AttackText(
    name="Litch",
    magic_hit="You hit the litch with your magic attack!",
    magic_miss="Your magic attack went wide and harmlessly hit the wall",
    sword_hit="You hit the litch with your sword!",
    sword_miss="You swung and missed the litch",
    defeated=(
        "Litch has been defeated and you claimed the ritual stone! You have been teleported out of the"
        "dungeon and a parade is thrown in your honor. YOU WIN!! "
    ),
)

_SKULL_TEXT = _AttackText(
    name="Flying Skull",
    magic_hit="You hit the flying skull with your magic attack!",
    magic_miss="Your magic attack missed the flying skull",
    sword_hit="You were fast enough and hit the flying skull with your sword!",
    sword_miss="The flying skull was too quick and you missed it with your sword.",
    defeated="You have defeated the flying skull.",
)


class Litch(Monster):
    """The dungeon's master: tough, and resistant to magic."""

    max_health = 35
    magic_armor = 13
    physical_armor = 7
    max_damage = 10

    def roll_damage(self) -> int:
        return self.rng.randrange(self.max_damage + 1)

    def get_attacked(self, kind: str, to_hit: int, damage: int) -> bool:
        return self._resolve_attack(kind, to_hit, damage, _LITCH_TEXT)


class FlyingSkull(Monster):
    """A quick, fragile undead that is weak to magic."""

    max_health = 10
    magic_armor = 5
    physical_armor = 10
    max_damage = 5

    def roll_damage(self) -> int:
        return self.rng.randrange(self.max_damage + 1)

    def get_attacked(self, kind: str, to_hit: int, damage: int) -> bool:
        return self._resolve_attack(kind, to_hit, damage, _SKULL_TEXT)