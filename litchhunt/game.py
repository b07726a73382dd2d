"""The game loop: commands, combat and the spike-trap check."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from litchhunt.dungeon import LITCH, SKULL, DungeonMap, MapCell
from litchhunt.hazards import AttackKind
from litchhunt.player import PlayerCharacter

SWORD = "1"
MAGIC = "2"
SEARCH = "3"

PROMPT = "What would you like to do?"
QUIT_MESSAGE = "You have quit the game, the litch has won. Because of you many will die."
FAILED_MESSAGE = "You have failed to kill the litch and retrieve the Ritual Stone."
INVALID_MESSAGE = "Invalid input, please try again."

_START_TEXT = (
    "The noble adventurer must plunge into the depths of the dungeon to retrieve the stone of rituals which\n"
    "was stolen by the evil litch. You must search for the litch and kill it. As you search you will face\n"
    "mechanical spike traps, undead flying skulls, and the litch itself.\n"
)

_HELP_INTRO = (
    "If you can hear the sounds of turning gears you can be sure that there is a room near by where there \n"
    "is a spike trap, be careful as spike traps have a chance to be skewer you through and end your life.\n\n"
    "If you can hear the sound of chattering teeth there is a flying skull near by. Flying skulls are weak\n"
    "to magic so you were equipped with a magic scroll upon entry, more of which can be found in some of the\n "
    "dungeon rooms so search around. If need be you can try to attack with your sword but this will be more\n "
    "difficult.\n\n "
    "If you are filled with an uneasy feeling and it stinks of death the litch is near. The litch is\n"
    "resistant to magic so the scrolls will be less effective, your best bet is attacking with your sword.\n"
    "Once the litch is killed and you retrieve the ritual stone you will be teleported out of the dungeon\n"
    "and a parade will be made in your honor.\n\n"
    "Spike Traps can hit you as soon as you enter a room. Be careful re-entering these rooms as the traps will\n"
    "reactivate. The undead are fairly slow reacting so if you are quick enough you could run out of the room\n"
    "before they can react."
)

_CONTROLS = (
    ("N", "Move north through the dungeon"),
    ("S", "Move south through the dungeon"),
    ("E", "Move east through the dungeon"),
    ("W", "Move west through the dungeon"),
    (SWORD, "Attack with your sword"),
    (MAGIC, "Attack with a magic scroll"),
    (SEARCH, "Search the room for scrolls"),
    ("M", "Show Map"),
    ("H", "Help"),
    ("Q", "Quit"),
)

_HELP_OUTRO = (
    "opening the help menu and quitting the game does not progress the game however if you search the room for\n"
    "scrolls or open your map in a room with the undead you may be hit before you can react."
)


@dataclass(frozen=True)
class _CombatText:
    death: str
    miss: str
    hit: str


_COMBAT_TEXT = {
    LITCH: _CombatText(
        death=(
            "You have died to the litch and failed to collect the Ritual Stone. "
            "The litch will soon become too powerful\nto stop."
        ),
        miss="The litch missed you with its magic attack.",
        hit="The litch hit you.",
    ),
    SKULL: _CombatText(
        death="You have died to a flying skull. Because you died to a lowly undead we are all doomed",
        miss="The flying skull missed you with its attack.",
        hit="The flying skull hit you.",
    ),
}


def print_start_message() -> None:
    """Print the story introduction followed by the help text."""
    print(_START_TEXT)
    print_help()


def print_help() -> None:
    """Print the rules followed by a table of the controls."""
    control_lines = [f"    {key}: {description}" for key, description in _CONTROLS]
    print("\n".join([_HELP_INTRO, "", "Controls:", *control_lines, "", _HELP_OUTRO]))


def hit_roll(rng: random.Random) -> int:
    """Roll to hit: a value from 0 to 20."""
    return rng.randrange(20 + 1)


def _command_chars(commands: Iterable[str]) -> Iterator[str]:
    for chunk in commands:
        for char in chunk:
            if not char.isspace():
                yield char


class Game:
    """One adventure through a freshly generated dungeon."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.pc = PlayerCharacter(self.rng)
        self.dungeon = DungeonMap(self.rng)
        self.dungeon.load(self.pc)
        self.litch_dead = False
        self.game_over = False

    @property
    def _cell(self) -> MapCell:
        cell = self.pc.current_cell
        if cell is None:
            raise RuntimeError("the player has not been placed in the dungeon")
        return cell

    def handle_spike_trap(self) -> bool:
        """Spring the trap in the current room, if any; return True if the player died."""
        cell = self._cell
        if not cell.has_hazard():
            return False
        before = self.pc.health
        self.pc.get_attacked(hit_roll(self.rng) + 3, cell.hazard.roll_damage())
        if self.pc.health == 0:
            print("You have died to a spike trap and failed to collect the Ritual Stone.")
            return True
        if before > self.pc.health:
            print(f"You have been stabbed by a spike trap. You have {self.pc.health}/35 health left")
        else:
            print("You have successfully evaded the spike trap and took no damage.")
        return False

    def potential_combat(self, action: str) -> bool:
        """Attack or search in the current room; return True if the game ends."""
        cell = self._cell
        monster = cell.monster

        if monster is None:
            if action == SWORD:
                print("You swing your sword at the air waisting your time.")
            elif action == MAGIC:
                print("You used a spell scroll at an empty room...")
            elif action == SEARCH and cell.search():
                self.pc.add_scroll()
            return False

        symbol = cell.symbol
        text = _COMBAT_TEXT.get(symbol)
        if text is None or action not in (SWORD, MAGIC, SEARCH):
            return False

        before = self.pc.health
        if action == SEARCH:
            if cell.search():
                self.pc.add_scroll()
        else:
            kind = AttackKind.SWORD if action == SWORD else AttackKind.MAGIC
            if monster.get_attacked(kind, hit_roll(self.rng), self.pc.sword_attack()):
                cell.remove_monster()
                if symbol == LITCH:
                    self.litch_dead = True
                    return True
                return False

        if self.pc.get_attacked(hit_roll(self.rng), monster.roll_damage()) == 0:
            print(text.death)
            return True
        if before == self.pc.health:
            print(text.miss)
        elif before > self.pc.health:
            print(f"{text.hit} You have {self.pc.health}/35 health left")
        return False

    def step(self, command: str) -> bool:
        """Carry out one single-character command; return True once the game is over."""
        if self.game_over:
            raise RuntimeError("the game is already over")
        if len(command) != 1:
            raise ValueError(f"a command is a single character, got {command!r}")

        key = command.upper()
        over = False
        if key in ("N", "S", "E", "W"):
            self.pc.move(key)
            over = self.handle_spike_trap()
        elif key in (SWORD, MAGIC, SEARCH):
            over = self.potential_combat(key)
        elif key == "H":
            print_help()
        elif key == "M":
            self.dungeon.show()
        elif key == "Q":
            print(QUIT_MESSAGE)
            over = True
        elif key.isspace():
            pass
        else:
            print(INVALID_MESSAGE)
        self.game_over = over
        return over

    def run(self, commands: Iterable[str]) -> bool:
        """Play through the given input until the game ends; return True on victory."""
        print_start_message()
        self.pc.print_warnings()
        chars = _command_chars(commands)
        while not self.game_over:
            print(PROMPT)
            char = next(chars, None)
            if char is None:
                break
            self.step(char)
        if not self.litch_dead:
            print(FAILED_MESSAGE)
        return self.litch_dead


def main(argv: list[str] | None = None) -> int:
    """Play the game on standard input and output."""
    parser = argparse.ArgumentParser(prog="litchhunt", description="Hunt the litch through a dungeon.")
    parser.add_argument("--seed", type=int, default=None, help="seed for a repeatable dungeon")
    args = parser.parse_args(argv)
    game = Game(random.Random(args.seed))
    game.run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())