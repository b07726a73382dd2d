import random

import pytest

from litchhunt.hazards import AttackKind, FlyingSkull, Hazard, Litch, Monster, SpikeTrap


def test_base_hazard_deals_no_damage():
    assert Hazard().roll_damage() == 0


def test_base_monster_is_harmless_and_never_dies():
    monster = Monster()
    assert monster.roll_damage() == 0
    assert monster.get_attacked("m", 20, 100) is False


def test_spike_trap_damage_range_covers_zero_to_max():
    trap = SpikeTrap(random.Random(1))
    rolls = {trap.roll_damage() for _ in range(3000)}
    assert rolls == set(range(SpikeTrap.max_damage + 1))


@pytest.mark.parametrize("cls", [Litch, FlyingSkull])
def test_monster_damage_within_bounds(cls):
    monster = cls(random.Random(7))
    rolls = [monster.roll_damage() for _ in range(2000)]
    assert min(rolls) == 0
    assert max(rolls) == cls.max_damage


def test_litch_starts_at_full_health():
    assert Litch().health == 35
    assert FlyingSkull().health == 10


def test_litch_magic_hit_at_armor(capsys):
    litch = Litch()
    assert litch.get_attacked(AttackKind.MAGIC, 13, 5) is False
    assert litch.health == 30
    out = capsys.readouterr().out
    assert "You hit the litch with your magic attack!" in out
    assert "Litch Health: 30/35" in out


def test_litch_magic_miss_below_armor(capsys):
    litch = Litch()
    assert litch.get_attacked("m", 12, 5) is False
    assert litch.health == 35
    assert "Your magic attack went wide and harmlessly hit the wall" in capsys.readouterr().out


def test_litch_sword_uses_physical_armor(capsys):
    litch = Litch()
    litch.get_attacked("s", 7, 4)
    assert litch.health == 31
    litch.get_attacked("s", 6, 4)
    assert litch.health == 31
    out = capsys.readouterr().out
    assert "You hit the litch with your sword!" in out
    assert "You swung and missed the litch" in out


def test_litch_defeat_clamps_health(capsys):
    litch = Litch()
    assert litch.get_attacked("s", 20, 100) is True
    assert litch.health == 0
    out = capsys.readouterr().out
    assert "Litch Health: 0/35" in out
    assert "YOU WIN!!" in out


def test_flying_skull_magic_and_sword(capsys):
    skull = FlyingSkull()
    skull.get_attacked("m", 5, 3)
    assert skull.health == 7
    skull.get_attacked("s", 9, 3)
    assert skull.health == 7
    out = capsys.readouterr().out
    assert "Flying Skull Health: 7/10" in out
    assert "The flying skull was too quick and you missed it with your sword." in out


def test_flying_skull_defeated(capsys):
    skull = FlyingSkull()
    assert skull.get_attacked(AttackKind.SWORD, 10, 10) is True
    assert skull.health == 0
    assert "You have defeated the flying skull." in capsys.readouterr().out


def test_unknown_kind_counts_as_sword():
    skull = FlyingSkull()
    skull.get_attacked("x", 9, 3)
    assert skull.health == 10