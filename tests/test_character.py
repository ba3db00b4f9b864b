import random

import pytest

from vyprava.character import Character, Monster, create_character


@pytest.mark.parametrize(
    "choice, name, health, attack, energy, gold, blessing, charisma",
    [
        (1, "slepec", 8, 5, 6, 25, 20, 20),
        (2, "mnich", 6, 3, 6, 25, 100, 35),
        (3, "upir", 7, 5, 5, 25, 0, 25),
        (4, "gambler", 6, 3, 5, 0, 0, 35),
        (5, "zlodej", 6, 4, 3, 25, 0, 30),
    ],
)
def test_create_character_stats(choice, name, health, attack, energy, gold, blessing, charisma):
    player = create_character(choice)
    assert player.name == name
    assert (player.health, player.max_health) == (health, health)
    assert player.attack == attack
    assert (player.energy, player.max_energy) == (energy, energy)
    assert player.gold == gold
    assert player.blessing_chance == blessing
    assert player.charisma == charisma


@pytest.mark.parametrize(
    "choice, flag",
    [(1, "is_blind"), (3, "vampire"), (4, "gamble"), (5, "dodge")],
)
def test_class_flags(choice, flag):
    player = create_character(choice)
    flags = {"is_blind", "vampire", "gamble", "dodge"}
    assert getattr(player, flag) is True
    assert all(getattr(player, other) is False for other in flags - {flag})


def test_monk_has_no_special_flags():
    player = create_character(2)
    assert not (player.is_blind or player.vampire or player.gamble or player.dodge)


@pytest.mark.parametrize("choice", [0, 6, -1])
def test_create_character_rejects_unknown_choice(choice):
    with pytest.raises(ValueError):
        create_character(choice)


def test_new_character_progress_defaults():
    player = create_character(1)
    assert (player.xp, player.lvl, player.mercy) == (0, 1, False)
    assert player.inventory == []


def test_inventories_are_independent():
    first, second = create_character(2), create_character(2)
    first.inventory.append("Totem")
    assert second.inventory == []


def test_heal_caps_at_max():
    player = create_character(1)
    player.health = 3
    assert player.heal(2) == 5
    assert player.heal(100) == player.max_health
    assert player.health == player.max_health


def test_restore_refills():
    player = create_character(3)
    player.health, player.energy = 1, 0
    player.restore()
    assert (player.health, player.energy) == (player.max_health, player.max_energy)


def test_monster_alive():
    goblin = Monster("Goblin", 8, 1, 3)
    assert goblin.alive
    goblin.health = 0
    assert not goblin.alive
    goblin.health = -2
    assert not goblin.alive


def test_monster_defaults_not_boss():
    assert Monster("Goblin", 8, 1, 3).is_boss is False
    assert Monster("Obrovsky sliz", 25, 3, 4, True).is_boss is True


def test_roll_damage_within_range():
    rng = random.Random(7)
    monster = Monster("Grimlock", 18, 3, 6)
    rolls = {monster.roll_damage(rng) for _ in range(500)}
    assert rolls == {3, 4, 5, 6}


def test_roll_damage_fixed_range():
    monster = Monster("Drak", 120, 5, 5)
    assert monster.roll_damage(random.Random(1)) == 5


def test_character_is_plain_dataclass():
    player = Character("x", 5, 5, 1, 1, 1, 0, 0, 0)
    assert player.is_blind is False and player.inventory == []