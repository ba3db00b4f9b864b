import io
import random

import pytest

from vyprava.character import create_character
from vyprava.console import Console
from vyprava.village import tavern_price, village


def make_console(text):
    out = io.StringIO()
    return Console(stdin=io.StringIO(text), stdout=out, width=40, delay=False), out


def make_player(**changes):
    player = create_character(2)
    for key, value in changes.items():
        setattr(player, key, value)
    return player


@pytest.mark.parametrize(
    "charisma, price",
    [(0, 5), (29, 5), (30, 4), (39, 4), (40, 3), (50, 2), (59, 2), (60, 1), (100, 1)],
)
def test_tavern_price(charisma, price):
    assert tavern_price(charisma) == price


def test_tavern_price_never_rises_with_charisma():
    prices = [tavern_price(c) for c in range(0, 80)]
    assert prices == sorted(prices, reverse=True)


def test_leave_immediately_keeps_gold():
    player = make_player(gold=25)
    console, out = make_console("\n4\n\n")
    village(player, console, random.Random(1))
    assert player.gold == 25
    assert "Opustil jsi vesnici." in out.getvalue()


def test_invalid_input_is_ignored():
    player = make_player(gold=25)
    console, out = make_console("\nabc\n9\n4\n\n")
    village(player, console, random.Random(1))
    assert player.gold == 25
    assert "Opustil jsi vesnici." in out.getvalue()


def test_tavern_restores_and_charges():
    player = make_player(gold=20, charisma=20, health=1, energy=0)
    console, out = make_console("\n1\n\n4\n\n")
    village(player, console, random.Random(1))
    assert player.gold == 20 - tavern_price(20)
    assert player.charisma == 23
    assert player.health == player.max_health
    assert player.energy == player.max_energy
    assert "Osvezujici pivo!" in out.getvalue()


def test_tavern_without_gold():
    player = make_player(gold=0, charisma=0, health=1)
    console, out = make_console("\n1\n\n4\n\n")
    village(player, console, random.Random(1))
    assert player.health == 1
    assert player.gold == 0
    assert "Nemas dostatek zlata!" in out.getvalue()


def test_fourth_drink_throws_player_out():
    player = make_player(gold=100, charisma=0)
    console, out = make_console("\n" + "1\n\n" * 3 + "1\n\n")
    village(player, console, random.Random(1))
    assert player.gold == 100 - 3 * tavern_price(0)
    assert "Opil jses do nemoty" in out.getvalue()
    assert "Opustil jsi vesnici." not in out.getvalue()


def test_church_prays_once_and_caps_chance():
    player = make_player(blessing_chance=95)
    console, out = make_console("\n2\n\n2\n\n4\n\n")
    village(player, console, random.Random(1))
    assert player.blessing_chance == 100
    assert "Uz ses dnes modlil." in out.getvalue()


def test_vampire_cannot_pray():
    player = create_character(3)
    console, out = make_console("\n2\n\n4\n\n")
    village(player, console, random.Random(1))
    assert player.blessing_chance == 0
    assert "Jako upir nemuzes vstoupit" in out.getvalue()


def test_shop_health_upgrade():
    player = make_player(gold=15)
    before = player.max_health
    console, _ = make_console("\n3\n1\n6\n4\n\n")
    village(player, console, random.Random(1))
    assert player.max_health == before + 5
    assert player.gold == 0


def test_shop_attack_upgrade_costs_more_next_time():
    player = make_player(gold=20)
    before = player.attack
    console, out = make_console("\n3\n3\n6\n4\n\n")
    village(player, console, random.Random(1))
    assert player.attack == before + 2
    assert player.gold == 0
    assert "(25 zlata)" in out.getvalue()


def test_shop_buys_potion():
    player = make_player(gold=5)
    console, out = make_console("\n3\n4\n\n6\n4\n\n")
    village(player, console, random.Random(1))
    assert player.inventory == ["Lektvar leceni"]
    assert player.gold == 0
    assert "Koupil jsi Lektvar leceni." in out.getvalue()


def test_shop_refuses_grenade_without_gold():
    player = make_player(gold=14)
    console, out = make_console("\n3\n5\n\n6\n4\n\n")
    village(player, console, random.Random(1))
    assert player.inventory == []
    assert player.gold == 14
    assert "Nemas dostatek zlata!" in out.getvalue()


@pytest.mark.parametrize("seed", range(10))
def test_gambler_gets_random_gold(seed):
    player = create_character(4)
    console, _ = make_console("\n4\n\n")
    village(player, console, random.Random(seed))
    assert 0 <= player.gold <= 150


def test_input_running_out_raises_eof():
    player = make_player(gold=10)
    console, _ = make_console("\n")
    with pytest.raises(EOFError):
        village(player, console, random.Random(1))