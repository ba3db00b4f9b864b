"""The village between fights: tavern, church and shop."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .character import Character
from .console import Color, Console

APPEAR_SOUND = "resources/sounds/appear.wav"
SHOP_MUSIC = "resources/shop.wav"

POTION = "Lektvar leceni"
GRENADE = "Holy Hand Grenade"
POTION_PRICE = 5
GRENADE_PRICE = 15
MAX_DRINKS = 3
GAMBLER_MAX_GOLD = 150
NOT_ENOUGH_GOLD = "Nemas dostatek zlata!\n"

# Minimum charisma and the tavern price it earns, best price first.
_TAVERN_DISCOUNTS = ((60, 1), (50, 2), (40, 3), (30, 4))
_BASE_TAVERN_PRICE = 5


def tavern_price(charisma: int) -> int:
    """Price of a drink in the tavern for the given charisma."""
    for threshold, price in _TAVERN_DISCOUNTS:
        if charisma >= threshold:
            return price
    return _BASE_TAVERN_PRICE


@dataclass
class _Visit:
    """Prices and counters that last for one stay in the village."""

    drinks: int = 0
    visited_church: bool = False
    health_upgrade: int = 15
    energy_upgrade: int = 20
    attack_upgrade: int = 20


def _show_stats(player: Character, console: Console) -> None:
    console.set_color(Color.LIGHT_GREEN)
    console.write(f"Zivoty: {player.health}/{player.max_health}\n")
    console.set_color(Color.BLUE)
    console.write(f"Energie: {player.energy}/{player.max_energy}\n")
    console.set_color(Color.MAGENTA)
    console.write(f"Utok: {player.attack}\n")
    console.set_color(Color.YELLOW)
    console.write(f"Zlato: {player.gold}\n")


def _tavern(player: Character, visit: _Visit, price: int, console: Console) -> bool:
    """Have a drink; return True when the player drank too much and leaves."""
    if visit.drinks == MAX_DRINKS:
        console.clear_screen()
        console.stop_sound()
        console.write(
            "Ty hlupaku! Opil jses do nemoty, probouzis se na uplne nahodnem miste mimo vesnici.\n"
        )
        console.wait_for_key_press()
        return True
    if player.gold < price:
        console.write(NOT_ENOUGH_GOLD)
        console.wait_for_key_press()
        console.clear_screen()
        return False
    console.clear_screen()
    console.write(
        "V krcme je veselo. Das si pivko a na chvilku si odpocines. (obnovil sis zivoty a energii)\n"
    )
    console.write(f"Zaplatil jsi {price} zlatych.\n")
    visit.drinks += 1
    mood = {
        1: "Osvezujici pivo!\n",
        2: "V krcme je velka zabava!\n",
        3: "Citis se opily, asi bys mel prestat pit.\n",
    }
    console.write(mood[visit.drinks])
    player.gold -= price
    player.charisma += 3
    player.restore()
    console.wait_for_key_press()
    console.clear_screen()
    return False


def _church(player: Character, visit: _Visit, console: Console) -> None:
    console.clear_screen()
    if player.vampire:
        console.write("Jako upir nemuzes vstoupit do svateho mista.\n")
    elif visit.visited_church:
        console.write("Uz ses dnes modlil. Buh te slysel.\n")
    else:
        if player.blessing_chance < 100:
            player.blessing_chance = min(100, player.blessing_chance + 10)
            console.write(
                "Pomodlil ses v kostele. Buh vidi skrze tve lzi. "
                f"Sance ze te buh ochrani je {player.blessing_chance}%.\n"
            )
        else:
            console.write("Buh te miluje.\n")
        visit.visited_church = True
    console.wait_for_key_press()


def _shop_line(console: Console, key: str, color: Color, label: str, price: int) -> None:
    console.write("[")
    console.set_color(color)
    console.write(key)
    console.set_color(Color.WHITE)
    console.write(f"] {label} ")
    console.set_color(Color.YELLOW)
    console.write(f"({price} zlata)\n")
    console.set_color(Color.WHITE)


def _show_shop(player: Character, visit: _Visit, console: Console) -> None:
    console.clear_screen()
    _show_stats(player, console)
    console.set_color(Color.WHITE)
    console.write("---OBCHOD---\n")
    _shop_line(console, "1", Color.LIGHT_GREEN, "Vylepsit zivoty o 5", visit.health_upgrade)
    _shop_line(console, "2", Color.BLUE, "Vylepsit energii o 5", visit.energy_upgrade)
    _shop_line(console, "3", Color.MAGENTA, "Vylepsit utok o 2", visit.attack_upgrade)
    console.write("------------\n")
    for key, item, price in (("4", "lektvar leceni", POTION_PRICE), ("5", GRENADE, GRENADE_PRICE)):
        console.write(f"[{key}] Koupit {item}")
        console.set_color(Color.YELLOW)
        console.write(f" ({price} zlata)\n")
        console.set_color(Color.WHITE)
    console.write("------------\n")
    console.set_color(Color.RED)
    console.write("[6] Zpet do vesnice\n")
    console.set_color(Color.WHITE)


def _buy_upgrade(player: Character, visit: _Visit, cost_field: str, stat: str,
                 amount: int, console: Console) -> None:
    cost = getattr(visit, cost_field)
    if player.gold < cost:
        console.write(NOT_ENOUGH_GOLD)
        console.wait_for_key_press()
        console.clear_screen()
        return
    player.gold -= cost
    setattr(player, stat, getattr(player, stat) + amount)
    setattr(visit, cost_field, cost + cost // 4)
    console.clear_screen()


def _buy_item(player: Character, item: str, price: int, console: Console) -> None:
    if player.gold < price:
        console.write(NOT_ENOUGH_GOLD)
    else:
        player.gold -= price
        player.inventory.append(item)
        console.write(f"Koupil jsi {item}.\n")
    console.wait_for_key_press()
    console.clear_screen()


def _shop(player: Character, visit: _Visit, console: Console) -> None:
    while True:
        _show_shop(player, visit, console)
        try:
            choice = console.read_int()
        except ValueError:
            console.clear_screen()
            continue
        if choice == 1:
            _buy_upgrade(player, visit, "health_upgrade", "max_health", 5, console)
        elif choice == 2:
            _buy_upgrade(player, visit, "energy_upgrade", "max_energy", 5, console)
        elif choice == 3:
            _buy_upgrade(player, visit, "attack_upgrade", "attack", 2, console)
        elif choice == 4:
            _buy_item(player, POTION, POTION_PRICE, console)
        elif choice == 5:
            _buy_item(player, GRENADE, GRENADE_PRICE, console)
        elif choice == 6:
            return
        else:
            console.clear_screen()


def _show_menu(player: Character, price: int, console: Console) -> None:
    console.clear_screen()
    _show_stats(player, console)
    console.draw_header_line()
    console.set_color(Color.LIGHT_CYAN)
    console.print_centered("VESNICE")
    console.draw_header_line()
    console.set_color(Color.WHITE)
    console.write(
        "[1] Jit do krcmy (obnovis si zivoty a energii a vylepsis charisma "
        f"za {price} zlata)\n"
    )
    console.write("[2] Jit do kostela (zde se modlis a ziskas sanci ze te buh ochrani)\n")
    console.write("[3] Jit do obchodu (muzes nakupovat upgrady za zlato)\n")
    console.set_color(Color.RED)
    console.write("[4] Odejit z vesnice\n")
    console.set_color(Color.WHITE)


def village(player: Character, console: Console, rng: random.Random) -> None:
    """Let the player rest, pray and shop until they leave the village."""
    visit = _Visit()
    price = _BASE_TAVERN_PRICE
    console.play_sound(APPEAR_SOUND)
    console.print_ascii_art("vesnice")
    console.wait_for_key_press()
    console.play_sound(SHOP_MUSIC, loop=True)
    if player.gamble:
        player.gold = rng.randint(0, GAMBLER_MAX_GOLD)

    while True:
        # Charisma only grows, so the price only ever drops during a visit.
        price = min(price, tavern_price(player.charisma))
        _show_menu(player, price, console)
        try:
            choice = console.read_int()
        except ValueError:
            console.clear_screen()
            continue
        if choice == 1:
            if _tavern(player, visit, price, console):
                return
        elif choice == 2:
            _church(player, visit, console)
        elif choice == 3:
            _shop(player, visit, console)
        elif choice == 4:
            console.clear_screen()
            console.write("Opustil jsi vesnici.\n")
            console.stop_sound()
            console.wait_for_key_press()
            return
        else:
            console.clear_screen()