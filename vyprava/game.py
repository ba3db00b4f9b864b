"""The adventure itself: class choice, backstory and the chain of fights."""

from __future__ import annotations

import argparse
import random
from typing import Sequence

from .backstory import generate_backstory
from .character import Character, Monster, create_character
from .console import Color, Console
from .fight import PlayerDied, fight
from .village import village

CHOOSE_MUSIC = "resources/choose.wav"
APPEAR_SOUND = "resources/sounds/appear.wav"

TITLE = "\n".join(
    (
        "",
        "  ____             _       _",
        " |_  /__ _ __ __ _| |_ ___| |__",
        "  / // _` / _/ _` |  _/ -_) / /",
        r" /___\__,_\__\__,_|\__\___|_\_\ ",
        "                           ",
    )
)

CLASS_MENU = (
    "[1] Slepec    -> Nemuze videt nepratele ani jejich zivoty ale je silnejsi\n"
    "[2] Mnich     -> Hned na zacatku hry sance ze ho buh spasi je 100%\n"
    "[3] Upir      -> Kdyz nekoho zabije normalnim utokem tak si vyleci ctvrtinu zivotu\n"
    "[4] Gambler   -> Kdyz vejde do vesnice tak ma nahodny pocet penez az 200\n"
    "[5] Zlodej    -> Lepe se vyhyba utokum a ma vetsi sanci na ziskani penez\n"
)


def _class_header(console: Console) -> None:
    console.draw_header_line()
    console.set_color(Color.YELLOW)
    console.print_centered("VYBER CLASS")
    console.draw_header_line()


def _show_class(player: Character, console: Console) -> None:
    console.write("(Tyto staty se navysi az se dozvis svuj pribeh)\n")
    console.set_color(Color.LIGHT_GREEN)
    console.write(f"Zivoty: {player.health}\n")
    console.set_color(Color.MAGENTA)
    console.write(f"Utok: {player.attack}\n")
    console.set_color(Color.BLUE)
    console.write(f"Energie: {player.energy}\n")
    console.set_color(Color.YELLOW)
    gold = "nahodne" if player.gamble else str(player.gold)
    console.write(f"Zlato: {gold}\n")
    console.set_color(Color.LIGHT_YELLOW)
    console.write(f"Charisma: {player.charisma}\n")
    console.set_color(Color.WHITE)


def choose_class(console: Console) -> Character:
    """Ask for a character class until the player confirms one."""
    while True:
        console.clear_screen()
        _class_header(console)
        console.set_color(Color.WHITE)
        console.write(CLASS_MENU)
        try:
            player = create_character(console.read_int())
        except ValueError:
            console.clear_screen()
            continue
        console.clear_screen()
        _class_header(console)
        _show_class(player, console)
        answer = console.read_char(f"Opravdu chces byt {player.name}? [y/n]: ")
        console.clear_screen()
        if answer in ("y", "Y"):
            return player


def _spawn(rng: random.Random, name: str, base: int, spread: int,
           min_attack: int, max_attack: int, boss: bool = False) -> Monster:
    return Monster(name, base + rng.randrange(spread), min_attack, max_attack, boss)


def _two_way_choice(console: Console, intro: str, first: str, second: str) -> int:
    """Offer two options until the player picks 1 or 2."""
    while True:
        console.clear_screen()
        console.play_sound(APPEAR_SOUND)
        console.write(intro)
        console.sleep(1.0)
        console.write(first)
        console.write(second)
        console.sleep(1.0)
        try:
            choice = console.read_int("Vyber 1 nebo 2: ")
        except ValueError:
            console.clear_screen()
            continue
        if choice in (1, 2):
            console.clear_screen()
            return choice
        console.clear_screen()


def _mini_boss_banner(player: Character, console: Console, art: str) -> None:
    console.write("---pred tebou se zjevil mini boss!---\n")
    if not player.is_blind:
        console.print_ascii_art(art)


def _prologue(player: Character, console: Console, rng: random.Random) -> None:
    fight(player, [_spawn(rng, "Goblin", 8, 6, 1, 3)], console, rng)
    fight(player, [_spawn(rng, "Nemrtvy", 9, 4, 2, 4)], console, rng)
    fight(player, [_spawn(rng, "Goblin", 8, 6, 1, 3),
                   _spawn(rng, "Maly goblin", 4, 6, 1, 3)], console, rng)
    console.set_color(Color.WHITE)
    console.write("---pred tebou se zjevil mini boss!---\n")
    console.set_color(Color.LIGHT_GREEN)
    if not player.is_blind:
        console.print_ascii_art("MB1")
    console.set_color(Color.WHITE)
    fight(player, [_spawn(rng, "Obrovsky sliz", 25, 8, 3, 4, boss=True)], console, rng)


def _vines(player: Character, console: Console, rng: random.Random) -> None:
    console.write("nachazis se ve VINES.\n")
    console.sleep(1.0)
    sense = "slysis brouky.\n" if player.is_blind else "vidis brouky.\n"
    console.write(f"citis vuni prirody a {sense}")
    console.sleep(1.0)
    console.wait_for_key_press()
    fight(player, [_spawn(rng, "Kenku", 18, 6, 2, 6)], console, rng)
    fight(player, [_spawn(rng, "Brouk", 3, 8, 1, 3) for _ in range(3)], console, rng)
    fight(player, [_spawn(rng, "Zivy listnaty strom", 15, 8, 4, 5),
                   _spawn(rng, "Zivy listnaty strom", 15, 8, 4, 5),
                   _spawn(rng, "Zivy jehlicnaty strom", 20, 8, 4, 5)], console, rng)


def _underdark(player: Character, console: Console, rng: random.Random) -> None:
    console.write("nachazis se v UNDERDARKU.\n")
    console.sleep(1.0)
    console.write("citis smrad\n")
    console.sleep(1.0)
    console.wait_for_key_press()
    fight(player, [_spawn(rng, "Grimlock", 18, 8, 3, 6)], console, rng)
    fight(player, [_spawn(rng, "Pavouk", 3, 6, 2, 3) for _ in range(3)], console, rng)
    fight(player, [_spawn(rng, "Temny elf", 15, 8, 3, 5),
                   _spawn(rng, "Temny elf", 15, 8, 3, 5),
                   _spawn(rng, "Temny mag", 20, 8, 4, 7)], console, rng)


def _brother(player: Character, console: Console, rng: random.Random) -> None:
    console.clear_screen()
    console.write("Potkal jsi druheho chlapce ktery vypada podobne jak ten minuly!\n")
    console.wait_for_key_press()
    console.clear_screen()
    if player.mercy:
        console.write(
            "dekuji moc ze jsi nezabil meho bratra, byl jen vystraseny a proto utocil. "
            "Tady mas! (hodil ti sacek zlataku)\n"
        )
        player.gold += 100
        console.wait_for_key_press()
    else:
        for line in ("ty...\n", "zabil jsi meho bratra...\n", "TED BUDES TRPET. POMSTIM HO!!!\n"):
            console.write(line)
            console.wait_for_key_press()
        console.clear_screen()
        if not player.is_blind:
            console.print_ascii_art("chlapec")
        console.wait_for_key_press()
        fight(player, [_spawn(rng, "Silny Chlapec", 70, 5, 10, 15, boss=True)], console, rng)
    console.wait_for_key_press()


def run(console: Console, rng: random.Random) -> None:
    """Play the whole adventure. Raises PlayerDied when the hero falls."""
    console.play_sound(CHOOSE_MUSIC, loop=True)
    player = choose_class(console)
    generate_backstory(player, console, rng)
    console.set_color(Color.LIGHT_GREEN)
    player.restore()
    console.write(TITLE + "\n")
    console.wait_for_key_press()
    console.clear_screen()
    console.stop_sound()
    console.set_color(Color.WHITE)
    village(player, console, rng)

    _prologue(player, console, rng)
    village(player, console, rng)

    blind = player.is_blind
    path = _two_way_choice(
        console,
        "vis ze pred tebou jsou dve cesty, nevis kam vedou\n" if blind else
        "pred tebou se nachazi 2 cesty ta prvni je zarostla a vede do kopce, "
        "ta druha vede z kopce do tmy\n",
        "[1] do kopce\n",
        "[2] z kopce\n",
    )
    if path == 1:
        _vines(player, console, rng)
    else:
        _underdark(player, console, rng)

    village(player, console, rng)
    fight(player, [_spawn(rng, "Temny Executioner", 15, 8, 3, 5)], console, rng)

    houses = _two_way_choice(
        console,
        "Pred tebou ruzne domy, co udelas?\n",
        "[1] prohledas ty domy a zjistis o co jde.\n",
        "[2] vis ze tam jsou nejake budovy ale jdes dal.\n",
    )
    if houses == 1:
        fight(player, [_spawn(rng, "Chlapec", 15, 10, 6, 9, boss=True)], console, rng)
        console.sleep(1.0)
    else:
        console.write("Jdes dal a jses stastny.\n")
        console.sleep(1.0)
        console.wait_for_key_press()
    village(player, console, rng)

    fight(player, [_spawn(rng, "Bandit", 25, 6, 4, 6),
                   _spawn(rng, "Bandit", 25, 6, 4, 6),
                   _spawn(rng, "Bandit s paskou pres oko", 30, 6, 5, 8)], console, rng)
    if houses == 1:
        _brother(player, console, rng)

    _mini_boss_banner(player, console, "MB2")
    console.wait_for_key_press()
    fight(player, [_spawn(rng, "Zly Rytir", 50, 10, 8, 25),
                   _spawn(rng, "Drak", 120, 10, 5, 15)], console, rng)
    village(player, console, rng)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the terminal and return the exit status."""
    parser = argparse.ArgumentParser(prog="vyprava", description="Textova dobrodruzna hra.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    parser.add_argument("--fast", action="store_true", help="skip the pauses between lines")
    args = parser.parse_args(argv)
    console = Console(delay=not args.fast)
    try:
        run(console, random.Random(args.seed))
    except PlayerDied:
        return 0
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())