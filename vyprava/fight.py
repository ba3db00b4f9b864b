"""Turn-based combat between the player and a group of monsters."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Sequence

from .character import Character, Monster
from .console import Color, Console

LOG_PATH = Path("debug_log.txt")
SOUND_DIR = Path("resources/sounds")

XP_PER_LEVEL = 50
XP_PER_ACTION = 5
SPELL_COST = 3
ABILITY_COST = 2

ATTACK_PHRASES = (
    "Zasahl jsi %s a zpusobil %d poskozeni!",
    "Tvuj utok na %s byl silny udelal %d dmg!",
    "Tvuj mec zasahl %s a ubral %d zivota.",
    "Rozdrtil jsi %s a vzal mu %d HP!",
)

SPELL_PHRASES = (
    "Seslal jsi kouzlo na %s a zasahl za %d!",
    "Magie zasahla %s a zpusobila %d poskozeni!",
    "Kouzlo explodovalo na %s za %d dmg!",
    "Tvoje sila zasahla %s za %d zivota!",
    "Magicky vyboj poskodil %s za %d!",
)

# Upper bound of the loot roll (out of 100), item and announcement.
LOOT_TABLE = (
    (30, "Lektvar leceni", "Nasel jsi Lektvar leceni!"),
    (50, "Holy Hand Grenade", "Nasel jsi Holy Hand Grenade!"),
    (60, "Crucifix", "Nasel jsi Crucifix!"),
    (65, "Totem", "Nasel jsi zvlastni totem."),
)


class PlayerDied(Exception):
    """Raised when the player's health runs out and no blessing saves them."""


def _sound(console: Console, name: str) -> None:
    console.play_sound(SOUND_DIR / name)


def log_event(text: str, path: str | Path | None = None) -> None:
    """Append a line to the debug log; a log that cannot be opened is ignored."""
    target = LOG_PATH if path is None else path
    try:
        with open(target, "a", encoding="utf-8") as log:
            log.write(text + "\n")
    except OSError:
        pass


def all_monsters_dead(monsters: Sequence[Monster]) -> bool:
    return not any(monster.alive for monster in monsters)


def add_xp(player: Character, amount: int, console: Console) -> None:
    """Grant experience, levelling up for every full 50 points."""
    player.xp += amount
    while player.xp >= XP_PER_LEVEL:
        player.xp -= XP_PER_LEVEL
        player.lvl += 1
        console.set_color(Color.GREEN)
        console.write("LEVEL UP!\n")
        console.set_color(Color.WHITE)
        console.write(f"Jsi ted na levelu {player.lvl}!\n")
        player.max_health += 2
        player.max_energy += 1
        player.restore()
        player.attack += 1
        console.write("Ziskal jsi:\n")
        console.write(" +2 max zivotu\n +1 max energie\n +1 utok\n")
        _sound(console, "heal.wav")
        console.wait_for_key_press()
        console.clear_screen()


def check_if_player_died(player: Character, console: Console, rng: random.Random) -> bool:
    """Handle the player's health reaching zero.

    Return True when a blessing brought the player back, False when the player
    is still alive; raise PlayerDied when nothing saved them.
    """
    if player.health > 0:
        return False
    console.clear_screen()
    console.sleep(1.3)
    if rng.randrange(100) < player.blessing_chance:
        console.stop_sound()
        _sound(console, "blessed.wav")
        console.clear_screen()
        console.set_color(Color.YELLOW)
        console.print_ascii_art("blessed")
        console.set_color(Color.LIGHT_YELLOW)
        console.write("---BUH SE SLITOVAL, BYL JSI SPASEN---\n")
        console.set_color(Color.WHITE)
        console.wait_for_key_press()
        player.restore()
        player.blessing_chance //= 2
        console.clear_screen()
        return True
    console.set_color(Color.RED)
    console.print_ascii_art("smrt")
    console.set_color(Color.WHITE)
    _sound(console, "death.wav")
    console.sleep(1.0)
    console.wait_for_key_press()
    raise PlayerDied(player.name)


def show_current_stats(player: Character, monsters: Sequence[Monster], console: Console) -> None:
    console.set_color(Color.LIGHT_GREEN)
    console.write(f"Zivoty: {player.health}/{player.max_health}\n")
    console.set_color(Color.BLUE)
    console.write(f"Energie: {player.energy}/{player.max_energy}\n\n")
    console.set_color(Color.WHITE)
    console.write("Ziva monstra:\n")
    alive = (monster for monster in monsters if monster.alive)
    for number, monster in enumerate(alive, 1):
        label = "nekdo" if player.is_blind else f"{monster.name} ({monster.health} HP)"
        console.set_color(Color.GREEN)
        console.write(f"{number}: {label}\n")
        console.set_color(Color.WHITE)
    console.write("\n")


def _dodged(player: Character, rng: random.Random) -> bool:
    return rng.randrange(100) < (45 if player.dodge else 25)


def _boss_opening(player, monsters, console, rng) -> None:
    for monster in monsters:
        if not monster.is_boss or not monster.alive:
            continue
        if _dodged(player, rng):
            continue
        damage = monster.roll_damage(rng)
        player.health -= damage
        log_event(f"Boss {monster.name} zahajil utok na hrace za {damage}")
        console.set_color(Color.RED)
        console.write(f"{monster.name} zahajil utok a zasahl te za {damage} zivotu!\n")
        _sound(console, "damage.wav")
        console.set_color(Color.WHITE)
        check_if_player_died(player, console, rng)


def _monsters_turn(player, monsters, console, rng) -> None:
    for monster in monsters:
        if not monster.alive:
            continue
        if _dodged(player, rng):
            continue
        console.sleep(0.4)
        damage = monster.roll_damage(rng)
        player.health -= damage
        _sound(console, "damage.wav")
        name = "nekdo" if player.is_blind else monster.name
        log_event(f"{name} zasahl hrace za {damage}")
        console.set_color(Color.RED)
        console.write(f"{name} te zasahl za {damage} zivotu!\n")
        console.set_color(Color.WHITE)
        check_if_player_died(player, console, rng)


def _victory(player, active_boss, console, rng) -> None:
    console.set_color(Color.YELLOW)
    console.write("Vyhral jsi!\n")
    chance = 100 if active_boss else (65 if player.dodge else 50)
    if rng.randrange(100) < chance:
        gold = rng.randint(10, 39)
        player.gold += gold
        console.write(f"Ziskal jsi {gold} zlata. Mas celkem {player.gold} zlata.\n")
    roll = rng.randrange(100)
    for limit, item, message in LOOT_TABLE:
        if roll < limit:
            player.inventory.append(item)
            console.write(message + "\n")
            break
    console.set_color(Color.WHITE)
    add_xp(player, XP_PER_ACTION, console)
    console.wait_for_key_press()
    console.clear_screen()


def _write_menu(console: Console) -> None:
    console.write("Chces zautocit [")
    for color, key, after in (
        (Color.MAGENTA, "1", "], pouzit kouzlo ["),
        (Color.BLUE, "2", "], otevrit inventar ["),
        (Color.LIGHT_GREEN, "3", "] nebo schopnost ["),
        (Color.LIGHT_YELLOW, "4", "]? "),
    ):
        console.set_color(color)
        console.write(key)
        console.set_color(Color.WHITE)
        console.write(after)


def _pick_target(alive: list[Monster], console: Console) -> Monster | None:
    if len(alive) == 1:
        return alive[0]
    try:
        pick = console.read_int(f"Na ktere monstrum utocis <1-{len(alive)}>? ") - 1
    except ValueError:
        return None
    if not 0 <= pick < len(alive):
        return None
    return alive[pick]


def _attack(player, monsters, target, console, rng) -> bool:
    """Make a normal attack; return False when the fight ends on the spot."""
    console.clear_screen()
    damage = player.attack
    if player.is_blind:
        damage = int(damage * 1.5)
    if len(monsters) == 1 and target.name == "Chlapec" and target.health <= player.attack:
        console.set_color(Color.LIGHT_YELLOW)
        console.write("Chlapec je na pokraji smrti...\n")
        console.sleep(1.0)
        try:
            decision = console.read_int("Chces mu dat milost [1] nebo ho dorazit [2]? ")
        except ValueError:
            decision = None
        player.mercy = False
        if decision == 1:
            console.write("Udelil jsi milost. Chlapec te mlcky opusti...\n")
            target.health = 0
            console.wait_for_key_press()
            console.clear_screen()
        return False

    target.health -= damage
    name = "nekdo" if player.is_blind else target.name
    console.set_color(Color.MAGENTA)
    console.write(rng.choice(ATTACK_PHRASES) % (name, damage) + "\n")
    console.set_color(Color.WHITE)
    log_event(f"Utocis na {target.name} za {damage}")
    _sound(console, "attack.wav")
    add_xp(player, XP_PER_ACTION, console)
    if player.vampire and not target.alive:
        heal = player.max_health // 4
        player.heal(heal)
        console.set_color(Color.LIGHT_YELLOW)
        console.write(f"Jako upir sis vylecil {heal} zivotu\n")
        _sound(console, "heal.wav")
        console.set_color(Color.WHITE)
    if player.energy < player.max_energy:
        player.energy += 1
    return True


def _cast_spell(player, target, console, rng) -> bool:
    """Cast a spell; return False when there is not enough energy."""
    console.clear_screen()
    if player.energy < SPELL_COST:
        console.set_color(Color.RED)
        console.write("Nemas dost energie na kouzlo!\n")
        console.set_color(Color.WHITE)
        console.wait_for_key_press()
        console.clear_screen()
        return False
    player.energy -= SPELL_COST
    damage = player.attack * 2
    target.health -= damage
    console.set_color(Color.BLUE)
    console.write(rng.choice(SPELL_PHRASES) % (target.name, damage) + "\n")
    console.set_color(Color.WHITE)
    _sound(console, "attack.wav")
    log_event(f"Pouzil jsi kouzlo na {target.name} za {damage}")
    add_xp(player, XP_PER_ACTION, console)
    return True


def _use_item(player, monsters, console, rng) -> bool:
    """Let the player use an inventory item; return True when it killed every monster."""
    inventory = player.inventory
    if not inventory:
        console.write("Tvuj inventar je prazdny!\n")
        console.wait_for_key_press()
        console.clear_screen()
        return False
    console.write("Tvuj inventar:\n")
    for number, item in enumerate(inventory, 1):
        console.write(f"{number}. {item}\n")
    try:
        index = console.read_int("Vyber cislo itemu: ") - 1
    except ValueError:
        index = -1
    if not 0 <= index < len(inventory):
        console.write("Neplatny vyber.\n")
        console.wait_for_key_press()
        console.clear_screen()
        return False

    item = inventory[index]
    killed_all = False
    if item == "Lektvar leceni":
        heal = 6
        player.heal(heal)
        _sound(console, "heal.wav")
        console.write(f"Pouzil jsi lektvar a vylecil {heal} zivotu.\n")
    elif item == "Holy Hand Grenade":
        for monster in monsters:
            if monster.alive:
                monster.health -= 3
        if all_monsters_dead(monsters):
            console.wait_for_key_press()
            console.clear_screen()
            killed_all = True
        console.write("Hodil jsi Holy Hand Grenade! Vsechna monstra utrpela 3 poskozeni.\n")
    elif item == "Crucifix":
        damage = rng.randint(3, 5)
        heal = rng.randint(2, 6)
        _sound(console, "blessed.wav")
        if all_monsters_dead(monsters):
            console.wait_for_key_press()
            console.clear_screen()
            killed_all = True
        player.heal(heal)
        console.write(f"Crucifix ozaril vsechny nepratele a zpusobil {damage} poskozeni.\n")
        console.write(f"Zaroven jsi byl vylecen o {heal} zivotu.\n")
    elif item == "Totem":
        if rng.randrange(2) == 0:
            player.health = 1
            console.write("Totem selhal... prezivas jen s 1 zivotem.\n")
            _sound(console, "damage.wav")
        else:
            player.restore()
            console.write("Totem zablikal silou a plne te obnovil!\n")
            _sound(console, "heal.wav")
    else:
        console.write("Neznamy item!\n")
    del inventory[index]
    console.wait_for_key_press()
    console.clear_screen()
    return killed_all


def _use_ability(player, monsters, console, rng) -> bool:
    """Use the class ability; return True when the fight ends on the spot."""
    console.clear_screen()
    if player.energy < ABILITY_COST:
        console.write("Nemas dost energie na schopnost!\n")
        console.wait_for_key_press()
        console.clear_screen()
        return False

    if player.name == "slepec":
        player.energy -= ABILITY_COST
        damage = rng.randint(2, 4)
        for monster in monsters:
            if monster.alive:
                monster.health -= damage
        console.write(f"Slepy hnev zasahl vsechny nepratele za {damage} poskozeni.\n")
        _sound(console, "damage.wav")
        if all_monsters_dead(monsters):
            console.wait_for_key_press()
            console.clear_screen()
            return True
    elif player.name == "mnich":
        player.energy -= ABILITY_COST
        heal = rng.randint(6, 10)
        player.heal(heal)
        console.write(f"Pomoci modlitby sis vylecil {heal} zivotu.\n")
        _sound(console, "heal.wav")
        if rng.randrange(100) < 15:
            player.blessing_chance += 10
            console.write("Citis, ze Buh te slysi. (+10% blessing chance)\n")
    elif player.name == "upir":
        if player.energy != player.max_energy:
            player.energy += 4
        player.health = max(1, player.health - 2)
        console.write("Provedl jsi krvavy ritual! Ziskal jsi 4 energie, ale prisel o 2 zivoty.\n")
        _sound(console, "damage.wav")
    elif player.name == "gambler":
        player.energy -= ABILITY_COST
        if rng.randrange(2) == 0:
            player.health = max(1, player.health // 2)
            console.write("Smula! Prisels o polovinu svych zivotu!\n")
            _sound(console, "damage.wav")
        else:
            player.restore()
            console.write("Stesti! Mas plne zivoty i energii!\n")
            _sound(console, "heal.wav")
    elif player.name == "zlodej":
        player.energy -= ABILITY_COST
        stolen = sum(rng.randint(5, 24) for monster in monsters if not monster.alive)
        if stolen > 0:
            player.gold += stolen
            console.write(f"Ukradls {stolen} zlata z kapes porazenych monster.\n")
        else:
            console.write("Nebyl nikdo k okradeni.\n")
    console.wait_for_key_press()
    console.clear_screen()
    return False


def fight(
    player: Character, monsters: Sequence[Monster], console: Console, rng: random.Random
) -> None:
    """Run a fight until the monsters are beaten or the fight otherwise ends.

    Raises PlayerDied when the player is killed.
    """
    count = len(monsters)
    console.draw_header_line()
    _sound(console, "appear.wav")
    console.set_color(Color.RED)
    noun = "nepratele" if count < 5 and count != 1 else "nepritel"
    console.write(f"Pred tebou stoji {count} {noun}!\n")
    console.set_color(Color.WHITE)
    console.wait_for_key_press()
    console.clear_screen()
    _sound(console, "encounter.wav")

    active_boss = any(monster.is_boss for monster in monsters)
    boss_has_attacked = False
    all_dead = False

    while player.health > 0:
        if active_boss and not boss_has_attacked:
            _boss_opening(player, monsters, console, rng)
            boss_has_attacked = True
        if all_dead:
            _victory(player, active_boss, console, rng)
            return

        console.draw_header_line()
        show_current_stats(player, monsters, console)
        console.draw_header_line()
        alive = [monster for monster in monsters if monster.alive]
        _write_menu(console)
        try:
            choice = console.read_int()
        except ValueError:
            console.clear_screen()
            continue

        target = None
        if choice in (1, 2):
            target = _pick_target(alive, console)
            if target is None:
                console.clear_screen()
                continue

        if choice == 1:
            if not _attack(player, monsters, target, console, rng):
                return
        elif choice == 2:
            if not _cast_spell(player, target, console, rng):
                continue
        elif choice == 3:
            if _use_item(player, monsters, console, rng):
                all_dead = True
            continue
        elif choice == 4:
            if _use_ability(player, monsters, console, rng):
                return
            continue
        else:
            console.clear_screen()
            continue

        _monsters_turn(player, monsters, console, rng)
        all_dead = all_monsters_dead(monsters)