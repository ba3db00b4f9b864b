"""Random backstory that adjusts a new character's stats."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .character import Character
from .console import Color, Console


@dataclass(frozen=True)
class BackstoryOption:
    """One line of the story together with the stat changes it grants."""

    text: str
    effects: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    def apply(self, player: Character) -> None:
        for stat, delta in self.effects.items():
            setattr(player, stat, getattr(player, stat) + delta)


def _option(text: str, **effects: int) -> BackstoryOption:
    return BackstoryOption(text, MappingProxyType(effects))


CHILDHOOD = (
    _option("zabavne dite se kterym se nikdo nenudil.", charisma=5),
    _option("problemove dite.", attack=1),
    _option("hodne dite.", max_health=1),
    _option("samostatne dite.", gold=10),
    _option("hloupe dite."),
    _option("genialni a velice nadane dite, ve vsem jsi vynikal.", max_health=2, max_energy=2),
)

LIFE_PATH = (
    _option("venoval zahradniceni.", health=1),
    _option("venoval zenam.", charisma=5),
    _option("venoval obchodovani.", gold=15),
    _option("venoval branenim sve materske vesnice.", attack=2),
    _option("venoval bojovem jezdeni na koni.", attack=2),
    _option("venoval sbiranim hub.", health=2),
    _option("valel v posteli, bylo tezke se zvednout."),
    _option("venoval magii.", max_energy=1),
)

REASONS = (
    _option("Odesel jsi z domu, protoze mas hlad.", max_health=1),
    _option(
        "Odesel jsi z domu, protoze jsi mel zly sen o tom jak nepratele napadnou tvoji vesnici",
        max_energy=2,
        max_health=1,
    ),
    _option("Odesel jsi z domu, protoze te boli bricho a potrebujes na zachod."),
    _option("Odesel jsi z domu aby ses vydal na vypravu.", attack=1),
    _option("Odesel jsi z domu jelikoz... Uz nevis proc jsi odesel z domu.", max_energy=2),
    _option("Odesel jsi, protoze se chces naucit carovat.", energy=1),
)


def roll_backstory(rng: random.Random) -> tuple[BackstoryOption, BackstoryOption, BackstoryOption]:
    """Pick a childhood, a life path and a reason for leaving home."""
    return rng.choice(CHILDHOOD), rng.choice(LIFE_PATH), rng.choice(REASONS)


def generate_backstory(
    player: Character, console: Console, rng: random.Random
) -> tuple[BackstoryOption, BackstoryOption, BackstoryOption]:
    """Tell a random backstory, apply its effects to the player and return it."""
    childhood, life, reason = roll_backstory(rng)
    console.draw_header_line()
    console.set_color(Color.LIGHT_YELLOW)
    console.print_centered("TVUJ PRIBEH")
    console.draw_header_line()
    console.set_color(Color.WHITE)
    console.write("(tohle bude mit dopad na tve staty)\n")
    console.sleep(1.2)
    console.write(f"Byl jsi {childhood.text}\n")
    console.sleep(0.8)
    console.write(f"Cely zivot ses {life.text}\n")
    console.sleep(0.8)
    console.write(f"Nakonec se z tebe stal {player.name} \n")
    console.sleep(0.8)
    console.write(f"{reason.text}\n")
    console.sleep(0.8)
    console.write("Opoustis svuj dum.\n")
    for option in (childhood, life, reason):
        option.apply(player)
    console.sleep(1.0)
    console.wait_for_key_press()
    console.clear_screen()
    return childhood, life, reason