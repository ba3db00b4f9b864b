"""The player character and the monsters it fights."""

from __future__ import annotations

import random
from dataclasses import dataclass, field


@dataclass
class Character:
    name: str
    max_health: int
    health: int
    attack: int
    energy: int
    max_energy: int
    gold: int
    blessing_chance: int
    charisma: int
    is_blind: bool = False
    vampire: bool = False
    gamble: bool = False
    dodge: bool = False
    xp: int = 0
    lvl: int = 1
    mercy: bool = False
    inventory: list[str] = field(default_factory=list)

    def heal(self, amount: int) -> int:
        """Heal up to the maximum and return the new health."""
        self.health = min(self.max_health, self.health + amount)
        return self.health

    def restore(self) -> None:
        """Refill health and energy."""
        self.health = self.max_health
        self.energy = self.max_energy


_CLASSES = {
    1: dict(name="slepec", max_health=8, health=8, attack=5, energy=6, max_energy=6,
            gold=25, blessing_chance=20, charisma=20, is_blind=True),
    2: dict(name="mnich", max_health=6, health=6, attack=3, energy=6, max_energy=6,
            gold=25, blessing_chance=100, charisma=35),
    3: dict(name="upir", max_health=7, health=7, attack=5, energy=5, max_energy=5,
            gold=25, blessing_chance=0, charisma=25, vampire=True),
    4: dict(name="gambler", max_health=6, health=6, attack=3, energy=5, max_energy=5,
            gold=0, blessing_chance=0, charisma=35, gamble=True),
    5: dict(name="zlodej", max_health=6, health=6, attack=4, energy=3, max_energy=3,
            gold=25, blessing_chance=0, charisma=30, dodge=True),
}


def create_character(choice: int) -> Character:
    """Create the starting character for menu choice 1 to 5."""
    try:
        stats = _CLASSES[choice]
    except KeyError:
        raise ValueError(f"no character class {choice!r}") from None
    return Character(**stats)


@dataclass
class Monster:
    name: str
    health: int
    min_attack: int
    max_attack: int
    is_boss: bool = False

    @property
    def alive(self) -> bool:
        return self.health > 0

    def roll_damage(self, rng: random.Random) -> int:
        """Damage of one hit, uniform between the minimum and maximum attack."""
        return rng.randint(self.min_attack, self.max_attack)