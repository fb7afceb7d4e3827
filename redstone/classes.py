"""Player classes: starting stats and growth per level."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from redstone.common import Attributes


class PlayerClass(str, Enum):
    WARRIOR = "warrior"
    RANGER = "ranger"
    MAGE = "mage"
    ROGUE = "rogue"


@dataclass(frozen=True)
class ClassInfo:
    name: str
    description: str
    base_stats: Attributes = field(default_factory=Attributes)
    starting_hp: int = 0
    starting_mp: int = 0


_CLASS_INFO = {
    PlayerClass.WARRIOR: (
        "Warrior",
        "Masters of physical combat, warriors excel at dealing and absorbing damage.",
        (12, 8, 6, 4), 120, 30,
    ),
    PlayerClass.RANGER: (
        "Ranger",
        "Skilled hunters who excel with ranged weapons and can track enemies.",
        (8, 12, 7, 7), 90, 50,
    ),
    PlayerClass.MAGE: (
        "Mage",
        "Wielders of arcane energy who sacrifice physical prowess for magical power.",
        (4, 6, 8, 14), 70, 120,
    ),
    PlayerClass.ROGUE: (
        "Rogue",
        "Nimble tricksters who excel at stealth, traps, and exploiting enemy weaknesses.",
        (6, 14, 10, 8), 80, 40,
    ),
}

# (strength, agility, charisma, intelligence) gained per level.
_LEVEL_UP = {
    PlayerClass.WARRIOR: (2, 1, 1, 0),
    PlayerClass.RANGER: (1, 2, 1, 0),
    PlayerClass.MAGE: (0, 1, 1, 2),
    PlayerClass.ROGUE: (0, 2, 1, 1),
}

# Divisors of strength (health) and intelligence (mana) for the per-level increase.
_GROWTH_DIVISORS = {
    PlayerClass.WARRIOR: (2, 4),
    PlayerClass.RANGER: (3, 3),
    PlayerClass.MAGE: (4, 2),
    PlayerClass.ROGUE: (3, 3),
}


def class_info(player_class: PlayerClass | str) -> ClassInfo:
    """Starting information for a class; unknown classes get the warrior's."""
    name, description, stats, hp, mp = _CLASS_INFO.get(player_class, _CLASS_INFO[PlayerClass.WARRIOR])
    strength, agility, charisma, intelligence = stats
    return ClassInfo(
        name=name,
        description=description,
        base_stats=Attributes(strength, agility, charisma, intelligence),
        starting_hp=hp,
        starting_mp=mp,
    )


def level_up_stats(player_class: PlayerClass | str) -> Attributes:
    """Attributes gained on each level up."""
    strength, agility, charisma, intelligence = _LEVEL_UP.get(player_class, (1, 1, 1, 1))
    return Attributes(strength, agility, charisma, intelligence)


def health_and_mana_increase(player_class: PlayerClass | str, attributes: Attributes) -> tuple[int, int]:
    """Maximum health and mana gained on a level up, given current attributes."""
    health, mana = 10, 5
    divisors = _GROWTH_DIVISORS.get(player_class)
    if divisors is not None:
        health_div, mana_div = divisors
        health += attributes.strength // health_div
        mana += attributes.intelligence // mana_div
    return health, mana