"""Creating a monster of a given type."""

from __future__ import annotations

import random
from typing import Callable

from redstone.aberrations import generate_aberration
from redstone.animals import generate_animal
from redstone.demons import generate_demon
from redstone.elementals import generate_elemental
from redstone.monster import Monster, MonsterType
from redstone.undead import generate_undead

_GENERATORS: dict[MonsterType, Callable[[int, random.Random | None], Monster]] = {
    MonsterType.UNDEAD: generate_undead,
    MonsterType.DEMON: generate_demon,
    MonsterType.ANIMAL: generate_animal,
    MonsterType.ELEMENTAL: generate_elemental,
    MonsterType.ABERRATION: generate_aberration,
}


def generate_monster(
    level: int, monster_type: MonsterType | str, rng: random.Random | None = None
) -> Monster:
    """Create a random monster of the given type; unknown types yield undead."""
    try:
        kind = MonsterType(monster_type)
    except ValueError:
        kind = MonsterType.UNDEAD
    return _GENERATORS[kind](level, rng)