"""Animal monsters: rats, spiders, snakes, bears and bats."""

from __future__ import annotations

import random

from redstone.abilities import Ability, AbilityType
from redstone.common import Attributes, Effect, EffectType
from redstone.monster import Behavior, Monster, MonsterTemplate, MonsterType, monster_basic_attack

LEVEL_SPREAD = 1

_TEMPLATES = (
    MonsterTemplate("Rat", MonsterType.ANIMAL, "r",
                    Attributes(strength=3, agility=10, intelligence=2, charisma=1), 5, 1),
    MonsterTemplate("Spider", MonsterType.ANIMAL, "s",
                    Attributes(strength=4, agility=12, intelligence=3, charisma=1), 10, 2),
    MonsterTemplate("Snake", MonsterType.ANIMAL, "S",
                    Attributes(strength=5, agility=14, intelligence=4, charisma=2), 12, 2),
    MonsterTemplate("Cave Bear", MonsterType.ANIMAL, "b",
                    Attributes(strength=14, agility=8, intelligence=5, charisma=4), 20, 3),
    MonsterTemplate("Giant Bat", MonsterType.ANIMAL, "B",
                    Attributes(strength=6, agility=16, intelligence=4, charisma=3), 18, 3),
)

_SPECIALS = {
    "Spider": lambda: Ability(
        "Web", "Ensnares the enemy, reducing their speed", 3, 4, AbilityType.DEBUFF, 1,
        Effect("Webbed", 3, EffectType.DEBUFF_ATTRIBUTE, 2),
    ),
    "Snake": lambda: Ability(
        "Venom Strike", "Poisonous bite that causes damage over time", 4, 3, AbilityType.ATTACK, 2,
        Effect("Poisoned", 2, EffectType.DAMAGE_OVER_TIME, 3),
    ),
    "Cave Bear": lambda: Ability(
        "Ferocious Roar", "Intimidating roar that weakens enemies", 5, 5, AbilityType.DEBUFF, 0,
        Effect("Intimidated", 2, EffectType.DEBUFF_ATTRIBUTE, 2),
    ),
    "Giant Bat": lambda: Ability(
        "Echolocation", "Uses sound to locate weak spots", 3, 3, AbilityType.BUFF, 0,
        Effect("Enhanced Senses", 3, EffectType.BUFF_ATTRIBUTE, 3),
    ),
}


def animal_templates() -> list[MonsterTemplate]:
    return list(_TEMPLATES)


def create_animal_abilities(monster: Monster) -> None:
    """Give an animal its basic attack and, by species, one special ability."""
    monster.abilities.append(monster_basic_attack(monster.level))
    special = _SPECIALS.get(monster.name)
    if special is not None:
        monster.abilities.append(special())


def generate_animal(level: int, rng: random.Random | None = None) -> Monster:
    """Create a random animal suited to the dungeon level."""
    rng = rng if rng is not None else random.Random()
    candidates = [
        t for t in _TEMPLATES if level - LEVEL_SPREAD <= t.level <= level + LEVEL_SPREAD
    ] or list(_TEMPLATES)
    template = rng.choice(candidates)

    scaling = level * 0.5
    health = 15 + int(scaling * 8)
    mana = 5 + int(scaling * 3)
    base = template.base_attributes

    monster = Monster(
        name=template.name,
        symbol=template.symbol,
        monster_type=MonsterType.ANIMAL,
        level=level,
        attributes=Attributes(
            strength=base.strength + int(scaling),
            agility=base.agility + int(scaling),
            intelligence=base.intelligence + int(scaling / 2),
            charisma=base.charisma + int(scaling / 3),
        ),
        health=health,
        max_health=health,
        mana=mana,
        max_mana=mana,
        gold=rng.randrange(3 * level) + 1,
        behavior=Behavior(rng.randrange(3)),
        drop_rate=0.2 + level * 0.03,
        exp_value=template.exp_value * level,
    )
    create_animal_abilities(monster)
    return monster