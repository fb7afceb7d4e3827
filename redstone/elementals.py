"""Elemental monsters: sprites, golems, water and air spirits, magma giants."""

from __future__ import annotations

import random

from redstone.abilities import Ability, AbilityType
from redstone.common import Attributes, Effect, EffectType
from redstone.monster import Behavior, Monster, MonsterTemplate, MonsterType, monster_basic_attack

LEVEL_SPREAD = 2

_TEMPLATES = (
    MonsterTemplate("Fire Sprite", MonsterType.ELEMENTAL, "f",
                    Attributes(strength=6, agility=12, intelligence=10, charisma=8), 20, 3),
    MonsterTemplate("Earth Golem", MonsterType.ELEMENTAL, "E",
                    Attributes(strength=15, agility=5, intelligence=6, charisma=4), 30, 4),
    MonsterTemplate("Water Elemental", MonsterType.ELEMENTAL, "W",
                    Attributes(strength=10, agility=10, intelligence=12, charisma=8), 35, 5),
    MonsterTemplate("Air Spirit", MonsterType.ELEMENTAL, "A",
                    Attributes(strength=8, agility=16, intelligence=12, charisma=10), 35, 5),
    MonsterTemplate("Magma Giant", MonsterType.ELEMENTAL, "M",
                    Attributes(strength=18, agility=8, intelligence=10, charisma=6), 80, 7),
)


def _special_ability(name: str, level: int) -> Ability | None:
    if name == "Fire Sprite":
        return Ability(
            "Fireball", "Hurls a ball of fire", 5, 3, AbilityType.ATTACK, 4 + level,
            Effect("Burning", 2, EffectType.DAMAGE_OVER_TIME, 3),
        )
    if name == "Earth Golem":
        return Ability(
            "Tremor", "Shakes the ground to unbalance enemies", 6, 4, AbilityType.ATTACK, 3 + level,
            Effect("Unbalanced", 3, EffectType.DEBUFF_ATTRIBUTE, 2),
        )
    if name == "Water Elemental":
        return Ability(
            "Freeze", "Encases the target in ice", 7, 5, AbilityType.DEBUFF, 2,
            Effect("Frozen", 4, EffectType.DEBUFF_ATTRIBUTE, 2),
        )
    if name == "Air Spirit":
        return Ability(
            "Lightning Strike", "Calls down a bolt of lightning", 8, 6, AbilityType.ATTACK, 6 + level,
        )
    if name == "Magma Giant":
        return Ability(
            "Eruption", "Causes magma to erupt from the ground", 10, 5, AbilityType.ATTACK, 8 + level,
            Effect("Melting", 3, EffectType.DAMAGE_OVER_TIME, 3),
        )
    return None


def elemental_templates() -> list[MonsterTemplate]:
    return list(_TEMPLATES)


def create_elemental_abilities(monster: Monster) -> None:
    """Give an elemental its abilities according to its name and level."""
    monster.abilities.append(monster_basic_attack(monster.level))

    special = _special_ability(monster.name, monster.level)
    if special is not None:
        monster.abilities.append(special)

    if monster.level >= 5:
        monster.abilities.append(Ability(
            "Elemental Surge", "Powerful elemental attack", 6, 5, AbilityType.ATTACK,
            5 + monster.level,
        ))


def generate_elemental(level: int, rng: random.Random | None = None) -> Monster:
    """Create a random elemental suited to the dungeon level."""
    rng = rng if rng is not None else random.Random()
    candidates = [
        t for t in _TEMPLATES if level - LEVEL_SPREAD <= t.level <= level + LEVEL_SPREAD
    ] or list(_TEMPLATES)
    template = rng.choice(candidates)

    scaling = level * 0.5
    health = 30 + int(scaling * 10)
    mana = 40 + int(scaling * 8)
    base = template.base_attributes

    monster = Monster(
        name=template.name,
        symbol=template.symbol,
        monster_type=MonsterType.ELEMENTAL,
        level=level,
        attributes=Attributes(
            strength=base.strength + int(scaling),
            agility=base.agility + int(scaling),
            intelligence=base.intelligence + int(scaling * 1.5),
            charisma=base.charisma + int(scaling / 2),
        ),
        health=health,
        max_health=health,
        mana=mana,
        max_mana=mana,
        gold=rng.randrange(5 * level) + level * 2,
        behavior=Behavior(rng.randrange(2) + 2),
        drop_rate=0.5 + level * 0.05,
        exp_value=template.exp_value * level,
    )
    create_elemental_abilities(monster)
    return monster