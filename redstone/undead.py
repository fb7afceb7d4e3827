"""Undead monsters: skeletons, zombies, ghosts, wraiths and liches."""

from __future__ import annotations

import random

from redstone.abilities import Ability, AbilityType
from redstone.common import Attributes, Effect, EffectType
from redstone.monster import Behavior, Monster, MonsterTemplate, MonsterType, monster_basic_attack

LEVEL_SPREAD = 2

_TEMPLATES = (
    MonsterTemplate("Skeleton", MonsterType.UNDEAD, "S",
                    Attributes(strength=6, agility=8, intelligence=4, charisma=2), 10, 1),
    MonsterTemplate("Zombie", MonsterType.UNDEAD, "Z",
                    Attributes(strength=10, agility=4, intelligence=2, charisma=2), 15, 2),
    MonsterTemplate("Ghost", MonsterType.UNDEAD, "G",
                    Attributes(strength=4, agility=10, intelligence=8, charisma=6), 20, 3),
    MonsterTemplate("Wraith", MonsterType.UNDEAD, "W",
                    Attributes(strength=8, agility=12, intelligence=10, charisma=8), 30, 4),
    MonsterTemplate("Lich", MonsterType.UNDEAD, "L",
                    Attributes(strength=12, agility=10, intelligence=15, charisma=12), 100, 7),
)


def undead_templates() -> list[MonsterTemplate]:
    return list(_TEMPLATES)


def create_undead_abilities(monster: Monster) -> None:
    """Give an undead monster its abilities according to its name and level."""
    monster.abilities.append(monster_basic_attack(monster.level))

    if monster.level >= 3:
        monster.abilities.append(Ability(
            "Life Drain", "Drains health from the target", 4, 4, AbilityType.ATTACK,
            3 + monster.level // 2,
            Effect("Drained", 1, EffectType.DEBUFF_ATTRIBUTE, 2),
        ))

    if monster.level >= 5:
        if monster.name == "Lich":
            monster.abilities.append(Ability(
                "Necrotic Blast", "Powerful undead magic attack", 8, 5, AbilityType.ATTACK,
                8 + monster.level,
            ))
        elif monster.name == "Wraith":
            monster.abilities.append(Ability(
                "Terror", "Terrifies the target, reducing their stats", 6, 6, AbilityType.DEBUFF, 0,
                Effect("Terrified", 3, EffectType.DEBUFF_ATTRIBUTE, 3),
            ))


def generate_undead(level: int, rng: random.Random | None = None) -> Monster:
    """Create a random undead monster suited to the dungeon level."""
    rng = rng if rng is not None else random.Random()
    candidates = [
        t for t in _TEMPLATES if level - LEVEL_SPREAD <= t.level <= level + LEVEL_SPREAD
    ] or list(_TEMPLATES)
    template = rng.choice(candidates)

    scaling = level * 0.5
    health = 20 + int(scaling * 10)
    mana = 10 + int(scaling * 5)
    base = template.base_attributes

    monster = Monster(
        name=template.name,
        symbol=template.symbol,
        monster_type=MonsterType.UNDEAD,
        level=level,
        attributes=Attributes(
            strength=base.strength + int(scaling),
            agility=base.agility + int(scaling),
            intelligence=base.intelligence + int(scaling),
            charisma=base.charisma + int(scaling / 2),
        ),
        health=health,
        max_health=health,
        mana=mana,
        max_mana=mana,
        gold=rng.randrange(10 * level) + level,
        behavior=Behavior(rng.randrange(4)),
        drop_rate=0.3 + level * 0.05,
        exp_value=template.exp_value * level,
    )
    create_undead_abilities(monster)
    return monster