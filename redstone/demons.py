"""Demon monsters: imps, fallen ones, hellhounds, vortices and balrogs."""

from __future__ import annotations

import random

from redstone.abilities import Ability, AbilityType
from redstone.common import Attributes, Effect, EffectType
from redstone.monster import Behavior, Monster, MonsterTemplate, MonsterType, monster_basic_attack

LEVEL_SPREAD = 2

_TEMPLATES = (
    MonsterTemplate("Imp", MonsterType.DEMON, "i",
                    Attributes(strength=5, agility=10, intelligence=8, charisma=6), 15, 2),
    MonsterTemplate("Fallen One", MonsterType.DEMON, "f",
                    Attributes(strength=8, agility=8, intelligence=6, charisma=5), 20, 3),
    MonsterTemplate("Hellhound", MonsterType.DEMON, "h",
                    Attributes(strength=12, agility=14, intelligence=5, charisma=4), 25, 4),
    MonsterTemplate("Vortex", MonsterType.DEMON, "v",
                    Attributes(strength=10, agility=12, intelligence=12, charisma=10), 40, 5),
    MonsterTemplate("Balrog", MonsterType.DEMON, "B",
                    Attributes(strength=18, agility=12, intelligence=14, charisma=14), 120, 8),
)


def demon_templates() -> list[MonsterTemplate]:
    return list(_TEMPLATES)


def create_demon_abilities(monster: Monster) -> None:
    """Give a demon its abilities according to its name and level."""
    monster.abilities.append(monster_basic_attack(monster.level))

    if monster.level >= 3:
        monster.abilities.append(Ability(
            "Hellfire", "Burning attack that deals damage over time", 5, 3, AbilityType.ATTACK,
            2 + monster.level,
            Effect("Burning", 2, EffectType.DAMAGE_OVER_TIME, 3),
        ))

    if monster.level >= 5:
        if monster.name == "Balrog":
            monster.abilities.append(Ability(
                "Inferno", "Massive fire attack that engulfs the area", 10, 6, AbilityType.ATTACK,
                10 + monster.level,
            ))
        elif monster.name == "Vortex":
            monster.abilities.append(Ability(
                "Chaos Nova", "Explosion of demonic energy", 8, 5, AbilityType.ATTACK,
                8 + monster.level // 2,
                Effect("Chaos", 2, EffectType.DEBUFF_ATTRIBUTE, 2),
            ))


def generate_demon(level: int, rng: random.Random | None = None) -> Monster:
    """Create a random demon suited to the dungeon level."""
    rng = rng if rng is not None else random.Random()
    candidates = [
        t for t in _TEMPLATES if level - LEVEL_SPREAD <= t.level <= level + LEVEL_SPREAD
    ] or list(_TEMPLATES)
    template = rng.choice(candidates)

    scaling = level * 0.5
    health = 25 + int(scaling * 12)
    mana = 15 + int(scaling * 6)
    base = template.base_attributes

    monster = Monster(
        name=template.name,
        symbol=template.symbol,
        monster_type=MonsterType.DEMON,
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
        gold=rng.randrange(15 * level) + level,
        behavior=Behavior(rng.randrange(4)),
        drop_rate=0.4 + level * 0.05,
        exp_value=template.exp_value * level,
    )
    create_demon_abilities(monster)
    return monster