"""Aberrations: crawlers, tentacled horrors, mind flayers, beholders and elder things."""

from __future__ import annotations

import random

from redstone.abilities import Ability, AbilityType
from redstone.common import Attributes, Effect, EffectType
from redstone.monster import Behavior, Monster, MonsterTemplate, MonsterType, monster_basic_attack

LEVEL_SPREAD = 2

_TEMPLATES = (
    MonsterTemplate("Crawler", MonsterType.ABERRATION, "c",
                    Attributes(strength=12, agility=10, intelligence=3, charisma=2), 30, 4),
    MonsterTemplate("Tentacled Horror", MonsterType.ABERRATION, "T",
                    Attributes(strength=14, agility=8, intelligence=10, charisma=4), 40, 5),
    MonsterTemplate("Mind Flayer", MonsterType.ABERRATION, "M",
                    Attributes(strength=10, agility=10, intelligence=16, charisma=14), 60, 6),
    MonsterTemplate("Beholder", MonsterType.ABERRATION, "B",
                    Attributes(strength=12, agility=8, intelligence=18, charisma=12), 80, 7),
    MonsterTemplate("Elder Thing", MonsterType.ABERRATION, "E",
                    Attributes(strength=16, agility=12, intelligence=20, charisma=16), 150, 8),
)


def _special_ability(name: str, level: int) -> Ability | None:
    if name == "Crawler":
        return Ability(
            "Toxic Spit", "Spits a corrosive toxin", 4, 3, AbilityType.ATTACK, 3 + level,
            Effect("Corroded", 2, EffectType.DAMAGE_OVER_TIME, 3),
        )
    if name == "Tentacled Horror":
        return Ability(
            "Tentacle Grab", "Grabs and constricts the target", 5, 4, AbilityType.ATTACK, 4 + level,
            Effect("Constricted", 3, EffectType.DEBUFF_ATTRIBUTE, 2),
        )
    if name == "Mind Flayer":
        return Ability(
            "Mind Blast", "Psychic attack that damages the mind", 8, 5, AbilityType.ATTACK, 6 + level,
            Effect("Disoriented", 4, EffectType.DEBUFF_ATTRIBUTE, 2),
        )
    if name == "Beholder":
        return Ability(
            "Eye Ray", "Shoots a beam of energy from one of its eyes", 10, 4, AbilityType.ATTACK,
            7 + level,
        )
    if name == "Elder Thing":
        return Ability(
            "Cosmic Horror", "Reveals glimpses of cosmic horror that damage sanity", 12, 6,
            AbilityType.ATTACK, 10 + level,
            Effect("Madness", 5, EffectType.DEBUFF_ATTRIBUTE, 3),
        )
    return None


def aberration_templates() -> list[MonsterTemplate]:
    return list(_TEMPLATES)


def create_aberration_abilities(monster: Monster) -> None:
    """Give an aberration its abilities according to its name and level."""
    monster.abilities.append(monster_basic_attack(monster.level))

    special = _special_ability(monster.name, monster.level)
    if special is not None:
        monster.abilities.append(special)

    if monster.level >= 6:
        if monster.name in ("Mind Flayer", "Elder Thing"):
            monster.abilities.append(Ability(
                "Psionic Scream", "Powerful psychic attack that affects all nearby enemies",
                15, 8, AbilityType.ATTACK, 9 + monster.level,
            ))
        elif monster.name == "Beholder":
            monster.abilities.append(Ability(
                "Disintegrate", "Powerful ray that nearly disintegrates the target",
                14, 8, AbilityType.ATTACK, 12 + monster.level,
            ))


def generate_aberration(level: int, rng: random.Random | None = None) -> Monster:
    """Create a random aberration suited to the dungeon level."""
    rng = rng if rng is not None else random.Random()
    candidates = [
        t for t in _TEMPLATES if level - LEVEL_SPREAD <= t.level <= level + LEVEL_SPREAD
    ] or list(_TEMPLATES)
    template = rng.choice(candidates)

    scaling = level * 0.5
    health = 35 + int(scaling * 12)
    mana = 45 + int(scaling * 10)
    base = template.base_attributes

    monster = Monster(
        name=template.name,
        symbol=template.symbol,
        monster_type=MonsterType.ABERRATION,
        level=level,
        attributes=Attributes(
            strength=base.strength + int(scaling),
            agility=base.agility + int(scaling),
            intelligence=base.intelligence + int(scaling * 1.5),
            charisma=base.charisma - int(scaling / 2),
        ),
        health=health,
        max_health=health,
        mana=mana,
        max_mana=mana,
        gold=rng.randrange(20 * level) + level * 3,
        behavior=Behavior(rng.randrange(2) + 2),
        drop_rate=0.6 + level * 0.05,
        exp_value=template.exp_value * level,
    )
    create_aberration_abilities(monster)
    return monster