"""Player abilities: the basic attack of each class and those learned on level up."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum

from redstone.classes import PlayerClass
from redstone.common import Effect, EffectType


class AbilityType(str, Enum):
    ATTACK = "attack"
    HEAL = "heal"
    BUFF = "buff"
    DEBUFF = "debuff"
    SPECIAL = "special"


@dataclass
class Ability:
    name: str
    description: str
    mana_cost: int
    cooldown: int
    ability_type: AbilityType
    power: int
    effect: Effect | None = None
    current_cd: int = 0


_BASIC_ATTACKS = {
    PlayerClass.WARRIOR: Ability("Slash", "A basic attack with your weapon", 0, 0, AbilityType.ATTACK, 5),
    PlayerClass.RANGER: Ability("Shoot", "Attack an enemy from distance", 0, 0, AbilityType.ATTACK, 4),
    PlayerClass.MAGE: Ability("Magic Missile", "A basic magical attack", 5, 0, AbilityType.ATTACK, 6),
    PlayerClass.ROGUE: Ability("Backstab", "A sneaky attack dealing extra damage", 3, 2, AbilityType.ATTACK, 7),
}

_DEFAULT_ATTACK = Ability("Attack", "A basic attack", 0, 0, AbilityType.ATTACK, 3)

_LEVEL_ABILITIES = {
    (PlayerClass.WARRIOR, 3): Ability(
        "Cleave", "Attack that hits multiple enemies", 5, 3, AbilityType.ATTACK, 7
    ),
    (PlayerClass.WARRIOR, 6): Ability(
        "Berserk", "Increases strength temporarily", 8, 5, AbilityType.BUFF, 0,
        Effect("Berserker Rage", 5, EffectType.BUFF_ATTRIBUTE, 5),
    ),
    (PlayerClass.WARRIOR, 9): Ability(
        "Whirlwind", "Massive attack that hits all enemies", 12, 7, AbilityType.ATTACK, 15
    ),
    (PlayerClass.RANGER, 3): Ability(
        "Quick Shot", "Fast attack that doesn't use a turn", 5, 4, AbilityType.ATTACK, 6
    ),
    (PlayerClass.RANGER, 6): Ability(
        "Snare", "Trap enemy, reducing their agility", 7, 5, AbilityType.DEBUFF, 0,
        Effect("Snared", 5, EffectType.DEBUFF_ATTRIBUTE, 3),
    ),
    (PlayerClass.RANGER, 9): Ability(
        "Rain of Arrows", "Powerful attack with high damage", 10, 6, AbilityType.ATTACK, 18
    ),
    (PlayerClass.MAGE, 3): Ability(
        "Fireball", "Explosive magic attack with area damage", 8, 3, AbilityType.ATTACK, 10
    ),
    (PlayerClass.MAGE, 6): Ability(
        "Frost Nova", "Freezes enemies, reducing their speed", 10, 5, AbilityType.DEBUFF, 5,
        Effect("Frozen", 3, EffectType.DEBUFF_ATTRIBUTE, 2),
    ),
    (PlayerClass.MAGE, 9): Ability(
        "Arcane Explosion", "Massive magic damage to all nearby enemies", 15, 8, AbilityType.ATTACK, 20
    ),
    (PlayerClass.ROGUE, 3): Ability(
        "Poison Strike", "Attack that poisons the enemy", 5, 4, AbilityType.ATTACK, 5,
        Effect("Poisoned", 2, EffectType.DAMAGE_OVER_TIME, 4),
    ),
    (PlayerClass.ROGUE, 6): Ability(
        "Shadow Step", "Teleport behind enemy for extra damage", 8, 5, AbilityType.ATTACK, 12
    ),
    (PlayerClass.ROGUE, 9): Ability(
        "Death Mark", "Mark target for instant death after 3 turns", 15, 10, AbilityType.DEBUFF, 0,
        Effect("Death Mark", 999, EffectType.DAMAGE_OVER_TIME, 3),
    ),
}

_MINOR_HEAL = Ability("Minor Heal", "Heal a small amount of health", 5, 3, AbilityType.HEAL, 10)


def basic_attack(player_class: PlayerClass | str) -> Ability:
    """A fresh copy of the class's starting attack."""
    return copy.deepcopy(_BASIC_ATTACKS.get(player_class, _DEFAULT_ATTACK))


def new_ability_for_level(player_class: PlayerClass | str, level: int) -> Ability:
    """The ability learned at a level; Minor Heal where the class learns nothing."""
    try:
        prototype = _LEVEL_ABILITIES[(PlayerClass(player_class), level)]
    except (KeyError, ValueError):
        prototype = _MINOR_HEAL
    return copy.deepcopy(prototype)


def reduce_cooldowns(abilities: list[Ability]) -> list[Ability]:
    """Count every running cooldown down by one turn, in place."""
    for ability in abilities:
        if ability.current_cd > 0:
            ability.current_cd -= 1
    return abilities