"""Weapon templates and random weapon generation."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from redstone.common import Attributes, Effect, EffectType
from redstone.item import EquipmentSlot, Item, ItemType


class WeaponType(str, Enum):
    SWORD = "sword"
    AXE = "axe"
    BOW = "bow"
    STAFF = "staff"
    DAGGER = "dagger"
    HAMMER = "hammer"


@dataclass(frozen=True)
class WeaponTemplate:
    name: str
    symbol: str
    slot: EquipmentSlot
    base_value: int
    base_damage: int
    req_str: int
    req_agi: int
    req_int: int


_TEMPLATES = (
    WeaponTemplate("Dagger", "/", EquipmentSlot.WEAPON, 10, 3, 5, 10, 5),
    WeaponTemplate("Sword", "/", EquipmentSlot.WEAPON, 20, 5, 10, 8, 5),
    WeaponTemplate("Axe", "\\", EquipmentSlot.WEAPON, 25, 6, 12, 6, 5),
    WeaponTemplate("Mace", "!", EquipmentSlot.WEAPON, 22, 5, 11, 5, 5),
    WeaponTemplate("Staff", "|", EquipmentSlot.WEAPON, 15, 4, 6, 6, 10),
    WeaponTemplate("Bow", ")", EquipmentSlot.WEAPON, 18, 4, 6, 12, 5),
    WeaponTemplate("Wand", "~", EquipmentSlot.WEAPON, 16, 3, 4, 5, 12),
)

_PREFIXES = ("", "", "", "Fine", "Sharp", "Sturdy", "Masterwork", "Enchanted", "Ancient", "Legendary")

_SUFFIXES = (
    "", "", "", "of Power", "of Quickness", "of the Warrior", "of the Mage",
    "of Destruction", "of Slaying", "of Doom",
)


def weapon_templates() -> list[WeaponTemplate]:
    return list(_TEMPLATES)


def weapon_prefixes() -> list[str]:
    return list(_PREFIXES)


def weapon_suffixes() -> list[str]:
    return list(_SUFFIXES)


def _mentions(name: str, *words: str) -> bool:
    return any(word in name for word in words)


def generate_weapon(level: int, rng: random.Random | None = None) -> Item:
    """Create a random weapon scaled to the given dungeon level."""
    rng = rng if rng is not None else random.Random()
    template = rng.choice(_TEMPLATES)
    prefix = rng.choice(_PREFIXES)
    suffix = rng.choice(_SUFFIXES)

    quality = 1.0
    if prefix:
        quality += 0.2
    if suffix:
        quality += 0.3
    level_mod = level * 0.2

    name = " ".join(part for part in (prefix, template.name, suffix) if part)

    damage = int(template.base_damage * (1.0 + level_mod) * quality)
    value = int(template.base_value * (1.0 + level_mod) * quality)
    req_scale = 1.0 + level_mod * 0.5

    bonus_amount = int(1.0 + level_mod)
    bonus = Attributes(
        strength=bonus_amount if _mentions(name, "Power", "Warrior", "Sturdy") else 0,
        agility=bonus_amount if _mentions(name, "Quickness", "Sharp") else 0,
        intelligence=bonus_amount if _mentions(name, "Mage", "Enchanted") else 0,
    )

    return Item(
        name=name,
        symbol=template.symbol,
        item_type=ItemType.WEAPON,
        slot=template.slot,
        value=value,
        bonus_attributes=bonus,
        required_attributes=Attributes(
            strength=int(template.req_str * req_scale),
            agility=int(template.req_agi * req_scale),
            intelligence=int(template.req_int * req_scale),
        ),
        effects=[Effect(name="Damage", magnitude=damage, effect_type=EffectType.DAMAGE_OVER_TIME)],
    )