"""Armor templates and random armor generation."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from redstone.common import Attributes, Effect, EffectType
from redstone.item import EquipmentSlot, Item, ItemType


class ArmorType(str, Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


@dataclass(frozen=True)
class ArmorTemplate:
    name: str
    symbol: str
    slot: EquipmentSlot
    base_value: int
    base_defense: int
    req_str: int
    armor_type: ArmorType


_TEMPLATES = (
    ArmorTemplate("Cloth Robe", "[", EquipmentSlot.BODY, 8, 2, 3, ArmorType.LIGHT),
    ArmorTemplate("Leather Armor", "[", EquipmentSlot.BODY, 15, 3, 6, ArmorType.LIGHT),
    ArmorTemplate("Chain Mail", "[", EquipmentSlot.BODY, 25, 5, 10, ArmorType.MEDIUM),
    ArmorTemplate("Plate Armor", "[", EquipmentSlot.BODY, 40, 8, 15, ArmorType.HEAVY),
    ArmorTemplate("Cap", "^", EquipmentSlot.HEAD, 5, 1, 2, ArmorType.LIGHT),
    ArmorTemplate("Leather Cap", "^", EquipmentSlot.HEAD, 8, 2, 3, ArmorType.LIGHT),
    ArmorTemplate("Helmet", "^", EquipmentSlot.HEAD, 15, 3, 6, ArmorType.MEDIUM),
    ArmorTemplate("Full Helm", "^", EquipmentSlot.HEAD, 25, 5, 10, ArmorType.HEAVY),
    ArmorTemplate("Gloves", "}", EquipmentSlot.HANDS, 5, 1, 2, ArmorType.LIGHT),
    ArmorTemplate("Bracers", "}", EquipmentSlot.HANDS, 12, 2, 5, ArmorType.MEDIUM),
    ArmorTemplate("Gauntlets", "}", EquipmentSlot.HANDS, 20, 3, 8, ArmorType.HEAVY),
    ArmorTemplate("Shoes", "{", EquipmentSlot.FEET, 6, 1, 2, ArmorType.LIGHT),
    ArmorTemplate("Boots", "{", EquipmentSlot.FEET, 12, 2, 4, ArmorType.MEDIUM),
    ArmorTemplate("Greaves", "{", EquipmentSlot.FEET, 18, 3, 7, ArmorType.HEAVY),
    ArmorTemplate("Amulet", '"', EquipmentSlot.ACCESSORY, 20, 0, 0, ArmorType.LIGHT),
    ArmorTemplate("Ring", "=", EquipmentSlot.ACCESSORY, 25, 0, 0, ArmorType.LIGHT),
)

_PREFIXES = ("", "", "", "Sturdy", "Reinforced", "Ornate", "Masterwork", "Enchanted", "Ancient", "Legendary")

_SUFFIXES = (
    "", "", "", "of Protection", "of Warding", "of the Knight", "of the Wizard",
    "of Deflection", "of Resistance", "of Invulnerability",
)


def armor_templates() -> list[ArmorTemplate]:
    return list(_TEMPLATES)


def armor_prefixes() -> list[str]:
    return list(_PREFIXES)


def armor_suffixes() -> list[str]:
    return list(_SUFFIXES)


def _mentions(name: str, *words: str) -> bool:
    return any(word in name for word in words)


def generate_armor(level: int, rng: random.Random | None = None) -> Item:
    """Create a random piece of armor scaled to the given dungeon level."""
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

    defense = int(template.base_defense * (1.0 + level_mod) * quality)
    value = int(template.base_value * (1.0 + level_mod) * quality)
    str_req = int(template.req_str * (1.0 + level_mod * 0.5))

    bonus_amount = int(1.0 + level_mod)
    bonus = Attributes(
        strength=bonus_amount if _mentions(name, "Protection", "Knight", "Sturdy") else 0,
        agility=(
            bonus_amount
            if _mentions(name, "Deflection") or template.armor_type == ArmorType.LIGHT
            else 0
        ),
        charisma=bonus_amount if _mentions(name, "Ornate") else 0,
        intelligence=bonus_amount if _mentions(name, "Wizard", "Enchanted") else 0,
    )

    return Item(
        name=name,
        symbol=template.symbol,
        item_type=ItemType.ARMOR,
        slot=template.slot,
        value=value,
        bonus_attributes=bonus,
        required_attributes=Attributes(strength=str_req),
        effects=[Effect(name="Defense", magnitude=defense, effect_type=EffectType.BUFF_ATTRIBUTE)],
    )