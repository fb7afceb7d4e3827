"""Potions and scrolls, and generation of any random item."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace

from redstone.armor import generate_armor
from redstone.common import Effect, EffectType
from redstone.item import Item, ItemType
from redstone.weapons import generate_weapon


@dataclass(frozen=True)
class ConsumableTemplate:
    name: str
    symbol: str
    base_value: int
    effect: Effect


_TEMPLATES = (
    ConsumableTemplate("Health Potion", "!", 15, Effect("Healing", 20, EffectType.HEAL_OVER_TIME, 1)),
    ConsumableTemplate("Mana Potion", "!", 15, Effect("Mana Restore", 15, EffectType.BUFF_ATTRIBUTE, 1)),
    ConsumableTemplate("Strength Elixir", "!", 25, Effect("Strength Boost", 3, EffectType.BUFF_ATTRIBUTE, 10)),
    ConsumableTemplate("Agility Elixir", "!", 25, Effect("Agility Boost", 3, EffectType.BUFF_ATTRIBUTE, 10)),
    ConsumableTemplate(
        "Intelligence Elixir", "!", 25, Effect("Intelligence Boost", 3, EffectType.BUFF_ATTRIBUTE, 10)
    ),
    ConsumableTemplate("Charisma Elixir", "!", 25, Effect("Charisma Boost", 3, EffectType.BUFF_ATTRIBUTE, 10)),
    ConsumableTemplate("Scroll of Fireball", "?", 30, Effect("Fireball", 25, EffectType.DAMAGE_OVER_TIME, 1)),
    ConsumableTemplate("Scroll of Protection", "?", 35, Effect("Protection", 5, EffectType.BUFF_ATTRIBUTE, 20)),
)

_PREFIXES = ("", "", "Minor", "Standard", "Greater", "Superior", "Exceptional", "Perfect")

_QUALITY = {
    "Minor": 0.8,
    "Standard": 1.0,
    "Greater": 1.2,
    "Superior": 1.5,
    "Exceptional": 2.0,
    "Perfect": 2.5,
}


def consumable_templates() -> list[ConsumableTemplate]:
    return [replace(t, effect=replace(t.effect)) for t in _TEMPLATES]


def consumable_prefixes() -> list[str]:
    return list(_PREFIXES)


def generate_consumable(level: int, rng: random.Random | None = None) -> Item:
    """Create a random potion or scroll scaled to the given dungeon level."""
    rng = rng if rng is not None else random.Random()
    template = rng.choice(_TEMPLATES)
    prefix = rng.choice(_PREFIXES)

    quality = _QUALITY.get(prefix, 1.0)
    level_mod = level * 0.2

    name = template.name
    if prefix and prefix != "Standard":
        name = f"{prefix} {name}"

    value = int(template.base_value * (1.0 + level_mod) * quality)
    magnitude = int(template.effect.magnitude * (1.0 + level_mod) * quality)

    return Item(
        name=name,
        symbol=template.symbol,
        item_type=ItemType.CONSUMABLE,
        value=value,
        effects=[replace(template.effect, magnitude=magnitude)],
    )


_GENERATORS = {
    ItemType.WEAPON: generate_weapon,
    ItemType.ARMOR: generate_armor,
    ItemType.CONSUMABLE: generate_consumable,
}


def generate_item(level: int, rng: random.Random | None = None) -> Item:
    """Create a random weapon, armor piece or consumable."""
    rng = rng if rng is not None else random.Random()
    kind = rng.choice(tuple(_GENERATORS))
    return _GENERATORS[kind](level, rng)