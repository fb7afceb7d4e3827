"""Items that lie in the dungeon or sit in a player's inventory."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from redstone.common import Attributes, Effect, Position


class ItemType(str, Enum):
    WEAPON = "weapon"
    ARMOR = "armor"
    CONSUMABLE = "consumable"
    RESOURCE = "resource"
    SPECIAL = "special"


class EquipmentSlot(str, Enum):
    HEAD = "head"
    BODY = "body"
    HANDS = "hands"
    WEAPON = "weapon"
    OFFHAND = "offhand"
    FEET = "feet"
    ACCESSORY = "accessory"


@dataclass(eq=False)
class Item:
    """An item; items compare by identity, as each one is a distinct object."""

    name: str
    symbol: str
    item_type: ItemType
    slot: EquipmentSlot | None = None
    value: int = 0
    bonus_attributes: Attributes = field(default_factory=Attributes)
    effects: list[Effect] = field(default_factory=list)
    required_attributes: Attributes = field(default_factory=Attributes)
    position: Position = field(default_factory=Position)

    def is_equippable(self) -> bool:
        return self.item_type in (ItemType.WEAPON, ItemType.ARMOR)

    def is_consumable(self) -> bool:
        return self.item_type == ItemType.CONSUMABLE