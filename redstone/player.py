"""The player character: progression, inventory and equipment."""

from __future__ import annotations

from dataclasses import replace

from redstone.abilities import Ability, basic_attack, new_ability_for_level
from redstone.classes import PlayerClass, class_info, health_and_mana_increase, level_up_stats
from redstone.common import Attributes, EffectType, Position
from redstone.item import EquipmentSlot, Item, ItemType

MAX_INVENTORY_SIZE = 20
ABILITY_LEVELS = (3, 6, 9)

_ATTRIBUTE_NAMES = ("strength", "agility", "charisma", "intelligence")

_SLOT_NAMES = {
    EquipmentSlot.HEAD: "Head",
    EquipmentSlot.BODY: "Body",
    EquipmentSlot.HANDS: "Hands",
    EquipmentSlot.WEAPON: "Weapon",
    EquipmentSlot.OFFHAND: "Offhand",
    EquipmentSlot.FEET: "Feet",
    EquipmentSlot.ACCESSORY: "Accessory",
}


def _as_class(player_class: PlayerClass | str) -> PlayerClass | str:
    try:
        return PlayerClass(player_class)
    except ValueError:
        return player_class


class Player:
    """The hero: attributes, health and mana, inventory, equipment and abilities."""

    def __init__(self, name: str, player_class: PlayerClass | str) -> None:
        self.player_class = _as_class(player_class)
        info = class_info(self.player_class)
        self.name = name
        self.symbol = "@"
        self.position = Position()
        self.attributes: Attributes = replace(info.base_stats)
        self.health = info.starting_hp
        self.max_health = info.starting_hp
        self.mana = info.starting_mp
        self.max_mana = info.starting_mp
        self.level = 1
        self.experience = 0
        self.level_up_exp = 100
        self.gold = 10
        self.inventory: list[Item] = []
        self.equipment: dict[EquipmentSlot | None, Item] = {}
        self.abilities: list[Ability] = [basic_attack(self.player_class)]

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, class={self.player_class!r}, level={self.level})"

    def total_attributes(self) -> Attributes:
        """Base attributes plus the bonuses of everything equipped."""
        return sum(
            (item.bonus_attributes for item in self.equipment.values()),
            start=replace(self.attributes),
        )

    def attribute_bonus(self, attribute_name: str) -> int:
        """The equipment bonus to one attribute; 0 for an unknown attribute name."""
        if attribute_name not in _ATTRIBUTE_NAMES:
            return 0
        return sum(getattr(item.bonus_attributes, attribute_name) for item in self.equipment.values())

    def gain_experience(self, amount: int) -> bool:
        """Add experience; return True if it brought a level up."""
        self.experience += amount
        if self.experience >= self.level_up_exp:
            self.level_up()
            return True
        return False

    def level_up(self) -> None:
        """Advance one level: grow attributes, restore health and mana, maybe learn an ability."""
        self.level += 1
        self.experience -= self.level_up_exp
        self.level_up_exp = self.level * 100

        self.attributes = self.attributes + level_up_stats(self.player_class)

        health_gain, mana_gain = health_and_mana_increase(self.player_class, self.attributes)
        self.max_health += health_gain
        self.health = self.max_health
        self.max_mana += mana_gain
        self.mana = self.max_mana

        if self.level in ABILITY_LEVELS:
            self.abilities.append(new_ability_for_level(self.player_class, self.level))

    def pick_up_item(self, item: Item) -> bool:
        """Put an item in the inventory; False when the inventory is full."""
        if len(self.inventory) >= MAX_INVENTORY_SIZE:
            return False
        self.inventory.append(item)
        return True

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.inventory):
            raise IndexError(f"no inventory item at index {index}")

    def equip_item(self, index: int) -> bool:
        """Equip an inventory item; False if the attribute requirements are not met.

        Whatever was in the item's slot goes back to the end of the inventory.
        """
        self._check_index(index)
        item = self.inventory[index]
        if not self.total_attributes().meets(item.required_attributes):
            return False

        del self.inventory[index]
        previous = self.equipment.get(item.slot)
        if previous is not None:
            self.inventory.append(previous)
        self.equipment[item.slot] = item
        return True

    def unequip_item(self, slot: EquipmentSlot | None) -> bool:
        """Move the item in a slot back to the inventory; False if full or empty."""
        if len(self.inventory) >= MAX_INVENTORY_SIZE:
            return False
        item = self.equipment.pop(slot, None)
        if item is None:
            return False
        self.inventory.append(item)
        return True

    def use_item(self, index: int) -> bool:
        """Consume an inventory item; False if it is not a consumable."""
        self._check_index(index)
        item = self.inventory[index]
        if item.item_type != ItemType.CONSUMABLE:
            return False

        for effect in item.effects:
            if effect.effect_type == EffectType.HEAL_OVER_TIME:
                self.health = min(self.health + effect.magnitude, self.max_health)

        del self.inventory[index]
        return True


def equipment_slot_name(slot: EquipmentSlot | str | None) -> str:
    """Display name of an equipment slot."""
    if slot in _SLOT_NAMES:
        return _SLOT_NAMES[slot]
    if isinstance(slot, EquipmentSlot):
        return slot.value
    return "" if slot is None else str(slot)