import pytest

from redstone.abilities import basic_attack, new_ability_for_level
from redstone.classes import PlayerClass, class_info, health_and_mana_increase, level_up_stats
from redstone.common import Attributes, Effect, EffectType
from redstone.item import EquipmentSlot, Item, ItemType
from redstone.player import MAX_INVENTORY_SIZE, Player, equipment_slot_name


def make_weapon(name="Test Sword", bonus=None, required=None):
    return Item(
        name,
        "/",
        ItemType.WEAPON,
        slot=EquipmentSlot.WEAPON,
        bonus_attributes=bonus or Attributes(strength=2, agility=1),
        required_attributes=required or Attributes(),
    )


def make_potion(magnitude):
    return Item(
        "Potion",
        "!",
        ItemType.CONSUMABLE,
        effects=[Effect("Healing", magnitude, EffectType.HEAL_OVER_TIME, 1)],
    )


@pytest.mark.parametrize("player_class", list(PlayerClass))
def test_new_player_uses_class_info(player_class):
    player = Player("Hero", player_class)
    info = class_info(player_class)
    assert player.attributes == info.base_stats
    assert player.health == player.max_health == info.starting_hp
    assert player.mana == player.max_mana == info.starting_mp
    assert [a.name for a in player.abilities] == [basic_attack(player_class).name]
    assert player.level == 1
    assert player.experience == 0
    assert player.symbol == "@"


def test_gain_experience_levels_up_at_threshold():
    player = Player("Hero", PlayerClass.WARRIOR)
    needed = player.level_up_exp
    assert player.gain_experience(needed - 1) is False
    assert player.level == 1
    assert player.gain_experience(1) is True
    assert player.level == 2
    assert player.experience == 0
    assert player.level_up_exp == player.level * needed


def test_level_up_grows_attributes_and_restores():
    player = Player("Hero", PlayerClass.RANGER)
    before = player.attributes
    max_health = player.max_health
    max_mana = player.max_mana
    player.health = 1
    player.mana = 0
    player.level_up()
    assert player.attributes == before + level_up_stats(PlayerClass.RANGER)
    health_gain, mana_gain = health_and_mana_increase(PlayerClass.RANGER, player.attributes)
    assert player.max_health == max_health + health_gain
    assert player.max_mana == max_mana + mana_gain
    assert player.health == player.max_health
    assert player.mana == player.max_mana


def test_new_ability_learned_at_level_three():
    player = Player("Hero", PlayerClass.MAGE)
    player.level_up()
    assert len(player.abilities) == 1
    player.level_up()
    assert player.level == 3
    assert [a.name for a in player.abilities] == [
        basic_attack(PlayerClass.MAGE).name,
        new_ability_for_level(PlayerClass.MAGE, 3).name,
    ]


def test_pick_up_until_inventory_full():
    player = Player("Hero", PlayerClass.WARRIOR)
    for number in range(MAX_INVENTORY_SIZE):
        assert player.pick_up_item(make_potion(number)) is True
    assert player.pick_up_item(make_potion(1)) is False
    assert len(player.inventory) == MAX_INVENTORY_SIZE


def test_equip_item_moves_it_to_equipment():
    player = Player("Hero", PlayerClass.WARRIOR)
    sword = make_weapon()
    player.pick_up_item(sword)
    assert player.equip_item(0) is True
    assert player.equipment[EquipmentSlot.WEAPON] is sword
    assert player.inventory == []
    assert player.total_attributes() == player.attributes + sword.bonus_attributes
    assert player.attribute_bonus("strength") == 2
    assert player.attribute_bonus("agility") == 1
    assert player.attribute_bonus("luck") == 0


def test_equip_fails_when_requirements_not_met():
    player = Player("Hero", PlayerClass.WARRIOR)
    heavy = make_weapon(required=Attributes(strength=player.attributes.strength + 100))
    player.pick_up_item(heavy)
    assert player.equip_item(0) is False
    assert player.inventory == [heavy]
    assert player.equipment == {}


def test_requirements_count_equipment_bonuses():
    player = Player("Hero", PlayerClass.WARRIOR)
    ring = Item("Ring", "=", ItemType.ARMOR, slot=EquipmentSlot.ACCESSORY,
                bonus_attributes=Attributes(strength=5))
    sword = make_weapon(required=Attributes(strength=player.attributes.strength + 5))
    player.pick_up_item(sword)
    assert player.equip_item(0) is False
    player.pick_up_item(ring)
    assert player.equip_item(1) is True
    assert player.equip_item(0) is True
    assert player.equipment[EquipmentSlot.WEAPON] is sword


def test_equip_replaces_and_returns_previous_item():
    player = Player("Hero", PlayerClass.WARRIOR)
    first = make_weapon("First")
    second = make_weapon("Second")
    player.pick_up_item(first)
    player.equip_item(0)
    player.pick_up_item(second)
    assert player.equip_item(0) is True
    assert player.equipment[EquipmentSlot.WEAPON] is second
    assert player.inventory == [first]


@pytest.mark.parametrize("index", [-1, 0, 5])
def test_equip_invalid_index_raises(index):
    player = Player("Hero", PlayerClass.WARRIOR)
    with pytest.raises(IndexError):
        player.equip_item(index)


def test_unequip_returns_item_to_inventory():
    player = Player("Hero", PlayerClass.WARRIOR)
    sword = make_weapon()
    player.pick_up_item(sword)
    player.equip_item(0)
    assert player.unequip_item(EquipmentSlot.WEAPON) is True
    assert player.inventory == [sword]
    assert EquipmentSlot.WEAPON not in player.equipment
    assert player.unequip_item(EquipmentSlot.WEAPON) is False


def test_unequip_fails_with_full_inventory():
    player = Player("Hero", PlayerClass.WARRIOR)
    sword = make_weapon()
    player.pick_up_item(sword)
    player.equip_item(0)
    for _ in range(MAX_INVENTORY_SIZE):
        player.pick_up_item(make_potion(1))
    assert player.unequip_item(EquipmentSlot.WEAPON) is False
    assert player.equipment[EquipmentSlot.WEAPON] is sword


def test_use_item_heals_and_caps_at_maximum():
    player = Player("Hero", PlayerClass.WARRIOR)
    player.health = player.max_health - 30
    player.pick_up_item(make_potion(10))
    assert player.use_item(0) is True
    assert player.health == player.max_health - 20
    assert player.inventory == []
    player.pick_up_item(make_potion(500))
    assert player.use_item(0) is True
    assert player.health == player.max_health


def test_use_item_rejects_non_consumables():
    player = Player("Hero", PlayerClass.WARRIOR)
    sword = make_weapon()
    player.pick_up_item(sword)
    assert player.use_item(0) is False
    assert player.inventory == [sword]
    with pytest.raises(IndexError):
        player.use_item(3)


@pytest.mark.parametrize(
    "slot, name",
    [
        (EquipmentSlot.HEAD, "Head"),
        (EquipmentSlot.OFFHAND, "Offhand"),
        (EquipmentSlot.ACCESSORY, "Accessory"),
        ("tail", "tail"),
    ],
)
def test_equipment_slot_name(slot, name):
    assert equipment_slot_name(slot) == name