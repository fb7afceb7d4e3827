import random

import pytest

from redstone.common import Attributes, EffectType
from redstone.item import EquipmentSlot, ItemType
from redstone.weapons import (
    generate_weapon,
    weapon_prefixes,
    weapon_suffixes,
    weapon_templates,
)


class _Picker:
    def __init__(self, *picks):
        self._picks = list(picks)

    def choice(self, seq):
        wanted = self._picks.pop(0)
        for option in seq:
            if option == wanted or getattr(option, "name", None) == wanted:
                return option
        raise AssertionError(f"{wanted!r} not offered")


def _template(name):
    return next(t for t in weapon_templates() if t.name == name)


def test_plain_weapon_at_level_zero_matches_template():
    template = _template("Dagger")
    item = generate_weapon(0, _Picker("Dagger", "", ""))
    assert item.name == template.name
    assert item.symbol == template.symbol
    assert item.value == template.base_value
    assert item.effects[0].magnitude == template.base_damage
    assert item.required_attributes == Attributes(
        strength=template.req_str, agility=template.req_agi, intelligence=template.req_int
    )
    assert item.bonus_attributes == Attributes()


def test_affixed_name_and_strength_bonus():
    item = generate_weapon(0, _Picker("Sword", "Sturdy", "of Power"))
    assert item.name == "Sturdy Sword of Power"
    assert item.bonus_attributes.strength > 0
    assert item.bonus_attributes.agility == item.bonus_attributes.intelligence == 0


def test_sharp_gives_agility_and_mage_gives_intelligence():
    item = generate_weapon(2, _Picker("Bow", "Sharp", "of the Mage"))
    assert item.bonus_attributes.agility > 0
    assert item.bonus_attributes.intelligence > 0
    assert item.bonus_attributes.strength == 0


def test_affixes_raise_damage_and_value():
    plain = generate_weapon(3, _Picker("Axe", "", ""))
    fancy = generate_weapon(3, _Picker("Axe", "Legendary", "of Doom"))
    assert fancy.effects[0].magnitude > plain.effects[0].magnitude
    assert fancy.value > plain.value


def test_higher_level_scales_weapon_up():
    low = generate_weapon(0, _Picker("Sword", "", ""))
    high = generate_weapon(5, _Picker("Sword", "", ""))
    assert high.value > low.value
    assert high.effects[0].magnitude > low.effects[0].magnitude
    assert high.required_attributes.strength > low.required_attributes.strength


@pytest.mark.parametrize("seed", range(40))
def test_random_weapons_are_consistent(seed):
    item = generate_weapon(seed % 8 + 1, random.Random(seed))
    templates = weapon_templates()
    assert item.item_type == ItemType.WEAPON
    assert item.slot == EquipmentSlot.WEAPON
    assert item.is_equippable()
    assert item.symbol in {t.symbol for t in templates}
    assert item.effects[0].name == "Damage"
    assert item.effects[0].effect_type == EffectType.DAMAGE_OVER_TIME
    matching = [t for t in templates if t.symbol == item.symbol and t.name in item.name]
    assert matching
    assert item.required_attributes.strength >= matching[0].req_str


def test_affix_lists_are_fresh_copies():
    prefixes = weapon_prefixes()
    prefixes.clear()
    assert weapon_prefixes()
    assert "of Doom" in weapon_suffixes()
    assert "Legendary" in weapon_prefixes()