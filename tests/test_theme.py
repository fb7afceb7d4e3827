import pytest

from redstone.theme import all_themes, theme_for_level

MONSTER_TYPES = {"undead", "animal", "demon", "elemental", "aberration"}


def test_there_is_one_theme_per_level():
    assert len(all_themes()) == 8


def test_first_and_last_theme():
    assert theme_for_level(1).name == "Church Catacombs"
    assert theme_for_level(8).name == "Diablo's Lair"


@pytest.mark.parametrize("level", [0, -3, 9, 50])
def test_out_of_range_levels_use_first_theme(level):
    assert theme_for_level(level) == all_themes()[0]


def test_theme_for_level_follows_list_order():
    themes = all_themes()
    assert [theme_for_level(n) for n in range(1, len(themes) + 1)] == themes


def test_every_theme_spawns_known_monsters():
    for theme in all_themes():
        assert theme.monster_types
        assert set(theme.monster_types) <= MONSTER_TYPES


def test_returned_list_is_a_copy():
    themes = all_themes()
    themes.clear()
    assert all_themes()[2].name == "Forgotten Tombs"


def test_torture_chambers_details():
    theme = theme_for_level(4)
    assert theme.name == "Torture Chambers"
    assert theme.color_scheme == "red"
    assert theme.monster_types == ("demon", "undead")