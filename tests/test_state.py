import pytest

from redstone.classes import PlayerClass
from redstone.common import Attributes, Position
from redstone.dungeon import blank_dungeon
from redstone.item import Item, ItemType
from redstone.monster import Monster, MonsterType
from redstone.player import Player
from redstone.state import MAX_MESSAGES, DungeonState, GameState, Mode, mode_to_string


def make_monster(x, y, agility=5):
    return Monster(
        name="Rat",
        symbol="r",
        monster_type=MonsterType.ANIMAL,
        attributes=Attributes(agility=agility),
        health=10,
        max_health=10,
        position=Position(x, y),
    )


def make_item(x, y):
    return Item(name="Health Potion", symbol="!", item_type=ItemType.CONSUMABLE, position=Position(x, y))


@pytest.fixture
def state():
    dungeon = blank_dungeon(10, 8, 1)
    return GameState(player=Player("Hero", PlayerClass.WARRIOR), dungeons=[DungeonState(dungeon)])


@pytest.mark.parametrize(
    "mode, name",
    [
        (Mode.EXPLORING, "exploring"),
        (Mode.COMBAT, "combat"),
        (Mode.INVENTORY, "inventory"),
        (Mode.DIALOG, "dialog"),
        (Mode.GAME_OVER, "gameover"),
        (99, "unknown"),
    ],
)
def test_mode_to_string(mode, name):
    assert mode_to_string(mode) == name


def test_mode_name_follows_mode(state):
    state.mode = Mode.COMBAT
    assert state.mode_name() == "combat"


def test_add_message_keeps_latest_hundred(state):
    for n in range(150):
        state.add_message(f"msg {n}")
    assert len(state.messages) == MAX_MESSAGES
    assert state.messages[-1] == "msg 149"
    assert state.messages[0] == f"msg {150 - MAX_MESSAGES}"


def test_monster_lookup_and_removal(state):
    monster = make_monster(3, 4)
    other = make_monster(5, 5)
    state.current_dungeon().monsters.extend([monster, other])
    assert state.monster_at(3, 4) is monster
    assert state.monster_at(4, 4) is None
    assert state.is_position_occupied(5, 5)
    state.remove_monster(monster)
    assert state.current_dungeon().monsters == [other]
    assert not state.is_position_occupied(3, 4)


def test_item_lookup_add_and_remove(state):
    item = make_item(2, 2)
    state.add_item(item)
    assert state.item_at(2, 2) is item
    assert state.item_at(1, 1) is None
    state.remove_item(item)
    assert state.item_at(2, 2) is None
    assert state.current_dungeon().items == []


def test_remove_unknown_monster_leaves_list(state):
    kept = make_monster(1, 1)
    state.current_dungeon().monsters.append(kept)
    state.remove_monster(make_monster(1, 1))
    assert state.current_dungeon().monsters == [kept]


def test_visible_entities_follow_visibility(state):
    seen = make_monster(3, 2)
    hidden = make_monster(6, 6)
    item = make_item(1, 1)
    state.current_dungeon().monsters.extend([seen, hidden])
    state.add_item(item)
    state.current_dungeon().dungeon.visible[2][3] = True
    assert state.visible_monsters() == [seen]
    assert state.visible_items() == []
    state.current_dungeon().dungeon.visible[1][1] = True
    assert state.visible_items() == [item]


def test_player_turn_when_exploring(state):
    state.turn_count = 1
    assert state.is_player_turn()


def test_faster_player_always_acts_in_combat(state):
    state.mode = Mode.COMBAT
    state.current_target = make_monster(1, 1, agility=state.player.attributes.agility - 1)
    state.turn_count = 3
    assert state.is_player_turn()


def test_slower_player_alternates_in_combat(state):
    state.mode = Mode.COMBAT
    state.current_target = make_monster(1, 1, agility=state.player.attributes.agility + 1)
    state.turn_count = 3
    assert not state.is_player_turn()
    state.turn_count = 4
    assert state.is_player_turn()


def test_player_turn_in_inventory(state):
    state.mode = Mode.INVENTORY
    state.turn_count = 1
    assert state.is_player_turn()