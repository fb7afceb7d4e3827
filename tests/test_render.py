import random

from redstone import colors as c
from redstone.classes import PlayerClass
from redstone.common import Position
from redstone.consumables import generate_item
from redstone.dungeon import Tile, blank_dungeon
from redstone.menus import CLEAR_SCREEN
from redstone.monster import Monster, MonsterType
from redstone.player import Player
from redstone.render import render_game_screen

WIDTH = 6
HEIGHT = 3


def _dungeon(visible=True, visited=True):
    d = blank_dungeon(WIDTH, HEIGHT, 1)
    for row in d.tiles:
        row[:] = [Tile.FLOOR] * WIDTH
    d.visible = [[visible] * WIDTH for _ in range(HEIGHT)]
    d.visited = [[visited] * WIDTH for _ in range(HEIGHT)]
    return d


def _player():
    player = Player("Hero", PlayerClass.WARRIOR)
    player.position = Position(1, 1)
    return player


def _monster():
    return Monster(
        name="Rat", symbol="r", monster_type=MonsterType.ANIMAL,
        health=5, max_health=9, position=Position(3, 1),
    )


def _render(dungeon=None, monsters=(), items=(), messages=(), mode="exploring", target=None, player=None):
    return render_game_screen(
        dungeon if dungeon is not None else _dungeon(),
        player if player is not None else _player(),
        0, 8, list(monsters), list(items), list(messages), mode, target,
    )


def test_player_drawn_highlighted():
    out = _render()
    assert c.BRIGHT_YELLOW + c.BOLD + "@" + c.RESET in out


def test_monster_and_item_drawn_with_type_colors():
    monster = _monster()
    item = generate_item(1, random.Random(0))
    item.position = Position(4, 1)
    out = _render(monsters=[monster], items=[item])
    assert c.monster_color(MonsterType.ANIMAL.value) + c.BOLD + "r" + c.RESET in out
    item_type = getattr(item.item_type, "value", item.item_type)
    assert c.item_color(item_type) + item.symbol + c.RESET in out


def test_wall_uses_theme_color():
    d = _dungeon()
    d.tiles[0][0] = Tile.WALL
    theme = c.dungeon_theme_colors(0)
    out = _render(dungeon=d)
    assert theme.wall + Tile.WALL.value + c.RESET in out


def test_unseen_map_is_blank():
    out = _render(dungeon=_dungeon(visible=False, visited=False))
    lines = out.split("\n")
    assert lines[0] == CLEAR_SCREEN + " " * WIDTH
    assert lines[1] == " " * WIDTH


def test_visited_cells_shown_as_remembered():
    out = _render(dungeon=_dungeon(visible=False, visited=True))
    assert out.count(c.BLACK + c.BOLD + "?" + c.RESET) == WIDTH * HEIGHT


def test_only_last_three_messages_shown():
    messages = ["msg-one", "msg-two", "msg-three", "msg-four"]
    out = _render(messages=messages)
    assert "msg-one" not in out
    assert all(m in out for m in messages[1:])


def test_status_line_shows_depth():
    assert "Level: 1/8" in _render()


def test_combat_panel_only_in_combat():
    monster = _monster()
    player = _player()
    player.abilities[0].current_cd = 2
    out = _render(monsters=[monster], mode="combat", target=monster, player=player)
    assert "Combat with" in out
    assert "Run away" in out
    assert player.abilities[0].name in out
    assert "(CD: 2)" in out
    assert "Run away" not in _render(monsters=[monster], mode="exploring", target=monster)