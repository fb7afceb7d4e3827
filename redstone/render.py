"""Drawing the main game screen: map, status bar, message log and combat panel."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from redstone import colors as c
from redstone.dungeon import Tile
from redstone.menus import CLEAR_SCREEN

if TYPE_CHECKING:
    from redstone.dungeon import Dungeon
    from redstone.item import Item
    from redstone.monster import Monster
    from redstone.player import Player

MESSAGES_SHOWN = 3

_COMBAT_ABILITY_COLORS = {
    "attack": c.RED,
    "heal": c.GREEN,
    "buff": c.CYAN,
    "debuff": c.MAGENTA,
}


def _text(value: object) -> str:
    return str(getattr(value, "value", value))


def _first_by_cell(things: Sequence) -> dict:
    cells: dict = {}
    for thing in things:
        cells.setdefault((thing.position.x, thing.position.y), thing)
    return cells


def _tile_cell(tile: object, theme: c.ThemeColors) -> str:
    char = _text(tile)
    if tile == Tile.WALL:
        return theme.wall + char + c.RESET
    if tile == Tile.STAIRS:
        return c.BRIGHT_CYAN + char + c.RESET
    if tile == Tile.DOOR:
        return c.YELLOW + char + c.RESET
    return theme.floor + char + c.RESET


def _map_lines(dungeon, player, monsters, items, theme) -> list[str]:
    player_cell = (player.position.x, player.position.y)
    monster_cells = _first_by_cell(monsters)
    item_cells = _first_by_cell(items)

    lines = []
    for y, (tiles, visible_row, visited_row) in enumerate(
        zip(dungeon.tiles, dungeon.visible, dungeon.visited)
    ):
        cells = []
        for x, (tile, visible, visited) in enumerate(zip(tiles, visible_row, visited_row)):
            if visible:
                if (x, y) == player_cell:
                    cells.append(c.BRIGHT_YELLOW + c.BOLD + "@" + c.RESET)
                elif (x, y) in monster_cells:
                    monster = monster_cells[(x, y)]
                    color = c.monster_color(_text(monster.monster_type))
                    cells.append(color + c.BOLD + monster.symbol + c.RESET)
                elif (x, y) in item_cells:
                    item = item_cells[(x, y)]
                    cells.append(c.item_color(_text(item.item_type)) + item.symbol + c.RESET)
                else:
                    cells.append(_tile_cell(tile, theme))
            elif visited:
                cells.append(c.BLACK + c.BOLD + "?" + c.RESET)
            else:
                cells.append(" ")
        lines.append("".join(cells) + "\n")
    return lines


def _combat_panel(width: int, player: Player, target: Monster) -> list[str]:
    out = [
        c.RED + "=" * width + c.RESET + "\n",
        f"{c.WHITE}Combat with {c.BRIGHT_RED + c.BOLD}{target.name}{c.WHITE}"
        f" (HP: {c.RED}{target.health}/{target.max_health}{c.RESET})\n",
        c.YELLOW + "Abilities:" + c.RESET + "\n",
    ]
    for number, ability in enumerate(player.abilities, 1):
        ready = ""
        if ability.current_cd > 0:
            ready = f" {c.RED}(CD: {ability.current_cd}){c.RESET}"
        color = _COMBAT_ABILITY_COLORS.get(_text(ability.ability_type), c.WHITE)
        out.append(
            f"{c.YELLOW}[{number}]{c.RESET} {color + c.BOLD}{ability.name}{c.RESET}"
            f" - {ability.description} (Power: {ability.power},"
            f" Mana: {c.BLUE}{ability.mana_cost}{c.RESET}){ready}\n"
        )
    out.append(f"{c.YELLOW}[r]{c.RESET} Run away\n")
    return out


def render_game_screen(
    dungeon: Dungeon,
    player: Player,
    current_level: int,
    max_levels: int,
    monsters: Sequence[Monster],
    items: Sequence[Item],
    messages: Sequence[str],
    mode: str,
    current_target: Monster | None = None,
) -> str:
    """The whole game screen as ANSI-coloured text."""
    theme = c.dungeon_theme_colors(current_level)
    rule = c.CYAN + "-" * dungeon.width + c.RESET + "\n"
    attrs = player.attributes

    out = [CLEAR_SCREEN]
    out.extend(_map_lines(dungeon, player, monsters, items, theme))
    out.append(rule)
    out.append(
        f"{c.WHITE}Level: {current_level + 1}/{max_levels}"
        f" | HP: {c.RED}{player.health}/{player.max_health}{c.WHITE}"
        f" | Mana: {c.BLUE}{player.mana}/{player.max_mana}{c.WHITE}"
        f" | XP: {player.experience}/{player.level_up_exp}"
        f" | Gold: {c.YELLOW}{player.gold}{c.RESET}\n"
    )
    out.append(
        f"{c.WHITE}STR: {c.BRIGHT_RED}{attrs.strength}{c.WHITE}"
        f" | AGI: {c.BRIGHT_GREEN}{attrs.agility}{c.WHITE}"
        f" | CHA: {c.BRIGHT_YELLOW}{attrs.charisma}{c.WHITE}"
        f" | INT: {c.BRIGHT_BLUE}{attrs.intelligence}{c.RESET}\n"
    )
    out.append(rule)
    out.extend(c.BRIGHT_WHITE + message + c.RESET + "\n" for message in messages[-MESSAGES_SHOWN:])
    out.append(rule)
    out.append(
        c.GREEN + "Move: [↑][↓][←][→] | [g]et | [i]nventory | [c]haracter | [q]uit" + c.RESET + "\n"
    )

    if mode == "combat" and current_target is not None:
        out.extend(_combat_panel(dungeon.width, player, current_target))
    return "".join(out)