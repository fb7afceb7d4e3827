"""Full-screen menus: title, game over and character sheet."""

from __future__ import annotations

import sys
from typing import TextIO

from redstone import colors as c
from redstone.controls import read_key
from redstone.player import Player, equipment_slot_name

CLEAR_SCREEN = "\033[H\033[2J"

_RUBY_ART = (
    "    /\\    ",
    "   /  \\   ",
    "  / /\\ \\  ",
    " / /  \\ \\ ",
    " \\ \\  / / ",
    "  \\ \\/ /  ",
    "   \\  /   ",
    "    \\/    ",
)

_TITLE_LINES = (
    "██████╗ ███████╗██████╗ ███████╗████████╗ ██████╗ ███╗   ██╗███████╗",
    "██╔══██╗██╔════╝██╔══██╗██╔════╝╚══██╔══╝██╔═══██╗████╗  ██║██╔════╝",
    "██████╔╝█████╗  ██║  ██║███████╗   ██║   ██║   ██║██╔██╗ ██║█████╗  ",
    "██╔══██╗██╔══╝  ██║  ██║╚════██║   ██║   ██║   ██║██║╚██╗██║██╔══╝  ",
    "██║  ██║███████╗██████╔╝███████║   ██║   ╚██████╔╝██║ ╚████║███████╗",
    "╚═╝  ╚═╝╚══════╝╚═════╝ ╚══════╝   ╚═╝    ╚═════╝ ╚═╝  ╚═══╝╚══════╝",
    "",
    "          ██████╗  ██████╗  ██████╗ ██╗   ██╗███████╗                ",
    "          ██╔══██╗██╔═══██╗██╔════╝ ██║   ██║██╔════╝                ",
    "          ██████╔╝██║   ██║██║  ███╗██║   ██║█████╗                  ",
    "          ██╔══██╗██║   ██║██║   ██║██║   ██║██╔══╝                  ",
    "          ██║  ██║╚██████╔╝╚██████╔╝╚██████╔╝███████╗                ",
    "          ╚═╝  ╚═╝ ╚═════╝  ╚═════╝  ╚═════╝ ╚══════╝                ",
)

_RUBY_START_LINE = 2

_VICTORY_LINES = (
    "             ██╗   ██╗██╗ ██████╗████████╗ ██████╗ ██████╗ ██╗   ██╗",
    "             ██║   ██║██║██╔════╝╚══██╔══╝██╔═══██╗██╔══██╗╚██╗ ██╔╝",
    "             ██║   ██║██║██║        ██║   ██║   ██║██████╔╝ ╚████╔╝ ",
    "             ╚██╗ ██╔╝██║██║        ██║   ██║   ██║██╔══██╗  ╚██╔╝  ",
    "              ╚████╔╝ ██║╚██████╗   ██║   ╚██████╔╝██║  ██║   ██║   ",
    "               ╚═══╝  ╚═╝ ╚═════╝   ╚═╝    ╚═════╝ ╚═╝  ╚═╝   ╚═╝   ",
)

_GAME_OVER_LINES = (
    "              ██████╗  █████╗ ███╗   ███╗███████╗     ██████╗ ██╗   ██╗███████╗██████╗ ",
    "             ██╔════╝ ██╔══██╗████╗ ████║██╔════╝    ██╔═══██╗██║   ██║██╔════╝██╔══██╗",
    "             ██║  ███╗███████║██╔████╔██║█████╗      ██║   ██║██║   ██║█████╗  ██████╔╝",
    "             ██║   ██║██╔══██║██║╚██╔╝██║██╔══╝      ██║   ██║╚██╗ ██╔╝██╔══╝  ██╔══██╗",
    "             ╚██████╔╝██║  ██║██║ ╚═╝ ██║███████╗    ╚██████╔╝ ╚████╔╝ ███████╗██║  ██║",
    "              ╚═════╝ ╚═╝  ╚═╝╚═╝     ╚═╝╚══════╝     ╚═════╝   ╚═══╝  ╚══════╝╚═╝  ╚═╝",
)

_SHEET_ABILITY_COLORS = {
    "attack": c.BRIGHT_RED,
    "heal": c.BRIGHT_GREEN,
    "buff": c.BRIGHT_CYAN,
    "debuff": c.BRIGHT_MAGENTA,
}


def _block(lines: tuple[str, ...]) -> str:
    return "\n" + "\n".join(lines) + "\n"


def _text(value: object) -> str:
    return str(getattr(value, "value", value))


def render_title_screen() -> str:
    """The title screen as a string of ANSI-coloured text."""
    out = [CLEAR_SCREEN, "\n\n"]
    ruby_end = _RUBY_START_LINE + len(_RUBY_ART)
    for index, line in enumerate(_TITLE_LINES):
        if _RUBY_START_LINE <= index < ruby_end:
            out.append(c.RED + _RUBY_ART[index - _RUBY_START_LINE] + c.RESET)
        else:
            out.append(" " * 10)
        out.append(c.RED + c.BOLD + line + c.RESET + "\n")

    separator = c.YELLOW + "=" * 80 + c.RESET + "\n"
    out.append("\n")
    out.append(separator)
    out.append(c.BRIGHT_WHITE + "\n            A roguelike adventure in the depths of hell\n" + c.RESET + "\n")
    out.append(separator)
    out.append(c.BRIGHT_GREEN + "\n\n      Press any key to begin your journey..." + c.RESET + "\n")
    return "".join(out)


def render_game_over_screen(
    is_victory: bool, player_level: int, current_level: int, max_levels: int, gold: int
) -> str:
    """The victory or game-over screen with the final statistics."""
    separator = c.YELLOW + "=" * 50 + c.RESET + "\n"
    out = [CLEAR_SCREEN, separator]
    if is_victory:
        out.append(c.BRIGHT_GREEN + c.BOLD + _block(_VICTORY_LINES) + c.RESET + "\n")
        out.append(c.BRIGHT_WHITE + "       You have defeated Diablo" + c.RESET + "\n")
        out.append(c.BRIGHT_WHITE + "       and saved the world from destruction!" + c.RESET + "\n")
    else:
        out.append(c.BRIGHT_RED + c.BOLD + _block(_GAME_OVER_LINES) + c.RESET + "\n")

    out.append(c.BRIGHT_CYAN + "\n\n       Statistics:" + c.RESET + "\n")
    out.append(f"{c.WHITE}       Level: {c.BRIGHT_YELLOW}{player_level}\n{c.RESET}")
    out.append(f"{c.WHITE}       Dungeon Depth: {c.BRIGHT_MAGENTA}{current_level + 1}/{max_levels}\n{c.RESET}")
    out.append(f"{c.WHITE}       Gold Collected: {c.BRIGHT_YELLOW}{gold}\n{c.RESET}")
    out.append(c.BRIGHT_GREEN + "\n\n       Press any key to exit..." + c.RESET + "\n")
    out.append(separator)
    return "".join(out)


def _attribute_line(label: str, color: str, total: int, bonus: int) -> str:
    return (
        f"{c.WHITE}{label}{color}{total}{c.WHITE} (Base: {color}{total - bonus}{c.WHITE}"
        f" + Bonus: {color}{bonus}{c.RESET})\n"
    )


def render_character_sheet(player: Player) -> str:
    """The character sheet of a player: stats, attributes, equipment and abilities."""
    attrs = player.attributes
    rule = c.CYAN + "-" * 50 + c.RESET + "\n"
    out = [
        CLEAR_SCREEN,
        c.BRIGHT_CYAN + c.BOLD + "CHARACTER SHEET" + c.RESET + "\n",
        c.YELLOW + "=" * 50 + c.RESET + "\n",
        f"{c.WHITE}Name: {c.BRIGHT_YELLOW + c.BOLD}{player.name}{c.WHITE} "
        f"(Level {c.BRIGHT_GREEN}{player.level}{c.WHITE} "
        f"{c.BRIGHT_MAGENTA}{_text(player.player_class)}{c.RESET})\n",
        f"{c.WHITE}Health: {c.BRIGHT_RED}{player.health}/{player.max_health}{c.WHITE}"
        f" | Mana: {c.BRIGHT_BLUE}{player.mana}/{player.max_mana}{c.RESET}\n",
        f"{c.WHITE}Experience: {c.BRIGHT_GREEN}{player.experience}/{player.level_up_exp}{c.WHITE}"
        f" | Gold: {c.BRIGHT_YELLOW}{player.gold}{c.RESET}\n",
        c.BRIGHT_WHITE + "\nATTRIBUTES" + c.RESET + "\n",
        rule,
        _attribute_line("Strength:     ", c.BRIGHT_RED, attrs.strength, player.attribute_bonus("strength")),
        _attribute_line("Agility:      ", c.BRIGHT_GREEN, attrs.agility, player.attribute_bonus("agility")),
        _attribute_line("Charisma:     ", c.BRIGHT_YELLOW, attrs.charisma, player.attribute_bonus("charisma")),
        _attribute_line(
            "Intelligence: ", c.BRIGHT_BLUE, attrs.intelligence, player.attribute_bonus("intelligence")
        ),
        c.BRIGHT_WHITE + "\nEQUIPMENT" + c.RESET + "\n",
        rule,
    ]

    if not player.equipment:
        out.append(c.WHITE + "No equipment" + c.RESET + "\n")
    for slot, item in player.equipment.items():
        item_col = c.item_color(_text(item.item_type))
        out.append(f"{c.WHITE}{equipment_slot_name(slot)}: {item_col + c.BOLD}{item.name}{c.RESET}\n")

    out.append(c.BRIGHT_WHITE + "\nABILITIES" + c.RESET + "\n")
    out.append(rule)
    for ability in player.abilities:
        color = _SHEET_ABILITY_COLORS.get(_text(ability.ability_type), c.WHITE)
        out.append(
            f"{color + c.BOLD}{ability.name}: {c.WHITE}{ability.description}"
            f" (Power: {c.YELLOW}{ability.power}{c.WHITE}, Mana: {c.BLUE}{ability.mana_cost}{c.RESET})\n"
        )

    out.append(c.BRIGHT_GREEN + "\nPress any key to return..." + c.RESET + "\n")
    return "".join(out)


def _show_and_wait(text: str, stream: TextIO | None) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()
    try:
        read_key(stream)
    except (EOFError, OSError):
        pass


def display_title_screen(stream: TextIO | None = None) -> None:
    """Print the title screen and wait for a key read from stream."""
    _show_and_wait(render_title_screen(), stream)


def display_game_over_screen(
    is_victory: bool,
    player_level: int,
    current_level: int,
    max_levels: int,
    gold: int,
    stream: TextIO | None = None,
) -> None:
    """Print the game-over screen and wait for a key read from stream."""
    _show_and_wait(
        render_game_over_screen(is_victory, player_level, current_level, max_levels, gold), stream
    )


def display_character_sheet(player: Player, stream: TextIO | None = None) -> None:
    """Print the character sheet and wait for a key read from stream."""
    _show_and_wait(render_character_sheet(player), stream)