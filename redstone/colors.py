"""ANSI colour codes and the colour choices for map elements."""

from __future__ import annotations

from dataclasses import dataclass

RESET = "\033[0m"
BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"

BRIGHT_RED = "\033[91m"
BRIGHT_GREEN = "\033[92m"
BRIGHT_YELLOW = "\033[93m"
BRIGHT_BLUE = "\033[94m"
BRIGHT_MAGENTA = "\033[95m"
BRIGHT_CYAN = "\033[96m"
BRIGHT_WHITE = "\033[97m"

BG_BLACK = "\033[40m"
BG_RED = "\033[41m"
BG_GREEN = "\033[42m"
BG_YELLOW = "\033[43m"
BG_BLUE = "\033[44m"
BG_MAGENTA = "\033[45m"
BG_CYAN = "\033[46m"
BG_WHITE = "\033[47m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"


@dataclass(frozen=True)
class ThemeColors:
    wall: str
    floor: str


_DEFAULT_THEME_COLORS = ThemeColors(wall=WHITE, floor=BLUE)

_THEME_COLORS = {
    1: ThemeColors(wall=CYAN, floor=BLUE),  # Church Catacombs
    2: ThemeColors(wall=WHITE, floor=BLUE),  # Underground Passages
    3: ThemeColors(wall=WHITE, floor=MAGENTA),  # Forgotten Tombs
    4: ThemeColors(wall=YELLOW, floor=RED),  # Torture Chambers
    5: ThemeColors(wall=YELLOW, floor=RED),  # Hellish Caves
    6: ThemeColors(wall=BRIGHT_RED, floor=RED),  # Burning Hell
    7: ThemeColors(wall=BRIGHT_MAGENTA, floor=MAGENTA),  # Realm of Hatred
    8: ThemeColors(wall=BRIGHT_RED, floor=RED),  # Diablo's Lair
}

_MONSTER_COLORS = {
    "undead": CYAN,
    "demon": RED,
    "animal": YELLOW,
    "elemental": BLUE,
    "aberration": MAGENTA,
}

_ITEM_COLORS = {
    "weapon": BRIGHT_RED,
    "armor": BRIGHT_CYAN,
    "consumable": BRIGHT_GREEN,
    "resource": BRIGHT_YELLOW,
    "special": BRIGHT_MAGENTA,
}


def dungeon_theme_colors(level: int) -> ThemeColors:
    """Wall and floor colours for a dungeon level numbered from 1."""
    return _THEME_COLORS.get(level, _DEFAULT_THEME_COLORS)


def monster_color(monster_type: str) -> str:
    return _MONSTER_COLORS.get(monster_type, WHITE)


def item_color(item_type: str) -> str:
    return _ITEM_COLORS.get(item_type, BRIGHT_WHITE)