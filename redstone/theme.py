"""The themes of the eight dungeon levels."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    name: str
    description: str
    wall_symbol: str
    floor_symbol: str
    monster_types: tuple[str, ...]
    color_scheme: str
    special_features: tuple[str, ...] = ()


_THEMES = (
    Theme("Church Catacombs", "Dark and damp stone passages beneath the church.",
          "#", ".", ("undead", "animal"), "blue"),
    Theme("Underground Passages", "Natural caves with occasional constructed walls.",
          "#", ".", ("animal", "undead"), "blue"),
    Theme("Forgotten Tombs", "Ancient burial chambers with dusty sarcophagi.",
          "#", ".", ("undead", "demon"), "purple"),
    Theme("Torture Chambers", "Blood-stained rooms with instruments of pain.",
          "#", ".", ("demon", "undead"), "red"),
    Theme("Hellish Caves", "Caverns heated by infernal fires below.",
          "#", ".", ("demon", "elemental"), "red"),
    Theme("Burning Hell", "Lakes of fire and brimstone surround you.",
          "#", ".", ("demon", "elemental"), "red"),
    Theme("Realm of Hatred", "A twisted landscape of malice and spite.",
          "#", ".", ("demon", "aberration"), "purple"),
    Theme("Diablo's Lair", "The final resting place of the Lord of Terror.",
          "#", ".", ("demon", "aberration"), "red"),
)


def all_themes() -> list[Theme]:
    """All themes, in level order."""
    return list(_THEMES)


def theme_for_level(level: int) -> Theme:
    """The theme of a level numbered from 1; the first theme when out of range."""
    if 0 < level <= len(_THEMES):
        return _THEMES[level - 1]
    return _THEMES[0]