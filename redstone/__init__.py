"""A terminal roguelike with generated dungeons, monsters, loot and turn-based combat."""

__version__ = "0.1.0"