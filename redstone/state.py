"""The state of a game in progress: levels, monsters, items, messages and mode."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

from redstone.item import Item
from redstone.monster import Monster
from redstone.player import Player

if TYPE_CHECKING:
    from redstone.dungeon import Dungeon

MAX_MESSAGES = 100


class Mode(IntEnum):
    EXPLORING = 0
    COMBAT = 1
    INVENTORY = 2
    DIALOG = 3
    GAME_OVER = 4


_MODE_NAMES = {
    Mode.EXPLORING: "exploring",
    Mode.COMBAT: "combat",
    Mode.INVENTORY: "inventory",
    Mode.DIALOG: "dialog",
    Mode.GAME_OVER: "gameover",
}


def mode_to_string(mode: Mode | int) -> str:
    """The name of a mode as used by the input handling; "unknown" otherwise."""
    return _MODE_NAMES.get(mode, "unknown")


@dataclass(eq=False)
class DungeonState:
    """One dungeon level with the monsters and items on it."""

    dungeon: Dungeon
    monsters: list[Monster] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)


@dataclass(eq=False)
class GameState:
    """Everything that makes up a running game."""

    player: Player
    dungeons: list[DungeonState]
    current_level: int = 0
    game_over: bool = False
    victory: bool = False
    turn_count: int = 0
    mode: Mode = Mode.EXPLORING
    current_target: Monster | None = None
    messages: list[str] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def add_message(self, message: str) -> None:
        """Append a message to the log, keeping only the latest hundred."""
        self.messages.append(message)
        if len(self.messages) > MAX_MESSAGES:
            del self.messages[:-MAX_MESSAGES]

    def current_dungeon(self) -> DungeonState:
        return self.dungeons[self.current_level]

    def mode_name(self) -> str:
        return mode_to_string(self.mode)

    def is_player_turn(self) -> bool:
        """Whether the player acts now; in combat the quicker side always acts first."""
        if self.mode == Mode.EXPLORING:
            return True
        if self.mode == Mode.COMBAT and self.current_target is not None:
            if self.player.attributes.agility > self.current_target.attributes.agility:
                return True
            return self.turn_count % 2 == 0
        return True

    def visible_monsters(self) -> list[Monster]:
        state = self.current_dungeon()
        visible = state.dungeon.visible
        return [m for m in state.monsters if visible[m.position.y][m.position.x]]

    def visible_items(self) -> list[Item]:
        state = self.current_dungeon()
        visible = state.dungeon.visible
        return [i for i in state.items if visible[i.position.y][i.position.x]]

    def is_position_occupied(self, x: int, y: int) -> bool:
        return self.monster_at(x, y) is not None

    def monster_at(self, x: int, y: int) -> Monster | None:
        return next(
            (m for m in self.current_dungeon().monsters if (m.position.x, m.position.y) == (x, y)),
            None,
        )

    def item_at(self, x: int, y: int) -> Item | None:
        return next(
            (i for i in self.current_dungeon().items if (i.position.x, i.position.y) == (x, y)),
            None,
        )

    def remove_monster(self, monster: Monster) -> None:
        monsters = self.current_dungeon().monsters
        for index, candidate in enumerate(monsters):
            if candidate is monster:
                del monsters[index]
                return

    def remove_item(self, item: Item) -> None:
        items = self.current_dungeon().items
        for index, candidate in enumerate(items):
            if candidate is item:
                del items[index]
                return

    def add_item(self, item: Item) -> None:
        self.current_dungeon().items.append(item)