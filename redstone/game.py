"""The game loop: levels, movement, monster turns and the command that starts a game."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field
from typing import TextIO

from redstone.classes import PlayerClass
from redstone.combat import CombatGame
from redstone.common import Position
from redstone.consumables import generate_item
from redstone.controls import handle_player_input
from redstone.dungeon import Dungeon, Tile, generate_dungeon
from redstone.item import Item
from redstone.menus import display_character_sheet, display_game_over_screen, display_title_screen
from redstone.monster import Behavior, Monster
from redstone.render import render_game_screen
from redstone.spawn import generate_monster
from redstone.state import DungeonState, Mode

MAX_DUNGEON_LEVELS = 8
DUNGEON_WIDTH = 60
DUNGEON_HEIGHT = 30
MAX_MONSTERS_PER_LEVEL = 20
WELCOME = "Welcome to the dungeon! Find the stairs to descend deeper."

_STEPS = {0: (0, -1), 1: (0, 1), 2: (-1, 0), 3: (1, 0)}


@dataclass(eq=False)
class Game(CombatGame):
    """A complete game: exploring, fighting and descending through the levels."""

    input_stream: TextIO | None = field(default=None, repr=False)

    @property
    def last_level(self) -> int:
        return len(self.dungeons) - 1

    def run(self, stream: TextIO | None = None) -> None:
        """Play until the game ends, reading keys from stream, then show the final screen."""
        self.input_stream = stream
        while not self.game_over:
            self._calculate_fov()
            self._draw()
            try:
                action, value = handle_player_input(self.mode_name(), stream)
            except EOFError:
                self.game_over = True
                break
            self.handle_action(action, value)
            self.finish_turn()

        display_game_over_screen(
            self.victory, self.player.level, self.current_level, MAX_DUNGEON_LEVELS,
            self.player.gold, stream,
        )

    def handle_action(self, action: str, value: int) -> None:
        """Carry out one player action as returned by the input handling."""
        if action == "move":
            self.move_player(value)
        elif action == "pickup":
            self.pickup_item()
        elif action == "inventory":
            self.mode = Mode.INVENTORY
        elif action == "character":
            display_character_sheet(self.player, self.input_stream)
        elif action == "ability":
            self.use_ability(value)
        elif action == "run":
            self.attempt_to_flee()
        elif action == "close_inventory":
            self.mode = Mode.EXPLORING
        elif action == "quit":
            self.game_over = True

    def finish_turn(self) -> None:
        """Let monsters act, check for death and victory, and count the turn."""
        if self.mode == Mode.EXPLORING:
            self.process_monster_turns()

        if self.player.health <= 0:
            self.game_over = True
            self.victory = False
            self.add_message("You have died. Game over!")

        if self.current_level == self.last_level and not self.current_dungeon().monsters:
            self.game_over = True
            self.victory = True
            self.add_message("You have defeated Diablo and saved the world! Victory!")

        self.turn_count += 1

    def move_player(self, direction: int) -> None:
        """Step north (0), south (1), west (2) or east (3); bumping a monster starts a fight."""
        if self.mode != Mode.EXPLORING:
            return

        dungeon = self.current_dungeon().dungeon
        dx, dy = _STEPS.get(direction, (0, 0))
        new_x = self.player.position.x + dx
        new_y = self.player.position.y + dy

        if not dungeon.is_walkable(new_x, new_y):
            return

        monster = self.monster_at(new_x, new_y)
        if monster is not None:
            self.start_combat(monster)
            return

        if dungeon.tiles[new_y][new_x] == Tile.STAIRS and self.current_level < self.last_level:
            self.descend_to_next_level()
            return

        self.player.position = Position(new_x, new_y)

        item = self.item_at(new_x, new_y)
        if item is not None:
            self.add_message(f"You see {item.name}. Press [g] to pick it up.")

    def pickup_item(self) -> None:
        """Pick up the item under the player, if there is one and room for it."""
        item = self.item_at(self.player.position.x, self.player.position.y)
        if item is None:
            self.add_message("There's nothing here to pick up.")
        elif self.player.pick_up_item(item):
            self.add_message(f"You picked up {item.name}.")
            self.remove_item(item)
        else:
            self.add_message("Your inventory is full!")

    def process_monster_turns(self) -> None:
        """Move every visible monster according to its behaviour."""
        px, py = self.player.position.x, self.player.position.y
        state = self.current_dungeon()
        dungeon = state.dungeon
        monsters = state.monsters

        for monster in list(monsters):
            if not dungeon.visible[monster.position.y][monster.position.x]:
                continue

            monster.reduce_cooldowns()
            distance = monster.distance_squared(px, py)

            if monster.is_adjacent(px, py):
                self.start_combat(monster)
                return

            if monster.behavior == Behavior.AGGRESSIVE:
                if distance <= 100:
                    monster.move_toward(px, py, dungeon, monsters)
            elif monster.behavior == Behavior.PATROLLING:
                if distance <= 25 and self.rng.random() < 0.7:
                    monster.move_toward(px, py, dungeon, monsters)
                else:
                    monster.move_randomly(dungeon, monsters, self.rng)
            elif monster.behavior == Behavior.COWARDLY:
                if distance <= 25:
                    monster.move_away(px, py, dungeon, monsters)
                else:
                    monster.move_randomly(dungeon, monsters, self.rng)
            elif monster.behavior == Behavior.SMART and distance <= 100:
                if monster.health > monster.max_health // 2:
                    monster.move_toward(px, py, dungeon, monsters)
                else:
                    monster.move_away(px, py, dungeon, monsters)

    def descend_to_next_level(self) -> None:
        """Go down one level and stand at its starting position."""
        self.current_level += 1
        dungeon = self.current_dungeon().dungeon
        self.add_message(f"You descend deeper into {dungeon.theme.name}...")
        start = dungeon.starting_position()
        self.player.position = Position(start.x, start.y)

    def _calculate_fov(self) -> None:
        self.current_dungeon().dungeon.update_visibility(
            self.player.position.x, self.player.position.y
        )

    def _draw(self) -> None:
        target = self.current_target if self.mode == Mode.COMBAT else None
        sys.stdout.write(
            render_game_screen(
                self.current_dungeon().dungeon,
                self.player,
                self.current_level,
                MAX_DUNGEON_LEVELS,
                self.visible_monsters(),
                self.visible_items(),
                self.messages,
                self.mode_name(),
                target,
            )
        )
        sys.stdout.flush()


def _random_spot(room, rng: random.Random) -> tuple[int, int]:
    x = room.x + rng.randrange(room.width - 2) + 1
    y = room.y + rng.randrange(room.height - 2) + 1
    return x, y


def generate_monsters_for_level(
    dungeon: Dungeon, level: int, rng: random.Random | None = None
) -> list[Monster]:
    """Scatter monsters over the rooms other than the first and the last."""
    rng = rng if rng is not None else random.Random()
    count = min(rng.randrange(5) + 5 * level, MAX_MONSTERS_PER_LEVEL)
    rooms = dungeon.rooms
    monsters: list[Monster] = []
    if len(rooms) <= 2:
        return monsters

    for _ in range(count):
        room = rooms[rng.randrange(len(rooms) - 2) + 1]
        x, y = _random_spot(room, rng)
        if dungeon.tiles[y][x] == Tile.FLOOR:
            monster_type = rng.choice(list(dungeon.theme.monster_types))
            monster = generate_monster(level, monster_type, rng)
            monster.position = Position(x, y)
            monsters.append(monster)
    return monsters


def generate_items_for_level(
    dungeon: Dungeon, level: int, rng: random.Random | None = None
) -> list[Item]:
    """Scatter two to four random items over the rooms."""
    rng = rng if rng is not None else random.Random()
    count = rng.randrange(3) + 2
    items: list[Item] = []
    for _ in range(count):
        room = rng.choice(dungeon.rooms)
        x, y = _random_spot(room, rng)
        if dungeon.tiles[y][x] == Tile.FLOOR:
            item = generate_item(level, rng)
            item.position = Position(x, y)
            items.append(item)
    return items


def new_game(rng: random.Random | None = None) -> Game:
    """Create a warrior hero and all dungeon levels, with the hero at the first level's start."""
    rng = rng if rng is not None else random.Random()
    player = __player()
    dungeons = []
    for level in range(1, MAX_DUNGEON_LEVELS + 1):
        dungeon = generate_dungeon(DUNGEON_WIDTH, DUNGEON_HEIGHT, level, rng)
        dungeons.append(
            DungeonState(
                dungeon=dungeon,
                monsters=generate_monsters_for_level(dungeon, level, rng),
                items=generate_items_for_level(dungeon, level, rng),
            )
        )
    start = dungeons[0].dungeon.starting_position()
    player.position = Position(start.x, start.y)
    return Game(player=player, dungeons=dungeons, messages=[WELCOME], rng=rng)


def __player():
    from redstone.player import Player

    return Player("Hero", PlayerClass.WARRIOR)


def main(argv: list[str] | None = None) -> int:
    """Show the title screen and play a game in the terminal."""
    parser = argparse.ArgumentParser(prog="redstone", description="A roguelike in the depths of hell.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the dungeon generator")
    args = parser.parse_args(argv)

    display_title_screen()
    game = new_game(random.Random(args.seed))
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())