"""Dungeon maps: generation, walkability and line of sight."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable

from redstone.common import Entity, Position
from redstone.theme import Theme, theme_for_level

VISION_RADIUS = 10


class Tile(str, Enum):
    FLOOR = "."
    WALL = "#"
    STAIRS = ">"
    DOOR = "+"
    PLAYER = "@"
    MONSTER = "M"
    ITEM = "i"
    EMPTY = " "
    UNEXPLORED = "?"


class Direction(IntEnum):
    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3


@dataclass(frozen=True)
class Room:
    x: int
    y: int
    width: int
    height: int

    @property
    def center(self) -> Position:
        return Position(self.x + self.width // 2, self.y + self.height // 2)

    def _too_close(self, other: Room) -> bool:
        return (
            self.x <= other.x + other.width + 1
            and self.x + self.width + 1 >= other.x
            and self.y <= other.y + other.height + 1
            and self.y + self.height + 1 >= other.y
        )


@dataclass
class Dungeon:
    level: int
    width: int
    height: int
    tiles: list[list[Tile]]
    theme: Theme
    rooms: list[Room] = field(default_factory=list)
    visited: list[list[bool]] = field(default_factory=list)
    visible: list[list[bool]] = field(default_factory=list)
    stairs_pos: Position = field(default_factory=Position)

    def __post_init__(self) -> None:
        if not self.visited:
            self.visited = [[False] * self.width for _ in range(self.height)]
        if not self.visible:
            self.visible = [[False] * self.width for _ in range(self.height)]

    def update_visibility(self, player_x: int, player_y: int) -> list[list[bool]]:
        """Recompute what the player sees and mark it as visited."""
        for row in self.visible:
            row[:] = [False] * len(row)

        radius_squared = VISION_RADIUS * VISION_RADIUS
        for y in range(max(0, player_y - VISION_RADIUS), min(self.height, player_y + VISION_RADIUS + 1)):
            for x in range(max(0, player_x - VISION_RADIUS), min(self.width, player_x + VISION_RADIUS + 1)):
                dx, dy = player_x - x, player_y - y
                if dx * dx + dy * dy <= radius_squared and self.has_line_of_sight(player_x, player_y, x, y):
                    self.visible[y][x] = True
                    self.visited[y][x] = True
        return self.visible

    def is_walkable(self, x: int, y: int) -> bool:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        return self.tiles[y][x] != Tile.WALL

    def is_position_empty(self, x: int, y: int, entities: Iterable[Entity | None]) -> bool:
        """True if the tile is walkable and no entity stands on it."""
        if not self.is_walkable(x, y):
            return False
        return not any(
            entity is not None and entity.position.x == x and entity.position.y == y
            for entity in entities
        )

    def has_line_of_sight(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        """Bresenham line test; walls block sight, but a wall target is seen."""
        dx = abs(x2 - x1)
        dy = abs(y2 - y1)
        sx = 1 if x1 < x2 else -1
        sy = 1 if y1 < y2 else -1
        err = dx - dy

        while True:
            if (x1, y1) == (x2, y2):
                return True
            if self.tiles[y1][x1] == Tile.WALL:
                return False
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x1 += sx
            if e2 < dx:
                err += dx
                y1 += sy

    def starting_position(self) -> Position:
        """The centre of the first room, or of the map when there are no rooms."""
        if self.rooms:
            return self.rooms[0].center
        return Position(self.width // 2, self.height // 2)

    def _carve_horizontal(self, x1: int, x2: int, y: int) -> None:
        for x in range(min(x1, x2), max(x1, x2) + 1):
            if 0 <= y < self.height and 0 <= x < self.width:
                self.tiles[y][x] = Tile.FLOOR

    def _carve_vertical(self, y1: int, y2: int, x: int) -> None:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            if 0 <= y < self.height and 0 <= x < self.width:
                self.tiles[y][x] = Tile.FLOOR

    def _carve_room(self, room: Room) -> None:
        for y in range(room.y, room.y + room.height):
            self.tiles[y][room.x:room.x + room.width] = [Tile.FLOOR] * room.width


def blank_dungeon(width: int, height: int, level: int) -> Dungeon:
    """A dungeon of the given size made entirely of wall."""
    return Dungeon(
        level=level,
        width=width,
        height=height,
        tiles=[[Tile.WALL] * width for _ in range(height)],
        theme=theme_for_level(level),
    )


def generate_dungeon(width: int, height: int, level: int, rng: random.Random | None = None) -> Dungeon:
    """Generate a level of rooms joined by corridors, with stairs in the last room."""
    rng = rng or random.Random()
    dungeon = blank_dungeon(width, height, level)

    room_attempts = rng.randrange(5) + 5
    for attempt in range(room_attempts):
        room_width = rng.randrange(8) + 5
        room_height = rng.randrange(5) + 4
        room = Room(
            x=rng.randrange(width - room_width - 2) + 1,
            y=rng.randrange(height - room_height - 2) + 1,
            width=room_width,
            height=room_height,
        )
        if any(room._too_close(existing) for existing in dungeon.rooms):
            continue

        dungeon.rooms.append(room)
        dungeon._carve_room(room)

        if attempt > 0 and len(dungeon.rooms) > 1:
            start = room.center
            end = dungeon.rooms[-2].center
            if rng.randrange(2) == 0:
                dungeon._carve_horizontal(start.x, end.x, start.y)
                dungeon._carve_vertical(start.y, end.y, end.x)
            else:
                dungeon._carve_vertical(start.y, end.y, start.x)
                dungeon._carve_horizontal(start.x, end.x, end.y)

    if dungeon.rooms:
        stairs = dungeon.rooms[-1].center
        dungeon.stairs_pos = stairs
        dungeon.tiles[stairs.y][stairs.x] = Tile.STAIRS

    return dungeon