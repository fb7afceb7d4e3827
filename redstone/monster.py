"""Monsters: their data, ability choice and movement around the map."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Sequence

from redstone.abilities import Ability, AbilityType, reduce_cooldowns
from redstone.common import Attributes, Position

if TYPE_CHECKING:
    from redstone.dungeon import Dungeon


class MonsterType(str, Enum):
    DEMON = "demon"
    UNDEAD = "undead"
    ANIMAL = "animal"
    ELEMENTAL = "elemental"
    ABERRATION = "aberration"


class Behavior(IntEnum):
    AGGRESSIVE = 0
    PATROLLING = 1
    COWARDLY = 2
    SMART = 3


@dataclass(frozen=True)
class MonsterTemplate:
    name: str
    monster_type: MonsterType
    symbol: str
    base_attributes: Attributes
    exp_value: int
    level: int
    abilities: tuple[Ability, ...] = ()


_RANDOM_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def monster_basic_attack(level: int) -> Ability:
    """The plain attack every monster has, growing with its level."""
    return Ability(
        name="Attack",
        description="Basic attack",
        mana_cost=0,
        cooldown=0,
        ability_type=AbilityType.ATTACK,
        power=3 + level // 2,
    )


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(eq=False)
class Monster:
    """A monster on the map; monsters compare by identity."""

    name: str
    symbol: str
    monster_type: MonsterType
    level: int = 1
    attributes: Attributes = field(default_factory=Attributes)
    health: int = 0
    max_health: int = 0
    mana: int = 0
    max_mana: int = 0
    gold: int = 0
    behavior: Behavior = Behavior.AGGRESSIVE
    drop_rate: float = 0.0
    exp_value: int = 0
    abilities: list[Ability] = field(default_factory=list)
    position: Position = field(default_factory=Position)

    def choose_ability(self, rng: random.Random | None = None) -> Ability:
        """Pick a ready, affordable ability at random, paying its mana and starting its cooldown.

        Falls back to the first ability when none is ready.
        """
        if not self.abilities:
            return monster_basic_attack(self.level)

        ready = [
            ability for ability in self.abilities
            if ability.current_cd <= 0 and self.mana >= ability.mana_cost
        ]
        if not ready:
            return self.abilities[0]

        rng = rng if rng is not None else random.Random()
        chosen = rng.choice(ready)
        chosen.current_cd = chosen.cooldown
        self.mana -= chosen.mana_cost
        return chosen

    def reduce_cooldowns(self) -> None:
        reduce_cooldowns(self.abilities)

    def is_adjacent(self, x: int, y: int) -> bool:
        """True if (x, y) is this monster's tile or one of the eight around it."""
        return abs(x - self.position.x) <= 1 and abs(y - self.position.y) <= 1

    def distance_squared(self, x: int, y: int) -> int:
        dx = x - self.position.x
        dy = y - self.position.y
        return dx * dx + dy * dy

    def move_toward(self, x: int, y: int, dungeon: Dungeon, monsters: Sequence[Monster]) -> None:
        """Step one tile (diagonals allowed) toward (x, y) if the tile is free."""
        self._try_move(_sign(x - self.position.x), _sign(y - self.position.y), dungeon, monsters)

    def move_away(self, x: int, y: int, dungeon: Dungeon, monsters: Sequence[Monster]) -> None:
        """Step one tile (diagonals allowed) away from (x, y) if the tile is free."""
        self._try_move(_sign(self.position.x - x), _sign(self.position.y - y), dungeon, monsters)

    def move_randomly(
        self, dungeon: Dungeon, monsters: Sequence[Monster], rng: random.Random | None = None
    ) -> None:
        """Try a step in a random orthogonal direction."""
        rng = rng if rng is not None else random.Random()
        dx, dy = rng.choice(_RANDOM_STEPS)
        self._try_move(dx, dy, dungeon, monsters)

    def _try_move(self, dx: int, dy: int, dungeon: Dungeon, monsters: Sequence[Monster]) -> None:
        new_x = self.position.x + dx
        new_y = self.position.y + dy
        others = [m for m in monsters if m is not self]
        if dungeon.is_position_empty(new_x, new_y, others):
            self.position = Position(new_x, new_y)