"""Attributes, effects and positions shared by players, monsters and items."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


@dataclass
class Attributes:
    """The four core attributes of a creature or an item bonus."""

    strength: int = 0
    agility: int = 0
    charisma: int = 0
    intelligence: int = 0

    def __add__(self, other: Attributes) -> Attributes:
        if not isinstance(other, Attributes):
            return NotImplemented
        return Attributes(
            strength=self.strength + other.strength,
            agility=self.agility + other.agility,
            charisma=self.charisma + other.charisma,
            intelligence=self.intelligence + other.intelligence,
        )

    def meets(self, requirements: Attributes) -> bool:
        """Return True if every attribute is at least the required value."""
        return (
            self.strength >= requirements.strength
            and self.agility >= requirements.agility
            and self.intelligence >= requirements.intelligence
            and self.charisma >= requirements.charisma
        )


class EffectType(str, Enum):
    DAMAGE_OVER_TIME = "damage_over_time"
    HEAL_OVER_TIME = "heal_over_time"
    BUFF_ATTRIBUTE = "buff_attribute"
    DEBUFF_ATTRIBUTE = "debuff_attribute"


@dataclass
class Effect:
    """A named effect with a strength and a duration in turns."""

    name: str
    magnitude: int
    effect_type: EffectType
    duration: int = 0


@dataclass
class Position:
    x: int = 0
    y: int = 0


@runtime_checkable
class Entity(Protocol):
    """Anything that has a name, a map symbol and a place on the map."""

    name: str
    symbol: str
    position: Position