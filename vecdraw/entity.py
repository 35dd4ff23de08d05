"""Game entities with a role, a shape and hit points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = ["Tag", "Shape", "Entity"]

_U16_MAX = 0xFFFF


class Tag(IntEnum):
    UNDEFINED = 0
    PLAYER = 1
    FIXED = 2
    ENEMY = 3
    TEXT = 4


class Shape(IntEnum):
    TEXT = 0
    POINT = 1
    LINE = 2
    TRI = 3
    SQUARE = 4
    PENTA = 5
    HEXA = 6


@dataclass
class Entity:
    """Something in the world that can be drawn and damaged."""

    max_hp: int = 0
    curr_hp: int = 0
    tag: Tag = Tag.UNDEFINED
    shape: Shape = Shape.POINT
    colour: int = 0

    def __post_init__(self) -> None:
        for name in ("max_hp", "curr_hp"):
            value = getattr(self, name)
            if not 0 <= value <= _U16_MAX:
                raise ValueError(f"{name} must be between 0 and {_U16_MAX}")

    def is_hostile(self) -> bool:
        return self.tag is Tag.ENEMY