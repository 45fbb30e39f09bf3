"""Movement directions and the player actions built from input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """A direction the snake can travel in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class MoveAction:
    """The player asked the snake to turn."""

    direction: Direction


@dataclass(frozen=True)
class PauseAction:
    """The player asked to toggle pause."""