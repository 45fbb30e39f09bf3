"""Kinds of food and their effects."""

from __future__ import annotations

import random as _random
from enum import Enum
from typing import Optional, Protocol

from gridsnake.settings import Color


class _RandomSource(Protocol):
    def random(self) -> float: ...


class Powerup(Enum):
    """The kind of a piece of food; everything but NORMAL has an effect."""

    NORMAL = "normal"
    SLOWDOWN = "slowdown"
    SHORTEN = "shorten"
    FEAST = "feast"

    def color(self) -> Color:
        """Colour the food is drawn in."""
        return _COLORS[self]

    def chance(self) -> float:
        """Probability of this kind being picked at random."""
        return _CHANCES[self]

    def speed(self) -> float:
        """Multiplier applied to the tick length while the effect lasts."""
        return _SPEEDS[self]

    def power(self) -> int:
        """Strength of the effect: ticks, removed tails or spawned foods."""
        return _POWERS[self]

    @staticmethod
    def from_chance(random_number: float) -> Powerup:
        """Map a number in [0, 1) onto a kind according to the chances."""
        threshold = Powerup.FEAST.chance()
        if random_number < threshold:
            return Powerup.FEAST
        threshold += Powerup.SHORTEN.chance()
        if random_number < threshold:
            return Powerup.SHORTEN
        threshold += Powerup.SLOWDOWN.chance()
        if random_number < threshold:
            return Powerup.SLOWDOWN
        return Powerup.NORMAL

    @staticmethod
    def random(rng: Optional[_RandomSource] = None) -> Powerup:
        """Pick a kind at random, using ``rng`` or the module generator."""
        source = rng if rng is not None else _random
        return Powerup.from_chance(source.random())


_COLORS: dict[Powerup, Color] = {
    Powerup.NORMAL: (0.9, 0.1, 0.1),
    Powerup.SLOWDOWN: (0.0, 0.0, 0.9),
    Powerup.SHORTEN: (0.9, 0.9, 0.0),
    Powerup.FEAST: (0.0, 0.9, 0.0),
}

_CHANCES: dict[Powerup, float] = {
    Powerup.NORMAL: 0.80,
    Powerup.SHORTEN: 0.1,
    Powerup.FEAST: 0.05,
    Powerup.SLOWDOWN: 0.05,
}

_SPEEDS: dict[Powerup, float] = {
    Powerup.NORMAL: 1.0,
    Powerup.SLOWDOWN: 2.0,
    Powerup.SHORTEN: 1.0,
    Powerup.FEAST: 1.0,
}

_POWERS: dict[Powerup, int] = {
    Powerup.NORMAL: 0,
    Powerup.SLOWDOWN: 20,
    Powerup.SHORTEN: 3,
    Powerup.FEAST: 4,
}