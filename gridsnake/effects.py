"""Visual effects: the food's breathing pulse and the burst shown on eating."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from itertools import pairwise
from typing import Optional

from gridsnake.food import EatEvent
from gridsnake.settings import GRID_CELL, Color, grid_to_screen

BREATHE_TIMESTAMPS: tuple[float, ...] = (0.0, 1.0, 1.5)
BREATHE_SCALES: tuple[float, ...] = (1.0, 0.8, 1.0)


def breathe_scale(elapsed: float) -> float:
    """Size of a food square ``elapsed`` seconds into its repeating pulse."""
    if elapsed < 0:
        raise ValueError(f"elapsed must not be negative, got {elapsed}")
    t = elapsed % BREATHE_TIMESTAMPS[-1]
    keyframes = list(zip(BREATHE_TIMESTAMPS, BREATHE_SCALES))
    for (t0, s0), (t1, s1) in pairwise(keyframes):
        if t0 <= t <= t1:
            fraction = (t - t0) / (t1 - t0)
            return GRID_CELL * (s0 + (s1 - s0) * fraction)
    return GRID_CELL * BREATHE_SCALES[-1]


@dataclass
class Particle:
    """One particle of a burst, in world coordinates."""

    x: float
    y: float
    vx: float
    vy: float


class ParticleBurst:
    """A one-shot burst of particles flying out from a point."""

    COUNT = 50
    MAX_SPEED = 100.0
    LIFETIME = 0.4
    SCALE = 2.0
    DRAG = 0.001

    def __init__(
        self,
        position: tuple[float, float],
        color: Color,
        rng: Optional[random.Random] = None,
        count: int = COUNT,
    ) -> None:
        source = rng if rng is not None else random.Random()
        self.color = color
        self.scale = self.SCALE
        self.lifetime = self.LIFETIME
        self.age = 0.0
        x, y = position
        self.particles: list[Particle] = []
        for _ in range(count):
            speed = source.uniform(0.0, self.MAX_SPEED)
            angle = source.uniform(0.0, 2 * math.pi)
            self.particles.append(
                Particle(x, y, speed * math.cos(angle), speed * math.sin(angle))
            )

    @classmethod
    def from_eat(
        cls, event: EatEvent, rng: Optional[random.Random] = None
    ) -> ParticleBurst:
        """A burst at the eaten food's cell, in the food's colour."""
        return cls(grid_to_screen(event.pos.x, event.pos.y), event.food.color, rng)

    def update(self, delta: float) -> None:
        """Advance every particle by ``delta`` seconds."""
        if delta < 0:
            raise ValueError(f"delta must not be negative, got {delta}")
        self.age += delta
        keep = 1.0 - self.DRAG
        for particle in self.particles:
            particle.vx *= keep
            particle.vy *= keep
            particle.x += particle.vx * delta
            particle.y += particle.vy * delta

    def alive(self) -> bool:
        """True until the particles' lifetime has run out."""
        return self.age < self.lifetime