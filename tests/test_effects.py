import math
import random

import pytest

from gridsnake.effects import ParticleBurst, breathe_scale
from gridsnake.food import EatEvent, Food
from gridsnake.powerup import Powerup
from gridsnake.settings import GRID_CELL, grid_to_screen
from gridsnake.snake import Cell


def test_breathe_keyframes():
    assert breathe_scale(0.0) == pytest.approx(GRID_CELL * 1.0)
    assert breathe_scale(1.0) == pytest.approx(GRID_CELL * 0.8)


def test_breathe_repeats():
    for t in (0.1, 0.5, 1.2, 1.4):
        assert breathe_scale(t) == pytest.approx(breathe_scale(t + 1.5))


def test_breathe_stays_in_range():
    for step in range(30):
        value = breathe_scale(step * 0.1)
        assert GRID_CELL * 0.8 - 1e-9 <= value <= GRID_CELL * 1.0 + 1e-9


def test_breathe_shrinks_then_grows():
    assert breathe_scale(0.2) > breathe_scale(0.6) > breathe_scale(1.0)
    assert breathe_scale(1.0) < breathe_scale(1.25) < breathe_scale(1.45)


def test_breathe_negative_raises():
    with pytest.raises(ValueError):
        breathe_scale(-0.1)


def test_burst_starts_at_position():
    burst = ParticleBurst((10.0, -20.0), (0.9, 0.1, 0.1), random.Random(1))
    assert len(burst.particles) == 50
    assert all((p.x, p.y) == (10.0, -20.0) for p in burst.particles)
    assert all(math.hypot(p.vx, p.vy) <= 100.0 + 1e-9 for p in burst.particles)
    assert burst.alive() is True


def test_burst_dies_after_lifetime():
    burst = ParticleBurst((0.0, 0.0), (0.0, 0.9, 0.0), random.Random(2))
    burst.update(0.2)
    assert burst.alive() is True
    burst.update(0.2)
    assert burst.alive() is False


def test_burst_particles_move_outward():
    burst = ParticleBurst((0.0, 0.0), (0.0, 0.0, 0.9), random.Random(3))
    before = [math.hypot(p.vx, p.vy) for p in burst.particles]
    burst.update(0.1)
    distances = [math.hypot(p.x, p.y) for p in burst.particles]
    assert all(d <= s * 0.1 + 1e-9 for d, s in zip(distances, before))
    assert max(distances) > 0.0


def test_burst_negative_delta_raises():
    burst = ParticleBurst((0.0, 0.0), (0.9, 0.9, 0.0), random.Random(4))
    with pytest.raises(ValueError):
        burst.update(-1.0)


def test_burst_from_eat_uses_cell_and_colour():
    event = EatEvent(Food(Cell(3, 4), Powerup.FEAST))
    burst = ParticleBurst.from_eat(event, random.Random(5))
    assert burst.color == Powerup.FEAST.color()
    assert (burst.particles[0].x, burst.particles[0].y) == grid_to_screen(3, 4)