"""Food on the field, where new food may go, and eating it."""

from __future__ import annotations

import random as _random
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from gridsnake.powerup import Powerup
from gridsnake.settings import Color
from gridsnake.snake import Cell


@dataclass(frozen=True)
class Food:
    """A piece of food of some kind lying on a cell."""

    cell: Cell
    powerup: Powerup = Powerup.NORMAL

    @property
    def color(self) -> Color:
        return self.powerup.color()


@dataclass(frozen=True)
class EatEvent:
    """The snake's head reached a piece of food."""

    food: Food

    @property
    def pos(self) -> Cell:
        return self.food.cell

    @property
    def powerup(self) -> Powerup:
        return self.food.powerup


def free_cells(field: Iterable[tuple[int, int]], occupied: Iterable[tuple[int, int]]) -> list[Cell]:
    """Cells of ``field`` not in ``occupied``, in field order."""
    taken = {Cell(*cell) for cell in occupied}
    return [Cell(*cell) for cell in field if Cell(*cell) not in taken]


def random_foods(
    field: Iterable[tuple[int, int]],
    occupied: Iterable[tuple[int, int]],
    rng: Optional[_random.Random] = None,
    powerup: Optional[Powerup] = None,
    amount: int = 1,
) -> list[Food]:
    """Place ``amount`` foods on distinct free cells.

    Without ``powerup`` each food gets a random kind. Raises ValueError when
    there are not enough free cells.
    """
    source = rng if rng is not None else _random.Random()
    available = free_cells(field, occupied)
    foods: list[Food] = []
    for _ in range(amount):
        if not available:
            raise ValueError("no free cell left to place food on")
        cell = available.pop(source.randrange(len(available)))
        kind = powerup if powerup is not None else Powerup.random(source)
        foods.append(Food(cell, kind))
    return foods


def find_eaten(head: tuple[int, int], foods: Iterable[Food]) -> list[EatEvent]:
    """An event for every food lying on the head's cell."""
    head_cell = Cell(*head)
    return [EatEvent(food) for food in foods if food.cell == head_cell]