"""Grid cells and the snake that moves over them."""

from __future__ import annotations

from collections import deque
from typing import NamedTuple

from gridsnake.direction import Direction
from gridsnake.settings import GRID_CENTER, GRID_SIZE


class Cell(NamedTuple):
    """A position on the game grid; row 0 is the top row."""

    x: int
    y: int


def _wrap_step(cell: Cell, direction: Direction) -> Cell:
    last = GRID_SIZE - 1
    x, y = cell
    if direction is Direction.UP:
        y = last if y == 0 else y - 1
    elif direction is Direction.DOWN:
        y = 0 if y == last else y + 1
    elif direction is Direction.LEFT:
        x = last if x == 0 else x - 1
    else:
        x = 0 if x == last else x + 1
    return Cell(x, y)


class Snake:
    """A head followed by tail segments, moving one cell per step.

    ``parts[0]`` is the head, the rest is the tail in order.
    """

    def __init__(
        self,
        start: Cell = Cell(GRID_CENTER, GRID_CENTER),
        direction: Direction = Direction.UP,
    ) -> None:
        self.parts: list[Cell] = [Cell(*start)]
        self.direction = direction
        self.planned_direction: deque[Direction] = deque()

    def __len__(self) -> int:
        return len(self.parts)

    def head(self) -> Cell:
        """The cell the head is on."""
        return self.parts[0]

    def tail(self) -> list[Cell]:
        """The cells of the tail segments, nearest to the head first."""
        return self.parts[1:]

    def queue_direction(self, direction: Direction) -> None:
        """Plan a turn, ignoring a repeat of the last planned one."""
        if not self.planned_direction or self.planned_direction[-1] != direction:
            self.planned_direction.append(direction)

    def step(self) -> Cell:
        """Move one cell, wrapping at the grid edges; return the new head.

        A planned turn back onto the snake itself is refused and drops the
        whole plan.
        """
        if self.planned_direction:
            planned = self.planned_direction.popleft()
            if self.direction != planned.opposite():
                self.direction = planned
            else:
                self.planned_direction.clear()

        new_head = _wrap_step(self.parts[0], self.direction)
        self.parts = [new_head, *self.parts[:-1]]
        return new_head

    def grow(self) -> None:
        """Add a tail segment on the cell of the last part."""
        self.parts.append(self.parts[-1])

    def remove_tails(self, amount: int) -> None:
        """Drop up to ``amount`` tail segments from the end; the head stays."""
        for _ in range(amount):
            if len(self.parts) <= 1:
                break
            self.parts.pop()

    def collides_with_self(self) -> bool:
        """True if the head shares a cell with the tail.

        A tail of a single segment never counts: right after growing it sits
        on the head's cell.
        """
        tail = self.tail()
        return len(tail) > 1 and self.head() in tail