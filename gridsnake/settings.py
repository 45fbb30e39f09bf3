"""Grid geometry, colours and base speed shared across the game."""

from __future__ import annotations

Color = tuple[float, float, float]

GRID_CELL: float = 60.0
GRID_SIZE: int = 13
GRID_CENTER: int = GRID_SIZE // 2

WINDOW_SIZE: float = GRID_CELL * GRID_SIZE
LEFT_WINDOW_BORDER: float = -WINDOW_SIZE / 2.0
TOP_WINDOW_BORDER: float = WINDOW_SIZE / 2.0

BACKGROUND_COLOR: Color = (0.24, 0.25, 0.24)

HEAD_COLOR: Color = (0.9, 0.9, 0.9)
TAIL_COLOR: Color = (0.15, 0.79, 0.58)

BASE_GAME_SPEED: float = 0.25


def grid_to_screen(grid_x: int, grid_y: int) -> tuple[float, float]:
    """Return the world position of a cell's centre.

    The world origin is the window centre with y pointing up; grid row 0 is
    the top row.
    """
    x = LEFT_WINDOW_BORDER + GRID_CELL / 2.0 + GRID_CELL * grid_x
    y = TOP_WINDOW_BORDER - GRID_CELL / 2.0 - GRID_CELL * grid_y
    return (x, y)