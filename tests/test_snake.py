import pytest

from gridsnake.direction import Direction
from gridsnake.settings import GRID_CENTER, GRID_SIZE
from gridsnake.snake import Cell, Snake


def _grown_line(length):
    snake = Snake()
    for _ in range(length):
        snake.grow()
        snake.step()
    return snake


def test_new_snake_starts_at_centre_facing_up():
    snake = Snake()
    assert snake.head() == Cell(GRID_CENTER, GRID_CENTER)
    assert snake.tail() == []
    assert snake.direction is Direction.UP


def test_cell_equals_plain_tuple():
    assert Cell(3, 4) == (3, 4)


def test_step_up_moves_one_row_up():
    snake = Snake()
    head = snake.step()
    assert head == Cell(GRID_CENTER, GRID_CENTER - 1)
    assert snake.head() == head


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        (Cell(0, 0), Direction.UP, Cell(0, GRID_SIZE - 1)),
        (Cell(0, GRID_SIZE - 1), Direction.DOWN, Cell(0, 0)),
        (Cell(0, 0), Direction.LEFT, Cell(GRID_SIZE - 1, 0)),
        (Cell(GRID_SIZE - 1, 0), Direction.RIGHT, Cell(0, 0)),
    ],
)
def test_step_wraps_at_edges(start, direction, expected):
    snake = Snake(start, direction)
    assert snake.step() == expected


def test_queue_direction_ignores_repeat():
    snake = Snake()
    snake.queue_direction(Direction.LEFT)
    snake.queue_direction(Direction.LEFT)
    snake.queue_direction(Direction.DOWN)
    assert list(snake.planned_direction) == [Direction.LEFT, Direction.DOWN]


def test_planned_turn_is_applied_on_step():
    snake = Snake()
    snake.queue_direction(Direction.LEFT)
    snake.step()
    assert snake.direction is Direction.LEFT
    assert snake.head() == Cell(GRID_CENTER - 1, GRID_CENTER)


def test_reverse_turn_is_refused_and_clears_plan():
    snake = Snake()
    snake.queue_direction(Direction.DOWN)
    snake.queue_direction(Direction.LEFT)
    snake.step()
    assert snake.direction is Direction.UP
    assert len(snake.planned_direction) == 0


def test_grow_places_tail_on_last_part():
    snake = Snake()
    start = snake.head()
    snake.grow()
    assert snake.tail() == [start]
    snake.step()
    assert snake.tail() == [start]
    assert snake.head() != start


def test_tail_follows_head_path():
    snake = _grown_line(4)
    cells = snake.parts
    assert len(cells) == 5
    for front, back in zip(cells, cells[1:]):
        assert front.x == back.x
        assert back.y - front.y == 1


def test_remove_tails_keeps_head():
    snake = _grown_line(2)
    head = snake.head()
    snake.remove_tails(5)
    assert snake.parts == [head]


def test_remove_tails_drops_from_end():
    snake = _grown_line(3)
    before = list(snake.parts)
    snake.remove_tails(1)
    assert snake.parts == before[:-1]


def test_single_tail_on_head_is_not_a_collision():
    snake = Snake()
    snake.grow()
    assert snake.head() in snake.tail()
    assert snake.collides_with_self() is False


def test_turning_into_own_tail_collides():
    snake = _grown_line(4)
    assert snake.collides_with_self() is False
    for direction in (Direction.RIGHT, Direction.DOWN, Direction.LEFT):
        snake.queue_direction(direction)
        snake.step()
    assert snake.head() in snake.tail()
    assert snake.collides_with_self() is True