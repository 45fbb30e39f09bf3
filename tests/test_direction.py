import pytest

from gridsnake.direction import Direction, MoveAction, PauseAction


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ],
)
def test_opposite(direction, expected):
    assert direction.opposite() is expected


def test_opposite_is_an_involution():
    for direction in Direction:
        flipped = Direction.opposite(direction)
        assert Direction.opposite(flipped) is direction
        assert flipped is not direction


def test_move_actions_compare_by_direction():
    assert MoveAction(Direction.UP) == MoveAction(Direction.UP)
    assert MoveAction(Direction.UP) != MoveAction(Direction.LEFT)
    assert MoveAction(Direction.RIGHT).direction is Direction.RIGHT


def test_pause_actions_are_equal_and_hashable():
    assert PauseAction() == PauseAction()
    assert len({PauseAction(), PauseAction()}) == 1


def test_move_action_is_frozen():
    action = MoveAction(Direction.DOWN)
    with pytest.raises(AttributeError):
        action.direction = Direction.UP
    assert action.direction is Direction.DOWN