"""Turning pressed keys and gamepad buttons into player actions."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Union

from gridsnake.direction import Direction, MoveAction, PauseAction


class GamepadButton(Enum):
    """Gamepad buttons the game reacts to."""

    DPAD_UP = "dpad_up"
    DPAD_DOWN = "dpad_down"
    DPAD_LEFT = "dpad_left"
    DPAD_RIGHT = "dpad_right"
    SELECT = "select"


_MOVE_BINDINGS = (
    (Direction.UP, frozenset({"up", "w"}), GamepadButton.DPAD_UP),
    (Direction.DOWN, frozenset({"down", "s"}), GamepadButton.DPAD_DOWN),
    (Direction.LEFT, frozenset({"left", "a"}), GamepadButton.DPAD_LEFT),
    (Direction.RIGHT, frozenset({"right", "d"}), GamepadButton.DPAD_RIGHT),
)

_PAUSE_KEYS = frozenset({"escape"})


def actions_from_input(
    pressed_keys: Iterable[str],
    pressed_buttons: Iterable[GamepadButton] = (),
    paused: bool = False,
) -> list[Union[MoveAction, PauseAction]]:
    """Actions for the keys and buttons pressed this frame.

    Keys are named as by ``pygame.key.name``. Moves are dropped while the
    game is paused; the pause toggle always comes last.
    """
    keys = {key.lower() for key in pressed_keys}
    buttons = set(pressed_buttons)
    actions: list[Union[MoveAction, PauseAction]] = []

    if not paused:
        actions.extend(
            MoveAction(direction)
            for direction, bound_keys, button in _MOVE_BINDINGS
            if keys & bound_keys or button in buttons
        )

    if keys & _PAUSE_KEYS or GamepadButton.SELECT in buttons:
        actions.append(PauseAction())
    return actions