"""The in-game rules: movement, eating, power-up effects, score and pause."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional, Union

from gridsnake.configuration import GameConfiguration, GameDifficulty, GameState
from gridsnake.direction import MoveAction, PauseAction
from gridsnake.food import EatEvent, Food, find_eaten, random_foods
from gridsnake.powerup import Powerup
from gridsnake.snake import Snake
from gridsnake.timer import Timer

Action = Union[MoveAction, PauseAction]


@dataclass
class UpdateResult:
    """What happened during one call to :meth:`Game.update`."""

    moved: bool = False
    eaten: list[EatEvent] = field(default_factory=list)


class Game:
    """A whole game session: menus, the snake, the food and the score."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState.START_MENU
        self.configuration = GameConfiguration()
        self.snake: Optional[Snake] = None
        self.foods: list[Food] = []
        self.score = 0
        self.paused = False
        self.slowdown_timer = Timer()

    def start(self, difficulty: GameDifficulty) -> None:
        """Leave the start menu and begin a game at ``difficulty``."""
        if self.state is not GameState.START_MENU:
            raise RuntimeError(f"cannot start a game from {self.state.name}")
        self.configuration.set_difficulty_and_reset_timer(difficulty)
        self.state = GameState.IN_GAME
        self.snake = Snake()
        self.foods = random_foods(
            self.configuration.field,
            self.snake.parts,
            self.rng,
            Powerup.NORMAL,
            1,
        )

    def toggle_pause(self) -> None:
        """Pause a running game, or resume a paused one."""
        self.paused = not self.paused

    def return_to_menu(self) -> None:
        """Leave the finish menu for the start menu, clearing the score."""
        if self.state is not GameState.FINISH_MENU:
            raise RuntimeError(f"cannot return to the menu from {self.state.name}")
        self.state = GameState.START_MENU
        self.score = 0

    def update(self, delta: float, actions: Iterable[Action] = ()) -> UpdateResult:
        """Advance the game by ``delta`` seconds, applying the player's actions."""
        if self.state is not GameState.IN_GAME or self.snake is None:
            return UpdateResult()

        for action in actions:
            if isinstance(action, PauseAction):
                self.toggle_pause()
            elif isinstance(action, MoveAction):
                self.snake.queue_direction(action.direction)

        if self.paused:
            return UpdateResult()

        moved = self.configuration.advance(delta)
        if moved:
            self.snake.step()

        if self.slowdown_timer.tick(delta).just_finished():
            self.configuration.set_difficulty_and_reset_timer(
                self.configuration.current_difficulty
            )

        eaten = find_eaten(self.snake.head(), self.foods)
        if eaten:
            self._eat(eaten)

        if self.snake.collides_with_self():
            self._finish()

        return UpdateResult(moved=moved, eaten=eaten)

    def _eat(self, events: list[EatEvent]) -> None:
        assert self.snake is not None
        eaten_foods = {event.food for event in events}
        self.foods = [food for food in self.foods if food not in eaten_foods]

        growing = True
        for event in events:
            self.score += 1
            if event.powerup is Powerup.SHORTEN:
                self.snake.remove_tails(Powerup.SHORTEN.power())
                growing = False
            elif growing:
                self.snake.grow()
            if event.powerup is Powerup.SLOWDOWN:
                self._slow_down()

        first = events[0]
        if first.powerup is Powerup.FEAST:
            self.foods.extend(self._place_foods(Powerup.FEAST.power()))
        elif not self.foods:
            self.foods.extend(self._place_foods(1))

    def _place_foods(self, amount: int) -> list[Food]:
        assert self.snake is not None
        return random_foods(
            self.configuration.field, self.snake.parts, self.rng, None, amount
        )

    def _slow_down(self) -> None:
        new_speed = (
            self.configuration.current_difficulty.tick_rate() * Powerup.SLOWDOWN.speed()
        )
        self.configuration.set_game_speed(new_speed)
        self.slowdown_timer.pause()
        self.slowdown_timer.reset()
        self.slowdown_timer.set_duration(new_speed * Powerup.SLOWDOWN.power())
        self.slowdown_timer.unpause()

    def _finish(self) -> None:
        self.state = GameState.FINISH_MENU
        self.snake = None
        self.foods = []