"""Game difficulty, game states, update phases and the running configuration."""

from __future__ import annotations

from enum import Enum

from gridsnake.settings import BASE_GAME_SPEED, GRID_SIZE
from gridsnake.timer import Timer, TimerMode


class GameDifficulty(Enum):
    """How fast the snake moves."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXTREME = "extreme"

    def tick_rate(self) -> float:
        """Seconds between two snake moves."""
        return BASE_GAME_SPEED * _TICK_FACTORS[self]


_TICK_FACTORS = {
    GameDifficulty.EASY: 1.25,
    GameDifficulty.MEDIUM: 1.0,
    GameDifficulty.HARD: 0.5,
    GameDifficulty.EXTREME: 0.25,
}


class GameState(Enum):
    """Which screen the game is showing."""

    START_MENU = "start_menu"
    IN_GAME = "in_game"
    FINISH_MENU = "finish_menu"


class InGameSet(Enum):
    """Phases of one in-game update, in the order they run."""

    DESPAWN_ENTITIES = 1
    USER_INPUT = 2
    SPAWN_ENTITIES = 3
    ENTITY_UPDATES = 4
    GLOBAL_POSITION_UPDATES = 5
    COLLISION_DETECTION = 6


class GameConfiguration:
    """The chosen difficulty, the movement tick timer and every field cell."""

    def __init__(self, difficulty: GameDifficulty = GameDifficulty.MEDIUM) -> None:
        self.current_difficulty = difficulty
        self.tick_timer = Timer(difficulty.tick_rate(), TimerMode.REPEATING)
        self.field: tuple[tuple[int, int], ...] = tuple(
            (x, y) for y in range(GRID_SIZE) for x in range(GRID_SIZE)
        )

    def set_difficulty_and_reset_timer(self, difficulty: GameDifficulty) -> None:
        self.current_difficulty = difficulty
        self.set_game_speed(difficulty.tick_rate())

    def set_game_speed(self, game_speed: float) -> None:
        """Restart the tick timer with ``game_speed`` seconds per move."""
        self.tick_timer.pause()
        self.tick_timer.reset()
        self.tick_timer.set_duration(game_speed)
        self.tick_timer.unpause()

    def advance(self, delta: float) -> bool:
        """Advance the tick timer; return whether a move is due."""
        return self.tick_timer.tick(delta).just_finished()