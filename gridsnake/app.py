"""The game window: menus, drawing, sound and the main loop."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pygame

from gridsnake.configuration import GameDifficulty, GameState
from gridsnake.controls import GamepadButton, actions_from_input
from gridsnake.effects import ParticleBurst, breathe_scale
from gridsnake.game import Game
from gridsnake.powerup import Powerup
from gridsnake.settings import (
    BACKGROUND_COLOR,
    GRID_CELL,
    HEAD_COLOR,
    TAIL_COLOR,
    WINDOW_SIZE,
    Color,
    grid_to_screen,
)

_FPS = 60

BUTTON_WIDTH = 300.0
BUTTON_HEIGHT = 65.0
_BUTTON_BORDER = 5
_BUTTON_BACKGROUND: Color = (0.15, 0.15, 0.15)
_BUTTON_BORDER_COLOR: Color = (0.0, 0.0, 0.0)
_TEXT_COLOR: Color = (0.9, 0.9, 0.9)
_PAUSE_TEXT_COLOR: Color = (0.1, 0.1, 0.1)

_BUTTON_FONT_SIZE = 40
_SCORE_FONT_SIZE = 35
_FINISH_FONT_SIZE = 80
_PAUSE_FONT_SIZE = 40

_START_MARGIN = 0.02 * WINDOW_SIZE
_FINISH_MARGIN = 0.10 * WINDOW_SIZE
_FINISH_COLUMN_HEIGHT = _FINISH_FONT_SIZE + 2 * _FINISH_MARGIN + BUTTON_HEIGHT
_FINISH_COLUMN_TOP = (WINDOW_SIZE - _FINISH_COLUMN_HEIGHT) / 2
_FINISH_TEXT_CENTER = (WINDOW_SIZE / 2, _FINISH_COLUMN_TOP + _FINISH_FONT_SIZE / 2)
_SCORE_CENTER = (0.04 * WINDOW_SIZE, 0.04 * WINDOW_SIZE)

_EAT_SOUND = "food_eat_recording_voice.ogg"
_MOVE_SOUND = "snake_movement_recording_voice.ogg"
_MOVE_VOLUME = 0.3
_ICON = Path("windows") / "icon.png"

# Back/Select on common controller layouts.
_SELECT_BUTTON = 6


@dataclass(frozen=True)
class Button:
    """A clickable rectangle in window pixels, optionally tied to a difficulty."""

    label: str
    x: float
    y: float
    width: float
    height: float
    difficulty: Optional[GameDifficulty] = None

    def contains(self, point: tuple[float, float]) -> bool:
        """True if ``point`` lies inside the button; right and bottom edges excluded."""
        px, py = point
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    def rect(self) -> pygame.Rect:
        return pygame.Rect(round(self.x), round(self.y), round(self.width), round(self.height))


def start_menu_buttons() -> list[Button]:
    """The difficulty buttons of the start menu, left to right, centred in a row."""
    choices = (
        ("Easy", GameDifficulty.EASY),
        ("Medium", GameDifficulty.MEDIUM),
        ("Hard", GameDifficulty.HARD),
        ("Extreme", GameDifficulty.EXTREME),
    )
    count = len(choices)
    width = min(BUTTON_WIDTH, (WINDOW_SIZE - 2 * _START_MARGIN * count) / count)
    slot = width + 2 * _START_MARGIN
    left = (WINDOW_SIZE - slot * count) / 2
    y = (WINDOW_SIZE - BUTTON_HEIGHT) / 2
    return [
        Button(label, left + _START_MARGIN + index * slot, y, width, BUTTON_HEIGHT, difficulty)
        for index, (label, difficulty) in enumerate(choices)
    ]


def finish_menu_button() -> Button:
    """The button on the finish menu that leads back to the start menu."""
    x = (WINDOW_SIZE - BUTTON_WIDTH) / 2
    y = _FINISH_COLUMN_TOP + _FINISH_FONT_SIZE + _FINISH_MARGIN
    return Button("Main menu", x, y, BUTTON_WIDTH, BUTTON_HEIGHT)


def world_to_pixels(x: float, y: float) -> tuple[float, float]:
    """Map a world position (origin at the centre, y up) to window pixels."""
    half = WINDOW_SIZE / 2
    return (x + half, half - y)


def _rgb(color: Color) -> tuple[int, int, int]:
    r, g, b = color
    return (round(r * 255), round(g * 255), round(b * 255))


class _Sounds:
    """The eat and movement sounds, each absent when it cannot be loaded."""

    def __init__(self, assets: Path) -> None:
        self.eat: Optional[pygame.mixer.Sound] = None
        self.move: Optional[pygame.mixer.Sound] = None
        try:
            pygame.mixer.init()
        except pygame.error:
            return
        self.eat = self._load(assets / _EAT_SOUND)
        self.move = self._load(assets / _MOVE_SOUND)
        if self.move is not None:
            self.move.set_volume(_MOVE_VOLUME)

    @staticmethod
    def _load(path: Path) -> Optional[pygame.mixer.Sound]:
        if not path.is_file():
            return None
        try:
            return pygame.mixer.Sound(str(path))
        except pygame.error:
            return None

    @staticmethod
    def play(sound: Optional[pygame.mixer.Sound]) -> None:
        if sound is not None:
            sound.play()


def _hat_buttons(value: tuple[int, int]) -> list[GamepadButton]:
    x, y = value
    buttons = []
    if y > 0:
        buttons.append(GamepadButton.DPAD_UP)
    if y < 0:
        buttons.append(GamepadButton.DPAD_DOWN)
    if x < 0:
        buttons.append(GamepadButton.DPAD_LEFT)
    if x > 0:
        buttons.append(GamepadButton.DPAD_RIGHT)
    return buttons


def _draw_text(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    color: Color,
    center: tuple[float, float],
) -> None:
    surface = font.render(text, True, _rgb(color))
    screen.blit(surface, surface.get_rect(center=(round(center[0]), round(center[1]))))


def _draw_button(screen: pygame.Surface, font: pygame.font.Font, button: Button) -> None:
    rect = button.rect()
    pygame.draw.rect(screen, _rgb(_BUTTON_BACKGROUND), rect)
    pygame.draw.rect(screen, _rgb(_BUTTON_BORDER_COLOR), rect, _BUTTON_BORDER)
    _draw_text(screen, font, button.label, _TEXT_COLOR, rect.center)


def _draw_square(
    screen: pygame.Surface, center: tuple[float, float], size: float, color: Color
) -> None:
    px, py = world_to_pixels(*center)
    rect = pygame.Rect(0, 0, max(1, round(size)), max(1, round(size)))
    rect.center = (round(px), round(py))
    pygame.draw.rect(screen, _rgb(color), rect)


def _draw_field(screen: pygame.Surface, game: Game, anim_time: float) -> None:
    if game.snake is not None:
        for cell in game.snake.tail():
            _draw_square(screen, grid_to_screen(cell.x, cell.y), GRID_CELL, TAIL_COLOR)
        head = game.snake.head()
        _draw_square(screen, grid_to_screen(head.x, head.y), GRID_CELL, HEAD_COLOR)
    size = breathe_scale(anim_time)
    for food in game.foods:
        _draw_square(screen, grid_to_screen(food.cell.x, food.cell.y), size, food.color)


def _draw_bursts(screen: pygame.Surface, bursts: Iterable[ParticleBurst]) -> None:
    for burst in bursts:
        for particle in burst.particles:
            _draw_square(screen, (particle.x, particle.y), burst.scale, burst.color)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Play snake on a grid.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("assets"),
        help="directory holding the sounds and the window icon",
    )
    return parser.parse_args(argv)


def _run(assets: Path) -> int:
    size = round(WINDOW_SIZE)
    screen = pygame.display.set_mode((size, size), vsync=1)
    pygame.display.set_caption("Snake")
    icon_path = assets / _ICON
    if icon_path.is_file():
        try:
            pygame.display.set_icon(pygame.image.load(str(icon_path)))
        except pygame.error:
            pass

    sounds = _Sounds(assets)
    fonts = {
        font_size: pygame.font.Font(None, font_size)
        for font_size in {_BUTTON_FONT_SIZE, _SCORE_FONT_SIZE, _FINISH_FONT_SIZE, _PAUSE_FONT_SIZE}
    }
    start_buttons = start_menu_buttons()
    back_button = finish_menu_button()

    pygame.joystick.init()
    joysticks: dict[int, pygame.joystick.JoystickType] = {}

    game = Game()
    bursts: list[ParticleBurst] = []
    anim_time = 0.0
    clock = pygame.time.Clock()

    while True:
        delta = clock.tick(_FPS) / 1000.0
        keys: list[str] = []
        buttons: list[GamepadButton] = []
        click: Optional[tuple[int, int]] = None

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN:
                keys.append(pygame.key.name(event.key))
            elif event.type == pygame.JOYDEVICEADDED:
                joystick = pygame.joystick.Joystick(event.device_index)
                joysticks[joystick.get_instance_id()] = joystick
            elif event.type == pygame.JOYDEVICEREMOVED:
                joysticks.pop(event.instance_id, None)
            elif event.type == pygame.JOYHATMOTION:
                buttons.extend(_hat_buttons(event.value))
            elif event.type == pygame.JOYBUTTONDOWN and event.button == _SELECT_BUTTON:
                buttons.append(GamepadButton.SELECT)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                click = event.pos

        if game.state is GameState.START_MENU:
            if click is not None:
                chosen = next((b for b in start_buttons if b.contains(click)), None)
                if chosen is not None and chosen.difficulty is not None:
                    game.start(chosen.difficulty)
                    anim_time = 0.0
        elif game.state is GameState.IN_GAME:
            actions = actions_from_input(keys, buttons, game.paused)
            result = game.update(delta, actions)
            if result.moved:
                sounds.play(sounds.move)
            for eaten in result.eaten:
                bursts.append(ParticleBurst.from_eat(eaten, game.rng))
            for eaten in result.eaten:
                if eaten.powerup is Powerup.SHORTEN:
                    break
                sounds.play(sounds.eat)
        elif game.state is GameState.FINISH_MENU:
            if click is not None and back_button.contains(click):
                game.return_to_menu()

        if not game.paused:
            anim_time += delta
            for burst in bursts:
                burst.update(delta)
            bursts = [burst for burst in bursts if burst.alive()]

        screen.fill(_rgb(BACKGROUND_COLOR))
        if game.state is GameState.START_MENU:
            for button in start_buttons:
                _draw_button(screen, fonts[_BUTTON_FONT_SIZE], button)
        elif game.state is GameState.IN_GAME:
            _draw_field(screen, game, anim_time)
            _draw_text(screen, fonts[_SCORE_FONT_SIZE], str(game.score), _TEXT_COLOR, _SCORE_CENTER)
            if game.paused:
                center = (WINDOW_SIZE / 2, WINDOW_SIZE / 2)
                _draw_text(screen, fonts[_PAUSE_FONT_SIZE], "Paused", _PAUSE_TEXT_COLOR, center)
        else:
            _draw_text(
                screen,
                fonts[_FINISH_FONT_SIZE],
                f"Your score: {game.score}",
                _TEXT_COLOR,
                _FINISH_TEXT_CENTER,
            )
            _draw_button(screen, fonts[_BUTTON_FONT_SIZE], back_button)
        _draw_bursts(screen, bursts)
        pygame.display.flip()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        return _run(args.assets)
    finally:
        pygame.quit()