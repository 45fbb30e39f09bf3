# gridsnake

A small snake arcade game played on a 13 × 13 grid. The walls wrap around,
so leaving one edge brings the snake back in on the opposite side. Eat food
to grow and to raise your score. Run into your own tail and the game ends.

## Installing

```
pip install .
```

## Playing

```
gridsnake
```

This opens a window with a start menu of four difficulty buttons: **Easy**,
**Medium**, **Hard** and **Extreme**. Click one to start. Harder levels make
the snake move faster. On Medium the snake moves every 0.25 s. Easy is 1.25
times that, Hard is half of it and Extreme is a quarter of it. Close the
window to quit.

The sounds and the window icon are read from an assets directory. By default
this is `./assets`. Use `--assets` to choose another:

```
gridsnake --assets path/to/assets
```

The game looks for these files in that directory:

- `food_eat_recording_voice.ogg`
- `snake_movement_recording_voice.ogg`, played at 30 % volume
- `windows/icon.png`

Any file that is missing or cannot be loaded is skipped. The game then runs
without that sound or without the icon.

### Controls

| Action | Keyboard         | Gamepad         |
|--------|------------------|-----------------|
| Up     | `Up` or `W`      | D-pad up        |
| Down   | `Down` or `S`    | D-pad down      |
| Left   | `Left` or `A`    | D-pad left      |
| Right  | `Right` or `D`   | D-pad right     |
| Pause  | `Escape`         | Select (button 6) |

Turns are queued. You can press several directions between two moves and
they are applied one per move. Pressing the same direction twice in a row
queues it only once. A turn straight back onto the snake's own body is
refused, and the rest of the queued turns are dropped with it.

While the game is paused, direction presses are ignored and the animations
stop. A "Paused" label is shown.

### Food and power-ups

Each piece of food has a colour that shows its effect:

- **Red**: normal food. The snake grows by one segment.
- **Blue**: slowdown. The snake grows by one segment. Each move then takes
  twice as long for 20 of those slower moves. After that the game returns
  to the speed of the chosen difficulty.
- **Yellow**: shorten. Up to three tail segments are removed, and the snake
  does not grow.
- **Green**: feast. The snake grows by one segment, and four new pieces of
  food appear on free cells.

New food has a random kind: 80 % red, 10 % yellow, 5 % green and 5 % blue.
The first piece in each game is always red. When the last piece on the field
is eaten, a new one is placed.

Every eaten piece, of any colour, adds one point to your score. The score is
shown in the top-left corner. When the game ends, your final score is shown
with a **Main menu** button. That button clears the score and returns to the
start menu.

## Using the game logic from code

The rules of the game run without opening a window:

```python
from gridsnake.configuration import GameDifficulty
from gridsnake.direction import Direction, MoveAction
from gridsnake.game import Game

game = Game()
game.start(GameDifficulty.EASY)
result = game.update(0.5, [MoveAction(Direction.LEFT)])
print(result.moved, result.eaten, game.score, game.state)
```

The other modules hold the parts of the game:

- `gridsnake.game.Game`: a whole session. It has `start`, `update`,
  `toggle_pause` and `return_to_menu`. `update` returns an `UpdateResult`
  that tells whether the snake moved and which foods were eaten.
- `gridsnake.snake.Snake` and `gridsnake.snake.Cell`: the snake's movement,
  with wrap-around, turn queueing, growing, shortening and self-collision.
- `gridsnake.food`: food placement. This is `free_cells` and
  `random_foods`, with `find_eaten` to detect eating.
- `gridsnake.powerup.Powerup`: the food kinds and their colours, chances and
  strengths.
- `gridsnake.configuration`: `GameDifficulty`, `GameState` and
  `GameConfiguration`, which holds the move timer.
- `gridsnake.timer.Timer`: the tick-driven timer.
- `gridsnake.controls.actions_from_input`: turns key names and
  `GamepadButton`s into `MoveAction` and `PauseAction` values.
- `gridsnake.effects`: the food's breathing pulse (`breathe_scale`) and the
  `ParticleBurst` shown when food is eaten.
- `gridsnake.app`: the window, the menu `Button`s and `main`.

## What it does not do

The package ships no sound files and no icon. Without an assets directory
that holds them, the game is silent and the window has no icon. There is no
high-score table and nothing is saved between sessions.

## Running the tests

```
pip install .[test]
pytest
```