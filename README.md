# asteroids

A small Asteroids arcade game. You fly a triangular ship around a window and
shoot at asteroids. Asteroids bounce off the walls and off each other. An
asteroid with a radius of 25 or more splits in two when a bullet hits it; a
smaller one is destroyed. Once every asteroid is gone, the next level starts
with one more asteroid than the last, up to ten. If an asteroid touches your
ship, the game is over.

## Installation

```
pip install .
```

The game draws its window with pygame.

## Playing

```
asteroids
```

The window opens at 800x600 and can be resized; the ship and the asteroids are
moved back inside it when it shrinks. The game runs at up to 60 frames per
second.

On-screen text (the title, the game-over screen and the "Level: N" counter)
needs a TrueType font. By default the game loads `./font/AzeretMono.ttf`,
relative to the directory it is started from. Another font can be given with
`--font`:

```
asteroids --font /path/to/SomeFont.ttf
```

If the font cannot be loaded, or the window cannot be created, the command
prints a message to standard error and exits with status 1. It exits with
status 0 when the player quits.

| Key            | Action                               |
|----------------|--------------------------------------|
| Left / Right   | Turn the ship                        |
| Up             | Speed up (up to 5)                   |
| Down           | Slow down (down to standing still)   |
| Space          | Shoot (at most 30 bullets on screen) |
| P              | Pause                                |
| Enter / Q      | Quit                                 |

In the start menu, the pause screen and the game-over screen, Enter or Q quits
and any other key starts, resumes or restarts the game. While paused, the field
is drawn in grey.

## Using the simulation directly

`asteroids.game.Game` holds the game state and runs without a display:

```python
import random

from asteroids.game import Game, GameState

game = Game(rng=random.Random(1))
game.state = GameState.PLAY
game.shoot()
game.update_frame()
print(game.level, len(game.asteroids), len(game.bullets))
```

- `Game(width=800, height=600, rng=...)` creates a game on the menu screen at
  level 0, with the ship in the centre. Passing a seeded `random.Random` makes
  asteroid placement repeatable.
- `Game.update_frame()` advances one frame: it starts the next level when no
  asteroids are left, moves the ship, bullets and asteroids, and resolves
  hits. When an asteroid touches the ship, `game.state` becomes
  `GameState.GAME_OVER`.
- `Game.shoot()` fires a bullet in the ship's direction and returns `False`
  when 30 bullets are already on screen.
- `Game.resize(width, height)` changes the size of the playing field and moves
  any ship or asteroid that would end up outside it back inside.
- `Game.reset()` clears the field and returns the game to level 0.

The ship is steered through `game.player.direction_state`
(`DirectionState`) and `game.player.acceleration_state`
(`AccelerationState`).

`asteroids.app` holds the window side: `App` handles pygame events
(`App.handle_event`), draws a frame (`App.iterate`) and runs the main loop
(`App.run`). `ship_vertices(player)` gives the corners of the ship's outline
and `circle_points(x0, y0, radius)` the pixels of a circle outline.

## What it does not do

There is no sound, no score other than the level counter, and no extra lives.
No font is shipped with the package; one has to be present at the default path
or given with `--font`.

## Tests

```
pip install .[test]
pytest
```