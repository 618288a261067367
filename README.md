# pixelplay

A set of small pygame programs. Each one shows a single idea: opening a
window, drawing an image, animating a sprite sheet, moving a character with
the keyboard, rendering text, playing music, drawing primitive shapes, a
tiny physics simulation, a two-player Tron game and the classic bouncing
DVD logo.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demos

Each demo is a command. Close its window to exit.

| Command                | What it shows                                                  |
|------------------------|----------------------------------------------------------------|
| `pixelplay-window`     | A 200×200 window with a green circle                           |
| `pixelplay-image`      | The image `assets/images/pikachu.png`                          |
| `pixelplay-sprite`     | A four-frame animation cut from the same sheet                 |
| `pixelplay-keyboard`   | A red square moved with the arrow keys                         |
| `pixelplay-pikachu`    | A red square carrying the animated sprite, moved with arrows   |
| `pixelplay-text`       | Two lines of text in fonts from `assets/fonts/`                |
| `pixelplay-audio`      | Plays `assets/music/musica.ogg`; the window closes when it ends|
| `pixelplay-primitives` | A red circle, a green rectangle and a blue triangle            |
| `pixelplay-physics`    | A ball falling onto the ground, pushed with the arrow keys     |
| `pixelplay-tron`       | Two-player Tron                                                |
| `pixelplay-dvd`        | A DVD logo bouncing off the window edges                       |

The image, sprite, text, music and DVD demos load their files from an
`assets/` directory relative to where you run them:

- `assets/images/pikachu.png`
- `assets/images/Dvd.png`
- `assets/fonts/Minecraft.ttf` and `assets/fonts/Ring.ttf`
- `assets/music/musica.ogg`

If a file is missing, the demo prints an error and exits with status 1.
`pixelplay-pikachu` is the exception: without the image it still runs and
shows just the red square.

The physics demo prints the ball's position to the terminal on every frame.

## Tron

Red steers with W, A, S, D; blue steers with the arrow keys. A cycle cannot
turn straight back on itself. Each cycle leaves a trail, and running into
any trail, including your own, gives a point to the other player and ends
the round. Trails wrap around the edges of the board. When a round is over,
press R to start the next one. The scores are kept between rounds and
printed in the terminal.

## Using the pieces

The game logic is plain Python and can be driven without opening a window:

```python
from pixelplay.tron import TronGame, Direction

game = TronGame()
game.steer(Direction.RIGHT, Direction.LEFT)
game.tick(0.05)          # True: the players moved one square
print(game.red.head, game.blue.head, game.game_over)
```

Other parts work the same way — create them, step them and read their state:

- `pixelplay.dvd.Bouncer` — `step()` moves one frame and returns the new
  position, reversing direction at the bounds.
- `pixelplay.animation.FrameAnimator` — `update(elapsed)` advances the
  clock and `rect()` gives the sheet region to show; `frame_rect(frame)`
  gives the region of any frame.
- `pixelplay.physics.World` with `Ground` and `Ball` — `step(dt)` moves the
  balls under gravity and stops them on the ground; `Ball.apply_impulse`
  pushes a ball, and `impulse_from_keys` turns arrow-key state into an
  impulse.
- `pixelplay.character.Character` and `keyboard_offset` — a movable square
  with an optional animated sprite.
- `pixelplay.demos.text_items()` and `primitive_shapes()` — the text lines
  and shapes the demos draw.
- `pixelplay.window.GameWindow` — a titled window that can be cleared,
  drawn on and shown; usable as a context manager.

## What it does not do

The package ships no images, fonts or music; the demos that need them must
be run from a directory holding your own `assets/` files. The physics is a
simple hand-written integrator for balls against one ground box, not a
general rigid-body engine: balls do not collide with each other or rotate.