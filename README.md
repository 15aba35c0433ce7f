# pixelgames

Small games and simulations that draw into a plain RGBA frame buffer
(a `bytearray` with four bytes per pixel). Each game keeps its own state,
advances it when you call `update`, and writes pixels into the buffer you
pass to `draw`. What you do with the buffer (show it, save it, inspect it
in a test) is up to you.

The package has no dependencies beyond the Python standard library and
supports Python 3.10 and later.

## Contents

| Module | What it holds |
| --- | --- |
| `pixelgames.life` | `Cell` and `ConwayGrid`: Conway's Game of Life on a wrapping grid with a fading heat trail |
| `pixelgames.bounce` | `World` and `ResizableWorld`: a 64×64 box bouncing around the screen |
| `pixelgames.invaders.world` | `World` and `clear`: the Space Invaders game state |
| `pixelgames.invaders.entities` | `Player`, `Shield`, `Invader`, `Laser`, `Bullet`, `Bounds`, `Invaders`, `make_invader_grid`, `update_dt` |
| `pixelgames.invaders.collision` | `Collision`, `BulletDetail`, `LaserDetail` |
| `pixelgames.invaders.debug` | bounding-box overlays: `draw_invaders`, `draw_bullet`, `draw_lasers`, `draw_player`, `draw_shields` |
| `pixelgames.invaders.sprites` | `Frame`, `Sprite`, `SpriteRef`, `blit`, `line`, `rect`, and the constants `WIDTH`, `HEIGHT`, `FPS`, `TIME_STEP` |
| `pixelgames.invaders.loader` | `load_pcx`, `load_assets`, `Assets`, `PcxError` |
| `pixelgames.invaders.geo` | `Point` and `Rect` |
| `pixelgames.invaders.controls` | `Controls` and `Direction` |
| `pixelgames.rng` | `Pcg32`, `f32_half_open_right`, `generate_seed` |
| `pixelgames.raster` | `bresenham` |

## Game of Life

```python
from pixelgames.life import ConwayGrid

width, height = 400, 300
life = ConwayGrid.new_random(width, height)   # optional third argument: a (seed, inc) pair
screen = bytearray(4 * width * height)

life.toggle(10, 10)                 # flip one cell; returns its new state
life.set_line(0, 0, 50, 20, True)   # make a line of cells alive
life.update()                       # advance one generation
life.draw(screen)
```

- The grid wraps around at every edge.
- `randomize(seed=None)` fills roughly 70 % of the cells, runs three
  generations so the noise settles, then cools the heat of dead cells.
  Without a seed it takes one from `generate_seed()`; with the same seed
  the result is always the same.
- Live cells are drawn as `(0, 255, 255, 255)`. Dead cells are drawn as
  `(0, 0, heat, 255)`: a cell's heat is 255 while alive and drops by one
  each generation after it dies.
- `toggle` returns `False` for a position outside the grid. `set_line`
  clamps its start point and stops at the first point outside the grid.
- `draw` raises `ValueError` when the buffer is not exactly
  `4 * width * height` bytes; a zero or negative size raises `ValueError`
  when the grid is created.

## Bouncing box

```python
from pixelgames.bounce import World, ResizableWorld

world = World()                     # fixed 320×240 screen
frame = bytearray(4 * 320 * 240)
world.update()
world.draw(frame)

resizable = ResizableWorld(640, 480)
resizable.resize(800, 600)
```

`World` reverses the box's direction when it touches an edge.
`ResizableWorld` steers it back inside its current size, so it recovers
after the screen shrinks; its `draw` lays out rows with the current width.
Positions and sizes are kept in the signed 16-bit range.

## Invaders

### Sprites

The game draws with sprites read from PCX images; the package itself
contains no image files. `load_assets(directory)` reads these files from
the directory you give it:

```
blipjoy1.pcx  blipjoy2.pcx  ferris1.pcx  ferris2.pcx  cthulhu1.pcx  cthulhu2.pcx
player1.pcx   player2.pcx   shield.pcx
bullet1.pcx … bullet5.pcx   laser1.pcx … laser8.pcx
```

`load_pcx(data)` decodes one image into `(width, height, pixels)`.
Truecolour (3 planes, 8 bits) images give four RGBA bytes per pixel;
paletted images give the three RGB bytes of each pixel's palette entry.
Since `blit` reads four bytes per pixel, the sprites should be truecolour.
Malformed or unsupported files raise `PcxError` (a `ValueError`).

### Playing

```python
from pixelgames.invaders.controls import Controls, Direction
from pixelgames.invaders.loader import load_assets
from pixelgames.invaders.sprites import HEIGHT, WIDTH
from pixelgames.invaders.world import World
from pixelgames.rng import generate_seed

assets = load_assets("path/to/sprites")
world = World(assets, generate_seed(), debug=False)
screen = bytearray(4 * WIDTH * HEIGHT)        # 224 × 256

controls = Controls(direction=Direction.LEFT, fire=True)
world.update(controls)                         # call once per 1/240 s
world.draw(screen)
```

- `update` advances the game by one fixed step of `TIME_STEP`
  nanoseconds (240 per second). The fleet moves one invader per
  1/60 s, two pixels sideways, and drops eight pixels when it turns at a
  screen edge.
- Invaders fire lasers at random, at most three at a time. The player's
  cannon fires one bullet at a time.
- A bullet that hits an invader removes it. Bullets and lasers are
  destroyed when they hit a shield, and a laser and a bullet that meet
  destroy each other.
- The game ends (`world.gameover` becomes `True`) when every invader is
  gone, when a laser hits the player, or when the fleet reaches the
  player's row. After that `update` does nothing until `reset_game()`.
- `World(assets)` uses a fixed default seed, so a game is reproducible.
  With `debug=True`, `draw` also outlines the fleet, every sprite and the
  collisions found in the last update.

## Random numbers and lines

`Pcg32(seed, inc)` is a PCG-XSH-RR generator; `next_u32()` returns the
next 32-bit value, and `f32_half_open_right(value)` maps it onto
`[0, 1)`. `generate_seed()` returns two random 64-bit integers from the
operating system. `bresenham(start, end)` yields every grid point on the
line between two points, both ends included.

## What is not included

There is no window, event loop or command: input devices, keyboards and
gamepads are not read, and nothing is shown on screen. You feed
`Controls` and call `update`/`draw` yourself. The invaders game keeps no
score and has no title or game-over screen, and shields are not worn
away when hit.

## Running the tests

Install the `test` extra and run pytest from the project directory.