"""Game entities: the player, shields, invaders and projectiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from pixelgames.invaders.controls import Direction
from pixelgames.invaders.geo import Point
from pixelgames.invaders.sprites import TIME_STEP, Frame, Sprite, SpriteRef

if TYPE_CHECKING:
    from pixelgames.invaders.loader import Assets

#: Length of one internal game frame (60 per second), in nanoseconds.
ONE_FRAME = 1_000_000_000 // 60

#: Top-left corner of the invader fleet at the start of a game.
START = Point(24, 64)
#: Size of one cell of the invader grid.
GRID = Point(16, 16)
#: Number of invader rows.
ROWS = 5
#: Number of invader columns.
COLS = 11

#: Where the player starts.
PLAYER_START = Point(80, 216)

#: Offset of a fired laser from the invader firing it.
LASER_OFFSET = Point(4, 10)
#: Offset of a fired bullet from the player.
BULLET_OFFSET = Point(7, 0)

_PLAYER_ANIMATION = 100_000_000

_BLIPJOY_OFFSET = Point(3, 4)
_FERRIS_OFFSET = Point(2, 5)
_CTHULHU_OFFSET = Point(1, 3)

_ROW_KINDS = (
    (Frame.BLIPJOY1, _BLIPJOY_OFFSET),
    (Frame.FERRIS1, _FERRIS_OFFSET),
    (Frame.FERRIS1, _FERRIS_OFFSET),
    (Frame.CTHULHU1, _CTHULHU_OFFSET),
    (Frame.CTHULHU1, _CTHULHU_OFFSET),
)


def update_dt(dt: int, step: int) -> tuple[int, int]:
    """Advance ``dt`` by one time step and split off whole ``step`` periods.

    Returns ``(frames, remaining_dt)``; all times are in nanoseconds.
    """
    dt += TIME_STEP
    frames = dt // step
    return frames, dt - frames * step


@dataclass
class Player:
    """The player's cannon."""

    sprite: SpriteRef
    pos: Point = PLAYER_START
    dt: int = 0

    @classmethod
    def from_assets(cls, assets: Assets) -> Player:
        """Create the player at its starting position."""
        return cls(SpriteRef.from_assets(assets, Frame.PLAYER1, _PLAYER_ANIMATION))

    def advance(self) -> int:
        """Advance the timer one step; return the number of whole game frames elapsed."""
        frames, self.dt = update_dt(self.dt, ONE_FRAME)
        return frames


@dataclass
class Shield:
    """A shield; it owns its pixels so it can be deformed."""

    sprite: Sprite
    pos: Point

    @classmethod
    def from_assets(cls, assets: Assets, pos: Point) -> Shield:
        """Create a shield at ``pos``."""
        return cls(Sprite.from_assets(assets, Frame.SHIELD1), pos)


@dataclass
class Invader:
    """One member of the invader fleet."""

    sprite: SpriteRef
    pos: Point
    score: int = 10


@dataclass
class Laser:
    """A laser fired by an invader."""

    sprite: SpriteRef
    pos: Point
    dt: int = 0

    def advance(self) -> int:
        """Advance the timer one step; return the number of whole game frames elapsed."""
        frames, self.dt = update_dt(self.dt, ONE_FRAME)
        return frames


@dataclass
class Bullet:
    """A bullet fired by the player."""

    sprite: SpriteRef
    pos: Point
    dt: int = 0

    def advance(self) -> int:
        """Advance the timer one step; return the number of whole time steps elapsed."""
        frames, self.dt = update_dt(self.dt, TIME_STEP)
        return frames


@dataclass
class Bounds:
    """Boundary around the live invaders, in pixels and grid cells."""

    pos: Point = START
    left_col: int = 0
    right_col: int = COLS - 1
    top_row: int = 0
    bottom_row: int = ROWS - 1


def make_invader_grid(assets: Assets) -> list[list[Optional[Invader]]]:
    """Create the full starting grid of invaders."""
    return [
        [
            Invader(
                SpriteRef.from_assets(assets, frame, 0),
                START + offset + Point(x, y) * GRID,
            )
            for x in range(COLS)
        ]
        for y, (frame, offset) in enumerate(_ROW_KINDS)
    ]


@dataclass
class Invaders:
    """The invader fleet."""

    grid: list[list[Optional[Invader]]]
    stepper: Point = Point(COLS - 1, 0)
    direction: Direction = Direction.RIGHT
    descend: bool = False
    bounds: Bounds = field(default_factory=Bounds)

    @classmethod
    def from_assets(cls, assets: Assets) -> Invaders:
        """Create a full fleet in its starting formation."""
        return cls(make_invader_grid(assets))

    def _any_alive(self) -> bool:
        return any(invader is not None for row in self.grid for invader in row)

    def get_bounds(self) -> tuple[int, int, int, int]:
        """Return the fleet's bounding box as ``(top, right, bottom, left)``."""
        width = (self.bounds.right_col - self.bounds.left_col + 1) * GRID.x
        height = (self.bounds.bottom_row - self.bounds.top_row + 1) * GRID.y
        top = self.bounds.pos.y
        left = self.bounds.pos.x
        return (top, left + width, top + height, left)

    def shrink_bounds(self) -> bool:
        """Fit the bounds to the live invaders; return True when none are left."""
        alive = [
            (x, y)
            for y, row in enumerate(self.grid)
            for x, invader in enumerate(row)
            if invader is not None
        ]
        if not alive:
            return True

        left = min(x for x, _ in alive)
        right = max(x for x, _ in alive)
        top = min(y for _, y in alive)
        bottom = max(y for _, y in alive)

        self.bounds.pos = Point(
            self.bounds.pos.x + (left - self.bounds.left_col) * GRID.x,
            self.bounds.pos.y + (top - self.bounds.top_row) * GRID.y,
        )
        self.bounds.left_col = left
        self.bounds.right_col = right
        self.bounds.top_row = top
        self.bounds.bottom_row = bottom
        return False

    def get_closest_invader(self, col: int) -> Invader:
        """Return the lowest live invader in ``col``, searching rightwards and wrapping."""
        if not self._any_alive():
            raise ValueError("no invaders left")
        row = ROWS - 1
        while True:
            invader = self.grid[row][col]
            if invader is not None:
                return invader
            if row == 0:
                row = ROWS - 1
                col = (col + 1) % COLS
            else:
                row -= 1

    def next_invader(self) -> tuple[Invader, bool]:
        """Move the stepper to the next live invader.

        Returns the invader and whether it leads the fleet (starts a new cycle).
        """
        if not self._any_alive():
            raise ValueError("no invaders left")
        is_leader = False
        x, y = self.stepper.x, self.stepper.y
        while True:
            x += 1
            if x >= COLS:
                x = 0
                if y == 0:
                    y = ROWS - 1
                    is_leader = True
                else:
                    y -= 1
            invader = self.grid[y][x]
            if invader is not None:
                self.stepper = Point(x, y)
                return invader, is_leader