"""Sprites, animation frames and drawing onto the screen buffer."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Sequence, Union

from pixelgames.invaders.geo import Point
from pixelgames.raster import bresenham

if TYPE_CHECKING:
    from pixelgames.invaders.loader import Assets

#: Screen width in pixels.
WIDTH = 224
#: Screen height in pixels.
HEIGHT = 256
#: Fixed updates per second.
FPS = 240
#: Length of one fixed update, in nanoseconds.
TIME_STEP = 1_000_000_000 // FPS

_NANOS_PER_SEC = 1_000_000_000

#: (width, height, RGBA pixels) as stored in the asset cache.
CachedSprite = tuple[int, int, bytes]

Color = Union[bytes, Sequence[int]]


class Frame(enum.Enum):
    """Identifier of one animation frame."""

    BLIPJOY1 = enum.auto()
    BLIPJOY2 = enum.auto()
    FERRIS1 = enum.auto()
    FERRIS2 = enum.auto()
    CTHULHU1 = enum.auto()
    CTHULHU2 = enum.auto()
    PLAYER1 = enum.auto()
    PLAYER2 = enum.auto()
    SHIELD1 = enum.auto()
    BULLET1 = enum.auto()
    BULLET2 = enum.auto()
    BULLET3 = enum.auto()
    BULLET4 = enum.auto()
    BULLET5 = enum.auto()
    LASER1 = enum.auto()
    LASER2 = enum.auto()
    LASER3 = enum.auto()
    LASER4 = enum.auto()
    LASER5 = enum.auto()
    LASER6 = enum.auto()
    LASER7 = enum.auto()
    LASER8 = enum.auto()


_CYCLES = (
    (Frame.BLIPJOY1, Frame.BLIPJOY2),
    (Frame.FERRIS1, Frame.FERRIS2),
    (Frame.CTHULHU1, Frame.CTHULHU2),
    (Frame.PLAYER1, Frame.PLAYER2),
    (Frame.BULLET1, Frame.BULLET2, Frame.BULLET3, Frame.BULLET4, Frame.BULLET5),
    (
        Frame.LASER1,
        Frame.LASER2,
        Frame.LASER3,
        Frame.LASER4,
        Frame.LASER5,
        Frame.LASER6,
        Frame.LASER7,
        Frame.LASER8,
    ),
)

_NEXT_FRAME = {
    frame: cycle[(i + 1) % len(cycle)]
    for cycle in _CYCLES
    for i, frame in enumerate(cycle)
}


class Drawable(Protocol):
    """Anything with a size and RGBA pixel data."""

    width: int
    height: int
    pixels: bytes | bytearray


@dataclass
class Sprite:
    """A sprite that owns its pixel data and cannot be animated."""

    width: int
    height: int
    pixels: bytearray

    @classmethod
    def from_assets(cls, assets: Assets, frame: Frame) -> Sprite:
        """Create a sprite holding its own copy of a cached frame."""
        width, height, pixels = assets.sprites[frame]
        return cls(width, height, bytearray(pixels))


@dataclass
class SpriteRef:
    """An animated sprite sharing its pixel data with the asset cache.

    ``duration`` and ``dt`` are in nanoseconds.
    """

    width: int
    height: int
    pixels: bytes
    frame: Frame
    duration: int
    dt: int = 0

    @classmethod
    def from_assets(cls, assets: Assets, frame: Frame, duration: int) -> SpriteRef:
        """Create a sprite showing ``frame``, changing every ``duration`` ns."""
        width, height, pixels = assets.sprites[frame]
        return cls(width, height, pixels, frame, duration)

    def step_frame(self, assets: Assets) -> None:
        """Switch to the next frame of the animation cycle."""
        try:
            frame = _NEXT_FRAME[self.frame]
        except KeyError:
            raise ValueError(f"{self.frame.name} has no animation") from None
        self.pixels = assets.sprites[frame][2]
        self.frame = frame

    def animate(self, assets: Assets) -> None:
        """Advance the animation by one time step."""
        if self.duration % _NANOS_PER_SEC == 0:
            self.step_frame(assets)
            return
        self.dt += TIME_STEP
        while self.dt >= self.duration:
            self.dt -= self.duration
            self.step_frame(assets)


def blit(screen: bytearray, dest: Point, sprite: Drawable) -> None:
    """Copy the non-zero bytes of ``sprite`` onto ``screen`` at ``dest``."""
    if dest.x + sprite.width > WIDTH or dest.y + sprite.height > HEIGHT:
        raise ValueError("sprite does not fit on the screen")
    row_bytes = sprite.width * 4
    pixels = sprite.pixels
    if len(pixels) < row_bytes * sprite.height:
        raise ValueError("sprite pixel data is too short")

    for row in range(sprite.height):
        start = (dest.x + (dest.y + row) * WIDTH) * 4
        source = pixels[row * row_bytes : (row + 1) * row_bytes]
        target = screen[start : start + row_bytes]
        screen[start : start + row_bytes] = bytes(
            new if new else old for old, new in zip(target, source)
        )


def _clamp(value: int, limit: int) -> int:
    return limit - 1 if value < 0 else min(value, limit - 1)


def line(screen: bytearray, p1: Point, p2: Point, color: Color) -> None:
    """Draw a line between two points, clamped to the screen."""
    rgba = bytes(color)
    for x, y in bresenham((p1.x, p1.y), (p2.x, p2.y)):
        i = (_clamp(x, WIDTH) + _clamp(y, HEIGHT) * WIDTH) * 4
        screen[i : i + 4] = rgba


def rect(screen: bytearray, p1: Point, p2: Point, color: Color) -> None:
    """Draw the outline of the rectangle from ``p1`` to ``p2`` (exclusive)."""
    if p2.x == 0 or p2.y == 0:
        raise ValueError("rectangle corner must be positive")
    p2 = Point(p2.x - 1, p2.y - 1)
    p3 = Point(p1.x, p2.y)
    p4 = Point(p2.x, p1.y)

    line(screen, p1, p3, color)
    line(screen, p3, p2, color)
    line(screen, p2, p4, color)
    line(screen, p4, p1, color)