"""Simple geometry primitives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pixelgames.invaders.sprites import Drawable


@dataclass(frozen=True)
class Point:
    """A small, non-negative position vector."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __mul__(self, other: Point) -> Point:
        return Point(self.x * other.x, self.y * other.y)


@dataclass(frozen=True)
class Rect:
    """A rectangle spanned by two absolute points, ``p2`` exclusive."""

    p1: Point = Point()
    p2: Point = Point()

    @classmethod
    def from_drawable(cls, pos: Point, drawable: Drawable) -> Rect:
        """Create the rectangle covered by ``drawable`` placed at ``pos``."""
        return cls(pos, pos + Point(drawable.width, drawable.height))

    def intersects(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap."""
        top1, right1, bottom1, left1 = self.bounds()
        top2, right2, bottom2, left2 = other.bounds()
        return bottom1 > top2 and bottom2 > top1 and right1 > left2 and right2 > left1

    def bounds(self) -> tuple[int, int, int, int]:
        """Return ``(top, right, bottom, left)``."""
        return (self.p1.y, self.p2.x, self.p2.y, self.p1.x)