"""A square that bounces around a pixel buffer."""

from __future__ import annotations

BOX_SIZE = 64
BOX_COLOR = bytes((0x5E, 0x48, 0xE8, 0xFF))
BACKGROUND_COLOR = bytes((0x48, 0xB2, 0xE8, 0xFF))


def _i16(value: int) -> int:
    """Wrap an integer to the signed 16-bit range."""
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _render(
    frame: bytearray | memoryview, width: int, box_x: int, box_y: int
) -> None:
    """Fill ``frame`` (RGBA, ``width`` pixels per row) with the box over the background."""
    count = len(frame) // 4
    rows = -(-count // width)
    inside_x = range(box_x, box_x + BOX_SIZE)
    inside_y = range(box_y, box_y + BOX_SIZE)
    box_row = b"".join(
        BOX_COLOR if x in inside_x else BACKGROUND_COLOR for x in range(width)
    )
    plain_row = BACKGROUND_COLOR * width
    out = b"".join(box_row if y in inside_y else plain_row for y in range(rows))
    frame[: count * 4] = out[: count * 4]


class World:
    """A box bouncing inside a fixed-size screen."""

    width = 320
    height = 240

    def __init__(self) -> None:
        self.box_x = 24
        self.box_y = 16
        self.velocity_x = 1
        self.velocity_y = 1

    def update(self) -> None:
        """Move the box one step, reversing at the screen edges."""
        if self.box_x <= 0 or self.box_x + BOX_SIZE > self.width:
            self.velocity_x = -self.velocity_x
        if self.box_y <= 0 or self.box_y + BOX_SIZE > self.height:
            self.velocity_y = -self.velocity_y
        self.box_x = _i16(self.box_x + self.velocity_x)
        self.box_y = _i16(self.box_y + self.velocity_y)

    def draw(self, frame: bytearray | memoryview) -> None:
        """Draw the world into an RGBA frame buffer."""
        _render(frame, self.width, self.box_x, self.box_y)


class ResizableWorld:
    """A box bouncing inside a screen whose size may change."""

    def __init__(self, width: int, height: int) -> None:
        self.width = _i16(width)
        self.height = _i16(height)
        self.box_x = 24
        self.box_y = 16
        self.velocity_x = 1
        self.velocity_y = 1

    def update(self) -> None:
        """Move the box one step, steering it back inside the screen."""
        if self.box_x <= 0:
            self.velocity_x = 1
        if self.box_x + BOX_SIZE > self.width:
            self.velocity_x = -1
        if self.box_y <= 0:
            self.velocity_y = 1
        if self.box_y + BOX_SIZE > self.height:
            self.velocity_y = -1
        self.box_x = _i16(self.box_x + self.velocity_x)
        self.box_y = _i16(self.box_y + self.velocity_y)

    def resize(self, width: int, height: int) -> None:
        """Change the screen size."""
        self.width = _i16(width)
        self.height = _i16(height)

    def draw(self, frame: bytearray | memoryview) -> None:
        """Draw the world into an RGBA frame buffer of the current width."""
        _render(frame, self.width, self.box_x, self.box_y)