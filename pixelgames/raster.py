"""Integer line rasterisation."""

from __future__ import annotations

from collections.abc import Iterator

Point = tuple[int, int]

# Mappings into and out of the first octant, keyed by octant number.
_TO_OCTANT = {
    0: lambda x, y: (x, y),
    1: lambda x, y: (y, x),
    2: lambda x, y: (y, -x),
    3: lambda x, y: (-x, y),
    4: lambda x, y: (-x, -y),
    5: lambda x, y: (-y, -x),
    6: lambda x, y: (-y, x),
    7: lambda x, y: (x, -y),
}

_FROM_OCTANT = {
    0: lambda x, y: (x, y),
    1: lambda x, y: (y, x),
    2: lambda x, y: (-y, x),
    3: lambda x, y: (-x, y),
    4: lambda x, y: (-x, -y),
    5: lambda x, y: (-y, -x),
    6: lambda x, y: (y, -x),
    7: lambda x, y: (x, -y),
}


def _octant(start: Point, end: Point) -> int:
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    octant = 0
    if dy < 0:
        dx, dy = -dx, -dy
        octant += 4
    if dx < 0:
        dx, dy = dy, -dx
        octant += 2
    if dx < dy:
        octant += 1
    return octant


def bresenham(start: Point, end: Point) -> Iterator[Point]:
    """Yield every grid point on the line from ``start`` to ``end``, both included."""
    octant = _octant(start, end)
    to_octant = _TO_OCTANT[octant]
    from_octant = _FROM_OCTANT[octant]

    x, y = to_octant(*start)
    end_x, end_y = to_octant(*end)
    delta_x = end_x - x
    delta_y = end_y - y
    error = delta_y - delta_x

    while x <= end_x:
        yield from_octant(x, y)
        if error >= 0:
            y += 1
            error -= delta_x
        x += 1
        error += delta_y