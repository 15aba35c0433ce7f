"""Conway's Game of Life grid with a fading heat trail."""

from __future__ import annotations

import struct
from dataclasses import dataclass, replace

from pixelgames.raster import bresenham
from pixelgames.rng import Pcg32, f32_half_open_right, generate_seed

BIRTH_RULE = (False, False, False, True, False, False, False, False, False)
SURVIVE_RULE = (False, False, True, True, False, False, False, False, False)
INITIAL_FILL: float = struct.unpack("f", struct.pack("f", 0.3))[0]

ALIVE_COLOR = bytes((0, 0xFF, 0xFF, 0xFF))

_NEIGHBOUR_OFFSETS = [
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
]


@dataclass
class Cell:
    """One cell; ``heat`` is 255 while alive and decays once dead."""

    alive: bool = False
    heat: int = 0

    def update_neibs(self, n: int) -> Cell:
        """Return the next state given ``n`` live neighbours."""
        rule = SURVIVE_RULE if self.alive else BIRTH_RULE
        return self.next_state(rule[n])

    def next_state(self, alive: bool) -> Cell:
        """Return a copy moved to the given liveness."""
        heat = 255 if alive else max(self.heat - 1, 0)
        return replace(self, alive=alive, heat=heat)

    def set_alive(self, alive: bool) -> None:
        """Move this cell to the given liveness in place."""
        nxt = self.next_state(alive)
        self.alive = nxt.alive
        self.heat = nxt.heat

    def cool_off(self, decay: float) -> None:
        """Scale down the heat of a dead cell."""
        if not self.alive:
            self.heat = int(min(max(self.heat * decay, 0.0), 255.0))


class ConwayGrid:
    """A toroidal Game of Life board."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self.cells = [Cell() for _ in range(width * height)]

    @classmethod
    def new_random(
        cls, width: int, height: int, seed: tuple[int, int] | None = None
    ) -> ConwayGrid:
        """Create a grid filled with random cells."""
        grid = cls(width, height)
        grid.randomize(seed)
        return grid

    def randomize(self, seed: tuple[int, int] | None = None) -> None:
        """Refill the grid randomly, then settle it a little."""
        if seed is None:
            seed = generate_seed()
        rng = Pcg32(*seed)
        self.cells = [
            Cell(alive=f32_half_open_right(rng.next_u32()) > INITIAL_FILL)
            for _ in self.cells
        ]
        for _ in range(3):
            self.update()
        for cell in self.cells:
            cell.cool_off(0.4)

    def count_neibs(self, x: int, y: int) -> int:
        """Count live neighbours of (x, y), wrapping at the edges."""
        return sum(
            self.cells[(x + dx) % self.width + ((y + dy) % self.height) * self.width].alive
            for dx, dy in _NEIGHBOUR_OFFSETS
        )

    def update(self) -> None:
        """Advance the whole grid by one generation."""
        self.cells = [
            self.cells[x + y * self.width].update_neibs(self.count_neibs(x, y))
            for y in range(self.height)
            for x in range(self.width)
        ]

    def toggle(self, x: int, y: int) -> bool:
        """Flip the cell at (x, y); return its new liveness, or False if outside."""
        idx = self.grid_idx(x, y)
        if idx is None:
            return False
        cell = self.cells[idx]
        cell.set_alive(not cell.alive)
        return cell.alive

    def draw(self, screen: bytearray | memoryview) -> None:
        """Write RGBA pixels for every cell into ``screen``."""
        if len(screen) != 4 * len(self.cells):
            raise ValueError("screen size does not match the grid")
        for i, cell in enumerate(self.cells):
            color = ALIVE_COLOR if cell.alive else bytes((0, 0, cell.heat, 0xFF))
            screen[4 * i : 4 * i + 4] = color

    def set_line(self, x0: int, y0: int, x1: int, y1: int, alive: bool) -> None:
        """Set cells along a line, stopping where it leaves the grid."""
        x0 = min(max(x0, 0), self.width)
        y0 = min(max(y0, 0), self.height)
        for x, y in bresenham((x0, y0), (x1, y1)):
            idx = self.grid_idx(x, y)
            if idx is None:
                break
            self.cells[idx].set_alive(alive)

    def grid_idx(self, x: int, y: int) -> int | None:
        """Return the cell index for (x, y), or None when out of bounds."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return x + y * self.width
        return None