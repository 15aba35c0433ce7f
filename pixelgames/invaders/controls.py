"""Player control inputs."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Direction(enum.Enum):
    """Which way the player moves."""

    STILL = "still"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Controls:
    """Inputs for one world update."""

    direction: Direction = Direction.STILL
    fire: bool = False