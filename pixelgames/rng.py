"""Small permuted congruential generator and seeding helpers."""

from __future__ import annotations

import os
import sys

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_MULTIPLIER = 6364136223846793005


def _lcg_step(state: int, inc: int) -> int:
    return (state * _MULTIPLIER + inc) & _MASK64


class Pcg32:
    """PCG-XSH-RR generator with 64 bits of state and 32-bit output."""

    def __init__(self, seed: int, inc: int) -> None:
        self.inc = ((inc << 1) | 1) & _MASK64
        state = _lcg_step(0, self.inc)
        state = (state + seed) & _MASK64
        self.state = _lcg_step(state, self.inc)

    def next_u32(self) -> int:
        """Return the next 32-bit output and advance the state."""
        state = self.state
        xorshifted = (((state >> 18) ^ state) >> 27) & _MASK32
        rot = state >> 59
        out = ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & _MASK32
        self.state = _lcg_step(state, self.inc)
        return out


def f32_half_open_right(value: int) -> float:
    """Map a 32-bit integer uniformly onto the interval [0, 1)."""
    return ((value & _MASK32) >> 9) / float(1 << 23)


def generate_seed() -> tuple[int, int]:
    """Return two random 64-bit integers taken from the operating system."""
    raw = os.urandom(16)
    return (
        int.from_bytes(raw[:8], sys.byteorder),
        int.from_bytes(raw[8:], sys.byteorder),
    )