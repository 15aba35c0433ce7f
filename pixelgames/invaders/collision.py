"""Collision detection between game entities."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Sequence

from pixelgames.invaders.entities import (
    COLS,
    GRID,
    ROWS,
    Bullet,
    Invaders,
    Laser,
    Player,
    Shield,
)
from pixelgames.invaders.geo import Point, Rect


class BulletKind(enum.IntEnum):
    """What a bullet collided with."""

    INVADER = 0
    SHIELD = 1
    LASER = 2


class LaserKind(enum.IntEnum):
    """What a laser collided with."""

    SHIELD = 0
    PLAYER = 1


@dataclass(frozen=True, order=True)
class BulletDetail:
    """A collision between a bullet and an invader, a shield or a laser."""

    kind: BulletKind
    args: tuple[int, ...] = ()

    @classmethod
    def invader(cls, col: int, row: int) -> BulletDetail:
        """Collision with the invader at grid position (col, row)."""
        return cls(BulletKind.INVADER, (col, row))

    @classmethod
    def shield(cls, index: int) -> BulletDetail:
        """Collision with the shield at ``index``."""
        return cls(BulletKind.SHIELD, (index,))

    @classmethod
    def laser(cls) -> BulletDetail:
        """Collision with a laser."""
        return cls(BulletKind.LASER)


@dataclass(frozen=True, order=True)
class LaserDetail:
    """A collision between a laser and a shield or the player."""

    kind: LaserKind
    args: tuple[int, ...] = ()

    @classmethod
    def shield(cls, index: int) -> LaserDetail:
        """Collision with the shield at ``index``."""
        return cls(LaserKind.SHIELD, (index,))

    @classmethod
    def player(cls) -> LaserDetail:
        """Collision with the player."""
        return cls(LaserKind.PLAYER)


def _shield_rects(shields: Sequence[Shield]) -> list[Rect]:
    return [Rect.from_drawable(shield.pos, shield.sprite) for shield in shields]


@dataclass
class Collision:
    """Collision details gathered during one update (shown in debug mode)."""

    bullet_details: set[BulletDetail] = field(default_factory=set)
    laser_details: set[LaserDetail] = field(default_factory=set)

    def clear(self) -> None:
        """Forget all collision details."""
        self.bullet_details.clear()
        self.laser_details.clear()

    def bullet_to_invader(self, bullet: Bullet, invaders: Invaders) -> bool:
        """Check the bullet against the fleet.

        On a hit the invader is removed from the grid and True is returned;
        the caller must then destroy the bullet.
        """
        top, right, bottom, left = invaders.get_bounds()
        fleet_rect = Rect(Point(left, top), Point(right, bottom))
        bullet_rect = Rect.from_drawable(bullet.pos, bullet.sprite)
        if not bullet_rect.intersects(fleet_rect):
            return False

        corners = (
            (bullet_rect.p1.x, bullet_rect.p1.y),
            (bullet_rect.p1.x, bullet_rect.p2.y),
            (bullet_rect.p2.x, bullet_rect.p1.y),
            (bullet_rect.p2.x, bullet_rect.p2.y),
        )
        for x, y in corners:
            col = max(x - left, 0) // GRID.x + invaders.bounds.left_col
            row = max(y - top, 0) // GRID.y + invaders.bounds.top_row
            if col < COLS and row < ROWS and invaders.grid[row][col] is not None:
                self.bullet_details.add(BulletDetail.invader(col, row))

        for detail in sorted(self.bullet_details):
            if detail.kind is not BulletKind.INVADER:
                continue
            col, row = detail.args
            invader = invaders.grid[row][col]
            if invader is None:
                continue
            if bullet_rect.intersects(Rect.from_drawable(invader.pos, invader.sprite)):
                invaders.grid[row][col] = None
                return True
        return False

    def bullet_to_shield(self, bullet: Optional[Bullet], shields: Sequence[Shield]) -> bool:
        """Check the bullet against the shields; return True when it must be destroyed."""
        if bullet is None:
            return False
        bullet_rect = Rect.from_drawable(bullet.pos, bullet.sprite)
        destroy = False
        for i, shield_rect in enumerate(_shield_rects(shields)):
            if bullet_rect.intersects(shield_rect):
                self.bullet_details.add(BulletDetail.shield(i))
                destroy = True
        return destroy

    def laser_to_player(self, laser: Laser, player: Player) -> bool:
        """Return True when the laser hits the player."""
        laser_rect = Rect.from_drawable(laser.pos, laser.sprite)
        player_rect = Rect.from_drawable(player.pos, player.sprite)
        if laser_rect.intersects(player_rect):
            self.laser_details.add(LaserDetail.player())
            return True
        return False

    def laser_to_bullet(self, laser: Laser, bullet: Optional[Bullet]) -> bool:
        """Return True when the laser and the bullet hit; both must then be destroyed."""
        if bullet is None:
            return False
        laser_rect = Rect.from_drawable(laser.pos, laser.sprite)
        bullet_rect = Rect.from_drawable(bullet.pos, bullet.sprite)
        if bullet_rect.intersects(laser_rect):
            self.bullet_details.add(BulletDetail.laser())
            return True
        return False

    def laser_to_shield(self, laser: Laser, shields: Sequence[Shield]) -> bool:
        """Return True when the laser hits any shield."""
        laser_rect = Rect.from_drawable(laser.pos, laser.sprite)
        destroy = False
        for i, shield_rect in enumerate(_shield_rects(shields)):
            if laser_rect.intersects(shield_rect):
                self.laser_details.add(LaserDetail.shield(i))
                destroy = True
        return destroy