"""Bounding-box overlays drawn in debug mode."""

from __future__ import annotations

from typing import Optional, Sequence

from pixelgames.invaders.collision import BulletDetail, Collision, LaserDetail
from pixelgames.invaders.entities import GRID, Bullet, Invaders, Laser, Player, Shield
from pixelgames.invaders.geo import Point
from pixelgames.invaders.sprites import Drawable, rect

RED = bytes((255, 0, 0, 255))
GREEN = bytes((0, 255, 0, 255))
BLUE = bytes((0, 0, 255, 255))
YELLOW = bytes((255, 255, 0, 255))


def _outline(screen: bytearray, pos: Point, drawable: Drawable, color: bytes) -> None:
    rect(screen, pos, pos + Point(drawable.width, drawable.height), color)


def draw_invaders(screen: bytearray, invaders: Invaders, collision: Collision) -> None:
    """Outline the fleet and each invader, highlighting collision candidates."""
    top, right, bottom, left = invaders.get_bounds()
    rect(screen, Point(left, top), Point(right, bottom), BLUE)

    for y, row in enumerate(invaders.grid):
        for x, invader in enumerate(row):
            hit = BulletDetail.invader(x, y) in collision.bullet_details
            if invader is not None:
                _outline(screen, invader.pos, invader.sprite, YELLOW if hit else GREEN)
            elif hit:
                cell = Point(x - invaders.bounds.left_col, y - invaders.bounds.top_row)
                p1 = invaders.bounds.pos + cell * GRID
                rect(screen, p1, p1 + GRID, RED)


def draw_bullet(screen: bytearray, bullet: Optional[Bullet]) -> None:
    """Outline the bullet, if there is one."""
    if bullet is not None:
        _outline(screen, bullet.pos, bullet.sprite, GREEN)


def draw_lasers(screen: bytearray, lasers: Sequence[Laser]) -> None:
    """Outline every laser."""
    for laser in lasers:
        _outline(screen, laser.pos, laser.sprite, GREEN)


def draw_player(screen: bytearray, player: Player, collision: Collision) -> None:
    """Outline the player, red when hit."""
    hit = LaserDetail.player() in collision.laser_details
    _outline(screen, player.pos, player.sprite, RED if hit else GREEN)


def draw_shields(screen: bytearray, shields: Sequence[Shield], collision: Collision) -> None:
    """Outline every shield, red when hit by a laser or a bullet."""
    for i, shield in enumerate(shields):
        hit = (
            LaserDetail.shield(i) in collision.laser_details
            or BulletDetail.shield(i) in collision.bullet_details
        )
        _outline(screen, shield.pos, shield.sprite, RED if hit else GREEN)