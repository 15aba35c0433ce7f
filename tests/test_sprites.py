import pytest

from pixelgames.invaders.geo import Point
from pixelgames.invaders.loader import Assets
from pixelgames.invaders.sprites import (
    HEIGHT,
    TIME_STEP,
    WIDTH,
    Frame,
    Sprite,
    SpriteRef,
    blit,
    line,
    rect,
)

COLOR = (9, 8, 7, 255)


def make_assets():
    return Assets(sprites={frame: (2, 1, bytes([frame.value] * 8)) for frame in Frame})


def blank_screen(fill=0):
    return bytearray([fill]) * (WIDTH * HEIGHT * 4)


def pixel(screen, x, y):
    i = (x + y * WIDTH) * 4
    return tuple(screen[i : i + 4])


def test_sprite_copies_pixels():
    assets = make_assets()
    sprite = Sprite.from_assets(assets, Frame.SHIELD1)
    sprite.pixels[0] = 0
    assert (sprite.width, sprite.height) == (2, 1)
    assert assets.sprites[Frame.SHIELD1][2] == bytes([Frame.SHIELD1.value] * 8)


def test_sprite_ref_shares_pixels():
    assets = make_assets()
    sprite = SpriteRef.from_assets(assets, Frame.FERRIS1, 0)
    assert sprite.pixels is assets.sprites[Frame.FERRIS1][2]
    assert sprite.dt == 0


@pytest.mark.parametrize(
    "start,expected",
    [
        (Frame.BLIPJOY1, Frame.BLIPJOY2),
        (Frame.BLIPJOY2, Frame.BLIPJOY1),
        (Frame.PLAYER2, Frame.PLAYER1),
        (Frame.BULLET4, Frame.BULLET5),
        (Frame.BULLET5, Frame.BULLET1),
        (Frame.LASER8, Frame.LASER1),
    ],
)
def test_step_frame(start, expected):
    assets = make_assets()
    sprite = SpriteRef.from_assets(assets, start, 0)
    sprite.step_frame(assets)
    assert sprite.frame is expected
    assert sprite.pixels == assets.sprites[expected][2]


def test_step_frame_shield_has_no_animation():
    assets = make_assets()
    sprite = SpriteRef.from_assets(assets, Frame.SHIELD1, 0)
    with pytest.raises(ValueError):
        sprite.step_frame(assets)


def test_animate_whole_seconds_steps_every_call():
    assets = make_assets()
    sprite = SpriteRef.from_assets(assets, Frame.LASER1, 0)
    sprite.animate(assets)
    sprite.animate(assets)
    assert sprite.frame is Frame.LASER3


def test_animate_waits_for_duration():
    assets = make_assets()
    sprite = SpriteRef.from_assets(assets, Frame.LASER1, TIME_STEP * 2)
    sprite.animate(assets)
    assert sprite.frame is Frame.LASER1
    sprite.animate(assets)
    assert sprite.frame is Frame.LASER2
    assert sprite.dt == 0


def test_blit_merges_non_zero_bytes():
    screen = blank_screen(fill=1)
    sprite = Sprite(width=2, height=1, pixels=bytearray([0, 0, 0, 0, 0, 5, 0, 255]))
    blit(screen, Point(3, 4), sprite)
    assert pixel(screen, 3, 4) == (1, 1, 1, 1)
    assert pixel(screen, 4, 4) == (1, 5, 1, 255)
    assert len(screen) == WIDTH * HEIGHT * 4


def test_blit_out_of_bounds():
    sprite = Sprite(width=2, height=1, pixels=bytearray(8))
    with pytest.raises(ValueError):
        blit(blank_screen(), Point(WIDTH - 1, 0), sprite)


def test_line_horizontal():
    screen = blank_screen()
    line(screen, Point(1, 2), Point(4, 2), COLOR)
    assert all(pixel(screen, x, 2) == COLOR for x in range(1, 5))
    assert pixel(screen, 5, 2) == (0, 0, 0, 0)


def test_line_clamps_to_screen():
    screen = blank_screen()
    line(screen, Point(WIDTH + 5, 0), Point(WIDTH + 5, 0), COLOR)
    assert pixel(screen, WIDTH - 1, 0) == COLOR


def test_rect_outline():
    screen = blank_screen()
    rect(screen, Point(2, 2), Point(6, 5), COLOR)
    assert pixel(screen, 2, 2) == COLOR
    assert pixel(screen, 5, 4) == COLOR
    assert pixel(screen, 2, 4) == COLOR
    assert pixel(screen, 5, 2) == COLOR
    assert pixel(screen, 3, 3) == (0, 0, 0, 0)
    assert pixel(screen, 6, 5) == (0, 0, 0, 0)