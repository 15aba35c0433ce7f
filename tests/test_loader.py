import itertools
import struct

import pytest

from pixelgames.invaders.loader import Assets, PcxError, load_assets, load_pcx
from pixelgames.invaders.sprites import Frame

BLIPJOY1_EXPECTED = [
    0, 0, 0, 255, 255, 255, 255, 255, 0, 0, 0, 255, 0, 0, 0, 255, 0, 0, 0, 255, 0, 0, 0,
    255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255, 255, 0, 0, 0, 255, 0, 0, 0, 255, 0, 0,
    0, 255, 255, 255, 255, 255, 0, 0, 0, 255, 0, 0, 0, 255, 0, 0, 0, 255, 0, 0, 0, 255,
    255, 255, 255, 255, 0, 0, 0, 255, 0, 0, 0, 255, 0, 0, 0, 255, 0, 0, 0, 255, 0, 0, 0,
    255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 0,
    0, 0, 255, 0, 0, 0, 255, 0, 0, 0, 255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255, 255,
    0, 0, 0, 255, 255, 255, 255, 255, 255, 255, 255, 255, 0, 0, 0, 255, 255, 255, 255, 255,
    0, 0, 0, 255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255, 255, 0, 0, 0, 255, 255, 255,
    255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 0, 0, 0, 255,
    255, 255, 255, 255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255, 255, 0, 0, 0, 255, 255,
    255, 255, 255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255, 255, 0, 0, 0, 255, 255, 255,
    255, 255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255, 255, 0, 0, 0, 255, 0, 0, 0, 255,
    255, 255, 255, 255, 255, 255, 255, 255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255, 255,
    0, 0, 0, 255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255, 255, 0, 0, 0, 255, 0, 0, 0,
    255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255, 255, 0, 0, 0, 255, 0, 0, 0, 255,
]


def _rle(data):
    out = bytearray()
    for value, group in itertools.groupby(data):
        count = len(list(group))
        while count:
            run = min(count, 63)
            if run > 1 or value >= 0xC0:
                out += bytes((0xC0 | run, value))
            else:
                out.append(value)
            count -= run
    return bytes(out)


def _pcx(width, height, bpp, planes, lanes, colormap=b"", tail=b"", encoding=1):
    header = struct.pack(
        "<BBBBHHHHHH48sBBHHHH54s",
        0x0A, 5, encoding, bpp, 0, 0, width - 1, height - 1, 72, 72,
        colormap, 0, planes, len(lanes[0]), 1, 0, 0, b"",
    )
    encode = _rle if encoding == 1 else bytes
    return header + b"".join(encode(lane) for lane in lanes) + tail


def _rgb_pcx(width, height, rgb, encoding=1):
    lanes = []
    for y in range(height):
        row = rgb[y * width : (y + 1) * width]
        lanes.extend(bytes(p[c] for p in row) for c in range(3))
    return _pcx(width, height, 8, 3, lanes, encoding=encoding)


def test_blipjoy_pixels_round_trip():
    rgb = [tuple(BLIPJOY1_EXPECTED[i : i + 3]) for i in range(0, len(BLIPJOY1_EXPECTED), 4)]
    width, height, pixels = load_pcx(_rgb_pcx(10, 8, rgb))
    assert width == 10, "Width differs"
    assert height == 8, "Height differs"
    assert list(pixels) == BLIPJOY1_EXPECTED, "Pixels differ"


def test_uncompressed_rgb():
    rgb = [(1, 2, 3), (200, 201, 202)]
    width, height, pixels = load_pcx(_rgb_pcx(2, 1, rgb, encoding=0))
    assert (width, height) == (2, 1)
    assert pixels == bytes((1, 2, 3, 255, 200, 201, 202, 255))


def test_paletted_256_colours():
    palette = bytearray(768)
    palette[0:3] = bytes((10, 20, 30))
    palette[3:6] = bytes((40, 50, 60))
    data = _pcx(2, 2, 8, 1, [bytes((0, 1)), bytes((1, 0))], tail=b"\x0c" + bytes(palette))
    width, height, pixels = load_pcx(data)
    assert (width, height) == (2, 2)
    assert pixels == bytes((10, 20, 30, 40, 50, 60, 40, 50, 60, 10, 20, 30))


def test_paletted_16_colours_from_header():
    colormap = bytes(range(48))
    data = _pcx(4, 1, 4, 1, [bytes((0x12, 0x30))], colormap=colormap)
    _, _, pixels = load_pcx(data)
    assert pixels == colormap[3:6] + colormap[6:9] + colormap[9:12] + colormap[0:3]


def test_missing_palette_marker():
    data = _pcx(2, 1, 8, 1, [bytes((0, 1))], tail=bytes(769))
    with pytest.raises(PcxError):
        load_pcx(data)


def test_bad_manufacturer():
    data = bytearray(_rgb_pcx(2, 1, [(1, 2, 3), (4, 5, 6)]))
    data[0] = 0
    with pytest.raises(PcxError):
        load_pcx(bytes(data))


def test_truncated_data():
    data = _rgb_pcx(2, 2, [(1, 2, 3)] * 4, encoding=0)
    with pytest.raises(PcxError):
        load_pcx(data[:-3])


def test_short_header():
    with pytest.raises(PcxError):
        load_pcx(b"\x0a\x05")


def test_load_assets(tmp_path):
    data = _rgb_pcx(2, 1, [(1, 2, 3), (4, 5, 6)])
    for name in [f"{frame.name.lower()}.pcx" for frame in Frame] + ["shield.pcx"]:
        (tmp_path / name).write_bytes(data)
    assets = load_assets(tmp_path)
    assert isinstance(assets, Assets)
    assert set(assets.sprites) == set(Frame)
    assert assets.sprites[Frame.SHIELD1] == load_pcx(data)


def test_load_assets_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_assets(tmp_path)