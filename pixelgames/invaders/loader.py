"""Load sprite assets from PCX images."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path

from pixelgames.invaders.sprites import CachedSprite, Frame

_HEADER = struct.Struct("<BBBBHHHHHH48sBBHHHH54s")
_PALETTE_SIZE = 769
_PALETTE_MARKER = 0x0C

_PALETTE_LENGTHS = {
    (1, 1): 2,
    (1, 2): 4,
    (1, 4): 16,
    (1, 8): 256,
    (2, 1): 4,
    (3, 1): 8,
    (4, 1): 16,
}

_ASSET_FILES = {
    Frame.BLIPJOY1: "blipjoy1.pcx",
    Frame.BLIPJOY2: "blipjoy2.pcx",
    Frame.FERRIS1: "ferris1.pcx",
    Frame.FERRIS2: "ferris2.pcx",
    Frame.CTHULHU1: "cthulhu1.pcx",
    Frame.CTHULHU2: "cthulhu2.pcx",
    Frame.PLAYER1: "player1.pcx",
    Frame.PLAYER2: "player2.pcx",
    Frame.SHIELD1: "shield.pcx",
    Frame.BULLET1: "bullet1.pcx",
    Frame.BULLET2: "bullet2.pcx",
    Frame.BULLET3: "bullet3.pcx",
    Frame.BULLET4: "bullet4.pcx",
    Frame.BULLET5: "bullet5.pcx",
    Frame.LASER1: "laser1.pcx",
    Frame.LASER2: "laser2.pcx",
    Frame.LASER3: "laser3.pcx",
    Frame.LASER4: "laser4.pcx",
    Frame.LASER5: "laser5.pcx",
    Frame.LASER6: "laser6.pcx",
    Frame.LASER7: "laser7.pcx",
    Frame.LASER8: "laser8.pcx",
}


class PcxError(ValueError):
    """Raised for malformed or unsupported PCX data."""


@dataclass
class Assets:
    """All sprites loaded into memory."""

    sprites: dict[Frame, CachedSprite] = field(default_factory=dict)


def _decode_rle(data: bytes, needed: int) -> bytes:
    out = bytearray()
    stream = iter(data)
    while len(out) < needed:
        byte = next(stream, None)
        if byte is None:
            raise PcxError("image data is truncated")
        if byte & 0xC0 == 0xC0:
            value = next(stream, None)
            if value is None:
                raise PcxError("image data is truncated")
            out += bytes((value,)) * (byte & 0x3F)
        else:
            out.append(byte)
    return bytes(out[:needed])


def _unpack_row(lanes: list[bytes], bpp: int, width: int) -> list[int]:
    if len(lanes) == 1:
        lane = lanes[0]
        if bpp == 8:
            return list(lane[:width])
        mask = (1 << bpp) - 1
        indices = []
        for x in range(width):
            offset = x * bpp
            shift = 8 - bpp - offset % 8
            indices.append((lane[offset // 8] >> shift) & mask)
        return indices
    return [
        sum(((lane[x // 8] >> (7 - x % 8)) & 1) << plane for plane, lane in enumerate(lanes))
        for x in range(width)
    ]


def load_pcx(data: bytes) -> CachedSprite:
    """Decode a PCX image into ``(width, height, pixels)``.

    Truecolour images yield RGBA bytes; paletted images yield the RGB
    palette entry of each pixel.
    """
    if len(data) < _HEADER.size:
        raise PcxError("file is too short for a PCX header")
    (
        manufacturer,
        _version,
        encoding,
        bpp,
        xmin,
        ymin,
        xmax,
        ymax,
        _hdpi,
        _vdpi,
        colormap,
        _reserved,
        planes,
        bytes_per_line,
        _palette_info,
        _hscreen,
        _vscreen,
        _filler,
    ) = _HEADER.unpack_from(data)
    if manufacturer != 0x0A:
        raise PcxError("not a PCX file")
    if encoding not in (0, 1):
        raise PcxError(f"unknown encoding {encoding}")
    if xmax < xmin or ymax < ymin:
        raise PcxError("invalid image dimensions")
    width = xmax - xmin + 1
    height = ymax - ymin + 1
    if bytes_per_line * 8 < width * bpp:
        raise PcxError("bytes per line too small for image width")

    palette_length = _PALETTE_LENGTHS.get((planes, bpp))
    body = data[_HEADER.size :]
    palette = b""
    if palette_length == 256:
        if len(body) < _PALETTE_SIZE or body[-_PALETTE_SIZE] != _PALETTE_MARKER:
            raise PcxError("missing 256-colour palette")
        palette = body[-_PALETTE_SIZE + 1 :]
        body = body[:-_PALETTE_SIZE]
    elif palette_length is not None:
        palette = colormap[: palette_length * 3]
    elif (planes, bpp) != (3, 8):
        raise PcxError(f"unsupported format: {planes} planes, {bpp} bits")

    needed = height * planes * bytes_per_line
    if encoding == 1:
        raw = _decode_rle(body, needed)
    else:
        if len(body) < needed:
            raise PcxError("image data is truncated")
        raw = body[:needed]

    row_size = planes * bytes_per_line
    rows = [raw[y * row_size : (y + 1) * row_size] for y in range(height)]
    result = bytearray()
    for row in rows:
        lanes = [row[p * bytes_per_line : (p + 1) * bytes_per_line] for p in range(planes)]
        if palette_length is not None:
            for index in _unpack_row(lanes, bpp, width):
                entry = palette[index * 3 : index * 3 + 3]
                if len(entry) != 3:
                    raise PcxError(f"palette index {index} out of range")
                result += entry
        else:
            red, green, blue = (lane[:width] for lane in lanes)
            for rgb in zip(red, green, blue):
                result += bytes((*rgb, 255))

    return (width, height, bytes(result))


def load_assets(directory: str | Path) -> Assets:
    """Load every sprite frame from the PCX files in ``directory``."""
    base = Path(directory)
    return Assets(
        sprites={
            frame: load_pcx((base / name).read_bytes())
            for frame, name in _ASSET_FILES.items()
        }
    )