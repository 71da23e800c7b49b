"""Pixel helpers for tinting glyphs and cutting sprites out of an RGBA atlas."""

from __future__ import annotations

import math

Pixel = tuple[int, int, int, int]
RGB = tuple[int, int, int]

_CHANNEL_MAX = 255


def extract_sub_image(
    data: bytes, atlas_width: int, x: int, y: int, width: int, height: int
) -> bytes | None:
    """Copy a width x height block of RGBA pixels starting at (x, y).

    The atlas is tightly packed RGBA, atlas_width pixels per row. Returns
    None for an empty block and raises ValueError when the block reaches
    outside the atlas data.
    """
    if width == 0 or height == 0:
        return None
    if x < 0 or y < 0 or width < 0 or height < 0:
        raise ValueError("sub-image bounds must not be negative")
    if x + width > atlas_width:
        raise ValueError("sub-image extends past the right edge of the atlas")

    bytes_per_row = atlas_width * 4
    end = (y + height - 1) * bytes_per_row + (x + width) * 4
    if end > len(data):
        raise ValueError("sub-image extends past the end of the atlas data")

    rows = (
        data[(y + row) * bytes_per_row + x * 4 : (y + row) * bytes_per_row + (x + width) * 4]
        for row in range(height)
    )
    return b"".join(rows)


def add_color_to_pixel(pixel: Pixel, add_color: Pixel) -> Pixel:
    """Add a colour channel-wise, capped at 255; the pixel keeps its alpha."""
    r, g, b, a = pixel
    ar, ag, ab, _ = add_color
    return (
        min(r + ar, _CHANNEL_MAX),
        min(g + ag, _CHANNEL_MAX),
        min(b + ab, _CHANNEL_MAX),
        a,
    )


def subtract_color_from_pixel(pixel: Pixel, subtract_color: Pixel) -> Pixel:
    """Subtract a colour channel-wise, floored at 0; the pixel keeps its alpha."""
    r, g, b, a = pixel
    sr, sg, sb, _ = subtract_color
    return (max(r - sr, 0), max(g - sg, 0), max(b - sb, 0), a)


def _round_channel(value: float) -> int:
    return min(max(math.floor(value + 0.5), 0), _CHANNEL_MAX)


def blend_pixel(pixel: Pixel, blend_color: Pixel) -> Pixel:
    """Alpha-blend a colour over the pixel by the colour's alpha; the pixel keeps its alpha."""
    alpha = blend_color[3] / 255.0
    r, g, b = (
        _round_channel((1.0 - alpha) * p + alpha * c)
        for p, c in zip(pixel[:3], blend_color[:3])
    )
    return (r, g, b, pixel[3])


def invert_color(color: RGB) -> RGB:
    """Complement of each colour channel."""
    r, g, b = color
    return (_CHANNEL_MAX - r, _CHANNEL_MAX - g, _CHANNEL_MAX - b)