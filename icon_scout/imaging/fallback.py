# icon_scout/imaging/fallback.py
"""
Deterministic fallback icon: a coloured square with a white disc and a
letter-ish glyph, derived only from the domain name.
"""
from __future__ import annotations

from typing import Tuple

from PIL import Image

from icon_scout.imaging.glyphs import glyph_for

ICON_SIZE = 128
GLYPH_SIZE = 20
FOREGROUND = (255, 255, 255, 255)

_HASH_MASK = 0xFFFFFFFF

RGBA = Tuple[int, int, int, int]


def domain_hash(domain: str) -> int:
    """32-bit ``hash * 31 + byte`` over the UTF-8 bytes of *domain*."""
    value = 0
    for byte in domain.encode("utf-8"):
        value = (value * 31 + byte) & _HASH_MASK
    return value


def background_color(domain: str) -> RGBA:
    # +55 keeps every channel out of the near-black range
    value = domain_hash(domain)
    return (
        (value >> 16) % 200 + 55,
        (value >> 8) % 200 + 55,
        value % 200 + 55,
        255,
    )


def initial_for(domain: str) -> str:
    label = domain.split(".", 1)[0]
    return label[0].upper() if label else "?"


def generate_icon(domain: str) -> Image.Image:
    """Same *domain* in, byte-identical 128×128 RGBA image out."""
    bg = background_color(domain)
    img = Image.new("RGBA", (ICON_SIZE, ICON_SIZE), bg)
    px = img.load()

    cx = cy = ICON_SIZE // 2
    radius = ICON_SIZE // 4
    for y in range(cy - radius, cy + radius + 1):
        for x in range(cx - radius, cx + radius + 1):
            dx, dy = x - cx, y - cy
            if dx * dx + dy * dy <= radius * radius:
                px[x, y] = FOREGROUND

    glyph = glyph_for(initial_for(domain))
    half = GLYPH_SIZE // 2
    for i in range(-half, half + 1):
        for j in range(-half, half + 1):
            if glyph(i, j, GLYPH_SIZE):
                px[cx + i, cy + j] = bg
    return img


__all__ = ["ICON_SIZE", "background_color", "domain_hash", "generate_icon", "initial_for"]
