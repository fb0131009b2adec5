# icon_scout/imaging/glyphs.py
"""
Tiny pixel glyphs for the generated fallback icon.

Each glyph is a predicate over offsets ``(i, j)`` from the centre, both in
``-size // 2 .. size // 2``; ``i`` runs along x, ``j`` along y. Characters
without an entry fall back to :func:`cross`.
"""
from __future__ import annotations

from typing import Callable, Dict

GlyphPredicate = Callable[[int, int, int], bool]


def cross(i: int, j: int, size: int) -> bool:
    return i == 0 or j == 0


def letter_a(i: int, j: int, size: int) -> bool:
    quarter = size // 4
    return i == j * 2 or i == -j * 2 or (j == 0 and -quarter <= i <= quarter)


def letter_b(i: int, j: int, size: int) -> bool:
    half = size // 2
    if i == -half or j in (-half, 0, half):
        return True
    return i == half and (-half < j < 0 or 0 < j < half)


GLYPHS: Dict[str, GlyphPredicate] = {
    "A": letter_a,
    "B": letter_b,
}


def glyph_for(initial: str) -> GlyphPredicate:
    return GLYPHS.get(initial, cross)


__all__ = ["GLYPHS", "GlyphPredicate", "cross", "glyph_for", "letter_a", "letter_b"]
