# icon_scout/imaging/vector.py
"""SVG rasterisation on top of cairosvg."""
from __future__ import annotations

import re
from io import BytesIO
from typing import Optional, Tuple

import cairosvg
from cairosvg.parser import Tree
from PIL import Image

DEFAULT_CANVAS = (256, 256)

_SEPARATORS = re.compile(r"[\s,]+")


def view_box_size(view_box: Optional[str]) -> Optional[Tuple[int, int]]:
    """Width and height of a ``viewBox`` value, or None unless both are positive."""
    if not view_box:
        return None
    parts = _SEPARATORS.split(view_box.strip())
    if len(parts) != 4:
        return None
    try:
        width, height = float(parts[2]), float(parts[3])
    except ValueError:
        return None
    if width <= 0 or height <= 0:
        return None
    return max(1, int(width)), max(1, int(height))


def rasterize_svg(data: bytes) -> Image.Image:
    """
    Render *data* into an RGBA bitmap at unit scale.

    With a view box the canvas is the view box itself; without one the
    document keeps its own size and is placed at the origin of a 256×256
    canvas.
    """
    declared = view_box_size(Tree(bytestring=data).get("viewBox"))
    if declared:
        width, height = declared
        png = cairosvg.svg2png(bytestring=data, output_width=width, output_height=height)
    else:
        width, height = DEFAULT_CANVAS
        png = cairosvg.svg2png(bytestring=data, parent_width=width, parent_height=height)

    with Image.open(BytesIO(png)) as raw:
        rendered = raw.convert("RGBA")
    if rendered.size == (width, height):
        return rendered
    canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    canvas.paste(rendered, (0, 0))
    return canvas


__all__ = ["DEFAULT_CANVAS", "rasterize_svg", "view_box_size"]
