# icon_scout/report/encoder.py
"""Multi-size PNG renditions of a resolved icon, as base64 data URLs."""
from __future__ import annotations

import base64
from io import BytesIO
from typing import Dict, Iterable

from PIL import Image

DEFAULT_SIZES = (16, 32, 64, 128, 256)
PNG_DATA_PREFIX = "data:image/png;base64,"


def encode_png(image: Image.Image) -> bytes:
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def encode_sizes(image: Image.Image, sizes: Iterable[int] = DEFAULT_SIZES) -> Dict[str, str]:
    """Resize *image* to each square size (bilinear) and return ``{"16": "data:..."}``."""
    favicons: Dict[str, str] = {}
    for size in sizes:
        resized = image.resize((size, size), Image.Resampling.BILINEAR)
        favicons[str(size)] = PNG_DATA_PREFIX + base64.b64encode(encode_png(resized)).decode("ascii")
    return favicons


__all__ = ["DEFAULT_SIZES", "PNG_DATA_PREFIX", "encode_png", "encode_sizes"]
