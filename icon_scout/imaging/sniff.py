# icon_scout/imaging/sniff.py
"""
Format sniffing: classify an icon payload from its header (and, for SVG,
from the response hints) without decoding any pixels.
"""
from __future__ import annotations

from enum import Enum
from io import BytesIO
from urllib.parse import urlparse

from PIL import Image

SVG_MEDIA_TYPE = "image/svg+xml"
SVG_SUFFIX = ".svg"


class IconKind(str, Enum):
    VECTOR = "vector"
    PNG = "png"
    JPEG = "jpeg"
    ICO = "ico"
    UNSUPPORTED = "unsupported"  # a real image, but not a format we take
    UNKNOWN = "unknown"  # not recognisable as an image at all

    @property
    def is_raster(self) -> bool:
        return self in RASTER_KINDS


RASTER_KINDS = frozenset({IconKind.PNG, IconKind.JPEG, IconKind.ICO})

_PIL_FORMATS = {
    "PNG": IconKind.PNG,
    "JPEG": IconKind.JPEG,
    "MPO": IconKind.JPEG,  # JPEG with an MPF segment
    "ICO": IconKind.ICO,
}

# Everything Pillow may raise while reading a header it does not like.
PIL_ERRORS = (OSError, ValueError, SyntaxError, EOFError, Image.DecompressionBombError)


def is_vector_hint(content_type: str = "", url: str = "") -> bool:
    """SVG is recognised by media type or by the ``.svg`` path suffix."""
    if SVG_MEDIA_TYPE in (content_type or "").lower():
        return True
    try:
        path = urlparse(url).path
    except ValueError:
        path = url
    return path.lower().endswith(SVG_SUFFIX)


def sniff_raster(data: bytes) -> IconKind:
    try:
        with Image.open(BytesIO(data)) as img:
            fmt = img.format
    except PIL_ERRORS:
        return IconKind.UNKNOWN
    return _PIL_FORMATS.get(fmt or "", IconKind.UNSUPPORTED)


def sniff(data: bytes, content_type: str = "", url: str = "") -> IconKind:
    if is_vector_hint(content_type, url):
        return IconKind.VECTOR
    return sniff_raster(data)


__all__ = ["IconKind", "RASTER_KINDS", "PIL_ERRORS", "SVG_MEDIA_TYPE", "is_vector_hint", "sniff", "sniff_raster"]
