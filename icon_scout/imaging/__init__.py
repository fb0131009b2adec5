"""icon_scout.imaging: sniffing, decoding, SVG rasterisation and fallback icons."""

from .decoder import IconDecoder, decode_data_url, decode_payload
from .fallback import generate_icon
from .sniff import IconKind, sniff
from .vector import rasterize_svg

__all__ = [
    "IconDecoder",
    "IconKind",
    "decode_data_url",
    "decode_payload",
    "generate_icon",
    "rasterize_svg",
    "sniff",
]
