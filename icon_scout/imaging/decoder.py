# icon_scout/imaging/decoder.py
"""
Candidate decoding: inline ``data:`` URLs are decoded locally, everything else
is fetched and dispatched on the sniffed format.
"""
from __future__ import annotations

import base64
import binascii
import re
from io import BytesIO
from typing import Optional
from urllib.parse import unquote_to_bytes

from PIL import Image

from icon_scout.errors import DecodeError
from icon_scout.imaging.sniff import PIL_ERRORS, SVG_MEDIA_TYPE, IconKind, sniff
from icon_scout.imaging.vector import rasterize_svg
from icon_scout.logger import logger
from icon_scout.net.fetcher import Fetcher
from icon_scout.net.models import FetchFailure
from icon_scout.utils import short_url

_WHITESPACE = re.compile(r"\s+")


def is_data_url(candidate: str) -> bool:
    return candidate[:5].lower() == "data:"


def decode_raster(data: bytes) -> Image.Image:
    """Fully decode a raster payload into RGBA."""
    try:
        with Image.open(BytesIO(data)) as img:
            img.load()
            return img.convert("RGBA")
    except PIL_ERRORS as exc:
        raise DecodeError(f"cannot decode image: {exc}") from exc


def decode_vector(data: bytes) -> Image.Image:
    try:
        return rasterize_svg(data)
    except Exception as exc:
        raise DecodeError(f"cannot rasterize SVG: {exc}") from exc


def decode_data_url(url: str) -> Image.Image:
    """Decode ``data:image/...`` without touching the network."""
    header, sep, payload = url.partition(",")
    if not sep:
        raise DecodeError("malformed data URL: no comma separator")

    params = [p.strip().lower() for p in header[5:].split(";")]
    media_type = params[0]
    if not media_type.startswith("image/"):
        raise DecodeError(f"data URL does not carry an image: {media_type or 'text/plain'}")

    if "base64" in params[1:]:
        try:
            data = base64.b64decode(_WHITESPACE.sub("", payload), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise DecodeError(f"bad base64 payload: {exc}") from exc
    else:
        data = unquote_to_bytes(payload)

    if media_type == SVG_MEDIA_TYPE:
        return decode_vector(data)
    return decode_raster(data)


def decode_payload(data: bytes, content_type: str = "", url: str = "") -> Image.Image:
    """Dispatch a fetched payload on its sniffed kind; only SVG, PNG, JPEG and ICO pass."""
    kind = sniff(data, content_type, url)
    if kind is IconKind.VECTOR:
        return decode_vector(data)
    if not kind.is_raster:
        raise DecodeError(f"unsupported format ({kind.value}, content type {content_type or 'n/a'})")
    return decode_raster(data)


class IconDecoder:
    """Turns one candidate into a bitmap, or None when it is unusable."""

    def __init__(self, fetcher: Fetcher) -> None:
        self.fetcher = fetcher

    async def decode(self, candidate: str) -> Optional[Image.Image]:
        try:
            if is_data_url(candidate):
                return decode_data_url(candidate)

            outcome = await self.fetcher.fetch(candidate)
            if isinstance(outcome, FetchFailure):
                return None
            return decode_payload(outcome.body, outcome.content_type, candidate)
        except DecodeError as exc:
            logger.info("Skipping candidate %s: %s", short_url(candidate), exc)
            return None


__all__ = [
    "IconDecoder",
    "decode_data_url",
    "decode_payload",
    "decode_raster",
    "decode_vector",
    "is_data_url",
]
