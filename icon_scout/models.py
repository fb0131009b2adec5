"""
Data models shared by the resolution pipeline, the engine and the reports.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict
from urllib.parse import urlparse

from PIL import Image

#: ``DecodedIcon.source`` value used when no candidate could be decoded.
GENERATED_SOURCE = "generated"


@dataclass(frozen=True, slots=True)
class PageContext:
    """Address and raw markup of the page whose icon is being resolved."""

    base_url: str
    markup: bytes

    @property
    def hostname(self) -> str:
        """Host without userinfo, port or IPv6 brackets; letter case is kept."""
        host = urlparse(self.base_url).netloc.rpartition("@")[2]
        if host.startswith("["):
            return host[1:].partition("]")[0]
        return host.partition(":")[0]


@dataclass(slots=True)
class DecodedIcon:
    """An RGBA bitmap plus the candidate URL (or ``"generated"``) it came from."""

    image: Image.Image
    source: str

    @property
    def generated(self) -> bool:
        return self.source == GENERATED_SOURCE


@dataclass(frozen=True, slots=True)
class PageMetadata:
    title: str
    description: str


@dataclass(slots=True)
class SiteIcons:
    """Result of a full lookup: page metadata, chosen icon and its renditions."""

    title: str
    description: str
    url: str
    favicon_url: str
    favicons: Dict[str, str] = field(default_factory=dict)

    def to_dict(self, include_favicons: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "faviconUrl": self.favicon_url,
        }
        if include_favicons:
            data["favicons"] = dict(self.favicons)
        return data


__all__ = ["GENERATED_SOURCE", "PageContext", "DecodedIcon", "PageMetadata", "SiteIcons"]
