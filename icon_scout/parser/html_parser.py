# === FILE: icon_scout/parser/html_parser.py ===
"""Page metadata extraction for IconScout.

Only the two fields the lookup result reports are extracted:

* title: document ``<title>`` text, or the host name when it is empty.
* description: content of the last ``<meta name="description">`` tag.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from icon_scout.models import PageMetadata

__all__: Sequence[str] = ("parse_metadata",)


def parse_metadata(markup: Union[str, bytes], hostname: str = "") -> PageMetadata:
    soup = BeautifulSoup(markup, "html.parser")

    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag else ""

    description = ""
    for meta in soup.find_all("meta"):
        if not isinstance(meta, Tag):
            continue
        name = meta.get("name")
        if isinstance(name, str) and name.lower() == "description":
            content = meta.get("content")
            if isinstance(content, str):
                description = content

    return PageMetadata(title=title or hostname, description=description)
