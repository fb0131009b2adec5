# icon_scout/parser/icon_links.py
"""
Icon link discovery: turns page markup into the ordered list of candidates
the resolver tries one by one.
"""
from __future__ import annotations

from typing import Iterable, List, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from icon_scout.logger import logger
from icon_scout.utils import remove_duplicates, resolve_url

DEFAULT_FALLBACK_PATHS = ("/favicon.ico",)

_KNOWN_RELATIONS = frozenset(
    {"icon", "shortcut icon", "apple-touch-icon", "apple-touch-icon-precomposed"}
)


def is_icon_relation(rel: Union[str, Iterable[str], None]) -> bool:
    """True for ``rel`` values naming an icon (any token containing ``icon`` counts)."""
    if not rel:
        return False
    value = rel if isinstance(rel, str) else " ".join(rel)
    value = value.strip().lower()
    return value in _KNOWN_RELATIONS or "icon" in value


def discover_candidates(
    markup: Union[str, bytes],
    base: str,
    fallback_paths: Iterable[str] = DEFAULT_FALLBACK_PATHS,
) -> List[str]:
    """
    Return absolute candidate URLs in priority order.

    Icon links declared in the markup come first (document order), then the
    conventional fallback paths. The result is deduplicated and, as long as
    *base* is a valid absolute URL, never empty.
    """
    soup = BeautifulSoup(markup, "html.parser")
    candidates: List[str] = []
    for tag in soup.find_all("link"):
        if not isinstance(tag, Tag) or not is_icon_relation(tag.get("rel")):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        absolute = resolve_url(href_val.strip(), base)
        if absolute:
            candidates.append(absolute)

    declared = len(candidates)
    for path in fallback_paths:
        absolute = resolve_url(path, base)
        if absolute:
            candidates.append(absolute)

    unique = remove_duplicates(candidates)
    logger.debug("Discovered %d declared icon link(s), %d candidate(s) total", declared, len(unique))
    return unique
