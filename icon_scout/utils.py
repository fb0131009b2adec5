# File: icon_scout/utils.py
"""icon_scout.utils: Утилитарные функции для обработки URL и списков кандидатов."""

from __future__ import annotations

from typing import Collection, List, Optional, Sequence
from urllib.parse import urljoin, urlparse

from icon_scout.logger import logger

__all__: Sequence[str] = (
    "resolve_url",
    "normalize_target_url",
    "remove_duplicates",
    "short_url",
)


def resolve_url(candidate: str, base: str) -> Optional[str]:
    """Делает ссылку абсолютной относительно base (RFC 3986); None, если ссылка непригодна."""
    if not candidate:
        return None
    try:
        parsed = urlparse(candidate)
        if parsed.scheme:
            return candidate
        resolved = urljoin(base, candidate)
    except ValueError as exc:
        logger.debug("Dropping unparsable candidate %r: %s", candidate, exc)
        return None
    logger.debug("Resolved candidate: %s -> %s", candidate, resolved)
    return resolved


def normalize_target_url(url: str) -> str:
    """Добавляет https:// к адресу без схемы http(s)."""
    url = url.strip()
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    return url


def remove_duplicates(urls: Collection[str]) -> List[str]:
    """Удаляет дубликаты из списка URL, сохраняя порядок."""
    unique = list(dict.fromkeys(urls))
    removed = len(urls) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique


def short_url(url: str, limit: int = 80) -> str:
    """Обрезает длинные адреса (например, data: URL) для логов."""
    return url if len(url) <= limit else url[: limit - 3] + "..."
