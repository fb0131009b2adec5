# File: icon_scout/engine.py
"""icon_scout.engine: Orchestration layer: загрузка страницы, поиск иконки и сборка результата."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlparse

from aiohttp import ClientSession

from icon_scout.config import ScoutConfig
from icon_scout.errors import InvalidTargetError, PageFetchError
from icon_scout.imaging.decoder import IconDecoder
from icon_scout.models import PageContext, SiteIcons
from icon_scout.net.fetcher import Fetcher, create_session
from icon_scout.net.models import FetchFailure
from icon_scout.parser.html_parser import parse_metadata
from icon_scout.report.encoder import encode_sizes
from icon_scout.resolver import IconResolver
from icon_scout.utils import normalize_target_url

__all__ = ["IconScout", "start_lookup"]


class IconScout:
    """Асинхронный поиск иконок; владеет общей HTTP-сессией."""

    def __init__(self, config: ScoutConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None
        self.logger = logging.getLogger("IconScout")
        self.fetcher: Optional[Fetcher] = None
        self.resolver: Optional[IconResolver] = None
        if session is not None:
            self._wire(session)

    async def __aenter__(self) -> IconScout:
        if self.session is None:
            self._wire(create_session(self.config))
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    def _wire(self, session: ClientSession) -> None:
        self.session = session
        self.fetcher = Fetcher(session, self.config)
        self.resolver = IconResolver(IconDecoder(self.fetcher), self.config.fallback_paths)

    async def fetch_page(self, target_url: str) -> PageContext:
        """Загружает HTML страницы; при сбое загрузки PageFetchError."""
        if not self.fetcher:
            raise RuntimeError("Session not initialized")
        url = normalize_target_url(target_url)
        try:
            hostname = urlparse(url).hostname
        except ValueError as exc:
            raise InvalidTargetError(f"Invalid URL: {target_url!r}") from exc
        if not hostname:
            raise InvalidTargetError(f"Invalid URL: {target_url!r}")

        outcome = await self.fetcher.fetch(url, retries=self.config.page_retry_times)
        if isinstance(outcome, FetchFailure):
            raise PageFetchError(outcome)
        return PageContext(base_url=url, markup=outcome.body)

    async def lookup(self, target_url: str, encode: bool = True) -> SiteIcons:
        """Полный цикл: страница → метаданные → иконка → размеры PNG."""
        if not self.resolver:
            raise RuntimeError("Session not initialized")
        self.logger.info("Looking up icon for %s", target_url)
        page = await self.fetch_page(target_url)
        meta = parse_metadata(page.markup, page.hostname)
        icon = await self.resolver.resolve(page)
        favicons = encode_sizes(icon.image, self.config.output_sizes) if encode else {}
        return SiteIcons(
            title=meta.title,
            description=meta.description,
            url=page.base_url,
            favicon_url=icon.source,
            favicons=favicons,
        )


async def start_lookup(cfg: ScoutConfig, target_url: str) -> SiteIcons:
    """Запускает IconScout в контексте и возвращает результат поиска."""
    async with IconScout(cfg) as scout:
        return await scout.lookup(target_url)

