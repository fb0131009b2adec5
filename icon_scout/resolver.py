# File: icon_scout/resolver.py
"""
Icon resolution pipeline: discover candidates, try them strictly in order,
fall back to a generated icon when none decodes.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from icon_scout.imaging.decoder import IconDecoder
from icon_scout.imaging.fallback import generate_icon
from icon_scout.logger import logger
from icon_scout.models import GENERATED_SOURCE, DecodedIcon, PageContext
from icon_scout.parser.icon_links import DEFAULT_FALLBACK_PATHS, discover_candidates
from icon_scout.utils import short_url

__all__ = ["IconResolver"]


class IconResolver:
    """First candidate that decodes wins; the result is never an error."""

    def __init__(
        self,
        decoder: IconDecoder,
        fallback_paths: Iterable[str] = DEFAULT_FALLBACK_PATHS,
    ) -> None:
        self.decoder = decoder
        self.fallback_paths: Sequence[str] = tuple(fallback_paths)

    def candidates(self, page: PageContext) -> list[str]:
        return discover_candidates(page.markup, page.base_url, self.fallback_paths)

    async def resolve(self, page: PageContext) -> DecodedIcon:
        candidates = self.candidates(page)
        logger.debug("Trying %d icon candidate(s) for %s", len(candidates), page.base_url)

        # declaration order is the priority order
        for index, candidate in enumerate(candidates, start=1):
            image = await self.decoder.decode(candidate)
            if image is not None:
                logger.info(
                    "Icon for %s: %s (candidate %d/%d)",
                    page.base_url,
                    short_url(candidate),
                    index,
                    len(candidates),
                )
                return DecodedIcon(image=image, source=candidate)

        logger.info("No usable icon for %s, generating one", page.base_url)
        return DecodedIcon(image=generate_icon(page.hostname), source=GENERATED_SOURCE)
