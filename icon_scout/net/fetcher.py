# icon_scout/net/fetcher.py
"""
Fetcher module: HTTP GET with a fixed identity header, fixed-delay retry and
a per-attempt timeout.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from icon_scout.config import ScoutConfig
from icon_scout.logger import logger
from icon_scout.net.models import FailureKind, FetchFailure, FetchOutcome, FetchSuccess
from icon_scout.utils import short_url


def create_session(config: ScoutConfig) -> ClientSession:
    """Build the shared client session: timeout and User-Agent come from *config*.

    Proxies are not read from the environment by aiohttp itself; the fetcher
    passes :attr:`ScoutConfig.proxy` on every request instead.
    """
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers={"User-Agent": config.user_agent},
        raise_for_status=False,
        trust_env=False,
    )


class Fetcher:
    """GET with up to ``retries + 1`` attempts and a constant pause between them."""

    def __init__(self, session: ClientSession, config: ScoutConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(
        self,
        url: str,
        retries: Optional[int] = None,
        delay: Optional[float] = None,
    ) -> FetchOutcome:
        """
        Fetch *url*; anything but HTTP 200 counts as a failed attempt.

        Returns FetchSuccess, or the last FetchFailure once attempts run out.
        """
        retries = self.config.retry_times if retries is None else retries
        delay = self.config.retry_delay if delay is None else delay
        proxy = self.config.proxy

        attempts = 0
        while True:
            attempts += 1
            try:
                async with self.session.get(
                    url,
                    proxy=proxy,
                    headers={"User-Agent": self.config.user_agent},
                ) as resp:
                    if resp.status == 200:
                        body = await resp.read()
                        return FetchSuccess(
                            url=url,
                            body=body,
                            content_type=resp.headers.get("Content-Type", "").lower(),
                            attempts=attempts,
                        )
                    failure = FetchFailure(url, FailureKind.STATUS, attempts, status=resp.status)
            except (ClientError, asyncio.TimeoutError, ValueError) as exc:
                failure = FetchFailure(
                    url, FailureKind.TRANSPORT, attempts, error=str(exc) or type(exc).__name__
                )

            if attempts > retries:
                logger.warning("Giving up on %s", failure.describe())
                return failure
            logger.debug(
                "Attempt %d/%d for %s failed (%s), retrying in %.2f s",
                attempts,
                retries + 1,
                short_url(url),
                failure.status or failure.error,
                delay,
            )
            await asyncio.sleep(delay)
