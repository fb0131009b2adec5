# File: icon_scout/server.py
"""
HTTP API for IconScout (aiohttp.web).

Routes:
  POST /api/favicon   JSON ``{"url": ...}`` → metadata, chosen icon and all PNG sizes
  GET  /api?url=...   metadata and chosen icon URL only (``/api?=...`` also accepted)
"""
from __future__ import annotations

from typing import AsyncIterator

from aiohttp import web

from icon_scout.config import ScoutConfig
from icon_scout.engine import IconScout
from icon_scout.errors import InvalidTargetError, PageFetchError
from icon_scout.logger import logger

SCOUT_KEY = web.AppKey("scout", IconScout)
CONFIG_KEY = web.AppKey("config", ScoutConfig)

routes = web.RouteTableDef()


def _error(message: str, status: int) -> web.Response:
    return web.json_response({"error": message}, status=status)


async def _lookup(request: web.Request, target: str, encode: bool) -> web.Response:
    scout = request.app[SCOUT_KEY]
    try:
        result = await scout.lookup(target, encode=encode)
    except InvalidTargetError:
        return _error("Invalid URL", 400)
    except PageFetchError as exc:
        logger.warning("Page fetch failed: %s", exc)
        if exc.failure.status is not None:
            return _error(f"Website returned status code: {exc.failure.status}", 500)
        return _error(f"Failed to fetch website: {exc.failure.error}", 500)
    return web.json_response(result.to_dict(include_favicons=encode))


@routes.post("/api/favicon")
async def favicon(request: web.Request) -> web.Response:
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    target = payload.get("url") if isinstance(payload, dict) else None
    if not isinstance(target, str) or not target.strip():
        return _error("URL is required", 400)
    return await _lookup(request, target, encode=True)


@routes.get("/api")
async def website_info(request: web.Request) -> web.Response:
    target = (request.query.get("url") or request.query.get("", "")).strip()
    if not target:
        return _error("URL parameter is required", 400)
    return await _lookup(request, target, encode=False)


async def _scout_context(app: web.Application) -> AsyncIterator[None]:
    async with IconScout(app[CONFIG_KEY]) as scout:
        app[SCOUT_KEY] = scout
        yield


def create_app(config: ScoutConfig) -> web.Application:
    """One shared IconScout (and HTTP session) per application."""
    app = web.Application()
    app[CONFIG_KEY] = config
    app.add_routes(routes)
    app.cleanup_ctx.append(_scout_context)
    return app


def run(config: ScoutConfig, host: str | None = None, port: int | None = None) -> None:
    web.run_app(
        create_app(config),
        host=host or config.host,
        port=port or config.port,
        print=None,
    )


__all__ = ["create_app", "run"]
