# File: tests/conftest.py
from collections.abc import AsyncIterator, Awaitable, Callable
from io import BytesIO

import pytest
import pytest_asyncio
from aiohttp import ClientSession, web
from PIL import Image

from icon_scout.config import ScoutConfig
from icon_scout.net.fetcher import Fetcher, create_session

SVG_64 = (
    b'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 64 64">'
    b'<rect x="0" y="0" width="64" height="64" fill="#ff0000"/></svg>'
)
SVG_NO_VIEWBOX = (
    b'<svg xmlns="http://www.w3.org/2000/svg">'
    b'<circle cx="50" cy="50" r="40" fill="#00ff00"/></svg>'
)

ServeFn = Callable[[web.Application], Awaitable[str]]


def image_bytes(fmt: str, size: int = 32, color=(10, 120, 200, 255)) -> bytes:
    """Encode a solid square in *fmt* (PNG, JPEG, MPO, ICO, GIF)."""
    img = Image.new("RGBA", (size, size), color)
    if fmt in ("JPEG", "MPO"):
        img = img.convert("RGB")
    buf = BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture()
def make_image() -> Callable[..., bytes]:
    return image_bytes


@pytest.fixture()
def png_bytes() -> bytes:
    return image_bytes("PNG")


@pytest.fixture()
def svg_64() -> bytes:
    return SVG_64


@pytest.fixture()
def svg_no_viewbox() -> bytes:
    return SVG_NO_VIEWBOX


@pytest.fixture()
def scout_config() -> ScoutConfig:
    """Fast-retrying config without proxies, for tests against local servers."""
    return ScoutConfig(
        timeout=2.0,
        user_agent="TestAgent/1.0",
        retry_times=2,
        retry_delay=0.01,
        https_proxy=None,
        http_proxy=None,
    )


@pytest_asyncio.fixture
async def session(scout_config: ScoutConfig) -> AsyncIterator[ClientSession]:
    async with create_session(scout_config) as s:
        yield s


@pytest_asyncio.fixture
async def fetcher(session: ClientSession, scout_config: ScoutConfig) -> Fetcher:
    return Fetcher(session, scout_config)


@pytest_asyncio.fixture
async def serve(unused_tcp_port_factory) -> AsyncIterator[ServeFn]:
    """Start aiohttp applications on free ports; yields ``serve(app) -> base URL``."""
    runners: list[web.AppRunner] = []

    async def _serve(app: web.Application) -> str:
        port = unused_tcp_port_factory()
        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return f"http://127.0.0.1:{port}"

    try:
        yield _serve
    finally:
        for runner in runners:
            await runner.cleanup()
