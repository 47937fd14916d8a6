# File: tests/conftest.py
import logging
from collections.abc import AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio
from aiohttp import web

from profile_scout.config import ScraperConfig
from profile_scout.logger import LOGGER_NAME


@pytest.fixture()
def fast_config() -> ScraperConfig:
    """
    Return a ScraperConfig without inter-request delay for crawler tests.
    """
    return ScraperConfig(
        max_concurrent_requests=5,
        request_delay_ms=0,
        request_timeout_seconds=2,
        user_agent="TestAgent/1.0",
    )


@pytest.fixture()
def project_log(caplog):
    """caplog wired to the project logger (it does not propagate to root)."""
    lg = logging.getLogger(LOGGER_NAME)
    lg.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    yield caplog
    lg.removeHandler(caplog.handler)


@pytest_asyncio.fixture
async def serve_app(
    unused_tcp_port_factory: Callable[[], int],
) -> AsyncIterator[Callable[[web.Application], Awaitable[str]]]:
    """Start aiohttp apps on free ports, yield a starter returning the base URL."""
    runners: list[web.AppRunner] = []

    async def _serve(app: web.Application) -> str:
        port = unused_tcp_port_factory()
        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return f"http://127.0.0.1:{port}"

    yield _serve
    for runner in runners:
        await runner.cleanup()
