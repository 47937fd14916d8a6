# profile_scout/crawler/fetcher.py
"""
Fetcher module: issues HTTP GETs behind a fixed per-call delay and a global
permit pool, and classifies every outcome into a FetchResult.
"""
from __future__ import annotations

import asyncio
import logging

from aiohttp import ClientError, ClientResponseError, ClientSession
from bs4 import BeautifulSoup

from profile_scout.config import ScraperConfig
from profile_scout.crawler.models import FailureKind, FetchFailure, FetchResult, FetchSuccess
from profile_scout.logger import LOGGER_NAME

__all__ = ("RateLimitedFetcher",)


class RateLimitedFetcher:
    """Single-attempt fetcher bounded by ``max_concurrent_requests`` permits.

    The session is created by the caller once per run and shared read-only
    by every concurrent ``fetch`` call.
    """

    def __init__(self, session: ClientSession, config: ScraperConfig) -> None:
        self.session = session
        self.config = config
        self.logger = logging.getLogger(LOGGER_NAME)
        self._permits = asyncio.Semaphore(config.max_concurrent_requests)
        self.in_flight: int = 0
        self.peak_in_flight: int = 0

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch *url* once and parse it.

        Returns FetchSuccess with the parsed document, or FetchFailure.
        Never raises for network, timeout or parse problems.
        """
        if not url or not url.strip():
            self.logger.warning("Skipping empty URL")
            return FetchFailure(url, FailureKind.INVALID_INPUT, "empty URL")

        # delay is paid before queuing for a permit
        await asyncio.sleep(self.config.request_delay)

        async with self._permits:
            self.in_flight += 1
            self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
            try:
                return await self._get(url)
            finally:
                self.in_flight -= 1

    async def _get(self, url: str) -> FetchResult:
        self.logger.debug("Fetching: %s", url)
        try:
            async with self.session.get(url) as resp:
                resp.raise_for_status()
                text = await resp.text()
            document = BeautifulSoup(text, "html.parser")
        except asyncio.TimeoutError:
            self.logger.warning("Timeout fetching %s", url)
            return FetchFailure(url, FailureKind.TIMEOUT, "timed out")
        except ClientResponseError as exc:
            detail = f"HTTP {exc.status}: {exc.message}"
            self.logger.warning("HTTP error fetching %s: %s", url, detail)
            return FetchFailure(url, FailureKind.NETWORK_ERROR, detail)
        except ClientError as exc:
            self.logger.warning("Network error fetching %s: %s", url, exc)
            return FetchFailure(url, FailureKind.NETWORK_ERROR, str(exc) or type(exc).__name__)
        except Exception as exc:
            self.logger.warning("Unexpected error for %s: %s", url, exc)
            return FetchFailure(url, FailureKind.UNEXPECTED, str(exc) or type(exc).__name__)
        self.logger.debug("Fetched: %s", url)
        return FetchSuccess(url, document)
