# === FILE: profile_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import List, Optional, Sequence

from aiohttp import ClientSession, ClientTimeout

from profile_scout.config import ScraperConfig
from profile_scout.crawler.dedup import DedupSink
from profile_scout.crawler.fetcher import RateLimitedFetcher
from profile_scout.crawler.link_extractor import extract_profile_links
from profile_scout.crawler.models import CrawlSummary, PageTask, SeedReport, SeedState
from profile_scout.crawler.pagination import expand_pages
from profile_scout.logger import LOGGER_NAME

__all__ = ("ProfileCrawler",)


class ProfileCrawler:
    """Асинхронный краулер: один конвейер на каждый стартовый URL, общий пул разрешений."""

    def __init__(self, config: ScraperConfig) -> None:
        self.config = config
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[RateLimitedFetcher] = None
        self.logger = logging.getLogger(LOGGER_NAME)

    async def __aenter__(self) -> ProfileCrawler:
        timeout = ClientTimeout(total=self.config.request_timeout_seconds)
        self.session = ClientSession(
            timeout=timeout,
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        self.fetcher = RateLimitedFetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, seed_urls: Sequence[str]) -> CrawlSummary:
        """Обойти все стартовые URL и вернуть сводку с уникальными ссылками."""
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        seeds = list(seed_urls)
        if not seeds:
            self.logger.info("Нет стартовых URL, обход не требуется")
            return CrawlSummary()

        self.logger.info(
            "Старт обхода: %d стартовых URL, до %d запросов одновременно, пауза %d мс",
            len(seeds), self.config.max_concurrent_requests, self.config.request_delay_ms,
        )
        start = time.monotonic()
        sink = DedupSink()
        outcomes = await asyncio.gather(
            *(self._process_seed(self.fetcher, url, sink) for url in seeds),
            return_exceptions=True,
        )
        reports: List[SeedReport] = []
        for url, outcome in zip(seeds, outcomes):
            if isinstance(outcome, Exception):
                self.logger.error("Pipeline for %s failed: %s", url, outcome)
                outcome = SeedReport(url, SeedState.SEED_FETCH_FAILED, error=str(outcome))
            elif isinstance(outcome, BaseException):
                raise outcome
            reports.append(outcome)

        summary = CrawlSummary(profile_urls=sink.snapshot(), seeds=reports, duration=time.monotonic() - start)
        self.logger.info(
            "Завершено: %d уникальных профилей, %d страниц (%d с ошибкой), %d из %d стартовых URL недоступны, %.2f с",
            len(summary.profile_urls), summary.pages_fetched, summary.pages_failed,
            summary.seeds_failed, len(seeds), summary.duration,
        )
        return summary

    async def run(self, seed_urls: Sequence[str]) -> List[str]:
        """Вернуть только итоговый набор уникальных ссылок на профили."""
        summary = await self.crawl(seed_urls)
        return summary.profile_urls

    async def _process_seed(
        self, fetcher: RateLimitedFetcher, seed_url: str, sink: DedupSink
    ) -> SeedReport:
        first = await fetcher.fetch(seed_url)
        if not first.ok:
            self.logger.warning("Skipping %s due to fetch failure (%s)", seed_url, first.kind.value)
            return SeedReport(seed_url, SeedState.SEED_FETCH_FAILED, error=first.detail)

        report = SeedReport(seed_url, SeedState.DONE, pages_fetched=1)
        pages = [PageTask(seed_url, first.document)]
        queued = {seed_url}
        derived = expand_pages(seed_url, first.document, queued)
        if derived:
            self.logger.debug("%s: %d extra pages", seed_url, len(derived))
        results = await asyncio.gather(*(fetcher.fetch(url) for url in derived))
        for url, result in zip(derived, results):
            if result.ok:
                report.pages_fetched += 1
                pages.append(PageTask(url, result.document))
            else:
                report.pages_failed += 1
                pages.append(PageTask(url))

        for page in pages:
            if page.document is None:
                continue
            added = 0
            for link in extract_profile_links(page.document, page.url):
                report.links_found += 1
                if sink.try_insert(link):
                    added += 1
                    self.logger.debug("Added: %s (Total unique: %d)", link, len(sink))
            if added:
                self.logger.info("Found %d new profile links on %s.", added, page.url)
            report.links_new += added
        return report
