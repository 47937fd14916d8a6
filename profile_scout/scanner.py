# === FILE: profile_scout/scanner.py ===
"""
Модуль-обёртка для функции запуска обхода.
"""
from typing import Sequence

from profile_scout.config import ScraperConfig
from profile_scout.crawler.crawler import ProfileCrawler
from profile_scout.crawler.models import CrawlSummary


async def start_scan(cfg: ScraperConfig, seed_urls: Sequence[str]) -> CrawlSummary:
    """
    Запускает асинхронный краулер в контексте и возвращает сводку обхода.

    Parameters
    ----------
    cfg : ScraperConfig
        Конфигурация обхода.
    seed_urls : Sequence[str]
        Стартовые страницы со списками профилей.

    Returns
    -------
    CrawlSummary
        Уникальные ссылки на профили и итоги по каждому стартовому URL.
    """
    async with ProfileCrawler(cfg) as crawler:
        summary = await crawler.crawl(seed_urls)
    return summary

__all__ = ["start_scan"]
