# profile_scout/crawler/pagination.py
"""
Pagination discovery on seed listing pages.
"""
from __future__ import annotations

from typing import List, Optional, Set

from bs4 import BeautifulSoup

PAGINATION_ITEM_SELECTOR = 'ul[class="pagination list-unstyled"] li'


def count_pages(document: BeautifulSoup) -> int:
    """
    Number of extra pages advertised by the pagination control.

    The first and last items are prev/next controls, so the count is
    ``items - 2``; anything non-positive means a single-page seed.
    """
    items = document.select(PAGINATION_ITEM_SELECTOR)
    return max(len(items) - 2, 0)


def expand_pages(
    seed_url: str,
    document: BeautifulSoup,
    queued: Optional[Set[str]] = None,
) -> List[str]:
    """
    Build ``seed_url?page=N`` candidates for N in ``1..count_pages()``.

    *queued* is the seed's own "already queued" set; it is updated in place
    and URLs already present are skipped. The seed URL itself is never
    returned.
    """
    if queued is None:
        queued = set()
    queued.add(seed_url)
    pages: List[str] = []
    for index in range(count_pages(document)):
        page_url = f"{seed_url}?page={index + 1}"
        if page_url in queued:
            continue
        queued.add(page_url)
        pages.append(page_url)
    return pages
