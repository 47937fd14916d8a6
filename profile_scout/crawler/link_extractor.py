# profile_scout/crawler/link_extractor.py
"""
Profile link extraction for ProfileScout.
"""
from __future__ import annotations

import logging
from typing import List

from bs4 import BeautifulSoup
from bs4.element import Tag

from profile_scout.logger import LOGGER_NAME

PROFILE_LINK_SELECTOR = 'a[class="eitem"]'
PROFILE_LINK_ATTR = "href"

logger = logging.getLogger(LOGGER_NAME)


def extract_profile_links(document: BeautifulSoup, source_url: str) -> List[str]:
    """
    Return raw ``href`` values of profile anchors in document order.

    Empty values are skipped. Links are not deduplicated or resolved
    against *source_url*, which is used only for diagnostics.
    """
    nodes = document.select(PROFILE_LINK_SELECTOR)
    links: List[str] = []
    for tag in nodes:
        if not isinstance(tag, Tag):
            continue
        value = tag.get(PROFILE_LINK_ATTR)
        if not isinstance(value, str) or not value.strip():
            continue
        links.append(value)
    if not nodes:
        logger.info("No user profiles found at: %s", source_url)
    return links
