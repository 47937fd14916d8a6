# profile_scout/crawler/dedup.py
"""
Shared set of unique profile URLs.
"""
from __future__ import annotations

import threading
from typing import Dict, List


class DedupSink:
    """Thread-safe insertion-ordered set with an atomic check-and-insert."""

    def __init__(self) -> None:
        self._urls: Dict[str, None] = {}
        self._lock = threading.Lock()

    def try_insert(self, url: str) -> bool:
        """Add *url*; return True only if it was not present before."""
        with self._lock:
            if url in self._urls:
                return False
            self._urls[url] = None
            return True

    def snapshot(self) -> List[str]:
        with self._lock:
            return list(self._urls)

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._urls
