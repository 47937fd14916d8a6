# profile_scout/crawler/models.py
"""
Data models for the ProfileScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from bs4 import BeautifulSoup


class FailureKind(str, Enum):
    """Classification of a failed fetch."""

    INVALID_INPUT = "invalid_input"
    NETWORK_ERROR = "network_error"
    TIMEOUT = "timeout"
    UNEXPECTED = "unexpected"


@dataclass(slots=True, frozen=True)
class FetchSuccess:
    """Fetched and parsed page."""

    url: str
    document: BeautifulSoup

    @property
    def ok(self) -> bool:
        return True


@dataclass(slots=True, frozen=True)
class FetchFailure:
    """Terminal outcome of a fetch that produced no document."""

    url: str
    kind: FailureKind
    detail: str = ""

    @property
    def ok(self) -> bool:
        return False


FetchResult = Union[FetchSuccess, FetchFailure]


@dataclass(slots=True)
class PageTask:
    """One page of a seed's pagination set; *document* is None until fetched."""

    url: str
    document: Optional[BeautifulSoup] = None


class SeedState(str, Enum):
    DONE = "done"
    SEED_FETCH_FAILED = "seed_fetch_failed"


@dataclass(slots=True)
class SeedReport:
    """Outcome of a single seed pipeline."""

    url: str
    state: SeedState
    pages_fetched: int = 0
    pages_failed: int = 0
    links_found: int = 0
    links_new: int = 0
    error: str = ""


@dataclass(slots=True)
class CrawlSummary:
    """Final result of a crawl, assembled after every pipeline has joined."""

    profile_urls: List[str] = field(default_factory=list)
    seeds: List[SeedReport] = field(default_factory=list)
    duration: float = 0.0

    @property
    def seeds_failed(self) -> int:
        return sum(1 for s in self.seeds if s.state is SeedState.SEED_FETCH_FAILED)

    @property
    def pages_fetched(self) -> int:
        return sum(s.pages_fetched for s in self.seeds)

    @property
    def pages_failed(self) -> int:
        return sum(s.pages_failed for s in self.seeds)
