# File: profile_scout/utils.py
"""profile_scout.utils: загрузка списка стартовых URL и мелкие помощники для путей."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union

from profile_scout.logger import logger

__all__: Sequence[str] = (
    "is_http_url",
    "read_url_list",
    "resolve_path",
)

_HTTP_PREFIXES = ("http://", "https://")


def is_http_url(line: str) -> bool:
    """Проверяет, что строка начинается с http:// или https://."""
    return line.startswith(_HTTP_PREFIXES)


def read_url_list(path: Union[str, Path]) -> List[str]:
    """Читает файл со стартовыми URL: по одному на строку, пустые и не-HTTP строки пропускаются."""
    p = resolve_path(path)
    urls = [
        line.strip()
        for line in p.read_text(encoding="utf-8").splitlines()
        if line.strip() and is_http_url(line.strip())
    ]
    logger.info("Loaded %d URLs from '%s'.", len(urls), p)
    return urls


def resolve_path(path: Union[str, Path]) -> Path:
    """Раскрывает `~`, проверяет существование и возвращает Path."""
    p = Path(path).expanduser()
    if not p.is_file():
        logger.error("File not found: %s", p)
        raise FileNotFoundError(f"File not found: {p}")
    return p
