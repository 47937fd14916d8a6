# profile_scout/report/text_report.py
"""Сохранение уникальных ссылок на профили: по одной на строку."""
from __future__ import annotations

from pathlib import Path
from typing import Collection, Optional, Union

from profile_scout.logger import logger


def write_results(urls: Collection[str], output_path: Union[Path, str]) -> Optional[Path]:
    """
    Записывает *urls* в текстовый файл и возвращает его путь.

    Если ссылок нет, файл не создаётся и возвращается None.
    Ошибки ввода-вывода пробрасываются вызывающему.
    """
    if not urls:
        logger.warning("No profile URLs were collected to write.")
        return None

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as f:
        for url in urls:
            f.write(f"{url}\n")

    logger.info("Successfully wrote %d unique profile URLs to '%s'.", len(urls), output)
    return output
