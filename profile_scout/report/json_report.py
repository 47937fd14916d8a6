# profile_scout/report/json_report.py

"""
Генерация JSON-сводки для проекта ProfileScout.

Сериализация объекта CrawlSummary в файл.
"""
import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

from profile_scout.crawler.models import CrawlSummary


def summary_to_dict(summary: CrawlSummary) -> Dict[str, Any]:
    """Представление сводки в виде словаря, пригодного для json.dump."""
    return {
        'totals': {
            'seeds': len(summary.seeds),
            'seeds_failed': summary.seeds_failed,
            'pages_fetched': summary.pages_fetched,
            'pages_failed': summary.pages_failed,
            'profiles': len(summary.profile_urls),
            'duration': round(summary.duration, 3),
        },
        'seeds': [{**asdict(s), 'state': s.state.value} for s in summary.seeds],
        'profile_urls': list(summary.profile_urls),
    }


def render_json(summary: CrawlSummary, output_path: Path | str) -> Path:
    """
    Сохраняет сводку обхода в формате JSON по указанному пути.

    :param summary: объект CrawlSummary с результатами обхода
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from profile_scout.report.json_report import render_json
    report_path = render_json(summary, 'reports/summary.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    # Запись в файл с отступами и Unicode
    with output.open('w', encoding='utf-8') as f:
        json.dump(summary_to_dict(summary), f, ensure_ascii=False, indent=2)

    return output
