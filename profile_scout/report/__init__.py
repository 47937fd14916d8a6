# File: profile_scout/report/__init__.py
"""profile_scout.report: запись результатов обхода (текстовый список и JSON-сводка)."""

from __future__ import annotations

from profile_scout.report.json_report import render_json
from profile_scout.report.text_report import write_results

__all__ = ["render_json", "write_results"]
