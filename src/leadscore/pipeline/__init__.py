"""Scoring pipeline package."""

from __future__ import annotations

from typing import Any

__all__ = ["build_report", "score_analysis_file"]


def __getattr__(name: str) -> Any:
    """Lazily expose pipeline APIs to avoid import cycles at package import time."""
    if name in {"build_report", "score_analysis_file"}:
        from .orchestrator import build_report, score_analysis_file

        exports = {
            "build_report": build_report,
            "score_analysis_file": score_analysis_file,
        }
        return exports[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
