"""Reporting package for leadscore outputs."""

from __future__ import annotations

from typing import Any

__all__ = ["build_report_payload", "write_report_json"]


def __getattr__(name: str) -> Any:
    """Lazily expose reporting APIs to avoid import cycles at package import time."""
    if name in {"build_report_payload", "write_report_json"}:
        from .writer import build_report_payload, write_report_json

        exports = {
            "build_report_payload": build_report_payload,
            "write_report_json": write_report_json,
        }
        return exports[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
