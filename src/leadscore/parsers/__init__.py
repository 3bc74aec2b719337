"""Parsers for analysis documents."""

from __future__ import annotations

from leadscore.parsers.analysis_file import load_analysis, parse_analysis

__all__ = ["load_analysis", "parse_analysis"]
