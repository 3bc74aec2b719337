"""Parsing-related exceptions."""

from __future__ import annotations

from leadscore.exceptions.base import LeadScoreError


class AnalysisParseError(LeadScoreError, ValueError):
    """Raised when an analysis document cannot be parsed."""
