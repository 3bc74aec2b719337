"""Shared exception hierarchy for leadscore."""

from __future__ import annotations

from .base import LeadScoreError
from .config import ConfigError, RegistryError
from .parsing import AnalysisParseError

__all__ = [
    "AnalysisParseError",
    "ConfigError",
    "LeadScoreError",
    "RegistryError",
]
