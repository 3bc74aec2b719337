"""Configuration loading, validation, and normalization for leadscore runs."""

from __future__ import annotations

from leadscore.config.loader import load_config
from leadscore.config.model import LeadScoreConfig
from leadscore.config.validator import validate_config_file

__all__ = [
    "LeadScoreConfig",
    "load_config",
    "validate_config_file",
]
