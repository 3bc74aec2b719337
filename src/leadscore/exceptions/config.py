"""Configuration-related exceptions."""

from __future__ import annotations

from leadscore.exceptions.base import LeadScoreError


class ConfigError(LeadScoreError, ValueError):
    """Raised when scoring configuration is invalid."""


class RegistryError(ConfigError):
    """Raised when an issue catalogue file is invalid."""
