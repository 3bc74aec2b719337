"""Base exception for leadscore."""

from __future__ import annotations


class LeadScoreError(Exception):
    """Base class for all errors raised by leadscore."""
