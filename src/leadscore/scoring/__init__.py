"""Scoring and lead status classification."""

from __future__ import annotations

from .analysis import apply_ignore_codes, calculate_delta
from .score import (
    calculate_scores,
    determine_lead_status,
    is_at_or_below,
    lead_status_for,
    severity_counts,
    sorted_issues,
    worst_categories,
)

__all__ = [
    "apply_ignore_codes",
    "calculate_delta",
    "calculate_scores",
    "determine_lead_status",
    "is_at_or_below",
    "lead_status_for",
    "severity_counts",
    "sorted_issues",
    "worst_categories",
]
