"""Scoring utilities for issues and lead status classification."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from leadscore.constants.scoring import (
    BAD_THRESHOLD,
    GOOD_THRESHOLD,
    MIDDLE_THRESHOLD,
    VERY_BAD_THRESHOLD,
    WORST_CATEGORIES_DEFAULT_LIMIT,
)
from leadscore.model import Analysis, Issue, IssueCategory, IssueSeverity, LeadStatus, ScoreResult


def calculate_scores(issues: Iterable[Issue]) -> ScoreResult:
    """Sum issue weights per category and overall.

    Every category is present in the result, with ``0`` when no issue of
    that category occurred, so ``sum(category_scores.values())`` always
    equals ``total_score``.
    """
    category_scores = {category: 0 for category in IssueCategory}
    for issue in issues:
        category_scores[issue.category] += issue.weight

    return ScoreResult(
        category_scores=category_scores,
        total_score=sum(category_scores.values()),
    )


def determine_lead_status(total_score: int, has_critical_issue: bool) -> LeadStatus:
    """Map a total score to a quality tier.

    Bands are inclusive at their lower bound. A critical issue caps the
    result at BAD, but never lifts a VERY_BAD score.
    """
    if total_score < VERY_BAD_THRESHOLD:
        return LeadStatus.VERY_BAD

    if has_critical_issue:
        return LeadStatus.BAD

    if total_score < BAD_THRESHOLD:
        return LeadStatus.BAD
    if total_score < MIDDLE_THRESHOLD:
        return LeadStatus.MIDDLE
    if total_score < GOOD_THRESHOLD:
        return LeadStatus.QUALITY_GOOD
    return LeadStatus.SUPER


def lead_status_for(analysis: Analysis) -> LeadStatus:
    """Classify a finished analysis by its total score and critical issues."""
    return determine_lead_status(analysis.total_score, analysis.has_critical_issues)


def severity_counts(issues: Iterable[Issue]) -> dict[IssueSeverity, int]:
    """Count issues by severity with stable keys."""
    counts = Counter(issue.severity for issue in issues)
    return {severity: int(counts.get(severity, 0)) for severity in IssueSeverity}


def worst_categories(
    category_scores: dict[IssueCategory, int],
    limit: int = WORST_CATEGORIES_DEFAULT_LIMIT,
) -> list[tuple[IssueCategory, int]]:
    """Return penalized categories, worst first, ties broken by category value."""
    penalized = [(category, score) for category, score in category_scores.items() if score < 0]
    return sorted(penalized, key=lambda item: (item[1], item[0].value))[:limit]


def is_at_or_below(status: LeadStatus, threshold: LeadStatus) -> bool:
    """Return True when quality tier *status* is no better than *threshold*."""
    return status.quality_rank <= threshold.quality_rank


def sorted_issues(issues: Iterable[Issue]) -> list[Issue]:
    """Return issues ordered by heaviest penalty, then category and code."""
    return sorted(issues, key=lambda issue: (issue.weight, issue.category.value, issue.code))
