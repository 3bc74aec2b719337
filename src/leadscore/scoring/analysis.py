"""Analysis-level helpers: ignore filters and run-over-run deltas."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace

from leadscore.model import Analysis, AnalysisDelta, IssueCategory


def apply_ignore_codes(
    analysis: Analysis,
    ignore_codes: Mapping[IssueCategory, tuple[str, ...]],
) -> Analysis:
    """Drop ignored issue codes from each result before scoring.

    Codes are ignored per category: ignoring ``seo_missing_og_tags`` under
    ``seo`` leaves other categories untouched.
    """
    if not ignore_codes:
        return analysis

    results = []
    for result in analysis.results:
        ignored = ignore_codes.get(result.category)
        if ignored:
            kept = tuple(issue for issue in result.issues if issue.code not in ignored)
            result = replace(result, issues=kept)
        results.append(result)
    return replace(analysis, results=tuple(results))


def calculate_delta(current: Analysis, previous: Analysis) -> AnalysisDelta:
    """Compare *current* with the lead's *previous* analysis."""
    score_delta = current.total_score - previous.total_score

    current_codes = set(current.issue_codes)
    previous_codes = set(previous.issue_codes)
    added = current_codes - previous_codes
    removed = previous_codes - current_codes

    return AnalysisDelta(
        previous_sequence_number=previous.sequence_number,
        score_delta=score_delta,
        is_improved=score_delta > 0,
        added=tuple(sorted(added)),
        removed=tuple(sorted(removed)),
        unchanged_count=len(current_codes & previous_codes),
        has_new_critical_issues=any(issue.is_critical and issue.code in added for issue in current.issues),
    )
