"""Data entities for issues, analyses, and lead reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from leadscore.model.enums import AnalysisStatus, Industry, IssueCategory, IssueSeverity, LeadStatus
from leadscore.types import JsonObject, JsonValue, StoredIssue

if TYPE_CHECKING:
    from leadscore.registry import IssueRegistry


@dataclass(frozen=True)
class Issue:
    """A single defect detected on an analyzed website."""

    category: IssueCategory
    severity: IssueSeverity
    code: str
    title: str
    description: str
    evidence: str | None = None
    impact: str | None = None

    @property
    def weight(self) -> int:
        return self.severity.weight

    @property
    def is_critical(self) -> bool:
        return self.severity is IssueSeverity.CRITICAL

    def to_storage_dict(self) -> StoredIssue:
        """Return the persisted form: only code and evidence are kept."""
        return {"code": self.code, "evidence": self.evidence}

    def to_dict(self) -> dict[str, str | int | None]:
        """Return the full form used for reports."""
        return {
            "category": self.category.value,
            "severity": self.severity.value,
            "weight": self.weight,
            "code": self.code,
            "title": self.title,
            "description": self.description,
            "evidence": self.evidence,
            "impact": self.impact,
        }

    @classmethod
    def from_storage_dict(cls, data: StoredIssue, registry: IssueRegistry) -> Issue:
        """Rebuild a full issue from its persisted form using *registry* metadata."""
        return registry.build_issue(data["code"], evidence=data.get("evidence"))


@dataclass(frozen=True)
class IssueDefinition:
    """Catalogue metadata for one issue code."""

    code: str
    category: IssueCategory
    severity: IssueSeverity
    title: str
    description: str = ""
    impact: str = ""

    def to_issue(self, evidence: str | None = None) -> Issue:
        return Issue(
            category=self.category,
            severity=self.severity,
            code=self.code,
            title=self.title,
            description=self.description,
            evidence=evidence,
            impact=self.impact or None,
        )


@dataclass(frozen=True)
class ScoreResult:
    """Per-category and total scores for a set of issues."""

    category_scores: dict[IssueCategory, int]
    total_score: int

    def to_dict(self) -> dict[str, JsonValue]:
        return {
            "category_scores": {category.value: score for category, score in self.category_scores.items()},
            "total_score": self.total_score,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Output of one analyzer for one category."""

    category: IssueCategory
    status: AnalysisStatus = AnalysisStatus.COMPLETED
    issues: tuple[Issue, ...] = ()
    error_message: str | None = None
    raw_data: JsonObject = field(default_factory=dict)

    @property
    def is_completed(self) -> bool:
        return self.status is AnalysisStatus.COMPLETED

    @property
    def score(self) -> int:
        """Sum of this result's issue weights."""
        return sum(issue.weight for issue in self.issues)

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    @property
    def critical_issue_count(self) -> int:
        return sum(1 for issue in self.issues if issue.is_critical)

    @property
    def has_critical_issues(self) -> bool:
        return self.critical_issue_count > 0


@dataclass(frozen=True)
class Analysis:
    """All analyzer results collected for one lead in one run.

    Only completed results count towards scores, issues and codes; failed
    or unfinished analyzers are reported but never penalize the lead.
    """

    lead: str
    results: tuple[AnalysisResult, ...] = ()
    industry: Industry | None = None
    sequence_number: int = 1

    @property
    def completed_results(self) -> tuple[AnalysisResult, ...]:
        return tuple(result for result in self.results if result.is_completed)

    @property
    def issues(self) -> tuple[Issue, ...]:
        return tuple(issue for result in self.completed_results for issue in result.issues)

    @property
    def total_score(self) -> int:
        return sum(result.score for result in self.completed_results)

    @property
    def issue_count(self) -> int:
        return sum(result.issue_count for result in self.completed_results)

    @property
    def critical_issue_count(self) -> int:
        return sum(result.critical_issue_count for result in self.completed_results)

    @property
    def has_critical_issues(self) -> bool:
        return self.critical_issue_count > 0

    @property
    def issue_codes(self) -> tuple[str, ...]:
        """Unique issue codes in first-seen order."""
        return tuple(dict.fromkeys(issue.code for issue in self.issues))

    @property
    def completed_results_count(self) -> int:
        return len(self.completed_results)

    @property
    def failed_results_count(self) -> int:
        return sum(1 for result in self.results if result.status is AnalysisStatus.FAILED)

    @property
    def all_results_complete(self) -> bool:
        if not self.results:
            return False
        return all(
            result.status not in (AnalysisStatus.PENDING, AnalysisStatus.RUNNING) for result in self.results
        )

    @property
    def status(self) -> AnalysisStatus:
        """Overall status: FAILED only when every analyzer failed."""
        if not self.results:
            return AnalysisStatus.PENDING
        if not self.all_results_complete:
            return AnalysisStatus.RUNNING
        if self.failed_results_count == len(self.results):
            return AnalysisStatus.FAILED
        return AnalysisStatus.COMPLETED


@dataclass(frozen=True)
class AnalysisDelta:
    """Change between a lead's previous analysis and the current one."""

    previous_sequence_number: int
    score_delta: int
    is_improved: bool
    added: tuple[str, ...]
    removed: tuple[str, ...]
    unchanged_count: int
    has_new_critical_issues: bool

    def to_dict(self) -> dict[str, JsonValue]:
        return {
            "previous_sequence_number": self.previous_sequence_number,
            "score_delta": self.score_delta,
            "is_improved": self.is_improved,
            "added": list(self.added),
            "removed": list(self.removed),
            "unchanged_count": self.unchanged_count,
            "has_new_critical_issues": self.has_new_critical_issues,
        }


@dataclass(frozen=True)
class LeadReport:
    """Scored and classified outcome for one lead."""

    lead: str
    industry: Industry | None
    sequence_number: int
    analysis_status: AnalysisStatus
    status: LeadStatus
    total_score: int
    category_scores: dict[IssueCategory, int]
    issue_count: int
    critical_issue_count: int
    counts_by_severity: dict[IssueSeverity, int]
    issues: tuple[Issue, ...]
    completed_results: int
    failed_results: int
    delta: AnalysisDelta | None = None
    warnings: tuple[str, ...] = ()
    duration_seconds: float = 0.0

    def to_dict(self) -> dict[str, JsonValue]:
        return {
            "lead": self.lead,
            "industry": self.industry.value if self.industry is not None else None,
            "sequence_number": self.sequence_number,
            "analysis_status": self.analysis_status.value,
            "status": self.status.value,
            "total_score": self.total_score,
            "category_scores": {category.value: score for category, score in self.category_scores.items()},
            "issue_count": self.issue_count,
            "critical_issue_count": self.critical_issue_count,
            "counts_by_severity": {severity.value: count for severity, count in self.counts_by_severity.items()},
            "issues": [issue.to_dict() for issue in self.issues],
            "completed_results": self.completed_results,
            "failed_results": self.failed_results,
            "delta": self.delta.to_dict() if self.delta is not None else None,
            "warnings": list(self.warnings),
            "duration_seconds": round(self.duration_seconds, 6),
        }
