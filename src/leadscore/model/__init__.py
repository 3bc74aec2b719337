"""Core data models for leadscore."""

from .entities import (
    Analysis,
    AnalysisDelta,
    AnalysisResult,
    Issue,
    IssueDefinition,
    LeadReport,
    ScoreResult,
)
from .enums import (
    AnalysisStatus,
    Industry,
    IssueCategory,
    IssueSeverity,
    LeadStatus,
    quality_statuses,
    universal_categories,
)

__all__ = [
    "Analysis",
    "AnalysisDelta",
    "AnalysisResult",
    "AnalysisStatus",
    "Industry",
    "Issue",
    "IssueCategory",
    "IssueDefinition",
    "IssueSeverity",
    "LeadReport",
    "LeadStatus",
    "ScoreResult",
    "quality_statuses",
    "universal_categories",
]
