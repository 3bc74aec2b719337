"""Config data model for leadscore runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from leadscore.constants.config import DEFAULT_OUTPUT_FORMATS
from leadscore.model import Industry, IssueCategory


@dataclass(frozen=True)
class LeadScoreConfig:
    """Resolved scoring config."""

    industry: Industry | None = None
    ignore_codes: dict[IssueCategory, tuple[str, ...]] = field(default_factory=dict)
    registry_files: tuple[Path, ...] = ()
    output_formats: tuple[str, ...] = DEFAULT_OUTPUT_FORMATS

    @property
    def ignored_code_count(self) -> int:
        """Total number of ignored codes across categories."""
        return sum(len(codes) for codes in self.ignore_codes.values())
