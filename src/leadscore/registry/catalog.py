"""In-memory issue catalogue keyed by issue code."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from leadscore.constants.registry import FALLBACK_CATEGORY, FALLBACK_SEVERITY
from leadscore.model import Issue, IssueCategory, IssueDefinition, IssueSeverity


class IssueRegistry:
    """Lookup of issue metadata by code.

    Analyses persist only ``code`` and ``evidence`` per issue; title, severity
    and the rest are resolved here. Codes missing from the catalogue resolve
    to a low-impact fallback so legacy or dynamically generated codes still
    contribute to the score.
    """

    def __init__(self, definitions: Iterable[IssueDefinition] = ()) -> None:
        self._definitions: dict[str, IssueDefinition] = {}
        for definition in definitions:
            self._definitions[definition.code] = definition

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, code: object) -> bool:
        return code in self._definitions

    def __iter__(self) -> Iterator[IssueDefinition]:
        for code in self.codes():
            yield self._definitions[code]

    def get(self, code: str) -> IssueDefinition | None:
        return self._definitions.get(code)

    def has(self, code: str) -> bool:
        return code in self._definitions

    def title(self, code: str) -> str:
        definition = self._definitions.get(code)
        return definition.title if definition is not None else code

    def severity(self, code: str) -> IssueSeverity:
        definition = self._definitions.get(code)
        return definition.severity if definition is not None else IssueSeverity(FALLBACK_SEVERITY)

    def category(self, code: str) -> IssueCategory:
        definition = self._definitions.get(code)
        return definition.category if definition is not None else IssueCategory(FALLBACK_CATEGORY)

    def description(self, code: str) -> str:
        definition = self._definitions.get(code)
        return definition.description if definition is not None else ""

    def impact(self, code: str) -> str:
        definition = self._definitions.get(code)
        return definition.impact if definition is not None else ""

    def codes(self) -> list[str]:
        """Return all registered codes, sorted."""
        return sorted(self._definitions)

    def by_category(self, category: IssueCategory) -> list[IssueDefinition]:
        return [definition for definition in self if definition.category is category]

    def by_severity(self, severity: IssueSeverity) -> list[IssueDefinition]:
        return [definition for definition in self if definition.severity is severity]

    def build_issue(self, code: str, *, evidence: str | None = None) -> Issue:
        """Build a full :class:`Issue` for *code*, falling back for unknown codes."""
        definition = self._definitions.get(code)
        if definition is not None:
            return definition.to_issue(evidence)
        return Issue(
            category=IssueCategory(FALLBACK_CATEGORY),
            severity=IssueSeverity(FALLBACK_SEVERITY),
            code=code,
            title=code,
            description="",
            evidence=evidence,
        )
