"""Constants for the issue catalogue format."""

from __future__ import annotations

from pathlib import Path

BUILTIN_REGISTRY_PATH: Path = Path(__file__).resolve().parent.parent / "registry" / "issues.yaml"

REQUIRED_DEFINITION_KEYS: frozenset[str] = frozenset({"severity", "title"})
ALLOWED_DEFINITION_KEYS: frozenset[str] = REQUIRED_DEFINITION_KEYS | {"description", "impact"}

# Unknown codes resolve to these so legacy or dynamic codes still score.
FALLBACK_CATEGORY: str = "http"
FALLBACK_SEVERITY: str = "optimization"
