"""Issue catalogue: metadata for every known issue code."""

from __future__ import annotations

from .catalog import IssueRegistry
from .loader import load_registry, load_registry_file

__all__ = ["IssueRegistry", "load_registry", "load_registry_file"]
