"""Typed issue payload structures."""

from __future__ import annotations

from typing import TypedDict


class StoredIssue(TypedDict):
    """Persisted form of an issue; metadata is resolved from the catalogue."""

    code: str
    evidence: str | None
