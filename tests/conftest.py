"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest

from leadscore.registry import IssueRegistry, load_registry


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def analyses_root(fixtures_root: Path) -> Path:
    """Return the directory holding sample analysis documents."""
    return fixtures_root / "analyses"


@pytest.fixture(scope="session")
def registry() -> IssueRegistry:
    """Return the built-in issue catalogue."""
    return load_registry()
