"""Loader for YAML issue catalogue files.

The built-in catalogue ships next to this module. Additional catalogue files
are layered on top in order; a later definition replaces an earlier one with
the same code.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml

from leadscore.constants.registry import (
    ALLOWED_DEFINITION_KEYS,
    BUILTIN_REGISTRY_PATH,
    REQUIRED_DEFINITION_KEYS,
)
from leadscore.exceptions import RegistryError
from leadscore.model import IssueCategory, IssueDefinition, IssueSeverity
from leadscore.registry.catalog import IssueRegistry

logger = logging.getLogger(__name__)

_VALID_CATEGORIES: frozenset[str] = frozenset(category.value for category in IssueCategory)
_VALID_SEVERITIES: frozenset[str] = frozenset(severity.value for severity in IssueSeverity)


def load_registry(extra_files: Sequence[Path] = (), *, include_builtin: bool = True) -> IssueRegistry:
    """Load the built-in catalogue plus *extra_files* into an :class:`IssueRegistry`."""
    paths = [BUILTIN_REGISTRY_PATH] if include_builtin else []
    paths.extend(extra_files)

    definitions: dict[str, IssueDefinition] = {}
    for path in paths:
        for definition in load_registry_file(path):
            if definition.code in definitions:
                logger.debug("Issue code %s redefined by %s", definition.code, path)
            definitions[definition.code] = definition

    logger.debug("Loaded %d issue definitions from %d file(s)", len(definitions), len(paths))
    return IssueRegistry(definitions.values())


def load_registry_file(path: Path) -> list[IssueDefinition]:
    """Parse and validate one catalogue file.

    Raises:
        RegistryError: when the file is unreadable or any definition is invalid.
    """
    raw = _load_yaml_file(path)
    definitions: list[IssueDefinition] = []
    for category_name, entries in raw.items():
        if category_name not in _VALID_CATEGORIES:
            raise RegistryError(f"Issue catalogue {path}: unknown category {category_name!r}")
        if entries is None:
            continue
        if not isinstance(entries, dict):
            raise RegistryError(f"Issue catalogue {path}: category {category_name!r} must map codes to definitions")
        category = IssueCategory(category_name)
        for code, entry in entries.items():
            definitions.append(_build_definition(path, category, code, entry))
    return definitions


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load and parse a single YAML file with safe_load only."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RegistryError(f"Cannot read issue catalogue {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise RegistryError(f"Issue catalogue {path} is not valid UTF-8: {exc}") from exc
    except yaml.YAMLError as exc:
        raise RegistryError(f"Invalid YAML in {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise RegistryError(f"Issue catalogue {path} must contain a mapping")
    return raw


def _build_definition(path: Path, category: IssueCategory, code: Any, entry: Any) -> IssueDefinition:
    if not isinstance(code, str) or not code.strip():
        raise RegistryError(f"Issue catalogue {path}: issue codes must be non-empty strings, got {code!r}")
    where = f"Issue catalogue {path}: {code}"
    if not isinstance(entry, dict):
        raise RegistryError(f"{where} must be a mapping")

    unknown = set(entry) - ALLOWED_DEFINITION_KEYS
    if unknown:
        raise RegistryError(f"{where} has unknown keys: {sorted(unknown)}")
    for key in sorted(REQUIRED_DEFINITION_KEYS):
        if key not in entry:
            raise RegistryError(f"{where} missing required key '{key}'")

    severity = entry["severity"]
    if not isinstance(severity, str) or severity not in _VALID_SEVERITIES:
        raise RegistryError(f"{where}: severity must be one of {sorted(_VALID_SEVERITIES)}, got {severity!r}")
    title = entry["title"]
    if not isinstance(title, str) or not title.strip():
        raise RegistryError(f"{where}: title must be a non-empty string")
    for key in ("description", "impact"):
        if key in entry and not isinstance(entry[key], str):
            raise RegistryError(f"{where}: {key} must be a string")

    return IssueDefinition(
        code=code,
        category=category,
        severity=IssueSeverity(severity),
        title=title.strip(),
        description=entry.get("description", ""),
        impact=entry.get("impact", ""),
    )
