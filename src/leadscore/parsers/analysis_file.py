"""Parser for analysis documents (JSON or YAML).

An analysis document holds the analyzer results for one lead. Issues are
usually stored in short form (``code`` plus optional ``evidence``) and are
resolved through the issue catalogue. An issue that states its own
``severity`` is taken in full form; its ``title`` defaults to the code.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from leadscore.constants.config import ANALYSIS_FILE_SUFFIXES
from leadscore.exceptions import AnalysisParseError
from leadscore.io import load_json_file
from leadscore.model import (
    Analysis,
    AnalysisResult,
    AnalysisStatus,
    Industry,
    Issue,
    IssueCategory,
    IssueSeverity,
)
from leadscore.registry import IssueRegistry

logger = logging.getLogger(__name__)


def load_analysis(path: Path, registry: IssueRegistry, *, warnings: list[str] | None = None) -> Analysis:
    """Read and parse an analysis document from *path*."""
    suffix = path.suffix.lower()
    if suffix not in ANALYSIS_FILE_SUFFIXES:
        raise AnalysisParseError(
            f"{path}: unsupported file type {suffix or '(none)'!r}; "
            f"expected one of {', '.join(sorted(ANALYSIS_FILE_SUFFIXES))}"
        )

    try:
        if suffix == ".json":
            raw = load_json_file(path)
        else:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise AnalysisParseError(f"{path}: cannot read analysis: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise AnalysisParseError(f"{path}: analysis is not valid UTF-8: {exc}") from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise AnalysisParseError(f"{path}: malformed analysis document: {exc}") from exc

    return parse_analysis(raw, registry, source=str(path), warnings=warnings)


def parse_analysis(
    raw: Any,
    registry: IssueRegistry,
    *,
    source: str = "<analysis>",
    warnings: list[str] | None = None,
) -> Analysis:
    """Build an :class:`Analysis` from a decoded document."""
    if not isinstance(raw, dict):
        raise AnalysisParseError(f"{source}: analysis must be a mapping, got {type(raw).__name__}")

    lead = raw.get("lead")
    if not isinstance(lead, str) or not lead.strip():
        raise AnalysisParseError(f"{source}: 'lead' must be a non-empty string")

    industry = None
    if raw.get("industry") is not None:
        industry = _parse_enum(Industry, raw["industry"], source, "industry")

    sequence_number = raw.get("sequence_number", 1)
    if isinstance(sequence_number, bool) or not isinstance(sequence_number, int) or sequence_number < 1:
        raise AnalysisParseError(f"{source}: 'sequence_number' must be a positive integer")

    results_raw = raw.get("results", [])
    if results_raw is None:
        results_raw = []
    if not isinstance(results_raw, list):
        raise AnalysisParseError(f"{source}: 'results' must be a list")

    results = tuple(
        _parse_result(item, registry, f"{source}: results[{index}]", warnings)
        for index, item in enumerate(results_raw)
    )
    return Analysis(
        lead=lead.strip(),
        results=results,
        industry=industry,
        sequence_number=sequence_number,
    )


def _parse_result(
    raw: Any,
    registry: IssueRegistry,
    where: str,
    warnings: list[str] | None,
) -> AnalysisResult:
    if not isinstance(raw, dict):
        raise AnalysisParseError(f"{where} must be a mapping")

    category = _parse_enum(IssueCategory, raw.get("category"), where, "category")
    status = AnalysisStatus.COMPLETED
    if raw.get("status") is not None:
        status = _parse_enum(AnalysisStatus, raw["status"], where, "status")

    error_message = raw.get("error")
    if error_message is not None and not isinstance(error_message, str):
        raise AnalysisParseError(f"{where}: 'error' must be a string")

    raw_data = raw.get("raw_data")
    if raw_data is None:
        raw_data = {}
    if not isinstance(raw_data, dict):
        raise AnalysisParseError(f"{where}: 'raw_data' must be a mapping")

    issues_raw = raw.get("issues")
    if issues_raw is None:
        issues_raw = []
    if not isinstance(issues_raw, list):
        raise AnalysisParseError(f"{where}: 'issues' must be a list")

    issues = tuple(
        _parse_issue(item, category, registry, f"{where}.issues[{index}]", warnings)
        for index, item in enumerate(issues_raw)
    )
    return AnalysisResult(
        category=category,
        status=status,
        issues=issues,
        error_message=error_message,
        raw_data=raw_data,
    )


def _parse_issue(
    raw: Any,
    result_category: IssueCategory,
    registry: IssueRegistry,
    where: str,
    warnings: list[str] | None,
) -> Issue:
    if isinstance(raw, str):
        raw = {"code": raw}
    if not isinstance(raw, dict):
        raise AnalysisParseError(f"{where} must be a mapping or an issue code")

    code = raw.get("code")
    if not isinstance(code, str) or not code.strip():
        raise AnalysisParseError(f"{where}: 'code' must be a non-empty string")
    code = code.strip()

    evidence = raw.get("evidence")
    if evidence is not None and not isinstance(evidence, str):
        evidence = str(evidence)

    if "severity" in raw:
        return _parse_full_issue(raw, code, evidence, result_category, where)

    if not registry.has(code):
        warning = f"Unknown issue code '{code}' in {where}; scored as {registry.severity(code).value}."
        logger.warning(warning)
        if warnings is not None:
            warnings.append(warning)
    return registry.build_issue(code, evidence=evidence)


def _parse_full_issue(
    raw: dict[str, Any],
    code: str,
    evidence: str | None,
    result_category: IssueCategory,
    where: str,
) -> Issue:
    category = result_category
    if raw.get("category") is not None:
        category = _parse_enum(IssueCategory, raw["category"], where, "category")
    severity = _parse_enum(IssueSeverity, raw["severity"], where, "severity")

    title = raw.get("title", code)
    if not isinstance(title, str) or not title.strip():
        raise AnalysisParseError(f"{where}: 'title' must be a non-empty string")

    description = raw.get("description") or ""
    impact = raw.get("impact")
    if not isinstance(description, str) or (impact is not None and not isinstance(impact, str)):
        raise AnalysisParseError(f"{where}: 'description' and 'impact' must be strings")

    return Issue(
        category=category,
        severity=severity,
        code=code,
        title=title.strip(),
        description=description,
        evidence=evidence,
        impact=impact,
    )


def _parse_enum(enum_cls: type[Enum], value: Any, where: str, field: str) -> Any:
    valid = [member.value for member in enum_cls]
    if not isinstance(value, str) or value not in valid:
        raise AnalysisParseError(f"{where}: '{field}' must be one of {valid}, got {value!r}")
    return enum_cls(value)
