"""Tests for analysis document parsing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from leadscore.exceptions import AnalysisParseError
from leadscore.model import AnalysisStatus, Industry, IssueCategory, IssueSeverity, LeadStatus
from leadscore.parsers import load_analysis, parse_analysis
from leadscore.registry import IssueRegistry
from leadscore.scoring import lead_status_for


def _doc(**overrides: Any) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "lead": "example.com",
        "results": [{"category": "seo", "issues": [{"code": "seo_missing_og_tags"}]}],
    }
    doc.update(overrides)
    return doc


def test_load_yaml_fixture(analyses_root: Path, registry: IssueRegistry) -> None:
    analysis = load_analysis(analyses_root / "shop.yaml", registry)

    assert analysis.lead == "shop.example.com"
    assert analysis.industry is Industry.ESHOP
    assert analysis.sequence_number == 2
    assert len(analysis.results) == 5
    assert analysis.results[3].status is AnalysisStatus.FAILED
    assert analysis.results[3].error_message == "timeout after 30s"
    assert analysis.total_score == -12


def test_load_json_fixture(analyses_root: Path, registry: IssueRegistry) -> None:
    analysis = load_analysis(analyses_root / "shop_previous.json", registry)

    assert analysis.sequence_number == 1
    assert analysis.has_critical_issues
    assert analysis.results[0].issues[0].evidence == "served over plain HTTP"


def test_short_form_resolves_through_registry(registry: IssueRegistry) -> None:
    analysis = parse_analysis(_doc(), registry)

    issue = analysis.issues[0]
    assert issue.severity is IssueSeverity.OPTIMIZATION
    assert issue.title == registry.title("seo_missing_og_tags")


def test_bare_code_string_is_accepted(registry: IssueRegistry) -> None:
    analysis = parse_analysis(_doc(results=[{"category": "http", "issues": ["ssl_not_https"]}]), registry)

    assert analysis.issues[0].code == "ssl_not_https"
    assert analysis.issues[0].evidence is None


def test_full_form_is_taken_as_is(registry: IssueRegistry) -> None:
    doc = _doc(
        results=[
            {
                "category": "security",
                "issues": [{"code": "custom_check", "severity": "critical", "title": "Custom check failed"}],
            }
        ]
    )

    issue = parse_analysis(doc, registry).issues[0]

    assert issue.category is IssueCategory.SECURITY
    assert issue.severity is IssueSeverity.CRITICAL
    assert issue.title == "Custom check failed"
    assert issue.description == ""


def test_stated_severity_is_kept_without_title(registry: IssueRegistry) -> None:
    doc = _doc(results=[{"category": "security", "issues": [{"code": "custom_check", "severity": "critical"}]}])

    analysis = parse_analysis(doc, registry)
    issue = analysis.issues[0]

    assert issue.severity is IssueSeverity.CRITICAL
    assert issue.category is IssueCategory.SECURITY
    assert issue.title == "custom_check"
    assert analysis.has_critical_issues
    assert lead_status_for(analysis) is LeadStatus.BAD


def test_stated_severity_overrides_catalogue(registry: IssueRegistry) -> None:
    doc = _doc(results=[{"category": "http", "issues": [{"code": "ssl_not_https", "severity": "optimization"}]}])

    issue = parse_analysis(doc, registry).issues[0]

    assert issue.severity is IssueSeverity.OPTIMIZATION
    assert issue.title == "ssl_not_https"


def test_full_form_category_override(registry: IssueRegistry) -> None:
    doc = _doc(
        results=[
            {
                "category": "security",
                "issues": [{"code": "c", "severity": "recommended", "title": "T", "category": "seo"}],
            }
        ]
    )

    assert parse_analysis(doc, registry).issues[0].category is IssueCategory.SEO


def test_unknown_code_falls_back_and_warns(registry: IssueRegistry, caplog: pytest.LogCaptureFixture) -> None:
    warnings: list[str] = []

    with caplog.at_level("WARNING"):
        analysis = parse_analysis(
            _doc(results=[{"category": "seo", "issues": [{"code": "legacy_code"}]}]),
            registry,
            warnings=warnings,
        )

    assert analysis.issues[0].severity is IssueSeverity.OPTIMIZATION
    assert len(warnings) == 1
    assert "legacy_code" in warnings[0]
    assert "legacy_code" in caplog.text


def test_non_string_evidence_is_stringified(registry: IssueRegistry) -> None:
    doc = _doc(results=[{"category": "seo", "issues": [{"code": "seo_missing_og_tags", "evidence": 42}]}])

    assert parse_analysis(doc, registry).issues[0].evidence == "42"


def test_defaults(registry: IssueRegistry) -> None:
    analysis = parse_analysis({"lead": " example.com "}, registry)

    assert analysis.lead == "example.com"
    assert analysis.industry is None
    assert analysis.sequence_number == 1
    assert analysis.results == ()


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ([], "analysis must be a mapping"),
        ({"results": []}, "'lead' must be a non-empty string"),
        (_doc(industry="bakery"), "'industry' must be one of"),
        (_doc(sequence_number=0), "'sequence_number' must be a positive integer"),
        (_doc(sequence_number=True), "'sequence_number' must be a positive integer"),
        (_doc(results={"category": "seo"}), "'results' must be a list"),
        (_doc(results=["seo"]), r"results\[0\] must be a mapping"),
        (_doc(results=[{"category": "nope"}]), "'category' must be one of"),
        (_doc(results=[{"category": "seo", "status": "done"}]), "'status' must be one of"),
        (_doc(results=[{"category": "seo", "error": 5}]), "'error' must be a string"),
        (_doc(results=[{"category": "seo", "raw_data": [1]}]), "'raw_data' must be a mapping"),
        (_doc(results=[{"category": "seo", "raw_data": []}]), "'raw_data' must be a mapping"),
        (_doc(results=[{"category": "seo", "raw_data": ""}]), "'raw_data' must be a mapping"),
        (_doc(results=[{"category": "seo", "issues": "a"}]), "'issues' must be a list"),
        (_doc(results=[{"category": "seo", "issues": {}}]), "'issues' must be a list"),
        (_doc(results=[{"category": "seo", "issues": ""}]), "'issues' must be a list"),
        (_doc(results=[{"category": "seo", "issues": 0}]), "'issues' must be a list"),
        (_doc(results=[{"category": "seo", "issues": [{"evidence": "x"}]}]), "'code' must be a non-empty string"),
        (_doc(results=[{"category": "seo", "issues": [7]}]), "must be a mapping or an issue code"),
        (
            _doc(results=[{"category": "seo", "issues": [{"code": "c", "severity": "fatal", "title": "T"}]}]),
            "'severity' must be one of",
        ),
        (
            _doc(results=[{"category": "seo", "issues": [{"code": "c", "severity": "critical", "title": ""}]}]),
            "'title' must be a non-empty string",
        ),
    ],
    ids=[
        "not-mapping",
        "missing-lead",
        "unknown-industry",
        "zero-sequence",
        "bool-sequence",
        "results-not-list",
        "result-not-mapping",
        "unknown-category",
        "unknown-status",
        "error-not-string",
        "raw-data-not-mapping",
        "raw-data-empty-list",
        "raw-data-empty-string",
        "issues-not-list",
        "issues-empty-mapping",
        "issues-empty-string",
        "issues-zero",
        "issue-missing-code",
        "issue-wrong-type",
        "full-form-unknown-severity",
        "full-form-blank-title",
    ],
)
def test_structural_problems_raise(raw: Any, message: str, registry: IssueRegistry) -> None:
    with pytest.raises(AnalysisParseError, match=message):
        parse_analysis(raw, registry)


def test_error_location_includes_source_and_index(registry: IssueRegistry) -> None:
    raw = _doc(results=[{"category": "seo"}, {"category": "seo", "issues": [{"code": ""}]}])

    with pytest.raises(AnalysisParseError, match=r"lead\.json: results\[1\]\.issues\[0\]"):
        parse_analysis(raw, registry, source="lead.json")


class TestLoadAnalysisFiles:
    def test_unsupported_suffix(self, tmp_path: Path, registry: IssueRegistry) -> None:
        path = tmp_path / "lead.txt"
        path.write_text("lead: a", encoding="utf-8")

        with pytest.raises(AnalysisParseError, match="unsupported file type"):
            load_analysis(path, registry)

    def test_missing_file(self, tmp_path: Path, registry: IssueRegistry) -> None:
        with pytest.raises(AnalysisParseError, match="cannot read analysis"):
            load_analysis(tmp_path / "missing.json", registry)

    def test_malformed_json(self, tmp_path: Path, registry: IssueRegistry) -> None:
        path = tmp_path / "lead.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(AnalysisParseError, match="malformed analysis document"):
            load_analysis(path, registry)

    def test_malformed_yaml(self, tmp_path: Path, registry: IssueRegistry) -> None:
        path = tmp_path / "lead.yml"
        path.write_text("lead: [unclosed\n", encoding="utf-8")

        with pytest.raises(AnalysisParseError, match="malformed analysis document"):
            load_analysis(path, registry)

    @pytest.mark.parametrize("name", ["lead.json", "lead.yaml"])
    def test_non_utf8_file(self, tmp_path: Path, registry: IssueRegistry, name: str) -> None:
        path = tmp_path / name
        path.write_bytes(b"\xff\xfe")

        with pytest.raises(AnalysisParseError, match="not valid UTF-8"):
            load_analysis(path, registry)

    def test_invalid_fixture_reports_path(self, analyses_root: Path, registry: IssueRegistry) -> None:
        with pytest.raises(AnalysisParseError, match="broken.yaml"):
            load_analysis(analyses_root / "broken.yaml", registry)

    def test_json_round_trip_from_disk(self, tmp_path: Path, registry: IssueRegistry) -> None:
        path = tmp_path / "lead.json"
        path.write_text(json.dumps(_doc(industry="restaurant")), encoding="utf-8")

        analysis = load_analysis(path, registry)

        assert analysis.industry is Industry.RESTAURANT
        assert analysis.issue_codes == ("seo_missing_og_tags",)
