"""Output writer for the JSON lead report."""

from __future__ import annotations

from pathlib import Path

from leadscore.constants.reporting import (
    REPORT_FILENAME,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
    SCHEMA_VERSION,
)
from leadscore.io import write_json_atomic
from leadscore.model import LeadReport
from leadscore.scoring import worst_categories
from leadscore.types import JsonValue


def write_report_json(out_root: Path, report: LeadReport) -> Path:
    """Write ``report.json`` under the output root and return the path."""
    path = out_root / REPORT_FILENAME
    write_json_atomic(
        path=path,
        payload=build_report_payload(report),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    return path


def build_report_payload(report: LeadReport) -> dict[str, JsonValue]:
    """Build the deterministic report document for *report*."""
    payload: dict[str, JsonValue] = {"schema_version": SCHEMA_VERSION}
    payload.update(report.to_dict())
    payload["worst_categories"] = [
        {"category": category.value, "score": score} for category, score in worst_categories(report.category_scores)
    ]
    return payload
