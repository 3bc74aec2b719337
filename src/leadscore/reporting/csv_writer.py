"""CSV export writer for lead issues."""

from __future__ import annotations

import csv
import io
from pathlib import Path

from leadscore.constants.reporting import CSV_COLUMNS, CSV_ISSUES_FILENAME
from leadscore.io import write_text_atomic
from leadscore.model import LeadReport


def write_csv_issues(out_root: Path, report: LeadReport) -> Path:
    """Write ``issues.csv`` under the output root and return the path."""
    csv_path = out_root / CSV_ISSUES_FILENAME
    content = render_csv_string(report)
    write_text_atomic(
        path=csv_path,
        content=content,
        temp_prefix=".csv_tmp_",
        temp_suffix=".csv",
    )
    return csv_path


def render_csv_string(report: LeadReport) -> str:
    """Render the report's issues as a CSV string (useful for testing)."""
    sorted_issues = sorted(report.issues, key=lambda issue: (issue.weight, issue.code))

    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(CSV_COLUMNS)
    for issue in sorted_issues:
        writer.writerow(
            (
                report.lead,
                issue.category.value,
                issue.severity.value,
                issue.weight,
                issue.code,
                issue.title,
                issue.evidence if issue.evidence is not None else "",
            )
        )
    return buf.getvalue()
