"""End-to-end scoring of one analysis document.

``score_analysis_file`` is the primary entry point used by the CLI.
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from pathlib import Path

from leadscore.config import load_config
from leadscore.constants.reporting import VALID_OUTPUT_FORMATS
from leadscore.exceptions import ConfigError
from leadscore.model import Analysis, AnalysisStatus, Industry, LeadReport
from leadscore.parsers import load_analysis
from leadscore.registry import load_registry
from leadscore.scoring import (
    apply_ignore_codes,
    calculate_delta,
    calculate_scores,
    lead_status_for,
    severity_counts,
    sorted_issues,
)

logger = logging.getLogger(__name__)


def score_analysis_file(
    input_path: Path,
    *,
    previous_path: Path | None = None,
    config_path: Path | None = None,
    out: Path | None = None,
    industry: Industry | None = None,
    output_formats: tuple[str, ...] | None = None,
) -> LeadReport:
    """Score an analysis file and optionally write report files under *out*."""
    started_at = time.perf_counter()
    input_path = input_path.resolve()
    if not input_path.is_file():
        raise ConfigError(f"Analysis file does not exist: {input_path}")

    config = load_config(input_path.parent, config_path)
    formats = output_formats if output_formats is not None else config.output_formats
    invalid_formats = set(formats) - VALID_OUTPUT_FORMATS
    if invalid_formats:
        raise ConfigError(
            f"Unknown output format(s): {', '.join(sorted(invalid_formats))}. "
            f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}"
        )

    if out is not None:
        out = out.resolve()
        try:
            out.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"Output directory is not writable: {out} ({exc})") from exc

    registry = load_registry(config.registry_files)

    warnings: list[str] = []
    analysis = load_analysis(input_path, registry, warnings=warnings)
    previous = None
    if previous_path is not None:
        previous = load_analysis(previous_path.resolve(), registry, warnings=warnings)
        if previous.lead != analysis.lead:
            _warn(warnings, f"Previous analysis is for '{previous.lead}', current is for '{analysis.lead}'.")
        previous = apply_ignore_codes(previous, config.ignore_codes)

    resolved_industry = industry or analysis.industry or config.industry
    analysis = replace(apply_ignore_codes(analysis, config.ignore_codes), industry=resolved_industry)

    report = build_report(analysis, previous=previous, warnings=warnings)
    report = replace(report, duration_seconds=time.perf_counter() - started_at)

    if out is not None:
        if "json" in formats:
            from leadscore.reporting.writer import write_report_json

            write_report_json(out, report)
        if "csv" in formats:
            from leadscore.reporting.csv_writer import write_csv_issues

            write_csv_issues(out, report)

    logger.info(
        "Scored %s: %s (score %d, %d issues)",
        report.lead,
        report.status.value,
        report.total_score,
        report.issue_count,
    )
    return report


def build_report(
    analysis: Analysis,
    *,
    previous: Analysis | None = None,
    warnings: list[str] | None = None,
) -> LeadReport:
    """Aggregate, classify and compare an already parsed analysis."""
    collected = list(warnings) if warnings is not None else []

    for result in analysis.results:
        if result.status is AnalysisStatus.FAILED:
            reason = result.error_message or "no error message"
            _warn(collected, f"Analyzer '{result.category.value}' failed ({reason}); its issues are not scored.")
        elif not result.is_completed:
            _warn(collected, f"Analyzer '{result.category.value}' is still {result.status.value}; not scored.")
        elif result.category.is_industry_specific and result.category.industry is not analysis.industry:
            _warn(
                collected,
                f"Category '{result.category.value}' does not match lead industry "
                f"'{analysis.industry.value if analysis.industry else 'none'}'.",
            )

    issues = analysis.issues
    scores = calculate_scores(issues)
    delta = calculate_delta(analysis, previous) if previous is not None else None

    return LeadReport(
        lead=analysis.lead,
        industry=analysis.industry,
        sequence_number=analysis.sequence_number,
        analysis_status=analysis.status,
        status=lead_status_for(analysis),
        total_score=scores.total_score,
        category_scores=scores.category_scores,
        issue_count=analysis.issue_count,
        critical_issue_count=analysis.critical_issue_count,
        counts_by_severity=severity_counts(issues),
        issues=tuple(sorted_issues(issues)),
        completed_results=analysis.completed_results_count,
        failed_results=analysis.failed_results_count,
        delta=delta,
        warnings=tuple(collected),
    )


def _warn(warnings: list[str], message: str) -> None:
    warnings.append(message)
    logger.warning(message)
