"""Rich stdout reporter for lead reports."""

from __future__ import annotations

from leadscore.constants.branding import ASCII_LOGO_LINES, REPORT_TITLE
from leadscore.constants.reporting import (
    ANSI_BOLD,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    SEVERITY_COLORS,
    STATUS_COLORS,
)
from leadscore.model import AnalysisDelta, IssueSeverity, LeadReport, LeadStatus
from leadscore.scoring import is_at_or_below, worst_categories


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _color_severity(severity: IssueSeverity) -> str:
    color = SEVERITY_COLORS.get(severity.value, "")
    return _colorize(severity.value, color) if color else severity.value


def _color_status(status: LeadStatus, text: str) -> str:
    color = STATUS_COLORS.get(status.value, "")
    return _colorize(text, color) if color else text


class StdoutReporter:
    """Formats a lead report as human-readable stdout output."""

    def __init__(
        self,
        report: LeadReport,
        *,
        color: bool = True,
        verbose: bool = False,
        fail_on_status: LeadStatus | None = None,
        exit_code: int = 0,
    ) -> None:
        self._report = report
        self._color = color
        self._verbose = verbose
        self._fail_on_status = fail_on_status
        self._exit_code = exit_code

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_issues_table()]
        if self._verbose:
            sections.append(self._render_details())
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._report
        sep = "  " + "─" * 38

        status_text = f"{r.status.label} ({r.status.value})"
        score_str = str(r.total_score)
        title = REPORT_TITLE
        if self._color:
            title = _colorize(title, ANSI_BOLD)
            status_text = _color_status(r.status, status_text)
            score_str = _color_status(r.status, score_str)

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {title}",
            sep,
            "",
            f"  Lead        {r.lead}",
            f"  Industry    {r.industry.label if r.industry is not None else 'none'}",
            f"  Status      {status_text}",
            f"  Score       {score_str}",
            f"  Issues      {r.issue_count} ({r.critical_issue_count} critical)",
            f"  Severities  {self._format_severity_breakdown()}",
            f"  Analyzers   {r.completed_results} completed / {r.failed_results} failed",
            f"  Worst       {self._format_worst_categories()}",
        ]

        if r.delta is not None:
            lines.append(f"  Change      {self._format_delta_summary(r.delta)}")

        verdict = self._render_verdict()
        if verdict is not None:
            lines.append(f"  Verdict     {verdict}")

        lines.append(f"  Duration    {r.duration_seconds:.3f}s")
        lines.append("")
        return "\n".join(lines)

    def _render_issues_table(self) -> str:
        issues = self._report.issues
        if not issues:
            return ""

        w_cat = 18
        w_code = 30
        w_sev = 12
        w_weight = 6

        def _hline(left: str, mid: str, right: str) -> str:
            return (
                f"  {left}{'─' * (w_cat + 2)}{mid}{'─' * (w_code + 2)}"
                f"{mid}{'─' * (w_sev + 2)}{mid}{'─' * (w_weight + 2)}{right}"
            )

        hdr = (
            f"  │ {'Category':<{w_cat}} │ {'Code':<{w_code}}"
            f" │ {'Severity':<{w_sev}} │ {'Weight':>{w_weight}} │"
        )

        lines = ["  Issues", _hline("┌", "┬", "┐"), hdr, _hline("├", "┼", "┤")]
        for issue in issues:
            # Pad before colouring so escape codes do not break alignment.
            sev_str = f"{issue.severity.value:<{w_sev}}"
            if self._color:
                sev_str = sev_str.replace(issue.severity.value, _color_severity(issue.severity))
            lines.append(
                f"  │ {issue.category.value:<{w_cat}} │ {issue.code:<{w_code}}"
                f" │ {sev_str} │ {issue.weight:>{w_weight}} │"
            )
        lines.append(_hline("└", "┴", "┘"))
        return "\n".join(lines)

    def _render_details(self) -> str:
        r = self._report
        lines: list[str] = []
        if r.delta is not None:
            lines.append(f"  Compared with analysis #{r.delta.previous_sequence_number}")
            lines.append(f"    New issues       {', '.join(r.delta.added) or 'none'}")
            lines.append(f"    Resolved issues  {', '.join(r.delta.removed) or 'none'}")
            lines.append(f"    Unchanged        {r.delta.unchanged_count}")
            lines.append("")
        if r.warnings:
            lines.append("  Warnings")
            lines.extend(f"    - {warning}" for warning in r.warnings)
            lines.append("")
        return "\n".join(lines)

    def _format_severity_breakdown(self) -> str:
        """Render ``critical/recommended/optimization`` counts in fixed order."""
        parts: list[str] = []
        for severity in IssueSeverity:
            count = self._report.counts_by_severity.get(severity, 0)
            label = _color_severity(severity) if self._color else severity.value
            parts.append(f"{count} {label}")
        return " · ".join(parts)

    def _format_worst_categories(self) -> str:
        worst = worst_categories(self._report.category_scores)
        if not worst:
            return "none"
        return " · ".join(f"{category.value} {score}" for category, score in worst)

    def _format_delta_summary(self, delta: AnalysisDelta) -> str:
        text = f"{delta.score_delta:+d} vs #{delta.previous_sequence_number}"
        if delta.has_new_critical_issues:
            text += " (new critical issues)"
        if not self._color:
            return text
        if delta.is_improved:
            return _colorize(text, ANSI_GREEN)
        if delta.score_delta < 0 or delta.has_new_critical_issues:
            return _colorize(text, ANSI_RED)
        return text

    def _render_verdict(self) -> str | None:
        """Render CI threshold verdict when ``--fail-on-status`` is configured."""
        if self._fail_on_status is None:
            return None
        status = self._report.status
        if is_at_or_below(status, self._fail_on_status):
            clause = f"{status.value} <= {self._fail_on_status.value}"
        else:
            clause = f"{status.value} > {self._fail_on_status.value}"
        state = "FAIL" if self._exit_code == 1 else "PASS"
        return f"{state} ({clause})"
