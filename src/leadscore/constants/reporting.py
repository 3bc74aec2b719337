"""Constants for report file names, atomic writing, and stdout formatting."""

from __future__ import annotations

REPORT_FILENAME: str = "report.json"
CSV_ISSUES_FILENAME: str = "issues.csv"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"json", "csv"})

CSV_COLUMNS: tuple[str, ...] = (
    "lead",
    "category",
    "severity",
    "weight",
    "code",
    "title",
    "evidence",
)

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

SEVERITY_COLORS: dict[str, str] = {
    "critical": ANSI_RED,
    "recommended": ANSI_YELLOW,
    "optimization": ANSI_DIM,
}

STATUS_COLORS: dict[str, str] = {
    "very_bad": ANSI_RED,
    "bad": ANSI_RED,
    "middle": ANSI_YELLOW,
    "quality_good": ANSI_GREEN,
    "super": ANSI_GREEN,
}
