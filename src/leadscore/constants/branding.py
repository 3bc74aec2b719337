"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "LEADSCORE"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ LEADSCORE",
    "     // website quality scoring for outreach",
)
REPORT_TITLE: str = "Lead summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} lead scorer"))
