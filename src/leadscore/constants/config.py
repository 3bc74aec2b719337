"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "leadscore.yaml"

DEFAULT_OUTPUT_FORMATS: tuple[str, ...] = ("json",)

ANALYSIS_FILE_SUFFIXES: frozenset[str] = frozenset({".json", ".yaml", ".yml"})
