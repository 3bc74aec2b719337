"""Config loading and normalization for leadscore runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from leadscore.config.model import LeadScoreConfig
from leadscore.constants.config import CONFIG_FILENAME, DEFAULT_OUTPUT_FORMATS
from leadscore.constants.reporting import VALID_OUTPUT_FORMATS
from leadscore.exceptions import ConfigError
from leadscore.model import Industry, IssueCategory


def load_config(root: Path, config_path: Path | None = None) -> LeadScoreConfig:
    """Load and validate config from ``leadscore.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return LeadScoreConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file at {path} is not valid UTF-8: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    industry_raw = raw.get("industry")
    industry: Industry | None = None
    if industry_raw is not None:
        industry = _parse_industry(industry_raw)

    ignore_raw = raw.get("ignore_codes", {})
    if ignore_raw is None:
        ignore_raw = {}
    if not isinstance(ignore_raw, dict):
        raise ConfigError("ignore_codes must be a mapping of category to issue codes")

    ignore_codes: dict[IssueCategory, tuple[str, ...]] = {}
    for category_name, codes in ignore_raw.items():
        category = _parse_category(category_name)
        entries = _ensure_string_list(codes, f"ignore_codes.{category_name}")
        ignore_codes[category] = tuple(sorted({code.strip() for code in entries if code.strip()}))

    registry_files = tuple(
        (path.parent / entry).resolve()
        for entry in _ensure_string_list(raw.get("registry_files", []), "registry_files")
        if entry.strip()
    )

    output_formats = tuple(
        _ensure_string_list(raw.get("output_formats", list(DEFAULT_OUTPUT_FORMATS)), "output_formats")
    )
    invalid_formats = set(output_formats) - VALID_OUTPUT_FORMATS
    if invalid_formats:
        raise ConfigError(
            f"output_formats has unknown format(s): {', '.join(sorted(invalid_formats))}. "
            f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}"
        )

    return LeadScoreConfig(
        industry=industry,
        ignore_codes=ignore_codes,
        registry_files=registry_files,
        output_formats=output_formats,
    )


def _parse_industry(value: Any) -> Industry:
    valid = sorted(industry.value for industry in Industry)
    if not isinstance(value, str) or value not in valid:
        raise ConfigError(f"industry must be one of {valid}, got {value!r}")
    return Industry(value)


def _parse_category(value: Any) -> IssueCategory:
    valid = sorted(category.value for category in IssueCategory)
    if not isinstance(value, str) or value not in valid:
        raise ConfigError(f"ignore_codes: unknown category {value!r}")
    return IssueCategory(value)


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
