"""Config file validation for leadscore runs."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from leadscore.constants.config import CONFIG_FILENAME
from leadscore.constants.reporting import VALID_OUTPUT_FORMATS
from leadscore.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
)
from leadscore.exceptions import RegistryError
from leadscore.exceptions.validation import ValidationError
from leadscore.model import Industry, IssueCategory
from leadscore.registry import load_registry_file

_VALID_INDUSTRIES: frozenset[str] = frozenset(industry.value for industry in Industry)
_VALID_CATEGORIES: frozenset[str] = frozenset(category.value for category in IssueCategory)


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a leadscore.yaml file and return all validation errors.

    This is the collect-all entry point used by ``leadscore validate-config``
    and by ``leadscore score`` preflight. It never raises; all problems are
    returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors
    except UnicodeDecodeError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"not valid UTF-8: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    if raw.get("industry") is not None:
        val = raw["industry"]
        if not isinstance(val, str) or val not in _VALID_INDUSTRIES:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field="industry",
                    message="invalid value for `industry`",
                    hint=f"expected one of: {', '.join(sorted(_VALID_INDUSTRIES))}; got: {val!r}",
                )
            )

    if "ignore_codes" in raw:
        _validate_ignore_codes(raw["ignore_codes"], path_str, errors)

    if "output_formats" in raw:
        val = raw["output_formats"]
        if not _is_string_list(val):
            errors.append(_list_type_error(path_str, "output_formats"))
        else:
            for fmt in val:
                if fmt not in VALID_OUTPUT_FORMATS:
                    errors.append(
                        ValidationError(
                            code=CFG006,
                            path=path_str,
                            field="output_formats",
                            message=f"unknown output format `{fmt}`",
                            hint=f"expected one of: {', '.join(sorted(VALID_OUTPUT_FORMATS))}",
                        )
                    )

    if "registry_files" in raw:
        val = raw["registry_files"]
        if not _is_string_list(val):
            errors.append(_list_type_error(path_str, "registry_files"))
        else:
            for entry in val:
                _validate_registry_file(path.parent / entry, path_str, entry, errors)

    return errors


def _validate_ignore_codes(value: Any, path_str: str, errors: list[ValidationError]) -> None:
    if value is None:
        return
    if not isinstance(value, dict):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="ignore_codes",
                message="invalid type for `ignore_codes`",
                hint="expected a mapping of category to a list of issue codes",
            )
        )
        return

    for category in sorted(value, key=str):
        if category not in _VALID_CATEGORIES:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=f"ignore_codes.{category}",
                    message=f"unknown category `{category}`",
                    hint=_suggest_key(str(category), _VALID_CATEGORIES),
                )
            )
            continue
        codes = value[category]
        if codes is not None and not _is_string_list(codes):
            errors.append(_list_type_error(path_str, f"ignore_codes.{category}"))


def _validate_registry_file(path: Path, path_str: str, entry: str, errors: list[ValidationError]) -> None:
    if not path.is_file():
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field="registry_files",
                message=f"issue catalogue not found: {entry}",
            )
        )
        return
    try:
        load_registry_file(path)
    except RegistryError as exc:
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field="registry_files",
                message=str(exc),
            )
        )


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _list_type_error(path_str: str, field: str) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=field,
        message=f"invalid type for `{field}`",
        hint="expected a list of strings",
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
