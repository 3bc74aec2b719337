"""CLI subcommand handlers and threshold evaluation."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from leadscore.config import load_config, validate_config_file
from leadscore.exceptions import ConfigError
from leadscore.exceptions.validation import format_errors
from leadscore.model import IssueCategory, IssueSeverity, LeadReport, LeadStatus
from leadscore.registry import load_registry
from leadscore.scoring import is_at_or_below


def evaluate_fail_status(report: LeadReport, *, fail_on_status: LeadStatus | None) -> int:
    """Return 1 if the lead's quality tier is at or below *fail_on_status*, 0 otherwise."""
    if fail_on_status is None:
        return 0
    return 1 if is_at_or_below(report.status, fail_on_status) else 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def handle_registry(args: argparse.Namespace) -> int:
    """List known issue codes, optionally filtered by category or severity."""
    try:
        config = load_config(Path.cwd(), args.config)
        registry = load_registry(config.registry_files)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if args.category is not None:
        definitions = registry.by_category(IssueCategory(args.category))
    else:
        definitions = list(registry)
    if args.severity is not None:
        by_severity = {definition.code for definition in registry.by_severity(IssueSeverity(args.severity))}
        definitions = [definition for definition in definitions if definition.code in by_severity]

    for definition in definitions:
        print(
            f"{definition.code:<36} {definition.category.value:<20} "
            f"{definition.severity.value:<13} {definition.title}"
        )
    print(f"{len(definitions)} issue code(s)")
    return 0
