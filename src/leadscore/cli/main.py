"""CLI entrypoint for the leadscore scorer."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from leadscore import __version__
from leadscore.cli.handlers import evaluate_fail_status, handle_registry, handle_validate_config
from leadscore.config import validate_config_file
from leadscore.constants.branding import CLI_DESCRIPTION
from leadscore.constants.reporting import VALID_OUTPUT_FORMATS
from leadscore.exceptions import ConfigError, LeadScoreError
from leadscore.exceptions.validation import format_errors
from leadscore.model import Industry, IssueCategory, IssueSeverity, LeadStatus, quality_statuses
from leadscore.pipeline import score_analysis_file
from leadscore.reporting.stdout import StdoutReporter


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="leadscore",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    score = subparsers.add_parser("score", help="Score an analysis file and classify the lead")
    score.add_argument("-i", "--input", type=Path, required=True, help="Analysis file (.json, .yaml, .yml)")
    score.add_argument("-p", "--previous", type=Path, default=None, help="Previous analysis of the same lead")
    score.add_argument("-c", "--config", type=Path, help="Explicit config file")
    score.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory (no files written if omitted)",
    )
    score.add_argument(
        "--industry",
        choices=[industry.value for industry in Industry],
        default=None,
        help="Override the lead's industry",
    )
    score.add_argument(
        "--output-format",
        default=None,
        help="Comma-separated output formats: json, csv (default: from config, else json)",
    )
    score.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    score.add_argument("--no-color", action="store_true", help="Disable colored output")
    score.add_argument("-v", "--verbose", action="store_true", help="Show warnings, delta details and debug logs")
    score.add_argument(
        "--fail-on-status",
        choices=[status.value for status in quality_statuses()],
        default=None,
        help="Exit 1 when the lead's quality tier is at or below this tier",
    )

    registry = subparsers.add_parser("registry", help="List known issue codes")
    registry.add_argument("-c", "--config", type=Path, help="Config file with extra registry_files")
    registry.add_argument("--category", choices=[category.value for category in IssueCategory], default=None)
    registry.add_argument("--severity", choices=[severity.value for severity in IssueSeverity], default=None)

    validate = subparsers.add_parser("validate-config", help="Validate configuration without scoring")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")
    validate.add_argument(
        "-r",
        "--root",
        type=Path,
        default=Path("."),
        help="Directory searched for leadscore.yaml when --config is omitted",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)
    if args.command == "registry":
        return handle_registry(args)
    if args.command != "score":
        parser.error(f"Unsupported command: {args.command}")

    output_formats: tuple[str, ...] | None = None
    if args.output_format is not None:
        raw_tokens = args.output_format.split(",")
        output_formats = tuple(fmt for fmt in (t.strip() for t in raw_tokens) if fmt)
        if not output_formats or len(output_formats) != len(raw_tokens):
            print(
                "Configuration error: --output-format contains empty or malformed tokens",
                file=sys.stderr,
            )
            return 2
        invalid_formats = set(output_formats) - VALID_OUTPUT_FORMATS
        if invalid_formats:
            print(
                f"Configuration error: unknown output format(s): {', '.join(sorted(invalid_formats))}. "
                f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}",
                file=sys.stderr,
            )
            return 2

    validation_errors = validate_config_file(
        args.input.parent,
        args.config,
        config_explicit=args.config is not None,
    )
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    fail_on_status = LeadStatus(args.fail_on_status) if args.fail_on_status is not None else None
    try:
        report = score_analysis_file(
            args.input,
            previous_path=args.previous,
            config_path=args.config,
            out=args.output_dir,
            industry=Industry(args.industry) if args.industry is not None else None,
            output_formats=output_formats,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except LeadScoreError as exc:
        print(f"Scoring error: {exc}", file=sys.stderr)
        return 1

    exit_code = evaluate_fail_status(report, fail_on_status=fail_on_status)

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(
            report,
            color=use_color,
            verbose=args.verbose,
            fail_on_status=fail_on_status,
            exit_code=exit_code,
        )
        print(reporter.render())

    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
