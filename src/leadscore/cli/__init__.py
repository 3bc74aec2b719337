"""Command-line interface for leadscore."""

from __future__ import annotations

from leadscore.cli.main import build_parser, main

__all__ = ["build_parser", "main"]
