"""Command-line interface for linebreak.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Segment listing with mandatory/optional break markers
- JSON output for scripting
- Per-character class inspection
- Conformance checking against LineBreakTest.txt
- Downloading the Unicode data files
"""

from linebreak.cli.app import cli, main

__all__ = ["cli", "main"]
