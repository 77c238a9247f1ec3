"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

import json
from collections.abc import Iterable

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from linebreak.domain import LineBreakClass, Opportunity
from linebreak.utils import ConformanceStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info
SYM_MANDATORY = "¶"  # Hard line break
SYM_OPTIONAL = "÷"  # Break opportunity


def create_progress() -> Progress:
    """Create a rich progress bar for conformance runs.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Linebreak[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_segments(opportunities: Iterable[Opportunity], show_offsets: bool = False) -> None:
    """Print one segment per line with its break marker.

    Args:
        opportunities: Opportunities to print
        show_offsets: Prefix each line with the break offset
    """
    for opportunity in opportunities:
        line = Text()
        if show_offsets:
            line.append(f"{opportunity.offset:>6} ", style="dim")
        # repr keeps trailing spaces and control characters visible
        line.append(repr(opportunity.segment))
        if opportunity.mandatory:
            line.append(f" {SYM_MANDATORY}", style="bold red")
        else:
            line.append(f" {SYM_OPTIONAL}", style="dim")
        console.print(line)


def print_segments_json(opportunities: Iterable[Opportunity]) -> None:
    """Print one JSON object per opportunity."""
    for opportunity in opportunities:
        console.out(json.dumps(opportunity.to_dict(), ensure_ascii=False), highlight=False)


def print_classes(rows: Iterable[tuple[str, LineBreakClass, LineBreakClass]]) -> None:
    """Print a table of characters with their raw and normalized classes.

    Args:
        rows: Tuples of (character, raw class, normalized class)
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Codepoint")
    table.add_column("Char")
    table.add_column("Class")
    table.add_column("Normalized")
    for char, raw, normalized in rows:
        normalized_str = normalized.name if normalized is not raw else SYM_DOT
        table.add_row(f"U+{ord(char):04X}", Text(repr(char)), raw.name, normalized_str)
    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_conformance_summary(stats: ConformanceStats, verbose: bool = False) -> None:
    """Print the result of a conformance run.

    Args:
        stats: Run statistics
        verbose: Show every recorded failure
    """
    time_str = _format_time(stats.duration_seconds)
    if stats.succeeded:
        console.print(f"\n[bold green]{SYM_OK} Conformant[/bold green] in {time_str}")
    else:
        console.print(f"\n[bold red]{SYM_ERR} Not conformant[/bold red] in {time_str}")

    error_style = "red" if stats.failed_count > 0 else "green"
    console.print(
        f"  {stats.passed_count} passed {SYM_DOT} "
        f"[{error_style}]{stats.failed_count} failed[/{error_style}] {SYM_DOT} "
        f"{stats.skipped_count} skipped"
    )

    failures = stats.failures if verbose else stats.failures[:5]
    for failure in failures:
        console.print(f"  line {failure.line_index}")
        console.print(f"    expected {list(failure.expected)!r}", markup=False)
        console.print(f"    actual   {list(failure.actual)!r}", markup=False)
    hidden = stats.failed_count - len(failures)
    if hidden > 0:
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{hidden} more)")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_success(message: str) -> None:
    """Print a one-line success message."""
    console.print(f"[bold green]{SYM_OK}[/bold green] {message}")
