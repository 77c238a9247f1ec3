"""CLI application entry point for linebreak.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from linebreak import __version__
from linebreak.cli.output import (
    console,
    create_progress,
    print_classes,
    print_conformance_summary,
    print_error,
    print_header,
    print_segments,
    print_segments_json,
    print_step,
    print_success,
)
from linebreak.config import DataConfig, LinebreakSettings, LoggingConfig, default_data_dir
from linebreak.core import Classifier, contextual_remap, line_breaks
from linebreak.core.conformance import ConformanceRunner
from linebreak.exceptions import DownloadError, LinebreakError, TextDecodingError
from linebreak.io import (
    LineBreakDataReader,
    download_all,
    read_test_file,
    unsupported_abbreviations,
)

# Create the Typer app
app = typer.Typer(
    name="linebreak",
    help="Find Unicode line-break opportunities (UAX #14) in text.",
    add_completion=False,
    no_args_is_help=True,
)

DataOption = Annotated[
    Path | None,
    typer.Option(
        "--data",
        "-d",
        help="Path to LineBreak.txt (default: $LINEBREAK_DATA_FILE or the cache dir)",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Linebreak[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Find Unicode line-break opportunities (UAX #14) in text."""


def _load_classifier(data: Path | None) -> Classifier:
    """Load the classifier from ``data`` or the configured default path."""
    data_config = DataConfig() if data is None else DataConfig(line_break_file=data)
    return LineBreakDataReader(data_config.line_break_file, data_config.class_aliases).load()


@app.command()
def split(
    text: Annotated[
        str | None,
        typer.Argument(
            help="Text to break (omit when using --file)",
            show_default=False,
        ),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help="Read the text from a file instead",
        ),
    ] = None,
    encoding: Annotated[
        str,
        typer.Option(
            "--encoding",
            "-e",
            help="Encoding of --file",
        ),
    ] = "utf-8",
    data: DataOption = None,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print one JSON object per opportunity",
        ),
    ] = False,
    offsets: Annotated[
        bool,
        typer.Option(
            "--offsets",
            help="Show the offset of each break",
        ),
    ] = False,
) -> None:
    """Print the segments between break opportunities.

    Mandatory breaks are marked with ¶, optional ones with ÷.

    Example:
        linebreak split "Hello, world! This is an (English) example."
    """
    if (text is None) == (file is None):
        print_error("Provide either TEXT or --file")
        raise typer.Exit(code=1)

    try:
        classifier = _load_classifier(data)
        if file is not None:
            if not file.is_file():
                print_error(f"Input file not found: {file}")
                raise typer.Exit(code=1)
            opportunities = line_breaks(file.read_bytes(), classifier, encoding=encoding)
        else:
            opportunities = line_breaks(text or "", classifier)

        if as_json:
            print_segments_json(opportunities)
        else:
            print_segments(opportunities, show_offsets=offsets)
    except TextDecodingError as e:
        print_error("Could not decode input", details=str(e))
        raise typer.Exit(code=1)
    except LinebreakError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def classify(
    text: Annotated[
        str,
        typer.Argument(
            help="Characters to classify",
            show_default=False,
        ),
    ],
    data: DataOption = None,
) -> None:
    """Show the line-break class of each character."""
    try:
        classifier = _load_classifier(data)
    except LinebreakError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    rows = []
    for char in text:
        raw = classifier.classify_char(char)
        rows.append((char, raw, contextual_remap(raw)))
    print_classes(rows)


@app.command()
def check(
    test_file: Annotated[
        Path | None,
        typer.Option(
            "--test-file",
            "-t",
            help="Path to LineBreakTest.txt (default: $LINEBREAK_TEST_FILE or the cache dir)",
        ),
    ] = None,
    data: DataOption = None,
    stop_on_failure: Annotated[
        bool,
        typer.Option(
            "--stop-on-failure",
            "-x",
            help="Stop at the first failing line",
        ),
    ] = False,
    no_skip: Annotated[
        bool,
        typer.Option(
            "--no-skip",
            help="Also check lines on the tailoring skip list",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show every recorded failure",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Run the Unicode conformance test file against the line breaker.

    Exits with code 1 if any line outside the skip list fails.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    settings = LinebreakSettings(logging=LoggingConfig(log_file=log_file))
    if data is not None:
        settings.data.line_break_file = data
    if test_file is not None:
        settings.data.test_file = test_file
    settings.conformance.stop_on_failure = stop_on_failure
    if no_skip:
        settings.conformance.skip_lines = frozenset()

    if not quiet:
        print_header(__version__)

    try:
        classifier = _load_classifier(settings.data.line_break_file)
        cases = read_test_file(settings.data.test_file)
        runner = ConformanceRunner(settings, classifier=classifier)

        if not quiet:
            print_step(f"Checking {len(cases)} lines from {settings.data.test_file}")
            with create_progress() as progress:
                task_id = progress.add_task("Checking", total=len(cases))

                def update_progress(*_: object) -> None:
                    progress.advance(task_id)

                stats = runner.run_cases(cases, progress_callback=update_progress)
        else:
            stats = runner.run_cases(cases)
    except LinebreakError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_conformance_summary(stats, verbose=verbose)
    if not stats.succeeded:
        raise typer.Exit(code=1)


@app.command("fetch-data")
def fetch_data(
    dest: Annotated[
        Path | None,
        typer.Option(
            "--dest",
            help="Directory to download into (default: the cache dir)",
        ),
    ] = None,
    base_url: Annotated[
        str | None,
        typer.Option(
            "--base-url",
            help="Unicode Character Database root URL",
        ),
    ] = None,
) -> None:
    """Download LineBreak.txt and LineBreakTest.txt."""
    dest_dir = dest if dest is not None else default_data_dir()
    data_config = DataConfig()
    url = base_url if base_url is not None else data_config.base_url

    try:
        paths = download_all(dest_dir, url)
    except DownloadError as e:
        print_error(f"Could not download data: {e.reason}", details=e.url)
        raise typer.Exit(code=1)

    for path in paths:
        print_success(str(path))

    unknown = unsupported_abbreviations(paths[0], data_config.class_aliases)
    if unknown:
        print_error(
            "LineBreak.txt uses classes without an alias: " + ", ".join(sorted(unknown)),
            details="Add them to DataConfig.class_aliases before loading this file.",
        )
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
