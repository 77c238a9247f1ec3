"""Reader for LineBreak.txt data files.

This module parses the Unicode Character Database line-break property file
into a Classifier. Each line is blank, a ``#`` comment, or a data line of the
form ``CODEPOINT[..CODEPOINT];CLASS`` with optional surrounding whitespace.
"""

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from pathlib import Path

from linebreak.config import DEFAULT_CLASS_ALIASES, get_default_settings
from linebreak.core.classifier import MAX_CODEPOINT, Classifier, ClassRange
from linebreak.domain import LineBreakClass
from linebreak.exceptions import (
    ClassifierDataError,
    DataFileNotFoundError,
    OverlappingRangeError,
)

logger = logging.getLogger(__name__)

_HEX_CODEPOINT = re.compile(r"[0-9A-Fa-f]{4,6}")


def _parse_codepoint(text: str, path: str, line_no: int) -> int:
    if not _HEX_CODEPOINT.fullmatch(text):
        raise ClassifierDataError(path, line_no, f"invalid codepoint '{text}'")
    codepoint = int(text, 16)
    if codepoint > MAX_CODEPOINT:
        raise ClassifierDataError(path, line_no, f"codepoint {text} out of range")
    return codepoint


def parse_line(
    line: str,
    path: str = "<string>",
    line_no: int = 0,
    aliases: Mapping[str, str] = DEFAULT_CLASS_ALIASES,
) -> ClassRange | None:
    """Parse one line of LineBreak.txt.

    Args:
        line: Raw line, with or without trailing newline
        path: File name used in error messages
        line_no: 1-based line number used in error messages
        aliases: Newer class abbreviations mapped to supported ones

    Returns:
        The range on a data line, None for blank and comment lines

    Raises:
        ClassifierDataError: If the line is malformed
    """
    content = line.split("#", 1)[0].strip()
    if not content:
        return None

    fields = content.split(";")
    if len(fields) < 2:
        raise ClassifierDataError(path, line_no, "missing ';' separator")
    if len(fields) > 2:
        raise ClassifierDataError(path, line_no, "unexpected field after class")
    span, abbreviation = fields[0].strip(), fields[1].strip()

    abbreviation = aliases.get(abbreviation, abbreviation)
    try:
        cls = LineBreakClass.from_abbreviation(abbreviation)
    except KeyError:
        raise ClassifierDataError(
            path, line_no, f"unknown class abbreviation '{abbreviation}'"
        ) from None

    if ".." in span:
        first, last = span.split("..", 1)
        start = _parse_codepoint(first.strip(), path, line_no)
        end = _parse_codepoint(last.strip(), path, line_no)
        if end < start:
            raise ClassifierDataError(path, line_no, f"inverted range '{span}'")
    else:
        start = end = _parse_codepoint(span, path, line_no)

    return ClassRange(start, end, cls)


def iter_ranges(
    lines: Iterable[str],
    path: str = "<string>",
    aliases: Mapping[str, str] = DEFAULT_CLASS_ALIASES,
) -> Iterator[ClassRange]:
    """Yield the ranges of every data line.

    Args:
        lines: Lines of a LineBreak.txt style file
        path: File name used in error messages
        aliases: Newer class abbreviations mapped to supported ones

    Yields:
        ClassRange for each data line, in file order

    Raises:
        ClassifierDataError: If any line is malformed
    """
    for line_no, line in enumerate(lines, start=1):
        rng = parse_line(line, path=path, line_no=line_no, aliases=aliases)
        if rng is not None:
            yield rng


def parse_classifier(
    lines: Iterable[str],
    path: str = "<string>",
    aliases: Mapping[str, str] = DEFAULT_CLASS_ALIASES,
) -> Classifier:
    """Build a Classifier from LineBreak.txt lines.

    Raises:
        ClassifierDataError: If a line is malformed or ranges overlap
    """
    try:
        return Classifier(iter_ranges(lines, path=path, aliases=aliases))
    except OverlappingRangeError as e:
        raise ClassifierDataError(path, 0, str(e)) from e


class LineBreakDataReader:
    """Loads a LineBreak.txt file into a Classifier.

    Example:
        reader = LineBreakDataReader(Path("LineBreak.txt"))
        classifier = reader.load()
    """

    def __init__(
        self,
        data_path: Path,
        aliases: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the reader.

        Args:
            data_path: Path to the LineBreak.txt file
            aliases: Class aliases (default: DEFAULT_CLASS_ALIASES)
        """
        self._data_path = data_path
        self._aliases = dict(DEFAULT_CLASS_ALIASES if aliases is None else aliases)
        self._classifier: Classifier | None = None

    @property
    def data_path(self) -> Path:
        return self._data_path

    def load(self) -> Classifier:
        """Parse the data file.

        Returns:
            Classifier built from the file

        Raises:
            DataFileNotFoundError: If the file does not exist
            ClassifierDataError: If the file is malformed
        """
        if not self._data_path.is_file():
            raise DataFileNotFoundError(str(self._data_path))

        with self._data_path.open(encoding="utf-8") as fh:
            self._classifier = parse_classifier(
                fh, path=str(self._data_path), aliases=self._aliases
            )

        logger.debug(
            "Loaded line-break data from %s (%d ranges)",
            self._data_path,
            len(self._classifier),
        )
        return self._classifier

    @property
    def classifier(self) -> Classifier:
        """Classifier from the last load.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._classifier is None:
            raise RuntimeError("Data not loaded. Call load() first.")
        return self._classifier


@lru_cache(maxsize=None)
def load_classifier(data_path: Path) -> Classifier:
    """Load and cache the classifier for a data file.

    Each path is parsed at most once per process.
    """
    return LineBreakDataReader(data_path).load()


def default_classifier() -> Classifier:
    """Return the process-wide classifier for the configured data file.

    Raises:
        DataFileNotFoundError: If the configured file does not exist
        ClassifierDataError: If the configured file is malformed
    """
    return load_classifier(get_default_settings().data.line_break_file)
