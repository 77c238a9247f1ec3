"""Reader for LineBreakTest.txt conformance files.

Each data line lists codepoints separated by ``×`` (no break allowed) or
``÷`` (break allowed), followed by an optional ``#`` comment::

    × 0023 × 0020 ÷ 0023 ÷	#  × [0.3] NUMBER SIGN (AL) ...

The expected segments are the runs of codepoints between ``÷`` marks.
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from linebreak.exceptions import ConformanceDataError, DataFileNotFoundError

NO_BREAK = "×"
BREAK = "÷"

_MARKS = re.compile(f"[{NO_BREAK}{BREAK}]")


@dataclass(frozen=True)
class ConformanceCase:
    """One line of the conformance test file.

    Attributes:
        line_index: 0-based line index in the file
        text: Input text assembled from the listed codepoints
        expected: Segments the text must break into
    """

    line_index: int
    text: str
    expected: tuple[str, ...]


def _decode(field: str, line_index: int) -> str:
    try:
        return chr(int(field, 16))
    except ValueError:
        raise ConformanceDataError(line_index, f"invalid codepoint '{field}'") from None


def parse_test_line(line: str, line_index: int = 0) -> ConformanceCase | None:
    """Parse one line of LineBreakTest.txt.

    Args:
        line: Raw line
        line_index: 0-based line index used for skip lists and errors

    Returns:
        The case on a data line, None for blank and comment lines

    Raises:
        ConformanceDataError: If the line is malformed
    """
    content = line.split("#", 1)[0].strip()
    if not content:
        return None
    if not content.endswith(BREAK):
        raise ConformanceDataError(line_index, "line must end with a break mark")

    text = "".join(
        _decode(field, line_index) for field in _MARKS.split(content) if field.strip()
    )

    expected = tuple(
        "".join(
            _decode(field, line_index) for field in piece.split(NO_BREAK) if field.strip()
        )
        for piece in content.split(BREAK)[:-1]
    )
    if "".join(expected) != text:
        raise ConformanceDataError(line_index, "segments do not cover the text")

    return ConformanceCase(line_index=line_index, text=text, expected=expected)


def iter_test_cases(lines: Iterable[str]) -> Iterator[ConformanceCase]:
    """Yield every case of a conformance file, in file order."""
    for line_index, line in enumerate(lines):
        case = parse_test_line(line, line_index)
        if case is not None:
            yield case


def read_test_file(path: Path) -> list[ConformanceCase]:
    """Read all cases of a LineBreakTest.txt file.

    Raises:
        DataFileNotFoundError: If the file does not exist
        ConformanceDataError: If a line is malformed
    """
    if not path.is_file():
        raise DataFileNotFoundError(str(path))
    with path.open(encoding="utf-8") as fh:
        return list(iter_test_cases(fh))
