"""Exception hierarchy for linebreak."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linebreak.core.classifier import ClassRange


class LinebreakError(Exception):
    """Base exception for all linebreak errors."""

    pass


class ClassifierError(LinebreakError):
    """Errors related to building the codepoint classifier."""

    pass


class DataFileNotFoundError(ClassifierError):
    """A Unicode data file is missing."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Unicode data file not found: '{path}' (run 'linebreak fetch-data')"
        )


class ClassifierDataError(ClassifierError):
    """Malformed line in a LineBreak.txt style file."""

    def __init__(self, path: str, line_no: int, reason: str) -> None:
        self.path = path
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"Invalid line-break data in '{path}' line {line_no}: {reason}")


class OverlappingRangeError(ClassifierError):
    """Two classifier ranges assign a class to the same codepoint."""

    def __init__(self, first: ClassRange, second: ClassRange) -> None:
        self.first = first
        self.second = second
        super().__init__(
            f"Range {second.start:04X}..{second.end:04X} ({second.cls.name}) overlaps "
            f"{first.start:04X}..{first.end:04X} ({first.cls.name})"
        )


class TextDecodingError(LinebreakError):
    """Input bytes are not valid in the declared encoding."""

    def __init__(self, encoding: str, error: UnicodeDecodeError) -> None:
        self.encoding = encoding
        self.position = error.start
        self.reason = error.reason
        super().__init__(
            f"Cannot decode input as {encoding} at byte {error.start}: {error.reason}"
        )


class ConformanceError(LinebreakError):
    """Errors related to the conformance test data."""

    pass


class ConformanceDataError(ConformanceError):
    """Malformed line in a LineBreakTest.txt style file."""

    def __init__(self, line_index: int, reason: str) -> None:
        self.line_index = line_index
        self.reason = reason
        super().__init__(f"Invalid conformance test line {line_index}: {reason}")


class DownloadError(LinebreakError):
    """Error downloading a Unicode data file."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to download '{url}': {reason}")
