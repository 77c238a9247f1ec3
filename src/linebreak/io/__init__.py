"""Unicode data I/O layer for linebreak.

This module handles reading and fetching the Unicode Character Database
files the line breaker depends on. It keeps file formats out of the core
algorithm, which only sees a Classifier.

Key responsibilities:
- Parse LineBreak.txt into a Classifier
- Cache the process-wide default classifier
- Parse LineBreakTest.txt into conformance cases
- Download both files from unicode.org

Key classes:
- LineBreakDataReader: Load LineBreak.txt
- ConformanceCase: One conformance test line
"""

from linebreak.io.conformance import (
    ConformanceCase,
    iter_test_cases,
    parse_test_line,
    read_test_file,
)
from linebreak.io.fetch import download_all, download_data_file, unsupported_abbreviations
from linebreak.io.reader import (
    LineBreakDataReader,
    default_classifier,
    iter_ranges,
    load_classifier,
    parse_classifier,
    parse_line,
)

__all__ = [
    "ConformanceCase",
    "LineBreakDataReader",
    "default_classifier",
    "download_all",
    "download_data_file",
    "iter_ranges",
    "iter_test_cases",
    "load_classifier",
    "parse_classifier",
    "parse_line",
    "parse_test_line",
    "read_test_file",
    "unsupported_abbreviations",
]
