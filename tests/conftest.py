"""Shared fixtures for the linebreak test suite."""

from pathlib import Path

import pytest

from linebreak.core import Classifier
from linebreak.io import LineBreakDataReader

FIXTURES_DIR = Path(__file__).parent / "fixtures"
LINE_BREAK_EXCERPT = FIXTURES_DIR / "LineBreak-excerpt.txt"
LINE_BREAK_TEST_EXCERPT = FIXTURES_DIR / "LineBreakTest-excerpt.txt"


@pytest.fixture(scope="session")
def classifier() -> Classifier:
    """Classifier built from the LineBreak.txt excerpt."""
    return LineBreakDataReader(LINE_BREAK_EXCERPT).load()
