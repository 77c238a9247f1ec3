"""Linebreak - Unicode line-break opportunities (UAX #14).

Linebreak walks a text one codepoint at a time and reports every position
where a new line may start, flagging the ones where it must (hard line
breaks). Choosing which optional breaks to take is left to the caller.

Example:
    >>> from linebreak import line_breaks
    >>> [o.segment for o in line_breaks("Hello, world!\\nThis is an (English) example.")]
    ['Hello, ', 'world!\\n', 'This ', 'is ', 'an ', '(English) ', 'example.']

The classifier data comes from the Unicode LineBreak.txt file; fetch it with
``linebreak fetch-data`` or point LINEBREAK_DATA_FILE at a local copy.
"""

from linebreak.core import Classifier, OpportunityIterator, line_breaks, split_segments
from linebreak.domain import LineBreakClass, Opportunity

__version__ = "0.1.0"

__all__ = [
    "Classifier",
    "LineBreakClass",
    "Opportunity",
    "OpportunityIterator",
    "__version__",
    "line_breaks",
    "split_segments",
]
