"""Lazy sequence of break opportunities.

This module wraps the BreakEngine into a forward iterator of Opportunity
records, each carrying the text segment it terminates. Iterators can be
duplicated cheaply; the copy continues from the same point without
re-scanning the text.
"""

from collections.abc import Iterator

from linebreak.core.classifier import Classifier
from linebreak.core.engine import BreakEngine
from linebreak.domain import Opportunity
from linebreak.exceptions import TextDecodingError


class OpportunityIterator:
    """Forward iterator over the break opportunities of a text.

    Example:
        it = OpportunityIterator("Hello world", classifier)
        while not it.at_end:
            print(it.current.segment)
            it.advance()
    """

    def __init__(self, text: str, classifier: Classifier) -> None:
        """Initialize the iterator and locate the first opportunity.

        Args:
            text: Text to break
            classifier: Codepoint classifier
        """
        self._engine = BreakEngine(text, classifier)
        self._current: Opportunity | None = None
        if text:
            self._current = self._next_opportunity(start=0)

    @property
    def text(self) -> str:
        return self._engine.text

    @property
    def at_end(self) -> bool:
        """Whether every opportunity has been consumed."""
        return self._current is None

    @property
    def current(self) -> Opportunity:
        """Opportunity at the iterator's position.

        Raises:
            IndexError: If the iterator is at the end
        """
        if self._current is None:
            raise IndexError("Opportunity iterator is at end")
        return self._current

    def advance(self) -> None:
        """Move to the next opportunity.

        Raises:
            IndexError: If the iterator is already at the end
        """
        current = self.current
        if current.offset >= len(self.text):
            self._current = None
        else:
            self._current = self._next_opportunity(start=current.offset)

    def copy(self) -> "OpportunityIterator":
        """Return an independent iterator positioned at the same opportunity."""
        duplicate = OpportunityIterator.__new__(OpportunityIterator)
        duplicate._engine = self._engine.copy()
        duplicate._current = self._current
        return duplicate

    __copy__ = copy

    def _next_opportunity(self, start: int) -> Opportunity:
        point = self._engine.next_break()
        return Opportunity(
            offset=point.offset,
            mandatory=point.mandatory,
            segment=self.text[start : point.offset],
        )

    def __iter__(self) -> Iterator[Opportunity]:
        return self

    def __next__(self) -> Opportunity:
        if self._current is None:
            raise StopIteration
        opportunity = self._current
        self.advance()
        return opportunity


def decode_text(data: str | bytes, encoding: str = "utf-8") -> str:
    """Return text as a string of scalar values.

    Args:
        data: Text, or encoded bytes
        encoding: Encoding used when ``data`` is bytes

    Returns:
        Decoded text

    Raises:
        TextDecodingError: If the bytes are invalid in ``encoding``
    """
    if isinstance(data, str):
        return data
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise TextDecodingError(encoding, e) from e


def line_breaks(
    text: str | bytes,
    classifier: Classifier | None = None,
    encoding: str = "utf-8",
) -> OpportunityIterator:
    """Create an iterator over the break opportunities of a text.

    Joining the segments of the returned opportunities reproduces the text.

    Args:
        text: Text to break, or bytes in ``encoding``
        classifier: Codepoint classifier (default: the process-wide one
            loaded from the configured LineBreak.txt)
        encoding: Encoding used when ``text`` is bytes

    Returns:
        OpportunityIterator positioned at the first opportunity

    Raises:
        TextDecodingError: If ``text`` is bytes that fail to decode
        ClassifierError: If the default classifier cannot be loaded
    """
    if classifier is None:
        from linebreak.io import default_classifier

        classifier = default_classifier()
    return OpportunityIterator(decode_text(text, encoding), classifier)


def split_segments(text: str, classifier: Classifier | None = None) -> list[str]:
    """Return the segments between consecutive break opportunities."""
    return [opportunity.segment for opportunity in line_breaks(text, classifier)]
