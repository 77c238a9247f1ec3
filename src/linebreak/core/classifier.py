"""Codepoint to line-break class lookup.

This module provides the Classifier, a total mapping from codepoints to
line-break classes stored as a sorted list of non-overlapping ranges.
Lookups use binary search; adjacent ranges sharing a class are merged at
construction time so the list stays short.

Key classes:
- ClassRange: An inclusive codepoint range with its class
- Classifier: Immutable range table with ``classify(codepoint)``
"""

from bisect import bisect_right
from collections.abc import Iterable
from dataclasses import dataclass

from linebreak.domain import LineBreakClass
from linebreak.exceptions import OverlappingRangeError

MAX_CODEPOINT = 0x10FFFF


@dataclass(frozen=True)
class ClassRange:
    """Inclusive codepoint range carrying one line-break class.

    Attributes:
        start: First codepoint of the range
        end: Last codepoint of the range (inclusive)
        cls: Line-break class of every codepoint in the range
    """

    start: int
    end: int
    cls: LineBreakClass

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= MAX_CODEPOINT:
            raise ValueError(f"Invalid codepoint range {self.start:04X}..{self.end:04X}")


class Classifier:
    """Immutable codepoint classifier.

    Codepoints not covered by any range classify as ``default``
    (XX, unknown). Instances are safe to share between any number of
    engines once constructed.

    Example:
        classifier = Classifier([ClassRange(0x41, 0x5A, LineBreakClass.AL)])
        classifier.classify(ord("A"))  # LineBreakClass.AL
    """

    def __init__(
        self,
        ranges: Iterable[ClassRange],
        default: LineBreakClass = LineBreakClass.XX,
    ) -> None:
        """Build the lookup table.

        Args:
            ranges: Codepoint ranges in any order
            default: Class reported for codepoints outside every range

        Raises:
            OverlappingRangeError: If two ranges share a codepoint
        """
        merged: list[ClassRange] = []
        for rng in sorted(ranges, key=lambda r: r.start):
            if merged and rng.start <= merged[-1].end:
                raise OverlappingRangeError(merged[-1], rng)
            if merged and rng.start == merged[-1].end + 1 and rng.cls is merged[-1].cls:
                merged[-1] = ClassRange(merged[-1].start, rng.end, rng.cls)
            else:
                merged.append(rng)

        self._ranges: tuple[ClassRange, ...] = tuple(merged)
        self._starts: tuple[int, ...] = tuple(r.start for r in merged)
        self._default = default

    @classmethod
    def from_mapping(
        cls,
        mapping: dict[int, LineBreakClass],
        default: LineBreakClass = LineBreakClass.XX,
    ) -> "Classifier":
        """Build a classifier from single codepoint assignments.

        Args:
            mapping: Codepoint to class
            default: Class for unlisted codepoints

        Returns:
            Classifier instance
        """
        return cls((ClassRange(cp, cp, c) for cp, c in mapping.items()), default=default)

    @property
    def ranges(self) -> tuple[ClassRange, ...]:
        """Merged ranges in ascending order."""
        return self._ranges

    @property
    def default(self) -> LineBreakClass:
        return self._default

    def classify(self, codepoint: int) -> LineBreakClass:
        """Return the raw line-break class of a codepoint.

        Args:
            codepoint: Unicode codepoint

        Returns:
            Class from the table, or the default class if unlisted
        """
        idx = bisect_right(self._starts, codepoint) - 1
        if idx >= 0:
            rng = self._ranges[idx]
            if codepoint <= rng.end:
                return rng.cls
        return self._default

    def classify_char(self, char: str) -> LineBreakClass:
        """Return the raw line-break class of a one-character string."""
        return self.classify(ord(char))

    def __len__(self) -> int:
        return len(self._ranges)

    def __repr__(self) -> str:
        return f"Classifier(ranges={len(self._ranges)}, default={self._default.name})"
