"""Line-break classes and pair actions.

This module defines the enumerations shared by every stage of the line
breaking pipeline: the line-break class assigned to each codepoint and the
break action stored in the pair table.
"""

from enum import Enum, IntEnum


class LineBreakClass(IntEnum):
    """Unicode line-break class (UAX #14).

    Members 0 through 28 are the tailorable classes and double as row and
    column indices into the pair table. The remaining members are resolved
    by the engine's special-case rules or collapsed by the normalizer before
    any table lookup happens.
    """

    NONE = -1  # No class observed yet

    # Handled by the pair table
    OP = 0  # Opening punctuation
    CL = 1  # Closing punctuation
    CP = 2  # Closing parenthesis
    QU = 3  # Ambiguous quotation
    GL = 4  # Glue
    NS = 5  # Non-starters
    EX = 6  # Exclamation/Interrogation
    SY = 7  # Symbols allowing break after
    IS = 8  # Infix separator
    PR = 9  # Prefix
    PO = 10  # Postfix
    NU = 11  # Numeric
    AL = 12  # Alphabetic
    HL = 13  # Hebrew letter
    ID = 14  # Ideographic
    IN = 15  # Inseparable characters
    HY = 16  # Hyphen
    BA = 17  # Break after
    BB = 18  # Break before
    B2 = 19  # Break on either side (but not pair)
    ZW = 20  # Zero-width space
    CM = 21  # Combining marks
    WJ = 22  # Word joiner
    H2 = 23  # Hangul LV
    H3 = 24  # Hangul LVT
    JL = 25  # Hangul L Jamo
    JV = 26  # Hangul V Jamo
    JT = 27  # Hangul T Jamo
    RI = 28  # Regional indicator

    # Not handled by the pair table
    AI = 29  # Ambiguous (alphabetic or ideographic)
    BK = 30  # Mandatory break
    CB = 31  # Contingent break
    CJ = 32  # Conditional Japanese starter
    CR = 33  # Carriage return
    LF = 34  # Line feed
    NL = 35  # Next line
    SA = 36  # South-East Asian
    SG = 37  # Surrogates
    SP = 38  # Space
    XX = 39  # Unknown

    @property
    def is_tailorable(self) -> bool:
        """Whether this class has a row and column in the pair table."""
        return 0 <= self.value < TAILORABLE_CLASS_COUNT

    @classmethod
    def from_abbreviation(cls, abbreviation: str) -> "LineBreakClass":
        """Look up a class by its two-letter property value.

        Args:
            abbreviation: Property value as written in LineBreak.txt (e.g. "AL")

        Returns:
            Matching class

        Raises:
            KeyError: If the abbreviation names no class
        """
        member = cls.__members__[abbreviation]
        if member is cls.NONE:
            raise KeyError(abbreviation)
        return member


TAILORABLE_CLASS_COUNT = 29


class BreakAction(Enum):
    """Break action stored in the pair table."""

    DIRECT = "DI"  # Direct break opportunity
    INDIRECT = "IN"  # Break only if spaces intervene
    COMBINING_INDIRECT = "CI"  # Indirect break for combining marks
    COMBINING_PROHIBITED = "CP"  # Prohibited break for combining marks
    PROHIBITED = "PR"  # Prohibited break


class StepOutcome(Enum):
    """Resolved outcome of one pair-table step.

    EMIT_AND_ADVANCE reports a break and moves the current class to the new
    codepoint's class. SUPPRESS_AND_ADVANCE moves the class without a break.
    SUPPRESS_AND_HOLD reports nothing and keeps the current class, so the
    codepoint is invisible to later lookups.
    """

    EMIT_AND_ADVANCE = "emit_and_advance"
    SUPPRESS_AND_ADVANCE = "suppress_and_advance"
    SUPPRESS_AND_HOLD = "suppress_and_hold"

    @property
    def emits(self) -> bool:
        return self is StepOutcome.EMIT_AND_ADVANCE

    @property
    def advances(self) -> bool:
        return self is not StepOutcome.SUPPRESS_AND_HOLD
