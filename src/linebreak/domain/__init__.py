"""Domain models for linebreak.

This module contains the value types shared across the pipeline:

- Immutable where possible (frozen dataclasses, enums)
- Serializable to plain dictionaries for JSON output
- Independent of how classifier data is loaded

Key classes:
- LineBreakClass: Line-break class of a codepoint
- BreakAction: Action stored in the pair table
- StepOutcome: Resolved three-way outcome of a pair-table step
- BreakPoint: A break found by the engine
- Opportunity: A break opportunity with the text segment it terminates
"""

from linebreak.domain.classes import (
    TAILORABLE_CLASS_COUNT,
    BreakAction,
    LineBreakClass,
    StepOutcome,
)
from linebreak.domain.opportunity import BreakPoint, Opportunity

__all__: list[str] = [
    # Enums
    "LineBreakClass",
    "BreakAction",
    "StepOutcome",
    "TAILORABLE_CLASS_COUNT",
    # Core types
    "BreakPoint",
    "Opportunity",
]
