"""Core line-breaking algorithm for linebreak.

This module contains the core algorithm:

- Codepoint classification (range table lookup)
- Class normalization (contextual remap, first-class adjustment)
- The UAX #14 pair table
- The break engine state machine
- The opportunity iterator

The classifier and pair table are immutable once built and can be shared by
any number of engines. Each engine or iterator owns its own scan state.

Key functions:
- contextual_remap: Collapse classes outside the pair table
- first_class_adjust: Pin the class that opens a break sequence
- lookup_action: Pair-table lookup between tailorable classes
- resolve_pair: Three-way outcome of a pair-table step
- line_breaks: Iterate the break opportunities of a text

Key classes:
- Classifier: Codepoint to line-break class
- BreakEngine: Finds successive break points
- OpportunityIterator: Lazy sequence of Opportunity records
"""

from linebreak.core.classifier import Classifier, ClassRange
from linebreak.core.engine import BreakEngine, EngineState, resolve_pair
from linebreak.core.iterator import (
    OpportunityIterator,
    decode_text,
    line_breaks,
    split_segments,
)
from linebreak.core.normalizer import contextual_remap, first_class_adjust
from linebreak.core.pair_table import PAIR_TABLE, lookup_action

__all__ = [
    "PAIR_TABLE",
    # Engine classes
    "BreakEngine",
    # Classifier classes
    "ClassRange",
    "Classifier",
    "EngineState",
    # Iterator classes
    "OpportunityIterator",
    # Normalizer functions
    "contextual_remap",
    "decode_text",
    "first_class_adjust",
    "line_breaks",
    "lookup_action",
    "resolve_pair",
    "split_segments",
]
