"""Line-break state machine.

This module implements the UAX #14 pair-table algorithm. The engine walks a
text one codepoint at a time, classifies each codepoint, applies the rules
for classes the pair table does not cover (mandatory breaks, CR, CB, SP) and
otherwise resolves the pair-table action into a StepOutcome.

Key components:
- resolve_pair: Turn a pair-table action into a StepOutcome
- EngineState: Mutable scan state of one engine
- BreakEngine: Finds successive break points in a text
"""

from dataclasses import dataclass, replace

from linebreak.core.classifier import Classifier
from linebreak.core.normalizer import contextual_remap, first_class_adjust
from linebreak.core.pair_table import lookup_action
from linebreak.domain import BreakAction, BreakPoint, LineBreakClass, StepOutcome

_L = LineBreakClass

_MANDATORY_FAMILY = frozenset({_L.BK, _L.LF, _L.NL})


def resolve_pair(action: BreakAction, after_space: bool) -> StepOutcome:
    """Resolve a pair-table action given the space lookback.

    Args:
        action: Action from the pair table
        after_space: Whether the codepoint immediately before the one being
            examined was a space

    Returns:
        Outcome of the step
    """
    if action is BreakAction.DIRECT:
        return StepOutcome.EMIT_AND_ADVANCE
    if action is BreakAction.INDIRECT:
        return StepOutcome.EMIT_AND_ADVANCE if after_space else StepOutcome.SUPPRESS_AND_ADVANCE
    if action is BreakAction.COMBINING_INDIRECT:
        return StepOutcome.EMIT_AND_ADVANCE if after_space else StepOutcome.SUPPRESS_AND_HOLD
    if action is BreakAction.COMBINING_PROHIBITED:
        return StepOutcome.SUPPRESS_AND_ADVANCE if after_space else StepOutcome.SUPPRESS_AND_HOLD
    return StepOutcome.SUPPRESS_AND_ADVANCE


@dataclass
class EngineState:
    """Scan state owned by a single engine.

    Attributes:
        current_class: Class attributed to the text already scanned
        lookahead_class: Normalized class of the codepoint examined last
        last_class: Class examined on the step before that (space lookback)
        scan_position: Index of the next codepoint to consume
        prior_position: Index of the codepoint examined last
    """

    current_class: LineBreakClass = LineBreakClass.NONE
    lookahead_class: LineBreakClass = LineBreakClass.NONE
    last_class: LineBreakClass = LineBreakClass.NONE
    scan_position: int = 0
    prior_position: int = 0


class BreakEngine:
    """Finds successive line-break points in a text.

    Each call to ``next_break`` scans forward to the next break point. After
    the final break (at the text length) the engine is exhausted.

    Example:
        engine = BreakEngine("Hello world", classifier)
        engine.next_break()  # BreakPoint(offset=6, mandatory=False)
    """

    def __init__(self, text: str, classifier: Classifier) -> None:
        """Initialize the engine.

        Args:
            text: Text to scan
            classifier: Codepoint classifier
        """
        self._text = text
        self._classifier = classifier
        self.state = EngineState()

    @property
    def text(self) -> str:
        return self._text

    @property
    def exhausted(self) -> bool:
        """Whether the final break has been reported."""
        return self.state.prior_position >= len(self._text)

    def copy(self) -> "BreakEngine":
        """Return an independent engine continuing from the same state."""
        duplicate = BreakEngine(self._text, self._classifier)
        duplicate.state = replace(self.state)
        return duplicate

    __copy__ = copy

    def _consume_class(self) -> LineBreakClass:
        codepoint = ord(self._text[self.state.scan_position])
        self.state.scan_position += 1
        return contextual_remap(self._classifier.classify(codepoint))

    def next_break(self) -> BreakPoint:
        """Scan to the next break point.

        Returns:
            The next break point; the last one is at the text length

        Raises:
            ValueError: If the text is empty or the engine is exhausted
        """
        if self.exhausted:
            raise ValueError("No break points left in text")

        state = self.state
        text_length = len(self._text)

        if state.current_class is LineBreakClass.NONE:
            state.current_class = first_class_adjust(self._consume_class())

        while state.scan_position < text_length:
            state.prior_position = state.scan_position
            state.last_class = state.lookahead_class
            state.lookahead_class = self._consume_class()
            new_class = state.lookahead_class
            current = state.current_class

            # Explicit newline
            if current is _L.BK or (current is _L.CR and new_class is not _L.LF):
                state.current_class = first_class_adjust(new_class)
                return BreakPoint(state.prior_position, mandatory=True)

            # Classes not handled by the pair table
            if new_class is _L.SP:
                continue
            if new_class in _MANDATORY_FAMILY:
                state.current_class = _L.BK
                continue
            if new_class is _L.CR:
                state.current_class = _L.CR
                continue
            if new_class is _L.CB:
                state.current_class = _L.BA
                return BreakPoint(state.prior_position)

            outcome = resolve_pair(
                lookup_action(current, new_class),
                after_space=state.last_class is _L.SP,
            )
            if outcome.advances:
                state.current_class = new_class
            if outcome.emits:
                return BreakPoint(state.prior_position)

        state.prior_position = text_length
        return BreakPoint(text_length)
