"""Tests for domain models to verify they work correctly."""

import pytest

from linebreak.domain import (
    TAILORABLE_CLASS_COUNT,
    BreakAction,
    BreakPoint,
    LineBreakClass,
    Opportunity,
    StepOutcome,
)


class TestLineBreakClass:
    """Tests for LineBreakClass enum."""

    def test_forty_classes_plus_sentinel(self) -> None:
        """Test the enum holds 40 classes and the NONE sentinel."""
        assert len(LineBreakClass) == 41
        assert LineBreakClass.NONE.value == -1

    def test_tailorable_partition(self) -> None:
        """Test exactly the first 29 classes are tailorable."""
        tailorable = [c for c in LineBreakClass if c.is_tailorable]
        assert len(tailorable) == TAILORABLE_CLASS_COUNT == 29
        assert tailorable[0] is LineBreakClass.OP
        assert tailorable[-1] is LineBreakClass.RI

    @pytest.mark.parametrize(
        "cls",
        [
            LineBreakClass.AI,
            LineBreakClass.BK,
            LineBreakClass.CB,
            LineBreakClass.CJ,
            LineBreakClass.CR,
            LineBreakClass.LF,
            LineBreakClass.NL,
            LineBreakClass.SA,
            LineBreakClass.SG,
            LineBreakClass.SP,
            LineBreakClass.XX,
            LineBreakClass.NONE,
        ],
    )
    def test_non_table_classes(self, cls: LineBreakClass) -> None:
        """Test special-case classes are not tailorable."""
        assert not cls.is_tailorable

    def test_from_abbreviation(self) -> None:
        """Test lookup by property value abbreviation."""
        assert LineBreakClass.from_abbreviation("AL") is LineBreakClass.AL
        assert LineBreakClass.from_abbreviation("B2") is LineBreakClass.B2

    def test_from_abbreviation_unknown(self) -> None:
        """Test unknown abbreviations and the sentinel are rejected."""
        with pytest.raises(KeyError):
            LineBreakClass.from_abbreviation("ZZ")
        with pytest.raises(KeyError):
            LineBreakClass.from_abbreviation("NONE")


class TestBreakAction:
    """Tests for BreakAction enum."""

    def test_codes(self) -> None:
        """Test the two-letter codes used in the pair table."""
        assert BreakAction("DI") is BreakAction.DIRECT
        assert BreakAction("IN") is BreakAction.INDIRECT
        assert BreakAction("CI") is BreakAction.COMBINING_INDIRECT
        assert BreakAction("CP") is BreakAction.COMBINING_PROHIBITED
        assert BreakAction("PR") is BreakAction.PROHIBITED


class TestStepOutcome:
    """Tests for StepOutcome enum."""

    def test_emit_and_advance(self) -> None:
        assert StepOutcome.EMIT_AND_ADVANCE.emits
        assert StepOutcome.EMIT_AND_ADVANCE.advances

    def test_suppress_and_advance(self) -> None:
        assert not StepOutcome.SUPPRESS_AND_ADVANCE.emits
        assert StepOutcome.SUPPRESS_AND_ADVANCE.advances

    def test_suppress_and_hold(self) -> None:
        assert not StepOutcome.SUPPRESS_AND_HOLD.emits
        assert not StepOutcome.SUPPRESS_AND_HOLD.advances


class TestOpportunity:
    """Tests for Opportunity and BreakPoint classes."""

    def test_opportunity_creation(self) -> None:
        """Test basic opportunity creation."""
        opportunity = Opportunity(offset=7, mandatory=False, segment="Hello, ")
        assert opportunity.offset == 7
        assert not opportunity.mandatory
        assert opportunity.segment == "Hello, "

    def test_opportunity_serialization(self) -> None:
        """Test opportunity serialization and deserialization."""
        o1 = Opportunity(offset=14, mandatory=True, segment="world!\n")
        data = o1.to_dict()
        assert data == {"offset": 14, "mandatory": True, "segment": "world!\n"}
        assert Opportunity.from_dict(data) == o1

    def test_opportunity_immutable(self) -> None:
        """Test that opportunity is immutable."""
        opportunity = Opportunity(offset=1, mandatory=False, segment="a")
        with pytest.raises(AttributeError):
            opportunity.offset = 2  # type: ignore

    def test_break_point_defaults_to_optional(self) -> None:
        """Test break points are optional unless flagged."""
        assert BreakPoint(3) == BreakPoint(offset=3, mandatory=False)
