"""Unit tests for the codepoint classifier."""

import pytest

from linebreak.core import ClassRange, Classifier
from linebreak.domain import LineBreakClass
from linebreak.exceptions import OverlappingRangeError

L = LineBreakClass


class TestClassRange:
    """Tests for ClassRange."""

    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError, match="Invalid codepoint range"):
            ClassRange(0x5A, 0x41, L.AL)

    def test_out_of_range_codepoint_rejected(self):
        with pytest.raises(ValueError):
            ClassRange(0x10FFFF, 0x110000, L.XX)


class TestClassifier:
    """Tests for Classifier construction and lookup."""

    def test_classify_inside_and_outside_ranges(self):
        classifier = Classifier(
            [
                ClassRange(0x30, 0x39, L.NU),
                ClassRange(0x41, 0x5A, L.AL),
            ]
        )
        assert classifier.classify(0x30) is L.NU
        assert classifier.classify(0x39) is L.NU
        assert classifier.classify(0x41) is L.AL
        assert classifier.classify(0x5A) is L.AL
        assert classifier.classify(0x3A) is L.XX
        assert classifier.classify(0x00) is L.XX
        assert classifier.classify(0x10FFFF) is L.XX

    def test_custom_default(self):
        classifier = Classifier([], default=L.AL)
        assert classifier.classify(0x1234) is L.AL
        assert classifier.default is L.AL

    def test_unsorted_input(self):
        classifier = Classifier(
            [
                ClassRange(0x41, 0x5A, L.AL),
                ClassRange(0x20, 0x20, L.SP),
            ]
        )
        assert [r.start for r in classifier.ranges] == [0x20, 0x41]
        assert classifier.classify(0x20) is L.SP

    def test_adjacent_ranges_with_same_class_merge(self):
        classifier = Classifier(
            [
                ClassRange(0x41, 0x4D, L.AL),
                ClassRange(0x4E, 0x5A, L.AL),
                ClassRange(0x5B, 0x5B, L.OP),
            ]
        )
        assert len(classifier) == 2
        assert classifier.ranges[0] == ClassRange(0x41, 0x5A, L.AL)

    def test_gap_prevents_merge(self):
        classifier = Classifier(
            [
                ClassRange(0x41, 0x4D, L.AL),
                ClassRange(0x4F, 0x5A, L.AL),
            ]
        )
        assert len(classifier) == 2
        assert classifier.classify(0x4E) is L.XX

    def test_overlapping_ranges_rejected(self):
        with pytest.raises(OverlappingRangeError):
            Classifier(
                [
                    ClassRange(0x41, 0x5A, L.AL),
                    ClassRange(0x50, 0x60, L.ID),
                ]
            )

    def test_from_mapping(self):
        classifier = Classifier.from_mapping({0x20: L.SP, 0x21: L.EX, 0x22: L.EX})
        assert classifier.classify(0x20) is L.SP
        assert classifier.classify(0x22) is L.EX
        assert classifier.classify(0x23) is L.XX
        assert len(classifier) == 2

    def test_classify_char(self):
        classifier = Classifier.from_mapping({ord("("): L.OP})
        assert classifier.classify_char("(") is L.OP

    def test_repr(self):
        classifier = Classifier.from_mapping({0x20: L.SP})
        assert repr(classifier) == "Classifier(ranges=1, default=XX)"


class TestExcerptClassifier:
    """Lookups against the LineBreak.txt excerpt."""

    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("A", L.AL),
            (" ", L.SP),
            ("(", L.OP),
            (")", L.CP),
            ("\n", L.LF),
            ("\r", L.CR),
            ("\u0085", L.NL),
            ("§", L.AI),
            ("\u0301", L.CM),
            ("א", L.HL),
            ("ก", L.SA),
            ("\u200b", L.ZW),
            ("ぁ", L.CJ),
            ("一", L.ID),
            ("\ufffc", L.CB),
            ("\U0001f1e6", L.RI),
        ],
    )
    def test_classes(self, classifier, char, expected):
        assert classifier.classify_char(char) is expected

    def test_aliased_classes(self, classifier):
        """Newer property values are folded onto the 40 known classes."""
        assert classifier.classify(0x200D) is L.CM
        assert classifier.classify(0x1F3FB) is L.CM

    def test_unlisted_codepoint_is_unknown(self, classifier):
        assert classifier.classify(0x0100) is L.XX
