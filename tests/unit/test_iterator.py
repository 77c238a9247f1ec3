"""Unit tests for OpportunityIterator and the convenience functions."""

import copy

import pytest

from linebreak.core import OpportunityIterator, decode_text, line_breaks, split_segments
from linebreak.domain import Opportunity
from linebreak.exceptions import TextDecodingError

WORKED_EXAMPLE = "Hello, world!\nThis is an (English) example."

SAMPLE_TEXTS = [
    "a",
    " ",
    "Hello world",
    WORKED_EXAMPLE,
    "a\r\nb\rc\nd\x85e",
    "\n\n\n",
    "  leading and trailing  ",
    "(\u0301 a) 1\u0301% \ufffc x\u200by",
    "\u4e00\u4e01\u3002\u4e02\u3041",
    "\u05d0\u05d1 \u0e01\u0e02 \u1100\u1161\u11a8 \uac00\uac01",
    "\U0001f1e6\U0001f1e7\U0001f1e8 $100 -5 a/b \u2014\u2014",
    "\u0100\u00a7\u00a0x\u00adz\u00b4",
]


class TestWorkedExample:
    """The documented example sentence."""

    def test_segments(self, classifier):
        assert split_segments(WORKED_EXAMPLE, classifier) == [
            "Hello, ",
            "world!\n",
            "This ",
            "is ",
            "an ",
            "(English) ",
            "example.",
        ]

    def test_only_newline_break_is_mandatory(self, classifier):
        flags = [o.mandatory for o in line_breaks(WORKED_EXAMPLE, classifier)]
        assert flags == [False, True, False, False, False, False, False]

    def test_offsets(self, classifier):
        offsets = [o.offset for o in line_breaks(WORKED_EXAMPLE, classifier)]
        assert offsets == [7, 14, 19, 22, 25, 35, 43]


class TestIteratorLaws:
    """Properties every text must satisfy."""

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_segments_reproduce_text(self, classifier, text):
        assert "".join(split_segments(text, classifier)) == text

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_offsets_strictly_increase_to_length(self, classifier, text):
        offsets = [o.offset for o in line_breaks(text, classifier)]
        assert offsets == sorted(set(offsets))
        assert offsets[0] > 0
        assert offsets[-1] == len(text)

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_segment_matches_offsets(self, classifier, text):
        start = 0
        for opportunity in line_breaks(text, classifier):
            assert opportunity.segment == text[start : opportunity.offset]
            start = opportunity.offset

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_final_opportunity_is_optional(self, classifier, text):
        assert not list(line_breaks(text, classifier))[-1].mandatory

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_deterministic(self, classifier, text):
        assert list(line_breaks(text, classifier)) == list(line_breaks(text, classifier))


class TestOpportunityIterator:
    """Tests for the explicit iterator interface."""

    def test_empty_text(self, classifier):
        it = OpportunityIterator("", classifier)
        assert it.at_end
        assert list(it) == []

    def test_current_at_end_raises(self, classifier):
        it = OpportunityIterator("", classifier)
        with pytest.raises(IndexError):
            _ = it.current
        with pytest.raises(IndexError):
            it.advance()

    def test_manual_walk(self, classifier):
        it = OpportunityIterator("one two", classifier)
        assert it.current == Opportunity(offset=4, mandatory=False, segment="one ")
        it.advance()
        assert it.current == Opportunity(offset=7, mandatory=False, segment="two")
        it.advance()
        assert it.at_end

    def test_single_character(self, classifier):
        assert list(OpportunityIterator("x", classifier)) == [
            Opportunity(offset=1, mandatory=False, segment="x")
        ]

    def test_mandatory_breaks(self, classifier):
        opportunities = list(line_breaks("a\nb\r\nc", classifier))
        assert [(o.segment, o.mandatory) for o in opportunities] == [
            ("a\n", True),
            ("b\r\n", True),
            ("c", False),
        ]

    def test_trailing_newline(self, classifier):
        opportunities = list(line_breaks("a\n", classifier))
        assert opportunities == [Opportunity(offset=2, mandatory=False, segment="a\n")]

    def test_blank_lines(self, classifier):
        opportunities = list(line_breaks("\n\n", classifier))
        assert [(o.segment, o.mandatory) for o in opportunities] == [
            ("\n", True),
            ("\n", False),
        ]

    def test_copy_is_independent(self, classifier):
        it = line_breaks("one two three", classifier)
        it.advance()
        duplicate = it.copy()

        assert [o.segment for o in it] == ["two ", "three"]
        assert it.at_end
        assert not duplicate.at_end
        assert [o.segment for o in duplicate] == ["two ", "three"]

    def test_copy_module_support(self, classifier):
        it = line_breaks("one two", classifier)
        duplicate = copy.copy(it)
        next(it)
        assert duplicate.current.segment == "one "

    def test_copy_at_end(self, classifier):
        it = line_breaks("", classifier)
        assert it.copy().at_end

    def test_iterator_protocol(self, classifier):
        it = line_breaks("a b", classifier)
        assert iter(it) is it
        assert next(it).segment == "a "
        assert next(it).segment == "b"
        with pytest.raises(StopIteration):
            next(it)


class TestInputDecoding:
    """Tests for byte input."""

    def test_str_passes_through(self):
        assert decode_text("abc") == "abc"

    def test_utf8_bytes(self, classifier):
        assert split_segments("caf\u00e9 ok", classifier) == ["caf\u00e9 ", "ok"]
        segments = [o.segment for o in line_breaks("caf\u00e9 ok".encode(), classifier)]
        assert segments == ["caf\u00e9 ", "ok"]

    def test_other_encoding(self, classifier):
        data = "a b".encode("utf-16-le")
        segments = [o.segment for o in line_breaks(data, classifier, encoding="utf-16-le")]
        assert segments == ["a ", "b"]

    def test_offsets_count_characters_not_bytes(self, classifier):
        opportunities = list(line_breaks("\u00e9\u00e9 x".encode(), classifier))
        assert opportunities[0].offset == 3

    def test_invalid_bytes(self, classifier):
        with pytest.raises(TextDecodingError) as exc_info:
            line_breaks(b"ab\xffcd", classifier)
        assert exc_info.value.encoding == "utf-8"
        assert exc_info.value.position == 2
