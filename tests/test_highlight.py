"""Tests for highlight_spans.

Covers plain text, single and repeated occurrences, case preservation,
matches at the boundaries, and the empty text / empty query edge cases.
"""

from __future__ import annotations

from json_data_explorer import TextSpan, highlight_spans


def _join(spans: list[TextSpan]) -> str:
    return "".join(span.text for span in spans)


class TestHighlightSpans:
    def test_no_query_returns_plain_text(self) -> None:
        assert highlight_spans("hello", "") == [TextSpan("hello")]

    def test_no_occurrence_returns_plain_text(self) -> None:
        assert highlight_spans("hello", "xyz") == [TextSpan("hello")]

    def test_empty_text(self) -> None:
        assert highlight_spans("", "a") == []

    def test_single_occurrence_in_middle(self) -> None:
        assert highlight_spans("firstName", "st") == [
            TextSpan("fir"),
            TextSpan("st", is_highlighted=True),
            TextSpan("Name"),
        ]

    def test_case_insensitive_and_case_preserving(self) -> None:
        spans = highlight_spans("Alice and ALICE", "alice")
        assert spans == [
            TextSpan("Alice", is_highlighted=True),
            TextSpan(" and "),
            TextSpan("ALICE", is_highlighted=True),
        ]

    def test_whole_text_match(self) -> None:
        assert highlight_spans("Paris", "PARIS") == [
            TextSpan("Paris", is_highlighted=True)
        ]

    def test_adjacent_occurrences_do_not_overlap(self) -> None:
        spans = highlight_spans("aaa", "aa")
        assert spans == [TextSpan("aa", is_highlighted=True), TextSpan("a")]

    def test_spans_reassemble_text(self) -> None:
        text = "The quick brown fox jumps over the lazy dog"
        assert _join(highlight_spans(text, "the")) == text

    def test_length_changing_lowercase_keeps_positions(self) -> None:
        # "İ".lower() is two code points long
        assert highlight_spans("İstanbul", "stan") == [
            TextSpan("İ"),
            TextSpan("stan", is_highlighted=True),
            TextSpan("bul"),
        ]

    def test_non_ascii_case_pair(self) -> None:
        assert highlight_spans("Straße ÄPFEL", "äpfel") == [
            TextSpan("Straße "),
            TextSpan("ÄPFEL", is_highlighted=True),
        ]

    def test_regex_metacharacters_are_literal(self) -> None:
        assert highlight_spans("a.b a+b", "a+b") == [
            TextSpan("a.b "),
            TextSpan("a+b", is_highlighted=True),
        ]
