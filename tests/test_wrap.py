"""Tests for wrap(), the merge primitive."""

from __future__ import annotations

import pytest

from rulelex.errors import ContractViolation, RulelexError
from rulelex.tokens import Token, str_to_tokens, token_from_string, wrap


class TestWrapResult:
    """Span and tag union of merged tokens."""

    def test_span_covers_run(self) -> None:
        tokens = str_to_tokens("hello world")
        merged = wrap(tokens[0:5])
        assert (merged.start, merged.end) == (0, 5)
        assert merged.content() == "hello"

    def test_tags_are_union_plus_extra(self) -> None:
        tokens = str_to_tokens("aab")
        merged = wrap(tokens[0:3], ["word", "c"])
        assert merged.tags == {"a", "b", "word", "c"}

    def test_no_extra_tags(self) -> None:
        tokens = str_to_tokens("xy")
        assert wrap(tokens[0:2]).tags == {"x", "y"}

    def test_single_token_run(self) -> None:
        tokens = str_to_tokens("q")
        merged = wrap(tokens[0:1], ["letter"])
        assert merged.content() == "q"
        assert merged.tags == {"q", "letter"}

    def test_includes_sentinel(self) -> None:
        tokens = str_to_tokens("ab")
        merged = wrap(tokens)
        assert merged.content() == "ab"
        assert (merged.start, merged.end) == (0, 2)

    def test_inputs_untouched(self) -> None:
        tokens = str_to_tokens("ab")
        before = list(tokens)
        wrap(tokens[0:2], ["c"])
        assert tokens == before

    def test_wrap_of_wrapped_tokens(self) -> None:
        tokens = str_to_tokens("abcd")
        left = wrap(tokens[0:2], ["l"])
        right = wrap(tokens[2:4], ["r"])
        merged = wrap([left, right], ["all"])
        assert merged.content() == "abcd"
        assert merged.tags == {"a", "b", "c", "d", "l", "r", "all"}

    def test_tagged_copies_stay_wrappable(self) -> None:
        tokens = str_to_tokens("ab")
        merged = wrap([tokens[0].with_tags("x"), tokens[1]])
        assert merged.tags == {"a", "b", "x"}


class TestWrapContract:
    """Precondition failures raise ContractViolation."""

    def test_empty_run(self) -> None:
        with pytest.raises(ContractViolation, match="empty"):
            wrap([])

    def test_gap(self) -> None:
        tokens = str_to_tokens("abc")
        with pytest.raises(ContractViolation, match="starts at 2"):
            wrap([tokens[0], tokens[2]])

    def test_out_of_order(self) -> None:
        tokens = str_to_tokens("abc")
        with pytest.raises(ContractViolation):
            wrap([tokens[1], tokens[0]])

    def test_overlap(self) -> None:
        body = "abc"
        with pytest.raises(ContractViolation):
            wrap([Token(body, 0, 2), Token(body, 1, 3)])

    def test_different_buffers(self) -> None:
        with pytest.raises(ContractViolation, match="different source buffer"):
            wrap([token_from_string("a"), Token("zb", 1, 2)])

    def test_equal_but_distinct_buffers(self) -> None:
        body = "ab"
        copy = "".join(["a", "b"])
        assert copy == body and copy is not body
        with pytest.raises(ContractViolation, match="different source buffer"):
            wrap([Token(body, 0, 1), Token(copy, 1, 2)])

    def test_string_tags_rejected(self) -> None:
        tokens = str_to_tokens("ab")
        with pytest.raises(ContractViolation, match="^wrap: tags must be"):
            wrap(tokens[0:2], "word")  # type: ignore[arg-type]

    def test_is_rulelex_error(self) -> None:
        with pytest.raises(RulelexError):
            wrap([])
