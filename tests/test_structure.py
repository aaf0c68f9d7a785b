"""Tests for window classification."""

from __future__ import annotations

import typing

import pytest

from rulelex.errors import ContractViolation
from rulelex.structure import Multiple, Single, TokenStructure, classify
from rulelex.tokens import str_to_tokens


class TestClassify:
    def test_single(self) -> None:
        tokens = str_to_tokens("a")
        result = classify(tokens[:1])
        assert result == Single(tokens[0])
        assert result.token is tokens[0]

    @pytest.mark.parametrize("size", [2, 3, 10])
    def test_multiple(self, size: int) -> None:
        tokens = str_to_tokens("x" * 12)
        assert classify(tokens[:size]) == Multiple()

    def test_empty_window_is_contract_violation(self) -> None:
        with pytest.raises(ContractViolation) as exc_info:
            classify([])
        assert exc_info.value.operation == "classify"

    def test_sentinel_alone_is_single(self) -> None:
        tokens = str_to_tokens("")
        match classify(tokens):
            case Single(token=tok):
                assert tok.content() == ""
            case Multiple():
                pytest.fail("one-token window classified as Multiple")


class TestExhaustiveness:
    """TokenStructure is a closed union of exactly two variants."""

    def test_union_members(self) -> None:
        assert set(typing.get_args(TokenStructure)) == {Single, Multiple}

    @pytest.mark.parametrize("size", [1, 2, 5])
    def test_every_result_is_a_member(self, size: int) -> None:
        result = classify(str_to_tokens("abcdef")[:size])
        assert isinstance(result, TokenStructure)

    def test_variants_are_immutable(self) -> None:
        single = Single(str_to_tokens("a")[0])
        with pytest.raises(AttributeError):
            single.token = None  # type: ignore[misc]
