"""Tests for string matchers."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

import pytest

from matchkit.matchers.base import Matcher, not_
from matchkit.matchers.text import (
    contains_pattern,
    contains_substring,
    ends_with,
    is_blank,
    matches_pattern,
    starts_with,
)
from matchkit.result import MATCH, Mismatch


class TestSubstrings:
    def test_contains_substring(self) -> None:
        m = contains_substring("ell")
        assert m("hello") == MATCH
        assert m("help") == Mismatch(description='was: "help"')
        assert m.description == 'contains substring "ell"'
        assert not_(m).description == 'does not contain substring "ell"'

    def test_contains_substring_ignoring_case(self) -> None:
        m = contains_substring("ELL", ignore_case=True)
        assert m("hello") == MATCH
        assert m.description == 'contains substring "ELL" ignoring case'

    def test_starts_with(self) -> None:
        m = starts_with("he")
        assert m("hello") == MATCH
        assert m("oh hello") == Mismatch(description='was: "oh hello"')
        assert not_(m).description == 'does not start with "he"'

    def test_starts_with_ignoring_case(self) -> None:
        assert starts_with("HE", ignore_case=True)("hello") == MATCH

    def test_ends_with(self) -> None:
        m = ends_with("lo")
        assert m("hello") == MATCH
        assert m.description == 'ends with "lo"'
        assert not_(m).description == 'does not end with "lo"'
        assert ends_with("LO", ignore_case=True)("hello") == MATCH

    def test_non_string_mismatches_with_type(self) -> None:
        assert contains_substring("1")(123) == Mismatch(description="was: a int")
        assert starts_with("x")(None) == Mismatch(description="was: a NoneType")


class TestPatterns:
    def test_matches_pattern_is_full_match(self) -> None:
        m = matches_pattern(r"\d+")
        assert m("123") == MATCH
        assert m("123abc") == Mismatch(description='was: "123abc"')
        assert m.description == r"matches pattern /\d+/"
        assert not_(m).description == r"does not match pattern /\d+/"

    def test_contains_pattern_searches(self) -> None:
        m = contains_pattern(r"\d+")
        assert m("abc123") == MATCH
        assert m("abc") == Mismatch(description='was: "abc"')
        assert m.description == r"contains pattern /\d+/"

    def test_compiled_pattern(self) -> None:
        assert matches_pattern(re.compile("[a-z]+"))("abc") == MATCH

    def test_ignore_case(self) -> None:
        m = matches_pattern("[a-z]+", ignore_case=True)
        assert m("ABC") == MATCH
        assert m.description == "matches pattern /[a-z]+/ ignoring case"
        assert matches_pattern(re.compile("[a-z]+"), ignore_case=True)("ABC") == MATCH


class TestBlank:
    def test_is_blank(self) -> None:
        m = is_blank()
        assert m("") == MATCH
        assert m(" \t\n") == MATCH
        assert m(" x ") == Mismatch(description='was: " x "')
        assert not_(m).description == "is not blank"


class TestCaseSensitivity:
    @pytest.mark.parametrize(
        ("factory", "operand", "actual"),
        [
            (contains_substring, "ELL", "hello"),
            (starts_with, "HE", "hello"),
            (ends_with, "LO", "hello"),
        ],
    )
    def test_case_matters_unless_ignored(
        self, factory: Callable[..., Matcher[Any]], operand: str, actual: str
    ) -> None:
        assert factory(operand)(actual) == Mismatch(description='was: "hello"')
        assert factory(operand, ignore_case=True)(actual) == MATCH
        assert factory(operand.lower())(actual) == MATCH
