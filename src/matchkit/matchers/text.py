"""String matchers.

Non-string values never match; they mismatch with ``"was: a <type name>"``.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from matchkit.matchers.base import Matcher
from matchkit.result import MATCH, MatchResult, Mismatch

if TYPE_CHECKING:
    from matchkit.output.formatters import ValueFormatter


@dataclass(frozen=True)
class TextMatcher(Matcher[Any]):
    """A string predicate with its positive and negative phrasing.

    *operand*, when given, is rendered with the value formatter after the
    verb, e.g. ``starts with "ab"``.
    """

    verb: str
    negated_verb: str
    test: Callable[[str], bool] = field(repr=False)
    operand: str | None = None
    ignore_case: bool = False
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    def _phrase(self, verb: str) -> str:
        parts = [verb]
        if self.operand is not None:
            parts.append(self.format_value(self.operand))
        if self.ignore_case:
            parts.append("ignoring case")
        return " ".join(parts)

    @property
    def description(self) -> str:
        return self._phrase(self.verb)

    @property
    def negated_description(self) -> str:
        return self._phrase(self.negated_verb)

    def apply(self, actual: Any) -> MatchResult:
        if not isinstance(actual, str):
            return Mismatch(description=f"was: {self.value_formatter.describe_type_of(actual)}")
        return MATCH if self.test(actual) else self._mismatch_was(actual)


def contains_substring(
    substring: str,
    *,
    ignore_case: bool = False,
    formatter: ValueFormatter | None = None,
) -> Matcher[Any]:
    needle = substring.casefold() if ignore_case else substring

    def test(text: str) -> bool:
        return needle in (text.casefold() if ignore_case else text)

    return TextMatcher(
        "contains substring",
        "does not contain substring",
        test,
        substring,
        ignore_case,
        formatter=formatter,
    )


def starts_with(
    prefix: str,
    *,
    ignore_case: bool = False,
    formatter: ValueFormatter | None = None,
) -> Matcher[Any]:
    wanted = prefix.casefold() if ignore_case else prefix

    def test(text: str) -> bool:
        return (text.casefold() if ignore_case else text).startswith(wanted)

    return TextMatcher(
        "starts with", "does not start with", test, prefix, ignore_case, formatter=formatter
    )


def ends_with(
    suffix: str,
    *,
    ignore_case: bool = False,
    formatter: ValueFormatter | None = None,
) -> Matcher[Any]:
    wanted = suffix.casefold() if ignore_case else suffix

    def test(text: str) -> bool:
        return (text.casefold() if ignore_case else text).endswith(wanted)

    return TextMatcher(
        "ends with", "does not end with", test, suffix, ignore_case, formatter=formatter
    )


def _compile(pattern: str | re.Pattern[str], ignore_case: bool) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        if ignore_case and not pattern.flags & re.IGNORECASE:
            return re.compile(pattern.pattern, pattern.flags | re.IGNORECASE)
        return pattern
    return re.compile(pattern, re.IGNORECASE if ignore_case else 0)


def matches_pattern(
    pattern: str | re.Pattern[str],
    *,
    ignore_case: bool = False,
    formatter: ValueFormatter | None = None,
) -> Matcher[Any]:
    """Match strings that *pattern* matches in full."""
    regex = _compile(pattern, ignore_case)
    return TextMatcher(
        f"matches pattern /{regex.pattern}/",
        f"does not match pattern /{regex.pattern}/",
        lambda s: regex.fullmatch(s) is not None,
        ignore_case=ignore_case,
        formatter=formatter,
    )


def contains_pattern(
    pattern: str | re.Pattern[str],
    *,
    ignore_case: bool = False,
    formatter: ValueFormatter | None = None,
) -> Matcher[Any]:
    """Match strings containing at least one match of *pattern*."""
    regex = _compile(pattern, ignore_case)
    return TextMatcher(
        f"contains pattern /{regex.pattern}/",
        f"does not contain pattern /{regex.pattern}/",
        lambda s: regex.search(s) is not None,
        ignore_case=ignore_case,
        formatter=formatter,
    )


def is_blank(*, formatter: ValueFormatter | None = None) -> Matcher[Any]:
    """Match empty or whitespace-only strings."""
    return TextMatcher("is blank", "is not blank", lambda s: not s.strip(), formatter=formatter)
