"""Conjunction and disjunction of matchers.

Both evaluate the left operand first and short-circuit:

- ``and_`` returns the left mismatch without evaluating the right operand.
- ``or_`` returns MATCH on a left match without evaluating the right operand.

Otherwise the right operand's result is returned verbatim. Operands are
shared, never copied, and may be reused in other compositions.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce

from matchkit.matchers.base import Matcher
from matchkit.matchers.core import anything, nothing
from matchkit.result import MATCH, MatchResult

__all__ = [
    "Conjunction",
    "Disjunction",
    "all_of",
    "and_",
    "any_of",
    "or_",
]


@dataclass(frozen=True)
class Conjunction[T](Matcher[T]):
    """Matches when both *left* and *right* match."""

    left: Matcher[T]
    right: Matcher[T]

    @property
    def description(self) -> str:
        return f"{self.left.description} & {self.right.description}"

    @property
    def negated_description(self) -> str:
        return f"{self.left.negated_description} or {self.right.negated_description}"

    def apply(self, actual: T) -> MatchResult:
        result = self.left.apply(actual)
        if not result:
            return result
        return self.right.apply(actual)


@dataclass(frozen=True)
class Disjunction[T](Matcher[T]):
    """Matches when either *left* or *right* matches."""

    left: Matcher[T]
    right: Matcher[T]

    @property
    def description(self) -> str:
        return f"{self.left.description} or {self.right.description}"

    @property
    def negated_description(self) -> str:
        return f"{self.left.negated_description} & {self.right.negated_description}"

    def apply(self, actual: T) -> MatchResult:
        if self.left.apply(actual):
            return MATCH
        return self.right.apply(actual)


def and_[T](left: Matcher[T], right: Matcher[T]) -> Matcher[T]:
    """Both *left* and *right*; described as ``"<left> & <right>"``."""
    return Conjunction(left, right)


def or_[T](left: Matcher[T], right: Matcher[T]) -> Matcher[T]:
    """Either *left* or *right*; described as ``"<left> or <right>"``."""
    return Disjunction(left, right)


def all_of[T](*matchers: Matcher[T]) -> Matcher[T]:
    """Left-fold *matchers* with :func:`and_`. No matchers means ``anything()``."""
    if not matchers:
        return anything()
    return reduce(and_, matchers)


def any_of[T](*matchers: Matcher[T]) -> Matcher[T]:
    """Left-fold *matchers* with :func:`or_`. No matchers means ``nothing()``."""
    if not matchers:
        return nothing()
    return reduce(or_, matchers)
