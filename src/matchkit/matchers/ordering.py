"""Ordering matchers over totally ordered values.

Comparisons use the value's own ordering operators. Comparing values that
do not support ordering against each other (``"a" < 5``) raises
:class:`~matchkit.errors.IncomparableValueError` instead of reporting a
mismatch.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from matchkit.errors import IncomparableValueError
from matchkit.matchers.base import Matcher
from matchkit.result import MATCH, MatchResult

if TYPE_CHECKING:
    from matchkit.output.formatters import ValueFormatter


@dataclass(frozen=True)
class ClosedRange[T]:
    """Inclusive bounds ``lower..upper``.

    Unlike :class:`range`, both ends belong to the range and any ordered
    type works, e.g. ``ClosedRange(1.5, 2.5)`` or ``ClosedRange("a", "m")``.
    """

    lower: T
    upper: T

    def __post_init__(self) -> None:
        if self.upper < self.lower:  # type: ignore[operator]
            msg = f"empty range: {self.lower}..{self.upper}"
            raise ValueError(msg)

    @classmethod
    def from_range(cls, bounds: range) -> ClosedRange[int]:
        """Convert a step-1, non-empty :class:`range` to its closed equivalent."""
        if bounds.step != 1:
            msg = f"only step-1 ranges have closed bounds, got step {bounds.step}"
            raise ValueError(msg)
        if not bounds:
            msg = f"empty range: {bounds!r}"
            raise ValueError(msg)
        return ClosedRange(bounds.start, bounds.stop - 1)

    def __contains__(self, value: object) -> bool:
        return self.lower <= value <= self.upper  # type: ignore[operator]

    def __str__(self) -> str:
        return f"{self.lower}..{self.upper}"


@dataclass(frozen=True)
class Comparison[T](Matcher[T]):
    """``actual <relation> bound``, e.g. ``actual > 5`` for "greater than"."""

    relation: str
    bound: T
    compare: Callable[[Any, Any], bool] = field(repr=False)
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def description(self) -> str:
        return f"is {self.relation} {self.format_value(self.bound)}"

    @property
    def negated_description(self) -> str:
        return f"is not {self.relation} {self.format_value(self.bound)}"

    def apply(self, actual: T) -> MatchResult:
        try:
            matched = self.compare(actual, self.bound)
        except TypeError as exc:
            raise IncomparableValueError(actual, self.bound) from exc
        return MATCH if matched else self._mismatch_was(actual)


@dataclass(frozen=True)
class IsWithin[T](Matcher[T]):
    bounds: ClosedRange[T]
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def _rendered_bounds(self) -> str:
        lower = self.format_value(self.bounds.lower)
        upper = self.format_value(self.bounds.upper)
        return f"{lower}..{upper}"

    @property
    def description(self) -> str:
        return f"is within {self._rendered_bounds}"

    @property
    def negated_description(self) -> str:
        return f"is not within {self._rendered_bounds}"

    def apply(self, actual: T) -> MatchResult:
        try:
            matched = actual in self.bounds
        except TypeError as exc:
            raise IncomparableValueError(actual, self.bounds.lower) from exc
        return MATCH if matched else self._mismatch_was(actual)


def greater_than[T](bound: T, *, formatter: ValueFormatter | None = None) -> Matcher[T]:
    return Comparison("greater than", bound, operator.gt, formatter=formatter)


def greater_than_or_equal_to[T](bound: T, *, formatter: ValueFormatter | None = None) -> Matcher[T]:
    return Comparison("greater than or equal to", bound, operator.ge, formatter=formatter)


def less_than[T](bound: T, *, formatter: ValueFormatter | None = None) -> Matcher[T]:
    return Comparison("less than", bound, operator.lt, formatter=formatter)


def less_than_or_equal_to[T](bound: T, *, formatter: ValueFormatter | None = None) -> Matcher[T]:
    return Comparison("less than or equal to", bound, operator.le, formatter=formatter)


def closed_range[T](lower: T, upper: T) -> ClosedRange[T]:
    """Shorthand for ``ClosedRange(lower, upper)``."""
    return ClosedRange(lower, upper)


def is_within[T](
    bounds: ClosedRange[T] | range,
    *,
    formatter: ValueFormatter | None = None,
) -> Matcher[T]:
    """Match values inside *bounds*, both ends included.

    A :class:`range` is accepted as long as its step is 1; ``range(1, 21)``
    is the same as ``ClosedRange(1, 20)`` and is described ``"1..20"``.
    """
    if isinstance(bounds, range):
        bounds = ClosedRange.from_range(bounds)
    return IsWithin(bounds, formatter=formatter)
