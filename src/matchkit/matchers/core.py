"""Structural matchers: equality, identity, nullability, type, universal.

Every literal in a description or mismatch is rendered by the matcher's
value formatter (``formatter=`` or the process-wide default), so ``None``
reads as ``null`` and strings are double quoted with escaping.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from matchkit.matchers.base import Matcher
from matchkit.result import MATCH, MatchResult, Mismatch

if TYPE_CHECKING:
    from matchkit.output.formatters import ValueFormatter


@dataclass(frozen=True)
class EqualTo[T](Matcher[T]):
    expected: T
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def description(self) -> str:
        return f"is equal to {self.format_value(self.expected)}"

    @property
    def negated_description(self) -> str:
        return f"is not equal to {self.format_value(self.expected)}"

    def apply(self, actual: T) -> MatchResult:
        if actual is self.expected:
            matched = True
        elif actual is None or self.expected is None:
            matched = False
        else:
            matched = actual == self.expected
        return MATCH if matched else self._mismatch_was(actual)


@dataclass(frozen=True)
class SameInstance[T](Matcher[T]):
    expected: T
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def description(self) -> str:
        return f"is same instance as {self.format_value(self.expected)}"

    @property
    def negated_description(self) -> str:
        return f"is not same instance as {self.format_value(self.expected)}"

    def apply(self, actual: T) -> MatchResult:
        return MATCH if actual is self.expected else self._mismatch_was(actual)


@dataclass(frozen=True)
class Absent(Matcher[Any]):
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def description(self) -> str:
        return "is null"

    @property
    def negated_description(self) -> str:
        return "is not null"

    def apply(self, actual: Any) -> MatchResult:
        return MATCH if actual is None else self._mismatch_was(actual)


@dataclass(frozen=True)
class Present[T](Matcher[T | None]):
    """Non-None, and matching *inner* when one is given."""

    inner: Matcher[T] | None = None
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def description(self) -> str:
        if self.inner is None:
            return "is not null"
        return f"is not null & {self.inner.description}"

    @property
    def negated_description(self) -> str:
        if self.inner is None:
            return "is null"
        return f"is null or {self.inner.negated_description}"

    def apply(self, actual: T | None) -> MatchResult:
        if actual is None:
            return self._mismatch_was(actual)
        if self.inner is None:
            return MATCH
        return self.inner.apply(actual)


@dataclass(frozen=True)
class IsA[U](Matcher[Any]):
    """Instance of *expected_type*, then matching *inner* after narrowing."""

    expected_type: type[U]
    inner: Matcher[U] | None = None
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.expected_type, type):
            msg = f"is_a() expects a type, got {self.expected_type!r}"
            raise TypeError(msg)

    @property
    def type_name(self) -> str:
        return self.value_formatter.describe_type(self.expected_type)

    @property
    def description(self) -> str:
        if self.inner is None:
            return f"is a {self.type_name}"
        return f"is a {self.type_name} & {self.inner.description}"

    @property
    def negated_description(self) -> str:
        if self.inner is None:
            return f"is not a {self.type_name}"
        return f"is not a {self.type_name} or {self.inner.negated_description}"

    def apply(self, actual: Any) -> MatchResult:
        if not isinstance(actual, self.expected_type):
            return Mismatch(description=f"was: {self.value_formatter.describe_type_of(actual)}")
        if self.inner is None:
            return MATCH
        return self.inner.apply(actual)


@dataclass(frozen=True)
class Anything(Matcher[Any]):
    @property
    def description(self) -> str:
        return "anything"

    @property
    def negated_description(self) -> str:
        return "nothing"

    def apply(self, actual: Any) -> MatchResult:
        return MATCH


@dataclass(frozen=True)
class Nothing(Matcher[Any]):
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def description(self) -> str:
        return "nothing"

    @property
    def negated_description(self) -> str:
        return "anything"

    def apply(self, actual: Any) -> MatchResult:
        return self._mismatch_was(actual)


@dataclass(frozen=True)
class Satisfies[T](Matcher[T]):
    """Adapts a boolean predicate into a matcher."""

    predicate: Callable[[T], bool]
    text: str
    negated_text: str | None = None
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("satisfies() needs a non-empty description")

    @property
    def description(self) -> str:
        return self.text

    @property
    def negated_description(self) -> str:
        if self.negated_text is not None:
            return self.negated_text
        return f"not {self.text}"

    def apply(self, actual: T) -> MatchResult:
        return MATCH if self.predicate(actual) else self._mismatch_was(actual)


def equal_to[T](expected: T, *, formatter: ValueFormatter | None = None) -> Matcher[T]:
    """Match values ``==`` to *expected*; ``None`` only equals ``None``."""
    return EqualTo(expected, formatter=formatter)


def same_instance[T](expected: T, *, formatter: ValueFormatter | None = None) -> Matcher[T]:
    """Match only the very object *expected* (``is``), not merely an equal one."""
    return SameInstance(expected, formatter=formatter)


def absent(*, formatter: ValueFormatter | None = None) -> Matcher[Any]:
    """Match ``None``."""
    return Absent(formatter=formatter)


def present[T](
    inner: Matcher[T] | None = None,
    *,
    formatter: ValueFormatter | None = None,
) -> Matcher[T | None]:
    """Match any non-None value, optionally also requiring *inner* to match it."""
    return Present(inner, formatter=formatter)


def is_a[U](
    expected_type: type[U],
    inner: Matcher[U] | None = None,
    *,
    formatter: ValueFormatter | None = None,
) -> Matcher[Any]:
    """Match instances of *expected_type*, then apply *inner* to the narrowed value.

    A value of the wrong type mismatches with ``"was: a <type name>"``; an
    *inner* mismatch is reported unchanged.
    """
    return IsA(expected_type, inner, formatter=formatter)


def anything() -> Matcher[Any]:
    """Match every value, including ``None``."""
    return Anything()


def nothing(*, formatter: ValueFormatter | None = None) -> Matcher[Any]:
    """Match no value at all."""
    return Nothing(formatter=formatter)


def satisfies[T](
    predicate: Callable[[T], bool],
    description: str,
    *,
    negated_description: str | None = None,
    formatter: ValueFormatter | None = None,
) -> Matcher[T]:
    """Build a matcher from a boolean *predicate* and its *description*.

    Examples:
        >>> is_even = satisfies(lambda n: n % 2 == 0, "is even", negated_description="is odd")
        >>> is_even(4)
        Match()
    """
    return Satisfies(predicate, description, negated_description, formatter=formatter)
