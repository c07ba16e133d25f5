"""The matcher contract and negation.

A matcher is an immutable predicate paired with a description. Applying it
to a value returns :data:`~matchkit.result.MATCH` or a
:class:`~matchkit.result.Mismatch` explaining why the value failed.

INVARIANT: ``apply`` never raises for a well-typed value and never mutates
the matcher. The only exceptions are ``throws`` (which runs the block it is
given) and ordering matchers applied to incomparable values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from matchkit.result import MATCH, MatchResult, Mismatch

if TYPE_CHECKING:
    from matchkit.output.formatters import ValueFormatter


@runtime_checkable
class Describable(Protocol):
    """Anything that can describe itself as a standalone phrase."""

    @property
    def description(self) -> str: ...


class Matcher[T](ABC):
    """Base class for all matchers.

    Subclasses are frozen dataclasses that provide :attr:`description` and
    :meth:`apply`. Constructors whose negation reads better than
    ``"not <description>"`` override :attr:`negated_description`.

    Usage::

        @dataclass(frozen=True)
        class IsEven(Matcher[int]):
            @property
            def description(self) -> str:
                return "is even"

            @property
            def negated_description(self) -> str:
                return "is odd"

            def apply(self, actual: int) -> MatchResult:
                return MATCH if actual % 2 == 0 else self._mismatch_was(actual)
    """

    formatter: ValueFormatter | None = None

    @property
    @abstractmethod
    def description(self) -> str:
        """Phrase completing "value ...", e.g. ``"is equal to 10"``."""

    @property
    def negated_description(self) -> str:
        """Phrase for the negated matcher; defaults to ``"not <description>"``."""
        return f"not {self.description}"

    @abstractmethod
    def apply(self, actual: T) -> MatchResult:
        """Test *actual*, returning MATCH or a Mismatch."""

    def __call__(self, actual: T) -> MatchResult:
        return self.apply(actual)

    def describe_actual(self, actual: T) -> str:
        """Explain a value that matched, for use when this matcher is negated."""
        return f"was: {self.format_value(actual)}"

    def format_value(self, value: Any) -> str:
        """Render *value* with this matcher's formatter."""
        return self.value_formatter(value)

    @property
    def value_formatter(self) -> ValueFormatter:
        """The injected formatter, or the process-wide default."""
        if self.formatter is not None:
            return self.formatter
        from matchkit.output.formatters import default_formatter

        return default_formatter()

    def _mismatch_was(self, actual: Any) -> Mismatch:
        return Mismatch(description=f"was: {self.format_value(actual)}")

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True)
class Negation[T](Matcher[T]):
    """Inverts *negated*: matches exactly when it mismatches.

    Build through :func:`negate` so double negation collapses back to the
    original matcher.
    """

    negated: Matcher[T]

    @property
    def description(self) -> str:
        return self.negated.negated_description

    @property
    def negated_description(self) -> str:
        return self.negated.description

    def apply(self, actual: T) -> MatchResult:
        if self.negated.apply(actual):
            return Mismatch(description=self.negated.describe_actual(actual))
        return MATCH

    def format_value(self, value: Any) -> str:
        return self.negated.format_value(value)


def negate[T](matcher: Matcher[T]) -> Matcher[T]:
    """Return the logical negation of *matcher*.

    ``negate(negate(m))`` is ``m`` itself.
    """
    if isinstance(matcher, Negation):
        return matcher.negated
    return Negation(matcher)


not_ = negate
