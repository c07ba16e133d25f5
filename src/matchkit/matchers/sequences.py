"""Collection matchers: emptiness, size, and element matchers.

Element matchers iterate the actual value once, so one-shot iterators are
consumed by matching. Values that are not collections (no ``len`` for the
size matchers, not iterable for the element matchers) mismatch with
``"was: a <type name>"``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sized
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from matchkit.matchers.base import Matcher
from matchkit.matchers.core import equal_to
from matchkit.result import MATCH, MatchResult, Mismatch

if TYPE_CHECKING:
    from matchkit.output.formatters import ValueFormatter


def _shown(actual: Any, items: list[Any]) -> Any:
    """Sized collections render as given; one-shot iterables as the items seen."""
    return actual if isinstance(actual, Sized) else items


def _wrong_type(matcher: Matcher[Any], actual: Any) -> Mismatch:
    return Mismatch(description=f"was: {matcher.value_formatter.describe_type_of(actual)}")


@dataclass(frozen=True)
class IsEmpty(Matcher[Any]):
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def description(self) -> str:
        return "is empty"

    @property
    def negated_description(self) -> str:
        return "is not empty"

    def apply(self, actual: Any) -> MatchResult:
        if not isinstance(actual, Sized):
            return _wrong_type(self, actual)
        return MATCH if len(actual) == 0 else self._mismatch_was(actual)


@dataclass(frozen=True)
class HasSize(Matcher[Any]):
    size: Matcher[int]
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def description(self) -> str:
        return f"has size that {self.size.description}"

    @property
    def negated_description(self) -> str:
        return f"does not have size that {self.size.description}"

    def apply(self, actual: Any) -> MatchResult:
        if not isinstance(actual, Sized):
            return _wrong_type(self, actual)
        length = len(actual)
        if self.size.apply(length):
            return MATCH
        return Mismatch(description=f"had size {length}")


@dataclass(frozen=True)
class HasElement(Matcher[Any]):
    element: Any
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def description(self) -> str:
        return f"contains {self.format_value(self.element)}"

    @property
    def negated_description(self) -> str:
        return f"does not contain {self.format_value(self.element)}"

    def apply(self, actual: Any) -> MatchResult:
        if not isinstance(actual, Iterable):
            return _wrong_type(self, actual)
        items = list(actual)
        return MATCH if self.element in items else self._mismatch_was(_shown(actual, items))


@dataclass(frozen=True)
class AnyElement(Matcher[Any]):
    element: Matcher[Any]
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def description(self) -> str:
        return f"has an element that {self.element.description}"

    @property
    def negated_description(self) -> str:
        return f"has no element that {self.element.description}"

    def apply(self, actual: Any) -> MatchResult:
        if not isinstance(actual, Iterable):
            return _wrong_type(self, actual)
        items = list(actual)
        if any(self.element.apply(item) for item in items):
            return MATCH
        return self._mismatch_was(_shown(actual, items))


@dataclass(frozen=True)
class AllElements(Matcher[Any]):
    element: Matcher[Any]
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def description(self) -> str:
        return f"has only elements that {self.element.description}"

    @property
    def negated_description(self) -> str:
        return f"has an element that {self.element.negated_description}"

    def apply(self, actual: Any) -> MatchResult:
        if not isinstance(actual, Iterable):
            return _wrong_type(self, actual)
        for index, item in enumerate(actual):
            result = self.element.apply(item)
            if isinstance(result, Mismatch):
                return Mismatch(description=f"element {index} {result.description}")
        return MATCH


def is_empty(*, formatter: ValueFormatter | None = None) -> Matcher[Any]:
    """Match sized values of length zero."""
    return IsEmpty(formatter=formatter)


def has_size(
    size: int | Matcher[int],
    *,
    formatter: ValueFormatter | None = None,
) -> Matcher[Any]:
    """Match sized values whose length is *size* (or matches it)."""
    size_matcher = equal_to(size) if isinstance(size, int) else size
    return HasSize(size_matcher, formatter=formatter)


def has_element(element: Any, *, formatter: ValueFormatter | None = None) -> Matcher[Any]:
    """Match iterables containing an item ``==`` to *element*."""
    return HasElement(element, formatter=formatter)


def any_element(
    element: Matcher[Any],
    *,
    formatter: ValueFormatter | None = None,
) -> Matcher[Any]:
    """Match iterables with at least one item matching *element*."""
    return AnyElement(element, formatter=formatter)


def all_elements(
    element: Matcher[Any],
    *,
    formatter: ValueFormatter | None = None,
) -> Matcher[Any]:
    """Match iterables whose every item matches *element*.

    The mismatch names the first failing position, e.g. ``"element 1 was: 7"``.
    """
    return AllElements(element, formatter=formatter)
