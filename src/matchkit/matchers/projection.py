"""Property projection: match a value through an accessor."""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from matchkit.matchers.base import Matcher
from matchkit.matchers.core import present
from matchkit.result import MatchResult


@dataclass(frozen=True)
class Has[T, U](Matcher[T]):
    """Projects the actual value through *accessor*, then applies *inner*.

    The inner mismatch is reported unchanged.
    """

    name: str
    accessor: Callable[[T], U]
    inner: Matcher[U]

    @property
    def description(self) -> str:
        return f"has {self.name} that {self.inner.description}"

    @property
    def negated_description(self) -> str:
        return f"does not have {self.name} that {self.inner.description}"

    def apply(self, actual: T) -> MatchResult:
        return self.inner.apply(self.accessor(actual))

    def format_value(self, value: Any) -> str:
        return self.inner.format_value(value)


def _accessor_name(accessor: Callable[..., Any]) -> str:
    name = getattr(accessor, "__name__", None)
    if not name or name == "<lambda>":
        msg = "has() needs name= when the accessor has no usable __name__"
        raise ValueError(msg)
    return name


def has[T](
    accessor: str | Callable[[T], Any],
    inner: Matcher[Any] | None = None,
    *,
    name: str | None = None,
) -> Matcher[T]:
    """Match values whose projection through *accessor* matches *inner*.

    Args:
        accessor: An attribute path such as ``"message"`` or ``"owner.name"``,
            or a pure callable taking the actual value.
        inner: Matcher for the projected value. Defaults to ``present()``.
        name: How the property reads in descriptions. Defaults to the
            attribute path or the callable's ``__name__``.

    Examples:
        >>> has("real").description
        'has real that is not null'
    """
    if isinstance(accessor, str):
        resolved_name = name or accessor
        projection: Callable[[T], Any] = operator.attrgetter(accessor)
    else:
        resolved_name = name or _accessor_name(accessor)
        projection = accessor
    return Has(resolved_name, projection, inner if inner is not None else present())
