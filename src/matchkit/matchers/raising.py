"""Block matcher: ``throws`` runs a zero-argument callable and inspects what it raises.

This is the one matcher with a side effect: applying it invokes the block
exactly once, synchronously. Only the expected exception type is caught.
Anything else propagates unmodified because it signals a broken test or a
real defect, not a mismatch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from matchkit.matchers.base import Matcher
from matchkit.result import MATCH, MatchResult, Mismatch

if TYPE_CHECKING:
    from matchkit.output.formatters import ValueFormatter

logger = logging.getLogger(__name__)

Block = Callable[[], Any]


@dataclass(frozen=True)
class Throws[E: BaseException](Matcher[Block]):
    expected_type: type[E]
    inner: Matcher[E] | None = None
    allow_subclasses: bool = False
    formatter: ValueFormatter | None = field(default=None, kw_only=True, compare=False, repr=False)

    def __post_init__(self) -> None:
        expected = self.expected_type
        if not (isinstance(expected, type) and issubclass(expected, BaseException)):
            msg = f"throws() expects an exception type, got {self.expected_type!r}"
            raise TypeError(msg)

    @property
    def type_name(self) -> str:
        return self.value_formatter.describe_type(self.expected_type)

    @property
    def description(self) -> str:
        if self.inner is None:
            return f"throws {self.type_name}"
        return f"throws {self.type_name} & {self.inner.description}"

    @property
    def negated_description(self) -> str:
        if self.inner is None:
            return f"does not throw {self.type_name}"
        return f"does not throw {self.type_name} or {self.inner.negated_description}"

    def apply(self, actual: Block) -> MatchResult:
        if not callable(actual):
            return Mismatch(description=f"was: {self.value_formatter.describe_type_of(actual)}")
        try:
            actual()
        except BaseException as exc:
            if not self._accepts(exc):
                raise
            logger.debug("Block raised expected %s: %s", type(exc).__name__, exc)
            if self.inner is None:
                return MATCH
            return self.inner.apply(exc)
        return Mismatch(description="did not throw")

    def describe_actual(self, actual: Block) -> str:
        return f"threw {self.type_name}"

    def _accepts(self, exc: BaseException) -> bool:
        if self.allow_subclasses:
            return isinstance(exc, self.expected_type)
        return type(exc) is self.expected_type


def throws[E: BaseException](
    expected_type: type[E],
    inner: Matcher[E] | None = None,
    *,
    allow_subclasses: bool = False,
    formatter: ValueFormatter | None = None,
) -> Matcher[Block]:
    """Match blocks that raise exactly *expected_type*.

    Args:
        expected_type: The exception class the block must raise.
        inner: Optional matcher applied to the raised exception.
        allow_subclasses: Also accept subclasses of *expected_type*.
        formatter: Formatter for the exception type name.

    A block raising any other exception (including a subclass when
    *allow_subclasses* is False) lets that exception propagate. A block that
    returns normally mismatches with ``"did not throw"``; a value that is not
    callable mismatches with ``"was: a <type name>"``.
    """
    return Throws(expected_type, inner, allow_subclasses, formatter=formatter)
