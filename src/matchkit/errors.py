"""Exception hierarchy for matchkit.

Mismatches are never raised; these cover misuse, configuration problems,
and the assertion entry point.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from matchkit.matchers.base import Matcher
    from matchkit.result import Mismatch


class MatchkitError(Exception):
    """Base class for matchkit errors."""


class ConfigError(MatchkitError):
    """A configuration file could not be read or validated."""


class IncomparableValueError(MatchkitError, TypeError):
    """An ordering matcher was applied to a value it cannot be compared with."""

    def __init__(self, actual: Any, bound: Any) -> None:
        self.actual = actual
        self.bound = bound
        super().__init__(
            f"cannot compare {type(actual).__name__} with {type(bound).__name__}"
        )


class MatcherAssertionError(AssertionError):
    """Raised by ``assert_that`` when the actual value mismatches.

    Attributes:
        matcher: The matcher that was applied.
        actual: The value it was applied to.
        mismatch: The mismatch it produced.
    """

    def __init__(
        self,
        message: str,
        *,
        matcher: Matcher[Any],
        actual: Any,
        mismatch: Mismatch,
    ) -> None:
        self.matcher = matcher
        self.actual = actual
        self.mismatch = mismatch
        super().__init__(message)
