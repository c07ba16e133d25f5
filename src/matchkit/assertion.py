"""Assertion entry point — apply a matcher and fail the test on mismatch.

The failure message format is a contract with existing test logs::

    Expected: <matcher description>
         but: <mismatch description>
"""

from __future__ import annotations

import logging
from typing import Any

from matchkit.errors import MatcherAssertionError
from matchkit.matchers.base import Matcher
from matchkit.result import Mismatch

logger = logging.getLogger(__name__)


def describe_failure(matcher: Matcher[Any], mismatch: Mismatch) -> str:
    """Render the two-line failure report for *matcher* and *mismatch*."""
    return f"Expected: {matcher.description}\n     but: {mismatch.description}"


def assert_that[T](actual: T, matcher: Matcher[T], message: str | None = None) -> None:
    """Raise :class:`MatcherAssertionError` unless *matcher* matches *actual*.

    Args:
        actual: The value under test (a zero-argument callable for ``throws``).
        matcher: The expectation.
        message: Optional first line prepended to the report.
    """
    __tracebackhide__ = True
    result = matcher.apply(actual)
    if not isinstance(result, Mismatch):
        return
    report = describe_failure(matcher, result)
    if message:
        report = f"{message}\n{report}"
    logger.debug("Assertion failed: %s", report)
    raise MatcherAssertionError(report, matcher=matcher, actual=actual, mismatch=result)
