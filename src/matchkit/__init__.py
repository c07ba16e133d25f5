"""matchkit — composable matchers with readable mismatch descriptions."""

from matchkit.assertion import assert_that, describe_failure
from matchkit.config.logging import configure_logging
from matchkit.errors import (
    ConfigError,
    IncomparableValueError,
    MatcherAssertionError,
    MatchkitError,
)
from matchkit.matchers import *  # noqa: F403
from matchkit.matchers import __all__ as _matchers_all
from matchkit.output.formatters import ValueFormatter, default_formatter, describe
from matchkit.result import MATCH, Match, MatchResult, Mismatch

__version__ = "0.1.0"

__all__ = [
    *_matchers_all,
    "MATCH",
    "ConfigError",
    "IncomparableValueError",
    "Match",
    "MatchResult",
    "MatcherAssertionError",
    "MatchkitError",
    "Mismatch",
    "ValueFormatter",
    "assert_that",
    "configure_logging",
    "default_formatter",
    "describe",
    "describe_failure",
]
