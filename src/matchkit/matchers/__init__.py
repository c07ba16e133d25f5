"""Matcher layer — the matcher contract, combinators, and bundled matchers.

This layer depends on :mod:`matchkit.result` and the value formatter only.
It must never import from :mod:`matchkit.assertion`.
"""

from matchkit.matchers.base import Describable, Matcher, Negation, negate, not_
from matchkit.matchers.combinators import all_of, and_, any_of, or_
from matchkit.matchers.core import (
    absent,
    anything,
    equal_to,
    is_a,
    nothing,
    present,
    same_instance,
    satisfies,
)
from matchkit.matchers.ordering import (
    ClosedRange,
    closed_range,
    greater_than,
    greater_than_or_equal_to,
    is_within,
    less_than,
    less_than_or_equal_to,
)
from matchkit.matchers.projection import has
from matchkit.matchers.raising import throws
from matchkit.matchers.sequences import all_elements, any_element, has_element, has_size, is_empty
from matchkit.matchers.text import (
    contains_pattern,
    contains_substring,
    ends_with,
    is_blank,
    matches_pattern,
    starts_with,
)

__all__ = [
    "ClosedRange",
    "Describable",
    "Matcher",
    "Negation",
    "absent",
    "all_elements",
    "all_of",
    "and_",
    "any_element",
    "any_of",
    "anything",
    "closed_range",
    "contains_pattern",
    "contains_substring",
    "ends_with",
    "equal_to",
    "greater_than",
    "greater_than_or_equal_to",
    "has",
    "has_element",
    "has_size",
    "is_a",
    "is_blank",
    "is_empty",
    "is_within",
    "less_than",
    "less_than_or_equal_to",
    "matches_pattern",
    "negate",
    "not_",
    "nothing",
    "or_",
    "present",
    "same_instance",
    "satisfies",
    "starts_with",
    "throws",
]
