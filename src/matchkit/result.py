"""Match and Mismatch — the outcome of applying a matcher.

INVARIANT: Applying a matcher always returns exactly one of these two
values. A mismatch is data, never an exception.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Match(BaseModel):
    """The value satisfied the matcher."""

    model_config = {"frozen": True}

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "Match()"


class Mismatch(BaseModel):
    """The value did not satisfy the matcher.

    Attributes:
        description: Why the value failed, e.g. ``"was: 20"``. Never empty.
    """

    model_config = {"frozen": True}

    description: str = Field(min_length=1)

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Mismatch({self.description!r})"


type MatchResult = Match | Mismatch

MATCH = Match()
