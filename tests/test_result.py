"""Tests for Match and Mismatch."""

import pydantic
import pytest

from matchkit.result import MATCH, Match, Mismatch


class TestMatch:
    def test_truthy(self) -> None:
        assert bool(MATCH) is True

    def test_equal_to_fresh_instance(self) -> None:
        assert Match() == MATCH

    def test_repr(self) -> None:
        assert repr(MATCH) == "Match()"

    def test_never_equal_to_mismatch(self) -> None:
        assert MATCH != Mismatch(description="was: 1")


class TestMismatch:
    def test_falsy(self) -> None:
        assert bool(Mismatch(description="was: 20")) is False

    def test_carries_description(self) -> None:
        assert Mismatch(description="was: 20").description == "was: 20"

    def test_value_equality(self) -> None:
        assert Mismatch(description="was: 20") == Mismatch(description="was: 20")
        assert Mismatch(description="was: 20") != Mismatch(description="was: 21")

    def test_empty_description_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            Mismatch(description="")

    def test_frozen(self) -> None:
        mismatch = Mismatch(description="was: 20")
        with pytest.raises(pydantic.ValidationError):
            mismatch.description = "was: 21"  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(Mismatch(description="was: 20")) == "Mismatch('was: 20')"
