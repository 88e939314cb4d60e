"""
Tests for TailType coercion and the accuracy tiers.
"""

import pytest

from pystatlab.core.compute.tolerances import (
    ERF,
    ERF_INV,
    EXACT,
    ToleranceTier,
    tier_for,
)
from pystatlab.core.exceptions import ValidationError
from pystatlab.core.tails import TailType, resolve_tail


class TestTailType:
    """Tail names and aliases resolve to the same members."""

    @pytest.mark.parametrize("value, expected", [
        ("two-tailed", TailType.TWO),
        ("two", TailType.TWO),
        ("TWO", TailType.TWO),
        ("left-tailed", TailType.LEFT),
        ("left", TailType.LEFT),
        ("right-tailed", TailType.RIGHT),
        (" Right ", TailType.RIGHT),
        (TailType.LEFT, TailType.LEFT),
    ])
    def test_resolve(self, value, expected):
        assert resolve_tail(value) is expected

    def test_unknown(self):
        with pytest.raises(ValidationError, match="tail must be one of"):
            resolve_tail("both")

    def test_is_two_sided(self):
        assert TailType.TWO.is_two_sided
        assert not TailType.LEFT.is_two_sided

    def test_str_value(self):
        assert TailType.RIGHT == "right-tailed"


class TestToleranceTiers:
    """Tiers are frozen and can be looked up by name."""

    def test_lookup(self):
        assert tier_for("erf") is ERF
        assert tier_for("exact") is EXACT

    def test_unknown(self):
        with pytest.raises(KeyError, match="Known tiers"):
            tier_for("nonexistent")

    def test_frozen(self):
        with pytest.raises(AttributeError):
            ERF.atol = 1.0

    def test_erf_inv_is_looser_than_erf(self):
        assert isinstance(ERF_INV, ToleranceTier)
        assert ERF_INV.rtol > ERF.rtol
