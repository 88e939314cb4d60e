"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from numpy.typing import ArrayLike

from pystatlab.core.tails import TailType, resolve_tail
from pystatlab.core.validation import (
    check_finite_scalar,
    check_open_unit,
    check_positive,
)
from pystatlab.descriptive.design import DescriptiveDesign
from pystatlab.hypothesis._common import DEFAULT_ALPHA, HTestType


def _as_design(data: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data, name="data")


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for one-sample location tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: HTestType

    _x: DescriptiveDesign | None = None
    _mu0: float = 0.0
    _sigma: float | None = None
    _alpha: float = DEFAULT_ALPHA
    _tail: TailType = TailType.TWO

    # --- Properties ---

    @property
    def x(self) -> DescriptiveDesign | None:
        return self._x

    @property
    def mu0(self) -> float:
        return self._mu0

    @property
    def sigma(self) -> float | None:
        return self._sigma

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def tail(self) -> TailType:
        return self._tail

    @property
    def data_name(self) -> str:
        return self._x.name if self._x is not None else ""

    # --- Factory classmethods ---

    @classmethod
    def for_z_test(
        cls,
        data: ArrayLike | DescriptiveDesign,
        mu0: float,
        sigma: float,
        *,
        alpha: float = DEFAULT_ALPHA,
        tail: TailType | str = TailType.TWO,
    ) -> HypothesisDesign:
        """Build design for a one-sample z-test with known sigma."""
        return cls(
            test_type=HTestType.Z_TEST,
            _x=_as_design(data),
            _mu0=check_finite_scalar(mu0, "mu0"),
            _sigma=check_positive(sigma, "sigma"),
            _alpha=check_open_unit(alpha, "alpha"),
            _tail=resolve_tail(tail),
        )

    @classmethod
    def for_t_test(
        cls,
        data: ArrayLike | DescriptiveDesign,
        mu0: float,
        *,
        alpha: float = DEFAULT_ALPHA,
        tail: TailType | str = TailType.TWO,
    ) -> HypothesisDesign:
        """Build design for a one-sample t-test."""
        return cls(
            test_type=HTestType.T_TEST,
            _x=_as_design(data).require(2),
            _mu0=check_finite_scalar(mu0, "mu0"),
            _alpha=check_open_unit(alpha, "alpha"),
            _tail=resolve_tail(tail),
        )

    def __repr__(self) -> str:
        return (
            f"HypothesisDesign(test_type={self.test_type.value!r}, "
            f"n={self._x.n if self._x is not None else 0}, mu0={self._mu0}, "
            f"tail={self._tail.value!r})"
        )
