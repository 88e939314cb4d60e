"""
IntervalDesign: tagged union for confidence-interval inputs.

Uses factory classmethods per interval type. The `interval_type` field
identifies which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from numpy.typing import ArrayLike

from pystatlab.core.exceptions import InvalidParameterError
from pystatlab.core.tails import TailType, resolve_tail
from pystatlab.core.validation import (
    check_choice,
    check_consistent_length,
    check_non_negative_int,
    check_open_unit,
    check_positive,
)
from pystatlab.descriptive.design import DescriptiveDesign
from pystatlab.intervals._common import (
    IntervalType,
    LARGE_SAMPLE_N,
    ProportionMethod,
    TwoProportionMethod,
    TwoSampleMethod,
)


def _as_design(data: ArrayLike | DescriptiveDesign, name: str) -> DescriptiveDesign:
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data, name=name)


def _check_counts(successes: int, trials: int, suffix: str = "") -> tuple[int, int]:
    trials_name = f"trials{suffix}"
    successes_name = f"successes{suffix}"
    t = check_non_negative_int(trials, trials_name)
    if t == 0:
        raise InvalidParameterError(
            f"{trials_name} must be positive, got {trials}",
            name=trials_name, value=trials,
        )
    s = check_non_negative_int(successes, successes_name)
    if s > t:
        raise InvalidParameterError(
            f"{successes_name} ({s}) cannot exceed {trials_name} ({t})",
            name=successes_name, value=successes,
        )
    return s, t


@dataclass(frozen=True)
class IntervalDesign:
    """
    Design for confidence intervals.

    Uses a tagged-union approach: the `interval_type` field identifies
    which fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    interval_type: IntervalType

    _x: DescriptiveDesign | None = None
    _y: DescriptiveDesign | None = None

    _conf_level: float = 0.95
    _tail: TailType = TailType.TWO

    # Single mean
    _is_normal: bool = False
    _known_variance: bool = False
    _population_variance: float | None = None

    # Method for two-sample / proportion intervals
    _method: TwoSampleMethod | ProportionMethod | TwoProportionMethod | None = None

    # Proportions
    _successes: int = 0
    _trials: int = 0
    _successes2: int = 0
    _trials2: int = 0

    # --- Properties ---

    @property
    def x(self) -> DescriptiveDesign | None:
        return self._x

    @property
    def y(self) -> DescriptiveDesign | None:
        return self._y

    @property
    def conf_level(self) -> float:
        return self._conf_level

    @property
    def tail(self) -> TailType:
        return self._tail

    @property
    def is_normal(self) -> bool:
        return self._is_normal

    @property
    def known_variance(self) -> bool:
        return self._known_variance

    @property
    def population_variance(self) -> float | None:
        return self._population_variance

    @property
    def method(self):
        return self._method

    @property
    def successes(self) -> int:
        return self._successes

    @property
    def trials(self) -> int:
        return self._trials

    @property
    def successes2(self) -> int:
        return self._successes2

    @property
    def trials2(self) -> int:
        return self._trials2

    # --- Factory classmethods ---

    @classmethod
    def for_mean(
        cls,
        data: ArrayLike | DescriptiveDesign,
        conf_level: float = 0.95,
        *,
        is_normal: bool = False,
        known_variance: bool = False,
        population_variance: float | None = None,
        tail: TailType | str = TailType.TWO,
    ) -> IntervalDesign:
        """Build design for a single-mean interval."""
        x = _as_design(data, "data")
        pv = None
        if known_variance:
            if population_variance is None:
                raise InvalidParameterError(
                    "population_variance is required when known_variance=True",
                    name="population_variance", value=None,
                )
            pv = check_positive(population_variance, "population_variance")
        elif is_normal or x.n <= LARGE_SAMPLE_N:
            # t interval needs the sample standard deviation
            x.require(2)
        return cls(
            interval_type=IntervalType.MEAN,
            _x=x,
            _conf_level=check_open_unit(conf_level, "conf_level"),
            _tail=resolve_tail(tail),
            _is_normal=bool(is_normal),
            _known_variance=bool(known_variance),
            _population_variance=pv,
        )

    @classmethod
    def for_two_sample(
        cls,
        data1: ArrayLike | DescriptiveDesign,
        data2: ArrayLike | DescriptiveDesign,
        conf_level: float = 0.95,
        *,
        method: TwoSampleMethod | str = TwoSampleMethod.WELCH,
        tail: TailType | str = TailType.TWO,
    ) -> IntervalDesign:
        """Build design for a difference of two means."""
        x = _as_design(data1, "data1").require(2)
        y = _as_design(data2, "data2").require(2)
        method = check_choice(TwoSampleMethod, method, "method")
        if method is TwoSampleMethod.PAIRED:
            check_consistent_length(x.data, y.data, names=("data1", "data2"))
        return cls(
            interval_type=IntervalType.TWO_SAMPLE,
            _x=x,
            _y=y,
            _conf_level=check_open_unit(conf_level, "conf_level"),
            _tail=resolve_tail(tail),
            _method=method,
        )

    @classmethod
    def for_proportion(
        cls,
        successes: int,
        trials: int,
        conf_level: float = 0.95,
        *,
        method: ProportionMethod | str = ProportionMethod.WALD,
        tail: TailType | str = TailType.TWO,
    ) -> IntervalDesign:
        """Build design for a single proportion."""
        s, t = _check_counts(successes, trials)
        return cls(
            interval_type=IntervalType.PROPORTION,
            _conf_level=check_open_unit(conf_level, "conf_level"),
            _tail=resolve_tail(tail),
            _method=check_choice(ProportionMethod, method, "method"),
            _successes=s,
            _trials=t,
        )

    @classmethod
    def for_two_proportion(
        cls,
        successes1: int,
        trials1: int,
        successes2: int,
        trials2: int,
        conf_level: float = 0.95,
        *,
        method: TwoProportionMethod | str = TwoProportionMethod.WALD,
        tail: TailType | str = TailType.TWO,
    ) -> IntervalDesign:
        """Build design for a difference of two proportions."""
        s1, t1 = _check_counts(successes1, trials1, "1")
        s2, t2 = _check_counts(successes2, trials2, "2")
        return cls(
            interval_type=IntervalType.TWO_PROPORTION,
            _conf_level=check_open_unit(conf_level, "conf_level"),
            _tail=resolve_tail(tail),
            _method=check_choice(TwoProportionMethod, method, "method"),
            _successes=s1,
            _trials=t1,
            _successes2=s2,
            _trials2=t2,
        )

    def __repr__(self) -> str:
        return (
            f"IntervalDesign(interval_type={self.interval_type.value!r}, "
            f"conf_level={self._conf_level}, tail={self._tail.value!r})"
        )
