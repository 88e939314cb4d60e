"""
DescriptiveDesign: validated, immutable wrapper around one sample.

Every statistic in pystatlab starts from a DescriptiveDesign. The sorted
copy, mean and population variance are computed at most once per design
and shared by all statistics that need them.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatlab.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_min_samples,
    check_nonempty,
)


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Wraps a 1D sample of finite values. The stored array is a private,
    read-only float64 copy, so the caller's data is never sorted or
    modified in place.

    Construction:
        DescriptiveDesign.from_array(data)
    """
    _data: NDArray[np.floating[Any]]
    _name: str = "x"

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str = "x") -> DescriptiveDesign:
        """
        Build DescriptiveDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sequence of finite real numbers, at least one element.
        name : str
            Label used in error messages and summaries.

        Raises
        ------
        EmptyDataError
            If data has no elements.
        ValidationError
            If data is not numeric, not 1D, or contains NaN/Inf.
        """
        return cls._build(check_array(data, name), name)

    @classmethod
    def _build(cls, data: NDArray, name: str) -> DescriptiveDesign:
        """Internal builder with validation."""
        check_nonempty(data, name)
        check_1d(data, name)
        check_finite(data, name)
        data.setflags(write=False)
        return cls(_data=data, _name=name)

    def require(self, min_samples: int) -> DescriptiveDesign:
        """Raise ValidationError unless the sample has min_samples values."""
        check_min_samples(self._data, min_samples, self._name)
        return self

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """The sample (read-only)."""
        return self._data

    @property
    def name(self) -> str:
        return self._name

    @property
    def n(self) -> int:
        """Number of observations."""
        return int(self._data.shape[0])

    @cached_property
    def sorted(self) -> NDArray[np.floating[Any]]:
        """Ascending copy of the sample (read-only)."""
        s = np.sort(self._data)
        s.setflags(write=False)
        return s

    @cached_property
    def mean(self) -> float:
        return float(np.mean(self._data))

    @cached_property
    def variance(self) -> float:
        """Population variance (divide by n)."""
        return float(np.mean((self._data - self.mean) ** 2))

    @property
    def min(self) -> float:
        return float(self.sorted[0])

    @property
    def max(self) -> float:
        return float(self.sorted[-1])

    def __repr__(self) -> str:
        return f"DescriptiveDesign(name={self._name!r}, n={self.n})"
