"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pystatlab.core.result import Result
from pystatlab.descriptive._moments import Quartiles

if TYPE_CHECKING:
    from pystatlab.descriptive.design import DescriptiveDesign
    from pystatlab.intervals.solution import CISolution


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for describe().

    std_dev and confidence_interval are None for a single observation,
    where the sample standard deviation is undefined.
    """
    count: int
    mean: float
    median: float
    mode: tuple[float, ...]
    variance: float
    std: float
    std_dev: float | None
    skewness: float
    kurtosis: float
    min: float
    max: float
    range: float
    quartiles: Quartiles
    confidence_interval: 'CISolution | None' = None


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    @property
    def count(self) -> int:
        return self._result.params.count

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def mode(self) -> tuple[float, ...]:
        """All values tied at the highest frequency, ascending."""
        return self._result.params.mode

    @property
    def variance(self) -> float:
        """Population variance (divide by n)."""
        return self._result.params.variance

    @property
    def std(self) -> float:
        """Population standard deviation."""
        return self._result.params.std

    @property
    def std_dev(self) -> float | None:
        """Sample standard deviation (divide by n - 1)."""
        return self._result.params.std_dev

    @property
    def skewness(self) -> float:
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis."""
        return self._result.params.kurtosis

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def q1(self) -> float:
        return self._result.params.quartiles.q1

    @property
    def q3(self) -> float:
        return self._result.params.quartiles.q3

    @property
    def iqr(self) -> float:
        return self._result.params.quartiles.iqr

    @property
    def confidence_interval(self) -> 'CISolution | None':
        """Confidence interval for the mean, default options."""
        return self._result.params.confidence_interval

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Two-column text table of every statistic."""
        p = self._result.params
        rows = [
            ("Count", f"{p.count:d}"),
            ("Mean", _fmt(p.mean)),
            ("Median", _fmt(p.median)),
            ("Mode", ", ".join(_fmt(m) for m in p.mode)),
            ("Variance", _fmt(p.variance)),
            ("Std (population)", _fmt(p.std)),
            ("Std (sample)", _fmt(p.std_dev)),
            ("Skewness", _fmt(p.skewness)),
            ("Kurtosis (excess)", _fmt(p.kurtosis)),
            ("Min", _fmt(p.min)),
            ("Q1", _fmt(p.quartiles.q1)),
            ("Q3", _fmt(p.quartiles.q3)),
            ("Max", _fmt(p.max)),
            ("Range", _fmt(p.range)),
            ("IQR", _fmt(p.quartiles.iqr)),
        ]
        if p.confidence_interval is not None:
            ci = p.confidence_interval
            pct = f"{ci.conf_level * 100:g}%"
            rows.append((f"{pct} CI for mean", f"[{_fmt(ci.lower)}, {_fmt(ci.upper)}]"))

        width = max(len(name) for name, _ in rows)
        lines = [f"Descriptive statistics: {self._design.name}", ""]
        lines.extend(f"{name:<{width}}  {value}" for name, value in rows)
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DescriptiveSolution(n={p.count}, mean={p.mean:.4g}, "
            f"std={p.std:.4g})"
        )


def _fmt(x: float | None) -> str:
    if x is None:
        return "NA"
    return f"{x:.6g}"
