"""
Confidence interval solution type.

CISolution wraps Result[CIParams] and renders a short text report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import math

from pystatlab.core.result import Result
from pystatlab.core.tails import TailType
from pystatlab.intervals._common import CIParams

if TYPE_CHECKING:
    from pystatlab.intervals.design import IntervalDesign


@dataclass
class CISolution:
    """
    User-facing confidence interval.

    Wraps Result[CIParams]. One-sided mean intervals have an infinite
    bound on their open side.
    """
    _result: Result[CIParams]
    _design: 'IntervalDesign | None'

    @property
    def lower(self) -> float:
        return self._result.params.lower

    @property
    def upper(self) -> float:
        return self._result.params.upper

    @property
    def bounds(self) -> tuple[float, float]:
        """(lower, upper)."""
        p = self._result.params
        return (p.lower, p.upper)

    @property
    def estimate(self) -> float:
        """Point estimate the interval is built around."""
        return self._result.params.estimate

    @property
    def estimates(self) -> dict[str, float] | None:
        """Named component estimates."""
        return self._result.params.estimates

    @property
    def margin_of_error(self) -> float:
        return self._result.params.margin_of_error

    @property
    def critical_value(self) -> float:
        return self._result.params.critical_value

    @property
    def standard_error(self) -> float:
        return self._result.params.standard_error

    @property
    def df(self) -> float | None:
        return self._result.params.df

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def tail(self) -> TailType:
        return self._result.params.tail

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

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as a short report.

        Produces output like:
            t distribution (normal, unknown variance)

        95 percent confidence interval (two-tailed):
         4.123457  6.876543
        estimate = 5.5, margin of error = 1.376543
        critical value = 2.262, standard error = 0.6085, df = 9
        """
        p = self._result.params
        lines = [f"\t{p.method}", ""]
        lines.append(
            f"{p.conf_level * 100:g} percent confidence interval ({p.tail.value}):"
        )
        lines.append(f" {_format_number(p.lower)}  {_format_number(p.upper)}")
        lines.append(
            f"estimate = {p.estimate:.7g}, margin of error = {p.margin_of_error:.7g}"
        )
        stat_line = (
            f"critical value = {p.critical_value:.4g}, "
            f"standard error = {p.standard_error:.4g}"
        )
        if p.df is not None:
            stat_line += f", df = {p.df:g}"
        lines.append(stat_line)
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"CISolution(method={p.method!r}, lower={p.lower:.4g}, "
            f"upper={p.upper:.4g}, conf_level={p.conf_level})"
        )


def _format_number(x: float) -> str:
    """Format a number, handling infinity."""
    if math.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.7g}"
