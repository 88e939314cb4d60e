"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams] and provides an htest-style report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import math

from pystatlab.core.result import Result
from pystatlab.core.tails import TailType
from pystatlab.hypothesis._common import HTestParams

if TYPE_CHECKING:
    from pystatlab.hypothesis.design import HypothesisDesign


@dataclass
class HTestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[HTestParams]. All test record fields are available as
    properties, and summary() renders the familiar htest layout.
    """
    _result: Result[HTestParams]
    _design: 'HypothesisDesign | None'

    # --- Test record ---

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        """Name of the test statistic ('z' or 't')."""
        return self._result.params.statistic_name

    @property
    def critical_value(self) -> float:
        """Positive critical value for the requested tail."""
        return self._result.params.critical_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def reject(self) -> bool:
        """Whether H0 is rejected at level alpha (critical-value rule)."""
        return self._result.params.reject

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def conf_int(self) -> tuple[float, float]:
        """Two-sided (1 - alpha) confidence interval for the mean."""
        return self._result.params.conf_int

    @property
    def conf_level(self) -> float:
        return 1.0 - self._result.params.alpha

    @property
    def estimate(self) -> dict[str, float]:
        return self._result.params.estimate

    @property
    def null_value(self) -> dict[str, float]:
        return self._result.params.null_value

    @property
    def parameter(self) -> dict[str, float] | None:
        """Distribution parameters (e.g. {'df': 9.0})."""
        return self._result.params.parameter

    @property
    def standard_error(self) -> float:
        return self._result.params.standard_error

    @property
    def tail(self) -> TailType:
        return self._result.params.tail

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    @property
    def extras(self) -> dict[str, Any] | None:
        return self._result.params.extras

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
        Format as an htest-style report.

        Produces output like:
            One Sample t-test

        data:  data
        t = 2.2345, df = 9, p-value = 0.03891
        critical value = 2.262, reject H0 at alpha = 0.05: no
        alternative hypothesis: true mean is not equal to 5
        95 percent confidence interval:
         4.9123457  6.5678901
        sample estimates:
                  mean
              5.740118
        """
        p = self._result.params
        lines = [f"\t{p.method}", ""]
        lines.append(f"data:  {p.data_name}")

        parts = [f"{p.statistic_name} = {p.statistic:.5g}"]
        if p.parameter is not None:
            for name, val in p.parameter.items():
                parts.append(f"{name} = {val:.5g}")
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))

        lines.append(
            f"critical value = {p.critical_value:.4g}, "
            f"reject H0 at alpha = {p.alpha:g}: {'yes' if p.reject else 'no'}"
        )

        nv_name, nv_val = next(iter(p.null_value.items()))
        relation = {
            TailType.TWO: "is not equal to",
            TailType.LEFT: "is less than",
            TailType.RIGHT: "is greater than",
        }[p.tail]
        lines.append(f"alternative hypothesis: true {nv_name} {relation} {nv_val:g}")

        lines.append(f"{(1.0 - p.alpha) * 100:g} percent confidence interval:")
        lo, hi = p.conf_int
        lines.append(f" {_format_number(lo)}  {_format_number(hi)}")

        lines.append("sample estimates:")
        lines.append(" ".join(f"{n:>14s}" for n in p.estimate))
        lines.append(" ".join(f"{v:14.7g}" for v in p.estimate.values()))

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g}, reject={p.reject})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"


def _format_number(x: float) -> str:
    """Format a number, handling infinity."""
    if math.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.7g}"
