"""
Goodness-of-fit solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pystatlab.core.result import Result
from pystatlab.distributions.families import Distribution, DistributionParams
from pystatlab.gof._common import GoFParams, GoFTestType

if TYPE_CHECKING:
    from pystatlab.gof.design import GoFDesign


@dataclass
class GoFSolution:
    """
    User-facing goodness-of-fit results.

    Wraps Result[GoFParams].
    """
    _result: Result[GoFParams]
    _design: 'GoFDesign | None'

    @property
    def test_type(self) -> GoFTestType:
        return self._result.params.test_type

    @property
    def distribution(self) -> Distribution:
        return self._result.params.distribution

    @property
    def statistic(self) -> float:
        return self._result.params.statistic

    @property
    def critical_value(self) -> float | None:
        return self._result.params.critical_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def reject(self) -> bool:
        """
        Decision at the significance level.

        KS and chi-square reject when the statistic exceeds the critical
        value; Anderson-Darling and Jarque-Bera when p_value < alpha.
        """
        return self._result.params.reject

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def significance_level(self) -> float:
        return self._result.params.alpha

    @property
    def sample_size(self) -> int:
        return self._result.params.n

    @property
    def df(self) -> int | None:
        return self._result.params.df

    @property
    def parameters(self) -> DistributionParams | None:
        return self._result.params.parameters

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def extras(self) -> dict[str, Any]:
        return self._result.params.extras or {}

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
        p = self._result.params
        lines = [f"\t{p.method}", ""]
        lines.append(f"data:  n = {p.n}, hypothesized distribution: {p.distribution.value}")
        if p.parameters is not None:
            params = ", ".join(f"{k} = {v:.6g}" for k, v in p.parameters.as_dict().items())
            lines.append(f"parameters: {params}")

        parts = [f"statistic = {p.statistic:.5g}"]
        if p.df is not None:
            parts.append(f"df = {p.df}")
        parts.append(f"p-value = {p.p_value:.4g}")
        lines.append(", ".join(parts))

        crit = "none" if p.critical_value is None else f"{p.critical_value:.4g}"
        lines.append(
            f"critical value = {crit}, "
            f"reject H0 at alpha = {p.alpha:g}: {'yes' if p.reject else 'no'}"
        )
        for w in self._result.warnings:
            lines.append(f"warning: {w}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"GoFSolution(test_type={p.test_type.value!r}, "
            f"statistic={p.statistic:.4g}, p_value={p.p_value:.4g}, "
            f"reject={p.reject})"
        )
