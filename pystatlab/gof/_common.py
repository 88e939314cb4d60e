"""
Shared types for goodness-of-fit tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pystatlab.distributions.families import Distribution, DistributionParams

#: Smallest sample accepted by any goodness-of-fit test
MIN_GOF_SAMPLES = 5
DEFAULT_ALPHA = 0.05


class GoFTestType(str, Enum):
    KS = "kolmogorov-smirnov"
    CHI_SQUARE = "chi-square"
    ANDERSON_DARLING = "anderson-darling"
    JARQUE_BERA = "jarque-bera"

    @classmethod
    def _missing_(cls, value: object) -> GoFTestType | None:
        if isinstance(value, str):
            return _ALIASES.get(value.strip().lower().replace("_", "-"))
        return None

    @property
    def rejects_on_p_value(self) -> bool:
        """
        Rejection rule used by this test.

        KS and chi-square compare the statistic with the critical value;
        Anderson-Darling and Jarque-Bera compare the p-value with alpha.
        """
        return self in (GoFTestType.ANDERSON_DARLING, GoFTestType.JARQUE_BERA)


_ALIASES: dict[str, GoFTestType] = {
    "ks": GoFTestType.KS,
    "kolmogorov-smirnov": GoFTestType.KS,
    "chi-square": GoFTestType.CHI_SQUARE,
    "chisq": GoFTestType.CHI_SQUARE,
    "chi2": GoFTestType.CHI_SQUARE,
    "chi-squared": GoFTestType.CHI_SQUARE,
    "ad": GoFTestType.ANDERSON_DARLING,
    "anderson-darling": GoFTestType.ANDERSON_DARLING,
    "jb": GoFTestType.JARQUE_BERA,
    "jarque-bera": GoFTestType.JARQUE_BERA,
}


@dataclass(frozen=True)
class ChiSquareBin:
    """One (possibly merged) chi-square bin. Covers [start, end)."""
    start: float
    end: float
    observed: int
    expected: float


@dataclass(frozen=True)
class GoFParams:
    """
    Parameter payload for goodness-of-fit results.

    Attributes:
        test_type: Which test produced the result
        distribution: Hypothesized distribution family
        statistic: Test statistic (the adjusted A* for Anderson-Darling)
        critical_value: Critical value at alpha, or None when the test
            has none at this alpha (or chi-square has df <= 0)
        p_value: Approximate p-value
        reject: Decision under the test's rejection rule
        alpha: Significance level
        n: Sample size
        df: Degrees of freedom (chi-square and Jarque-Bera) or None
        parameters: Distribution parameters the data were tested against
        method: Human-readable method name
        extras: Test-specific details (bins, moments, raw statistic)
    """
    test_type: GoFTestType
    distribution: Distribution
    statistic: float
    critical_value: float | None
    p_value: float
    reject: bool
    alpha: float
    n: int
    df: int | None
    parameters: DistributionParams | None
    method: str
    extras: dict[str, Any] | None = None
