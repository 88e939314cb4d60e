"""
Goodness-of-fit tests.

Public API:
    ks_test(data, distribution, parameters)        - Kolmogorov-Smirnov
    chisq_test(data, distribution, parameters)     - chi-square on equal-width bins
    anderson_darling_test(data)                    - Anderson-Darling normality test
    jarque_bera_test(data)                         - Jarque-Bera normality test
    gof_test(data, test_type, distribution)        - dispatch by test name
    qq_points(data)                                - normal Q-Q plot coordinates
"""

from pystatlab.gof.solvers import (
    ks_test,
    chisq_test,
    anderson_darling_test,
    jarque_bera_test,
    gof_test,
    qq_points,
)
from pystatlab.gof.design import GoFDesign
from pystatlab.gof._common import (
    ChiSquareBin,
    GoFParams,
    GoFTestType,
    MIN_GOF_SAMPLES,
)
from pystatlab.gof.solution import GoFSolution

__all__ = [
    "ks_test",
    "chisq_test",
    "anderson_darling_test",
    "jarque_bera_test",
    "gof_test",
    "qq_points",
    "GoFDesign",
    "GoFParams",
    "GoFSolution",
    "GoFTestType",
    "ChiSquareBin",
    "MIN_GOF_SAMPLES",
]
