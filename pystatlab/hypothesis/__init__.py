"""
Hypothesis testing module.

Public API:
    z_test(data, mu0, sigma)       - one-sample z-test, sigma known
    t_test(data, mu0)              - one-sample t-test
    t_test_p_value(t, df, tail)    - p-value from a t statistic
"""

from pystatlab.hypothesis.solvers import z_test, t_test, t_test_p_value
from pystatlab.hypothesis._pvalues import z_test_p_value
from pystatlab.hypothesis.design import HypothesisDesign
from pystatlab.hypothesis._common import HTestParams, HTestType
from pystatlab.hypothesis.solution import HTestSolution

__all__ = [
    "z_test",
    "t_test",
    "t_test_p_value",
    "z_test_p_value",
    "HypothesisDesign",
    "HTestParams",
    "HTestType",
    "HTestSolution",
]
