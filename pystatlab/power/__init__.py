"""
Power and sample-size module.

Public API:
    z_test_power(mu1, mu0, sigma, n)          - power of the z-test
    t_test_power(mu1, mu0, sigma, n)          - approximate power of the t-test
    sample_size_for_power(mu1, mu0, sigma)    - n for a target power
    power_curve(mu0, sigma, n)                - PowerPoint(mu, power) sequence
"""

from pystatlab.power.solvers import (
    z_test_power,
    t_test_power,
    sample_size_for_power,
    power_curve,
    PowerTest,
)
from pystatlab.power._curve import PowerCurve, PowerPoint

__all__ = [
    "z_test_power",
    "t_test_power",
    "sample_size_for_power",
    "power_curve",
    "PowerTest",
    "PowerCurve",
    "PowerPoint",
]
