"""
PyStatLab: introductory statistical inference for Python.

Stateless functions over 1D samples, built on a single special-function
kernel.

Submodules:
    special: erf, normal and t distributions, incomplete gamma, chi-square
    descriptive: summary statistics and histograms
    intervals: confidence intervals and sample sizes
    hypothesis: one-sample z and t tests
    power: power, sample size for power, power curves
    distributions: distribution families and their parameters
    estimation: MLE and method-of-moments estimates
    gof: goodness-of-fit tests
"""

__version__ = "0.1.0"

from pystatlab import special
from pystatlab import descriptive
from pystatlab import intervals
from pystatlab import hypothesis
from pystatlab import power
from pystatlab import distributions
from pystatlab import estimation
from pystatlab import gof

from pystatlab.core import (
    TailType,
    PyStatLabError,
    ValidationError,
    EmptyDataError,
    LengthMismatchError,
    InvalidParameterError,
    UnsupportedDistributionError,
    NumericalError,
    ConvergenceError,
)
from pystatlab.descriptive import (
    describe,
    mean,
    median,
    mode,
    variance,
    std,
    std_dev,
    skewness,
    kurtosis,
    quartiles,
    histogram,
)
from pystatlab.intervals import (
    confidence_interval,
    two_sample_confidence_interval,
    proportion_confidence_interval,
    two_proportion_confidence_interval,
    sample_size_for_mean,
    sample_size_for_proportion,
)
from pystatlab.hypothesis import z_test, t_test, t_test_p_value
from pystatlab.power import (
    z_test_power,
    t_test_power,
    sample_size_for_power,
    power_curve,
)
from pystatlab.distributions import Distribution
from pystatlab.estimation import mle, mom
from pystatlab.gof import (
    ks_test,
    chisq_test,
    anderson_darling_test,
    jarque_bera_test,
    gof_test,
    qq_points,
    GoFTestType,
)

__all__ = [
    "__version__",
    # submodules
    "special",
    "descriptive",
    "intervals",
    "hypothesis",
    "power",
    "distributions",
    "estimation",
    "gof",
    # core
    "TailType",
    "PyStatLabError",
    "ValidationError",
    "EmptyDataError",
    "LengthMismatchError",
    "InvalidParameterError",
    "UnsupportedDistributionError",
    "NumericalError",
    "ConvergenceError",
    # descriptive
    "describe",
    "mean",
    "median",
    "mode",
    "variance",
    "std",
    "std_dev",
    "skewness",
    "kurtosis",
    "quartiles",
    "histogram",
    # intervals
    "confidence_interval",
    "two_sample_confidence_interval",
    "proportion_confidence_interval",
    "two_proportion_confidence_interval",
    "sample_size_for_mean",
    "sample_size_for_proportion",
    # hypothesis
    "z_test",
    "t_test",
    "t_test_p_value",
    # power
    "z_test_power",
    "t_test_power",
    "sample_size_for_power",
    "power_curve",
    # estimation / gof
    "Distribution",
    "mle",
    "mom",
    "ks_test",
    "chisq_test",
    "anderson_darling_test",
    "jarque_bera_test",
    "gof_test",
    "qq_points",
    "GoFTestType",
]
