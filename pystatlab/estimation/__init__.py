"""
Parameter estimation.

Public API:
    mle(data, distribution)      - maximum likelihood estimates
    mom(data, distribution)      - method-of-moments estimates
    estimate(data, distribution, method)
"""

from pystatlab.estimation.solvers import (
    EstimationMethod,
    MIN_GAMMA_SHAPE,
    estimate,
    mle,
    mom,
)

__all__ = ["mle", "mom", "estimate", "EstimationMethod", "MIN_GAMMA_SHAPE"]
