"""
Distribution families shared by estimation and goodness-of-fit.
"""

from pystatlab.distributions.families import (
    Distribution,
    DistributionParams,
    NormalParams,
    UniformParams,
    ExponentialParams,
    PoissonParams,
    GammaParams,
    BetaParams,
    BinomialParams,
    resolve_distribution,
    params_class,
    params_from_mapping,
)

__all__ = [
    "Distribution",
    "DistributionParams",
    "NormalParams",
    "UniformParams",
    "ExponentialParams",
    "PoissonParams",
    "GammaParams",
    "BetaParams",
    "BinomialParams",
    "resolve_distribution",
    "params_class",
    "params_from_mapping",
]
