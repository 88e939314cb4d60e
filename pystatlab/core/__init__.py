"""
Core infrastructure for PyStatLab.

Shared abstractions and utilities used by all domain subpackages
(special, descriptive, intervals, hypothesis, power, estimation, gof).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    tails: TailType enum
    compute: Timing and accuracy tiers
"""

from pystatlab.core.result import Result
from pystatlab.core.tails import TailType, resolve_tail
from pystatlab.core.exceptions import (
    PyStatLabError,
    ValidationError,
    EmptyDataError,
    DimensionError,
    LengthMismatchError,
    InvalidParameterError,
    UnsupportedDistributionError,
    NumericalError,
    ConvergenceError,
)

__all__ = [
    # Result
    "Result",
    # Tails
    "TailType",
    "resolve_tail",
    # Exceptions
    "PyStatLabError",
    "ValidationError",
    "EmptyDataError",
    "DimensionError",
    "LengthMismatchError",
    "InvalidParameterError",
    "UnsupportedDistributionError",
    "NumericalError",
    "ConvergenceError",
]
