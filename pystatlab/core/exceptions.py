"""
Exception hierarchy for PyStatLab.

All exceptions inherit from PyStatLabError to allow catching any
library-specific error. Domain modules raise the most specific class
available here rather than bare ValueError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Any


class PyStatLabError(Exception):
    """Base exception for all PyStatLab errors."""
    pass


class ValidationError(PyStatLabError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class EmptyDataError(ValidationError):
    """
    A statistic was requested over a zero-length sample.

    Attributes:
        name: Name of the offending argument
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Paired inputs have unequal lengths.

    Attributes:
        lengths: Mapping from argument name to its length
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = lengths or {}


class InvalidParameterError(ValidationError):
    """
    A scalar argument is outside its domain.

    Examples: trials <= 0, successes > trials, a confidence level
    outside (0, 1), a non-positive margin of error or standard deviation.

    Attributes:
        name: Name of the offending parameter
        value: The value that was rejected
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.name = name
        self.value = value


class UnsupportedDistributionError(ValidationError):
    """
    Distribution family is unknown, or not supported by the requested operation.

    Attributes:
        distribution: The family that was requested
        supported: Families the operation does accept
    """

    def __init__(
        self,
        message: str,
        distribution: str | None = None,
        supported: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.distribution = distribution
        self.supported = supported


class NumericalError(PyStatLabError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation,
    e.g. a zero standard error or a zero mean in a ratio estimator.
    """
    pass


class ConvergenceError(NumericalError):
    """
    Iterative algorithm failed to converge.

    Raised when an iterative refinement (sample-size iteration on the
    t critical value, quantile bisection) fails to meet its tolerance
    within the maximum number of iterations.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final change between successive iterates
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
