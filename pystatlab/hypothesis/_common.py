"""
Shared types for hypothesis tests.

HTestParams is the immutable payload every test backend returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pystatlab.core.tails import TailType

DEFAULT_ALPHA = 0.05


class HTestType(str, Enum):
    Z_TEST = "z_test"
    T_TEST = "t_test"


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis test results.

    Attributes:
        statistic: Test statistic value
        statistic_name: Name of the statistic ('z' or 't')
        critical_value: Positive critical value; the rejection region is
            |stat| > c, stat < -c or stat > c depending on the tail
        p_value: p-value for the requested tail
        reject: True when the statistic falls strictly beyond the
            critical value
        alpha: Significance level
        conf_int: Two-sided (1 - alpha) interval for the mean, whatever
            the tail
        estimate: Point estimates (e.g. {'mean': 5.1})
        null_value: Hypothesized value (e.g. {'mean': 5.0})
        parameter: Distribution parameters (e.g. {'df': 9.0}) or None
        standard_error: Standard error of the mean
        tail: Tail type of the test
        method: Human-readable method name
        data_name: Description of the data
        extras: Test-specific additional outputs
    """
    statistic: float
    statistic_name: str
    critical_value: float
    p_value: float
    reject: bool
    alpha: float
    conf_int: tuple[float, float]
    estimate: dict[str, float]
    null_value: dict[str, float]
    parameter: dict[str, float] | None
    standard_error: float
    tail: TailType
    method: str
    data_name: str
    extras: dict[str, Any] | None = None
