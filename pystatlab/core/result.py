"""
Result envelope shared by every backend.

Each domain defines a frozen payload (DescriptiveParams, CIParams,
HTestParams, GoFParams); the backend wraps it in a Result together with
metadata, timing and warnings, and the domain's Solution class exposes
it to the caller.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    What a backend's solve() returns.

    Attributes:
        params: The domain payload
        info: Metadata about how the result was produced (interval or
            test type, distribution, rejection rule)
        timing: Output of Timer.result(), or None
        backend_name: e.g. 'cpu_gof'
        warnings: Non-fatal conditions, such as merged chi-square bins
            or a t_cdf approximation at small df

    Example:
        >>> Result(params=params, info={'interval_type': 'mean'},
        ...        timing=None, backend_name='cpu_intervals')
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if some warning mentions substring."""
        return any(substring in w for w in self.warnings)
