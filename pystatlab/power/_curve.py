"""
Power curve: power as a function of the true mean.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterator


@dataclass(frozen=True)
class PowerPoint:
    """Power of the test when the true mean is mu."""
    mu: float
    power: float


@dataclass(frozen=True)
class PowerCurve:
    """
    Finite, restartable sequence of PowerPoint.

    Points are generated on demand at mu = start + k * step for
    k = 0 .. n_points - 1, so iterating twice yields the same points and
    no rounding error accumulates along the grid.
    """
    start: float
    end: float
    step: float
    _power: Callable[[float], float]

    @property
    def n_points(self) -> int:
        # tolerance absorbs (end - start) / step landing just below an integer
        return int(math.floor((self.end - self.start) / self.step + 1e-9)) + 1

    def __len__(self) -> int:
        return self.n_points

    def __iter__(self) -> Iterator[PowerPoint]:
        for k in range(self.n_points):
            mu = self.start + k * self.step
            yield PowerPoint(mu=mu, power=self._power(mu))

    def mus(self) -> list[float]:
        return [p.mu for p in self]

    def powers(self) -> list[float]:
        return [p.power for p in self]

    def __repr__(self) -> str:
        return (
            f"PowerCurve(start={self.start:.4g}, end={self.end:.4g}, "
            f"step={self.step:.4g}, n_points={self.n_points})"
        )
