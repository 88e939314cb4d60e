"""
Distribution families and their parameters.

Each family is a member of the closed Distribution enum, and each has a
frozen parameter dataclass carrying exactly that family's fields:

    normal       NormalParams(mean, std)
    uniform      UniformParams(a, b)
    exponential  ExponentialParams(lam)
    poisson      PoissonParams(lam)
    gamma        GammaParams(shape, scale)
    beta         BetaParams(alpha, beta)
    binomial     BinomialParams(n, p)

A parameter object knows how to validate its domain and, where the
goodness-of-fit suite needs it, how to evaluate its CDF.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from enum import Enum
import math
from typing import Any, ClassVar, Mapping

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatlab.core.exceptions import (
    InvalidParameterError,
    UnsupportedDistributionError,
)
from pystatlab.special import normal_cdf, regularized_gamma_p, regularized_gamma_q


class Distribution(str, Enum):
    NORMAL = "normal"
    UNIFORM = "uniform"
    EXPONENTIAL = "exponential"
    POISSON = "poisson"
    GAMMA = "gamma"
    BETA = "beta"
    BINOMIAL = "binomial"

    @classmethod
    def _missing_(cls, value: object) -> Distribution | None:
        if isinstance(value, str):
            key = value.strip().lower()
            if key == "gaussian":
                return cls.NORMAL
            for member in cls:
                if member.value == key:
                    return member
        return None


def resolve_distribution(distribution: Distribution | str) -> Distribution:
    """
    Resolve a distribution argument to a Distribution member.

    Raises:
        UnsupportedDistributionError: If the name is not recognized.
    """
    try:
        return Distribution(distribution)
    except ValueError:
        valid = tuple(d.value for d in Distribution)
        raise UnsupportedDistributionError(
            f"Unknown distribution: {distribution!r}. Valid distributions: "
            f"{', '.join(valid)}",
            distribution=str(distribution),
            supported=valid,
        ) from None


def _require(condition: bool, name: str, value: Any, rule: str, family: str) -> None:
    if not condition:
        raise InvalidParameterError(
            f"{family}: {name} must be {rule}, got {value!r}",
            name=name, value=value,
        )


def _finite(v: float) -> bool:
    return isinstance(v, (int, float, np.floating, np.integer)) and math.isfinite(v)


class DistributionParams(ABC):
    """
    Parameters of one distribution family.

    Subclasses are frozen dataclasses. They do not validate on
    construction, since estimators may legitimately produce degenerate
    values; call validate() before using them as a hypothesis.
    """

    distribution: ClassVar[Distribution]
    #: Parameters estimated from data when testing fit (chi-square df)
    n_estimated: ClassVar[int] = 1
    discrete: ClassVar[bool] = False

    @abstractmethod
    def validate(self) -> None:
        """Raise InvalidParameterError if the parameters are out of domain."""
        ...

    def cdf(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """CDF at x (vectorized)."""
        raise UnsupportedDistributionError(
            f"CDF is not available for the {self.distribution.value} distribution",
            distribution=self.distribution.value,
        )

    def as_dict(self) -> dict[str, float]:
        """Parameters keyed by their conventional names."""
        return {f.name: float(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class NormalParams(DistributionParams):
    mean: float
    std: float

    distribution: ClassVar[Distribution] = Distribution.NORMAL
    n_estimated: ClassVar[int] = 2

    def validate(self) -> None:
        _require(_finite(self.mean), "mean", self.mean, "finite", "normal")
        _require(_finite(self.std) and self.std > 0, "std", self.std, "> 0", "normal")

    def cdf(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        z = (np.asarray(x, dtype=np.float64) - self.mean) / self.std
        return np.asarray(normal_cdf(z))


@dataclass(frozen=True)
class UniformParams(DistributionParams):
    a: float
    b: float

    distribution: ClassVar[Distribution] = Distribution.UNIFORM

    def validate(self) -> None:
        _require(_finite(self.a) and _finite(self.b), "a, b", (self.a, self.b),
                 "finite", "uniform")
        _require(self.a < self.b, "a", self.a, f"< b ({self.b})", "uniform")

    def cdf(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        arr = np.asarray(x, dtype=np.float64)
        return np.clip((arr - self.a) / (self.b - self.a), 0.0, 1.0)


@dataclass(frozen=True)
class ExponentialParams(DistributionParams):
    lam: float

    distribution: ClassVar[Distribution] = Distribution.EXPONENTIAL

    def validate(self) -> None:
        _require(_finite(self.lam) and self.lam > 0, "lambda", self.lam, "> 0", "exponential")

    def cdf(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        arr = np.asarray(x, dtype=np.float64)
        return np.where(arr < 0.0, 0.0, -np.expm1(-self.lam * np.maximum(arr, 0.0)))

    def as_dict(self) -> dict[str, float]:
        return {"lambda": float(self.lam)}


@dataclass(frozen=True)
class PoissonParams(DistributionParams):
    lam: float

    distribution: ClassVar[Distribution] = Distribution.POISSON
    discrete: ClassVar[bool] = True

    def validate(self) -> None:
        _require(_finite(self.lam) and self.lam > 0, "lambda", self.lam, "> 0", "poisson")

    def cdf(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        # P(X <= k) = Q(k + 1, lambda)
        arr = np.asarray(x, dtype=np.float64)
        k = np.floor(arr)
        out = [0.0 if ki < 0 else regularized_gamma_q(ki + 1.0, self.lam) for ki in k.ravel()]
        return np.asarray(out, dtype=np.float64).reshape(arr.shape)

    def as_dict(self) -> dict[str, float]:
        return {"lambda": float(self.lam)}


@dataclass(frozen=True)
class GammaParams(DistributionParams):
    shape: float
    scale: float

    distribution: ClassVar[Distribution] = Distribution.GAMMA
    n_estimated: ClassVar[int] = 2

    def validate(self) -> None:
        _require(_finite(self.shape) and self.shape > 0, "shape", self.shape, "> 0", "gamma")
        _require(_finite(self.scale) and self.scale > 0, "scale", self.scale, "> 0", "gamma")

    @property
    def rate(self) -> float:
        return 1.0 / self.scale

    def cdf(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        arr = np.asarray(x, dtype=np.float64)
        out = [
            0.0 if xi <= 0 else regularized_gamma_p(self.shape, xi / self.scale)
            for xi in arr.ravel()
        ]
        return np.asarray(out, dtype=np.float64).reshape(arr.shape)


@dataclass(frozen=True)
class BetaParams(DistributionParams):
    alpha: float
    beta: float

    distribution: ClassVar[Distribution] = Distribution.BETA

    def validate(self) -> None:
        _require(_finite(self.alpha) and self.alpha > 0, "alpha", self.alpha, "> 0", "beta")
        _require(_finite(self.beta) and self.beta > 0, "beta", self.beta, "> 0", "beta")


@dataclass(frozen=True)
class BinomialParams(DistributionParams):
    n: int
    p: float

    distribution: ClassVar[Distribution] = Distribution.BINOMIAL
    discrete: ClassVar[bool] = True

    def validate(self) -> None:
        _require(
            _finite(self.n) and self.n >= 1 and self.n == math.floor(self.n),
            "n", self.n, "a positive integer", "binomial",
        )
        _require(_finite(self.p) and 0.0 <= self.p <= 1.0, "p", self.p, "in [0, 1]", "binomial")

    def cdf(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        n = int(self.n)
        ks = np.arange(n + 1)
        pmf = np.array(
            [math.comb(n, int(k)) * self.p ** k * (1.0 - self.p) ** (n - k) for k in ks],
            dtype=np.float64,
        )
        cum = np.minimum(np.cumsum(pmf), 1.0)
        arr = np.asarray(x, dtype=np.float64)
        k = np.floor(arr)
        idx = np.clip(k, 0, n).astype(np.int64)
        return np.where(k < 0, 0.0, np.where(k >= n, 1.0, cum[idx]))

    def as_dict(self) -> dict[str, float]:
        return {"n": float(self.n), "p": float(self.p)}


_PARAM_CLASSES: dict[Distribution, type[DistributionParams]] = {
    Distribution.NORMAL: NormalParams,
    Distribution.UNIFORM: UniformParams,
    Distribution.EXPONENTIAL: ExponentialParams,
    Distribution.POISSON: PoissonParams,
    Distribution.GAMMA: GammaParams,
    Distribution.BETA: BetaParams,
    Distribution.BINOMIAL: BinomialParams,
}

# mapping keys accepted for each dataclass field
_KEY_ALIASES: dict[str, tuple[str, ...]] = {
    "lam": ("lambda", "lam", "rate"),
    "std": ("std", "sd", "sigma"),
    "mean": ("mean", "mu"),
}


def params_class(distribution: Distribution | str) -> type[DistributionParams]:
    """Parameter dataclass for a family."""
    return _PARAM_CLASSES[resolve_distribution(distribution)]


def params_from_mapping(
    distribution: Distribution | str,
    mapping: Mapping[str, float],
) -> DistributionParams:
    """
    Build a family's parameter dataclass from a name -> value mapping.

    Accepts the conventional key names ('lambda' for exponential and
    poisson). Gamma also accepts 'rate' in place of 'scale'.

    Raises:
        UnsupportedDistributionError: If the family is unknown.
        InvalidParameterError: If a required key is missing.
    """
    dist = resolve_distribution(distribution)
    cls = _PARAM_CLASSES[dist]
    values = dict(mapping)
    if dist is Distribution.GAMMA and "scale" not in values and "rate" in values:
        rate = float(values.pop("rate"))
        _require(rate > 0, "rate", rate, "> 0", "gamma")
        values["scale"] = 1.0 / rate

    kwargs: dict[str, float] = {}
    for f in fields(cls):
        for key in _KEY_ALIASES.get(f.name, (f.name,)):
            if key in values:
                kwargs[f.name] = values[key]
                break
        else:
            raise InvalidParameterError(
                f"{dist.value}: missing parameter {f.name!r} "
                f"(got keys {sorted(values)})",
                name=f.name, value=None,
            )
    return cls(**kwargs)
