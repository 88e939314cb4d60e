"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def one_to_five():
    """The sample [1, 2, 3, 4, 5]: mean 3, median 3, variance 2."""
    return np.array([1.0, 2.0, 3.0, 4.0, 5.0])


@pytest.fixture
def normal_sample(rng):
    """200 draws from N(10, 2^2)."""
    return rng.normal(loc=10.0, scale=2.0, size=200)


@pytest.fixture
def small_normal_sample(rng):
    """15 draws from N(5, 1): the t-table regime."""
    return rng.normal(loc=5.0, scale=1.0, size=15)


@pytest.fixture
def exponential_sample(rng):
    """300 draws from Exp(rate=0.5)."""
    return rng.exponential(scale=2.0, size=300)


@pytest.fixture
def uniform_sample(rng):
    """200 draws from U(0, 4)."""
    return rng.uniform(0.0, 4.0, size=200)


@pytest.fixture
def poisson_sample(rng):
    """300 draws from Poisson(4)."""
    return rng.poisson(lam=4.0, size=300).astype(float)


@pytest.fixture
def gamma_sample(rng):
    """300 draws from Gamma(shape=3, scale=2)."""
    return rng.gamma(shape=3.0, scale=2.0, size=300)


@pytest.fixture
def beta_sample(rng):
    """300 draws from Beta(2, 5)."""
    return rng.beta(2.0, 5.0, size=300)
