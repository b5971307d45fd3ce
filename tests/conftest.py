"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pyoptimize.driver import Objective


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def quadratic_model():
    """Convex quadratic 0.5 (x - c)' A (x - c) with known minimum c.

    The gradient is linear, so central differences give A exactly (up to
    rounding) and one Newton step lands on c from anywhere.
    """
    A = np.array([[4.0, 1.0], [1.0, 3.0]])
    c = np.array([1.0, -2.0])

    def fn(x):
        d = np.asarray(x) - c
        return float(0.5 * d @ A @ d)

    def gr(x):
        return A @ (np.asarray(x) - c)

    model = Objective(fn=fn, gr=gr, par=np.zeros(2), par_names=('a', 'b'))
    return {'model': model, 'A': A, 'c': c}


@pytest.fixture
def normal_model(rng):
    """Normal negative log-likelihood in (mu, log_sigma).

    MLE: mu = mean(y), sigma = sqrt(mean((y - mean(y))^2)).
    """
    y = rng.normal(3.0, 2.0, size=200)
    n = len(y)

    def fn(p):
        mu, log_sigma = p
        s = np.exp(log_sigma)
        return float(0.5 * np.sum(((y - mu) / s) ** 2) + n * log_sigma
                     + 0.5 * n * np.log(2 * np.pi))

    def gr(p):
        mu, log_sigma = p
        s2 = np.exp(2 * log_sigma)
        return np.array([
            -np.sum(y - mu) / s2,
            n - np.sum((y - mu) ** 2) / s2,
        ])

    mu_hat = float(np.mean(y))
    sigma_hat = float(np.sqrt(np.mean((y - mu_hat) ** 2)))

    model = Objective(
        fn=fn, gr=gr, par=np.array([1.0, 0.5]), par_names=('mu', 'log_sigma'),
    )
    return {
        'model': model,
        'y': y,
        'n': n,
        'mle': np.array([mu_hat, np.log(sigma_hat)]),
    }
