"""
Shared fixtures for optimization driver tests.

Provides spy collaborators (minimizer, Hessian, clock) that record how the
driver calls them, so restart seeding and call counts can be asserted
without depending on SciPy's iteration behaviour.
"""

import numpy as np
import pytest

from pyoptimize.driver import MinimizerOutput


class SpyMinimizer:
    """Minimizer that moves every coordinate by ``shift`` and records calls."""

    name = 'spy'

    def __init__(self, shift=1.0, convergence=0):
        self.shift = shift
        self.convergence = convergence
        self.calls = []

    def __call__(self, fn, gr, start, lower, upper, control):
        self.calls.append({
            'start': np.array(start, copy=True),
            'lower': np.array(lower, copy=True),
            'upper': np.array(upper, copy=True),
            'control': control,
        })
        par = np.asarray(start, dtype=np.float64) + self.shift
        return MinimizerOutput(
            par=par,
            objective=fn(par),
            convergence=self.convergence,
            message='spy',
            iterations=len(self.calls),
            evaluations={'function': 1, 'gradient': 0},
        )


class CountingHessian:
    """Returns a fixed matrix and counts calls."""

    def __init__(self, H):
        self.H = np.asarray(H, dtype=np.float64)
        self.points = []

    def __call__(self, fn, gr, par):
        self.points.append(np.array(par, copy=True))
        return self.H


class FakeClock:
    """Deterministic clock advancing 0.25 s per reading, starting at 100."""

    def __init__(self):
        self.readings = []

    def __call__(self):
        value = 100.0 + 0.25 * len(self.readings)
        self.readings.append(value)
        return value


class CountingModel:
    """ObjectiveModel wrapper that counts fn/gr evaluations."""

    def __init__(self, model, parameters=None):
        self._model = model
        self.par = model.par
        self.par_names = model.par_names
        self.parameters = parameters if parameters is not None else model.parameters
        self.fn_calls = 0
        self.gr_calls = 0

    def fn(self, par):
        self.fn_calls += 1
        return self._model.fn(par)

    def gr(self, par):
        self.gr_calls += 1
        return self._model.gr(par)


@pytest.fixture
def spy_minimizer():
    return SpyMinimizer()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def counting_quadratic(quadratic_model):
    return CountingModel(quadratic_model['model'])


@pytest.fixture
def make_minimizer():
    """Factory for SpyMinimizer with custom shift/convergence."""
    return SpyMinimizer


@pytest.fixture
def make_hessian():
    """Factory for CountingHessian around a fixed matrix."""
    return CountingHessian


@pytest.fixture
def make_counting_model():
    """Factory for CountingModel around any ObjectiveModel."""
    return CountingModel
