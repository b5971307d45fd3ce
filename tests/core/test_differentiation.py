"""Tests for finite-difference Hessians."""

import numpy as np
import pytest

from pyoptimize.core.exceptions import DimensionError
from pyoptimize.core.compute.differentiation import numerical_hessian, optim_hess


def _fn(x):
    return x[0] ** 2 * x[1] + np.exp(x[1])


def _gr(x):
    return np.array([2 * x[0] * x[1], x[0] ** 2 + np.exp(x[1])])


def _hess(x):
    return np.array([
        [2 * x[1], 2 * x[0]],
        [2 * x[0], np.exp(x[1])],
    ])


class TestNumericalHessian:

    def test_matches_analytic(self):
        x = np.array([0.7, -0.3])
        np.testing.assert_allclose(
            numerical_hessian(_gr, x), _hess(x), rtol=1e-5, atol=1e-8
        )

    def test_exact_for_linear_gradient(self):
        A = np.array([[2.0, 0.5], [0.5, 1.0]])
        H = numerical_hessian(lambda x: A @ x, np.array([3.0, -1.0]))
        np.testing.assert_allclose(H, A, atol=1e-10)

    def test_symmetric(self):
        H = numerical_hessian(_gr, np.array([1.3, 0.2]))
        np.testing.assert_array_equal(H, H.T)

    def test_per_coordinate_step(self):
        x = np.array([0.7, -0.3])
        H = numerical_hessian(_gr, x, eps=[1e-4, 1e-3])
        np.testing.assert_allclose(H, _hess(x), rtol=1e-5, atol=1e-8)

    def test_does_not_modify_input(self):
        x = np.array([0.7, -0.3])
        numerical_hessian(_gr, x)
        np.testing.assert_array_equal(x, [0.7, -0.3])

    def test_wrong_gradient_length(self):
        with pytest.raises(DimensionError, match="expected length 2"):
            numerical_hessian(lambda x: np.zeros(3), np.zeros(2))

    def test_gradient_calls(self):
        calls = []

        def gr(x):
            calls.append(x.copy())
            return _gr(x)

        numerical_hessian(gr, np.zeros(2))
        assert len(calls) == 4


def test_optim_hess_ignores_fn_and_uses_gradient():
    x = np.array([0.5, 0.5])
    np.testing.assert_allclose(optim_hess(_fn, _gr, x), _hess(x),
                               rtol=1e-5, atol=1e-8)
