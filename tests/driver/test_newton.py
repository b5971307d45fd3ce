"""Tests for the Newton step and its linear solve."""

import numpy as np
import pytest

from pyoptimize.core.exceptions import SingularMatrixError
from pyoptimize.driver._newton import newton_step, solve_newton_system


class TestSolveNewtonSystem:

    def test_solves_well_conditioned(self):
        H = np.array([[2.0, 0.0], [0.0, 4.0]])
        np.testing.assert_allclose(
            solve_newton_system(H, np.array([2.0, 2.0])), [1.0, 0.5]
        )

    def test_indefinite_matrix_is_solved(self):
        # no positive-definiteness check
        H = np.diag([1.0, -2.0])
        np.testing.assert_allclose(
            solve_newton_system(H, np.array([1.0, 1.0])), [1.0, -0.5]
        )

    def test_exactly_singular(self):
        with pytest.raises(SingularMatrixError, match="singular"):
            solve_newton_system(np.zeros((2, 2)), np.ones(2), step=3)

    def test_computationally_singular(self):
        H = np.array([[1.0, 1.0], [1.0, 1.0 + 1e-17]])
        with pytest.raises(SingularMatrixError) as exc_info:
            solve_newton_system(H, np.ones(2))
        assert exc_info.value.matrix_name == 'hessian'

    def test_reports_one_norm_condition_number(self):
        H = np.array([[1.0, 1.0], [0.0, 1e-16]])
        with pytest.raises(SingularMatrixError) as exc_info:
            solve_newton_system(H, np.ones(2), step=2)
        assert exc_info.value.condition_number == pytest.approx(
            np.linalg.cond(H, 1)
        )
        assert exc_info.value.step == 2

    def test_nan_hessian(self):
        with pytest.raises(SingularMatrixError):
            solve_newton_system(np.full((2, 2), np.nan), np.ones(2))


class TestNewtonStep:

    def test_step_and_refreshed_objective(self):
        A = np.array([[3.0, 1.0], [1.0, 2.0]])
        c = np.array([0.5, -1.0])

        def fn(x):
            d = x - c
            return float(0.5 * d @ A @ d) + 7.0

        def gr(x):
            return A @ (x - c)

        new_par, objective = newton_step(
            fn, gr, np.array([4.0, 4.0]), lambda f, g, p: A,
        )
        np.testing.assert_allclose(new_par, c)
        assert objective == pytest.approx(7.0)

    def test_step_ignores_bounds(self):
        # plain update, nothing projects the result
        new_par, _ = newton_step(
            lambda x: float(x @ x), lambda x: 2 * x,
            np.array([10.0]), lambda f, g, p: np.array([[1.0]]),
        )
        np.testing.assert_allclose(new_par, [-10.0])
