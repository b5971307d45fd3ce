"""Tests for the default uncertainty report."""

import numpy as np

from pyoptimize.driver import Objective, UncertaintyReport, sdreport


def _quadratic(A):
    A = np.asarray(A, dtype=np.float64)
    return Objective(fn=lambda x: float(0.5 * x @ A @ x), gr=lambda x: A @ x,
                     par=np.zeros(A.shape[0]))


class TestSdreport:

    def test_standard_errors_from_inverse_hessian(self):
        A = np.array([[4.0, 1.0], [1.0, 3.0]])
        report = sdreport(_quadratic(A), np.array([0.2, -0.1]))

        assert isinstance(report, UncertaintyReport)
        assert report.pd_hess
        np.testing.assert_allclose(report.cov_fixed, np.linalg.inv(A), rtol=1e-8)
        np.testing.assert_allclose(report.se, np.sqrt(np.diag(np.linalg.inv(A))),
                                   rtol=1e-8)
        np.testing.assert_allclose(report.gradient_fixed, A @ [0.2, -0.1])

    def test_precomputed_hessian_used(self):
        A = np.eye(2)
        H = np.diag([4.0, 16.0])
        report = sdreport(_quadratic(A), np.zeros(2), hessian=H)
        np.testing.assert_allclose(report.se, [0.5, 0.25])
        np.testing.assert_array_equal(report.hessian, H)

    def test_not_positive_definite_reported(self):
        report = sdreport(_quadratic(np.diag([1.0, -1.0])), np.zeros(2))
        assert not report.pd_hess
        assert np.all(np.isnan(report.se))
        assert np.all(np.isnan(report.cov_fixed))

    def test_normal_mle_standard_errors(self, normal_model):
        # se(mu) = sigma / sqrt(n), se(log sigma) = 1 / sqrt(2n)
        d = normal_model
        report = sdreport(d['model'], d['mle'])
        sigma = np.exp(d['mle'][1])
        np.testing.assert_allclose(
            report.se, [sigma / np.sqrt(d['n']), 1 / np.sqrt(2 * d['n'])],
            rtol=1e-4,
        )

    def test_par_is_copied(self):
        par = np.array([1.0, 2.0])
        report = sdreport(_quadratic(np.eye(2)), par)
        par[0] = 99.0
        assert report.par_fixed[0] == 1.0
