"""
Default uncertainty routine: asymptotic standard errors of the fixed
parameters from the inverse Hessian of the negative log-likelihood.

    cov = H^{-1},   se = sqrt(diag(cov))

A Hessian that is not positive definite is reported (pd_hess=False,
NaN covariance) rather than raised, so a fit is never lost to its
standard errors.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyoptimize.core.compute.differentiation import numerical_hessian, DEFAULT_STEP
from pyoptimize.driver._common import UncertaintyReport


def sdreport(
    model,
    par: ArrayLike,
    *,
    hessian: NDArray | None = None,
    eps: float = DEFAULT_STEP,
) -> UncertaintyReport:
    """Compute standard errors of the fixed parameters at ``par``.

    Args:
        model: ObjectiveModel whose ``gr`` is differentiated.
        par: Parameter vector (k,), normally the optimum.
        hessian: Precomputed Hessian at ``par``. If None it is approximated
            by central differences of ``model.gr``.
        eps: Finite-difference step when ``hessian`` is None.

    Returns:
        UncertaintyReport
    """
    x = np.asarray(par, dtype=np.float64)
    k = x.shape[0]

    gradient = np.asarray(model.gr(x), dtype=np.float64).ravel()
    if hessian is None:
        H = numerical_hessian(model.gr, x, eps=eps)
    else:
        H = np.asarray(hessian, dtype=np.float64)

    pd_hess = _is_positive_definite(H)
    if pd_hess:
        cov = np.linalg.inv(H)
        se = np.sqrt(np.diag(cov))
    else:
        cov = np.full((k, k), np.nan)
        se = np.full(k, np.nan)

    return UncertaintyReport(
        par_fixed=x.copy(),
        cov_fixed=cov,
        se=se,
        gradient_fixed=gradient,
        pd_hess=pd_hess,
        hessian=H,
    )


def _is_positive_definite(H: NDArray) -> bool:
    """Cholesky succeeds iff a symmetric matrix is positive definite."""
    if not np.all(np.isfinite(H)):
        return False
    try:
        np.linalg.cholesky(H)
    except np.linalg.LinAlgError:
        return False
    return True

