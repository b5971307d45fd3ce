"""
Newton polishing steps.

Each step is the plain update

    par <- par - H(par)^{-1} g(par)

with no line search, no damping and no positive-definiteness check. A
Hessian that is singular to working precision aborts the run.
"""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import NDArray

from pyoptimize.core.exceptions import SingularMatrixError

# Reciprocal 1-norm condition number below which the solve is refused
# (double precision epsilon, the same tolerance as LAPACK-based solve()
# in R).
RCOND_TOL = np.finfo(np.float64).eps


def solve_newton_system(
    H: NDArray,
    g: NDArray,
    step: int | None = None,
) -> NDArray:
    """Solve H · delta = g, refusing computationally singular H.

    Raises:
        SingularMatrixError: If H is singular or its reciprocal 1-norm
            condition number is below RCOND_TOL.
    """
    try:
        cond = float(np.linalg.cond(H, 1))
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"Newton step {step}: Hessian is singular ({e})",
            matrix_name='hessian',
            step=step,
        ) from e

    if not np.isfinite(cond) or 1.0 / cond < RCOND_TOL:
        raise SingularMatrixError(
            f"Newton step {step}: Hessian is computationally singular "
            f"(condition number {cond:.3e})",
            matrix_name='hessian',
            condition_number=cond,
            step=step,
        )

    try:
        return np.linalg.solve(H, g)
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"Newton step {step}: Hessian is singular ({e})",
            matrix_name='hessian',
            condition_number=cond,
            step=step,
        ) from e


def newton_step(
    fn: Callable[[NDArray], float],
    gr: Callable[[NDArray], NDArray],
    par: NDArray,
    hessian: Callable[..., NDArray],
    step: int | None = None,
) -> tuple[NDArray, float]:
    """Take one Newton step from ``par``.

    Args:
        fn: Objective function.
        gr: Gradient function.
        par: Current parameter vector (k,).
        hessian: ``hessian(fn, gr, par) -> (k, k)`` approximation.
        step: Step index, only used in error reports.

    Returns:
        (new_par, objective at new_par)

    Raises:
        SingularMatrixError: If the Hessian is singular.
    """
    g = np.asarray(gr(par), dtype=np.float64).ravel()
    H = np.asarray(hessian(fn, gr, par), dtype=np.float64)

    delta = solve_newton_system(H, g, step=step)

    new_par = par - delta
    return new_par, float(fn(new_par))
