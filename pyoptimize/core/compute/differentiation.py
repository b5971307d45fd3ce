"""
Finite-difference derivatives.

The Hessian is built column by column from central differences of an
analytic gradient, then symmetrised:

    H[:, j] = (g(x + h_j e_j) - g(x - h_j e_j)) / (2 h_j)
    H       = (H + H') / 2

This is the construction used by R's optimHess() when a gradient is
supplied, with its default step ndeps = 1e-3 applied on the absolute scale.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyoptimize.core.exceptions import DimensionError

DEFAULT_STEP = 1e-3


def numerical_hessian(
    gr: Callable[[NDArray], ArrayLike],
    par: ArrayLike,
    eps: float | ArrayLike = DEFAULT_STEP,
) -> NDArray[np.floating[Any]]:
    """Approximate the Hessian at ``par`` from central differences of ``gr``.

    Args:
        gr: Gradient function, vector -> vector of the same length.
        par: Point at which to evaluate the Hessian (k,).
        eps: Step size, scalar or one per coordinate.

    Returns:
        Symmetric array of shape (k, k).

    Raises:
        DimensionError: If ``gr`` returns a vector of the wrong length.
    """
    x = np.asarray(par, dtype=np.float64)
    k = x.shape[0]
    h = np.broadcast_to(np.asarray(eps, dtype=np.float64), (k,))

    H = np.zeros((k, k), dtype=np.float64)
    for j in range(k):
        x_plus = x.copy()
        x_minus = x.copy()
        x_plus[j] += h[j]
        x_minus[j] -= h[j]

        g_plus = np.asarray(gr(x_plus), dtype=np.float64).ravel()
        g_minus = np.asarray(gr(x_minus), dtype=np.float64).ravel()
        if g_plus.shape[0] != k or g_minus.shape[0] != k:
            raise DimensionError(
                f"gradient: expected length {k}, got {g_plus.shape[0]}"
            )

        H[:, j] = (g_plus - g_minus) / (2.0 * h[j])

    return 0.5 * (H + H.T)


def optim_hess(
    fn: Callable[[NDArray], float],
    gr: Callable[[NDArray], ArrayLike],
    par: ArrayLike,
    eps: float | ArrayLike = DEFAULT_STEP,
) -> NDArray[np.floating[Any]]:
    """Hessian of ``fn`` at ``par`` using its gradient ``gr``.

    ``fn`` is part of the signature so that callers can swap in a Hessian
    routine that differentiates the objective directly; this one only
    differentiates ``gr``.
    """
    return numerical_hessian(gr, par, eps=eps)
