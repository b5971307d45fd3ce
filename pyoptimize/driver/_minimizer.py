"""
Default external minimizer: SciPy's bounded quasi-Newton method.

Adapts scipy.optimize.minimize(method='L-BFGS-B') to the Minimizer
protocol. The control mapping goes straight into ``options``; non-
convergence is reported through ``convergence`` and ``message`` and is
never raised.
"""

from typing import Any, Callable, Mapping

import numpy as np
from numpy.typing import NDArray
from scipy.optimize import Bounds, minimize

from pyoptimize.driver._common import MinimizerOutput


class ScipyMinimizer:
    """
    Minimizer backed by scipy.optimize.minimize.

    Only bound-aware methods make sense here; the default is L-BFGS-B,
    the closest SciPy analogue of a PORT-style bounded quasi-Newton solver.
    """

    def __init__(self, method: str = 'L-BFGS-B'):
        self.method = method

    @property
    def name(self) -> str:
        return f"scipy_{self.method.lower()}"

    def __call__(
        self,
        fn: Callable[[NDArray], float],
        gr: Callable[[NDArray], NDArray],
        start: NDArray,
        lower: NDArray,
        upper: NDArray,
        control: Mapping[str, Any],
    ) -> MinimizerOutput:
        opt_result = minimize(
            fn,
            start,
            jac=gr,
            method=self.method,
            bounds=Bounds(lower, upper),
            options=dict(control),
        )

        return MinimizerOutput(
            par=np.asarray(opt_result.x, dtype=np.float64),
            objective=float(opt_result.fun),
            convergence=0 if opt_result.success else 1,
            message=str(getattr(opt_result, 'message', '')),
            iterations=int(getattr(opt_result, 'nit', 0)),
            evaluations={
                'function': int(getattr(opt_result, 'nfev', 0)),
                'gradient': int(getattr(opt_result, 'njev', 0)),
            },
        )

    def __repr__(self) -> str:
        return f"ScipyMinimizer(method={self.method!r})"


scipy_minimizer = ScipyMinimizer()
