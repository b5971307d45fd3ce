"""
Compute utilities shared by all PyOptimize domains.

    timing:          Timer with named sections and an injectable clock
    differentiation: finite-difference Hessian from an analytic gradient
"""

from pyoptimize.core.compute.timing import Timer
from pyoptimize.core.compute.differentiation import numerical_hessian, optim_hess

__all__ = [
    "Timer",
    "numerical_hessian",
    "optim_hess",
]
