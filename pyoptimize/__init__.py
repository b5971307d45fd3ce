"""
PyOptimize: restartable bounded optimization with standard diagnostics.

A thin layer over an external nonlinear minimizer and a standard-error
routine: repeated restarts from the last optimum, optional Newton
polishing, coefficient counts, information criteria, a per-parameter
diagnostics table, and result persistence.

Submodules:
    driver: The optimization driver and its result types
    core: Result envelope, exceptions, validation, timing, derivatives
"""

__version__ = "0.1.0"

from pyoptimize.driver import optimize, Objective, OptimizeSolution

__all__ = [
    "__version__",
    "optimize",
    "Objective",
    "OptimizeSolution",
]
