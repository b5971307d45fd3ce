"""
Optimization driver with restarts, Newton polishing and diagnostics.

Public API:
    optimize()                run the minimizer and attach diagnostics
    Objective                 objective/gradient/parameter bundle
    OptimizeSolution          result wrapper
    information_criterion()   AIC / AICc / BIC from a minimized objective
    sdreport()                default standard-error report
    save_result()             write JSON snapshot + text report
"""

from pyoptimize.driver.solvers import optimize
from pyoptimize.driver.design import Objective, OptimizeDesign
from pyoptimize.driver.solution import OptimizeSolution
from pyoptimize.driver._criteria import information_criterion
from pyoptimize.driver._sdreport import sdreport
from pyoptimize.driver._minimizer import ScipyMinimizer
from pyoptimize.driver._io import save_result, load_snapshot
from pyoptimize.driver._common import (
    MinimizerOutput, CoefficientCounts, DiagnosticsRow, UncertaintyReport,
)

__all__ = [
    "optimize",
    "Objective",
    "OptimizeDesign",
    "OptimizeSolution",
    "information_criterion",
    "sdreport",
    "ScipyMinimizer",
    "save_result",
    "load_snapshot",
    "MinimizerOutput",
    "CoefficientCounts",
    "DiagnosticsRow",
    "UncertaintyReport",
]
