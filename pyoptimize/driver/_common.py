"""
Common data types for the optimization driver.

Contains the frozen payloads that go inside Result[P] envelopes. Each
payload is a pure data container; computation lives in the solver
modules.
"""

from dataclasses import dataclass, field
from typing import Any

from numpy.typing import NDArray

# Minimizer options used when the caller passes control=None. Mirrors the
# evaluation/iteration caps the helper has always used (1e4 each).
DEFAULT_CONTROL: dict[str, Any] = {
    'maxfun': 10_000,
    'maxiter': 10_000,
}

DEFAULT_LOOPNUM = 3
DEFAULT_NEWTONSTEPS = 0

# File names written under savedir
SNAPSHOT_FILENAME = 'parameter_estimates.json'
REPORT_FILENAME = 'parameter_estimates.txt'


@dataclass(frozen=True)
class MinimizerOutput:
    """Output of one call to the external minimizer.

    Attributes:
        par: Final parameter vector (k,).
        objective: Objective value at ``par``.
        convergence: 0 on success, nonzero otherwise (nlminb convention).
        message: Minimizer's termination message.
        iterations: Iterations used by this call.
        evaluations: ``{'function': nfev, 'gradient': njev}``.
    """
    par: NDArray
    objective: float
    convergence: int
    message: str
    iterations: int
    evaluations: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class CoefficientCounts:
    """Declared parameter counts. random = total - fixed."""
    total: int
    fixed: int
    random: int


@dataclass(frozen=True)
class DiagnosticsRow:
    """One row of the per-parameter diagnostics table."""
    param: str
    starting_value: float
    lower: float
    mle: float
    upper: float
    final_gradient: float


@dataclass(frozen=True)
class UncertaintyReport:
    """
    Standard-error report for the fixed parameters.

    Attributes:
        par_fixed: Parameter vector the report was computed at (k,).
        cov_fixed: Asymptotic covariance, inverse Hessian (k, k).
        se: Standard errors, sqrt of the covariance diagonal (k,).
        gradient_fixed: Gradient at ``par_fixed`` (k,).
        pd_hess: Whether the Hessian is positive definite.
        hessian: Hessian of the objective at ``par_fixed`` (k, k).
    """
    par_fixed: NDArray
    cov_fixed: NDArray
    se: NDArray
    gradient_fixed: NDArray
    pd_hess: bool
    hessian: NDArray


@dataclass(frozen=True)
class OptimizeParams:
    """
    Parameter payload for an optimization run.

    Immutable data assembled by the driver once all phases finish.
    """
    # Estimates
    par: NDArray                        # final parameter vector (k,)
    par_names: tuple[str, ...]
    objective: float                    # objective at par

    # Last minimizer call, surfaced unchanged
    convergence: int
    message: str
    iterations: int
    evaluations: dict[str, int]

    # Run bookkeeping
    n_minimizer_calls: int
    n_newton_steps: int
    run_time: float                     # seconds

    # Model size and information criteria
    number_of_coefficients: CoefficientCounts
    aic: float
    diagnostics: tuple[DiagnosticsRow, ...]

    # Present only when a finite sample size was supplied
    aicc: float | None = None
    bic: float | None = None

    # Present only when getsd=True
    sd: UncertaintyReport | None = None
