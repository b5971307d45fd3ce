"""
Optimization driver.

Public API:
    optimize(model, ...) -> OptimizeSolution

Runs the external minimizer, restarts it from its own optimum, optionally
polishes with Newton steps, then attaches coefficient counts, information
criteria, a diagnostics table and an uncertainty report, and optionally
saves everything to disk.
"""

from __future__ import annotations

import math
import warnings
from pathlib import Path
from typing import Any, Callable, Mapping

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyoptimize.core.protocols import Minimizer, Clock
from pyoptimize.core.result import Result
from pyoptimize.core.compute.timing import Timer
from pyoptimize.core.compute.differentiation import optim_hess
from pyoptimize.driver._common import (
    DEFAULT_CONTROL, DEFAULT_LOOPNUM, DEFAULT_NEWTONSTEPS,
    MinimizerOutput, CoefficientCounts, DiagnosticsRow, OptimizeParams,
    UncertaintyReport,
)
from pyoptimize.driver._criteria import aic, aicc, bic
from pyoptimize.driver._minimizer import scipy_minimizer
from pyoptimize.driver._newton import newton_step
from pyoptimize.driver._sdreport import sdreport
from pyoptimize.driver._io import save_result
from pyoptimize.driver.design import OptimizeDesign
from pyoptimize.driver.solution import OptimizeSolution


def optimize(
    model,
    startpar: ArrayLike | None = None,
    lower: ArrayLike | None = None,
    upper: ArrayLike | None = None,
    *,
    getsd: bool = True,
    control: Mapping[str, Any] | None = None,
    savedir: str | Path | None = None,
    loopnum: int = DEFAULT_LOOPNUM,
    newtonsteps: int = DEFAULT_NEWTONSTEPS,
    n: float = math.inf,
    minimizer: Minimizer | None = None,
    newton_hessian: Callable[..., NDArray] | None = None,
    sd_routine: Callable[..., Any] | None = None,
    clock: Clock | None = None,
    verbose: bool = False,
    **sd_options: Any,
) -> OptimizeSolution:
    """Optimize a model and attach standard diagnostics.

    Args:
        model: ObjectiveModel exposing ``fn``, ``gr``, ``par``,
            ``par_names`` and ``parameters`` (see pyoptimize.Objective).
        startpar: Starting values for the fixed parameters. Default:
            ``model.par``.
        lower: Lower bounds, one per parameter. Default: -inf.
        upper: Upper bounds, one per parameter. Default: +inf.
        getsd: If True (default), compute the uncertainty report at the
            final parameters.
        control: Options passed unexamined to the minimizer. Default:
            ``{'maxfun': 10000, 'maxiter': 10000}``.
        savedir: Directory to write ``parameter_estimates.json`` and
            ``parameter_estimates.txt`` into. If None, nothing is written.
        loopnum: Number of minimizer calls. Each call after the first
            restarts from the previous optimum; loopnum=3 sometimes reaches
            a smaller final gradient than loopnum=1.
        newtonsteps: Number of Newton steps taken after the minimizer
            calls (an alternative to a larger loopnum).
        n: Sample size. If finite, AICc and BIC are computed as well.
        minimizer: ``minimizer(fn, gr, start, lower, upper, control)``
            returning a MinimizerOutput. Default: SciPy L-BFGS-B.
        newton_hessian: ``newton_hessian(fn, gr, par)`` used by the Newton
            steps. Default: central differences of ``gr``.
        sd_routine: ``sd_routine(model, par, **sd_options)`` producing the
            uncertainty report. Default: inverse-Hessian standard errors.
        clock: Zero-argument callable returning seconds. Default:
            time.perf_counter.
        verbose: Print progress information.
        **sd_options: Forwarded verbatim to ``sd_routine``, e.g. a
            precomputed ``hessian=`` for the default routine.

    Returns:
        OptimizeSolution

    Raises:
        ValidationError: Missing objective/gradient, bad loop counts,
            lower > upper, or NaN sample size.
        DimensionError: Start and bound vectors disagree in length.
        SingularMatrixError: A Newton step met a singular Hessian.

    Examples:
        >>> obj = Objective(fn=nll, gr=grad, par=np.zeros(2))
        >>> fit = optimize(obj, n=len(y))
        >>> fit.par, fit.aic, fit.bic
        >>> print(fit.summary())
    """
    timer = Timer(clock=clock)
    timer.start()

    design = OptimizeDesign.validate(
        model, startpar, lower, upper,
        loopnum=loopnum, newtonsteps=newtonsteps, n=n,
    )

    minimizer_impl = minimizer if minimizer is not None else scipy_minimizer
    hessian_impl = newton_hessian if newton_hessian is not None else optim_hess
    sd_impl = sd_routine if sd_routine is not None else sdreport
    control_used = dict(DEFAULT_CONTROL) if control is None else control
    backend_name = getattr(minimizer_impl, 'name', None) or getattr(
        minimizer_impl, '__name__', type(minimizer_impl).__name__
    )

    fn = model.fn
    gr = model.gr

    if verbose:
        print(f"Optimize: {design.k} fixed parameters, loopnum={design.loopnum}, "
              f"newtonsteps={design.newtonsteps}")
        print(f"Backend: {backend_name}")

    # Minimizer calls; each restart is seeded with the previous optimum
    with timer.section('optimization'):
        opt = minimizer_impl(
            fn, gr, design.start, design.lower, design.upper, control_used
        )
        if verbose:
            _report_call(1, opt)
        for i in range(2, design.loopnum + 1):
            opt = minimizer_impl(
                fn, gr, opt.par, design.lower, design.upper, control_used
            )
            if verbose:
                _report_call(i, opt)

    par = np.asarray(opt.par, dtype=np.float64)
    objective = float(opt.objective)

    with timer.section('newton'):
        for step in range(1, design.newtonsteps + 1):
            par, objective = newton_step(fn, gr, par, hessian_impl, step=step)
            if verbose:
                print(f"  Newton step {step}: objective={objective:.6f}")

    with timer.section('diagnostics'):
        counts = CoefficientCounts(
            total=design.n_total,
            fixed=design.k,
            random=design.n_total - design.k,
        )
        k = counts.fixed
        aic_value = aic(objective, k)
        aicc_value = aicc(objective, k, design.n) if design.has_sample_size else None
        bic_value = bic(objective, k, design.n) if design.has_sample_size else None
        diagnostics = build_diagnostics(
            design.par_names, design.start, design.lower, par, design.upper,
            np.asarray(gr(par), dtype=np.float64).ravel(),
        )

    warnings_list: list[str] = []
    sd = None
    if getsd:
        with timer.section('sdreport'):
            sd = sd_impl(model, par, **sd_options)
        if isinstance(sd, UncertaintyReport) and not sd.pd_hess:
            msg = ("Hessian is not positive definite at the final parameters; "
                   "standard errors are not available")
            warnings_list.append(msg)
            warnings.warn(msg, RuntimeWarning, stacklevel=2)

    run_time = timer.stop()

    params = OptimizeParams(
        par=par,
        par_names=design.par_names,
        objective=objective,
        convergence=int(opt.convergence),
        message=opt.message,
        iterations=int(opt.iterations),
        evaluations=dict(opt.evaluations),
        n_minimizer_calls=design.loopnum,
        n_newton_steps=design.newtonsteps,
        run_time=run_time,
        number_of_coefficients=counts,
        aic=aic_value,
        aicc=aicc_value,
        bic=bic_value,
        diagnostics=diagnostics,
        sd=sd,
    )

    result = Result(
        params=params,
        info={
            'method': getattr(minimizer_impl, 'method', backend_name),
            'loopnum': design.loopnum,
            'newtonsteps': design.newtonsteps,
            'control': dict(control_used),
            'n': design.n if design.has_sample_size else None,
            'getsd': getsd,
        },
        timing=timer.result(),
        backend_name=backend_name,
        warnings=tuple(warnings_list),
    )
    solution = OptimizeSolution(_result=result)

    if savedir is not None:
        snapshot, report = save_result(solution, savedir)
        if verbose:
            print(f"Saved: {snapshot}, {report}")

    if verbose:
        print(f"Objective: {solution.objective:.6f} "
              f"(convergence: {solution.convergence}, "
              f"max |gradient|: {solution.max_gradient:.3g})")

    return solution


def build_diagnostics(
    names: tuple[str, ...],
    start: NDArray,
    lower: NDArray,
    mle: NDArray,
    upper: NDArray,
    final_gradient: NDArray,
) -> tuple[DiagnosticsRow, ...]:
    """One DiagnosticsRow per fixed parameter."""
    return tuple(
        DiagnosticsRow(
            param=names[i],
            starting_value=float(start[i]),
            lower=float(lower[i]),
            mle=float(mle[i]),
            upper=float(upper[i]),
            final_gradient=float(final_gradient[i]),
        )
        for i in range(len(names))
    )


def _report_call(i: int, opt: MinimizerOutput) -> None:
    print(f"  Minimizer call {i}: objective={opt.objective:.6f}, "
          f"convergence={opt.convergence}, iterations={opt.iterations}")
