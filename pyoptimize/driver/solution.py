"""
Solution wrapper for the optimization driver.

OptimizeSolution wraps Result[OptimizeParams] and provides property
accessors, a text summary (the human-readable report written under
savedir) and a JSON-ready dictionary (the structured snapshot).
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyoptimize.core.result import Result
from pyoptimize.driver._common import (
    OptimizeParams, CoefficientCounts, DiagnosticsRow, UncertaintyReport,
)


def _jsonable(value: Any) -> Any:
    """Convert numpy containers and non-finite floats for json.dump."""
    if isinstance(value, np.ndarray):
        return [_jsonable(v) for v in value.tolist()]
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (np.floating, float)):
        value = float(value)
        return value if math.isfinite(value) else None
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.bool_):
        return bool(value)
    return value


def _format_float(x: float | None) -> str:
    if x is None:
        return 'NA'
    return f'{x:.6g}'


class OptimizeSolution:
    """Solution wrapper for one optimize() run.

    Provides the final estimates, minimizer status, information criteria,
    the per-parameter diagnostics table and the optional uncertainty
    report.
    """

    def __init__(self, _result: Result[OptimizeParams]):
        self._result = _result

    @property
    def params(self) -> OptimizeParams:
        return self._result.params

    # --- Estimates ---

    @property
    def par(self) -> NDArray:
        """Final parameter vector."""
        return self.params.par

    @property
    def par_names(self) -> tuple[str, ...]:
        return self.params.par_names

    @property
    def estimates(self) -> dict[str, float]:
        """Final parameters as name -> value dict (last one wins on repeats)."""
        return dict(zip(self.params.par_names, self.params.par.tolist()))

    @property
    def objective(self) -> float:
        """Objective value at ``par``."""
        return self.params.objective

    # --- Minimizer status (last call, unchanged) ---

    @property
    def convergence(self) -> int:
        return self.params.convergence

    @property
    def converged(self) -> bool:
        return self.params.convergence == 0

    @property
    def message(self) -> str:
        return self.params.message

    @property
    def iterations(self) -> int:
        return self.params.iterations

    @property
    def evaluations(self) -> dict[str, int]:
        return self.params.evaluations

    # --- Bookkeeping ---

    @property
    def run_time(self) -> float:
        """Total elapsed seconds."""
        return self.params.run_time

    @property
    def number_of_coefficients(self) -> CoefficientCounts:
        return self.params.number_of_coefficients

    # --- Information criteria ---

    @property
    def aic(self) -> float:
        return self.params.aic

    @property
    def aicc(self) -> float | None:
        """Small-sample AIC, or None when no sample size was given."""
        return self.params.aicc

    @property
    def bic(self) -> float | None:
        """BIC, or None when no sample size was given."""
        return self.params.bic

    # --- Diagnostics ---

    @property
    def diagnostics(self) -> tuple[DiagnosticsRow, ...]:
        return self.params.diagnostics

    @property
    def final_gradient(self) -> NDArray:
        return np.array([row.final_gradient for row in self.diagnostics])

    @property
    def max_gradient(self) -> float:
        """Largest absolute final gradient component."""
        g = self.final_gradient
        return float(np.max(np.abs(g))) if g.size else 0.0

    @property
    def sd(self) -> UncertaintyReport | Any | None:
        """Uncertainty report, or None when getsd=False."""
        return self.params.sd

    @property
    def se(self) -> NDArray | None:
        """Standard errors from the default uncertainty report."""
        sd = self.params.sd
        if isinstance(sd, UncertaintyReport):
            return sd.se
        return None

    # --- Envelope ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def diagnostics_table(self) -> str:
        """Render the diagnostics table as fixed-width text."""
        header = (
            f"{'Param':<16} {'starting_value':>14} {'Lower':>12} "
            f"{'MLE':>14} {'Upper':>12} {'final_gradient':>15}"
        )
        lines = [header]
        for row in self.diagnostics:
            lines.append(
                f"{row.param:<16} {row.starting_value:>14.6g} {row.lower:>12.6g} "
                f"{row.mle:>14.6g} {row.upper:>12.6g} {row.final_gradient:>15.6g}"
            )
        return "\n".join(lines)

    def summary(self) -> str:
        """Generate the human-readable report."""
        counts = self.number_of_coefficients
        lines = [
            "Optimization Results",
            "=" * 60,
            f"Objective: {self.objective:.6f}",
            f"Convergence: {self.convergence} ({self.message})",
            f"Iterations: {self.iterations}",
            "Evaluations: " + ", ".join(
                f"{k}={v}" for k, v in self.evaluations.items()
            ),
            f"Minimizer calls: {self.params.n_minimizer_calls}",
            f"Newton steps: {self.params.n_newton_steps}",
            f"Run time: {self.run_time:.4f}s",
            "",
            f"Coefficients: total={counts.total}, fixed={counts.fixed}, "
            f"random={counts.random}",
            f"AIC: {_format_float(self.aic)}",
            f"AICc: {_format_float(self.aicc)}",
            f"BIC: {_format_float(self.bic)}",
            "",
            "Diagnostics:",
            "-" * 60,
            self.diagnostics_table(),
        ]

        sd = self.sd
        if isinstance(sd, UncertaintyReport):
            lines.extend([
                "",
                "Standard Errors:",
                "-" * 60,
                f"{'Param':<16} {'Estimate':>14} {'Std. Error':>14}",
            ])
            for name, est, se in zip(self.par_names, sd.par_fixed, sd.se):
                lines.append(f"{name:<16} {est:>14.6g} {se:>14.6g}")
            lines.append(f"Hessian positive definite: {sd.pd_hess}")
        elif sd is not None:
            lines.extend(["", "Uncertainty report:", "-" * 60, repr(sd)])

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.warnings:
            lines.append(f"Warnings: {len(self.warnings)}")
            for w in self.warnings:
                lines.append(f"  {w}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        p = self.params
        counts = p.number_of_coefficients
        out = {
            'par': p.par,
            'par_names': list(p.par_names),
            'objective': p.objective,
            'convergence': p.convergence,
            'message': p.message,
            'iterations': p.iterations,
            'evaluations': p.evaluations,
            'n_minimizer_calls': p.n_minimizer_calls,
            'n_newton_steps': p.n_newton_steps,
            'run_time': p.run_time,
            'number_of_coefficients': {
                'total': counts.total,
                'fixed': counts.fixed,
                'random': counts.random,
            },
            'aic': p.aic,
            'aicc': p.aicc,
            'bic': p.bic,
            'diagnostics': {
                'param': [r.param for r in p.diagnostics],
                'starting_value': [r.starting_value for r in p.diagnostics],
                'lower': [r.lower for r in p.diagnostics],
                'mle': [r.mle for r in p.diagnostics],
                'upper': [r.upper for r in p.diagnostics],
                'final_gradient': [r.final_gradient for r in p.diagnostics],
            },
            'sd': self._sd_to_dict(),
            'info': self.info,
            'timing': self.timing,
            'backend': self.backend_name,
            'warnings': list(self.warnings),
            'provenance': self._result.provenance,
        }
        return _jsonable(out)

    def _sd_to_dict(self) -> Any:
        sd = self.params.sd
        if sd is None:
            return None
        if isinstance(sd, UncertaintyReport):
            return {
                'par_fixed': sd.par_fixed,
                'cov_fixed': sd.cov_fixed,
                'se': sd.se,
                'gradient_fixed': sd.gradient_fixed,
                'pd_hess': sd.pd_hess,
                'hessian': sd.hessian,
            }
        if hasattr(sd, 'to_dict'):
            return sd.to_dict()
        return repr(sd)

    def __repr__(self) -> str:
        return (
            f"OptimizeSolution(k={len(self.par)}, objective={self.objective:.4f}, "
            f"convergence={self.convergence}, max_gradient={self.max_gradient:.3g})"
        )
