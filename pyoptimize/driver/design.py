"""
Design validation for the optimization driver.

Objective wraps plain callables into an ObjectiveModel. OptimizeDesign
validates and organizes the inputs of one optimize() call: the model,
the start vector, the box bounds, and the loop counts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyoptimize.core.exceptions import ValidationError
from pyoptimize.core.validation import (
    check_array, check_finite, check_1d, check_consistent_length, check_bounds_ordered,
    check_callable, check_count, check_sample_size,
)


@dataclass(frozen=True)
class Objective:
    """
    An objective function with its gradient and parameter metadata.

    Implements the ObjectiveModel protocol for plain callables.

    Construction:
        Objective(fn, gr, par)
        Objective(fn, gr, par, par_names=('mu', 'log_sigma'))
        Objective(fn, gr, par, parameters={'beta': beta0, 'u': np.zeros(20)})

    ``parameters`` lists every declared parameter, fixed and latent. When
    omitted it defaults to the fixed vector alone, i.e. no random effects.
    """
    fn: Callable[[NDArray], float]
    gr: Callable[[NDArray], ArrayLike]
    par: NDArray
    par_names: tuple[str, ...] = ()
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        check_callable(self.fn, 'fn')
        check_callable(self.gr, 'gr')

        par = check_array(self.par, 'par').ravel()
        object.__setattr__(self, 'par', par)

        if not self.par_names:
            names = tuple(f"par[{i}]" for i in range(len(par)))
            object.__setattr__(self, 'par_names', names)
        else:
            object.__setattr__(self, 'par_names', tuple(self.par_names))
            if len(self.par_names) != len(par):
                raise ValidationError(
                    f"par_names: expected {len(par)} names, got {len(self.par_names)}"
                )

        if not self.parameters:
            object.__setattr__(self, 'parameters', {'par': par})


def count_declared(parameters: Mapping[str, Any]) -> int:
    """Total number of scalar entries across all declared parameters.

    Values may be arrays, scalars, or (nested) lists, tuples and mappings
    of them; ragged nesting is flattened entry by entry.
    """
    return sum(_count_entries(value) for value in parameters.values())


def _count_entries(value: Any) -> int:
    if isinstance(value, Mapping):
        return sum(_count_entries(v) for v in value.values())
    if isinstance(value, (list, tuple)):
        return sum(_count_entries(v) for v in value)
    return int(np.size(value))


@dataclass(frozen=True)
class OptimizeDesign:
    """
    Validated inputs for one optimize() call.

    All vectors are 1-D float64 arrays of the same length k. Immutable
    after construction.
    """
    model: Any
    start: NDArray
    lower: NDArray
    upper: NDArray
    par_names: tuple[str, ...]
    loopnum: int
    newtonsteps: int
    n: float

    @property
    def k(self) -> int:
        """Number of fixed parameters."""
        return self.start.shape[0]

    @property
    def n_total(self) -> int:
        """Number of declared parameters, fixed and latent."""
        parameters = getattr(self.model, 'parameters', None)
        if not parameters:
            return self.k
        return count_declared(parameters)

    @property
    def has_sample_size(self) -> bool:
        return bool(np.isfinite(self.n))

    @classmethod
    def validate(
        cls,
        model,
        startpar: ArrayLike | None = None,
        lower: ArrayLike | None = None,
        upper: ArrayLike | None = None,
        *,
        loopnum: int = 3,
        newtonsteps: int = 0,
        n: float = np.inf,
    ) -> OptimizeDesign:
        """Validate driver inputs and build an OptimizeDesign."""
        if model is None:
            raise ValidationError("model: required, got None")
        check_callable(getattr(model, 'fn', None), 'model.fn')
        check_callable(getattr(model, 'gr', None), 'model.gr')

        if startpar is None:
            startpar = getattr(model, 'par', None)
            if startpar is None:
                raise ValidationError(
                    "startpar: not given and model has no default 'par'"
                )
        start = check_array(startpar, 'startpar').astype(np.float64)
        check_1d(start, 'startpar')
        check_finite(start, 'startpar')
        k = start.shape[0]

        lo = (np.full(k, -np.inf) if lower is None
              else check_array(lower, 'lower').astype(np.float64))
        hi = (np.full(k, np.inf) if upper is None
              else check_array(upper, 'upper').astype(np.float64))
        check_1d(lo, 'lower')
        check_1d(hi, 'upper')
        check_consistent_length(
            start, lo, hi, names=('startpar', 'lower', 'upper')
        )
        check_bounds_ordered(lo, hi)

        names = tuple(getattr(model, 'par_names', None) or ())
        if len(names) != k:
            names = tuple(f"par[{i}]" for i in range(k))

        return cls(
            model=model,
            start=start,
            lower=lo,
            upper=hi,
            par_names=names,
            loopnum=check_count(loopnum, 1, 'loopnum'),
            newtonsteps=check_count(newtonsteps, 0, 'newtonsteps'),
            n=check_sample_size(n),
        )

    def __repr__(self) -> str:
        return (
            f"OptimizeDesign(k={self.k}, loopnum={self.loopnum}, "
            f"newtonsteps={self.newtonsteps}, n={self.n})"
        )
