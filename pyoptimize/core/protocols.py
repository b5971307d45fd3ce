"""
Core protocols for PyOptimize.

These define the structural interfaces of the external collaborators the
optimization driver talks to. We use Protocol (structural typing) rather
than ABC (nominal typing) so that any model object exposing the right
attributes can be optimized without subclassing.

Design Principles:
    - Minimal contracts: prescribe only what the driver actually calls
    - Collaborators are opaque: the driver never inspects their internals
    - Capabilities are injected, never read from ambient state
"""

from typing import Protocol, Any, Callable, Mapping, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class ObjectiveModel(Protocol):
    """
    Protocol for an objective with gradient and declared parameters.

    The driver never owns or mutates a model; it only evaluates ``fn`` and
    ``gr`` and reads the parameter metadata.
    """

    def fn(self, par: NDArray[np.floating[Any]]) -> float:
        """Objective value (typically a negative log-likelihood)."""
        ...

    def gr(self, par: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """Gradient of ``fn`` at ``par``, same length as ``par``."""
        ...

    @property
    def par(self) -> NDArray[np.floating[Any]]:
        """Default starting values for the fixed parameters."""
        ...

    @property
    def par_names(self) -> tuple[str, ...]:
        """One name per fixed parameter."""
        ...

    @property
    def parameters(self) -> Mapping[str, Any]:
        """
        All declared parameters, fixed and latent.

        The total number of scalar entries across all values is the
        model's total coefficient count. A value may be an array or a
        (possibly ragged) list of arrays; nested entries are flattened.
        """
        ...


@runtime_checkable
class Minimizer(Protocol):
    """
    Protocol for a bounded nonlinear minimizer.

    Called as ``minimizer(fn, gr, start, lower, upper, control)``. The
    ``control`` mapping is passed through unexamined. Non-convergence is
    reported through the returned record, never raised.
    """

    def __call__(
        self,
        fn: Callable[[NDArray], float],
        gr: Callable[[NDArray], NDArray],
        start: NDArray[np.floating[Any]],
        lower: NDArray[np.floating[Any]],
        upper: NDArray[np.floating[Any]],
        control: Mapping[str, Any],
    ) -> Any:
        """Return a record with par, objective, convergence, message,
        iterations and evaluations."""
        ...


# A monotonic clock returning seconds as a float
Clock = Callable[[], float]
