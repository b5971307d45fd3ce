"""
Generic result container for all PyOptimize computations.

The Result class provides a standardized envelope around a domain-specific
parameter payload. This enables shared tooling for timing, reproducibility,
and serialization while allowing each domain to define its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, loop counts, control)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for saved snapshots
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the libraries that produced a result."""
    import numpy
    import scipy
    from pyoptimize import __version__

    return {
        'pyoptimize_version': __version__,
        'numpy_version': numpy.__version__,
        'scipy_version': scipy.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for optimization runs.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (estimates, criteria, diagnostics)
        info: Structured metadata (method, loopnum, newtonsteps, control)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the minimizer that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions, filled in automatically

    Examples:
        >>> Result(
        ...     params=OptimizeParams(...),
        ...     info={'method': 'L-BFGS-B', 'loopnum': 3},
        ...     timing={'total_seconds': 0.5, 'optimization': 0.4},
        ...     backend_name='scipy_l-bfgs-b'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
