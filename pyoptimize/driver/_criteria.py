"""
Information criteria from a minimized negative log-likelihood.

    IC   = penalty * k + 2 * objective
    AICc = AIC + 2k(k + 1) / (n - k - 1)

AIC uses penalty 2 and no sample size; AICc adds the small-sample
correction; BIC uses penalty log(n).
"""

import math


def information_criterion(
    objective: float,
    k: int,
    penalty: float = 2.0,
    n: float = math.inf,
) -> float:
    """Penalized fit criterion for a model with ``k`` fixed parameters.

    Args:
        objective: Minimized negative log-likelihood.
        k: Number of fixed parameters.
        penalty: Cost per parameter (2 for AIC, log(n) for BIC).
        n: Sample size. When finite, the AICc correction is added.

    Returns:
        The criterion value. Infinite when ``n - k - 1 <= 0`` with finite n.
    """
    value = penalty * k + 2.0 * objective
    if math.isfinite(n):
        denom = n - k - 1
        if denom <= 0:
            return math.inf
        value += 2.0 * k * (k + 1) / denom
    return value


def aic(objective: float, k: int) -> float:
    return information_criterion(objective, k)


def aicc(objective: float, k: int, n: float) -> float:
    return information_criterion(objective, k, n=n)


def bic(objective: float, k: int, n: float) -> float:
    return information_criterion(objective, k, penalty=math.log(n))
