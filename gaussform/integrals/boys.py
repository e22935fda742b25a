import numpy as np
from scipy import special

# Below this argument the hypergeometric series is used, above it the
# incomplete gamma function.
_GAMMA_SWITCH = 1.0


def boys(m: int, x: float) -> float:
    """
    Compute the Boys function:
    F_m(x) = integral_0^1 t^(2m) exp(-x t^2) dt

    For small x we use the fact that the Boys function can be expressed in
    terms of the confluent hyper-geometric function:
    F_m(x) = 1F1(m + 1/2, m + 3/2, -x) / (2m + 1)

    For larger x we use the regularized lower incomplete gamma function P:
    F_m(x) = Gamma(m + 1/2) P(m + 1/2, x) / (2 x^(m + 1/2))
    """
    if m < 0:
        raise ValueError(f"The Boys order must be non-negative. Got {m}")
    if x < 0:
        raise ValueError(f"The Boys argument must be non-negative. Got {x}")

    if x == 0.0:
        return 1.0 / (2 * m + 1)

    if x < _GAMMA_SWITCH:
        return float(special.hyp1f1(m + 0.5, m + 1.5, -x) / (2.0 * m + 1.0))

    a = m + 0.5
    return float(special.gamma(a) * special.gammainc(a, x) / (2.0 * x**a))


def boys_orders(max_order: int, x: float) -> np.ndarray:
    """Evaluates F_m(x) for 0 <= m <= max_order.

    Returns:
        A numpy array of shape (max_order + 1,).
    """
    return np.array([boys(m, x) for m in range(max_order + 1)])
