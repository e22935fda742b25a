import math

import numpy as np

from gaussform import types


def generate_cartesian_powers(l: int) -> list[types.Powers]:
    """Generates the Cartesian powers for the given angular momentum.

    The triples are ordered by descending x power, then descending y power.
    For example, l = 2 gives xx, xy, xz, yy, yz, zz.

    Returns:
        A list of the (l + 1)(l + 2) / 2 triples (i, j, k) of non-negative
        integers satisfying i + j + k = l.
    """
    if l < 0:
        raise ValueError(f"Angular momentum must be non-negative. Got {l}")

    return [
        (i, j, l - i - j)
        for i in range(l, -1, -1)
        for j in range(l - i, -1, -1)
    ]


def double_factorial(n: int) -> int:
    """n!! with the convention n!! = 1 for n <= 0."""
    return math.prod(range(n, 0, -2))


def normalization_constant(exponent: float, powers: types.Powers) -> float:
    """Computes the inverse of the L^2 norm of the primitive Cartesian Gaussian

    x^l y^m z^n exp(-a |r|^2)

    Formula:
    N = sqrt(2^(2L + 3/2) a^(L + 3/2) / ((2l-1)!! (2m-1)!! (2n-1)!! pi^(3/2)))

    where L = l + m + n.
    """
    l, m, n = (int(p) for p in powers)
    total = l + m + n
    numerator = 2.0 ** (2 * total + 1.5) * exponent ** (total + 1.5)
    denominator = (
        double_factorial(2 * l - 1)
        * double_factorial(2 * m - 1)
        * double_factorial(2 * n - 1)
        * np.pi**1.5
    )
    return float(np.sqrt(numerator / denominator))
