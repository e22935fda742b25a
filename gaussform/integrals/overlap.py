import numpy as np

from gaussform import types
from gaussform.integrals import gaussian
from gaussform.integrals import prefactors
from gaussform.integrals.expansion import compile_expansion, exponent_key
from gaussform.integrals.recursion import Kind


def overlap(
    za: float,
    zb: float,
    ra: types.Array,
    rb: types.Array,
    la: types.Powers,
    lb: types.Powers,
) -> float:
    """Computes the overlap of two unnormalized Cartesian primitives.

    (a|b) = integral (x-Ax)^ax (y-Ay)^ay (z-Az)^az exp(-za |r-A|^2)
                     (x-Bx)^bx (y-By)^by (z-Bz)^bz exp(-zb |r-B|^2) dr

    Args:
        za, zb: The primitive exponents.
        ra, rb: The primitive centers. Shape (3,)
        la, lb: The Cartesian powers of each primitive.
    """
    expansion = compile_expansion(Kind.OVERLAP, exponent_key(la, lb))
    values = prefactors.overlap_prefactors(za, zb, ra, rb)
    return gaussian.overlap_ss(za, zb, ra, rb) * float(
        np.sum(expansion.products(values))
    )
