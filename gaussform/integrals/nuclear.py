import numpy as np

from gaussform import types
from gaussform.integrals import boys
from gaussform.integrals import gaussian
from gaussform.integrals import prefactors
from gaussform.integrals.expansion import compile_expansion, exponent_key
from gaussform.integrals.recursion import Kind


def nuclear_attraction(
    za: float,
    zb: float,
    ra: types.Array,
    rb: types.Array,
    rc: types.Array,
    la: types.Powers,
    lb: types.Powers,
) -> float:
    """Computes the attraction <a| -1/|r - C| |b> of two unnormalized Cartesian
    primitives to a unit point charge at C.

    The caller is responsible for multiplying by the nuclear charge.

    The s-type base of order m is -2 sqrt(p/pi) (s|s) F_m(p |P - C|^2).
    """
    expansion = compile_expansion(
        Kind.NUCLEAR_ATTRACTION, exponent_key(la, lb)
    )
    values = prefactors.nuclear_prefactors(za, zb, ra, rb, rc)

    p = za + zb
    P = gaussian.product_center(za, ra, zb, rb)
    boys_values = boys.boys_orders(
        expansion.max_order, p * gaussian.distance_squared(P, rc)
    )

    aux = -2.0 * np.sqrt(p / np.pi) * gaussian.overlap_ss(za, zb, ra, rb)
    return aux * expansion.reduce(values, boys_values)
