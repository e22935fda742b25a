import numpy as np

from gaussform import types
from gaussform.integrals import gaussian
from gaussform.integrals import prefactors
from gaussform.integrals.expansion import compile_expansion, exponent_key
from gaussform.integrals.recursion import Kind


def kinetic(
    za: float,
    zb: float,
    ra: types.Array,
    rb: types.Array,
    la: types.Powers,
    lb: types.Powers,
) -> float:
    """Computes the kinetic energy integral <a| -1/2 nabla^2 |b> of two
    unnormalized Cartesian primitives.

    The expansion contains kinetic terms, whose s-type base is
    xi (3 - 2 xi |A-B|^2) (s|s), and overlap terms with base (s|s).
    """
    expansion = compile_expansion(Kind.KINETIC, exponent_key(la, lb))
    values = prefactors.kinetic_prefactors(za, zb, ra, rb)

    xi = gaussian.reduced_exponent(za, zb)
    kinetic_ss = xi * (3.0 - 2.0 * xi * gaussian.distance_squared(ra, rb))
    bases = np.where(expansion.mask(Kind.KINETIC), kinetic_ss, 1.0)

    return gaussian.overlap_ss(za, zb, ra, rb) * float(
        np.dot(expansion.products(values), bases)
    )
