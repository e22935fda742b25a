from gaussform import types
from gaussform.integrals import gaussian
from gaussform.integrals import prefactors
from gaussform.integrals.expansion import compile_expansion, exponent_key
from gaussform.integrals.recursion import Kind


def multipole(
    za: float,
    zb: float,
    ra: types.Array,
    rb: types.Array,
    rc: types.Array,
    la: types.Powers,
    lb: types.Powers,
    operator: types.Powers,
) -> float:
    """Computes the multipole moment integral of two unnormalized Cartesian
    primitives:

    <a| (x - Cx)^e (y - Cy)^f (z - Cz)^g |b>

    Args:
        rc: The origin C of the moment. Shape (3,)
        operator: The powers (e, f, g).
    """
    expansion = compile_expansion(
        Kind.MOMENT, exponent_key(la, lb), exponent_key(operator)
    )
    values = prefactors.moment_prefactors(za, zb, ra, rb, rc)
    return gaussian.overlap_ss(za, zb, ra, rb) * float(
        expansion.products(values).sum()
    )
