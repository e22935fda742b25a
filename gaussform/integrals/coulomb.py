import numpy as np

from gaussform import types
from gaussform.integrals import boys
from gaussform.integrals import gaussian
from gaussform.integrals import prefactors
from gaussform.integrals.expansion import compile_expansion, exponent_key
from gaussform.integrals.recursion import Kind


def _pair_factor(
    z1: float, z2: float, r1: types.Array, r2: types.Array
) -> float:
    """K = sqrt(2) pi^(5/4) / (z1 + z2) exp(-z1 z2 |r1 - r2|^2 / (z1 + z2))"""
    return (
        np.sqrt(2.0)
        * np.pi**1.25
        / (z1 + z2)
        * gaussian.overlap_prefactor(z1, z2, r1, r2)
    )


def coulomb_repulsion(
    za: float,
    zb: float,
    zc: float,
    zd: float,
    ra: types.Array,
    rb: types.Array,
    rc: types.Array,
    rd: types.Array,
    la: types.Powers,
    lb: types.Powers,
    lc: types.Powers,
    ld: types.Powers,
) -> float:
    """Computes the electron repulsion integral (ab|cd) of four unnormalized
    Cartesian primitives in chemist's notation:

    (ab|cd) = integral a(r1) b(r1) 1/|r1 - r2| c(r2) d(r2) dr1 dr2

    The s-type base of order m is
    K_AB K_CD / sqrt(zeta + eta) F_m(rho |P - Q|^2)

    where zeta = za + zb, eta = zc + zd and rho = zeta eta / (zeta + eta).
    """
    expansion = compile_expansion(
        Kind.COULOMB, exponent_key(la, lb, lc, ld)
    )
    values = prefactors.coulomb_prefactors(za, zb, zc, zd, ra, rb, rc, rd)

    zeta = za + zb
    eta = zc + zd
    rho = zeta * eta / (zeta + eta)
    P = gaussian.product_center(za, ra, zb, rb)
    Q = gaussian.product_center(zc, rc, zd, rd)
    boys_values = boys.boys_orders(
        expansion.max_order, rho * gaussian.distance_squared(P, Q)
    )

    aux = (
        _pair_factor(za, zb, ra, rb)
        * _pair_factor(zc, zd, rc, rd)
        / np.sqrt(zeta + eta)
    )
    return aux * expansion.reduce(values, boys_values)
