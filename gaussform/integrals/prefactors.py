"""Prefactor tables for the Obara-Saika recursion.

Every step of the recursion multiplies a child term by exactly one geometric
prefactor. The recursion only records *which* prefactor (a slot) and the
evaluators fill in the values once per primitive pair or quartet. Each
integral kind has its own slot table, and the prefactor vector of that kind is
a numpy array indexed by the slot enum.

Notation: A, B (C, D) are the centers with exponents a, b (c, d),
p = a + b is the bra exponent sum (zeta for Coulomb), q = c + d (eta),
P and Q are the Gaussian product centers and xi = ab/p.
"""
import enum

import numpy as np

from gaussform import types
from gaussform.integrals import gaussian

AXES = ("X", "Y", "Z")


class OverlapSlot(enum.IntEnum):
    PA_X = 0
    PB_X = 1
    PA_Y = 2
    PB_Y = 3
    PA_Z = 4
    PB_Z = 5
    INV_2P_A = 6  # 1/(2p), weight of the lowered bra term
    INV_2P_B = 7  # 1/(2p), weight of the lowered ket term


class KineticSlot(enum.IntEnum):
    # The first eight slots coincide with OverlapSlot. Overlap terms produced
    # by the kinetic recursion are evaluated against the kinetic prefactors.
    PA_X = 0
    PB_X = 1
    PA_Y = 2
    PB_Y = 3
    PA_Z = 4
    PB_Z = 5
    INV_2P_A = 6
    INV_2P_B = 7
    TWO_XI = 8  # 2 xi
    MINUS_XI_OVER_A = 9  # -xi / a
    MINUS_XI_OVER_B = 10  # -xi / b


class NuclearSlot(enum.IntEnum):
    PA_X = 0
    PB_X = 1
    PA_Y = 2
    PB_Y = 3
    PA_Z = 4
    PB_Z = 5
    CP_X = 6  # C - P
    CP_Y = 7
    CP_Z = 8
    INV_2P = 9
    MINUS_INV_2P = 10


class MomentSlot(enum.IntEnum):
    PA_X = 0
    PB_X = 1
    PA_Y = 2
    PB_Y = 3
    PA_Z = 4
    PB_Z = 5
    PC_X = 6  # P - C, C is the origin of the moment operator
    PC_Y = 7
    PC_Z = 8
    INV_2P_A = 9
    INV_2P_B = 10
    INV_2P_OPERATOR = 11


class CoulombSlot(enum.IntEnum):
    PA_X = 0
    PB_X = 1
    QC_X = 2
    QD_X = 3
    WP_X = 4
    WQ_X = 5
    PA_Y = 6
    PB_Y = 7
    QC_Y = 8
    QD_Y = 9
    WP_Y = 10
    WQ_Y = 11
    PA_Z = 12
    PB_Z = 13
    QC_Z = 14
    QD_Z = 15
    WP_Z = 16
    WQ_Z = 17
    INV_2ZETA = 18
    INV_2ETA = 19
    MINUS_RHO_OVER_2ZETA2 = 20
    MINUS_RHO_OVER_2ETA2 = 21
    INV_2ZETA_ETA = 22  # 1/(2(zeta + eta))


def axis_slots(slots: type[enum.IntEnum], prefix: str) -> tuple[int, int, int]:
    """The (x, y, z) slots of a displacement, e.g. axis_slots(OverlapSlot, "PA")."""
    return tuple(slots[f"{prefix}_{axis}"] for axis in AXES)


def _fill_displacement(
    values: np.ndarray,
    slots: type[enum.IntEnum],
    prefix: str,
    displacement: np.ndarray,
) -> None:
    for slot, value in zip(axis_slots(slots, prefix), displacement):
        values[slot] = value


def _two_center_values(
    slots: type[enum.IntEnum],
    za: float,
    zb: float,
    ra: types.Array,
    rb: types.Array,
) -> tuple[np.ndarray, np.ndarray]:
    """Allocates the prefactor vector and fills in P - A and P - B."""
    ra, rb = np.asarray(ra), np.asarray(rb)
    P = gaussian.product_center(za, ra, zb, rb)

    values = np.zeros(len(slots), dtype=np.float64)
    _fill_displacement(values, slots, "PA", P - ra)
    _fill_displacement(values, slots, "PB", P - rb)
    return values, P


def overlap_prefactors(
    za: float, zb: float, ra: types.Array, rb: types.Array
) -> np.ndarray:
    """Returns: A numpy array of shape (len(OverlapSlot),)"""
    values, _ = _two_center_values(OverlapSlot, za, zb, ra, rb)
    inv_2p = 0.5 / (za + zb)
    values[OverlapSlot.INV_2P_A] = inv_2p
    values[OverlapSlot.INV_2P_B] = inv_2p
    return values


def kinetic_prefactors(
    za: float, zb: float, ra: types.Array, rb: types.Array
) -> np.ndarray:
    """Returns: A numpy array of shape (len(KineticSlot),)"""
    values, _ = _two_center_values(KineticSlot, za, zb, ra, rb)
    xi = gaussian.reduced_exponent(za, zb)
    inv_2p = 0.5 / (za + zb)
    values[KineticSlot.INV_2P_A] = inv_2p
    values[KineticSlot.INV_2P_B] = inv_2p
    values[KineticSlot.TWO_XI] = 2.0 * xi
    values[KineticSlot.MINUS_XI_OVER_A] = -xi / za
    values[KineticSlot.MINUS_XI_OVER_B] = -xi / zb
    return values


def nuclear_prefactors(
    za: float,
    zb: float,
    ra: types.Array,
    rb: types.Array,
    rc: types.Array,
) -> np.ndarray:
    """Returns: A numpy array of shape (len(NuclearSlot),)"""
    values, P = _two_center_values(NuclearSlot, za, zb, ra, rb)
    _fill_displacement(values, NuclearSlot, "CP", np.asarray(rc) - P)
    inv_2p = 0.5 / (za + zb)
    values[NuclearSlot.INV_2P] = inv_2p
    values[NuclearSlot.MINUS_INV_2P] = -inv_2p
    return values


def moment_prefactors(
    za: float,
    zb: float,
    ra: types.Array,
    rb: types.Array,
    rc: types.Array,
) -> np.ndarray:
    """Returns: A numpy array of shape (len(MomentSlot),)"""
    values, P = _two_center_values(MomentSlot, za, zb, ra, rb)
    _fill_displacement(values, MomentSlot, "PC", P - np.asarray(rc))
    inv_2p = 0.5 / (za + zb)
    values[MomentSlot.INV_2P_A] = inv_2p
    values[MomentSlot.INV_2P_B] = inv_2p
    values[MomentSlot.INV_2P_OPERATOR] = inv_2p
    return values


def coulomb_prefactors(
    za: float,
    zb: float,
    zc: float,
    zd: float,
    ra: types.Array,
    rb: types.Array,
    rc: types.Array,
    rd: types.Array,
) -> np.ndarray:
    """Returns: A numpy array of shape (len(CoulombSlot),)"""
    ra, rb, rc, rd = map(np.asarray, (ra, rb, rc, rd))
    zeta = za + zb
    eta = zc + zd
    rho = zeta * eta / (zeta + eta)

    P = gaussian.product_center(za, ra, zb, rb)
    Q = gaussian.product_center(zc, rc, zd, rd)
    W = gaussian.product_center(zeta, P, eta, Q)

    values = np.zeros(len(CoulombSlot), dtype=np.float64)
    _fill_displacement(values, CoulombSlot, "PA", P - ra)
    _fill_displacement(values, CoulombSlot, "PB", P - rb)
    _fill_displacement(values, CoulombSlot, "QC", Q - rc)
    _fill_displacement(values, CoulombSlot, "QD", Q - rd)
    _fill_displacement(values, CoulombSlot, "WP", W - P)
    _fill_displacement(values, CoulombSlot, "WQ", W - Q)

    values[CoulombSlot.INV_2ZETA] = 0.5 / zeta
    values[CoulombSlot.INV_2ETA] = 0.5 / eta
    values[CoulombSlot.MINUS_RHO_OVER_2ZETA2] = -0.5 * rho / (zeta * zeta)
    values[CoulombSlot.MINUS_RHO_OVER_2ETA2] = -0.5 * rho / (eta * eta)
    values[CoulombSlot.INV_2ZETA_ETA] = 0.5 / (zeta + eta)
    return values
