import numpy as np

from gaussform import types


def product_center(
    za: float, ra: types.Array, zb: float, rb: types.Array
) -> np.ndarray:
    """The center of the Gaussian product: P = (za*A + zb*B) / (za + zb)"""
    return (za * np.asarray(ra) + zb * np.asarray(rb)) / (za + zb)


def distance_squared(r1: types.Array, r2: types.Array) -> float:
    diff = np.asarray(r1) - np.asarray(r2)
    return float(np.dot(diff, diff))


def reduced_exponent(za: float, zb: float) -> float:
    return za * zb / (za + zb)


def overlap_prefactor(
    za: float, zb: float, ra: types.Array, rb: types.Array
) -> float:
    """The Gaussian product decay factor exp(-mu * |A - B|^2)."""
    mu = reduced_exponent(za, zb)
    return float(np.exp(-mu * distance_squared(ra, rb)))


def overlap_ss(
    za: float, zb: float, ra: types.Array, rb: types.Array
) -> float:
    """The overlap of two unnormalized s-type primitives.

    (s|s) = (pi / p)^(3/2) * exp(-mu * |A - B|^2)
    """
    p = za + zb
    return (np.pi / p) ** 1.5 * overlap_prefactor(za, zb, ra, rb)
