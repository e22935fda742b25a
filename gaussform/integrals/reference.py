"""Closed-form reference integrals.

These use the explicit Taketa-Huzinaga-O-ohata expansions of Gaussian
integrals in terms of binomial prefactors. They are much slower than the
recursion and only serve as an independent check of it.

Reference:
H. Taketa, S. Huzinaga and K. O-ohata,
"Gaussian-Expansion Methods for Molecular Integrals",
J. Phys. Soc. Japan 21, 2313 (1966).
"""
import math
from typing import Protocol

import numpy as np

from gaussform import types
from gaussform.basis import cartesian
from gaussform.integrals import boys
from gaussform.integrals import gaussian


class ReferenceIntegralOracle(Protocol):
    """An independent source of unnormalized primitive integrals."""

    def overlap(
        self,
        za: float,
        zb: float,
        ra: types.Array,
        rb: types.Array,
        la: types.Powers,
        lb: types.Powers,
    ) -> float: ...

    def kinetic(
        self,
        za: float,
        zb: float,
        ra: types.Array,
        rb: types.Array,
        la: types.Powers,
        lb: types.Powers,
    ) -> float: ...

    def nuclear_attraction(
        self,
        za: float,
        zb: float,
        ra: types.Array,
        rb: types.Array,
        rc: types.Array,
        la: types.Powers,
        lb: types.Powers,
    ) -> float: ...

    def coulomb_repulsion(
        self,
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
    ) -> float: ...


def binomial_prefactor(s: int, ia: int, ib: int, xpa: float, xpb: float) -> float:
    """The coefficient of x^s in (x + xpa)^ia (x + xpb)^ib."""
    total = 0.0
    for t in range(s + 1):
        if s - ia <= t <= ib:
            total += (
                math.comb(ia, s - t)
                * math.comb(ib, t)
                * xpa ** (ia - s + t)
                * xpb ** (ib - t)
            )

    return total


def _fact_ratio2(a: int, b: int) -> int:
    """a! / (b! (a - 2b)!)"""
    return math.factorial(a) // math.factorial(b) // math.factorial(a - 2 * b)


def _overlap_1d(l1: int, l2: int, pax: float, pbx: float, gamma: float) -> float:
    total = 0.0
    for i in range((l1 + l2) // 2 + 1):
        total += (
            binomial_prefactor(2 * i, l1, l2, pax, pbx)
            * cartesian.double_factorial(2 * i - 1)
            / (2.0 * gamma) ** i
        )

    return total


def _a_array(
    l1: int, l2: int, pa: float, pb: float, cp: float, gamma: float
) -> np.ndarray:
    """Expansion coefficients of the nuclear attraction integral along one
    axis, indexed by Boys order."""
    result = np.zeros(l1 + l2 + 1)
    for i in range(l1 + l2 + 1):
        for r in range(i // 2 + 1):
            for u in range((i - 2 * r) // 2 + 1):
                index = i - 2 * r - u
                result[index] += (
                    (-1) ** (i + u)
                    * binomial_prefactor(i, l1, l2, pa, pb)
                    * math.factorial(i)
                    * cp ** (i - 2 * r - 2 * u)
                    * (0.25 / gamma) ** (r + u)
                    / math.factorial(r)
                    / math.factorial(u)
                    / math.factorial(i - 2 * r - 2 * u)
                )

    return result


def _b_factor(
    i: int, l1: int, l2: int, p: float, a: float, b: float, r: int, g: float
) -> float:
    return (
        binomial_prefactor(i, l1, l2, p - a, p - b)
        * _fact_ratio2(i, r)
        * (4.0 * g) ** (r - i)
    )


def _b_array(
    l1: int,
    l2: int,
    l3: int,
    l4: int,
    p: float,
    a: float,
    b: float,
    q: float,
    c: float,
    d: float,
    g1: float,
    g2: float,
    delta: float,
) -> np.ndarray:
    """Expansion coefficients of the electron repulsion integral along one
    axis, indexed by Boys order."""
    result = np.zeros(l1 + l2 + l3 + l4 + 1)
    for i1 in range(l1 + l2 + 1):
        for i2 in range(l3 + l4 + 1):
            for r1 in range(i1 // 2 + 1):
                for r2 in range(i2 // 2 + 1):
                    n = i1 + i2 - 2 * (r1 + r2)
                    for u in range(n // 2 + 1):
                        result[n - u] += (
                            _b_factor(i1, l1, l2, p, a, b, r1, g1)
                            * (-1) ** i2
                            * _b_factor(i2, l3, l4, q, c, d, r2, g2)
                            * (-1) ** u
                            * _fact_ratio2(n, u)
                            * (q - p) ** (n - 2 * u)
                            / delta ** (n - u)
                        )

    return result


class ClosedFormReference:
    """Implements ReferenceIntegralOracle with closed-form expansions."""

    def overlap(self, za, zb, ra, rb, la, lb) -> float:
        ra, rb = np.asarray(ra), np.asarray(rb)
        P = gaussian.product_center(za, ra, zb, rb)
        gamma = za + zb

        result = gaussian.overlap_ss(za, zb, ra, rb)
        for axis in range(3):
            result *= _overlap_1d(
                int(la[axis]),
                int(lb[axis]),
                P[axis] - ra[axis],
                P[axis] - rb[axis],
                gamma,
            )

        return float(result)

    def kinetic(self, za, zb, ra, rb, la, lb) -> float:
        """<a| -1/2 nabla^2 |b> computed by differentiating b."""
        lb = tuple(int(p) for p in lb)
        result = zb * (2 * sum(lb) + 3) * self.overlap(za, zb, ra, rb, la, lb)

        for axis in range(3):
            raised = list(lb)
            raised[axis] += 2
            result -= 2.0 * zb**2 * self.overlap(za, zb, ra, rb, la, raised)

            weight = lb[axis] * (lb[axis] - 1)
            if weight > 0:
                lowered = list(lb)
                lowered[axis] -= 2
                result -= 0.5 * weight * self.overlap(za, zb, ra, rb, la, lowered)

        return float(result)

    def nuclear_attraction(self, za, zb, ra, rb, rc, la, lb) -> float:
        ra, rb, rc = np.asarray(ra), np.asarray(rb), np.asarray(rc)
        gamma = za + zb
        P = gaussian.product_center(za, ra, zb, rb)

        arrays = [
            _a_array(
                int(la[axis]),
                int(lb[axis]),
                P[axis] - ra[axis],
                P[axis] - rb[axis],
                P[axis] - rc[axis],
                gamma,
            )
            for axis in range(3)
        ]
        x = gamma * gaussian.distance_squared(P, rc)
        boys_values = boys.boys_orders(sum(len(a) - 1 for a in arrays), x)

        total = 0.0
        for i, ax in enumerate(arrays[0]):
            for j, ay in enumerate(arrays[1]):
                for k, az in enumerate(arrays[2]):
                    total += ax * ay * az * boys_values[i + j + k]

        prefactor = -2.0 * np.pi / gamma * gaussian.overlap_prefactor(za, zb, ra, rb)
        return float(prefactor * total)

    def coulomb_repulsion(
        self, za, zb, zc, zd, ra, rb, rc, rd, la, lb, lc, ld
    ) -> float:
        ra, rb, rc, rd = map(np.asarray, (ra, rb, rc, rd))
        g1 = za + zb
        g2 = zc + zd
        delta = 0.25 * (1.0 / g1 + 1.0 / g2)
        P = gaussian.product_center(za, ra, zb, rb)
        Q = gaussian.product_center(zc, rc, zd, rd)

        arrays = [
            _b_array(
                int(la[axis]),
                int(lb[axis]),
                int(lc[axis]),
                int(ld[axis]),
                P[axis],
                ra[axis],
                rb[axis],
                Q[axis],
                rc[axis],
                rd[axis],
                g1,
                g2,
                delta,
            )
            for axis in range(3)
        ]
        x = 0.25 * gaussian.distance_squared(P, Q) / delta
        boys_values = boys.boys_orders(sum(len(b) - 1 for b in arrays), x)

        total = 0.0
        for i, bx in enumerate(arrays[0]):
            for j, by in enumerate(arrays[1]):
                for k, bz in enumerate(arrays[2]):
                    total += bx * by * bz * boys_values[i + j + k]

        prefactor = (
            2.0
            * np.pi**2.5
            / (g1 * g2 * np.sqrt(g1 + g2))
            * gaussian.overlap_prefactor(za, zb, ra, rb)
            * gaussian.overlap_prefactor(zc, zd, rc, rd)
        )
        return float(prefactor * total)
