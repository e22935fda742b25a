import pytest

import numpy as np

from gaussform.integrals import gaussian
from gaussform.integrals import multipole
from gaussform.integrals import overlap

_ZA = 1.8
_ZB = 2.0
_RA = np.array([0.0, 0.0, 0.0])
_RB = np.array([0.5, 0.8, -0.2])


def test_multipole_regression():
    # Regression value from an independent Obara-Saika implementation.
    actual = multipole.multipole(
        _ZA, _ZB, _RA, _RB, np.zeros(3), (0, 0, 2), (0, 0, 0), (0, 0, 1)
    )
    np.testing.assert_allclose(actual, -0.01330515491323708, rtol=0, atol=1e-12)


@pytest.mark.parametrize("la,lb", [((0, 0, 0), (0, 0, 0)), ((1, 2, 0), (0, 1, 1))])
def test_zeroth_moment_is_overlap(la, lb):
    rc = np.array([3.0, -1.0, 0.5])
    np.testing.assert_allclose(
        multipole.multipole(_ZA, _ZB, _RA, _RB, rc, la, lb, (0, 0, 0)),
        overlap.overlap(_ZA, _ZB, _RA, _RB, la, lb),
        rtol=1e-14,
    )


@pytest.mark.parametrize("axis", [0, 1, 2])
def test_dipole_of_s_functions(axis):
    # <a| x - Cx |b> = (Px - Cx) (a|b)
    rc = np.array([0.1, 0.2, 0.3])
    operator = [0, 0, 0]
    operator[axis] = 1
    P = gaussian.product_center(_ZA, _RA, _ZB, _RB)
    expected = (P[axis] - rc[axis]) * gaussian.overlap_ss(_ZA, _ZB, _RA, _RB)

    actual = multipole.multipole(
        _ZA, _ZB, _RA, _RB, rc, (0, 0, 0), (0, 0, 0), tuple(operator)
    )
    np.testing.assert_allclose(actual, expected, rtol=1e-14)


def test_moment_shifts_bra_power():
    # x_A * G_a(l) = G_a(l + 1) when the moment origin is A.
    la, lb = (1, 0, 1), (0, 2, 0)
    np.testing.assert_allclose(
        multipole.multipole(_ZA, _ZB, _RA, _RB, _RA, la, lb, (1, 0, 0)),
        overlap.overlap(_ZA, _ZB, _RA, _RB, (2, 0, 1), lb),
        rtol=1e-12,
    )
