import dataclasses
import pytest

import numpy as np

from gaussform.basis import cartesian


@dataclasses.dataclass
class _GenerateCartesianPowersTestCase:
    l: int
    expected: list[tuple[int, int, int]]


@pytest.mark.parametrize(
    "case",
    [
        _GenerateCartesianPowersTestCase(l=0, expected=[(0, 0, 0)]),
        _GenerateCartesianPowersTestCase(
            l=1, expected=[(1, 0, 0), (0, 1, 0), (0, 0, 1)]
        ),
        _GenerateCartesianPowersTestCase(
            l=2,
            expected=[
                (2, 0, 0),
                (1, 1, 0),
                (1, 0, 1),
                (0, 2, 0),
                (0, 1, 1),
                (0, 0, 2),
            ],
        ),
    ],
)
def test_generate_cartesian_powers(case):
    assert cartesian.generate_cartesian_powers(case.l) == case.expected


@pytest.mark.parametrize("l", [3, 4, 5])
def test_generate_cartesian_powers_count(l):
    powers = cartesian.generate_cartesian_powers(l)
    assert len(powers) == (l + 1) * (l + 2) // 2
    assert len(set(powers)) == len(powers)
    assert all(sum(p) == l and min(p) >= 0 for p in powers)


def test_generate_cartesian_powers_invalid_l():
    with pytest.raises(ValueError):
        cartesian.generate_cartesian_powers(-1)


@pytest.mark.parametrize(
    "n,expected", [(-1, 1), (0, 1), (1, 1), (3, 3), (5, 15), (6, 48)]
)
def test_double_factorial(n, expected):
    assert cartesian.double_factorial(n) == expected


# Values computed using the closed form for s and p functions:
# N_s = (2a/pi)^(3/4), N_p = (2a/pi)^(3/4) * 2 sqrt(a)
@pytest.mark.parametrize(
    "exponent,powers,expected",
    [
        (0.5, (0, 0, 0), (1.0 / np.pi) ** 0.75),
        (2.0, (0, 0, 0), (4.0 / np.pi) ** 0.75),
        (2.0, (0, 1, 0), (4.0 / np.pi) ** 0.75 * 2.0 * np.sqrt(2.0)),
    ],
)
def test_normalization_constant(exponent, powers, expected):
    np.testing.assert_allclose(
        cartesian.normalization_constant(exponent, powers), expected, rtol=1e-14
    )
