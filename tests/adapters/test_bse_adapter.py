import dataclasses
import pytest

import numpy as np

from gaussform.adapters import bse
from gaussform.basis import shell as shell_lib


@dataclasses.dataclass
class _TestCase:
    basis_name: str
    element: int
    expected_shells: list[shell_lib.Shell]


_TEST_CASES = [
    _TestCase(
        basis_name="sto-3g",
        element=1,
        expected_shells=[
            shell_lib.Shell(
                primitive_type=shell_lib.PrimitiveType.CARTESIAN,
                angular_momentum=(0,),
                exponents=[3.425250914, 0.6239137298, 0.1688554040],
                coefficients=[[0.1543289673, 0.5353281423, 0.4446345422]],
            )
        ],
    ),
    _TestCase(
        basis_name="sto-3g",
        element=8,
        expected_shells=[
            shell_lib.Shell(
                primitive_type=shell_lib.PrimitiveType.CARTESIAN,
                angular_momentum=(0,),
                exponents=[0.1307093214e03, 0.2380886605e02, 0.6443608313e01],
                coefficients=[[0.1543289673, 0.5353281423, 0.4446345422]],
            ),
            shell_lib.Shell(
                primitive_type=shell_lib.PrimitiveType.CARTESIAN,
                angular_momentum=(0, 1),
                exponents=[0.5033151319e01, 0.1169596125e01, 0.3803889600],
                coefficients=[
                    [-0.9996722919e-01, 0.3995128261, 0.7001154689],
                    [0.1559162750, 0.6076837186, 0.3919573931],
                ],
            ),
        ],
    ),
]


@pytest.mark.parametrize("case", _TEST_CASES)
def test_load(case: _TestCase):
    actual_shells = bse.load(case.basis_name, case.element)

    assert len(actual_shells) == len(case.expected_shells), (
        f"Number of shells mismatch for basis {case.basis_name}, "
        f"element {case.element}. Got {len(actual_shells)}, "
        f"expected {len(case.expected_shells)}"
    )

    for actual, expected in zip(actual_shells, case.expected_shells):
        assert actual.primitive_type == expected.primitive_type
        assert actual.angular_momentum == expected.angular_momentum
        np.testing.assert_allclose(actual.exponents, expected.exponents)
        np.testing.assert_allclose(actual.coefficients, expected.coefficients)


def test_load_repeats_single_momentum_for_each_contraction(monkeypatch):
    bse_data = {
        "elements": {
            "6": {
                "electron_shells": [
                    {
                        "function_type": "gto_spherical",
                        "angular_momentum": [1],
                        "exponents": ["2.0", "0.5"],
                        "coefficients": [["1.0", "0.0"], ["0.0", "1.0"]],
                    }
                ]
            }
        }
    }
    monkeypatch.setattr(bse.bse, "get_basis", lambda name, elements: bse_data)
    (shell,) = bse.load("cc-pvdz", 6)

    assert shell.primitive_type == shell_lib.PrimitiveType.SPHERICAL
    assert shell.angular_momentum == (1, 1)
    np.testing.assert_array_equal(shell.coefficients, np.eye(2))


def test_load_unsupported_function_type(monkeypatch):
    bse_data = {
        "elements": {
            "1": {
                "electron_shells": [
                    {
                        "function_type": "sto",
                        "angular_momentum": [0],
                        "exponents": ["1.0"],
                        "coefficients": [["1.0"]],
                    }
                ]
            }
        }
    }
    monkeypatch.setattr(bse.bse, "get_basis", lambda name, elements: bse_data)
    with pytest.raises(ValueError, match="Unsupported basis function type"):
        bse.load("sto-3g", 1)
