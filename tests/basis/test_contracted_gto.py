import pytest

import numpy as np

from gaussform.basis import cartesian
from gaussform.basis import contracted_gto
from gaussform.basis import shell as shell_lib

_ORIGIN = np.array([0.0, 1.0, -1.0])


def test_primitive_norm():
    primitive = contracted_gto.PrimitiveGaussian(
        origin=_ORIGIN, exponent=1.5, powers=(1, 0, 2)
    )
    assert primitive.norm == cartesian.normalization_constant(1.5, (1, 0, 2))
    assert primitive.norm > 0


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(origin=[0.0, 0.0], exponent=1.0, powers=(0, 0, 0)),
        dict(origin=_ORIGIN, exponent=0.0, powers=(0, 0, 0)),
        dict(origin=_ORIGIN, exponent=1.0, powers=(0, -1, 0)),
        dict(origin=_ORIGIN, exponent=1.0, powers=(0, 1)),
    ],
)
def test_invalid_primitive(kwargs):
    with pytest.raises(ValueError):
        contracted_gto.PrimitiveGaussian(**kwargs)


def _primitive(exponent, powers=(0, 0, 0), origin=_ORIGIN):
    return contracted_gto.PrimitiveGaussian(
        origin=origin, exponent=exponent, powers=powers
    )


def test_contracted_gaussian():
    function = contracted_gto.ContractedGaussian(
        primitives=[_primitive(2.0, (0, 1, 0)), _primitive(0.5, (0, 1, 0))],
        coefficients=[0.3, 0.7],
    )
    assert len(function) == 2
    assert function.powers == (0, 1, 0)
    np.testing.assert_array_equal(function.origin, _ORIGIN)


@pytest.mark.parametrize(
    "primitives,coefficients",
    [
        ([], []),
        ([_primitive(2.0)], [0.3, 0.7]),
        ([_primitive(2.0), _primitive(1.0, (1, 0, 0))], [0.3, 0.7]),
        ([_primitive(2.0), _primitive(1.0, origin=np.zeros(3))], [0.3, 0.7]),
    ],
)
def test_invalid_contracted_gaussian(primitives, coefficients):
    with pytest.raises(ValueError):
        contracted_gto.ContractedGaussian(
            primitives=primitives, coefficients=coefficients
        )


def test_expand_shell():
    shell = shell_lib.Shell(
        primitive_type=shell_lib.PrimitiveType.CARTESIAN,
        angular_momentum=(0, 1, 2),
        exponents=[3.0, 0.4],
        coefficients=[[0.1, 0.9], [0.2, 0.8], [0.3, 0.7]],
    )
    functions = contracted_gto.expand_shell(shell, _ORIGIN)

    assert [f.powers for f in functions] == (
        [(0, 0, 0)]
        + cartesian.generate_cartesian_powers(1)
        + cartesian.generate_cartesian_powers(2)
    )
    np.testing.assert_array_equal(functions[0].coefficients, [0.1, 0.9])
    np.testing.assert_array_equal(functions[1].coefficients, [0.2, 0.8])
    np.testing.assert_array_equal(functions[-1].coefficients, [0.3, 0.7])
    for function in functions:
        np.testing.assert_array_equal(function.origin, _ORIGIN)
        assert [p.exponent for p in function.primitives] == [3.0, 0.4]


def test_expand_spherical_shell():
    shell = shell_lib.Shell(
        primitive_type=shell_lib.PrimitiveType.SPHERICAL,
        angular_momentum=(2,),
        exponents=[1.0],
        coefficients=[[1.0]],
    )
    with pytest.raises(NotImplementedError):
        contracted_gto.expand_shell(shell, _ORIGIN)
