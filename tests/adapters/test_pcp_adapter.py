import pytest
from unittest import mock

import numpy as np

from gaussform.adapters import pubchem
from gaussform.structure import units
from tests import utils

_WATER = [
    ("H", 1, (0.1, 0.0, 0.0)),
    ("O", 8, (0.0, 0.2, 0.0)),
    ("H", 1, (0.0, 0.0, 0.3)),
]


def _mock_compound(coordinate_type: str, atoms) -> mock.MagicMock:
    compound = mock.MagicMock()
    compound.coordinate_type = coordinate_type
    compound.atoms = [
        mock.MagicMock(element=element, number=number, x=x, y=y, z=z)
        for element, number, (x, y, z) in atoms
    ]
    return compound


def test_load_molecule():
    molecule = pubchem.load_molecule(_mock_compound("3d", _WATER))

    assert [a.symbol for a in molecule.atoms] == ["H", "O", "H"]
    assert [a.number for a in molecule.atoms] == [1, 8, 1]
    for loaded, (_, _, position) in zip(molecule.atoms, _WATER):
        np.testing.assert_allclose(
            loaded.position, np.array(position) * units.ANGSTROM_TO_BOHR
        )
        assert loaded.shells == ()


def test_load_molecule_with_basis():
    fetcher = mock.MagicMock(return_value=[utils.STO_3G_H])
    molecule = pubchem.load_molecule(
        _mock_compound("3d", _WATER[:1]), basis_name="sto-3g", basis_fetcher=fetcher
    )

    fetcher.assert_called_once_with("sto-3g", 1)
    assert molecule.atoms[0].shells == (utils.STO_3G_H,)


def test_load_molecule_without_atoms():
    molecule = pubchem.load_molecule(_mock_compound("3d", []))
    assert molecule.atoms == ()


def test_load_molecule_invalid_coordinate_type():
    with pytest.raises(ValueError, match="Compound must have 3D coordinates."):
        pubchem.load_molecule(_mock_compound("2d", _WATER))
