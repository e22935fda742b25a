import numpy as np
import pytest

import gaussform as gf
from gaussform.structure import nuclear


def _water() -> list[gf.Atom]:
    return [
        gf.Atom(symbol="O", number=8, position=np.array([0.0, 0.0, 0.0])),
        gf.Atom(symbol="H", number=1, position=np.array([0.0, 0.0, 2.0])),
        gf.Atom(symbol="H", number=1, position=np.array([0.0, 1.5, 2.0])),
    ]


def test_repulsion_energy():
    expected = 8 / 2.0 + 8 / 2.5 + 1 / 1.5
    np.testing.assert_allclose(
        nuclear.repulsion_energy(gf.Molecule(atoms=_water())), expected
    )


def test_repulsion_energy_accepts_atoms():
    atoms = _water()
    assert nuclear.repulsion_energy(atoms) == nuclear.repulsion_energy(
        gf.Molecule(atoms=atoms)
    )


@pytest.mark.parametrize("n_atoms", [0, 1])
def test_repulsion_energy_without_pairs(n_atoms):
    assert nuclear.repulsion_energy(_water()[:n_atoms]) == 0.0


def test_repulsion_energy_coincident_nuclei():
    atoms = [
        gf.Atom(symbol="H", number=1, position=np.array([0.0, 0.0, 1.0])),
        gf.Atom(symbol="H", number=1, position=np.array([0.0, 0.0, 1.0])),
    ]
    with pytest.raises(ValueError, match="distinct"):
        nuclear.repulsion_energy(atoms)
