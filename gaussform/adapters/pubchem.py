from typing import Optional

import numpy as np
import pubchempy as pcp

from gaussform.structure import atom
from gaussform.structure import molecule
from gaussform.structure import units


def _positions_in_bohr(compound: pcp.Compound) -> np.ndarray:
    """The atomic coordinates of a compound. Shape (n_atoms, 3)"""
    angstrom = np.array(
        [[a.x, a.y, a.z] for a in compound.atoms], dtype=np.float64
    ).reshape(-1, 3)
    return angstrom * units.ANGSTROM_TO_BOHR


def load_molecule(
    compound: pcp.Compound,
    basis_name: Optional[str] = None,
    basis_fetcher: Optional[molecule.BasisFetcher] = None,
) -> molecule.Molecule:
    """Converts a PubChem compound with 3D coordinates into a Molecule.

    Args:
        compound: A compound fetched with record_type="3d".
        basis_name: If given, the shells of this basis set are attached to
            every atom. Otherwise the atoms carry no shells.
        basis_fetcher: Passed to Molecule.from_geometry.
    """
    if compound.coordinate_type != "3d":
        raise ValueError("Compound must have 3D coordinates.")

    atoms = [
        atom.Atom(symbol=a.element, number=a.number, position=position)
        for a, position in zip(compound.atoms, _positions_in_bohr(compound))
    ]
    if basis_name is None:
        return molecule.Molecule(atoms=atoms)

    return molecule.Molecule.from_geometry(atoms, basis_name, basis_fetcher)
