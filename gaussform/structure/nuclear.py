from collections.abc import Sequence
from typing import Union

import numpy as np

from gaussform.structure import atom as atom_lib
from gaussform.structure import molecule as molecule_lib


def repulsion_energy(
    nuclei: Union[molecule_lib.Molecule, Sequence[atom_lib.Atom]],
) -> float:
    """The Coulomb repulsion sum_{A<B} Z_A Z_B / |R_A - R_B| of point nuclei.

    Args:
        nuclei: A molecule or a sequence of atoms.

    Raises:
        ValueError: If two nuclei occupy the same position.
    """
    if isinstance(nuclei, molecule_lib.Molecule):
        nuclei = nuclei.atoms
    if len(nuclei) < 2:
        return 0.0

    charges = np.array([nucleus.number for nucleus in nuclei], dtype=np.float64)
    positions = np.stack([nucleus.position for nucleus in nuclei])

    i, j = np.triu_indices(len(nuclei), k=1)
    distances = np.linalg.norm(positions[i] - positions[j], axis=-1)
    if np.any(distances == 0.0):
        raise ValueError("Nuclei must occupy distinct positions.")

    return float(np.sum(charges[i] * charges[j] / distances))
