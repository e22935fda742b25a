from collections.abc import Callable, Sequence
import dataclasses
from typing import Optional

from gaussform.adapters import bse
from gaussform.basis import shell
from gaussform.structure import atom as atom_lib

# Fetches the shells of a basis set for a given atomic number.
BasisFetcher = Callable[[str, int], Sequence[shell.Shell]]


@dataclasses.dataclass(frozen=True)
class Molecule:
    atoms: Sequence[atom_lib.Atom]

    def __post_init__(self):
        object.__setattr__(self, "atoms", tuple(self.atoms))

    @property
    def n_electrons(self) -> int:
        """The total number of electrons in the neutral molecule."""
        return sum(atom.number for atom in self.atoms)

    @classmethod
    def from_geometry(
        cls,
        atoms: Sequence[atom_lib.Atom],
        basis_name: str,
        basis_fetcher: Optional[BasisFetcher] = None,
    ) -> "Molecule":
        """Builds a Molecule from atomic positions and a basis set name.

        Args:
            atoms: The atoms. Their shells are ignored.
            basis_name: The name of the basis set, e.g. "sto-3g".
            basis_fetcher: Loads the shells of an element. Defaults to the
                Basis Set Exchange.
        """
        if basis_fetcher is None:
            basis_fetcher = bse.load

        atoms = [
            atom_lib.Atom(
                symbol=atom.symbol,
                number=atom.number,
                position=atom.position,
                shells=basis_fetcher(basis_name, atom.number),
            )
            for atom in atoms
        ]

        return cls(atoms=atoms)
