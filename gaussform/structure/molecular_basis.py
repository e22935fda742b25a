import dataclasses
from collections.abc import Sequence

from gaussform.basis import contracted_gto
from gaussform.logger import logger
from gaussform.structure import atom
from gaussform.structure import molecule


@dataclasses.dataclass(frozen=True)
class MolecularBasis:
    """An ordered list of contracted Gaussians on the atoms of a molecule.

    The order of the functions is the row and column order of every matrix
    built from the basis.
    """

    name: str
    atoms: Sequence[atom.Atom]
    functions: Sequence[contracted_gto.ContractedGaussian]

    def __post_init__(self):
        object.__setattr__(self, "atoms", tuple(self.atoms))
        object.__setattr__(self, "functions", tuple(self.functions))

    @property
    def molecule(self) -> molecule.Molecule:
        """The atoms of the basis as a Molecule."""
        return molecule.Molecule(atoms=self.atoms)

    @property
    def n_basis(self) -> int:
        """The number of contracted functions, i.e. the matrix dimension."""
        return len(self.functions)

    @property
    def n_electrons(self) -> int:
        """The electron count of the neutral molecule."""
        return self.molecule.n_electrons

    def __len__(self) -> int:
        return self.n_basis

    def __iter__(self):
        return iter(self.functions)

    def __getitem__(self, index: int) -> contracted_gto.ContractedGaussian:
        return self.functions[index]


def build(molecule: molecule.Molecule, name: str = "") -> MolecularBasis:
    """Expands the shells of each atom into contracted Gaussians.

    Functions are ordered by atom, then by shell, then by Cartesian powers.
    """
    functions = []
    for atom in molecule.atoms:
        for shell in atom.shells:
            functions.extend(contracted_gto.expand_shell(shell, atom.position))

    logger.info(
        "Built basis %r: %d functions on %d atoms",
        name,
        len(functions),
        len(molecule.atoms),
    )
    return MolecularBasis(name=name, atoms=molecule.atoms, functions=functions)
