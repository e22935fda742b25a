import numpy as np

import gaussform as gf
from gaussform.structure import molecular_basis

# STO-3G hydrogen, as listed by the Basis Set Exchange.
STO_3G_H = gf.Shell(
    primitive_type=gf.PrimitiveType.CARTESIAN,
    angular_momentum=(0,),
    exponents=np.array([3.425250914, 0.6239137298, 0.1688554040]),
    coefficients=np.array([[0.1543289673, 0.5353281423, 0.4446345422]]),
)

# A small sp shell and a single primitive d shell used to exercise
# functions of higher angular momentum.
SP_SHELL = gf.Shell(
    primitive_type=gf.PrimitiveType.CARTESIAN,
    angular_momentum=(0, 1),
    exponents=np.array([1.7, 0.45]),
    coefficients=np.array([[0.4, 0.7], [0.6, 0.5]]),
)
D_SHELL = gf.Shell(
    primitive_type=gf.PrimitiveType.CARTESIAN,
    angular_momentum=(2,),
    exponents=np.array([0.8]),
    coefficients=np.array([[1.0]]),
)


def h2_basis(bond_length: float = 1.4) -> molecular_basis.MolecularBasis:
    """H2 in STO-3G along the z axis. Units are Bohr."""
    molecule = gf.Molecule(
        atoms=[
            gf.Atom(
                symbol="H",
                number=1,
                position=np.array([0.0, 0.0, 0.0]),
                shells=[STO_3G_H],
            ),
            gf.Atom(
                symbol="H",
                number=1,
                position=np.array([0.0, 0.0, bond_length]),
                shells=[STO_3G_H],
            ),
        ]
    )
    return molecular_basis.build(molecule, name="sto-3g")


def mixed_basis(with_d: bool = False) -> molecular_basis.MolecularBasis:
    """A low symmetry molecule with s and p functions and optionally d."""
    heavy_shells = [SP_SHELL, D_SHELL] if with_d else [SP_SHELL]
    molecule = gf.Molecule(
        atoms=[
            gf.Atom(
                symbol="Li",
                number=3,
                position=np.array([0.1, -0.2, 0.0]),
                shells=heavy_shells,
            ),
            gf.Atom(
                symbol="H",
                number=1,
                position=np.array([0.3, 1.2, 1.1]),
                shells=[STO_3G_H],
            ),
        ]
    )
    return molecular_basis.build(molecule, name="mixed")
