from .molecular_basis import MolecularBasis
from .molecular_basis import build as build_molecular_basis
from .nuclear import repulsion_energy as nuclear_repulsion_energy
