from .types import Array, Powers

from . import integrals
from .integrals.recursion import IntegralTerm, Kind

from . import basis
from .basis.contracted_gto import ContractedGaussian, PrimitiveGaussian
from .basis.shell import PrimitiveType, Shell

from . import structure
from .structure.atom import Atom
from .structure.molecule import Molecule
from .structure.molecular_basis import MolecularBasis

from . import hartree_fock

from . import adapters
