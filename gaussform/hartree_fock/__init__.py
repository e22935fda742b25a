from .one_electron import (
    overlap_matrix,
    kinetic_matrix,
    nuclear_matrix,
    multipole_matrix,
    dipole_matrices,
    core_hamiltonian_matrix,
)
from .two_electron import (
    eri_tensor,
    coulomb_exchange,
    coulomb_exchange_from_tensor,
)
