import itertools
from typing import NamedTuple

import numpy as np

from gaussform.basis import contracted_gto
from gaussform.integrals import coulomb
from gaussform.logger import logger
from gaussform.structure import molecular_basis
from gaussform.symmetry import quartet as quartet_lib


class CoulombExchange(NamedTuple):
    # The Coulomb matrix. Shape (N, N)
    J: np.ndarray

    # The exchange matrix. Shape (N, N)
    K: np.ndarray


def electron_repulsion(
    f1: contracted_gto.ContractedGaussian,
    f2: contracted_gto.ContractedGaussian,
    f3: contracted_gto.ContractedGaussian,
    f4: contracted_gto.ContractedGaussian,
) -> float:
    """Computes the contracted electron repulsion integral (f1 f2|f3 f4)."""
    total = 0.0
    for (c1, g1), (c2, g2), (c3, g3), (c4, g4) in itertools.product(
        zip(f1.coefficients, f1.primitives),
        zip(f2.coefficients, f2.primitives),
        zip(f3.coefficients, f3.primitives),
        zip(f4.coefficients, f4.primitives),
    ):
        weight = c1 * c2 * c3 * c4 * g1.norm * g2.norm * g3.norm * g4.norm
        total += weight * coulomb.coulomb_repulsion(
            g1.exponent,
            g2.exponent,
            g3.exponent,
            g4.exponent,
            g1.origin,
            g2.origin,
            g3.origin,
            g4.origin,
            g1.powers,
            g2.powers,
            g3.powers,
            g4.powers,
        )

    return float(total)


def _iter_unique_integrals(basis: molecular_basis.MolecularBasis):
    """Yields (quartet, (ij|kl)) for each canonical quartet."""
    for i, j, k, l in quartet_lib.iter_canonical_quartets(basis.n_basis):
        value = electron_repulsion(basis[i], basis[j], basis[k], basis[l])
        yield (i, j, k, l), value


def eri_tensor(basis: molecular_basis.MolecularBasis) -> np.ndarray:
    """Computes the electron repulsion tensor in chemist's notation.

    Each symmetry-unique integral is computed once and written to all of its
    permutations.

    Returns:
        A numpy array of shape (N, N, N, N) where N=basis.n_basis
    """
    n = basis.n_basis
    logger.debug(
        "Computing ERI tensor of size %d with %d unique quartets",
        n,
        quartet_lib.count_canonical_quartets(n),
    )

    eri = np.empty((n, n, n, n), dtype=np.float64)
    for quartet, value in _iter_unique_integrals(basis):
        for i, j, k, l in quartet_lib.orbit(quartet):
            eri[i, j, k, l] = value

    return eri


def _validate_density(density: np.ndarray, n_basis: int) -> np.ndarray:
    density = np.asarray(density, dtype=np.float64)
    if density.shape != (n_basis, n_basis):
        raise ValueError(
            f"Expected a density matrix of shape {(n_basis, n_basis)}, "
            f"got {density.shape}"
        )

    return density


def coulomb_exchange(
    basis: molecular_basis.MolecularBasis, density: np.ndarray
) -> CoulombExchange:
    """Computes the Coulomb and exchange matrices without storing the ERI
    tensor:

    J[i, j] = sum_kl (ij|kl) D[k, l]
    K[i, j] = sum_kl (ik|jl) D[k, l]

    Each unique integral is computed once and scattered into J and K for
    every permutation of its quartet.
    """
    n = basis.n_basis
    density = _validate_density(density, n)
    logger.debug(
        "Computing direct J/K of size %d with %d unique quartets",
        n,
        quartet_lib.count_canonical_quartets(n),
    )

    J = np.zeros((n, n), dtype=np.float64)
    K = np.zeros((n, n), dtype=np.float64)
    for quartet, value in _iter_unique_integrals(basis):
        for i, j, k, l in quartet_lib.orbit(quartet):
            J[i, j] += value * density[k, l]
            K[i, k] += value * density[j, l]

    return CoulombExchange(J=J, K=K)


def coulomb_exchange_from_tensor(
    eri: np.ndarray, density: np.ndarray
) -> CoulombExchange:
    """Computes the Coulomb and exchange matrices from a stored ERI tensor.

    Args:
        eri: The ERI tensor of shape (N, N, N, N).
        density: The density matrix of shape (N, N).
    """
    eri = np.asarray(eri, dtype=np.float64)
    n = eri.shape[0]
    if eri.shape != (n, n, n, n):
        raise ValueError(
            f"Expected an ERI tensor of shape {(n, n, n, n)}, got {eri.shape}"
        )
    density = _validate_density(density, n)

    J = np.einsum("ijkl,kl->ij", eri, density)
    K = np.einsum("ikjl,kl->ij", eri, density)
    return CoulombExchange(J=J, K=K)
