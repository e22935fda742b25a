from collections.abc import Callable, Sequence
import itertools
from typing import Optional

import numpy as np

from gaussform import types
from gaussform.basis import contracted_gto
from gaussform.integrals import kinetic
from gaussform.integrals import multipole
from gaussform.integrals import nuclear
from gaussform.integrals import overlap
from gaussform.logger import logger
from gaussform.structure import atom
from gaussform.structure import molecular_basis

# Computes an integral between two unnormalized primitives.
PrimitiveOperator = Callable[
    [contracted_gto.PrimitiveGaussian, contracted_gto.PrimitiveGaussian], float
]


def contract(
    f1: contracted_gto.ContractedGaussian,
    f2: contracted_gto.ContractedGaussian,
    operator: PrimitiveOperator,
) -> float:
    """Computes <f1|O|f2> = sum_ab c_a c_b N_a N_b <g_a|O|g_b>"""
    total = 0.0
    for c1, g1 in zip(f1.coefficients, f1.primitives):
        for c2, g2 in zip(f2.coefficients, f2.primitives):
            total += c1 * c2 * g1.norm * g2.norm * operator(g1, g2)

    return float(total)


def one_electron_matrix(
    basis: molecular_basis.MolecularBasis, operator: PrimitiveOperator
) -> np.ndarray:
    """Computes the matrix of a symmetric one-electron operator.

    Returns:
        A numpy array of shape (N, N) where N=basis.n_basis
    """
    output = np.empty((basis.n_basis, basis.n_basis), dtype=np.float64)

    for i, j in itertools.combinations_with_replacement(range(basis.n_basis), 2):
        output[j, i] = contract(basis[i], basis[j], operator)
        output[i, j] = output[j, i]

    return output


def _overlap(g1, g2) -> float:
    return overlap.overlap(
        g1.exponent, g2.exponent, g1.origin, g2.origin, g1.powers, g2.powers
    )


def _kinetic(g1, g2) -> float:
    return kinetic.kinetic(
        g1.exponent, g2.exponent, g1.origin, g2.origin, g1.powers, g2.powers
    )


def overlap_matrix(basis: molecular_basis.MolecularBasis) -> np.ndarray:
    """Computes the overlap matrix S

    Returns:
        A numpy array of shape (N, N) where N=basis.n_basis
    """
    logger.debug("Computing overlap matrix of size %d", basis.n_basis)
    return one_electron_matrix(basis, _overlap)


def kinetic_matrix(basis: molecular_basis.MolecularBasis) -> np.ndarray:
    """Computes the kinetic energy matrix T

    Returns:
        A numpy array of shape (N, N) where N=basis.n_basis
    """
    logger.debug("Computing kinetic matrix of size %d", basis.n_basis)
    return one_electron_matrix(basis, _kinetic)


def nuclear_matrix(
    basis: molecular_basis.MolecularBasis,
    nuclei: Optional[Sequence[atom.Atom]] = None,
) -> np.ndarray:
    """Computes the nuclear attraction matrix V

    V[i, j] = sum_C Z_C <i| -1/|r - C| |j>

    Args:
        basis: The molecular basis.
        nuclei: The point charges. Defaults to the atoms of the basis.

    Returns:
        A numpy array of shape (N, N) where N=basis.n_basis
    """
    if nuclei is None:
        nuclei = basis.atoms

    logger.debug(
        "Computing nuclear attraction matrix of size %d with %d nuclei",
        basis.n_basis,
        len(nuclei),
    )

    V = np.zeros((basis.n_basis, basis.n_basis), dtype=np.float64)
    for nucleus in nuclei:

        def attraction(g1, g2, position=nucleus.position) -> float:
            return nuclear.nuclear_attraction(
                g1.exponent,
                g2.exponent,
                g1.origin,
                g2.origin,
                position,
                g1.powers,
                g2.powers,
            )

        V += nucleus.number * one_electron_matrix(basis, attraction)

    return V


def multipole_matrix(
    basis: molecular_basis.MolecularBasis,
    operator: types.Powers,
    origin: types.Array = (0.0, 0.0, 0.0),
) -> np.ndarray:
    """Computes the matrix of the multipole operator

    (x - Cx)^e (y - Cy)^f (z - Cz)^g

    where C = origin and (e, f, g) = operator.

    Returns:
        A numpy array of shape (N, N) where N=basis.n_basis
    """
    origin = np.asarray(origin, dtype=np.float64)
    operator = tuple(int(p) for p in operator)

    def moment(g1, g2) -> float:
        return multipole.multipole(
            g1.exponent,
            g2.exponent,
            g1.origin,
            g2.origin,
            origin,
            g1.powers,
            g2.powers,
            operator,
        )

    logger.debug(
        "Computing multipole matrix %s of size %d", operator, basis.n_basis
    )
    return one_electron_matrix(basis, moment)


def dipole_matrices(
    basis: molecular_basis.MolecularBasis,
    origin: types.Array = (0.0, 0.0, 0.0),
) -> np.ndarray:
    """Computes the x, y and z dipole matrices.

    Returns:
        A numpy array of shape (3, N, N) where N=basis.n_basis
    """
    return np.stack(
        [
            multipole_matrix(basis, operator, origin)
            for operator in ((1, 0, 0), (0, 1, 0), (0, 0, 1))
        ]
    )


def core_hamiltonian_matrix(
    basis: molecular_basis.MolecularBasis,
) -> np.ndarray:
    """Computes the core Hamiltonian H = T + V

    Returns:
        A numpy array of shape (N, N) where N=basis.n_basis
    """
    return kinetic_matrix(basis) + nuclear_matrix(basis)
