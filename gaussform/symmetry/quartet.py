"""Index symmetry of two-electron integrals over real basis functions.

The integral (ij|kl) is invariant under swapping i and j, swapping k and l,
and swapping the pairs (ij) and (kl). Together these generate a group of
eight permutations, so it suffices to compute one representative of each
orbit.
"""
from typing import Iterator, Literal

# Basis function indices (i, j, k, l) of the integral (ij|kl).
Quartet = tuple[int, int, int, int]

# A permutation acts on a quartet by selecting positions:
# sigma(q) = (q[sigma[0]], q[sigma[1]], q[sigma[2]], q[sigma[3]])
_Position = Literal[0, 1, 2, 3]
Permutation = tuple[_Position, _Position, _Position, _Position]

SYMMETRIES: tuple[Permutation, ...] = (
    (0, 1, 2, 3),
    (1, 0, 2, 3),
    (0, 1, 3, 2),
    (1, 0, 3, 2),
    (2, 3, 0, 1),
    (3, 2, 0, 1),
    (2, 3, 1, 0),
    (3, 2, 1, 0),
)


def pair_index(i: int, j: int) -> int:
    """The compound index of the unordered pair {i, j}."""
    if i < j:
        i, j = j, i
    return i * (i + 1) // 2 + j


def canonicalize(quartet: Quartet) -> Quartet:
    """The representative of the quartet's orbit.

    The representative (i, j, k, l) has i >= j, k >= l and
    pair_index(i, j) >= pair_index(k, l).
    """
    i, j, k, l = quartet
    bra = (max(i, j), min(i, j))
    ket = (max(k, l), min(k, l))
    if pair_index(*bra) < pair_index(*ket):
        bra, ket = ket, bra
    return bra + ket


def iter_canonical_quartets(n: int) -> Iterator[Quartet]:
    """Yields the representative of every orbit of quartets over n functions.

    Quartets are ordered by the compound index of their bra pair, then by
    that of their ket pair.
    """
    pairs = [(i, j) for i in range(n) for j in range(i + 1)]
    for bra_index, bra in enumerate(pairs):
        for ket in pairs[: bra_index + 1]:
            yield bra + ket


def count_canonical_quartets(n: int) -> int:
    """The number of quartets yielded by iter_canonical_quartets(n)."""
    n_pairs = n * (n + 1) // 2
    return n_pairs * (n_pairs + 1) // 2


def apply_permutation(sigma: Permutation, quartet: Quartet) -> Quartet:
    return tuple(quartet[position] for position in sigma)


def orbit(quartet: Quartet) -> set[Quartet]:
    """The distinct quartets that share the integral value of the given one."""
    return {apply_permutation(sigma, quartet) for sigma in SYMMETRIES}
