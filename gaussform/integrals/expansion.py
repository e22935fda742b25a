"""Array form of recursion expansions.

An expansion only depends on the integral kind and the integer exponents, so
it is computed once per key and stored as flat numpy arrays. Evaluating an
integral over a particular primitive pair or quartet then reduces to a gather
of prefactor values and a dot product.
"""
import functools
from collections.abc import Sequence
from typing import NamedTuple

import numpy as np

from gaussform.integrals import recursion
from gaussform.integrals.recursion import Kind

# Slot used to pad the rows of CompiledExpansion.slots. It selects the 1.0
# appended to the prefactor vector.
_PADDING = -1

_KIND_CODES = {kind: code for code, kind in enumerate(Kind)}


class CompiledExpansion(NamedTuple):
    # The accumulated integer multiplicity of each term. Shape (n,)
    scales: np.ndarray

    # The prefactor slots of each term, padded with _PADDING. Shape (n, depth)
    slots: np.ndarray

    # The Boys order of each term. Shape (n,)
    orders: np.ndarray

    # The kind code of each term. Shape (n,)
    kinds: np.ndarray

    @property
    def max_order(self) -> int:
        return int(self.orders.max())

    def mask(self, kind: Kind) -> np.ndarray:
        """A boolean mask of the terms of the given kind."""
        return self.kinds == _KIND_CODES[kind]

    def products(self, prefactors: np.ndarray) -> np.ndarray:
        """Multiplies each term's scale by its prefactor values.

        Args:
            prefactors: The prefactor vector of the expansion's kind.

        Returns:
            A numpy array of shape (n,)
        """
        padded = np.append(prefactors, 1.0)
        return self.scales * np.prod(padded[self.slots], axis=1)

    def reduce(self, prefactors: np.ndarray, weights: np.ndarray) -> float:
        """Computes sum_i products_i * weights[orders_i].

        Args:
            prefactors: The prefactor vector of the expansion's kind.
            weights: Per-order weights, e.g. Boys function values, of shape
                (max_order + 1,).
        """
        return float(np.dot(self.products(prefactors), weights[self.orders]))


def exponent_key(*powers: Sequence[int]) -> tuple[int, ...]:
    """Flattens per-center power triples into a hashable exponent tuple."""
    return tuple(int(p) for triple in powers for p in triple)


@functools.lru_cache(maxsize=None)
def compile_expansion(
    kind: Kind,
    exponents: tuple[int, ...],
    operator: tuple[int, int, int] = (0, 0, 0),
) -> CompiledExpansion:
    terms = recursion.expand(kind, exponents, operator)
    depth = max(len(term.prefactors) for term in terms)

    slots = np.full((len(terms), depth), _PADDING, dtype=np.int64)
    for i, term in enumerate(terms):
        slots[i, : len(term.prefactors)] = term.prefactors

    compiled = CompiledExpansion(
        scales=np.array([term.scale for term in terms], dtype=np.float64),
        slots=slots,
        orders=np.array([term.order for term in terms], dtype=np.int64),
        kinds=np.array([_KIND_CODES[term.kind] for term in terms], dtype=np.int64),
    )
    for array in compiled:
        array.flags.writeable = False

    return compiled
