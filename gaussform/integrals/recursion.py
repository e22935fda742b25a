"""Obara-Saika recursion over Cartesian Gaussian integrals.

An integral over Cartesian Gaussians with angular momentum is rewritten, one
vertical recurrence step at a time, as a weighted sum of integrals over
s-type Gaussians. Each step picks a single Cartesian exponent to lower and
generates a fixed, kind-specific set of child terms. A child records:

1. its integer multiplicity, folded into `scale`,
2. the slot of the geometric prefactor it must be multiplied by
   (see gaussform.integrals.prefactors),
3. its lowered exponents and, for the Coulomb kinds, its Boys order.

The recursion is purely combinatorial. The geometric values are supplied
later by the evaluators, so an expansion only depends on the kind and the
exponents.

Exponent layout:
    two-center:  (ax, ay, az, bx, by, bz)
    four-center: (ax, ay, az, bx, by, bz, cx, cy, cz, dx, dy, dz)
The multipole operator powers (ex, ey, ez) are kept in a separate field.
"""
import dataclasses
import enum
from collections.abc import Callable, Sequence
from typing import NamedTuple, Optional

from gaussform.integrals.prefactors import (
    CoulombSlot,
    KineticSlot,
    MomentSlot,
    NuclearSlot,
    OverlapSlot,
    axis_slots,
)


class Kind(enum.Enum):
    """The integral kinds understood by the recursion."""

    OVERLAP = "S"
    KINETIC = "T"
    NUCLEAR_ATTRACTION = "V"
    MOMENT = "M"
    ANGULAR_MOMENTUM = "L"
    COULOMB = "ERI"


# Indices of the two-center "functions". The multipole operator is treated as
# a third function centered at the origin of the moment.
BRA = 0
KET = 1
OPERATOR = 2

_NO_OPERATOR = (0, 0, 0)


@dataclasses.dataclass(frozen=True)
class IntegralTerm:
    """A single term of an expansion.

    The value of the term is:
    scale * prod(prefactors[slot] for slot in self.prefactors) * base(kind, order)

    where base is the kind-specific s-type integral.
    """

    scale: float

    # Prefactor slots to multiply in, one per recursion step.
    prefactors: tuple[int, ...]

    # Cartesian exponents. Length 6 (two-center) or 12 (four-center).
    exponents: tuple[int, ...]

    kind: Kind

    # Multipole operator powers. Always zero for kinds other than MOMENT.
    operator: tuple[int, int, int] = _NO_OPERATOR

    # Boys function order.
    order: int = 0

    @property
    def is_terminal(self) -> bool:
        return not any(self.exponents) and not any(self.operator)


class _Descent(NamedTuple):
    # The function to lower.
    function: int
    # The Cartesian component (0, 1, 2) = (x, y, z) to lower.
    component: int


def select_function(totals: Sequence[int]) -> Optional[int]:
    """Selects the function with the smallest strictly positive total
    angular momentum. Ties go to the lowest index.

    Returns:
        The index of the function or None if all totals are zero.
    """
    function = None
    for i, total in enumerate(totals):
        if total > 0 and (function is None or total < totals[function]):
            function = i

    return function


def select_component(powers: Sequence[int]) -> Optional[int]:
    """Returns the first strictly positive component of (x, y, z) or None."""
    for i, power in enumerate(powers):
        if power > 0:
            return i

    return None


def _triple(values: Sequence[int], function: int) -> Sequence[int]:
    return values[3 * function : 3 * function + 3]


def _lowered(values: tuple[int, ...], *indices: int) -> tuple[int, ...]:
    """Decrements values at each index. Repeated indices lower repeatedly."""
    lowered = list(values)
    for index in indices:
        lowered[index] -= 1

    return tuple(lowered)


def _child(
    term: IntegralTerm,
    multiplicity: int,
    slot: int,
    exponents: tuple[int, ...],
    operator: Optional[tuple[int, int, int]] = None,
    kind: Optional[Kind] = None,
    raise_order: bool = False,
) -> Optional[IntegralTerm]:
    """Builds a child term or returns None if it vanishes."""
    if operator is None:
        operator = term.operator

    if multiplicity <= 0 or min(exponents) < 0 or min(operator) < 0:
        return None

    return IntegralTerm(
        scale=term.scale * multiplicity,
        prefactors=term.prefactors + (slot,),
        exponents=exponents,
        kind=term.kind if kind is None else kind,
        operator=operator,
        order=term.order + 1 if raise_order else term.order,
    )


def _two_center_descent(term: IntegralTerm) -> _Descent:
    orders = term.exponents + term.operator
    totals = [sum(_triple(orders, f)) for f in (BRA, KET, OPERATOR)]

    # The operator is only lowered once both Gaussians are s-type.
    if totals[BRA] + totals[KET] > 0:
        function = select_function(totals[:OPERATOR])
    else:
        function = OPERATOR

    component = select_component(_triple(orders, function))
    return _Descent(function, component)


class _TwoCenterIndices(NamedTuple):
    # Index of the lowered exponent.
    lowered: int
    # Index of the same component on the other Gaussian.
    other: int


def _two_center_indices(descent: _Descent) -> _TwoCenterIndices:
    other = KET if descent.function == BRA else BRA
    return _TwoCenterIndices(
        lowered=3 * descent.function + descent.component,
        other=3 * other + descent.component,
    )


def _center_slot(slots, descent: _Descent) -> int:
    prefix = "PA" if descent.function == BRA else "PB"
    return axis_slots(slots, prefix)[descent.component]


def _overlap_step(term: IntegralTerm) -> list[Optional[IntegralTerm]]:
    """S(a+1) = PA S(a) + 1/(2p) [a S(a-1) + b S(b-1)]"""
    descent = _two_center_descent(term)
    i, j = _two_center_indices(descent)
    q = term.exponents

    return [
        _child(term, 1, _center_slot(OverlapSlot, descent), _lowered(q, i)),
        _child(term, q[i] - 1, OverlapSlot.INV_2P_A, _lowered(q, i, i)),
        _child(term, q[j], OverlapSlot.INV_2P_B, _lowered(q, i, j)),
    ]


def _kinetic_step(term: IntegralTerm) -> list[Optional[IntegralTerm]]:
    """T(a+1) = PA T(a) + 1/(2p) [a T(a-1) + b T(b-1)]
    + 2 xi S(a+1) - (xi / alpha) a S(a-1)

    where alpha is the exponent of the lowered Gaussian. The last two terms
    continue as overlap recursions.
    """
    descent = _two_center_descent(term)
    i, j = _two_center_indices(descent)
    q = term.exponents

    if descent.function == BRA:
        minus_xi_over_alpha = KineticSlot.MINUS_XI_OVER_A
    else:
        minus_xi_over_alpha = KineticSlot.MINUS_XI_OVER_B

    return [
        _child(term, 1, _center_slot(KineticSlot, descent), _lowered(q, i)),
        _child(term, q[i] - 1, KineticSlot.INV_2P_A, _lowered(q, i, i)),
        _child(term, q[j], KineticSlot.INV_2P_B, _lowered(q, i, j)),
        _child(term, 1, KineticSlot.TWO_XI, q, kind=Kind.OVERLAP),
        _child(
            term,
            q[i] - 1,
            minus_xi_over_alpha,
            _lowered(q, i, i),
            kind=Kind.OVERLAP,
        ),
    ]


def _nuclear_step(term: IntegralTerm) -> list[Optional[IntegralTerm]]:
    """V^m(a+1) = PA V^m(a) - PC V^(m+1)(a)
    + a/(2p) [V^m(a-1) - V^(m+1)(a-1)]
    + b/(2p) [V^m(b-1) - V^(m+1)(b-1)]
    """
    descent = _two_center_descent(term)
    i, j = _two_center_indices(descent)
    q = term.exponents
    lowered_a = _lowered(q, i)
    lowered_aa = _lowered(q, i, i)
    lowered_ab = _lowered(q, i, j)
    cp = axis_slots(NuclearSlot, "CP")[descent.component]

    return [
        _child(term, 1, _center_slot(NuclearSlot, descent), lowered_a),
        _child(term, 1, cp, lowered_a, raise_order=True),
        _child(term, q[i] - 1, NuclearSlot.INV_2P, lowered_aa),
        _child(
            term,
            q[i] - 1,
            NuclearSlot.MINUS_INV_2P,
            lowered_aa,
            raise_order=True,
        ),
        _child(term, q[j], NuclearSlot.INV_2P, lowered_ab),
        _child(
            term, q[j], NuclearSlot.MINUS_INV_2P, lowered_ab, raise_order=True
        ),
    ]


def _moment_step(term: IntegralTerm) -> list[Optional[IntegralTerm]]:
    """M^e(a+1) = PA M^e(a) + 1/(2p) [a M^e(a-1) + b M^e(b-1) + e M^(e-1)(a)]

    and once both Gaussians are s-type:

    M^(e+1) = PC M^e + 1/(2p) e M^(e-1)
    """
    descent = _two_center_descent(term)
    k = descent.component
    q = term.exponents
    e = term.operator

    if descent.function == OPERATOR:
        pc = axis_slots(MomentSlot, "PC")[k]
        return [
            _child(term, 1, pc, q, operator=_lowered(e, k)),
            _child(
                term,
                e[k] - 1,
                MomentSlot.INV_2P_OPERATOR,
                q,
                operator=_lowered(e, k, k),
            ),
        ]

    i, j = _two_center_indices(descent)
    return [
        _child(term, 1, _center_slot(MomentSlot, descent), _lowered(q, i)),
        _child(term, q[i] - 1, MomentSlot.INV_2P_A, _lowered(q, i, i)),
        _child(term, q[j], MomentSlot.INV_2P_B, _lowered(q, i, j)),
        _child(
            term,
            e[k],
            MomentSlot.INV_2P_OPERATOR,
            _lowered(q, i),
            operator=_lowered(e, k),
        ),
    ]


# Coulomb centers: A and B form the bra pair, C and D the ket pair.
_COULOMB_CENTER_PREFIXES = ("PA", "PB", "QC", "QD")


def _coulomb_step(term: IntegralTerm) -> list[Optional[IntegralTerm]]:
    """For a lowered bra center A with partner B:

    [a+1,b|c,d]^m = PA [a,b|c,d]^m + WP [a,b|c,d]^(m+1)
        + a/(2 zeta) ([a-1,b|c,d]^m - rho/zeta [a-1,b|c,d]^(m+1))
        + b/(2 zeta) ([a,b-1|c,d]^m - rho/zeta [a,b-1|c,d]^(m+1))
        + c/(2(zeta + eta)) [a,b|c-1,d]^(m+1)
        + d/(2(zeta + eta)) [a,b|c,d-1]^(m+1)

    Lowering a ket center swaps the roles of (zeta, P, A, B) and (eta, Q, C, D).
    """
    q = term.exponents
    totals = [sum(_triple(q, f)) for f in range(4)]
    function = select_function(totals)
    k = select_component(_triple(q, function))

    on_bra = function < 2
    partner = function ^ 1
    c, d = (3, 2) if on_bra else (1, 0)

    if on_bra:
        w = axis_slots(CoulombSlot, "WP")[k]
        inv_2 = CoulombSlot.INV_2ZETA
        minus_rho = CoulombSlot.MINUS_RHO_OVER_2ZETA2
    else:
        w = axis_slots(CoulombSlot, "WQ")[k]
        inv_2 = CoulombSlot.INV_2ETA
        minus_rho = CoulombSlot.MINUS_RHO_OVER_2ETA2

    center = axis_slots(CoulombSlot, _COULOMB_CENTER_PREFIXES[function])[k]

    i = 3 * function + k
    ib = 3 * partner + k
    ic = 3 * c + k
    id_ = 3 * d + k
    lowered_a = _lowered(q, i)
    lowered_aa = _lowered(q, i, i)
    lowered_ab = _lowered(q, i, ib)

    return [
        _child(term, 1, center, lowered_a),
        _child(term, 1, w, lowered_a, raise_order=True),
        _child(term, q[i] - 1, inv_2, lowered_aa),
        _child(term, q[i] - 1, minus_rho, lowered_aa, raise_order=True),
        _child(term, q[ib], inv_2, lowered_ab),
        _child(term, q[ib], minus_rho, lowered_ab, raise_order=True),
        _child(
            term,
            q[ic],
            CoulombSlot.INV_2ZETA_ETA,
            _lowered(q, i, ic),
            raise_order=True,
        ),
        _child(
            term,
            q[id_],
            CoulombSlot.INV_2ZETA_ETA,
            _lowered(q, i, id_),
            raise_order=True,
        ),
    ]


_Step = Callable[[IntegralTerm], list[Optional[IntegralTerm]]]

_STEPS: dict[Kind, _Step] = {
    Kind.OVERLAP: _overlap_step,
    Kind.KINETIC: _kinetic_step,
    Kind.NUCLEAR_ATTRACTION: _nuclear_step,
    Kind.MOMENT: _moment_step,
    Kind.COULOMB: _coulomb_step,
}


def _expand(term: IntegralTerm) -> list[IntegralTerm]:
    if term.is_terminal:
        return [term]

    expansion = []
    for child in _STEPS[term.kind](term):
        if child is not None:
            expansion.extend(_expand(child))

    return expansion


def _validate(
    kind: Kind, exponents: tuple[int, ...], operator: tuple[int, ...]
) -> None:
    expected_length = 12 if kind == Kind.COULOMB else 6
    if len(exponents) != expected_length:
        raise ValueError(
            f"Expected {expected_length} exponents for {kind.name}, "
            f"got {len(exponents)}"
        )

    if len(operator) != 3:
        raise ValueError(f"Expected 3 operator powers, got {len(operator)}")

    if kind != Kind.MOMENT and any(operator):
        raise ValueError(f"{kind.name} integrals take no operator powers.")

    if min(exponents) < 0 or min(operator) < 0:
        raise ValueError(
            "Cartesian exponents must be non-negative. "
            f"Got exponents={exponents}, operator={operator}"
        )


def expand(
    kind: Kind,
    exponents: Sequence[int],
    operator: Sequence[int] = _NO_OPERATOR,
) -> list[IntegralTerm]:
    """Expands an integral into terminal s-type terms.

    Args:
        kind: The integral kind.
        exponents: 6 (two-center) or 12 (four-center) Cartesian exponents.
        operator: The multipole operator powers. Only used by Kind.MOMENT.

    Returns:
        The terminal terms. All of them have zero exponents and operator
        powers.
    """
    if kind == Kind.ANGULAR_MOMENTUM:
        raise NotImplementedError(
            "Angular momentum integrals are not implemented."
        )

    exponents = tuple(int(e) for e in exponents)
    operator = tuple(int(e) for e in operator)
    _validate(kind, exponents, operator)

    start = IntegralTerm(
        scale=1.0,
        prefactors=(),
        exponents=exponents,
        kind=kind,
        operator=operator,
        order=0,
    )
    return _expand(start)


def count_terms(
    kind: Kind,
    exponents: Sequence[int],
    operator: Sequence[int] = _NO_OPERATOR,
) -> int:
    """The number of terminal terms in the expansion."""
    return len(expand(kind, exponents, operator))
