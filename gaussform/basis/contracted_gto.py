import dataclasses

import numpy as np

from gaussform import types
from gaussform.basis import cartesian
from gaussform.basis.shell import PrimitiveType, Shell


@dataclasses.dataclass(frozen=True)
class PrimitiveGaussian:
    """A normalized primitive Cartesian Gaussian

    g(r) = N (x - Ax)^l (y - Ay)^m (z - Az)^n exp(-a |r - A|^2)

    where A = origin, a = exponent, (l, m, n) = powers and N = norm.
    """

    origin: types.Array
    exponent: float
    powers: types.Powers
    norm: float = dataclasses.field(init=False)

    def __post_init__(self):
        types.promote_dataclass_fields(self)
        object.__setattr__(self, "exponent", float(self.exponent))
        object.__setattr__(self, "powers", tuple(int(p) for p in self.powers))

        if self.origin.shape != (3,):
            raise ValueError(
                f"Origin must have shape (3,), got {self.origin.shape}"
            )
        if self.exponent <= 0:
            raise ValueError(f"Exponent must be positive. Got {self.exponent}")
        if len(self.powers) != 3 or min(self.powers) < 0:
            raise ValueError(
                f"Powers must be 3 non-negative integers. Got {self.powers}"
            )

        object.__setattr__(
            self,
            "norm",
            cartesian.normalization_constant(self.exponent, self.powers),
        )


@dataclasses.dataclass(frozen=True)
class ContractedGaussian:
    """A contracted Cartesian Gaussian basis function

    psi(r) = sum_d c_d g_d(r)

    The primitives g_d share their origin and powers and differ in exponent.
    """

    primitives: tuple[PrimitiveGaussian, ...]

    # shape (K,)
    coefficients: types.Array

    def __post_init__(self):
        object.__setattr__(self, "primitives", tuple(self.primitives))
        types.promote_dataclass_fields(self)

        if not self.primitives:
            raise ValueError("A contracted Gaussian needs at least one primitive.")

        if self.coefficients.shape != (len(self.primitives),):
            raise ValueError(
                f"Expected {len(self.primitives)} coefficients, "
                f"got shape {self.coefficients.shape}"
            )

        first = self.primitives[0]
        for primitive in self.primitives[1:]:
            if primitive.powers != first.powers:
                raise ValueError(
                    "All primitives must have the same powers. "
                    f"Got {first.powers} and {primitive.powers}"
                )
            if not np.array_equal(primitive.origin, first.origin):
                raise ValueError(
                    "All primitives must have the same origin. "
                    f"Got {first.origin} and {primitive.origin}"
                )

    @property
    def origin(self) -> np.ndarray:
        return self.primitives[0].origin

    @property
    def powers(self) -> types.Powers:
        return self.primitives[0].powers

    def __len__(self) -> int:
        return len(self.primitives)


def expand_shell(shell: Shell, center: types.Array) -> list[ContractedGaussian]:
    """Expands a shell into contracted Gaussians centered at the given point.

    Each angular momentum l of the shell contributes one function per
    Cartesian power triple, in the order of
    cartesian.generate_cartesian_powers(l), using the coefficient row of l.
    """
    if shell.primitive_type != PrimitiveType.CARTESIAN:
        raise NotImplementedError(
            f"Primitive type {shell.primitive_type} is not supported."
        )

    functions = []
    for l, coefficients in zip(shell.angular_momentum, shell.coefficients):
        for powers in cartesian.generate_cartesian_powers(l):
            primitives = tuple(
                PrimitiveGaussian(origin=center, exponent=a, powers=powers)
                for a in shell.exponents
            )
            functions.append(
                ContractedGaussian(
                    primitives=primitives, coefficients=coefficients
                )
            )

    return functions
