import dataclasses
import enum

import numpy as np

from gaussform import types


class PrimitiveType(enum.Enum):
    """The type of primitive Gaussian function."""

    CARTESIAN = 1
    SPHERICAL = 2


@dataclasses.dataclass(frozen=True)
class Shell:
    """A shell of contracted Gaussian functions as listed in a basis set.

    The shell shares a list of K exponents between one or more angular
    momenta. General shells such as the Pople "SP" shells list several
    angular momenta, each with its own row of contraction coefficients.

    The center is not part of the shell. It is supplied when the shell is
    expanded into basis functions on an atom.
    """

    primitive_type: PrimitiveType

    # The angular momentum of each coefficient row. shape (N_am,)
    angular_momentum: tuple[int, ...]

    # The primitive exponents. shape (K,)
    exponents: types.Array

    # The contraction coefficients. shape (N_am, K)
    coefficients: types.Array

    def __post_init__(self):
        object.__setattr__(
            self, "angular_momentum", tuple(int(l) for l in self.angular_momentum)
        )
        types.promote_dataclass_fields(self)
        self._validate()

    def _validate(self):
        if not self.angular_momentum:
            raise ValueError("A shell must have at least one angular momentum.")

        if min(self.angular_momentum) < 0:
            raise ValueError(
                "Angular momenta must be non-negative. "
                f"Got {self.angular_momentum}"
            )

        if self.exponents.ndim != 1 or len(self.exponents) == 0:
            raise ValueError(
                "Exponents must be a non-empty 1d array. "
                f"Got shape {self.exponents.shape}"
            )

        if not np.all(self.exponents > 0):
            raise ValueError(f"Exponents must be positive. Got {self.exponents}")

        expected_shape = (len(self.angular_momentum), len(self.exponents))
        if self.coefficients.shape != expected_shape:
            raise ValueError(
                f"Expected coefficients of shape {expected_shape}, "
                f"got {self.coefficients.shape}"
            )

    @property
    def n_primitives(self) -> int:
        return len(self.exponents)
