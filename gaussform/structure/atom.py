from collections.abc import Sequence
import dataclasses

from gaussform import types
from gaussform.basis import shell as shell_lib


@dataclasses.dataclass(frozen=True)
class Atom:
    symbol: str
    number: int  # Atomic number

    # Position in Bohr units
    position: types.Array

    # The basis set shells centered on this atom.
    shells: Sequence[shell_lib.Shell] = ()

    def __post_init__(self):
        types.promote_dataclass_fields(self)

        if isinstance(self.shells, shell_lib.Shell):
            raise ValueError("Shells must be a sequence of Shell, got a Shell.")
        object.__setattr__(self, "shells", tuple(self.shells))
        for shell in self.shells:
            if not isinstance(shell, shell_lib.Shell):
                raise ValueError(
                    f"Shells must be Shell instances. Got {type(shell).__name__}"
                )

        if self.number <= 0:
            raise ValueError(
                f"Atomic number must be positive. Got {self.number}"
            )
        if self.position.shape != (3,):
            raise ValueError(
                f"Position must have shape (3,), got {self.position.shape}"
            )
