import numpy as np
import basis_set_exchange as bse

from gaussform.basis import shell as shell_lib

_STR_TO_PRIMITIVE_TYPE = {
    "gto": shell_lib.PrimitiveType.CARTESIAN,
    "gto_cartesian": shell_lib.PrimitiveType.CARTESIAN,
    "gto_spherical": shell_lib.PrimitiveType.SPHERICAL,
}


def _load_shell(shell_data: dict) -> shell_lib.Shell:
    function_type = shell_data["function_type"]
    if function_type not in _STR_TO_PRIMITIVE_TYPE:
        raise ValueError(f"Unsupported basis function type: {function_type}")

    angular_momentum = list(shell_data["angular_momentum"])
    coefficients = shell_data["coefficients"]

    # A single momentum with several coefficient rows lists several
    # contractions of the same momentum.
    if len(angular_momentum) == 1:
        angular_momentum *= len(coefficients)

    return shell_lib.Shell(
        primitive_type=_STR_TO_PRIMITIVE_TYPE[function_type],
        angular_momentum=tuple(angular_momentum),
        exponents=np.array(shell_data["exponents"], dtype=np.float64),
        coefficients=np.array(coefficients, dtype=np.float64),
    )


def load(basis_name: str, element: int) -> list[shell_lib.Shell]:
    """Loads the shells of a given element from the Basis Set Exchange."""
    bse_data = bse.get_basis(basis_name, elements=[element])
    electron_shells = bse_data["elements"][str(element)]["electron_shells"]
    return [_load_shell(shell_data) for shell_data in electron_shells]
