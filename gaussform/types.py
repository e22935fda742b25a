import dataclasses
from typing import TypeAlias

import numpy as np

# Floating point data such as centers, exponents and coefficients.
Array: TypeAlias = np.ndarray

# A Cartesian power triple (i, j, k).
Powers: TypeAlias = tuple[int, int, int]


def promote_dataclass_fields(obj):
    """Converts all Array fields to read-only float64 numpy arrays.

    Works for frozen dataclasses as well.
    """
    for field in dataclasses.fields(obj):
        if field.type != Array:
            continue

        value = np.array(getattr(obj, field.name), dtype=np.float64)
        value.setflags(write=False)
        object.__setattr__(obj, field.name, value)
