import copy
from typing import Any
import numpy as np
from numpy import ndarray

_IMMUTABLE_TYPES = (int, float, complex, bool, str, bytes, tuple, frozenset, type(None), np.generic)


def clone_value(value: Any) -> Any:
    """
    Copy a gradient value so the caller and the gradient never share it.

    Immutable values are returned as they are; arrays get their own buffer;
    anything else goes through ``copy.copy``.
    """
    if isinstance(value, ndarray):
        return np.array(value, copy=True)
    if isinstance(value, _IMMUTABLE_TYPES):
        return value
    return copy.copy(value)
