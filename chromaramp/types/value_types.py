from __future__ import annotations
from typing import Callable, Tuple, TypeVar
import numpy as np

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
Position = Scalar
V = TypeVar("V")
ControlPoint = Tuple[Position, V]
MixFunction = Callable[[V, V, float], V]


def is_scalar(value: object) -> bool:
    """True for plain and numpy real numbers (bools excluded)."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))
