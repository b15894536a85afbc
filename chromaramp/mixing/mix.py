"""
Blending between two values.

The gradient engine only ever asks its element type for one thing: given two
values and a factor in [0, 1], produce the value in between. Types opt in by
implementing :class:`Mixable`; plain numbers, numeric tuples/lists and numpy
arrays are handled here directly.
"""
from __future__ import annotations
from typing import Any, Protocol, runtime_checkable
import numpy as np
from numpy import ndarray
from boundednumbers import clamp
from ..types.value_types import is_scalar


@runtime_checkable
class Mixable(Protocol):
    """Anything that can be linearly mixed with another instance of itself."""

    def mix(self, other: Any, factor: float) -> Any:
        ...


def clamp_factor(factor: float) -> float:
    """Bound a blend factor to [0, 1]."""
    return float(clamp(factor, 0.0, 1.0))


def lerp(a, b, factor: float):
    """Affine interpolation ``a + factor * (b - a)``."""
    return a + factor * (b - a)


def blend(a: Any, b: Any, factor: float) -> Any:
    """
    Mix ``a`` towards ``b`` by ``factor``.

    Args:
        a: Start value (returned for factor 0)
        b: End value
        factor: Blend factor, clamped to [0, 1]

    Returns:
        The interpolated value, of the same kind as ``a``

    Raises:
        TypeError: if the operands cannot be blended
    """
    factor = clamp_factor(factor)

    if isinstance(a, Mixable):
        return a.mix(b, factor)

    if is_scalar(a) and is_scalar(b):
        return lerp(a, b, factor)

    if isinstance(a, ndarray) or isinstance(b, ndarray):
        start = np.asarray(a, dtype=np.float64)
        end = np.asarray(b, dtype=np.float64)
        if start.shape != end.shape:
            raise ValueError(f"Cannot blend arrays of shape {start.shape} and {end.shape}")
        return lerp(start, end, factor)

    if isinstance(a, (tuple, list)) and isinstance(b, (tuple, list)):
        if len(a) != len(b):
            raise ValueError(f"Cannot blend sequences of length {len(a)} and {len(b)}")
        mixed = [blend(x, y, factor) for x, y in zip(a, b)]
        if hasattr(a, "_fields"):
            return type(a)(*mixed)
        return type(a)(mixed)

    raise TypeError(
        f"Cannot blend {type(a).__name__} with {type(b).__name__}; "
        "implement mix() or pass mix_fn"
    )


__all__ = ["Mixable", "blend", "clamp_factor", "lerp"]
