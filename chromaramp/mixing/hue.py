"""
Circular hue values.

A hue is an angle where 0 and 360 degrees are the same point. It is stored
raw and normalised to (-180, 180] whenever it is read as a linear number,
which keeps mixing on the shortest arc.
"""
from __future__ import annotations
import math
from typing import Union
from boundednumbers.functions import cyclic_wrap_float
from .mix import clamp_factor

HUE_360 = 360.0


def normalize_angle_positive(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""
    wrapped = float(cyclic_wrap_float(degrees, 0.0, HUE_360))
    return 0.0 if wrapped >= HUE_360 else wrapped


def normalize_angle(degrees: float) -> float:
    """Wrap an angle into (-180, 180]."""
    wrapped = normalize_angle_positive(degrees)
    return wrapped - HUE_360 if wrapped > 180.0 else wrapped


class Hue:
    __slots__ = ('_degrees',)

    def __init__(self, degrees: float = 0.0) -> None:
        self._degrees = float(degrees)

    @classmethod
    def from_degrees(cls, degrees: float) -> Hue:
        return cls(degrees)

    @classmethod
    def from_radians(cls, radians: float) -> Hue:
        return cls(math.degrees(radians))

    def to_degrees(self) -> float:
        """Hue in degrees, in the range (-180, 180]."""
        return normalize_angle(self._degrees)

    def to_radians(self) -> float:
        """Hue in radians, in the range (-pi, pi]."""
        return math.radians(self.to_degrees())

    def to_positive_degrees(self) -> float:
        """Hue in degrees, in the range [0, 360)."""
        return normalize_angle_positive(self._degrees)

    def to_positive_radians(self) -> float:
        return math.radians(self.to_positive_degrees())

    def to_raw_degrees(self) -> float:
        """The stored angle, without normalisation."""
        return self._degrees

    def to_raw_radians(self) -> float:
        return math.radians(self._degrees)

    def mix(self, other: Union[Hue, float], factor: float) -> Hue:
        """Move towards ``other`` along the shortest arc."""
        factor = clamp_factor(factor)
        diff = normalize_angle(_raw(other) - self._degrees)
        return Hue(self._degrees + factor * diff)

    def __add__(self, other: Union[Hue, float]) -> Hue:
        return Hue(self._degrees + _raw(other))

    def __radd__(self, other: float) -> Hue:
        return Hue(_raw(other) + self._degrees)

    def __sub__(self, other: Union[Hue, float]) -> Hue:
        return Hue(self._degrees - _raw(other))

    def __rsub__(self, other: float) -> Hue:
        return Hue(_raw(other) - self._degrees)

    def __eq__(self, other: object) -> bool:
        """Hues equal other hues on the circle; compare with numbers via isclose()."""
        if isinstance(other, Hue):
            return self.to_degrees() == other.to_degrees()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_degrees())

    # hues never change after construction
    def __copy__(self) -> Hue:
        return self

    def __deepcopy__(self, memo) -> Hue:
        return self

    def isclose(self, other: Union[Hue, float], abs_tol: float = 1e-9) -> bool:
        """Approximate equality on the circle."""
        return abs(normalize_angle(_raw(other) - self._degrees)) <= abs_tol

    def __float__(self) -> float:
        return self.to_degrees()

    def __repr__(self) -> str:
        return f"Hue({self._degrees!r})"


def _raw(value: Union[Hue, float]) -> float:
    if isinstance(value, Hue):
        return value.to_raw_degrees()
    return float(value)


__all__ = ["Hue", "normalize_angle", "normalize_angle_positive", "HUE_360"]
