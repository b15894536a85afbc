from __future__ import annotations
from typing import Any, ClassVar, Iterator, Optional, Tuple, Union, cast
from abc import ABC
from numpy import ndarray
import numpy as np
from ..mixing.mix import clamp_factor, lerp
from ..mixing.hue import Hue, normalize_angle_positive
from ..types.value_types import Scalar, ScalarVector, is_scalar

ColorInput = Union["ColorBase", ScalarVector, list, ndarray, Scalar]


class ColorBase:
    """
    Immutable multi-channel color in a linear float space.

    Channels are clamped to ``[0, maxima]`` when the instance is built; a hue
    channel (if ``hue_index`` is set) is wrapped into ``[0, 360)`` instead.
    Instances can be mixed with another instance of the same class, which is
    what a gradient needs from them.
    """
    __slots__ = ('_value', '_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode:         ClassVar[str]
    maxima:       ClassVar[Tuple[float, ...]]
    hue_index:    ClassVar[Optional[int]] = None

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorInput) -> None:
        if len(self.maxima) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels}-shaped maxima")

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                raise TypeError(f"Cannot build {self.mode} from {value.mode}; convert it first")
            value = value.value

        if is_scalar(value):
            value = (value,)

        arr = np.asarray(value, dtype=np.float64)
        if arr.ndim != 1 or arr.shape[0] != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels, got shape {arr.shape}"
            )
        if not np.all(np.isfinite(arr)):
            raise ValueError(f"{self.mode} channels must be finite, got {tuple(arr)}")

        # clamp value
        arr = np.clip(arr, 0.0, np.array(self.maxima, dtype=np.float64))
        channels = [float(v) for v in arr]
        if self.hue_index is not None:
            raw_hue = float(np.asarray(value, dtype=np.float64)[self.hue_index])
            channels[self.hue_index] = normalize_angle_positive(raw_hue)

        # safe assignment; __setattr__ still allows it during init
        self._value = tuple(channels)

        # freeze instance — no more writes allowed
        super().__setattr__('_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[float, ...]:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.hue_index is not None

    def as_array(self) -> ndarray:
        """Channels as a float64 array."""
        return np.array(self._value, dtype=np.float64)

    # ------------------ MIXING ------------------
    def mix(self, other: ColorBase, factor: float) -> ColorBase:
        """
        Linearly mix this color towards ``other``.

        Args:
            other: Color of the same class
            factor: Blend factor, clamped to [0, 1]

        Returns:
            New color of the same class
        """
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot mix {type(self).__name__} with {type(other).__name__}"
            )
        factor = clamp_factor(factor)
        channels = [
            lerp(a, b, factor) for a, b in zip(self._value, other.value)
        ]
        if self.hue_index is not None:
            i = self.hue_index
            channels[i] = Hue(self._value[i]).mix(Hue(other.value[i]), factor).to_positive_degrees()
        return self.__class__(tuple(channels))

    # ------------------ SHADING ------------------
    def _shade_indices(self) -> list:
        skip = {self.hue_index}
        if self.has_alpha:
            skip.add(self.num_channels - 1)
        return [i for i in range(self.num_channels) if i not in skip]

    def lighten(self, amount: float) -> ColorBase:
        """Add ``amount`` to every lightness-carrying channel (not hue, not alpha)."""
        channels = list(self._value)
        for i in self._shade_indices():
            channels[i] = channels[i] + amount
        return self.__class__(tuple(channels))

    def darken(self, amount: float) -> ColorBase:
        return self.lighten(-amount)

    # ------------------ ARITHMETIC ------------------
    def _operate(self, other: Any, op, reflected: bool = False) -> ColorBase:
        """Component-wise ``op`` with a same-class color or a scalar; results are clamped."""
        if isinstance(other, ColorBase):
            if type(other) is not type(self):
                raise TypeError(
                    f"Cannot combine {type(self).__name__} with {type(other).__name__}"
                )
            b = other.as_array()
        elif is_scalar(other):
            b = np.full(self.num_channels, float(other))
        else:
            return NotImplemented
        a = self.as_array()
        if reflected:
            a, b = b, a
        if op is np.divide and np.any(b == 0.0):
            raise ZeroDivisionError(f"{type(self).__name__} division by zero channel")
        return self.__class__(tuple(op(a, b)))

    def __add__(self, other):
        return self._operate(other, np.add)

    def __radd__(self, other):
        return self._operate(other, np.add, reflected=True)

    def __sub__(self, other):
        return self._operate(other, np.subtract)

    def __rsub__(self, other):
        return self._operate(other, np.subtract, reflected=True)

    def __mul__(self, other):
        return self._operate(other, np.multiply)

    def __rmul__(self, other):
        return self._operate(other, np.multiply, reflected=True)

    def __truediv__(self, other):
        return self._operate(other, np.divide)

    def __rtruediv__(self, other):
        return self._operate(other, np.divide, reflected=True)

    # instances never change after construction
    def __copy__(self) -> ColorBase:
        return self

    def __deepcopy__(self, memo) -> ColorBase:
        return self

    # ------------------ COMPARISON ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(other) is type(self) and other.value == self._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def isclose(self, other: ColorBase, rtol: float = 1e-5, atol: float = 1e-8) -> bool:
        """Approximate channel-wise equality."""
        if type(other) is not type(self):
            return False
        if self.hue_index is not None:
            i = self.hue_index
            if not Hue(self._value[i]).isclose(Hue(other.value[i]), abs_tol=atol + rtol * 360.0):
                return False
            rest = [j for j in range(self.num_channels) if j != i]
            return bool(np.allclose(self.as_array()[rest], other.as_array()[rest], rtol=rtol, atol=atol))
        return bool(np.allclose(self.as_array(), other.as_array(), rtol=rtol, atol=atol))

    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}{self._value!r}"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """
    __slots__ = ()

    num_channels: ClassVar[int]
    maxima: ClassVar[Tuple[float, ...]]
    value: Tuple[float, ...]

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> float:
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: float) -> Any:
        """Return a new instance with modified alpha channel."""
        a = max(0.0, min(float(alpha), self.maxima[self.alpha_index]))
        return self.__class__(self.value[:-1] + (a,))  # type: ignore[call-arg]

    def without_alpha(self) -> Tuple[float, ...]:
        return cast(Tuple[float, ...], self.value[:-1])
