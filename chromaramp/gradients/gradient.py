from __future__ import annotations
import warnings
from typing import Any, Generic, Iterable, Optional, Tuple, Union
import numpy as np
from numpy import ndarray
from ..errors import EmptyGradientError, UnsortedStopsWarning
from ..mixing.mix import blend, clamp_factor
from ..types.value_types import ControlPoint, MixFunction, Position, V
from ..utils import clone_value, is_non_decreasing, value_or_default
from .range import Range
from .slice import GradientSlice
from .take import Take, check_count

DEFAULT_CHECK_ORDER = True


# ===================== Gradient Class =====================

class Gradient(Generic[V]):
    """
    A linear interpolation between a series of values.

    The gradient is continuous between its control points and constant outside
    of them: any position before the first point gives the first value, any
    position after the last point gives the last value. Use :meth:`take` to
    iterate over evenly spaced samples and :meth:`slice` to restrict the domain.

    Control points must be ordered by position. They are neither sorted nor
    deduplicated; a warning is emitted when they are out of order.

    Example:
        >>> g = Gradient.from_colors([0.0, 10.0])
        >>> g.get(0.25)
        2.5
        >>> list(g.take(3))
        [0.0, 5.0, 10.0]
    """

    __slots__ = ('_points', '_mix_fn')

    def __init__(
        self,
        points: Iterable[ControlPoint],
        mix_fn: Optional[MixFunction] = None,
        check_order: Optional[bool] = None,
    ) -> None:
        stops = tuple((position, clone_value(value)) for position, value in points)
        if not stops:
            raise EmptyGradientError()

        if value_or_default(check_order, DEFAULT_CHECK_ORDER):
            positions = [p for p, _ in stops]
            if not is_non_decreasing(positions):
                warnings.warn(
                    f"Gradient control points are not ordered by position: {positions}",
                    UnsortedStopsWarning,
                    stacklevel=2,
                )

        self._points: Tuple[ControlPoint, ...] = stops
        self._mix_fn: MixFunction = value_or_default(mix_fn, blend)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_colors(
        cls,
        colors: Iterable[V],
        mix_fn: Optional[MixFunction] = None,
    ) -> Gradient[V]:
        """
        Evenly spaced gradient over the domain [0, 1].

        A single color is placed at position 0.

        Raises:
            EmptyGradientError: if ``colors`` is empty
        """
        values = list(colors)
        if not values:
            raise EmptyGradientError()
        last = max(len(values) - 1, 1)
        points = [(i / last, value) for i, value in enumerate(values)]
        return cls(points, mix_fn=mix_fn, check_order=False)

    new = from_colors

    @classmethod
    def with_domain(
        cls,
        points: Iterable[ControlPoint],
        mix_fn: Optional[MixFunction] = None,
        check_order: Optional[bool] = None,
    ) -> Gradient[V]:
        """Gradient with caller-chosen positions, used verbatim."""
        return cls(points, mix_fn=mix_fn, check_order=check_order)

    # ------------------ LOOKUP ------------------
    def get(self, position: Position) -> V:
        """
        Value at ``position``.

        Positions outside the domain give a copy of the nearest end point's value.
        """
        points = self._points
        min_index = 0
        min_pos, min_value = points[min_index]
        if position <= min_pos:
            return clone_value(min_value)

        max_index = len(points) - 1
        max_pos, max_value = points[max_index]
        if position >= max_pos:
            return clone_value(max_value)

        # min_index < max_index holds from here on
        while max_index - min_index > 1:
            index = min_index + (max_index - min_index) // 2
            pos, value = points[index]
            if position <= pos:
                max_pos, max_value, max_index = pos, value, index
            else:
                min_pos, min_value, min_index = pos, value, index

        factor = clamp_factor((position - min_pos) / (max_pos - min_pos))
        return self._mix_fn(min_value, max_value, factor)

    __call__ = get

    def domain(self) -> Tuple[Position, Position]:
        """Positions of the first and last control points."""
        return self._points[0][0], self._points[-1][0]

    # ------------------ VIEWS ------------------
    def slice(self, range: Any) -> GradientSlice[V]:
        """
        Restrict the domain without copying the control points.

        Args:
            range: A Range, ``slice``, ``(start, end)`` pair, or None
        """
        return GradientSlice(self, Range.coerce(range))

    def __getitem__(self, key: Union[slice, Range]) -> GradientSlice[V]:
        if not isinstance(key, (slice, Range)):
            raise TypeError(
                f"Gradient indices must be slices or Ranges, not {type(key).__name__}; use get() for positions"
            )
        return self.slice(key)

    def take(self, n: int) -> Take[V]:
        """
        ``n`` evenly spaced values over the whole domain, as an iterator.

        Both ends are included for ``n > 1``; ``n == 1`` gives the first value.
        """
        start, end = self.domain()
        return Take(self, start, end - start, check_count(n))

    # ------------------ INSPECTION ------------------
    @property
    def mix_fn(self) -> MixFunction:
        return self._mix_fn

    @property
    def stops(self) -> Tuple[ControlPoint, ...]:
        return tuple((p, clone_value(v)) for p, v in self._points)

    @property
    def positions(self) -> ndarray:
        arr = np.array([p for p, _ in self._points], dtype=np.float64)
        arr.flags.writeable = False
        return arr

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"Gradient({list(self._points)!r})"


__all__ = ["Gradient", "DEFAULT_CHECK_ORDER"]
