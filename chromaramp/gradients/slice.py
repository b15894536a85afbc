from __future__ import annotations
from typing import TYPE_CHECKING, Any, Generic, Tuple, Union
from ..types.value_types import MixFunction, Position, V
from .range import Range
from .take import Take, check_count

if TYPE_CHECKING:
    from .gradient import Gradient


class GradientSlice(Generic[V]):
    """
    A read-only view of a Gradient with a restricted domain.

    The slice only keeps a reference to its gradient and a :class:`Range`.
    Slicing a slice intersects the ranges, so the view never nests deeper
    than one level.
    """

    __slots__ = ('_gradient', '_range')

    def __init__(self, gradient: Gradient[V], range: Range) -> None:
        self._gradient = gradient
        self._range = range

    @property
    def gradient(self) -> Gradient[V]:
        return self._gradient

    @property
    def range(self) -> Range:
        return self._range

    @property
    def mix_fn(self) -> MixFunction:
        return self._gradient.mix_fn

    def get(self, position: Position) -> V:
        """Value at ``position``, clamped to the slice's own limits first."""
        return self._gradient.get(self._range.clamp(position))

    __call__ = get

    def domain(self) -> Tuple[Position, Position]:
        """Limits of the slice, falling back to the gradient's for open sides."""
        if self._range.is_bounded:
            return self._range.from_, self._range.to
        start, end = self._gradient.domain()
        return (
            start if self._range.from_ is None else self._range.from_,
            end if self._range.to is None else self._range.to,
        )

    def slice(self, range: Any) -> GradientSlice[V]:
        """Further limit the domain. Ranges past either end collapse onto it."""
        return GradientSlice(self._gradient, self._range.constrain(Range.coerce(range)))

    def __getitem__(self, key: Union[slice, Range]) -> GradientSlice[V]:
        if not isinstance(key, (slice, Range)):
            raise TypeError(
                f"GradientSlice indices must be slices or Ranges, not {type(key).__name__}"
            )
        return self.slice(key)

    def take(self, n: int) -> Take[V]:
        """``n`` evenly spaced values over the slice's domain."""
        start, end = self.domain()
        return Take(self, start, end - start, check_count(n))

    def __repr__(self) -> str:
        return f"GradientSlice({self._range!r}, of={self._gradient!r})"


__all__ = ["GradientSlice"]
