from __future__ import annotations
import operator
from typing import Generic, Iterator, List, Protocol, Tuple
import numpy as np
from numpy import ndarray
from ..types.value_types import Position, V


class Sampleable(Protocol[V]):
    """What a sample sequence reads from: a Gradient or a GradientSlice."""

    def get(self, position: Position) -> V:
        ...

    def domain(self) -> Tuple[Position, Position]:
        ...


def check_count(n: int) -> int:
    """Validate a sample count."""
    if isinstance(n, bool):
        raise TypeError("Sample count must be an integer, not bool")
    try:
        n = operator.index(n)
    except TypeError:
        raise TypeError(f"Sample count must be an integer, got {type(n).__name__}") from None
    if n < 0:
        raise ValueError(f"Sample count must be non-negative, got {n}")
    return n


class Take(Generic[V]):
    """
    ``n`` evenly spaced values from a gradient, produced lazily.

    The sequence can be consumed from both ends at once: ``next()`` reads
    from the front, :meth:`next_back` from the back, and the two never
    overlap. ``len()`` is always the exact number of values left.

    For ``n > 1`` the first value sits at the start of the domain and the
    last one at its end. For ``n == 1`` the single value is the start of the
    domain.
    """

    __slots__ = ('_source', '_start', '_span', '_len', '_from_head', '_from_end')

    def __init__(self, source: Sampleable[V], start: Position, span: Position, n: int) -> None:
        self._source = source
        self._start = start
        self._span = span
        self._len = n
        self._from_head = 0
        self._from_end = 0

    def _position(self, index: int) -> Position:
        if self._len == 1:
            return self._start
        return self._start + (self._span / (self._len - 1)) * index

    @property
    def exhausted(self) -> bool:
        return self._from_head + self._from_end >= self._len

    def __iter__(self) -> Take[V]:
        return self

    def __next__(self) -> V:
        if self.exhausted:
            raise StopIteration
        position = self._position(self._from_head)
        self._from_head += 1
        return self._source.get(position)

    def next_back(self) -> V:
        """
        Take the next value from the back of the sequence.

        Raises:
            StopIteration: when no values are left
        """
        if self.exhausted:
            raise StopIteration
        position = self._position(self._len - self._from_end - 1)
        self._from_end += 1
        return self._source.get(position)

    def __reversed__(self) -> Iterator[V]:
        return _ReversedTake(self)

    def __len__(self) -> int:
        return self._len - self._from_head - self._from_end

    def __length_hint__(self) -> int:
        return len(self)

    def positions(self) -> ndarray:
        """Positions of the values not yet consumed, front to back."""
        indices = range(self._from_head, self._len - self._from_end)
        return np.array([self._position(i) for i in indices], dtype=np.float64)

    def to_list(self) -> List[V]:
        """Drain the remaining values, front to back."""
        return list(self)

    def __repr__(self) -> str:
        return (
            f"Take(n={self._len}, start={self._start!r}, span={self._span!r}, "
            f"remaining={len(self)})"
        )


class _ReversedTake(Generic[V]):
    """Back-to-front iterator sharing its state with a Take."""

    __slots__ = ('_take',)

    def __init__(self, take: Take[V]) -> None:
        self._take = take

    def __iter__(self) -> _ReversedTake[V]:
        return self

    def __next__(self) -> V:
        return self._take.next_back()

    def __reversed__(self) -> Take[V]:
        return self._take

    def __len__(self) -> int:
        return len(self._take)

    def __length_hint__(self) -> int:
        return len(self._take)


__all__ = ["Take", "Sampleable", "check_count"]
