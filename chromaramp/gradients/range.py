"""
Optionally bounded intervals of the position domain.

A :class:`Range` has an optional lower bound ``from_`` and an optional upper
bound ``to``. Missing bounds mean "no limit on that side". Inclusive and
exclusive ends are stored the same way: the literal endpoint.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Optional
from ..types.value_types import Scalar


@dataclass(frozen=True)
class Range:
    from_: Optional[Scalar] = None
    to: Optional[Scalar] = None

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def half_open(cls, start: Scalar, end: Scalar) -> Range:
        """``start..end``"""
        return cls(start, end)

    @classmethod
    def closed(cls, start: Scalar, end: Scalar) -> Range:
        """``start..=end``"""
        return cls(start, end)

    inclusive = closed

    @classmethod
    def starting_at(cls, start: Scalar) -> Range:
        """``start..``"""
        return cls(start, None)

    @classmethod
    def up_to(cls, end: Scalar) -> Range:
        """``..end``"""
        return cls(None, end)

    @classmethod
    def up_to_inclusive(cls, end: Scalar) -> Range:
        """``..=end``"""
        return cls(None, end)

    @classmethod
    def full(cls) -> Range:
        """``..``"""
        return cls(None, None)

    @classmethod
    def coerce(cls, obj: Any) -> Range:
        """
        Build a Range from the usual Python interval spellings.

        Accepts a Range, a ``slice`` without step, a ``(start, end)`` pair with
        ``None`` for open sides, or ``None`` / ``...`` for the unbounded range.

        Raises:
            ValueError: slice with a step, or a tuple that is not a pair
            TypeError: anything else
        """
        if isinstance(obj, Range):
            return obj
        if obj is None or obj is Ellipsis:
            return cls.full()
        if isinstance(obj, slice):
            if obj.step is not None:
                raise ValueError(f"Gradient ranges do not take a step, got {obj.step!r}")
            return cls(obj.start, obj.stop)
        if isinstance(obj, tuple):
            if len(obj) != 2:
                raise ValueError(f"Range tuple must be (start, end), got {len(obj)} items")
            return cls(obj[0], obj[1])
        raise TypeError(f"Cannot build a Range from {type(obj).__name__}")

    # ------------------ ALGEBRA ------------------
    def clamp(self, x: Scalar) -> Scalar:
        """
        Bound ``x`` into this range.

        The lower bound is applied first and the upper bound last, so an
        inverted range (``from_ > to``) always yields ``to``.
        """
        if self.from_ is not None:
            x = max(self.from_, x)
        if self.to is not None:
            x = min(self.to, x)
        return x

    def constrain(self, other: Range) -> Range:
        """
        Intersect this range with ``other``.

        If ``other`` lies entirely past one of this range's ends, the result
        collapses to a zero-width range at that end of ``self``.
        """
        if other.from_ is not None and self.to is not None and other.from_ >= self.to:
            return Range(self.to, self.to)

        if other.to is not None and self.from_ is not None and other.to <= self.from_:
            return Range(self.from_, self.from_)

        return Range(
            _pick(self.from_, other.from_, max),
            _pick(self.to, other.to, min),
        )

    @property
    def is_bounded(self) -> bool:
        return self.from_ is not None and self.to is not None

    @property
    def is_degenerate(self) -> bool:
        """Both bounds present and the interval has no interior."""
        return self.is_bounded and self.from_ >= self.to

    def isclose(self, other: Range, rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
        """Approximate equality; an open side only matches an open side."""
        return (
            _bound_isclose(self.from_, other.from_, rel_tol, abs_tol)
            and _bound_isclose(self.to, other.to, rel_tol, abs_tol)
        )

    def __repr__(self) -> str:
        start = "" if self.from_ is None else repr(self.from_)
        end = "" if self.to is None else repr(self.to)
        return f"Range({start}..{end})"


def _pick(a: Optional[Scalar], b: Optional[Scalar], choose) -> Optional[Scalar]:
    if a is not None and b is not None:
        return choose(a, b)
    return a if a is not None else b


def _bound_isclose(a: Optional[Scalar], b: Optional[Scalar], rel_tol: float, abs_tol: float) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


__all__ = ["Range"]
