from .range import Range
from .take import Take, Sampleable
from .slice import GradientSlice
from .gradient import Gradient, DEFAULT_CHECK_ORDER

__all__ = [
    "Range",
    "Take",
    "Sampleable",
    "GradientSlice",
    "Gradient",
    "DEFAULT_CHECK_ORDER",
]
