"""
Chromaramp Color Classes
========================

Small immutable color values that know how to mix with each other, so they
can be used directly as gradient stops.

Usage
-----
>>> from chromaramp.colors import LinRGB
>>> red = LinRGB((1.0, 0.0, 0.0))
>>> blue = LinRGB((0.0, 0.0, 1.0))
>>> red.mix(blue, 0.5)
LinRGB(0.5, 0.0, 0.5)
"""
from .color_base import ColorBase, WithAlpha
from .linear import LinRGB, LinRGBA, Luma, HSV
from .contrast import RelativeContrast, contrast_ratio

__all__ = [
    "ColorBase",
    "WithAlpha",
    "LinRGB",
    "LinRGBA",
    "Luma",
    "HSV",
    "RelativeContrast",
    "contrast_ratio",
]
