"""
Chromaramp - Color Gradients over Control Points
=================================================

Continuous interpolation over a sequence of (position, value) stops, with
domain slicing and lazy, reversible, evenly spaced sampling.

Quick Start
-----------
>>> from chromaramp import Gradient, LinRGB
>>>
>>> gradient = Gradient.from_colors([
...     LinRGB((1.0, 1.0, 0.0)),
...     LinRGB((0.0, 0.0, 1.0)),
... ])
>>> gradient.get(0.5)
LinRGB(0.5, 0.5, 0.5)
>>> len(list(gradient.take(5)))
5
>>> first_half = gradient[:0.5]
>>> first_half.domain()
(0.0, 0.5)

Modules
-------
- gradients: Gradient, GradientSlice, Range, Take
- mixing: the Mixable protocol, blend() and circular Hue values
- colors: immutable linear colors that mix component-wise
- render: numpy / Pillow rasterisation of sample sequences
"""

from .errors import EmptyGradientError, UnsortedStopsWarning
from .gradients import Gradient, GradientSlice, Range, Take, Sampleable
from .mixing import Mixable, blend, Hue
from .colors import ColorBase, LinRGB, LinRGBA, Luma, HSV, RelativeContrast, contrast_ratio
from .render import render_strip, to_image

__version__ = "0.1.0"

__all__ = [
    # Gradients
    "Gradient",
    "GradientSlice",
    "Range",
    "Take",
    "Sampleable",

    # Mixing
    "Mixable",
    "blend",
    "Hue",

    # Colors
    "ColorBase",
    "LinRGB",
    "LinRGBA",
    "Luma",
    "HSV",
    "RelativeContrast",
    "contrast_ratio",

    # Rendering
    "render_strip",
    "to_image",

    # Errors
    "EmptyGradientError",
    "UnsortedStopsWarning",

    # Version
    "__version__",
]
