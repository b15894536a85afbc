from .mix import Mixable, blend, clamp_factor, lerp
from .hue import Hue, normalize_angle, normalize_angle_positive

__all__ = [
    "Mixable",
    "blend",
    "clamp_factor",
    "lerp",
    "Hue",
    "normalize_angle",
    "normalize_angle_positive",
]
