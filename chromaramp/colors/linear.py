from typing import ClassVar, Optional, Tuple
from .color_base import ColorBase, WithAlpha
from .contrast import RelativeContrast

# Rec. 709 luminance weights for linear RGB
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


class LinRGB(ColorBase, RelativeContrast):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "rgb"
    maxima: ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)

    @property
    def red(self) -> float:
        return self.value[0]

    @property
    def green(self) -> float:
        return self.value[1]

    @property
    def blue(self) -> float:
        return self.value[2]

    def relative_luminance(self) -> float:
        return sum(w * c for w, c in zip(LUMINANCE_WEIGHTS, self.value))


class LinRGBA(ColorBase, WithAlpha, RelativeContrast):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "rgba"
    maxima: ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)

    def relative_luminance(self) -> float:
        """Luminance of the color channels; alpha is ignored."""
        return sum(w * c for w, c in zip(LUMINANCE_WEIGHTS, self.value[:3]))


class Luma(ColorBase, RelativeContrast):
    __slots__ = ()
    num_channels: ClassVar[int] = 1
    mode: ClassVar[str] = "l"
    maxima: ClassVar[Tuple[float]] = (1.0,)

    @property
    def luma(self) -> float:
        return self.value[0]

    def relative_luminance(self) -> float:
        return self.luma


class HSV(ColorBase):
    """Hue in degrees, saturation and value in [0, 1]. Hue mixes on the shortest arc."""
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "hsv"
    maxima: ClassVar[Tuple[float, float, float]] = (360.0, 1.0, 1.0)
    hue_index: ClassVar[Optional[int]] = 0

    @property
    def hue(self) -> float:
        return self.value[0]

    def _shade_indices(self) -> list:
        # only the value channel carries lightness
        return [2]


__all__ = ["LinRGB", "LinRGBA", "Luma", "HSV", "LUMINANCE_WEIGHTS"]
