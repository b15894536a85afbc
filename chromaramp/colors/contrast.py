"""
WCAG 2.1 relative contrast.

The contrast ratio between two colors is ``(L1 + 0.05) / (L2 + 0.05)``, where
``L1`` is the relative luminance of the lighter color and ``L2`` that of the
darker one, both in linear light. Ratios range from 1:1 to 21:1.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

MIN_CONTRAST = 4.5              # SC 1.4.3, level AA
MIN_CONTRAST_LARGE = 3.0        # SC 1.4.3, large text
ENHANCED_CONTRAST = 7.0         # SC 1.4.6, level AAA
ENHANCED_CONTRAST_LARGE = 4.5   # SC 1.4.6, large text


def contrast_ratio(luminance_a: float, luminance_b: float) -> float:
    """Contrast ratio of two relative luminances, in either order."""
    lighter, darker = max(luminance_a, luminance_b), min(luminance_a, luminance_b)
    return (lighter + 0.05) / (darker + 0.05)


class RelativeContrast(ABC):
    """Mixin for colors that can report their relative luminance."""
    __slots__ = ()

    @abstractmethod
    def relative_luminance(self) -> float:
        ...

    def get_contrast_ratio(self, other: Any) -> float:
        return contrast_ratio(self.relative_luminance(), other.relative_luminance())

    def is_min_contrast(self, other: Any) -> bool:
        return self.get_contrast_ratio(other) >= MIN_CONTRAST

    def is_min_contrast_large(self, other: Any) -> bool:
        return self.get_contrast_ratio(other) >= MIN_CONTRAST_LARGE

    def is_enhanced_contrast(self, other: Any) -> bool:
        return self.get_contrast_ratio(other) >= ENHANCED_CONTRAST

    def is_enhanced_contrast_large(self, other: Any) -> bool:
        return self.get_contrast_ratio(other) >= ENHANCED_CONTRAST_LARGE


__all__ = [
    "RelativeContrast",
    "contrast_ratio",
    "MIN_CONTRAST",
    "MIN_CONTRAST_LARGE",
    "ENHANCED_CONTRAST",
    "ENHANCED_CONTRAST_LARGE",
]
