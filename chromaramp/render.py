"""
Rasterise gradients into numpy arrays and Pillow images.
"""
from __future__ import annotations
from typing import Any, Optional
import numpy as np
from numpy import ndarray
from PIL import Image
from .gradients.take import Sampleable
from .utils import value_or_default

DEFAULT_RENDER_SCALE = 255.0

_MODES_BY_CHANNELS = {
    1: "L",
    3: "RGB",
    4: "RGBA",
}


def _as_channels(value: Any) -> ndarray:
    if hasattr(value, "as_array"):
        return np.atleast_1d(value.as_array())
    return np.atleast_1d(np.asarray(value, dtype=np.float64))


def render_strip(source: Sampleable, width: int, height: int = 1) -> ndarray:
    """
    Sample ``width`` evenly spaced values and stack them into an image array.

    Args:
        source: Gradient or GradientSlice
        width: Number of samples (columns)
        height: Number of identical rows

    Returns:
        Float array of shape (height, width, channels)
    """
    if height < 1:
        raise ValueError(f"height must be at least 1, got {height}")
    row = [_as_channels(value) for value in source.take(width)]
    if not row:
        return np.empty((height, 0, 0), dtype=np.float64)
    channels = {c.shape for c in row}
    if len(channels) != 1:
        raise ValueError(f"Gradient values have mixed channel shapes: {sorted(channels)}")
    line = np.stack(row, axis=0)
    return np.broadcast_to(line, (height,) + line.shape).copy()


def to_image(
    source: Sampleable,
    width: int,
    height: int = 1,
    scale: Optional[float] = None,
) -> Image.Image:
    """
    Render a gradient as a Pillow image.

    Channel values are multiplied by ``scale`` (255 by default) and clipped
    to the 8-bit range.
    """
    scale = value_or_default(scale, DEFAULT_RENDER_SCALE)
    arr = render_strip(source, width, height)
    num_channels = arr.shape[-1]
    mode = _MODES_BY_CHANNELS.get(num_channels)
    if mode is None:
        raise ValueError(f"Cannot build an image from {num_channels}-channel values")
    pixels = np.clip(np.rint(arr * scale), 0, 255).astype(np.uint8)
    if num_channels == 1:
        pixels = pixels[..., 0]
    return Image.fromarray(pixels)


__all__ = ["render_strip", "to_image", "DEFAULT_RENDER_SCALE"]
