import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import CmykChannels
from ..types.format_type import MAX_CHANNEL
from .to_rgb import fractional_rgb


def _ratio(channel: float, key: float) -> float:
    # Pure black leaves every ratio at 0/0.
    if key == 1:
        return 0.0
    return (1 - channel - key) / (1 - key) + 0.0


def rgb_to_cmyk(r: float, g: float, b: float) -> CmykChannels:
    """
    Convert 0-255 RGB to CMYK.

    Returns:
        (cyan %, magenta %, yellow %, key %)
    """
    r, g, b = fractional_rgb(r, g, b)
    key = 1 - max(r, g, b)
    cyan, magenta, yellow = (_ratio(c, key) for c in (r, g, b))
    return cyan * 100, magenta * 100, yellow * 100, key * 100


def np_rgb_to_cmyk(rgb: NDArray) -> NDArray:
    """Vectorized: Convert 0-255 RGB of shape (..., 3) to CMYK percentages of shape (..., 4)."""
    rgb = np.asarray(rgb, dtype=float) / MAX_CHANNEL
    key = 1 - rgb.max(axis=-1, keepdims=True)
    black = key == 1
    cmy = np.where(black, 0.0, (1 - rgb - key) / np.where(black, 1.0, 1 - key))
    return np.concatenate([cmy, key], axis=-1) * 100 + 0.0
