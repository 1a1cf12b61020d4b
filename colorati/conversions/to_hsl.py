import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import FloatTriple
from ..types.format_type import HUE_360, MAX_CHANNEL
from .to_rgb import fractional_rgb


def _hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    if max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    return (hue * 60) % HUE_360


def rgb_to_hsl(r: float, g: float, b: float) -> FloatTriple:
    """
    Convert 0-255 RGB to HSL.

    Returns:
        (hue in [0, 360), saturation %, lightness %)
    """
    r, g, b = fractional_rgb(r, g, b)
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        return 0.0, 0.0, lightness * 100

    delta = max_c - min_c
    hue = _hue(r, g, b, max_c, delta)
    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    return hue, saturation * 100, lightness * 100


def rgb_to_hwb(r: float, g: float, b: float) -> FloatTriple:
    """
    Convert 0-255 RGB to HWB.

    Returns:
        (hue in [0, 360), whiteness %, blackness %)
    """
    hue, _, _ = rgb_to_hsl(r, g, b)
    whiteness = min(r, g, b) / MAX_CHANNEL * 100
    blackness = (1 - max(r, g, b) / MAX_CHANNEL) * 100
    return hue, whiteness, blackness


def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert 0-255 RGB to HSL.

    Args:
        rgb: array of shape (..., 3)

    Returns:
        array of shape (..., 3): (hue, saturation %, lightness %)
    """
    rgb = np.asarray(rgb, dtype=float) / MAX_CHANNEL
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    max_c = rgb.max(axis=-1)
    min_c = rgb.min(axis=-1)
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2

    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)

    hue = np.zeros_like(max_c)
    red_max = chromatic & (max_c == r)
    green_max = chromatic & ~red_max & (max_c == g)
    blue_max = chromatic & ~red_max & ~green_max

    hue[red_max] = ((g - b) / safe_delta + np.where(g < b, 6, 0))[red_max]
    hue[green_max] = ((b - r) / safe_delta + 2)[green_max]
    hue[blue_max] = ((r - g) / safe_delta + 4)[blue_max]
    hue = (hue * 60) % HUE_360

    denominator = np.where(lightness > 0.5, 2 - max_c - min_c, max_c + min_c)
    saturation = np.where(chromatic, delta / np.where(chromatic, denominator, 1.0), 0.0)

    return np.stack([hue, saturation * 100, lightness * 100], axis=-1)


def np_rgb_to_hwb(rgb: NDArray) -> NDArray:
    """Vectorized: Convert 0-255 RGB of shape (..., 3) to HWB."""
    rgb = np.asarray(rgb, dtype=float)
    hue = np_rgb_to_hsl(rgb)[..., 0]
    whiteness = rgb.min(axis=-1) / MAX_CHANNEL * 100
    blackness = (1 - rgb.max(axis=-1) / MAX_CHANNEL) * 100
    return np.stack([hue, whiteness, blackness], axis=-1)
