"""
CIELAB / CIELCH and OkLab / OkLCH conversions.

Every conversion is written once against numpy arrays of shape (..., 3); the
scalar functions route a single color through the same code path.
"""

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import FloatTriple
from ..types.format_type import HUE_360, MAX_CHANNEL

# sRGB (D65) -> XYZ
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

D65_WHITE = np.array([95.047, 100.0, 108.883])

LAB_EPSILON = (6 / 29) ** 3
LAB_SLOPE = 1 / (3 * (6 / 29) ** 2)
LAB_OFFSET = 4 / 29

LINEAR_RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])


def np_linearize(rgb: NDArray) -> NDArray:
    """
    Vectorized: sRGB inverse gamma on 0-255 channels.

    Args:
        rgb: array of shape (..., 3), channels in [0, 255]

    Returns:
        linear-light channels in [0, 1]
    """
    v = np.asarray(rgb, dtype=float) / MAX_CHANNEL
    return np.where(v > 0.04045, ((v + 0.055) / 1.055) ** 2.4, v / 12.92)


def _lab_f(t: NDArray) -> NDArray:
    return np.where(t > LAB_EPSILON, np.cbrt(t), t * LAB_SLOPE + LAB_OFFSET)


def np_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """Vectorized: 0-255 RGB of shape (..., 3) to XYZ scaled to Y = 100 for white."""
    return np_linearize(rgb) @ SRGB_TO_XYZ.T * 100


def np_rgb_to_lab(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert 0-255 RGB to CIELAB (D65).

    Args:
        rgb: array of shape (..., 3)

    Returns:
        array of shape (..., 3): (L, a, b)
    """
    fx, fy, fz = np.moveaxis(_lab_f(np_rgb_to_xyz(rgb) / D65_WHITE), -1, 0)
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def np_rgb_to_oklab(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert 0-255 RGB to OkLab, with L, a and b scaled by 100.

    Args:
        rgb: array of shape (..., 3)

    Returns:
        array of shape (..., 3): (L, a, b)
    """
    lms = np.cbrt(np_linearize(rgb) @ LINEAR_RGB_TO_LMS.T)
    return lms @ LMS_TO_OKLAB.T * 100


def np_lab_to_lch(lab: NDArray) -> NDArray:
    """
    Vectorized: Convert Lab (or OkLab) to its polar LCH form.

    Args:
        lab: array of shape (..., 3)

    Returns:
        array of shape (..., 3): (L, chroma, hue in [0, 360))
    """
    lab = np.asarray(lab, dtype=float)
    lightness, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    chroma = np.hypot(a, b)
    hue = np.degrees(np.arctan2(b, a)) % HUE_360
    return np.stack([lightness, chroma, hue], axis=-1)


def _scalar(result: NDArray) -> FloatTriple:
    first, second, third = (float(v) for v in result)
    return first, second, third


def rgb_to_lab(r: float, g: float, b: float) -> FloatTriple:
    """Convert 0-255 RGB to CIELAB (L, a, b)."""
    return _scalar(np_rgb_to_lab(np.array([r, g, b])))


def rgb_to_oklab(r: float, g: float, b: float) -> FloatTriple:
    """Convert 0-255 RGB to OkLab (L, a, b), each scaled by 100."""
    return _scalar(np_rgb_to_oklab(np.array([r, g, b])))


def lab_to_lch(lightness: float, a: float, b: float) -> FloatTriple:
    """Convert Lab (or OkLab) to (L, chroma, hue)."""
    return _scalar(np_lab_to_lch(np.array([lightness, a, b])))


def rgb_to_lch(r: float, g: float, b: float) -> FloatTriple:
    return lab_to_lch(*rgb_to_lab(r, g, b))


def rgb_to_oklch(r: float, g: float, b: float) -> FloatTriple:
    return lab_to_lch(*rgb_to_oklab(r, g, b))
