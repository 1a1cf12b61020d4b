from typing import Callable, Union
import numpy as np

from ..types.color_types import ColorSpace, is_array_space, to_color_space
from .to_ansi import rgb_to_ansi16, rgb_to_ansi256
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from .to_hex import rgb_to_hex
from .to_hsl import rgb_to_hsl, rgb_to_hwb, np_rgb_to_hsl, np_rgb_to_hwb
from .to_lab import (
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_oklab,
    rgb_to_oklch,
    np_rgb_to_lab,
    np_rgb_to_oklab,
    np_lab_to_lch,
)

ConvertResult = Union[tuple, str, int]


def _identity_rgb(r: float, g: float, b: float) -> tuple[int, int, int]:
    return int(r), int(g), int(b)


CONVERT_SCALAR: dict[ColorSpace, Callable[[float, float, float], ConvertResult]] = {
    ColorSpace.ANSI16: rgb_to_ansi16,
    ColorSpace.ANSI256: rgb_to_ansi256,
    ColorSpace.CMYK: rgb_to_cmyk,
    ColorSpace.HEX: rgb_to_hex,
    ColorSpace.HSL: rgb_to_hsl,
    ColorSpace.HWB: rgb_to_hwb,
    ColorSpace.LAB: rgb_to_lab,
    ColorSpace.LCH: rgb_to_lch,
    ColorSpace.OKLAB: rgb_to_oklab,
    ColorSpace.OKLCH: rgb_to_oklch,
    ColorSpace.RGB: _identity_rgb,
}

CONVERT_NUMPY: dict[ColorSpace, Callable[[np.ndarray], np.ndarray]] = {
    ColorSpace.CMYK: np_rgb_to_cmyk,
    ColorSpace.HSL: np_rgb_to_hsl,
    ColorSpace.HWB: np_rgb_to_hwb,
    ColorSpace.LAB: np_rgb_to_lab,
    ColorSpace.LCH: lambda rgb: np_lab_to_lch(np_rgb_to_lab(rgb)),
    ColorSpace.OKLAB: np_rgb_to_oklab,
    ColorSpace.OKLCH: lambda rgb: np_lab_to_lch(np_rgb_to_oklab(rgb)),
    ColorSpace.RGB: lambda rgb: np.asarray(rgb, dtype=float),
}


def convert(space: Union[ColorSpace, str], r: float, g: float, b: float) -> ConvertResult:
    """
    Convert a single 0-255 RGB color to the given space.

    Args:
        space: Target color space (e.g. "hsl", ColorSpace.OKLCH)
        r, g, b: Channels in [0, 255]

    Returns:
        Channel tuple for array spaces, hex digits for "hex", code for ANSI spaces

    Raises:
        ValueError: if the space is not recognized
    """
    return CONVERT_SCALAR[to_color_space(space)](r, g, b)


def np_convert(rgb: np.ndarray, space: Union[ColorSpace, str]) -> np.ndarray:
    """
    Vectorized conversion of many 0-255 RGB colors.

    Args:
        rgb: array of shape (..., 3)
        space: Target array color space

    Returns:
        float array of shape (..., N) where N is the channel count of the space

    Raises:
        ValueError: if the space is unknown or has no array form (hex, ANSI)
    """
    target = to_color_space(space)
    rgb = np.asarray(rgb, dtype=float)
    if rgb.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {rgb.shape}")
    if not is_array_space(target):
        raise ValueError(f"Color space {target.value!r} has no vectorized conversion")
    return CONVERT_NUMPY[target](rgb)
