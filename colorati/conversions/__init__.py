"""
Colorati Color Space Conversions
================================

Pure functions converting a base RGB color (channels 0-255) into every supported
color space, with scalar and vectorized (numpy) implementations.

Conversion Functions
-------------------

RGB → HSL / HWB:
    rgb_to_hsl(r, g, b)             (hue, saturation %, lightness %)
    rgb_to_hwb(r, g, b)             (hue, whiteness %, blackness %)
    np_rgb_to_hsl(rgb), np_rgb_to_hwb(rgb)

RGB → CIELAB / CIELCH / OkLab / OkLCH:
    rgb_to_lab(r, g, b)             (L, a, b)
    rgb_to_lch(r, g, b)             (L, chroma, hue)
    rgb_to_oklab(r, g, b)           (L, a, b) scaled by 100
    rgb_to_oklch(r, g, b)           (L, chroma, hue) scaled by 100
    lab_to_lch(l, a, b)
    np_rgb_to_lab(rgb), np_rgb_to_oklab(rgb), np_lab_to_lch(lab)

RGB → CMYK:
    rgb_to_cmyk(r, g, b)            (cyan %, magenta %, yellow %, key %)
    np_rgb_to_cmyk(rgb)

RGB → ANSI / hex:
    rgb_to_ansi16(r, g, b), rgb_to_ansi256(r, g, b)
    rgb_to_hex(r, g, b), alpha_to_hex(alpha)

HSL → RGB:
    hsl_to_rgb(h, s, l)             fractional HSL to integer RGB
    hsl_degrees_to_rgb(h, s, l)     degrees / percentages to integer RGB

High-Level API
-------------
    convert(space, r, g, b)
        Scalar dispatch by color space
    np_convert(rgb, space)
        Vectorized dispatch for array spaces

Examples
--------
>>> from colorati.conversions import rgb_to_hsl, hsl_degrees_to_rgb
>>> rgb_to_hsl(255, 0, 0)
(0.0, 100.0, 50.0)
>>> hsl_degrees_to_rgb(0.0, 100.0, 50.0)
(255, 0, 0)
"""

from .to_rgb import fractional_rgb, hsl_to_rgb, hsl_degrees_to_rgb
from .to_hsl import rgb_to_hsl, rgb_to_hwb, np_rgb_to_hsl, np_rgb_to_hwb
from .to_lab import (
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_oklab,
    rgb_to_oklch,
    lab_to_lch,
    np_linearize,
    np_rgb_to_xyz,
    np_rgb_to_lab,
    np_rgb_to_oklab,
    np_lab_to_lch,
)
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from .to_ansi import rgb_to_ansi16, rgb_to_ansi256
from .to_hex import rgb_to_hex, alpha_to_hex
from .wrapper import convert, np_convert

__all__ = [
    'fractional_rgb',
    'hsl_to_rgb',
    'hsl_degrees_to_rgb',
    'rgb_to_hsl',
    'rgb_to_hwb',
    'np_rgb_to_hsl',
    'np_rgb_to_hwb',
    'rgb_to_lab',
    'rgb_to_lch',
    'rgb_to_oklab',
    'rgb_to_oklch',
    'lab_to_lch',
    'np_linearize',
    'np_rgb_to_xyz',
    'np_rgb_to_lab',
    'np_rgb_to_oklab',
    'np_lab_to_lch',
    'rgb_to_cmyk',
    'np_rgb_to_cmyk',
    'rgb_to_ansi16',
    'rgb_to_ansi256',
    'rgb_to_hex',
    'alpha_to_hex',
    'convert',
    'np_convert',
]
