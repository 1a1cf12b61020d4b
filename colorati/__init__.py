"""
Colorati: Deterministic Colors for Any Value
============================================

Derive a stable color from any Python value and read it in every common color
model, with CSS-ready strings, ANSI terminal codes and hue-based harmonies.

Features
--------
- Deterministic: equal values always map to the same color
- Color models: RGB, HSL, HWB, Lab, LCH, OkLab, OkLCH, CMYK, hex, ANSI-16/256
- CSS Color 4 strings with configurable channel/alpha precision
- Alpha ignored, computed from the value, or set manually
- Harmonies: complement, analogous, neutral, split, triad, tetrad, clash
- W3C luminance based dark/light text contrast
- Vectorized numpy conversions for batches of colors

Examples
--------
>>> from colorati import colorati
>>>
>>> color = colorati({"foo": "bar"}, alpha=True)
>>> color.rgb.css          # e.g. 'rgb(241 240 145 / 0.25)'
>>> color.oklch.channels   # (lightness, chroma, hue)
>>> color.hex.css          # '#RRGGBBAA'
>>> color.has_dark_contrast
>>> [c.hex.css for c in color.harmonies.complement]
"""

from .factory import colorati, color_from_hash, from_name
from .colors import (
    Colorati,
    ColorRepresentation,
    ColorHarmonies,
    ColorEncoder,
    HARMONY_OFFSETS,
)
from .hashing import hash_value, channels_from_hash
from .types import AlphaMode, ColorConfig, ColorSpace
from .conversions import convert, np_convert

__all__ = [
    "colorati",
    "color_from_hash",
    "from_name",
    "Colorati",
    "ColorRepresentation",
    "ColorHarmonies",
    "ColorEncoder",
    "HARMONY_OFFSETS",
    "hash_value",
    "channels_from_hash",
    "AlphaMode",
    "ColorConfig",
    "ColorSpace",
    "convert",
    "np_convert",
]
