"""
Colorati Color Classes
======================

Features
--------
- Immutable color instances (frozen after initialization)
- One lazily built, cached representation per color space
- CSS Color 4 formatting with configurable precision
- Hue-rotation harmonies sharing the origin's alpha and config
- W3C dark/light contrast classification

Usage
-----
>>> from colorati.colors import Colorati
>>> color = Colorati((241, 240, 145), 64 / 255)
>>> color.hex.css
'#F1F091'
>>> color.clone(alpha=True).hex.css
'#F1F09140'
>>> [c.hex.css for c in color.harmonies.triad]
['#F1F091', '#91F1F0', '#F091F1']

Notes
-----
- ``color.hsl is color.hsl``: accessors return the cached instance
- ANSI representations are scalar codes: no channels, alpha or CSS
- Hex iterates over the characters of its CSS string
"""

from .color import Colorati, relative_luminance
from .representation import ColorRepresentation
from .harmonies import ColorHarmonies, HARMONY_OFFSETS, harmony_offsets
from .encoder import ColorEncoder

__all__ = [
    'Colorati',
    'ColorRepresentation',
    'ColorHarmonies',
    'ColorEncoder',
    'HARMONY_OFFSETS',
    'harmony_offsets',
    'relative_luminance',
]
