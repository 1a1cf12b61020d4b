from __future__ import annotations
from enum import Enum
from typing import Tuple

from .format_type import RepresentationKind

RgbChannels = Tuple[int, int, int]
FloatTriple = Tuple[float, float, float]
CmykChannels = Tuple[float, float, float, float]


class ColorSpace(str, Enum):
    ANSI16 = "ansi16"
    ANSI256 = "ansi256"
    CMYK = "cmyk"
    HEX = "hex"
    HSL = "hsl"
    HWB = "hwb"
    LAB = "lab"
    LCH = "lch"
    OKLAB = "oklab"
    OKLCH = "oklch"
    RGB = "rgb"


space_kinds: dict[ColorSpace, RepresentationKind] = {
    ColorSpace.ANSI16: RepresentationKind.ANSI,
    ColorSpace.ANSI256: RepresentationKind.ANSI,
    ColorSpace.HEX: RepresentationKind.STRING,
    ColorSpace.CMYK: RepresentationKind.ARRAY,
    ColorSpace.HSL: RepresentationKind.ARRAY,
    ColorSpace.HWB: RepresentationKind.ARRAY,
    ColorSpace.LAB: RepresentationKind.ARRAY,
    ColorSpace.LCH: RepresentationKind.ARRAY,
    ColorSpace.OKLAB: RepresentationKind.ARRAY,
    ColorSpace.OKLCH: RepresentationKind.ARRAY,
    ColorSpace.RGB: RepresentationKind.ARRAY,
}

channel_names: dict[ColorSpace, Tuple[str, ...]] = {
    ColorSpace.CMYK: ("cyan", "magenta", "yellow", "key"),
    ColorSpace.HSL: ("hue", "saturation", "lightness"),
    ColorSpace.HWB: ("hue", "whiteness", "blackness"),
    ColorSpace.LAB: ("lightness", "a_axis", "b_axis"),
    ColorSpace.LCH: ("lightness", "chroma", "hue"),
    ColorSpace.OKLAB: ("lightness", "a_axis", "b_axis"),
    ColorSpace.OKLCH: ("lightness", "chroma", "hue"),
    ColorSpace.RGB: ("red", "green", "blue"),
}

ARRAY_SPACES = frozenset(s for s, k in space_kinds.items() if k == RepresentationKind.ARRAY)


def to_color_space(space: ColorSpace | str) -> ColorSpace:
    """
    Normalize a color space name to a ColorSpace member.

    Args:
        space: ColorSpace member or its (case-insensitive) name

    Returns:
        Matching ColorSpace

    Raises:
        ValueError: if the space is not recognized
    """
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).lower())
    except ValueError:
        raise ValueError(f"Unsupported color space: {space!r}") from None


def is_array_space(space: ColorSpace | str) -> bool:
    return to_color_space(space) in ARRAY_SPACES
