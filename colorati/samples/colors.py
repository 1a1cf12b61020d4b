"""CSS named colors, looked up through ``webcolors`` (CSS3 / CSS Color 4 name set)."""

from typing import Optional

import webcolors

from ..types.color_types import RgbChannels

CSS_SPEC = webcolors.CSS3


def name_from_rgb(rgb: RgbChannels) -> Optional[str]:
    """Return the CSS color name for an exact RGB match, or None."""
    try:
        return webcolors.rgb_to_name(tuple(int(c) for c in rgb), spec=CSS_SPEC)
    except ValueError:
        return None


def rgb_from_name(name: str) -> RgbChannels:
    """
    Return the RGB channels of a CSS color name (case-insensitive).

    Raises:
        ValueError: if the name is not a CSS color name
    """
    try:
        red, green, blue = webcolors.name_to_rgb(name.strip(), spec=CSS_SPEC)
    except ValueError:
        raise ValueError(f"Unknown color name: {name!r}") from None
    return red, green, blue


__all__ = [
    "CSS_SPEC",
    "name_from_rgb",
    "rgb_from_name",
]
