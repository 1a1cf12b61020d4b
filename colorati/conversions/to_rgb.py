from ..types.color_types import FloatTriple, RgbChannels
from ..types.format_type import MAX_CHANNEL
from ..utils.num_utils import round_half_away


def fractional_rgb(r: float, g: float, b: float) -> FloatTriple:
    """Scale 0-255 channels to [0, 1]."""
    return r / MAX_CHANNEL, g / MAX_CHANNEL, b / MAX_CHANNEL


def _hue_to_channel(temp1: float, temp2: float, temp3: float) -> float:
    if temp3 < 0:
        temp3 += 1
    if temp3 > 1:
        temp3 -= 1

    if 6 * temp3 < 1:
        return temp1 + (temp2 - temp1) * 6 * temp3
    if 2 * temp3 < 1:
        return temp2
    if 3 * temp3 < 2:
        return temp1 + (temp2 - temp1) * (2 / 3 - temp3) * 6
    return temp1


def hsl_to_rgb(h: float, s: float, l: float) -> RgbChannels:
    """
    Convert fractional HSL back to integer RGB.

    Args:
        h: Hue as a fraction of a full turn [0, 1]
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        (r, g, b) integers in [0, 255]
    """
    if s == 0:
        grey = round_half_away(l * MAX_CHANNEL)
        return grey, grey, grey

    temp2 = l * (1 + s) if l < 0.5 else l + s - l * s
    temp1 = 2 * l - temp2

    r, g, b = (
        round_half_away(_hue_to_channel(temp1, temp2, h + shift) * MAX_CHANNEL)
        for shift in (1 / 3, 0.0, -1 / 3)
    )
    return r, g, b


def hsl_degrees_to_rgb(hue: float, saturation: float, lightness: float) -> RgbChannels:
    """Convert HSL as reported by the hsl space (degrees, percentages) to integer RGB."""
    return hsl_to_rgb((hue % 360) / 360, saturation / 100, lightness / 100)
