from ..utils.num_utils import round_half_away
from .to_rgb import fractional_rgb

ANSI16_BASE = 30
ANSI16_BRIGHT_OFFSET = 60
ANSI256_BASE = 16
ANSI256_BLACK = 16
ANSI256_WHITE = 231
ANSI256_GREYSCALE_BASE = 232


def rgb_to_ansi16(r: int, g: int, b: int) -> int:
    """
    Convert 0-255 RGB to an ANSI 16-color foreground code (30-37, 90-97).
    """
    fr, fg, fb = fractional_rgb(r, g, b)
    value = round_half_away(max(fr, fg, fb) * 100 / 50)

    if value == 0:
        return ANSI16_BASE

    ansi = ANSI16_BASE + (
        (round_half_away(fb) << 2) | (round_half_away(fg) << 1) | round_half_away(fr)
    )
    return ansi + ANSI16_BRIGHT_OFFSET if value == 2 else ansi


def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """
    Convert 0-255 RGB to an ANSI 256-color code.

    Channels sharing the same high nibble are treated as greyscale and mapped onto
    the 24-step grey ramp; everything else goes through the 6x6x6 color cube.
    """
    r, g, b = int(r), int(g), int(b)
    if r >> 4 == g >> 4 == b >> 4:
        if r < 8:
            return ANSI256_BLACK
        if r > 248:
            return ANSI256_WHITE
        return round_half_away((r - 8) / 247 * 24) + ANSI256_GREYSCALE_BASE

    fr, fg, fb = fractional_rgb(r, g, b)
    return (
        ANSI256_BASE
        + 36 * round_half_away(fr * 5)
        + 6 * round_half_away(fg * 5)
        + round_half_away(fb * 5)
    )
