from ..types.format_type import MAX_CHANNEL
from ..utils.num_utils import round_half_away


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Pack 0-255 RGB into six upper-case hex digits, e.g. ``"F1F091"``."""
    packed = (round_half_away(r) << 16) | (round_half_away(g) << 8) | round_half_away(b)
    return f"{packed:06X}"


def alpha_to_hex(alpha: float) -> str:
    """
    Encode a [0, 1] alpha as two upper-case hex digits, e.g. ``0.65 -> "A6"``.

    A manual alpha outside [0, 1] is clamped to a single byte here so the hex
    form stays well formed; array spaces still report the value as given.
    """
    byte = min(max(round_half_away(alpha * MAX_CHANNEL), 0), MAX_CHANNEL)
    return f"{byte:02X}"
