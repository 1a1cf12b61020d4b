from .num_utils import (
    round_half_away,
    round_to,
    format_fixed,
    format_number,
    format_integer,
    is_unbounded,
)

__all__ = [
    "round_half_away",
    "round_to",
    "format_fixed",
    "format_number",
    "format_integer",
    "is_unbounded",
]
