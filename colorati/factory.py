from typing import Any, Optional

from .colors.color import Colorati
from .hashing import channels_from_hash, hash_value
from .samples.colors import rgb_from_name
from .types.config import AlphaOption, ColorConfig


def _config(
    alpha: AlphaOption,
    alpha_precision: Optional[int],
    channel_precision: Optional[int],
    color_precision: Optional[int],
) -> ColorConfig:
    options: dict[str, Any] = {
        "alpha": alpha,
        "alpha_precision": alpha_precision,
        "channel_precision": channel_precision,
    }
    if color_precision is not None:
        options["color_precision"] = color_precision
    return ColorConfig.from_options(**options)


def colorati(
    value: Any,
    *,
    alpha: AlphaOption = None,
    alpha_precision: Optional[int] = None,
    channel_precision: Optional[int] = None,
    color_precision: Optional[int] = None,
) -> Colorati:
    """
    Create the deterministic color for any value.

    Args:
        value: Any value; equal values (including dicts with a different key
            order) always give the same color.
        alpha: ``None``/``False`` reports alpha as 1, ``True`` uses the alpha
            computed from the value, a number fixes alpha to that value.
        alpha_precision: Decimal places for alpha in formatted strings (default 2).
        channel_precision: Decimal places for non-integer channels (default 2).
            Values above 100 disable rounding.
        color_precision: Deprecated alias of ``channel_precision``.

    Returns:
        Colorati instance

    >>> color = colorati({"foo": "bar"})
    >>> color is not colorati({"foo": "bar"}) and color == colorati({"foo": "bar"})
    True
    """
    return color_from_hash(
        hash_value(value),
        alpha=alpha,
        alpha_precision=alpha_precision,
        channel_precision=channel_precision,
        color_precision=color_precision,
    )


def color_from_hash(
    hash_code: int,
    *,
    alpha: AlphaOption = None,
    alpha_precision: Optional[int] = None,
    channel_precision: Optional[int] = None,
    color_precision: Optional[int] = None,
) -> Colorati:
    """Create a color from an already computed 32-bit hash."""
    channels, raw_alpha = channels_from_hash(hash_code)
    config = _config(alpha, alpha_precision, channel_precision, color_precision)
    return Colorati(channels, raw_alpha, config)


def from_name(
    name: str,
    *,
    alpha: AlphaOption = None,
    alpha_precision: Optional[int] = None,
    channel_precision: Optional[int] = None,
) -> Colorati:
    """
    Create a color from a CSS color name. The computed alpha of a named color is 1.

    Raises:
        ValueError: if the name is not a CSS color name
    """
    config = _config(alpha, alpha_precision, channel_precision, None)
    return Colorati(rgb_from_name(name), 1.0, config)
