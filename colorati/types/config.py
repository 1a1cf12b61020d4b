from __future__ import annotations
from dataclasses import dataclass, fields, replace
from enum import Enum
from numbers import Real
from typing import Any, Optional, Union
import warnings

from .format_type import DEFAULT_ALPHA_PRECISION, DEFAULT_CHANNEL_PRECISION

AlphaOption = Optional[Union[bool, float]]


class AlphaMode(str, Enum):
    IGNORED = "ignored"
    COMPUTED = "computed"
    MANUAL = "manual"


@dataclass(frozen=True)
class ColorConfig:
    """
    Formatting and alpha options shared by a color, its representations and
    its harmonies.

    Attributes:
        alpha: ``None``/``False`` ignores alpha (reported as 1), ``True`` uses the
            alpha computed from the hash, a number fixes alpha to that value.
        alpha_precision: Decimal places for alpha in formatted strings.
        channel_precision: Decimal places for non-integer channels in formatted strings.
    """
    alpha: AlphaOption = None
    alpha_precision: int = DEFAULT_ALPHA_PRECISION
    channel_precision: int = DEFAULT_CHANNEL_PRECISION

    def __post_init__(self) -> None:
        for name in ("alpha_precision", "channel_precision"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

        alpha = self.alpha
        if alpha is None or isinstance(alpha, bool):
            return
        if not isinstance(alpha, Real):
            raise TypeError(f"alpha must be a bool, a number or None, got {type(alpha).__name__}")
        if not 0 <= alpha <= 1:
            warnings.warn(f"Manual alpha {alpha} is outside [0, 1]; it is used as given")

    @property
    def alpha_mode(self) -> AlphaMode:
        if self.alpha is None or self.alpha is False:
            return AlphaMode.IGNORED
        if self.alpha is True:
            return AlphaMode.COMPUTED
        return AlphaMode.MANUAL

    def resolve_alpha(self, raw_alpha: float) -> float:
        """Return the alpha reported for a color whose hash-derived alpha is ``raw_alpha``."""
        mode = self.alpha_mode
        if mode == AlphaMode.COMPUTED:
            return raw_alpha
        if mode == AlphaMode.MANUAL:
            return float(self.alpha)  # type: ignore[arg-type]
        return 1

    def merge(self, **overrides: Any) -> ColorConfig:
        """Return a new config with ``overrides`` shallow-merged over this one."""
        return replace(self, **normalize_options(overrides))

    @classmethod
    def from_options(cls, **options: Any) -> ColorConfig:
        return cls(**normalize_options(options))


_OPTION_NAMES = {f.name for f in fields(ColorConfig)}


def normalize_options(options: dict[str, Any]) -> dict[str, Any]:
    """
    Validate option names, folding the ``color_precision`` alias into
    ``channel_precision``. ``None`` values are dropped so defaults apply.
    """
    options = dict(options)
    if "color_precision" in options:
        legacy = options.pop("color_precision")
        warnings.warn(
            "color_precision is deprecated. Use channel_precision instead.",
            DeprecationWarning,
            stacklevel=3,
        )
        if options.get("channel_precision") is None:
            options["channel_precision"] = legacy

    unknown = set(options) - _OPTION_NAMES
    if unknown:
        raise TypeError(f"Unknown color option(s): {', '.join(sorted(unknown))}")

    return {
        key: value for key, value in options.items()
        if value is not None or key == "alpha"
    }
