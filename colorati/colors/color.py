from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from ..conversions import fractional_rgb
from ..samples.colors import name_from_rgb
from ..types.color_types import ColorSpace, RgbChannels, to_color_space
from ..types.config import ColorConfig
from ..types.format_type import LUMINANCE_COEFFICIENTS, LUMINANCE_KNEE, LUMINANCE_THRESHOLD
from .representation import ColorRepresentation

if TYPE_CHECKING:
    from .harmonies import ColorHarmonies

_MISSING = object()


def relative_luminance(red: int, green: int, blue: int) -> float:
    """W3C relative luminance of a 0-255 RGB color."""
    luminance = 0.0
    for channel, coefficient in zip(fractional_rgb(red, green, blue), LUMINANCE_COEFFICIENTS):
        if channel <= LUMINANCE_KNEE:
            linear = channel / 12.92
        else:
            linear = ((channel + 0.055) / 1.055) ** 2.4
        luminance += coefficient * linear
    return luminance


class Colorati:
    """
    A deterministic color and its views across color spaces.

    Holds the immutable base RGB channels, the raw alpha derived from the hash and
    the formatting config. Every space accessor builds its ColorRepresentation on
    first use and returns that same instance afterwards.

    >>> color = Colorati((241, 240, 145), 64 / 255)
    >>> color.rgb.css
    'rgb(241 240 145 / 1)'
    >>> color.hsl.css
    'hsl(59 77.42% 75.69% / 1)'
    """

    __slots__ = ('_base_channels', '_raw_alpha', '_config', '_cache', '_is_frozen', '__weakref__')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        base_channels: RgbChannels,
        raw_alpha: float = 1.0,
        config: Optional[ColorConfig] = None,
    ) -> None:
        if len(base_channels) != 3:
            raise ValueError(f"Expected 3 base channels, got {len(base_channels)}")
        red, green, blue = base_channels
        self._base_channels = (int(red), int(green), int(blue))
        self._raw_alpha = float(raw_alpha)
        self._config = config if config is not None else ColorConfig()
        self._cache: dict[Any, Any] = {}
        super().__setattr__('_is_frozen', True)

    def _cached(self, key: Any, compute: Callable[[], Any]) -> Any:
        value = self._cache.get(key, _MISSING)
        if value is _MISSING:
            # setdefault keeps the first instance stored if two callers race here.
            value = self._cache.setdefault(key, compute())
        return value

    def _representation(self, space: ColorSpace) -> ColorRepresentation:
        return self._cached(
            space,
            lambda: ColorRepresentation(space, self._base_channels, self._raw_alpha, self._config),
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def base_channels(self) -> RgbChannels:
        return self._base_channels

    @property
    def raw_alpha(self) -> float:
        """Alpha derived from the hash, regardless of the alpha mode."""
        return self._raw_alpha

    @property
    def alpha(self) -> float:
        """Alpha as reported by the array representations."""
        return self._config.resolve_alpha(self._raw_alpha)

    @property
    def config(self) -> ColorConfig:
        return self._config

    @property
    def ansi16(self) -> ColorRepresentation:
        """ANSI 16-color code."""
        return self._representation(ColorSpace.ANSI16)

    @property
    def ansi256(self) -> ColorRepresentation:
        """ANSI 256-color code."""
        return self._representation(ColorSpace.ANSI256)

    @property
    def cmyk(self) -> ColorRepresentation:
        return self._representation(ColorSpace.CMYK)

    @property
    def hex(self) -> ColorRepresentation:
        return self._representation(ColorSpace.HEX)

    @property
    def hsl(self) -> ColorRepresentation:
        return self._representation(ColorSpace.HSL)

    @property
    def hwb(self) -> ColorRepresentation:
        return self._representation(ColorSpace.HWB)

    @property
    def lab(self) -> ColorRepresentation:
        return self._representation(ColorSpace.LAB)

    @property
    def lch(self) -> ColorRepresentation:
        return self._representation(ColorSpace.LCH)

    @property
    def oklab(self) -> ColorRepresentation:
        return self._representation(ColorSpace.OKLAB)

    @property
    def oklch(self) -> ColorRepresentation:
        return self._representation(ColorSpace.OKLCH)

    @property
    def rgb(self) -> ColorRepresentation:
        return self._representation(ColorSpace.RGB)

    @property
    def has_dark_contrast(self) -> bool:
        """Whether text on top of this color should be dark, per the W3C luminance heuristic."""
        return self._cached(
            'dark_contrast',
            lambda: relative_luminance(*self._base_channels) >= LUMINANCE_THRESHOLD,
        )

    @property
    def harmonies(self) -> ColorHarmonies:
        """Hue-rotated sibling colors."""
        from .harmonies import ColorHarmonies

        return self._cached('harmonies', lambda: ColorHarmonies(self))

    @property
    def name(self) -> Optional[str]:
        """CSS color name with exactly this RGB value, if there is one."""
        return self._cached('name', lambda: name_from_rgb(self._base_channels))

    def get(self, space: Union[ColorSpace, str]) -> ColorRepresentation:
        """
        Generic accessor by color space.

        Raises:
            ValueError: if the space is not recognized
        """
        return self._representation(to_color_space(space))

    def clone(self, **overrides: Any) -> Colorati:
        """
        Return a color with the same base channels and raw alpha, with ``overrides``
        merged over the current options (e.g. ``clone(alpha=True)``).
        """
        return self.__class__(self._base_channels, self._raw_alpha, self._config.merge(**overrides))

    def to_json(self) -> dict[str, Union[str, int]]:
        return {space.value: self._representation(space).to_json() for space in ColorSpace}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(#{self.hex.channels}, alpha={self.alpha!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Colorati):
            return NotImplemented
        return (
            self._base_channels == other._base_channels
            and self._raw_alpha == other._raw_alpha
            and self._config == other._config
        )

    def __hash__(self) -> int:
        return hash((self._base_channels, self._raw_alpha, self._config))
