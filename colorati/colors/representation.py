from __future__ import annotations
from typing import Any, Callable, Iterator, Optional, Tuple, Union

from ..conversions import alpha_to_hex, convert
from ..types.color_types import ColorSpace, RgbChannels, channel_names, space_kinds, to_color_space
from ..types.config import AlphaMode, ColorConfig
from ..types.format_type import RepresentationKind
from .css import CSS_FORMATTERS, format_hex

_MISSING = object()


class ColorRepresentation:
    """
    A single color-space view of a base color.

    One class serves every space; the space's kind selects the behavior:

    - ARRAY (rgb, hsl, hwb, lab, lch, oklab, oklch, cmyk): numeric channels plus a
      numeric alpha; iterates channels then alpha.
    - STRING (hex): hex digit channels plus an optional alpha byte; iterates the
      characters of the CSS string.
    - ANSI (ansi16, ansi256): a bare integer code; no channels, alpha or CSS.

    Derived values are computed on first access and cached on the instance.
    """

    __slots__ = ('_space', '_kind', '_base_channels', '_raw_alpha', '_config', '_cache', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        space: Union[ColorSpace, str],
        base_channels: RgbChannels,
        raw_alpha: float,
        config: ColorConfig,
    ) -> None:
        self._space = to_color_space(space)
        self._kind = space_kinds[self._space]
        self._base_channels = tuple(base_channels)
        self._raw_alpha = raw_alpha
        self._config = config
        self._cache: dict[str, Any] = {}
        super().__setattr__('_is_frozen', True)

    def _cached(self, key: str, compute: Callable[[], Any]) -> Any:
        value = self._cache.get(key, _MISSING)
        if value is _MISSING:
            value = self._cache.setdefault(key, compute())
        return value

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def space(self) -> ColorSpace:
        return self._space

    @property
    def kind(self) -> RepresentationKind:
        return self._kind

    @property
    def config(self) -> ColorConfig:
        return self._config

    @property
    def channels(self) -> Union[Tuple[float, ...], str, None]:
        """Channels of the color in this space (hex digits for hex, None for ANSI)."""
        if self._kind == RepresentationKind.ANSI:
            return None
        return self._cached('channels', lambda: convert(self._space, *self._base_channels))

    @property
    def alpha(self) -> Union[float, str, None]:
        """Alpha per the configured alpha mode (hex byte string for hex, None for ANSI)."""
        if self._kind == RepresentationKind.ANSI:
            return None
        if self._kind == RepresentationKind.STRING:
            if self._config.alpha_mode == AlphaMode.IGNORED:
                return None
            return alpha_to_hex(self._config.resolve_alpha(self._raw_alpha))
        return self._config.resolve_alpha(self._raw_alpha)

    @property
    def value(self) -> Union[Tuple[float, ...], str, int]:
        """Channels followed by alpha, or the ANSI code."""
        return self._cached('value', self._compute_value)

    @property
    def css(self) -> Optional[str]:
        """Canonical CSS string, or None for ANSI codes."""
        return self._cached('css', self._compute_css)

    def _compute_value(self) -> Union[Tuple[float, ...], str, int]:
        if self._kind == RepresentationKind.ANSI:
            return convert(self._space, *self._base_channels)
        if self._kind == RepresentationKind.STRING:
            return f"{self.channels}{self.alpha or ''}"
        return (*self.channels, self.alpha)

    def _compute_css(self) -> Optional[str]:
        if self._kind == RepresentationKind.ANSI:
            return None
        if self._kind == RepresentationKind.STRING:
            return format_hex(self.channels, self.alpha)
        return CSS_FORMATTERS[self._space](self.channels, self.alpha, self._config)

    # ------------------ PROTOCOLS ------------------
    def _require_sequence(self) -> None:
        if self._kind == RepresentationKind.ANSI:
            raise TypeError(f"{self._space.value} color is a scalar code and is not a sequence")

    def __iter__(self) -> Iterator[Any]:
        self._require_sequence()
        if self._kind == RepresentationKind.STRING:
            return iter(self.css)
        return iter(self.value)

    def __len__(self) -> int:
        self._require_sequence()
        if self._kind == RepresentationKind.STRING:
            return len(self.css)
        return len(self.value)

    def __getitem__(self, index):
        self._require_sequence()
        if self._kind == RepresentationKind.STRING:
            return self.css[index]
        return self.value[index]

    def __int__(self) -> int:
        if self._kind != RepresentationKind.ANSI:
            raise TypeError(f"{self._space.value} color cannot be converted to int")
        return self.value

    __index__ = __int__

    def __str__(self) -> str:
        if self._kind == RepresentationKind.ANSI:
            return str(self.value)
        return self.css

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._space.value}, {self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorRepresentation):
            return NotImplemented
        return self._space == other._space and self.value == other.value and self.css == other.css

    def __hash__(self) -> int:
        return hash((self._space, self.value, self.css))

    def to_json(self) -> Union[str, int]:
        """JSON-ready form: the CSS string, or the integer code for ANSI."""
        if self._kind == RepresentationKind.ANSI:
            return self.value
        return self.css

    def as_dict(self) -> dict[str, Any]:
        """
        Named channels, e.g. ``{"hue": ..., "saturation": ..., "lightness": ..., "alpha": ...}``.

        Hex gives ``{"hex": ..., "alpha": ...}`` and ANSI ``{"code": ...}``.
        """
        if self._kind == RepresentationKind.ANSI:
            return {"code": self.value}
        if self._kind == RepresentationKind.STRING:
            return {"hex": self.channels, "alpha": self.alpha}
        named = dict(zip(channel_names[self._space], self.channels))
        named["alpha"] = self.alpha
        return named
