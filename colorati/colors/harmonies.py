from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Tuple
import weakref

from ..conversions import hsl_degrees_to_rgb
from ..types.format_type import HUE_360

if TYPE_CHECKING:
    from .color import Colorati

# kind -> (start offset, end offset inclusive, step), in degrees
HARMONY_OFFSETS: dict[str, Tuple[int, int, int]] = {
    "analogous": (30, 150, 30),
    "clash": (90, 270, 180),
    "complement": (180, 180, 1),
    "neutral": (15, 75, 15),
    "split": (150, 210, 60),
    "tetrad": (90, 270, 90),
    "triad": (120, 240, 120),
}

_MISSING = object()


def harmony_offsets(kind: str) -> Tuple[int, ...]:
    """
    Hue offsets, in degrees, applied for a harmony kind.

    Raises:
        ValueError: if the kind is not recognized
    """
    try:
        start, end, step = HARMONY_OFFSETS[kind]
    except KeyError:
        raise ValueError(f"Unsupported harmony: {kind!r}") from None
    return tuple(range(start, end + 1, step))


class ColorHarmonies:
    """
    Colors derived from a base color by rotating its HSL hue.

    Every harmony is a tuple whose first element is the base color itself,
    followed by one color per hue offset:

    ========== ======================== ======
    harmony    offsets                  length
    ========== ======================== ======
    analogous  30, 60, 90, 120, 150     6
    neutral    15, 30, 45, 60, 75       6
    split      150, 210                 3
    triad      120, 240                 3
    tetrad     90, 180, 270             4
    clash      90, 270                  3
    complement 180                      2
    ========== ======================== ======

    Derived colors keep the base alpha and config. Each harmony is computed on
    first access and cached.
    """

    KINDS = tuple(HARMONY_OFFSETS)

    def __init__(self, base: Colorati) -> None:
        self._base_ref = weakref.ref(base)
        self._color_class = type(base)
        self._base_channels = base.base_channels
        self._raw_alpha = base.raw_alpha
        self._config = base.config
        self._hsl = tuple(base.hsl.channels)
        self._cache: dict[str, Tuple[Colorati, ...]] = {}

    @property
    def base(self) -> Colorati:
        """The origin color (rebuilt from its channels if the original was released)."""
        base = self._base_ref()
        if base is None:
            base = self._color_class(self._base_channels, self._raw_alpha, self._config)
            self._base_ref = weakref.ref(base)
        return base

    def _rotate(self, offset: int) -> Colorati:
        hue, saturation, lightness = self._hsl
        channels = hsl_degrees_to_rgb((hue + offset) % HUE_360, saturation, lightness)
        return self._color_class(channels, self._raw_alpha, self._config)

    def _harmonize(self, kind: str) -> Tuple[Colorati, ...]:
        value = self._cache.get(kind, _MISSING)
        if value is _MISSING:
            colors = (self.base, *(self._rotate(offset) for offset in harmony_offsets(kind)))
            value = self._cache.setdefault(kind, colors)
        return value

    def get(self, kind: str) -> Tuple[Colorati, ...]:
        """
        Generic accessor by harmony name.

        Raises:
            ValueError: if the kind is not recognized
        """
        return self._harmonize(kind)

    @property
    def analogous(self) -> Tuple[Colorati, ...]:
        return self._harmonize("analogous")

    @property
    def clash(self) -> Tuple[Colorati, ...]:
        return self._harmonize("clash")

    @property
    def complement(self) -> Tuple[Colorati, ...]:
        return self._harmonize("complement")

    @property
    def neutral(self) -> Tuple[Colorati, ...]:
        return self._harmonize("neutral")

    @property
    def split(self) -> Tuple[Colorati, ...]:
        return self._harmonize("split")

    @property
    def tetrad(self) -> Tuple[Colorati, ...]:
        return self._harmonize("tetrad")

    @property
    def triad(self) -> Tuple[Colorati, ...]:
        return self._harmonize("triad")

    def __iter__(self):
        return ((kind, self._harmonize(kind)) for kind in self.KINDS)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base={self.base!r})"
