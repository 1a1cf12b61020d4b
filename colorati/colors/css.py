"""CSS Color 4 strings (space-separated channels, slash alpha) for each array space."""

from typing import Callable, Sequence

from ..types.color_types import ColorSpace
from ..types.config import ColorConfig
from ..utils.num_utils import format_fixed, format_integer, format_number

Formatter = Callable[[Sequence[float], float, ColorConfig], str]


def _css(name: str, parts: Sequence[str], alpha: float, config: ColorConfig) -> str:
    return f"{name}({' '.join(parts)} / {format_number(alpha, config.alpha_precision)})"


def _percent(value: float, config: ColorConfig) -> str:
    return f"{format_fixed(value, config.channel_precision)}%"


def _fixed(value: float, config: ColorConfig) -> str:
    return format_fixed(value, config.channel_precision)


def format_rgb(channels: Sequence[float], alpha: float, config: ColorConfig) -> str:
    return _css("rgb", [format_integer(c) for c in channels], alpha, config)


def format_hsl(channels: Sequence[float], alpha: float, config: ColorConfig) -> str:
    hue, saturation, lightness = channels
    parts = [format_integer(hue), _percent(saturation, config), _percent(lightness, config)]
    return _css("hsl", parts, alpha, config)


def format_hwb(channels: Sequence[float], alpha: float, config: ColorConfig) -> str:
    hue, whiteness, blackness = channels
    parts = [format_integer(hue), _percent(whiteness, config), _percent(blackness, config)]
    return _css("hwb", parts, alpha, config)


def _lab_like(name: str) -> Formatter:
    def formatter(channels: Sequence[float], alpha: float, config: ColorConfig) -> str:
        lightness, first, second = channels
        parts = [_percent(lightness, config), _fixed(first, config), _fixed(second, config)]
        return _css(name, parts, alpha, config)

    formatter.__name__ = f"format_{name}"
    return formatter


format_lab = _lab_like("lab")
format_lch = _lab_like("lch")
format_oklab = _lab_like("oklab")
format_oklch = _lab_like("oklch")


def format_cmyk(channels: Sequence[float], alpha: float, config: ColorConfig) -> str:
    return _css("device-cmyk", [_percent(c, config) for c in channels], alpha, config)


def format_hex(channels: str, alpha: str | None) -> str:
    return f"#{channels}{alpha or ''}"


CSS_FORMATTERS: dict[ColorSpace, Formatter] = {
    ColorSpace.CMYK: format_cmyk,
    ColorSpace.HSL: format_hsl,
    ColorSpace.HWB: format_hwb,
    ColorSpace.LAB: format_lab,
    ColorSpace.LCH: format_lch,
    ColorSpace.OKLAB: format_oklab,
    ColorSpace.OKLCH: format_oklch,
    ColorSpace.RGB: format_rgb,
}
