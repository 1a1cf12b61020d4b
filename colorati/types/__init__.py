from .color_types import ColorSpace, to_color_space, is_array_space
from .config import AlphaMode, ColorConfig
from .format_type import RepresentationKind

__all__ = [
    "ColorSpace",
    "to_color_space",
    "is_array_space",
    "AlphaMode",
    "ColorConfig",
    "RepresentationKind",
]
