from .colors import CSS_SPEC, name_from_rgb, rgb_from_name

__all__ = ["CSS_SPEC", "name_from_rgb", "rgb_from_name"]
