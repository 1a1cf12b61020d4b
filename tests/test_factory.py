from colorati import colorati, color_from_hash, from_name, Colorati, ColorConfig
import pytest

def test_same_value_same_color():
    first = colorati({"foo": "bar"})
    second = colorati({"foo": "bar"})
    assert first is not second
    assert first == second
    assert first.rgb.css == second.rgb.css

def test_key_order_independent():
    assert colorati({"a": 1, "b": [1, 2]}).hex.css == colorati({"b": [1, 2], "a": 1}).hex.css

def test_different_values_usually_differ():
    colors = {colorati(i).hex.value for i in range(50)}
    assert len(colors) > 45

def test_options_are_applied():
    color = colorati("abc", alpha=True, alpha_precision=3, channel_precision=4)
    assert color.config == ColorConfig(alpha=True, alpha_precision=3, channel_precision=4)
    assert color.alpha == color.raw_alpha

def test_color_precision_alias():
    with pytest.warns(DeprecationWarning):
        color = colorati("abc", color_precision=3)
    assert color.config.channel_precision == 3

def test_color_from_hash():
    color = color_from_hash(0x40F1F091, alpha=True)
    assert isinstance(color, Colorati)
    assert color.base_channels == (241, 240, 145)
    assert color.hex.css == "#F1F09140"
    assert color.hsl.css == "hsl(59 77.42% 75.69% / 0.25)"

def test_from_name():
    color = from_name("DarkOrchid", alpha=True)
    assert color.base_channels == (153, 50, 204)
    assert color.raw_alpha == 1.0
    assert color.hex.css == "#9932CCFF"
    assert color.name == "darkorchid"

def test_from_unknown_name():
    with pytest.raises(ValueError, match="Unknown color name"):
        from_name("not-a-color")
