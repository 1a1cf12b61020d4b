from colorati.colors import Colorati, ColorHarmonies, HARMONY_OFFSETS, harmony_offsets
from colorati.types import ColorConfig
import gc
import pytest
from tests.samples import samples_harmonies
from tests.conftest import BASE_CHANNELS, BASE_ALPHA

EXPECTED_LENGTHS = {
    "analogous": 6,
    "clash": 3,
    "complement": 2,
    "neutral": 6,
    "split": 3,
    "tetrad": 4,
    "triad": 3,
}

def test_harmony_channels(base_color):
    for kind, expected in samples_harmonies.items():
        colors = getattr(base_color.harmonies, kind)
        assert [c.base_channels for c in colors[1:]] == expected, kind

def test_origin_comes_first(base_color):
    for kind in ColorHarmonies.KINDS:
        colors = base_color.harmonies.get(kind)
        assert colors[0] is base_color

def test_lengths(base_color):
    for kind, length in EXPECTED_LENGTHS.items():
        assert len(base_color.harmonies.get(kind)) == length
        assert len(harmony_offsets(kind)) == length - 1
    assert set(HARMONY_OFFSETS) == set(EXPECTED_LENGTHS)

def test_triad_hex(base_color):
    assert [c.hex.css for c in base_color.harmonies.triad] == ["#F1F091", "#91F1F0", "#F091F1"]

def test_harmonies_keep_alpha_and_config(computed_alpha_color):
    for color in computed_alpha_color.harmonies.analogous:
        assert color.raw_alpha == computed_alpha_color.raw_alpha
        assert color.config == computed_alpha_color.config
        assert color.rgb.css.endswith("/ 0.25)")

def test_harmonies_are_cached(base_color):
    assert base_color.harmonies.triad is base_color.harmonies.triad
    assert base_color.harmonies.get("triad") is base_color.harmonies.triad

def test_complement_of_complement(base_color):
    complement = base_color.harmonies.complement[1]
    back = complement.harmonies.complement[1]
    assert all(abs(x - y) <= 1 for x, y in zip(back.base_channels, base_color.base_channels))

def test_grey_harmonies_stay_grey():
    black = Colorati((0, 0, 0))
    assert black.harmonies.complement[1].base_channels == (0, 0, 0)
    grey = Colorati((128, 128, 128))
    for color in grey.harmonies.analogous:
        assert color.base_channels == (128, 128, 128)

def test_unknown_harmony(base_color):
    with pytest.raises(ValueError, match="Unsupported harmony"):
        base_color.harmonies.get("square")

def test_iteration(base_color):
    kinds = [kind for kind, _ in base_color.harmonies]
    assert kinds == list(ColorHarmonies.KINDS)

def test_base_survives_release():
    harmonies = Colorati(BASE_CHANNELS, BASE_ALPHA, ColorConfig(alpha=True)).harmonies
    gc.collect()
    triad = harmonies.triad
    assert triad[0].base_channels == BASE_CHANNELS
    assert triad[0].hex.css == "#F1F09140"
