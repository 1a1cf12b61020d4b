from colorati.conversions import hsl_to_rgb, hsl_degrees_to_rgb, rgb_to_hsl
from tests.samples import samples_rgb_hsl

def test_hsl_degrees_to_rgb():
    for rgb, (h, s, l) in samples_rgb_hsl.items():
        assert hsl_degrees_to_rgb(h, s, l) == rgb

def test_hsl_to_rgb_fractional():
    assert hsl_to_rgb(0.0, 1.0, 0.5) == (255, 0, 0)
    assert hsl_to_rgb(1 / 3, 1.0, 0.5) == (0, 255, 0)
    assert hsl_to_rgb(2 / 3, 1.0, 0.5) == (0, 0, 255)

def test_zero_saturation_is_grey():
    # Achromatic input keeps its lightness instead of collapsing to black
    assert hsl_to_rgb(0.0, 0.0, 0.0) == (0, 0, 0)
    assert hsl_to_rgb(0.0, 0.0, 1.0) == (255, 255, 255)
    assert hsl_to_rgb(0.3, 0.0, 0.5) == (128, 128, 128)

def test_hue_wraps_around():
    assert hsl_degrees_to_rgb(360.0, 100.0, 50.0) == (255, 0, 0)
    assert hsl_degrees_to_rgb(480.0, 100.0, 50.0) == hsl_degrees_to_rgb(120.0, 100.0, 50.0)

def test_round_trip_within_one_step():
    for r in range(0, 256, 15):
        for g in range(0, 256, 15):
            for b in range(0, 256, 15):
                back = hsl_degrees_to_rgb(*rgb_to_hsl(r, g, b))
                assert all(abs(x - y) <= 1 for x, y in zip(back, (r, g, b)))
