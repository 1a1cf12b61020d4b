from colorati.conversions import (
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_oklab,
    rgb_to_oklch,
    lab_to_lch,
    np_rgb_to_lab,
    np_rgb_to_oklab,
    np_lab_to_lch,
    np_linearize,
    np_rgb_to_xyz,
)
import math
import numpy as np
import pytest
from tests.samples import samples_rgb_lab, samples_rgb_oklab

def test_rgb_to_lab():
    for (r, g, b), expected in samples_rgb_lab.items():
        result = rgb_to_lab(r, g, b)
        assert result == pytest.approx(expected, abs=0.05)

def test_rgb_to_lab_base_color():
    l, a, b = rgb_to_lab(241, 240, 145)
    assert abs(l - 93.0436853170224) < 1e-9
    assert abs(a - -13.06975698470797) < 1e-9
    assert abs(b - 45.97724658066764) < 1e-9

def test_rgb_to_oklab():
    for (r, g, b), expected in samples_rgb_oklab.items():
        result = rgb_to_oklab(r, g, b)
        assert result == pytest.approx(expected, abs=0.05)

def test_rgb_to_oklab_base_color():
    l, a, b = rgb_to_oklab(241, 240, 145)
    assert abs(l - 93.54604293519239) < 1e-9
    assert abs(a - -3.615502455848202) < 1e-9
    assert abs(b - 11.164349786292306) < 1e-9

def test_scalar_results_are_python_floats():
    for value in rgb_to_lab(10, 20, 30) + rgb_to_oklch(10, 20, 30):
        assert type(value) is float

def test_lab_to_lch():
    l, c, h = lab_to_lch(50.0, 3.0, 4.0)
    assert l == 50.0
    assert c == pytest.approx(5.0)
    assert h == pytest.approx(math.degrees(math.atan2(4.0, 3.0)))

def test_lch_hue_is_positive():
    # Negative b axis gives a hue in the upper half of the circle
    _, _, h = lab_to_lch(50.0, 10.0, -10.0)
    assert h == pytest.approx(315.0)

def test_rgb_to_lch_base_color():
    l, c, h = rgb_to_lch(241, 240, 145)
    assert abs(l - 93.0436853170224) < 1e-9
    assert abs(c - 47.798804909525074) < 1e-9
    assert abs(h - 105.8686359445871) < 1e-9

def test_rgb_to_oklch_base_color():
    l, c, h = rgb_to_oklch(241, 240, 145)
    assert abs(l - 93.54604293519239) < 1e-9
    assert abs(c - 11.735184879622878) < 1e-9
    assert abs(h - 107.94421062548885) < 1e-9

def test_linearize_endpoints():
    linear = np_linearize(np.array([0, 10, 255]))
    assert linear[0] == 0.0
    assert linear[1] == pytest.approx(10 / 255 / 12.92)
    assert linear[2] == pytest.approx(1.0)

def test_numpy_matches_scalar():
    colors = np.array([[241, 240, 145], [12, 200, 33], [0, 0, 0], [255, 255, 255]])
    lab = np_rgb_to_lab(colors)
    oklab = np_rgb_to_oklab(colors)
    for i, (r, g, b) in enumerate(colors):
        assert np.allclose(lab[i], rgb_to_lab(r, g, b))
        assert np.allclose(oklab[i], rgb_to_oklab(r, g, b))
    assert np.allclose(np_lab_to_lch(lab)[0], rgb_to_lch(241, 240, 145))

def test_white_xyz_is_d65():
    xyz = np_rgb_to_xyz(np.array([255, 255, 255]))
    assert np.allclose(xyz, [95.047, 100.0, 108.883], atol=1e-3)
