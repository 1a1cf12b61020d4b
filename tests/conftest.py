import pytest

from colorati.colors import Colorati
from colorati.types import ColorConfig

# Base color whose vectors are checked throughout the suite
BASE_CHANNELS = (241, 240, 145)
BASE_ALPHA = 64 / 255


@pytest.fixture
def base_color():
    return Colorati(BASE_CHANNELS, BASE_ALPHA)


@pytest.fixture
def computed_alpha_color():
    return Colorati(BASE_CHANNELS, BASE_ALPHA, ColorConfig(alpha=True))


@pytest.fixture
def manual_alpha_color():
    return Colorati(BASE_CHANNELS, BASE_ALPHA, ColorConfig(alpha=0.65))
