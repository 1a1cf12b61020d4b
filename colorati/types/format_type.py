# No dependencies
from enum import Enum


class RepresentationKind(str, Enum):
    ARRAY = "array"
    STRING = "string"
    ANSI = "ansi"


DEFAULT_ALPHA_PRECISION = 2
DEFAULT_CHANNEL_PRECISION = 2

# Any precision above this is treated as "do not round".
UNBOUNDED_PRECISION = 100

MAX_CHANNEL = 255
HUE_360 = 360

# W3C relative luminance
LUMINANCE_COEFFICIENTS = (0.2126, 0.7152, 0.0722)
LUMINANCE_KNEE = 0.03928
LUMINANCE_THRESHOLD = (1.05 * 0.05) ** 0.5 - 0.05
