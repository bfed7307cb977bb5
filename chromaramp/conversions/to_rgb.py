# No dependencies
import math
from typing import Tuple


def normalize_hue(h: float) -> float:
    """Wrap a hue in degrees into [0, 360)."""
    return h % 360.0


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to unit RGB.

    Input:
        h in degrees (any real; wrapped into [0, 360))
        s, v ∈ [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = c, x, 0.0
    elif hue_section == 1:
        r, g, b = x, c, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, c, x
    elif hue_section == 3:
        r, g, b = 0.0, x, c
    elif hue_section == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return r + m, g + m, b + m


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to unit RGB.

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = c, x, 0.0
    elif hue_section == 1:
        r, g, b = x, c, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, c, x
    elif hue_section == 3:
        r, g, b = 0.0, x, c
    elif hue_section == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return r + m, g + m, b + m


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    """Convert CMYK to unit RGB."""
    return (1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k)
