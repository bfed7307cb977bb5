from typing import Tuple
from .to_hsv import unit_rgb_to_hsv
# No dependencies


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 360)   (0 for achromatic colors)
        s ∈ [0, 1]
        l ∈ [0, 1]
    """
    h, _, v = unit_rgb_to_hsv(r, g, b)
    m = min(r, g, b)
    l = (v + m) / 2

    if v == m:
        s = 0.0
    else:
        s = (v - m) / (1 - abs(2 * l - 1))
    return h, s, l


def hsv_to_hsl(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSV to HSL. Hue passes through unchanged."""
    l = v * (1 - s / 2)
    if l == 0 or l == 1:
        s_l = 0.0
    else:
        s_l = (v - l) / min(l, 1 - l)
    return h, s_l, l
