from typing import Tuple
# No dependencies


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSV.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 360)   (0 for achromatic colors)
        s ∈ [0, 1]
        v ∈ [0, 1]
    """
    v = max(r, g, b)
    m = min(r, g, b)
    delta = v - m

    if delta == 0:
        h = 0.0
    elif v == r:
        h = 60.0 * (((g - b) / delta) % 6)
    elif v == g:
        h = 60.0 * (((b - r) / delta) + 2)
    else:
        h = 60.0 * (((r - g) / delta) + 4)

    s = 0.0 if v == 0 else delta / v
    return h % 360.0, s, v


def hsl_to_hsv(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert HSL to HSV. Hue passes through unchanged."""
    v = l + s * min(l, 1 - l)
    s_v = 0.0 if v == 0 else 2 * (1 - l / v)
    return h, s_v, v
