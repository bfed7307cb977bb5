from typing import Tuple
# No dependencies


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """
    Convert unit RGB to CMYK.

    Black is pulled out first (k = 1 - max(r, g, b)) and the remaining
    inks are expressed relative to the non-black part, so pure black is
    (0, 0, 0, 1).
    """
    k = 1.0 - max(r, g, b)
    if k >= 1.0:
        return 0.0, 0.0, 0.0, 1.0
    denom = 1.0 - k
    c = (1.0 - r - k) / denom
    m = (1.0 - g - k) / denom
    y = (1.0 - b - k) / denom
    return c, m, y, k
