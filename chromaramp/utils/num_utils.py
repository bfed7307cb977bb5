from ..defaults import FUZZY_COMPARE_SCALE


def fuzzy_equal(a: float, b: float) -> bool:
    """
    Relative floating point equality.

    Two values match when their difference, scaled by FUZZY_COMPARE_SCALE,
    does not exceed the smaller magnitude. Zero only matches exact zero.
    """
    if a == b:
        return True
    return abs(a - b) * FUZZY_COMPARE_SCALE <= min(abs(a), abs(b))
