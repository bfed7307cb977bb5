from typing import TypeVar, Union
import numpy as np

Interpolable = TypeVar('Interpolable', float, np.ndarray)


def lerp(a: Interpolable, b: Interpolable, t: Union[float, np.ndarray]) -> Interpolable:
    """Linear interpolation; ``t`` is not clamped."""
    return a + (b - a) * t


def catmull_rom(
    p0: Interpolable,
    p1: Interpolable,
    p2: Interpolable,
    p3: Interpolable,
    t: float,
) -> Interpolable:
    """
    Uniform Catmull-Rom spline through four control points.

    The curve passes through ``p1`` at t=0 and ``p2`` at t=1; ``p0`` and
    ``p3`` only shape the tangents. Works on scalars and on channel arrays.
    """
    t2 = t * t
    t3 = t2 * t
    return 0.5 * (
        2 * p1
        + (p2 - p0) * t
        + (2 * p0 - 5 * p1 + 4 * p2 - p3) * t2
        + (3 * p1 - p0 - 3 * p2 + p3) * t3
    )
