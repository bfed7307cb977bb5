from __future__ import annotations
from enum import Enum
from typing import Tuple, Union


Scalar = Union[int, float]
ScalarVector = Tuple[Scalar, ...]
ChannelTuple = Tuple[float, ...]


class ColorSpace(str, Enum):
    """Component spaces a color can be expressed and blended in."""
    RGB = "rgb"
    CMYK = "cmyk"
    HSV = "hsv"
    HSL = "hsl"


HUE_SPACES = {ColorSpace.HSV, ColorSpace.HSL}

num_channels = {
    ColorSpace.RGB: 3,
    ColorSpace.HSV: 3,
    ColorSpace.HSL: 3,
    ColorSpace.CMYK: 4,
}


def as_color_space(space: Union[ColorSpace, str]) -> ColorSpace:
    """
    Coerce a color space name or enum member to ColorSpace.

    Raises:
        ValueError: If the name is not a known color space.
    """
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {space!r}") from None

