from __future__ import annotations
from typing import Union
from .color_base import ColorBase, build_registry
from .rgb import ColorRGB
from .hsv import ColorHSV
from .hsl import ColorHSL
from .cmyk import ColorCMYK
from ..types.color_types import ColorSpace, as_color_space

space_to_class: dict[ColorSpace, type[ColorBase]] = build_registry(
    ColorRGB,
    ColorHSV,
    ColorHSL,
    ColorCMYK,
)


def get_color_class(color_space: Union[ColorSpace, str]) -> type[ColorBase]:
    return space_to_class[as_color_space(color_space)]


def color_convert(self: ColorBase, to_space: Union[ColorSpace, str, None] = None) -> ColorBase:
    """
    Convert this color to a different color space.

    Args:
        to_space: Target color space (e.g., "rgb", "hsv", "hsl", "cmyk").
            Defaults to the current space.

    Returns:
        New ColorBase instance in the target space, same alpha
    """
    cls = get_color_class(to_space or self.mode)
    if cls is type(self):
        return self
    return cls(self)


ColorBase.convert = color_convert


TRANSPARENT = ColorRGB((0.0, 0.0, 0.0), alpha=0.0)
BLACK = ColorRGB((0.0, 0.0, 0.0))
WHITE = ColorRGB((1.0, 1.0, 1.0))
