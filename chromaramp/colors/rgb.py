from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class ColorRGB(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    maxima: ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
