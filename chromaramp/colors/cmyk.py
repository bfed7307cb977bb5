from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class ColorCMYK(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = ColorSpace.CMYK
    maxima: ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
