from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..types.format_type import HUE_360
from .color_base import ColorBase


class ColorHSV(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = ColorSpace.HSV
    maxima: ClassVar[Tuple[float, float, float]] = (HUE_360, 1.0, 1.0)
