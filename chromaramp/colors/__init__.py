"""
Chromaramp Color Classes
========================

Immutable colors in RGB, HSV, HSL and CMYK, each with an alpha channel.

>>> from chromaramp.colors import ColorRGB
>>> red = ColorRGB((1.0, 0.0, 0.0))
>>> red.convert("hsv").value
(0.0, 1.0, 1.0)
>>> ColorRGB.from_format((255, 128, 0)).to_hex()
'#ff8000'

Notes
-----
- Hue channels are in degrees [0, 360], all others and alpha in [0, 1]
- All values are clamped to maxima during initialization
- ``TRANSPARENT`` is the sentinel returned by an empty gradient
"""

from .color_base import ColorBase
from .rgb import ColorRGB
from .hsv import ColorHSV
from .hsl import ColorHSL
from .cmyk import ColorCMYK
from .color import color_convert, get_color_class, space_to_class, TRANSPARENT, BLACK, WHITE


__all__ = [
    'ColorBase',
    'ColorRGB',
    'ColorHSV',
    'ColorHSL',
    'ColorCMYK',
    'color_convert',
    'get_color_class',
    'space_to_class',
    'TRANSPARENT',
    'BLACK',
    'WHITE',
]
