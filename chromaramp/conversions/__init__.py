"""
Chromaramp Color Space Conversions
==================================

Scalar conversion utilities between RGB, HSV, HSL and CMYK. All channels are
unit floats except hue, which is in degrees.

Conversion Functions
-------------------

RGB → HSV / HSL / CMYK:
    unit_rgb_to_hsv(r, g, b)
    unit_rgb_to_hsl(r, g, b)
    unit_rgb_to_cmyk(r, g, b)

HSV / HSL / CMYK → RGB:
    hsv_to_unit_rgb(h, s, v)
    hsl_to_unit_rgb(h, s, l)
    cmyk_to_unit_rgb(c, m, y, k)

HSV ↔ HSL:
    hsv_to_hsl(h, s, v)
    hsl_to_hsv(h, s, l)

High-Level API
-------------
    convert(color, from_space, to_space)
        Universal converter; routes through RGB when no direct path exists

Examples
--------
>>> from chromaramp.conversions import convert
>>> convert((1.0, 0.0, 0.0), "rgb", "hsv")
(0.0, 1.0, 1.0)
>>> convert((0.0, 1.0, 1.0, 0.0), "cmyk", "rgb")
(1.0, 0.0, 0.0)
"""

from .to_hsv import unit_rgb_to_hsv, hsl_to_hsv
from .to_hsl import unit_rgb_to_hsl, hsv_to_hsl
from .to_cmyk import unit_rgb_to_cmyk
from .to_rgb import hsv_to_unit_rgb, hsl_to_unit_rgb, cmyk_to_unit_rgb
from .wrapper import convert
from ..types.color_types import ColorSpace

__all__ = [
    'unit_rgb_to_hsv',
    'unit_rgb_to_hsl',
    'unit_rgb_to_cmyk',
    'hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'cmyk_to_unit_rgb',
    'hsv_to_hsl',
    'hsl_to_hsv',
    'convert',
    'ColorSpace',
]
