"""
Chromaramp - stop-based color gradients
=======================================

A continuous color function over [0, 1] built from weighted color stops,
with discrete, linear and cubic interpolation in RGB, HSV, HSL or CMYK and
pad, repeat or reflect handling of out-of-range positions.

Quick Start
-----------
>>> from chromaramp import Gradient, Stop, ColorRGB, InterpolationMode
>>> red, blue = ColorRGB((1.0, 0.0, 0.0)), ColorRGB((0.0, 0.0, 1.0))
>>> g = Gradient([Stop(0.0, red), Stop(1.0, blue)],
...              InterpolationMode("cubic", "hsv"), spread="repeat")
>>> colors = g.render(16)

Modules
-------
- colors: immutable RGB/HSV/HSL/CMYK colors with alpha
- conversions: channel conversions between color spaces
- blending: colorspace-aware linear, weighted and cubic blends
- gradients: stops, stop sets, spread policies and the Gradient itself
"""
import logging

from .colors import (
    ColorBase,
    ColorRGB,
    ColorHSV,
    ColorHSL,
    ColorCMYK,
    TRANSPARENT,
    BLACK,
    WHITE,
)
from .conversions import convert
from .blending import blend, blend4, linear_blend, cubic_blend
from .gradients import (
    Gradient,
    InterpolationFunction,
    InterpolationMode,
    SpreadPolicy,
    map_position,
    Stop,
    StopSet,
    NormalizeMode,
)
from .types.color_types import ColorSpace
from .types.format_type import FormatType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Colors
    "ColorBase",
    "ColorRGB",
    "ColorHSV",
    "ColorHSL",
    "ColorCMYK",
    "TRANSPARENT",
    "BLACK",
    "WHITE",

    # Conversions
    "convert",
    "ColorSpace",
    "FormatType",

    # Blending
    "blend",
    "blend4",
    "linear_blend",
    "cubic_blend",

    # Gradients
    "Gradient",
    "InterpolationFunction",
    "InterpolationMode",
    "SpreadPolicy",
    "map_position",
    "Stop",
    "StopSet",
    "NormalizeMode",

    # Version
    "__version__",
]
