from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Union

from ..defaults import DEFAULT_INTERPOLATION_FUNCTION, DEFAULT_BLEND_SPACE
from ..types.color_types import ColorSpace, as_color_space


class InterpolationFunction(str, Enum):
    """How colors between two stops are computed."""
    DISCRETE = "discrete"
    LINEAR = "linear"
    CUBIC = "cubic"


def as_interpolation_function(function: Union[InterpolationFunction, str]) -> InterpolationFunction:
    if isinstance(function, InterpolationFunction):
        return function
    try:
        return InterpolationFunction(str(function).lower())
    except ValueError:
        raise ValueError(f"Unknown interpolation function: {function!r}") from None


@dataclass(frozen=True)
class InterpolationMode:
    """
    Interpolation function and blend color space, set independently.

    >>> InterpolationMode("cubic", "hsv")
    InterpolationMode(function=<InterpolationFunction.CUBIC: 'cubic'>, space=<ColorSpace.HSV: 'hsv'>)
    """
    function: InterpolationFunction = field(
        default_factory=lambda: InterpolationFunction(DEFAULT_INTERPOLATION_FUNCTION)
    )
    space: ColorSpace = field(default_factory=lambda: ColorSpace(DEFAULT_BLEND_SPACE))

    def __post_init__(self):
        object.__setattr__(self, 'function', as_interpolation_function(self.function))
        object.__setattr__(self, 'space', as_color_space(self.space))

    def with_function(self, function: Union[InterpolationFunction, str]) -> InterpolationMode:
        return replace(self, function=function)

    def with_space(self, space: Union[ColorSpace, str]) -> InterpolationMode:
        return replace(self, space=space)


InterpolationInput = Union[InterpolationMode, InterpolationFunction, str]


def as_interpolation_mode(mode: InterpolationInput) -> InterpolationMode:
    """
    Coerce an InterpolationMode or a bare function name to InterpolationMode.

    A function name keeps the default blend space.

    Raises:
        TypeError: For anything else.
        ValueError: For an unknown function name.
    """
    if isinstance(mode, InterpolationMode):
        return mode
    if isinstance(mode, str):
        return InterpolationMode(mode)
    raise TypeError(f"Expected InterpolationMode or function name, got {type(mode).__name__}")
