"""
Stop-based Gradient
===================

A ``Gradient`` is a continuous color function over [0, 1] defined by a set
of stops. Queries outside [0, 1] are brought back with a spread policy;
colors between stops come from the selected interpolation function,
blended in the selected color space.

>>> from chromaramp import Gradient, Stop, ColorRGB
>>> g = Gradient()                      # opaque black -> opaque white
>>> g.at(0.5).value
(0.5, 0.5, 0.5)
>>> g.spread = "reflect"
>>> g.at(1.25) == g.at(0.75)
True

Gradients behave as values: ``copy()`` is cheap because copies share the
immutable stop snapshot, and every mutation replaces the snapshot instead
of editing it.
"""

from __future__ import annotations
import logging
import operator
from typing import Dict, List, Optional, Sequence, Union

import numpy as np
from PIL import Image

from ..blending import linear_blend, cubic_blend
from ..colors import ColorBase, ColorRGB, TRANSPARENT
from ..defaults import (
    DEFAULT_START_RGBA,
    DEFAULT_END_RGBA,
    DEFAULT_SPREAD,
    DEFAULT_NORMALIZE_MODE,
)
from ..types.color_types import ColorSpace
from ..types.format_type import FormatType
from ..utils import fuzzy_equal
from .interpolation import (
    InterpolationFunction,
    InterpolationInput,
    InterpolationMode,
    as_interpolation_mode,
)
from .spread import SpreadInput, SpreadPolicy, as_spread_policy, map_position
from .stops import NormalizeMode, Stop, StopSet

logger = logging.getLogger(__name__)


def _default_stops() -> StopSet:
    start = ColorRGB(DEFAULT_START_RGBA[:3], alpha=DEFAULT_START_RGBA[3])
    end = ColorRGB(DEFAULT_END_RGBA[:3], alpha=DEFAULT_END_RGBA[3])
    return StopSet([Stop(0.0, start), Stop(1.0, end)])


class Gradient:
    """
    Color gradient over [0, 1] built from stops.

    Args:
        stops: Stop list; ``None`` gives opaque black at 0.0 and opaque
            white at 1.0.
        interpolation: Interpolation function and blend space (default
            linear in RGB), or just a function name.
        spread: How positions outside [0, 1] are mapped back.
        normalize: How an explicit stop list is brought into [0, 1].
    """
    __slots__ = ('_stops', '_mode', '_spread')

    def __init__(
        self,
        stops: Optional[Sequence[Stop]] = None,
        interpolation: Optional[InterpolationInput] = None,
        spread: SpreadInput = DEFAULT_SPREAD,
        normalize: Union[NormalizeMode, str] = DEFAULT_NORMALIZE_MODE,
    ) -> None:
        if interpolation is None:
            self._mode = InterpolationMode()
        else:
            self._mode = as_interpolation_mode(interpolation)
        self._spread = as_spread_policy(spread)
        if stops is None:
            self._stops = _default_stops()
        else:
            self._stops = StopSet.from_stops(stops, normalize)

    # ------------------ STOPS ------------------
    @property
    def stops(self) -> Dict[float, Stop]:
        """Fresh ``{position: Stop}`` mapping, ascending by position."""
        return self._stops.as_dict()

    @property
    def stop_list(self) -> List[Stop]:
        return list(self._stops)

    def set_stops(
        self,
        stops: Sequence[Stop],
        normalize: Union[NormalizeMode, str] = DEFAULT_NORMALIZE_MODE,
    ) -> None:
        """Replace every stop; see ``StopSet.from_stops`` for the rules."""
        self._stops = StopSet.from_stops(stops, normalize)

    def insert_stop(self, stop: Stop) -> bool:
        """
        Insert ``stop``, replacing any stop at the same position.

        Returns False, leaving the gradient untouched, when the position is
        outside [0, 1] (NaN included).
        """
        if not isinstance(stop, Stop):
            raise TypeError(f"Expected Stop, got {type(stop).__name__}")
        if not 0.0 <= stop.position <= 1.0:
            logger.warning("Rejected stop at %r: position outside [0, 1]", stop.position)
            return False
        self._stops = self._stops.with_stop(stop)
        logger.debug("Inserted stop at %r (%d stops)", stop.position, len(self._stops))
        return True

    def remove_stop(self, position: float) -> bool:
        """Remove the stop keyed exactly at ``position``; False if there is none."""
        remaining = self._stops.without(position)
        if remaining is self._stops:
            return False
        self._stops = remaining
        logger.debug("Removed stop at %r (%d stops)", position, len(self._stops))
        return True

    # ------------------ MODES ------------------
    @property
    def interpolation_mode(self) -> InterpolationMode:
        return self._mode

    @interpolation_mode.setter
    def interpolation_mode(self, mode: InterpolationInput) -> None:
        self._mode = as_interpolation_mode(mode)

    def set_interpolation_function(self, function: Union[InterpolationFunction, str]) -> None:
        self._mode = self._mode.with_function(function)

    def set_blend_space(self, space: Union[ColorSpace, str]) -> None:
        self._mode = self._mode.with_space(space)

    @property
    def spread(self) -> SpreadPolicy:
        return self._spread

    @spread.setter
    def spread(self, spread: SpreadInput) -> None:
        self._spread = as_spread_policy(spread)

    # ------------------ QUERIES ------------------
    def at(self, position: float) -> ColorBase:
        """
        Color of the gradient at ``position``.

        An empty gradient is transparent and a single stop colors the whole
        range. A position matching a stop returns that stop's color as is.
        """
        stops = self._stops
        count = len(stops)
        if count == 0:
            return TRANSPARENT
        if count == 1:
            return stops[0].color

        pos = map_position(position, self._spread)

        # Find next stop
        index = stops.lower_bound(pos)
        if index == count:
            return stops[-1].color
        upper = stops[index]

        # Check for exact (or 'close enough') match
        if fuzzy_equal(pos, upper.position):
            return upper.color
        if index == 0:
            return upper.color

        lower = stops[index - 1]
        rpos = (pos - lower.position) / (upper.position - lower.position)

        # lower_bound can land one past a stop that is only fuzzily equal
        if fuzzy_equal(pos, lower.position):
            return lower.color

        function = self._mode.function
        space = self._mode.space

        if function is InterpolationFunction.DISCRETE:
            return lower.color if rpos < lower.weight else upper.color

        if function is InterpolationFunction.CUBIC:
            lowerlower = stops[index - 2] if index >= 2 else lower
            upperupper = stops[index + 1] if index + 1 < count else upper
            return cubic_blend(lowerlower, lower, upper, upperupper, rpos, space)

        return linear_blend(lower.color, upper.color, rpos, lower.weight, space)

    def render(self, size: int) -> List[ColorBase]:
        """
        Sample ``size`` colors evenly over [0, 1], both endpoints included.

        Raises:
            ValueError: If ``size`` is less than 2.
        """
        size = operator.index(size)
        if size < 2:
            raise ValueError(f"render needs at least 2 samples, got {size}")
        last = size - 1
        return [self.at(i / last) for i in range(size)]

    def render_array(
        self,
        size: int,
        format_type: Union[FormatType, str] = FormatType.INT,
    ) -> np.ndarray:
        """
        Render as an RGBA array of shape ``(size, 4)``.

        INT output is ``uint8``; FLOAT and PERCENTAGE output is ``float64``.
        """
        fmt = FormatType(format_type)
        rows = [color.convert(ColorSpace.RGB).to_format(fmt) for color in self.render(size)]
        dtype = np.uint8 if fmt == FormatType.INT else np.float64
        return np.array(rows, dtype=dtype)

    def to_image(self, width: int, height: int = 1) -> Image.Image:
        """Horizontal RGBA strip of the gradient, ``width`` samples wide."""
        if height < 1:
            raise ValueError(f"height must be a positive integer, got {height}")
        row = self.render_array(width, FormatType.INT)
        return Image.fromarray(np.repeat(row[np.newaxis, :, :], height, axis=0))

    # ------------------ VALUE SEMANTICS ------------------
    def copy(self) -> Gradient:
        """Independent copy; the stop snapshot is shared until either side mutates."""
        other = Gradient.__new__(Gradient)
        other._stops = self._stops
        other._mode = self._mode
        other._spread = self._spread
        return other

    __copy__ = copy

    def __deepcopy__(self, memo) -> Gradient:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gradient):
            return NotImplemented
        return (
            self._stops == other._stops
            and self._mode == other._mode
            and self._spread == other._spread
        )

    def __len__(self) -> int:
        return len(self._stops)

    def __repr__(self) -> str:
        return (
            f"Gradient(stops={self.stop_list!r}, interpolation={self._mode!r}, "
            f"spread={self._spread.value!r})"
        )
