"""
Spread policies: mapping an arbitrary position back into [0, 1].

PAD clamps, REPEAT wraps with period 1, REFLECT is a triangle wave with
period 2. All three are exact at integer and half-integer inputs. Infinite
positions are padded under every policy.
"""
from __future__ import annotations
import math
from enum import Enum
from typing import Union

from boundednumbers import BoundType
from boundednumbers.functions import clamp


class SpreadPolicy(str, Enum):
    PAD = "pad"
    REPEAT = "repeat"
    REFLECT = "reflect"

    @property
    def bound_type(self) -> BoundType:
        """Equivalent boundednumbers bound type."""
        return _SPREAD_TO_BOUND[self]


_SPREAD_TO_BOUND = {
    SpreadPolicy.PAD: BoundType.CLAMP,
    SpreadPolicy.REPEAT: BoundType.CYCLIC,
    SpreadPolicy.REFLECT: BoundType.BOUNCE,
}
_BOUND_TO_SPREAD = {bound: spread for spread, bound in _SPREAD_TO_BOUND.items()}

SpreadInput = Union[SpreadPolicy, BoundType, str]


def as_spread_policy(spread: SpreadInput) -> SpreadPolicy:
    """
    Coerce a spread policy, its name, or a BoundType to SpreadPolicy.

    Raises:
        ValueError: For names or bound types with no spread equivalent.
    """
    if isinstance(spread, SpreadPolicy):
        return spread
    if isinstance(spread, BoundType):
        if spread not in _BOUND_TO_SPREAD:
            raise ValueError(f"No spread policy for bound type {spread!r}")
        return _BOUND_TO_SPREAD[spread]
    try:
        return SpreadPolicy(str(spread).lower())
    except ValueError:
        raise ValueError(f"Unknown spread policy: {spread!r}") from None


def pad(position: float) -> float:
    return clamp(position, 0.0, 1.0)


def repeat(position: float) -> float:
    if math.isinf(position):
        return 1.0 if position > 0.0 else 0.0
    wrapped = math.fmod(position, 1.0)
    if wrapped < 0.0:
        wrapped += 1.0
    return wrapped


def reflect(position: float) -> float:
    if math.isinf(position):
        return 1.0 if position > 0.0 else 0.0
    folded = abs(math.fmod(position, 2.0))
    if folded > 1.0:
        folded = 2.0 - folded
    return folded


SPREAD_FUNCTIONS = {
    SpreadPolicy.PAD: pad,
    SpreadPolicy.REPEAT: repeat,
    SpreadPolicy.REFLECT: reflect,
}


def map_position(position: float, spread: SpreadInput = SpreadPolicy.PAD) -> float:
    """
    Map a raw position into [0, 1] according to ``spread``.

    Args:
        position: Any real position
        spread: Spread policy (or its name / BoundType equivalent)

    Returns:
        Position in [0, 1]
    """
    return SPREAD_FUNCTIONS[as_spread_policy(spread)](position)
