"""
Colorspace-aware color blending.

``blend`` and ``blend4`` are the primitives: a color is decomposed into its
channels in the requested space (alpha appended), the channels are
interpolated and the result is composed back. ``linear_blend`` and
``cubic_blend`` build the weighted stop-to-stop blends of a gradient on top
of them.

Cubic stop blending
-------------------
Rather than running a spline through the literal neighbour colors, the
cubic blend between stops B and C uses "phantom" control points halfway
between neighbours (``ca``, ``cm``, ``cd``), placed at the weight pivots of
their segments. The segment is split at B's weight pivot ``pm``; each half
is a Catmull-Rom curve over four of those points, first in position space
(to find where along the half we are) and then in color space.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Protocol, Union

import numpy as np
from boundednumbers.functions import clamp

from ..colors import ColorBase, get_color_class
from ..types.color_types import ColorSpace, as_color_space
from .interp import lerp, catmull_rom


class StopLike(Protocol):
    position: float
    color: ColorBase
    weight: float


@dataclass(frozen=True)
class ChannelBlender:
    """Per-channel interpolation of colors in one color space."""
    space: ColorSpace

    def decompose(self, color: ColorBase) -> np.ndarray:
        converted = color.convert(self.space)
        return np.array(converted.value + (converted.alpha,), dtype=np.float64)

    def compose(self, channels: np.ndarray, like: ColorBase) -> ColorBase:
        """Build a color from blended channels, expressed in ``like``'s space."""
        values = channels.tolist()
        color = get_color_class(self.space)(tuple(values[:-1]), alpha=values[-1])
        return color.convert(like.mode)

    def blend(self, a: ColorBase, b: ColorBase, t: float) -> ColorBase:
        return self.compose(lerp(self.decompose(a), self.decompose(b), t), like=a)

    def blend4(self, a: ColorBase, b: ColorBase, c: ColorBase, d: ColorBase, t: float) -> ColorBase:
        channels = catmull_rom(
            self.decompose(a),
            self.decompose(b),
            self.decompose(c),
            self.decompose(d),
            t,
        )
        return self.compose(channels, like=b)


BLENDERS: Dict[ColorSpace, ChannelBlender] = {
    space: ChannelBlender(space) for space in ColorSpace
}


def get_blender(space: Union[ColorSpace, str]) -> ChannelBlender:
    return BLENDERS[as_color_space(space)]


def blend(
    a: ColorBase,
    b: ColorBase,
    t: float,
    space: Union[ColorSpace, str] = ColorSpace.RGB,
) -> ColorBase:
    """
    Blend two colors channel by channel in ``space``.

    Args:
        a: Color at t=0
        b: Color at t=1
        t: Blend parameter, expected in [0, 1] but not clamped
        space: Color space to interpolate in

    Returns:
        The blended color, in the color space of ``a``
    """
    return get_blender(space).blend(a, b, t)


def blend4(
    a: ColorBase,
    b: ColorBase,
    c: ColorBase,
    d: ColorBase,
    t: float,
    space: Union[ColorSpace, str] = ColorSpace.RGB,
) -> ColorBase:
    """Catmull-Rom blend from ``b`` (t=0) to ``c`` (t=1), in the color space of ``b``."""
    return get_blender(space).blend4(a, b, c, d, t)


def _upper_half(t: float, weight: float) -> bool:
    # weight 0 has no lower half and weight 1 has no upper half
    return weight <= 0.0 or (t > weight and weight < 1.0)


def linear_blend(
    a: ColorBase,
    b: ColorBase,
    t: float,
    weight: float,
    space: Union[ColorSpace, str] = ColorSpace.RGB,
) -> ColorBase:
    """
    Blend two colors with the halfway point moved to ``weight``.

    ``t == weight`` yields the plain midpoint of ``a`` and ``b``; the two
    sides of the pivot are stretched linearly. A weight of 0.5 is the
    ordinary linear blend.
    """
    if _upper_half(t, weight):
        t = lerp(0.5, 1.0, (t - weight) / (1.0 - weight))
    else:
        t = lerp(0.0, 0.5, t / weight)
    return blend(a, b, t, space)


def cubic_blend(
    a: StopLike,
    b: StopLike,
    c: StopLike,
    d: StopLike,
    t: float,
    space: Union[ColorSpace, str] = ColorSpace.RGB,
) -> ColorBase:
    """
    Smooth blend between stops ``b`` and ``c``.

    Args:
        a: Stop before ``b`` (``b`` itself at the start of the gradient)
        b: Segment start stop
        c: Segment end stop
        d: Stop after ``c`` (``c`` itself at the end of the gradient)
        t: Relative position within the ``b`` to ``c`` segment
        space: Color space to interpolate in

    Returns:
        The blended color, in the color space of ``b``'s color
    """
    blender = get_blender(space)

    # Intermediary stops
    cb, cc = b.color, c.color
    ca = blender.blend(a.color, cb, 0.5)
    cd = blender.blend(d.color, cc, 0.5)
    cm = blender.blend(cb, cc, 0.5)
    w = b.weight
    pb, pc = b.position, c.position
    pa = lerp(a.position, pb, a.weight)
    pd = lerp(d.position, pc, c.weight)
    pm = lerp(pb, pc, w)

    if _upper_half(t, w):
        t = (t - w) / (1.0 - w)
        t = catmull_rom(pb, pm, pc, pd, t)
        t = clamp((t - pm) / (pc - pm), 0.0, 1.0)
        return blender.blend4(cb, cm, cc, cd, t)

    t /= w
    t = catmull_rom(pa, pb, pm, pc, t)
    t = clamp((t - pb) / (pm - pb), 0.0, 1.0)
    return blender.blend4(ca, cb, cm, cc, t)
