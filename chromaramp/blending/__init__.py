"""
Color blending primitives used by gradients.

Every blend is performed per channel (alpha included) in a chosen color
space; the strategy for each space lives in ``BLENDERS``.
"""

from .interp import lerp, catmull_rom
from .blend import (
    ChannelBlender,
    BLENDERS,
    get_blender,
    blend,
    blend4,
    linear_blend,
    cubic_blend,
)

__all__ = [
    'lerp',
    'catmull_rom',
    'ChannelBlender',
    'BLENDERS',
    'get_blender',
    'blend',
    'blend4',
    'linear_blend',
    'cubic_blend',
]
