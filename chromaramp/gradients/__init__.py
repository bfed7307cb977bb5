from .gradient import Gradient
from .interpolation import InterpolationFunction, InterpolationMode
from .spread import SpreadPolicy, map_position
from .stops import Stop, StopSet, NormalizeMode

__all__ = [
    'Gradient',
    'InterpolationFunction',
    'InterpolationMode',
    'SpreadPolicy',
    'map_position',
    'Stop',
    'StopSet',
    'NormalizeMode',
]
