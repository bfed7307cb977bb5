from typing import Callable, Dict, Tuple, Union

from ..types.color_types import ColorSpace, ChannelTuple, as_color_space, num_channels
from .to_rgb import hsv_to_unit_rgb, hsl_to_unit_rgb, cmyk_to_unit_rgb
from .to_hsv import unit_rgb_to_hsv, hsl_to_hsv
from .to_hsl import unit_rgb_to_hsl, hsv_to_hsl
from .to_cmyk import unit_rgb_to_cmyk

ConvertFn = Callable[..., ChannelTuple]

# Direct conversions; anything missing goes through RGB.
CONVERT_DIRECT: Dict[Tuple[ColorSpace, ColorSpace], ConvertFn] = {
    (ColorSpace.RGB, ColorSpace.HSV): unit_rgb_to_hsv,
    (ColorSpace.RGB, ColorSpace.HSL): unit_rgb_to_hsl,
    (ColorSpace.RGB, ColorSpace.CMYK): unit_rgb_to_cmyk,
    (ColorSpace.HSV, ColorSpace.RGB): hsv_to_unit_rgb,
    (ColorSpace.HSL, ColorSpace.RGB): hsl_to_unit_rgb,
    (ColorSpace.CMYK, ColorSpace.RGB): cmyk_to_unit_rgb,
    (ColorSpace.HSV, ColorSpace.HSL): hsv_to_hsl,
    (ColorSpace.HSL, ColorSpace.HSV): hsl_to_hsv,
}


def _convert_core(color: ChannelTuple, fs: ColorSpace, ts: ColorSpace) -> ChannelTuple:
    key = (fs, ts)
    if key in CONVERT_DIRECT:
        return CONVERT_DIRECT[key](*color)
    rgb = CONVERT_DIRECT[(fs, ColorSpace.RGB)](*color)
    return CONVERT_DIRECT[(ColorSpace.RGB, ts)](*rgb)


def convert(
    color: ChannelTuple,
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
) -> ChannelTuple:
    """
    Convert unit channel values between color spaces.

    Hue channels are in degrees, every other channel is in [0, 1]. Alpha is
    not part of the channel tuple.

    Args:
        color: Channel values in ``from_space``
        from_space: Source color space
        to_space: Target color space

    Returns:
        Tuple of channel values in ``to_space``
    """
    fs = as_color_space(from_space)
    ts = as_color_space(to_space)
    if len(color) != num_channels[fs]:
        raise ValueError(f"{fs.value} expects {num_channels[fs]} channels, got {len(color)}")
    if fs == ts:
        return tuple(float(c) for c in color)  # No conversion needed
    return tuple(float(c) for c in _convert_core(tuple(color), fs, ts))
