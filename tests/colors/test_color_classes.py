import pytest
from chromaramp.colors import (
    ColorRGB,
    ColorHSV,
    ColorHSL,
    ColorCMYK,
    TRANSPARENT,
    BLACK,
    WHITE,
    get_color_class,
)
from chromaramp.types.color_types import ColorSpace
from chromaramp.types.format_type import FormatType


def test_values_are_clamped():
    assert ColorRGB((1.5, -0.2, 0.5)).value == (1.0, 0.0, 0.5)
    assert ColorHSV((400.0, 1.0, 1.0)).value[0] == 360.0
    assert ColorRGB((0.0, 0.0, 0.0), alpha=2.0).alpha == 1.0


def test_colors_are_immutable():
    color = ColorRGB((1.0, 0.0, 0.0))
    with pytest.raises(AttributeError):
        color._value = (0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        color.extra = 1


def test_wrong_channel_count():
    with pytest.raises(ValueError):
        ColorCMYK((0.0, 0.0, 0.0))
    with pytest.raises(ValueError):
        ColorRGB((0.0, 0.0, 0.0, 0.0))


def test_convert_keeps_alpha():
    red = ColorRGB((1.0, 0.0, 0.0), alpha=0.25)
    hsv = red.convert("hsv")
    assert isinstance(hsv, ColorHSV)
    assert hsv.value == pytest.approx((0.0, 1.0, 1.0))
    assert hsv.alpha == 0.25

    cmyk = red.convert(ColorSpace.CMYK)
    assert isinstance(cmyk, ColorCMYK)
    assert cmyk.value == pytest.approx((0.0, 1.0, 1.0, 0.0))


def test_convert_to_own_space_is_identity():
    color = ColorHSL((120.0, 0.5, 0.5))
    assert color.convert("hsl") is color


def test_construct_from_other_color():
    hsv = ColorHSV(ColorRGB((0.0, 0.0, 1.0), alpha=0.5))
    assert hsv.value == pytest.approx((240.0, 1.0, 1.0))
    assert hsv.alpha == 0.5


def test_from_format():
    assert ColorRGB.from_format((255, 0, 0)) == ColorRGB((1.0, 0.0, 0.0))
    assert ColorHSV.from_format((120, 100, 50), FormatType.PERCENTAGE).value == (120.0, 1.0, 0.5)
    assert ColorRGB.from_format((0, 0, 0), "int", alpha=0).is_transparent


def test_to_format():
    color = ColorRGB((1.0, 0.5, 0.0))
    assert color.to_format(FormatType.INT) == (255, 128, 0, 255)
    assert color.to_format("percentage") == pytest.approx((100.0, 50.0, 0.0, 100.0))
    assert ColorHSV((90.0, 0.5, 1.0)).to_format("int") == (90, 128, 255, 255)


def test_hex_and_rgba():
    assert ColorRGB((1.0, 0.0, 0.0)).to_hex() == "#ff0000"
    assert TRANSPARENT.to_hex(with_alpha=True) == "#00000000"
    assert BLACK.rgba == (0.0, 0.0, 0.0, 1.0)
    assert ColorHSV((0.0, 0.0, 1.0)).rgba == pytest.approx(WHITE.rgba)


def test_equality_and_hash():
    assert ColorRGB((1.0, 0.0, 0.0)) == ColorRGB((1, 0, 0))
    assert hash(ColorRGB((1.0, 0.0, 0.0))) == hash(ColorRGB((1, 0, 0)))
    # different spaces never compare equal
    assert ColorRGB((1.0, 0.0, 0.0)) != ColorHSV((0.0, 1.0, 1.0))
    assert ColorRGB((1.0, 0.0, 0.0)) != ColorRGB((1.0, 0.0, 0.0), alpha=0.5)


def test_with_alpha_and_sentinels():
    assert WHITE.with_alpha(0.0).is_transparent
    assert TRANSPARENT.is_transparent
    assert not BLACK.is_transparent
    assert ColorHSV((0.0, 1.0, 1.0)).has_hue
    assert not ColorCMYK((0.0, 0.0, 0.0, 0.0)).has_hue


def test_registry_lookup():
    assert get_color_class("cmyk") is ColorCMYK
    assert get_color_class(ColorSpace.HSL) is ColorHSL
    with pytest.raises(ValueError):
        get_color_class("xyz")
