import logging

import pytest

from pdfdraw.color import (
    RED_RGB,
    ColorBits,
    ColorSpace,
    ColorType,
    ColorWriter,
    Cmyk,
    Greyscale,
    Rgb,
    SpotColor,
    UnsupportedColorError,
    UnsupportedImageColorType,
    get_color_profile,
    has_color_profile,
)
from pdfdraw.ops import Name, Operation, OperationWriter


def test_rgb_operands():
    assert Rgb(0.1, 0.2, 0.3).to_operands() == [0.1, 0.2, 0.3]


def test_cmyk_operands():
    assert Cmyk(0.1, 0.2, 0.3, 0.4).to_operands() == [0.1, 0.2, 0.3, 0.4]


def test_greyscale_operands():
    assert Greyscale(0.25).to_operands() == [0.25]


def test_outline_written_before_fill():
    writer = OperationWriter()
    ColorWriter(outline_color=Rgb(0.1, 0.2, 0.3), fill_color=Rgb(0.4, 0.5, 0.6)).write(writer)
    assert writer.operations == [
        Operation("RG", [0.1, 0.2, 0.3]),
        Operation("rg", [0.4, 0.5, 0.6]),
    ]


def test_greyscale_and_cmyk_operators():
    writer = OperationWriter()
    ColorWriter(outline_color=Greyscale(0.3), fill_color=Cmyk(0.1, 0.2, 0.3, 0.4)).write(writer)
    assert [op.operator for op in writer.operations] == ["G", "k"]

    writer = OperationWriter()
    ColorWriter(outline_color=Cmyk(0.1, 0.2, 0.3, 0.4), fill_color=Greyscale(0.3)).write(writer)
    assert [op.operator for op in writer.operations] == ["K", "g"]


def test_empty_writer_writes_nothing():
    writer = OperationWriter()
    ColorWriter().write(writer)
    assert writer.operations == []


def test_spot_color_is_unsupported():
    writer = OperationWriter()
    with pytest.raises(UnsupportedColorError):
        ColorWriter(fill_color=SpotColor(0.1, 0.2, 0.3, 0.4)).write(writer)


def test_color_profile_logged_but_written(caplog):
    writer = OperationWriter()
    with caplog.at_level(logging.ERROR):
        ColorWriter(fill_color=Rgb(0.1, 0.2, 0.3, icc_profile="profile-1")).write(writer)
    assert writer.operations == [Operation("rg", [0.1, 0.2, 0.3])]
    assert "profile-1" in caplog.text


def test_color_profile_helpers():
    assert has_color_profile(Greyscale(0.5, "profile-1"))
    assert get_color_profile(Cmyk(0.1, 0.2, 0.3, 0.4, "profile-2")) == "profile-2"
    assert not has_color_profile(RED_RGB)
    assert get_color_profile(SpotColor(0.1, 0.2, 0.3, 0.4)) is None


@pytest.mark.parametrize(
    "color_type, space",
    [
        (ColorType.L8, ColorSpace.GREYSCALE),
        (ColorType.L16, ColorSpace.GREYSCALE),
        (ColorType.LA8, ColorSpace.GREYSCALE_ALPHA),
        (ColorType.LA16, ColorSpace.GREYSCALE_ALPHA),
        (ColorType.RGB8, ColorSpace.RGB),
        (ColorType.RGB16, ColorSpace.RGB),
        (ColorType.RGBA8, ColorSpace.RGBA),
        (ColorType.RGBA16, ColorSpace.RGBA),
    ],
)
def test_color_space_from_color_type(color_type, space):
    assert ColorSpace.from_color_type(color_type) is space


def test_color_space_pdf_names():
    assert str(ColorSpace.RGB) == "DeviceRGB"
    assert str(ColorSpace.GREYSCALE) == "DeviceGray"
    assert str(ColorSpace.CMYK) == "DeviceCMYK"
    assert str(ColorSpace.PALETTE) == "Indexed"
    assert ColorSpace.RGBA.pdf_name == ColorSpace.GREYSCALE_ALPHA.pdf_name == "DeviceN"
    assert ColorSpace.RGBA is not ColorSpace.GREYSCALE_ALPHA
    assert ColorSpace.RGB.to_operand() == Name("DeviceRGB")


def test_float_color_types_unsupported():
    with pytest.raises(UnsupportedImageColorType) as excinfo:
        ColorSpace.from_color_type(ColorType.RGB32F)
    assert excinfo.value.color_type is ColorType.RGB32F
    with pytest.raises(UnsupportedImageColorType):
        ColorBits.from_color_type(ColorType.RGBA32F)


def test_color_bits():
    assert ColorBits.from_color_type(ColorType.LA8) is ColorBits.BIT8
    assert ColorBits.from_color_type(ColorType.RGBA16) is ColorBits.BIT16
    assert int(ColorBits.BIT8) == 8
    assert int(ColorBits.BIT16) == 16