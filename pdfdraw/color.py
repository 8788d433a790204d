"""Colours, colour operators and image colour-space mapping."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional, Union

from .ops import Name, OperationWriter

logger = logging.getLogger(__name__)


class ColorOperations(str, Enum):
    """Colour-setting content-stream operators."""

    NON_STROKING_DEVICE_RGB = "rg"
    STROKE_DEVICE_RGB = "RG"
    STROKE_DEVICE_GRAY = "G"
    NON_STROKING_DEVICE_GRAY = "g"
    STROKING_CMYK = "K"
    NON_STROKING_CMYK = "k"


@dataclass(frozen=True)
class Rgb:
    r: float
    g: float
    b: float
    icc_profile: Optional[Any] = None

    def to_operands(self) -> list:
        return [self.r, self.g, self.b]


@dataclass(frozen=True)
class Cmyk:
    c: float
    m: float
    y: float
    k: float
    icc_profile: Optional[Any] = None

    def to_operands(self) -> list:
        return [self.c, self.m, self.y, self.k]


@dataclass(frozen=True)
class Greyscale:
    """A grey level: 0 is black and 1 is white."""

    percent: float
    icc_profile: Optional[Any] = None

    def to_operands(self) -> list:
        return [self.percent]


@dataclass(frozen=True)
class SpotColor:
    c: float
    m: float
    y: float
    k: float


Color = Union[Rgb, Cmyk, Greyscale, SpotColor]

RED_RGB = Rgb(1.0, 0.0, 0.0)
GREEN_RGB = Rgb(0.0, 1.0, 0.0)
BLUE_RGB = Rgb(0.0, 0.0, 1.0)
BLACK_RGB = Rgb(0.0, 0.0, 0.0)
WHITE_RGB = Rgb(1.0, 1.0, 1.0)
GRAY_RGB = Rgb(0.5, 0.5, 0.5)


class UnsupportedColorError(NotImplementedError):
    """Raised for colours that cannot yet be written, such as spot colours."""


def has_color_profile(color: Color) -> bool:
    return get_color_profile(color) is not None


def get_color_profile(color: Color) -> Optional[Any]:
    if isinstance(color, SpotColor):
        return None
    return color.icc_profile


_STROKE_OPS = {
    Rgb: ColorOperations.STROKE_DEVICE_RGB,
    Greyscale: ColorOperations.STROKE_DEVICE_GRAY,
    Cmyk: ColorOperations.STROKING_CMYK,
}
_FILL_OPS = {
    Rgb: ColorOperations.NON_STROKING_DEVICE_RGB,
    Greyscale: ColorOperations.NON_STROKING_DEVICE_GRAY,
    Cmyk: ColorOperations.NON_STROKING_CMYK,
}


@dataclass
class ColorWriter:
    """Writes stroke (outline) and non-stroke (fill) colour operations."""

    outline_color: Optional[Color] = None
    fill_color: Optional[Color] = None

    def write(self, writer: OperationWriter) -> None:
        """Emit the outline colour first, then the fill colour."""
        for color, operators in (
            (self.outline_color, _STROKE_OPS),
            (self.fill_color, _FILL_OPS),
        ):
            if color is None:
                continue
            profile = get_color_profile(color)
            if profile is not None:
                logger.error("Color Profile not implemented yet: %r", profile)
            operator = operators.get(type(color))
            if operator is None:
                raise UnsupportedColorError(
                    f"writing {type(color).__name__} is not supported"
                )
            writer.add_operation(operator, color.to_operands())


class ColorType(Enum):
    """Pixel layouts of decoded images."""

    L8 = "L8"
    LA8 = "La8"
    RGB8 = "Rgb8"
    RGBA8 = "Rgba8"
    L16 = "L16"
    LA16 = "La16"
    RGB16 = "Rgb16"
    RGBA16 = "Rgba16"
    RGB32F = "Rgb32F"
    RGBA32F = "Rgba32F"


class UnsupportedImageColorType(ValueError):
    """Raised when an image's colour type has no PDF equivalent here."""

    def __init__(self, color_type: ColorType) -> None:
        super().__init__(f"unsupported image color type: {color_type.value}")
        self.color_type = color_type


class ColorSpace(Enum):
    """PDF colour spaces for images."""

    RGB = "rgb"
    RGBA = "rgba"
    PALETTE = "palette"
    CMYK = "cmyk"
    GREYSCALE = "greyscale"
    GREYSCALE_ALPHA = "greyscale_alpha"

    @property
    def pdf_name(self) -> str:
        return _COLOR_SPACE_NAMES[self]

    def __str__(self) -> str:
        return self.pdf_name

    def to_operand(self) -> Name:
        return Name(self.pdf_name)

    @classmethod
    def from_color_type(cls, color_type: ColorType) -> "ColorSpace":
        try:
            return _COLOR_SPACE_BY_TYPE[color_type]
        except KeyError:
            raise UnsupportedImageColorType(color_type) from None


_COLOR_SPACE_NAMES = {
    ColorSpace.RGB: "DeviceRGB",
    ColorSpace.RGBA: "DeviceN",
    ColorSpace.PALETTE: "Indexed",
    ColorSpace.CMYK: "DeviceCMYK",
    ColorSpace.GREYSCALE: "DeviceGray",
    ColorSpace.GREYSCALE_ALPHA: "DeviceN",
}

_COLOR_SPACE_BY_TYPE = {
    ColorType.L8: ColorSpace.GREYSCALE,
    ColorType.L16: ColorSpace.GREYSCALE,
    ColorType.LA8: ColorSpace.GREYSCALE_ALPHA,
    ColorType.LA16: ColorSpace.GREYSCALE_ALPHA,
    ColorType.RGB8: ColorSpace.RGB,
    ColorType.RGB16: ColorSpace.RGB,
    ColorType.RGBA8: ColorSpace.RGBA,
    ColorType.RGBA16: ColorSpace.RGBA,
}


class ColorBits(IntEnum):
    """Bits per colour component."""

    BIT8 = 8
    BIT16 = 16

    @classmethod
    def from_color_type(cls, color_type: ColorType) -> "ColorBits":
        if color_type in (ColorType.L8, ColorType.LA8, ColorType.RGB8, ColorType.RGBA8):
            return cls.BIT8
        if color_type in (ColorType.L16, ColorType.LA16, ColorType.RGB16, ColorType.RGBA16):
            return cls.BIT16
        raise UnsupportedImageColorType(color_type)