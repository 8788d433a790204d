"""Margins, padding and graphic styles for shapes."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, TypeVar

from .color import Color, ColorWriter
from .ops import OperationKeys, OperationWriter
from .primitives import PaintMode
from .shapes import paint_mode_for

T = TypeVar("T")


def add_two_optional(a: Optional[T], b: Optional[T]) -> Optional[T]:
    """Add two optional values, treating a missing one as absent."""
    if a is None:
        return b
    if b is None:
        return a
    return a + b


@dataclass(frozen=True)
class Margin:
    """Space outside an element, per side; unset sides are ``None``."""

    left: Optional[float] = None
    right: Optional[float] = None
    top: Optional[float] = None
    bottom: Optional[float] = None

    @classmethod
    def new(cls, left, right, top, bottom):
        return cls(left=left, right=right, top=top, bottom=bottom)

    @classmethod
    def all(cls, value):
        """The same value on every side."""
        return cls(left=value, right=value, top=value, bottom=value)

    @classmethod
    def horizontal(cls, value):
        """The same value on the left and the right."""
        return cls(left=value, right=value)

    @classmethod
    def left_and_right(cls, left, right):
        return cls(left=left, right=right)

    @classmethod
    def vertical(cls, value):
        """The same value on the top and the bottom."""
        return cls(top=value, bottom=value)

    def horizontal_value(self):
        """Left plus right, or ``None`` when neither is set."""
        return add_two_optional(self.left, self.right)

    def horizontal_or_default(self, default):
        value = self.horizontal_value()
        return default if value is None else value

    def vertical_value(self):
        """Top plus bottom, or ``None`` when neither is set."""
        return add_two_optional(self.top, self.bottom)

    def vertical_or_default(self, default):
        value = self.vertical_value()
        return default if value is None else value

    def as_tuple(self) -> tuple:
        """``(left, right, top, bottom)`` with unset sides as ``None``."""
        return (self.left, self.right, self.top, self.bottom)

    def resolved(self) -> tuple:
        """``(left, right, top, bottom)`` with unset sides as zero."""
        return tuple(0.0 if value is None else value for value in self.as_tuple())


@dataclass(frozen=True)
class Padding:
    """Space inside an element, per side; unset sides are ``None``."""

    left: Optional[float] = None
    right: Optional[float] = None
    top: Optional[float] = None
    bottom: Optional[float] = None

    @classmethod
    def new(cls, left, right, top, bottom):
        return cls(left=left, right=right, top=top, bottom=bottom)

    @classmethod
    def all(cls, value):
        """The same value on every side."""
        return cls(left=value, right=value, top=value, bottom=value)

    @classmethod
    def horizontal(cls, value):
        """The same value on the left and the right."""
        return cls(left=value, right=value)

    @classmethod
    def left_and_right(cls, left, right):
        return cls(left=left, right=right)

    @classmethod
    def vertical(cls, value):
        """The same value on the top and the bottom."""
        return cls(top=value, bottom=value)

    def horizontal_value(self):
        """Left plus right, or ``None`` when neither is set."""
        return add_two_optional(self.left, self.right)

    def vertical_value(self):
        """Top plus bottom, or ``None`` when neither is set."""
        return add_two_optional(self.top, self.bottom)


def _write_style(
    writer: OperationWriter,
    line_width: Optional[float],
    outline_color: Optional[Color],
    fill_color: Optional[Color],
) -> None:
    if line_width is not None:
        writer.add_operation(OperationKeys.SET_LINE_WIDTH, [line_width])
    ColorWriter(outline_color=outline_color, fill_color=fill_color).write(writer)


@dataclass(frozen=True)
class GraphicStyles:
    """Line width and colours applied to graphics."""

    line_width: Optional[float] = None
    fill_color: Optional[Any] = None
    outline_color: Optional[Any] = None

    def paint_mode(self) -> Optional[PaintMode]:
        """The paint mode implied by the colours that are set."""
        return paint_mode_for(self.fill_color is not None, self.outline_color is not None)

    def write(self, writer: OperationWriter) -> None:
        _write_style(writer, self.line_width, self.outline_color, self.fill_color)


@dataclass(frozen=True)
class PartialGraphicStyles:
    """Style overrides to lay over a full :class:`GraphicStyles`."""

    line_width: Optional[float] = None
    fill_color: Optional[Any] = None
    outline_color: Optional[Any] = None

    def is_empty(self) -> bool:
        return self.line_width is None and self.fill_color is None and self.outline_color is None

    def merge_with_full(self, full: GraphicStyles) -> GraphicStyles:
        """``full`` with every field set here replaced; ``full`` itself if nothing is set."""
        if self.is_empty():
            return full
        overrides = {
            name: value
            for name, value in (
                ("line_width", self.line_width),
                ("fill_color", self.fill_color),
                ("outline_color", self.outline_color),
            )
            if value is not None
        }
        return replace(full, **overrides)

    def write(self, writer: OperationWriter) -> None:
        _write_style(writer, self.line_width, self.outline_color, self.fill_color)