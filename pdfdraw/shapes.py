"""Higher-level shapes: painted and outlined rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Optional

from .geometry import Position, Size
from .ops import OperationWriter
from .primitives import (
    PaintMode,
    PathConstructionOperators,
    PathPaintOperationKeys,
    Polygon,
    StraightLine,
    WindingOrder,
)


def paint_mode_for(has_fill_color: bool, has_outline_color: bool) -> Optional[PaintMode]:
    """The paint mode implied by which colours a style sets, if any."""
    if has_fill_color and has_outline_color:
        return PaintMode.FILL_STROKE
    if has_fill_color:
        return PaintMode.FILL
    if has_outline_color:
        return PaintMode.STROKE
    return None


def _as_position(value) -> Position:
    return value if isinstance(value, Position) else Position(*value)


def _as_size(value) -> Size:
    return value if isinstance(value, Size) else Size(*value)


def _round_half_away(value: float) -> int:
    magnitude = int(math.floor(abs(value) + 0.5))
    return -magnitude if value < 0 else magnitude


def _corner_points(position: Position, size: Size) -> list:
    left, top = position.x, position.y
    right, bottom = left + size.width, top - size.height
    return [
        Position(left, top),
        Position(right, top),
        Position(right, bottom),
        Position(left, bottom),
    ]


@dataclass(frozen=True)
class PaintedRect:
    """A rectangle painted with a ``re`` path and a paint operator."""

    position: Position = field(default_factory=Position)
    size: Size = field(default_factory=Size)
    winding_order: WindingOrder = WindingOrder.NON_ZERO
    paint_mode: PaintMode = PaintMode.FILL

    @classmethod
    def from_coords(cls, x: float, y: float, width: float, height: float) -> "PaintedRect":
        """A rectangle with its lower-left corner at ``(x, y)``."""
        return cls(position=Position(x, y), size=Size(width, height))

    def with_mode(self, mode: PaintMode) -> "PaintedRect":
        return replace(self, paint_mode=mode)

    def with_winding_order(self, order: WindingOrder) -> "PaintedRect":
        return replace(self, winding_order=order)

    @classmethod
    def new_rectangle(cls, width: float, height: float, center_point: Position) -> "PaintedRect":
        """A rectangle centred on ``center_point``."""
        position = Position(center_point.x - width / 2, center_point.y - height / 2)
        return cls(position=position, size=Size(width, height))

    @classmethod
    def new_square(cls, size: float, center_point: Position) -> "PaintedRect":
        """A square centred on ``center_point``."""
        return cls.new_rectangle(size, size, center_point)

    def write(self, writer: OperationWriter) -> None:
        writer.add_operation(
            PathConstructionOperators.PATH_RECTANGLE,
            [self.position.x, self.position.y, self.size.width, self.size.height],
        )
        writer.add_operation(self.paint_mode.operation_key(self.winding_order), [])
        writer.add_operation(PathPaintOperationKeys.PATH_PAINT_END, [])


@dataclass(frozen=True)
class RectangleStyle:
    """Corner radii for a rectangle."""

    top_left_radius: Optional[float] = None
    top_right_radius: Optional[float] = None
    bottom_left_radius: Optional[float] = None
    bottom_right_radius: Optional[float] = None


@dataclass(frozen=True)
class OutlineRect:
    """A rectangle drawn only as an outline."""

    position: Position = field(default_factory=Position)
    size: Size = field(default_factory=Size)

    @classmethod
    def new_from_bottom_left(cls, position, size) -> "OutlineRect":
        """Accepts positions and sizes or ``(a, b)`` tuples."""
        return cls(position=_as_position(position), size=_as_size(size))

    @classmethod
    def from_wh(cls, width: float, height: float) -> "OutlineRect":
        return cls(size=Size(width, height))

    @classmethod
    def from_size(cls, size: Size) -> "OutlineRect":
        return cls(size=_as_size(size))

    @classmethod
    def new_square(cls, size: float, center_point: Position) -> "OutlineRect":
        """A square centred on ``center_point``."""
        position = Position(center_point.x - size / 2, center_point.y - size / 2)
        return cls(position=position, size=Size(size, size))

    def media_box(self) -> "OutlineRect":
        return self

    def lower_left(self) -> Position:
        return self.position

    def upper_right(self) -> Position:
        return Position(self.position.x + self.size.width, self.position.y + self.size.height)

    def to_array(self) -> list:
        """``[x, y, width, height]`` rounded to whole numbers."""
        return [_round_half_away(value) for value in self.to_operands()]

    def to_operands(self) -> list:
        return [self.position.x, self.position.y, self.size.width, self.size.height]

    def to_straight_line(self) -> StraightLine:
        """A closed line through the corners, starting at ``position``."""
        start, *points = _corner_points(self.position, self.size)
        return StraightLine(start=start, points=points, is_closed=True)

    def to_polygon(self) -> Polygon:
        ring = [(point, False) for point in _corner_points(self.position, self.size)]
        return Polygon(rings=[ring], mode=PaintMode.FILL, winding_order=WindingOrder.NON_ZERO)

    def write(self, writer: OperationWriter) -> None:
        self.to_straight_line().write(writer)