"""Path primitives: straight lines, curved lines, polygons and paint modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Union

from .geometry import Position, points_to_operands
from .ops import OperationWriter


class WindingOrder(Enum):
    """Rule used to decide which areas of a path are inside it."""

    EVEN_ODD = "even_odd"
    NON_ZERO = "non_zero"


class PathPaintOperationKeys(str, Enum):
    """Operators that paint, clip or end the current path."""

    STROKE_CLOSE = "s"
    STROKE = "S"
    FILL_NON_ZERO = "f"
    FILL_EVEN_ODD = "f*"
    FILL_STROKE_NON_ZERO = "B"
    FILL_STROKE_EVEN_ODD = "B*"
    FILL_STROKE_CLOSE_NON_ZERO = "b"
    FILL_STROKE_CLOSE_EVEN_ODD = "b*"
    CLIP_NON_ZERO = "W"
    CLIP_EVEN_ODD = "W*"
    PATH_PAINT_END = "n"


class PathConstructionOperators(str, Enum):
    """Operators that build up the current path."""

    PATH_MOVE_TO = "m"
    PATH_LINE_TO = "l"
    BEZIER_CURVE_TWO_V1 = "v"
    BEZIER_CURVE_TWO_V2 = "y"
    BEZIER_CURVE_FOUR = "c"
    PATH_RECTANGLE = "re"


class PaintMode(Enum):
    """How a constructed path is painted."""

    CLIP = "clip"
    FILL = "fill"
    STROKE = "stroke"
    FILL_STROKE = "fill_stroke"

    def operation_key(self, winding_order: WindingOrder) -> PathPaintOperationKeys:
        """The paint operator for this mode under ``winding_order``."""
        if self is PaintMode.STROKE:
            return PathPaintOperationKeys.STROKE
        even_odd = winding_order is WindingOrder.EVEN_ODD
        if self is PaintMode.CLIP:
            return (
                PathPaintOperationKeys.CLIP_EVEN_ODD
                if even_odd
                else PathPaintOperationKeys.CLIP_NON_ZERO
            )
        if self is PaintMode.FILL:
            return (
                PathPaintOperationKeys.FILL_EVEN_ODD
                if even_odd
                else PathPaintOperationKeys.FILL_NON_ZERO
            )
        return (
            PathPaintOperationKeys.FILL_STROKE_EVEN_ODD
            if even_odd
            else PathPaintOperationKeys.FILL_STROKE_NON_ZERO
        )


@dataclass
class Polygon:
    """A set of rings; each point carries whether it is a bezier control point."""

    rings: list = field(default_factory=list)
    mode: PaintMode = PaintMode.FILL
    winding_order: WindingOrder = WindingOrder.NON_ZERO


def _as_position(value) -> Position:
    if isinstance(value, Position):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        return Position(*value)
    raise TypeError(f"cannot use {value!r} as a position")


def _finish_stroke(writer: OperationWriter, is_closed: bool) -> None:
    writer.push_empty_op(
        PathPaintOperationKeys.STROKE_CLOSE if is_closed else PathPaintOperationKeys.STROKE
    )


@dataclass
class StraightLine:
    """A polyline from ``start`` through ``points``."""

    start: Position = field(default_factory=Position)
    points: list = field(default_factory=list)
    is_closed: bool = False

    @classmethod
    def from_points(cls, points: Iterable, is_closed: bool = False) -> "StraightLine":
        """Build a line whose first point is the start."""
        positions = [_as_position(point) for point in points]
        if not positions:
            raise ValueError("a line needs at least one point")
        start, *rest = positions
        return cls(start=start, points=rest, is_closed=is_closed)

    def write(self, writer: OperationWriter) -> None:
        """Emit the path and stroke it; a line with no points emits nothing."""
        if not self.points:
            return
        writer.add_operation(PathConstructionOperators.PATH_MOVE_TO, self.start.to_operands())
        for point in self.points:
            writer.add_operation(PathConstructionOperators.PATH_LINE_TO, point.to_operands())
        _finish_stroke(writer, self.is_closed)


@dataclass(frozen=True)
class PointTo:
    """A straight segment to ``point``."""

    point: Position = field(default_factory=Position)

    def to_operation(self) -> tuple:
        return PathConstructionOperators.PATH_LINE_TO, self.point.to_operands()


@dataclass(frozen=True)
class V1Bezier:
    """A cubic bezier using the ``v`` operator."""

    start: Position
    end: Position

    def to_operation(self) -> tuple:
        return (
            PathConstructionOperators.BEZIER_CURVE_TWO_V1,
            points_to_operands([self.start, self.end]),
        )


@dataclass(frozen=True)
class V2Bezier:
    """A cubic bezier using the ``y`` operator."""

    start: Position
    end: Position

    def to_operation(self) -> tuple:
        return (
            PathConstructionOperators.BEZIER_CURVE_TWO_V2,
            points_to_operands([self.start, self.end]),
        )


@dataclass(frozen=True)
class ThreePointBezier:
    """A cubic bezier with two control points, using the ``c`` operator."""

    start: Position
    end: Position
    new_control: Position

    def to_operation(self) -> tuple:
        return (
            PathConstructionOperators.BEZIER_CURVE_FOUR,
            points_to_operands([self.start, self.new_control, self.end]),
        )


LinePoint = Union[PointTo, V1Bezier, V2Bezier, ThreePointBezier]
_LINE_POINT_TYPES = (PointTo, V1Bezier, V2Bezier, ThreePointBezier)


def line_point(value) -> LinePoint:
    """Convert a position, a pair or a triple of positions into a line point."""
    if isinstance(value, _LINE_POINT_TYPES):
        return value
    if isinstance(value, Position):
        return PointTo(value)
    if isinstance(value, tuple) and all(isinstance(item, Position) for item in value):
        if len(value) == 2:
            return V1Bezier(*value)
        if len(value) == 3:
            return ThreePointBezier(*value)
    raise TypeError(f"cannot use {value!r} as a line point")


@dataclass
class Line:
    """A path from ``start`` through straight and curved segments."""

    start: Position = field(default_factory=Position)
    points: list = field(default_factory=list)
    is_closed: bool = False

    def __post_init__(self) -> None:
        self.points = [line_point(point) for point in self.points]

    @classmethod
    def from_straight_line(cls, line: StraightLine) -> "Line":
        return cls(
            start=line.start,
            points=[PointTo(point) for point in line.points],
            is_closed=line.is_closed,
        )

    def write(self, writer: OperationWriter) -> None:
        """Emit the path and stroke it; a line with no points emits nothing."""
        if not self.points:
            return
        writer.add_operation(PathConstructionOperators.PATH_MOVE_TO, self.start.to_operands())
        for point in self.points:
            key, operands = point.to_operation()
            writer.add_operation(key, operands)
        _finish_stroke(writer, self.is_closed)