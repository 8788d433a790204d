"""Positions, sizes and rotation in page space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class Rotation:
    """A rotation in whole degrees."""

    degrees: int = 0

    def to_operand(self) -> int:
        return self.degrees


@dataclass(frozen=True)
class Position:
    """A point measured from the bottom-left corner of the page, in points."""

    x: float = 0.0
    y: float = 0.0

    def invert_from_page_size(self, page_size: "Size") -> "Position":
        """Flip the y axis, since PDF's origin is the bottom-left corner."""
        return Position(self.x, page_size.height - self.y)

    def to_operands(self) -> list:
        return [self.x, self.y]

    def __add__(self, other: "Position") -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Position") -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x - other.x, self.y - other.y)


def points_to_operands(points: Iterable[Position]) -> list:
    """Flatten points into ``[x1, y1, x2, y2, ...]``."""
    return [coord for point in points for coord in (point.x, point.y)]


@dataclass(frozen=True)
class Size:
    """A width and height, in points."""

    width: float = 0.0
    height: float = 0.0

    def scale_width(self, scale: float) -> "Size":
        return Size(self.width * scale, self.height)

    def scale_height(self, scale: float) -> "Size":
        return Size(self.width, self.height * scale)

    def scale(self, scale_x: float, scale_y: float) -> "Size":
        return Size(self.width * scale_x, self.height * scale_y)

    def landscape(self) -> "Size":
        """Swap width and height."""
        return Size(self.height, self.width)

    def top_left_point(self) -> Position:
        return Position(0.0, self.height)

    def __iter__(self):
        yield self.width
        yield self.height

    def __add__(self, other: "Size") -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other: Union["Size", tuple]) -> "Size":
        if isinstance(other, Size):
            width, height = other.width, other.height
        elif isinstance(other, tuple) and len(other) == 2:
            width, height = other
        else:
            return NotImplemented
        return Size(self.width - width, self.height - height)