"""Current transformation matrix (CTM) operations.

The CTM is derived from six numbers ``[a b c d e f]`` and transforms page
coordinates, shape sizes and rotation. Internally the six numbers are
expanded to a 4x4 matrix so transforms can be combined by multiplication.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Iterable, Tuple

from .geometry import Position
from .ops import OperationKeys, OperationWriter

logger = logging.getLogger(__name__)

Matrix = Tuple[Tuple[float, ...], ...]

_IDENTITY_COEFFICIENTS = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


class TransformKind(Enum):
    """The form in which a transform was specified."""

    POSITION = "position"
    ROTATE = "rotate"
    SCALE = "scale"
    RAW = "raw"
    IDENTITY = "identity"


def _matmul(lhs: Matrix, rhs: Matrix) -> Matrix:
    columns = list(zip(*rhs))
    return tuple(
        tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
        for row in lhs
    )


@dataclass(frozen=True)
class CurTransMat:
    """A single transformation: a translation, rotation, scale or raw matrix."""

    kind: TransformKind = TransformKind.IDENTITY
    args: tuple = ()

    @classmethod
    def identity(cls) -> "CurTransMat":
        return cls()

    @classmethod
    def position(cls, position: Position) -> "CurTransMat":
        """Translate to ``position``."""
        return cls(TransformKind.POSITION, (position,))

    @classmethod
    def rotate(cls, angle: float) -> "CurTransMat":
        """Rotate by ``angle`` degrees."""
        return cls(TransformKind.ROTATE, (float(angle),))

    @classmethod
    def scale(cls, x: float, y: float) -> "CurTransMat":
        return cls(TransformKind.SCALE, (float(x), float(y)))

    @classmethod
    def raw(cls, values: Iterable[float]) -> "CurTransMat":
        """A transform given directly as the six numbers ``a b c d e f``."""
        coefficients = tuple(float(value) for value in values)
        if len(coefficients) != 6:
            raise ValueError(
                f"a raw transformation needs 6 numbers, got {len(coefficients)}"
            )
        return cls(TransformKind.RAW, coefficients)

    def coefficients(self) -> tuple:
        """The six numbers ``(a, b, c, d, e, f)`` of this transform."""
        if self.kind is TransformKind.POSITION:
            (position,) = self.args
            return (1.0, 0.0, 0.0, 1.0, float(position.x), float(position.y))
        if self.kind is TransformKind.ROTATE:
            (angle,) = self.args
            rad = math.radians(360.0 - angle)
            cos, sin = math.cos(rad), math.sin(rad)
            return (cos, -sin, sin, cos, 0.0, 0.0)
        if self.kind is TransformKind.SCALE:
            x, y = self.args
            return (x, 0.0, 0.0, y, 0.0, 0.0)
        if self.kind is TransformKind.RAW:
            return tuple(self.args)
        return _IDENTITY_COEFFICIENTS

    def to_matrix(self) -> Matrix:
        a, b, c, d, e, f = self.coefficients()
        return (
            (a, b, 0.0, 0.0),
            (c, d, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (e, f, 0.0, 1.0),
        )

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> "CurTransMat":
        return cls.raw(
            (
                matrix[0][0],
                matrix[0][1],
                matrix[1][0],
                matrix[1][1],
                matrix[3][0],
                matrix[3][1],
            )
        )

    def to_operands(self) -> list:
        return list(self.coefficients())

    def __mul__(self, other: "CurTransMat") -> "CurTransMat":
        if not isinstance(other, CurTransMat):
            return NotImplemented
        return CurTransMat.from_matrix(_matmul(self.to_matrix(), other.to_matrix()))

    def write(self, writer: OperationWriter) -> None:
        """Emit a ``cm`` operation for this transform."""
        writer.add_operation(OperationKeys.CURRENT_TRANSFORMATION_MATRIX, self.to_operands())


def product(transforms: Iterable[CurTransMat]) -> CurTransMat:
    """Combine transforms in order, starting from the identity."""
    matrix = reduce(
        lambda acc, transform: _matmul(acc, transform.to_matrix()),
        transforms,
        CurTransMat.identity().to_matrix(),
    )
    return CurTransMat.from_matrix(matrix)


def write_transforms(transforms: Iterable[CurTransMat], writer: OperationWriter) -> None:
    """Combine transforms and emit them as one ``cm`` operation."""
    matrix = product(transforms)
    logger.debug("CTM %s", matrix)
    matrix.write(writer)