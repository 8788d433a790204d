"""Content-stream operations and the writer that collects them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


@dataclass(frozen=True)
class Name:
    """A PDF name object such as ``/OC``."""

    value: str

    def __str__(self) -> str:
        return f"/{self.value}"


@dataclass
class Operation:
    """A single content-stream operator with its operands."""

    operator: str
    operands: list[Any] = field(default_factory=list)


class OperationKeys(str, Enum):
    """General content-stream operators."""

    SAVE_GRAPHICS_STATE = "q"
    RESTORE_GRAPHICS_STATE = "Q"
    SET_LINE_WIDTH = "w"
    CURRENT_TRANSFORMATION_MATRIX = "cm"
    PAINT_XOBJECT = "Do"
    BEGIN_LAYER = "BDC"
    BEGIN_MARKED_CONTENT = "BMC"
    END_SECTION = "EMC"


OperationKey = Union[Enum, str]


def _operator_of(key: OperationKey) -> str:
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


@dataclass
class OperationWriter:
    """Accumulates operations for a page's content stream."""

    operations: list[Operation] = field(default_factory=list)
    layers: list[Any] = field(default_factory=list)

    def add_operation(self, key: OperationKey, operands) -> None:
        """Append an operation with the given operands."""
        self.operations.append(Operation(_operator_of(key), list(operands)))

    def push_empty_op(self, key: OperationKey) -> None:
        """Append an operation that takes no operands."""
        self.operations.append(Operation(_operator_of(key), []))

    def save_graphics_state(self) -> None:
        self.push_empty_op(OperationKeys.SAVE_GRAPHICS_STATE)

    def restore_graphics_state(self) -> None:
        self.push_empty_op(OperationKeys.RESTORE_GRAPHICS_STATE)

    def start_layer(self, layer_id) -> None:
        """Begin an optional-content layer; close it with :meth:`end_section`."""
        self.layers.append(layer_id)
        self.add_operation(OperationKeys.BEGIN_LAYER, [Name("OC"), layer_id])

    def begin_marked_content(self, section_name) -> None:
        """Begin a marked-content section; close it with :meth:`end_section`."""
        if isinstance(section_name, bytes):
            section_name = section_name.decode("latin-1")
        self.add_operation(OperationKeys.BEGIN_MARKED_CONTENT, [Name(str(section_name))])

    def end_section(self) -> None:
        """End a layer or a marked-content section."""
        self.push_empty_op(OperationKeys.END_SECTION)