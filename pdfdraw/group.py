"""Groups of graphics that share one graphics state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .ops import OperationKeys, OperationWriter
from .primitives import Line, StraightLine
from .shapes import OutlineRect, PaintedRect
from .styles import GraphicStyles


@dataclass
class GraphicsGroup:
    """Graphic items written inside one saved graphics state.

    Each item is still wrapped in its own save/restore pair, but the group's
    styles are set once for all of them.
    """

    styles: Optional[GraphicStyles] = None
    items: list = field(default_factory=list)
    section_name: Optional[str] = None

    def __post_init__(self) -> None:
        items, self.items = self.items, []
        self.add_from_iter(items)

    @classmethod
    def from_items(cls, items: Iterable) -> "GraphicsGroup":
        return cls(items=list(items))

    def add_from_iter(self, items: Iterable) -> None:
        for item in items:
            self.add_item(item)

    def with_styles(self, styles: GraphicStyles) -> "GraphicsGroup":
        self.styles = styles
        return self

    def add_item(self, item) -> None:
        if not isinstance(item, _GRAPHIC_ITEM_TYPES):
            raise TypeError(f"{type(item).__name__} is not a graphic item")
        self.items.append(item)

    def write(self, writer: OperationWriter) -> None:
        if self.section_name is not None:
            writer.begin_marked_content(self.section_name)
        writer.add_operation(OperationKeys.SAVE_GRAPHICS_STATE, [])
        if self.styles is not None:
            self.styles.write(writer)
        for item in self.items:
            writer.add_operation(OperationKeys.SAVE_GRAPHICS_STATE, [])
            item.write(writer)
            writer.add_operation(OperationKeys.RESTORE_GRAPHICS_STATE, [])
        writer.add_operation(OperationKeys.RESTORE_GRAPHICS_STATE, [])
        if self.section_name is not None:
            writer.end_section()


_GRAPHIC_ITEM_TYPES = (StraightLine, Line, PaintedRect, OutlineRect, GraphicsGroup)