"""Blank space reserved in a layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .geometry import Position, Size


@dataclass
class BlankSpace:
    """Space left empty, e.g. for writing in by hand later. Renders nothing."""

    min_size: Optional[Size] = None
    max_size: Optional[Size] = None
    set_size: Optional[Size] = None
    position: Optional[Position] = None

    def effective_position(self) -> Position:
        """The position, or the origin when none is set."""
        return self.position if self.position is not None else Position()

    def calculate_size(self) -> Size:
        """The set size, else the minimum size, else an empty size."""
        if self.set_size is not None:
            return self.set_size
        if self.min_size is not None:
            return self.min_size
        return Size()