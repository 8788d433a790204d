# pdfdraw

`pdfdraw` builds the list of operators that goes inside a PDF page's
content stream. You describe what should be drawn: lines, curves,
rectangles, colours, line widths, groups of items and transformation
matrices. Each object then writes its operations, such as `m`, `l`, `re`,
`RG` and `cm`, into an `OperationWriter`.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `pdfdraw.ops` provides `Name` (a PDF name such as `/OC`), `Operation` (an operator with its operands), the `OperationKeys` operators and `OperationWriter`. The writer collects operations in order. It also has helpers for `q`/`Q`, optional-content layers (`start_layer`) and marked-content sections (`begin_marked_content`). Both kinds of section are closed with `end_section`.
- `pdfdraw.geometry` provides `Position` and `Size` in points. Both support `+` and `-`, and a `Size` can also subtract a `(width, height)` tuple. `Size` has scaling, `landscape` and `top_left_point`. `Position.invert_from_page_size` flips the y axis. The module also has `Rotation` and `points_to_operands`.
- `pdfdraw.ctm` provides `CurTransMat`, which you build with `identity`, `position`, `rotate`, `scale` or `raw`. Transforms combine with `*` or with `product`. `write_transforms` combines a sequence of transforms and writes it as a single `cm` operation.
- `pdfdraw.color` provides the colour types `Rgb`, `Cmyk`, `Greyscale` and `SpotColor`, the preset colours `RED_RGB` to `GRAY_RGB`, the `ColorOperations` operators and `ColorWriter`. `ColorWriter` writes the outline (stroke) colour first and the fill colour second. For images, `ColorSpace.from_color_type` and `ColorBits.from_color_type` map a `ColorType` to a PDF colour space and a bit depth. Both raise `UnsupportedImageColorType` for types they cannot map.
- `pdfdraw.primitives` provides `PathPaintOperationKeys` and `PathConstructionOperators`, `PaintMode` (whose `operation_key` picks the paint operator for a `WindingOrder`), `Polygon`, `StraightLine` and `Line`. A `Line` is made of segments: `PointTo`, `V1Bezier`, `V2Bezier` and `ThreePointBezier`. `line_point` converts a `Position`, or a pair or triple of positions, into one of these segments.
- `pdfdraw.shapes` provides `PaintedRect`, which is written as `re`, then a paint operator, then `n`. It also provides `OutlineRect`, which is written as a closed stroked path. `OutlineRect.to_array` gives `[x, y, width, height]` rounded to integers, for use as a media box. The module also has `RectangleStyle` and `paint_mode_for`.
- `pdfdraw.styles` provides `GraphicStyles` (line width, fill colour and outline colour) and `PartialGraphicStyles`, whose `merge_with_full` lays overrides on top of a full style. It also provides `Margin`, `Padding` and `add_two_optional`.
- `pdfdraw.group` provides `GraphicsGroup`, which writes several items inside one graphics state and can optionally be named as a marked-content section.
- `pdfdraw.blank` provides `BlankSpace`, which reserves room in a layout. Its `calculate_size` returns the set size if there is one, then the minimum size, and otherwise an empty size.

## Example

```python
from pdfdraw.ops import OperationWriter
from pdfdraw.geometry import Position, Size
from pdfdraw.primitives import StraightLine
from pdfdraw.shapes import OutlineRect
from pdfdraw.styles import GraphicStyles
from pdfdraw.group import GraphicsGroup
from pdfdraw.color import Rgb

group = GraphicsGroup.from_items([
    StraightLine.from_points([Position(10, 10), Position(100, 10)], False),
    OutlineRect.new_from_bottom_left(Position(20, 200), Size(50, 30)),
]).with_styles(GraphicStyles(line_width=2.0, outline_color=Rgb(1.0, 0.0, 0.0)))

writer = OperationWriter()
group.write(writer)
for operation in writer.operations:
    print(operation.operator, operation.operands)
```

The group opens with a `q`, sets its styles once, and closes with a `Q`. Inside
that outer pair, every item is wrapped in its own `q` … `Q` pair. Adding
anything other than a line, rectangle or group raises `TypeError`.

## Transformation matrices

```python
from pdfdraw.ctm import CurTransMat, product
from pdfdraw.geometry import Position

matrix = product([
    CurTransMat.position(Position(10, 10)),
    CurTransMat.rotate(90),
    CurTransMat.scale(2, 2),
])
print(matrix.to_operands())
```

Transforms are multiplied in the order given, starting from the identity.
The result is a raw transform with six numbers `a b c d e f`.

## What it does not do

The package only produces operations: Python objects with an operator
string and a list of numbers and `Name` operands.

It does not:

- serialise those operations to bytes;
- assemble pages or documents, or write PDF files;
- manage fonts, text or images.

Writing a `SpotColor` raises `UnsupportedColorError`. ICC profiles attached
to colours are logged as an error and otherwise ignored.