"""Build PDF page content operations: geometry, transformation matrices, colours, paths, shapes, styles and groups."""

__version__ = "0.1.0"