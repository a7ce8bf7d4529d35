"""
Core Models Package

Immutable data models for the document engine.

All models in this package are frozen dataclasses. An edit never mutates
an element in place: the store swaps in a new instance. History snapshots
and catalog slots can therefore hold elements without fear that a later
live edit rewrites what they captured.
"""

from .geometry import MIN_ELEMENT_SIZE, Box, Dimension, Position
from .styles import (
    Casing,
    DataType,
    ElementFormat,
    LeaderStyle,
    ListStyle,
    ShapeStyle,
    ShapeType,
    TableColumn,
    TableSettings,
    TextStyle,
    TocSettings,
)
from .elements import (
    CanvasElement,
    DataFieldContent,
    ElementKind,
    ImageContent,
    QRCodeContent,
    ShapeContent,
    TableContent,
    TextContent,
    TocListContent,
    payload_type_for,
)

__all__ = [
    "MIN_ELEMENT_SIZE",
    "Box",
    "Dimension",
    "Position",
    "Casing",
    "DataType",
    "ElementFormat",
    "LeaderStyle",
    "ListStyle",
    "ShapeStyle",
    "ShapeType",
    "TableColumn",
    "TableSettings",
    "TextStyle",
    "TocSettings",
    "CanvasElement",
    "DataFieldContent",
    "ElementKind",
    "ImageContent",
    "QRCodeContent",
    "ShapeContent",
    "TableContent",
    "TextContent",
    "TocListContent",
    "payload_type_for",
]
