"""
Module: elements

Purpose:
    Provides CanvasElement - the positioned, stylable content node - and
    its closed set of variant payloads. The variant is a tagged union:
    ``kind`` is the discriminant and ``payload`` holds the per-variant
    data. Code dispatches on ``kind``, never on which optional fields
    happen to be present.

Key Classes:
    - ElementKind: Discriminant enum (text, shape, image, ...)
    - TextContent, DataFieldContent, QRCodeContent, ShapeContent,
      ImageContent, TocListContent, TableContent: Variant payloads
    - CanvasElement: The element itself

Key Functions:
    - payload_type_for(kind): Payload class required for a kind

Dependencies:
    - dataclasses (std)
    - .geometry, .styles

Used By:
    - editor.store: The live collection
    - core.utils.cloning / core.utils.serialization
    - catalog, guides, layout, data
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from .geometry import Box, Dimension, Position
from .styles import ElementFormat, ShapeStyle, ShapeType, TableSettings, TextStyle, TocSettings


class ElementKind(str, Enum):
    """Closed set of element variants."""
    TEXT = "text"
    SHAPE = "shape"
    IMAGE = "image"
    QRCODE = "qrcode"
    DATA_FIELD = "dataField"
    TOC_LIST = "toc-list"
    TABLE = "table"

    def __str__(self) -> str:
        return self.value


# ─────────────────────────────────────────────────────────────────────────────
# Variant payloads
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class TextContent:
    content: str = "New Text"
    text_style: TextStyle = TextStyle()


@dataclass(frozen=True, slots=True)
class DataFieldContent:
    """Placeholder text shown when no row value is available."""
    content: str = ""
    text_style: TextStyle = TextStyle(font_family="JetBrains Mono", font_size=14, font_weight=500, line_height=1.4)


@dataclass(frozen=True, slots=True)
class QRCodeContent:
    content: str = ""
    qr_code_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ShapeContent:
    shape_type: ShapeType = ShapeType.RECTANGLE
    shape_style: ShapeStyle = ShapeStyle()

    def __post_init__(self) -> None:
        if not isinstance(self.shape_type, ShapeType):
            object.__setattr__(self, "shape_type", ShapeType(self.shape_type))


@dataclass(frozen=True, slots=True)
class ImageContent:
    image_src: Optional[str] = None
    is_image_field: bool = False


@dataclass(frozen=True, slots=True)
class TocListContent:
    """TOC list: ``text_style`` styles item rows, settings hold the rest."""
    text_style: TextStyle = TextStyle(font_size=14, vertical_align="top", line_height=1.8)
    toc_settings: TocSettings = TocSettings()


@dataclass(frozen=True, slots=True)
class TableContent:
    table_settings: TableSettings = TableSettings()


ElementPayload = Union[
    TextContent, DataFieldContent, QRCodeContent, ShapeContent,
    ImageContent, TocListContent, TableContent,
]

_PAYLOAD_TYPES: dict[ElementKind, type] = {
    ElementKind.TEXT: TextContent,
    ElementKind.DATA_FIELD: DataFieldContent,
    ElementKind.QRCODE: QRCodeContent,
    ElementKind.SHAPE: ShapeContent,
    ElementKind.IMAGE: ImageContent,
    ElementKind.TOC_LIST: TocListContent,
    ElementKind.TABLE: TableContent,
}


def payload_type_for(kind: ElementKind) -> type:
    """Return the payload class a given kind must carry."""
    return _PAYLOAD_TYPES[ElementKind(kind)]


# ─────────────────────────────────────────────────────────────────────────────
# Element
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class CanvasElement:
    """
    A single positioned, styled content node (immutable).

    Mutations produce new instances (see editor.store); a history
    snapshot can therefore never be altered by later edits.

    Attributes:
        id: Unique id within the live collection
        kind: Variant discriminant
        position: Top-left corner in document units
        dimension: Size in document units (>= MIN_ELEMENT_SIZE per axis)
        payload: Variant payload; its class must match ``kind``
        rotation: Rotation in degrees
        z_index: Relative paint order (higher paints later)
        page_index: Page the element lives on (0-indexed)
        visible: Rendered when True
        locked: Protected from move/resize/align when True
        data_binding: Name of the data column resolved at read time
        aspect_ratio: Stored width/height ratio for locked resizes
        aspect_ratio_locked: Whether resizes preserve ``aspect_ratio``
        format: Display formatting applied to the bound value

    Example:
        >>> el = CanvasElement("a", ElementKind.SHAPE, Position(0, 0),
        ...                    Dimension(100, 50), ShapeContent())
        >>> el.box.right
        100
    """

    id: str
    kind: ElementKind
    position: Position
    dimension: Dimension
    payload: ElementPayload
    rotation: float = 0
    z_index: int = 0
    page_index: int = 0
    visible: bool = True
    locked: bool = False
    data_binding: Optional[str] = None
    aspect_ratio: Optional[float] = None
    aspect_ratio_locked: bool = False
    format: Optional[ElementFormat] = None

    def __post_init__(self) -> None:
        """Validate the variant tag against the payload on construction."""
        if not isinstance(self.kind, ElementKind):
            object.__setattr__(self, "kind", ElementKind(self.kind))
        expected = _PAYLOAD_TYPES[self.kind]
        if not isinstance(self.payload, expected):
            raise ValueError(
                f"{self.kind} element requires {expected.__name__} payload, "
                f"got {type(self.payload).__name__}"
            )
        if self.page_index < 0:
            raise ValueError(f"page_index must be >= 0: {self.page_index}")
        if self.aspect_ratio is not None and self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive: {self.aspect_ratio}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def box(self) -> Box:
        """Axis-aligned bounds of the element."""
        return Box.of(self.position, self.dimension)

    @property
    def text_style(self) -> Optional[TextStyle]:
        """Text style for the variants that carry one, else None."""
        return getattr(self.payload, "text_style", None)

    @property
    def content(self) -> Optional[str]:
        return getattr(self.payload, "content", None)

    @property
    def effective_ratio(self) -> float:
        """Stored aspect ratio, or the current width/height ratio."""
        return self.aspect_ratio if self.aspect_ratio else self.dimension.ratio

    # ─────────────────────────────────────────────────────────────────────────
    # Copy helpers
    # ─────────────────────────────────────────────────────────────────────────

    def moved_to(self, x: float, y: float) -> CanvasElement:
        return replace(self, position=Position(x, y))

    def resized_to(self, width: float, height: float) -> CanvasElement:
        return replace(self, dimension=Dimension(width, height))

    def with_payload(self, **changes) -> CanvasElement:
        return replace(self, payload=replace(self.payload, **changes))
