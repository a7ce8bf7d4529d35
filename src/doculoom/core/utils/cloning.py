"""
Structural Deep Copy

Copies elements by walking the known variant set instead of a
serialize/deserialize round-trip. Every nested model is rebuilt, so a
copy shares no object with its source, and fields that are not plain
JSON data (enums, tuples) survive unchanged.

Used by the history manager for snapshots and by the catalog manager
when seeding chapter designs or handing a slot to the live store.
"""

from __future__ import annotations

import copy
from dataclasses import replace
from typing import Callable, Iterable, List, Optional

from ..models.elements import (
    CanvasElement,
    DataFieldContent,
    ElementKind,
    ImageContent,
    QRCodeContent,
    ShapeContent,
    TableContent,
    TextContent,
    TocListContent,
)
from ..models.geometry import Dimension, Position
from ..models.styles import ElementFormat, ShapeStyle, TableSettings, TextStyle, TocSettings


def clone_text_style(style: TextStyle) -> TextStyle:
    return replace(style)


def clone_shape_style(style: ShapeStyle) -> ShapeStyle:
    return replace(style)


def clone_toc_settings(settings: TocSettings) -> TocSettings:
    return replace(
        settings,
        title_style=clone_text_style(settings.title_style),
        chapter_style=clone_text_style(settings.chapter_style),
    )


def clone_table_settings(settings: TableSettings) -> TableSettings:
    return replace(
        settings,
        columns=tuple(replace(c) for c in settings.columns),
        header_style=clone_text_style(settings.header_style),
        row_style=clone_text_style(settings.row_style),
        extra=copy.deepcopy(settings.extra),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Per-variant payload copiers
# ─────────────────────────────────────────────────────────────────────────────

def _clone_text(p: TextContent) -> TextContent:
    return TextContent(content=p.content, text_style=clone_text_style(p.text_style))


def _clone_data_field(p: DataFieldContent) -> DataFieldContent:
    return DataFieldContent(content=p.content, text_style=clone_text_style(p.text_style))


def _clone_qrcode(p: QRCodeContent) -> QRCodeContent:
    return QRCodeContent(content=p.content, qr_code_id=p.qr_code_id)


def _clone_shape(p: ShapeContent) -> ShapeContent:
    return ShapeContent(shape_type=p.shape_type, shape_style=clone_shape_style(p.shape_style))


def _clone_image(p: ImageContent) -> ImageContent:
    return ImageContent(image_src=p.image_src, is_image_field=p.is_image_field)


def _clone_toc_list(p: TocListContent) -> TocListContent:
    return TocListContent(
        text_style=clone_text_style(p.text_style),
        toc_settings=clone_toc_settings(p.toc_settings),
    )


def _clone_table(p: TableContent) -> TableContent:
    return TableContent(table_settings=clone_table_settings(p.table_settings))


_PAYLOAD_CLONERS: dict[ElementKind, Callable] = {
    ElementKind.TEXT: _clone_text,
    ElementKind.DATA_FIELD: _clone_data_field,
    ElementKind.QRCODE: _clone_qrcode,
    ElementKind.SHAPE: _clone_shape,
    ElementKind.IMAGE: _clone_image,
    ElementKind.TOC_LIST: _clone_toc_list,
    ElementKind.TABLE: _clone_table,
}


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────

def clone_element(element: CanvasElement, *, new_id: Optional[str] = None) -> CanvasElement:
    """
    Structurally copy an element.

    Args:
        element: Element to copy
        new_id: Optional id for the copy (defaults to the source id)

    Returns:
        A new CanvasElement sharing no nested model with ``element``
    """
    payload = _PAYLOAD_CLONERS[element.kind](element.payload)
    fmt: Optional[ElementFormat] = replace(element.format) if element.format else None
    return replace(
        element,
        id=new_id if new_id is not None else element.id,
        position=Position(element.position.x, element.position.y),
        dimension=Dimension(element.dimension.width, element.dimension.height),
        payload=payload,
        format=fmt,
    )


def clone_elements(elements: Iterable[CanvasElement]) -> List[CanvasElement]:
    """Copy a collection, preserving order."""
    return [clone_element(el) for el in elements]
