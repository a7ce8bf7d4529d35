"""
Module: editor.factories

Purpose:
    Constructors for new elements with the default sizes and styles of
    each variant. Factories do not snap, assign z-order or choose a page;
    ElementStore.add does that when the element is inserted.

Key Functions:
    - new_element_id(): Random id for new elements
    - create_text_element, create_shape_element, create_qrcode_element,
      create_data_field_element, create_image_field_element,
      create_image_element, create_toc_element, create_table_element

Dependencies:
    - uuid (std)
    - data.images: Natural size of image files (Pillow)

Used By:
    - Callers building documents (UI layer, tests)
    - catalog.manager: Default TOC element for new catalogs
"""

from __future__ import annotations

import re
import uuid
from pathlib import Path
from typing import Optional, Union

from doculoom.core.models import (
    CanvasElement,
    DataFieldContent,
    Dimension,
    ElementKind,
    ImageContent,
    Position,
    QRCodeContent,
    ShapeContent,
    ShapeStyle,
    ShapeType,
    TableColumn,
    TableContent,
    TableSettings,
    TextContent,
    TocListContent,
    TocSettings,
)
from doculoom.data.images import fit_image_dimension, read_image_size

DEFAULT_QR_CONTENT = "https://doculoom.io"

# Column names that are treated as image URLs when dropped onto a page
_IMAGE_COLUMN = re.compile(r"image|photo|picture|url|thumbnail|img|avatar|logo", re.IGNORECASE)


def new_element_id() -> str:
    """Return a fresh random element id."""
    return uuid.uuid4().hex[:12]


def _base(kind: ElementKind, x: float, y: float, width: float, height: float, payload, **kwargs) -> CanvasElement:
    return CanvasElement(
        id=kwargs.pop("id", None) or new_element_id(),
        kind=kind,
        position=Position(x, y),
        dimension=Dimension(width, height),
        payload=payload,
        **kwargs,
    )


def create_text_element(x: float, y: float, content: str = "New Text", **kwargs) -> CanvasElement:
    return _base(ElementKind.TEXT, x, y, 200, 40, TextContent(content=content), **kwargs)


def create_shape_element(
    x: float,
    y: float,
    shape_type: ShapeType = ShapeType.RECTANGLE,
    **kwargs,
) -> CanvasElement:
    shape_type = ShapeType(shape_type)
    style = ShapeStyle(corner_radius=50 if shape_type is ShapeType.CIRCLE else 4)
    return _base(ElementKind.SHAPE, x, y, 100, 100, ShapeContent(shape_type, style), **kwargs)


def create_qrcode_element(x: float, y: float, content: str = DEFAULT_QR_CONTENT, **kwargs) -> CanvasElement:
    return _base(ElementKind.QRCODE, x, y, 100, 100, QRCodeContent(content=content), **kwargs)


def create_data_field_element(x: float, y: float, column_name: str, **kwargs) -> CanvasElement:
    """A text field bound to ``column_name``; shows ``{{column}}`` until resolved."""
    return _base(
        ElementKind.DATA_FIELD, x, y, 150, 32,
        DataFieldContent(content=f"{{{{{column_name}}}}}"),
        data_binding=column_name,
        **kwargs,
    )


def create_image_field_element(x: float, y: float, column_name: str, **kwargs) -> CanvasElement:
    """An image whose source comes from ``column_name`` of the selected row."""
    return _base(
        ElementKind.IMAGE, x, y, 200, 150,
        ImageContent(is_image_field=True),
        data_binding=column_name,
        aspect_ratio_locked=True,
        **kwargs,
    )


def create_field_element(x: float, y: float, column_name: str, *, image_columns: frozenset[str] = frozenset(), **kwargs) -> CanvasElement:
    """
    Element for a column dropped onto the page.

    Columns marked as images, or whose name looks like an image column,
    become image fields; everything else becomes a data field.
    """
    if column_name in image_columns or _IMAGE_COLUMN.search(column_name):
        return create_image_field_element(x, y, column_name, **kwargs)
    return create_data_field_element(x, y, column_name, **kwargs)


def create_image_element(
    x: float,
    y: float,
    image_src: Optional[str] = None,
    *,
    image_file: Union[str, Path, bytes, None] = None,
    max_width: float = 200,
    **kwargs,
) -> CanvasElement:
    """
    An image element.

    When ``image_file`` is given its natural size seeds the element size
    (scaled to ``max_width``) and the aspect ratio.
    """
    width, height = 200.0, 150.0
    ratio = None
    if image_file is not None:
        size = read_image_size(image_file)
        if size is not None:
            dimension = fit_image_dimension(size, max_width)
            width, height = dimension.width, dimension.height
            ratio = size[0] / size[1]
    return _base(
        ElementKind.IMAGE, x, y, width, height,
        ImageContent(image_src=image_src),
        aspect_ratio=ratio,
        **kwargs,
    )


def create_toc_element(x: float, y: float, **kwargs) -> CanvasElement:
    return _base(ElementKind.TOC_LIST, x, y, 500, 600, TocListContent(toc_settings=TocSettings()), **kwargs)


def create_table_element(x: float, y: float, columns: tuple[str, ...] = (), **kwargs) -> CanvasElement:
    settings = TableSettings(
        columns=tuple(TableColumn(id=f"col{i}", header=name, data_field=name) for i, name in enumerate(columns)),
    )
    width = max(200.0, 100.0 * len(columns))
    return _base(ElementKind.TABLE, x, y, width, 120, TableContent(settings), **kwargs)
