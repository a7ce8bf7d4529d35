"""
Module: data.binding

Purpose:
    Resolve bound elements against a data row at read time. Elements are
    never rewritten with row values; callers get ResolvedElement views
    for rendering and export.

Key Classes:
    - ResolvedElement: An element plus the content it displays

Key Functions:
    - resolve_content(element, row): Displayed content of one element
    - resolve_page(elements, page_index, row): Render view of one page

Dependencies:
    - data.formatter: Value formatting

Used By:
    - catalog.assembly: Product and chapter pages
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

from doculoom.core.models import CanvasElement, ElementKind

from .formatter import format_content


@dataclass(frozen=True)
class ResolvedElement:
    """An element with the content it shows for one row."""

    element: CanvasElement
    content: Optional[str]

    @property
    def id(self) -> str:
        return self.element.id

    def to_dict(self) -> dict:
        return {"id": self.element.id, "type": self.element.kind.value, "content": self.content}


def resolve_content(element: CanvasElement, row: Optional[Mapping[str, str]]) -> Optional[str]:
    """
    Content an element displays for ``row``.

    - dataField: formatted bound value, else the placeholder content
    - image: bound URL for image fields, else the element's own source
    - everything else: the element's own content
    """
    value = row.get(element.data_binding) if row and element.data_binding else None

    if element.kind is ElementKind.DATA_FIELD:
        if value:
            return format_content(value, element.format)
        return element.payload.content
    if element.kind is ElementKind.IMAGE:
        return value or element.payload.image_src
    return element.content


def resolve_page(
    elements: Iterable[CanvasElement],
    page_index: int,
    row: Optional[Mapping[str, str]] = None,
) -> List[ResolvedElement]:
    """Visible elements of one page in paint order, resolved against ``row``."""
    on_page = sorted(
        (el for el in elements if el.page_index == page_index and el.visible),
        key=lambda el: el.z_index,
    )
    return [ResolvedElement(el, resolve_content(el, row)) for el in on_page]


def resolve_elements(elements: Iterable[CanvasElement], row: Optional[Mapping[str, str]] = None) -> List[ResolvedElement]:
    """Visible elements regardless of page, in paint order."""
    visible = sorted((el for el in elements if el.visible), key=lambda el: el.z_index)
    return [ResolvedElement(el, resolve_content(el, row)) for el in visible]
