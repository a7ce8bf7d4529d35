"""
Module: layout.config

Purpose:
    Pagination constants and the row metrics of a TOC container.
    The constants must stay equal to the ones the renderer uses to draw
    the TOC, otherwise printed page numbers drift from the preview.

Key Classes:
    - TocMetrics: Container height, column count and row heights

Dependencies:
    - dataclasses (std)

Used By:
    - layout.paginator: Page capacities and row heights
    - catalog.assembly: Metrics from the TOC element
"""

from __future__ import annotations

from dataclasses import dataclass

from doculoom.core.models import CanvasElement, ElementKind, TextStyle, TocSettings

# Total vertical padding of the TOC container (16 top + 16 bottom)
CONTAINER_PADDING = 32

# Space reserved under a shown title
TITLE_MARGIN = 10

# Space around each group header (8 above + 4 below)
HEADER_MARGIN = 12

# Safety margin per item row
ITEM_MARGIN = 2


def title_height(settings: TocSettings) -> float:
    """Height of the title block; 0 when the title is hidden."""
    if not settings.show_title:
        return 0.0
    return settings.title_style.line_box + TITLE_MARGIN


def header_height(style: TextStyle) -> float:
    return style.line_box + HEADER_MARGIN


def item_height(style: TextStyle) -> float:
    return style.line_box + ITEM_MARGIN


@dataclass(frozen=True)
class TocMetrics:
    """
    Geometry a TOC is paginated against (immutable).

    Attributes:
        container_height: Height of the TOC element
        column_count: Columns per page (1 or 2)
        title_height: Title block height on the first page (0 if hidden)
        header_height: Height of one group header row
        item_height: Height of one entry row

    Example:
        >>> metrics = TocMetrics(container_height=600, item_height=23)
        >>> metrics.page_capacity
        568
    """

    container_height: float
    column_count: int = 1
    title_height: float = 0.0
    header_height: float = 18 * 1.5 + HEADER_MARGIN
    item_height: float = 14 * 1.5 + ITEM_MARGIN

    def __post_init__(self) -> None:
        """Validate metrics on construction."""
        if self.column_count < 1:
            raise ValueError(f"column_count must be >= 1: {self.column_count}")
        if self.header_height <= 0:
            raise ValueError(f"header_height must be positive: {self.header_height}")
        if self.item_height <= 0:
            raise ValueError(f"item_height must be positive: {self.item_height}")

    @property
    def first_page_capacity(self) -> float:
        """Total row height the first page holds across its columns."""
        return (self.container_height - CONTAINER_PADDING - self.title_height) * self.column_count

    @property
    def page_capacity(self) -> float:
        """Total row height every later page holds across its columns."""
        return (self.container_height - CONTAINER_PADDING) * self.column_count

    @classmethod
    def from_element(cls, element: CanvasElement) -> TocMetrics:
        """Derive metrics from a TOC list element's size and styles."""
        if element.kind is not ElementKind.TOC_LIST:
            raise ValueError(f"Expected a toc-list element, got {element.kind}")
        settings = element.payload.toc_settings
        return cls(
            container_height=element.dimension.height,
            column_count=settings.column_count,
            title_height=title_height(settings),
            header_height=header_height(settings.chapter_style),
            item_height=item_height(element.payload.text_style),
        )
