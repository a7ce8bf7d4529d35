"""
Module: catalog.assembly

Purpose:
    Plan the pages of an exported catalog: which section renders on each
    page, against which data row, and what the TOC lists with which page
    numbers.

Key Functions:
    - plan_catalog(): Main planning function

Algorithm:
    1. Cover page when the cover slot is non-empty
    2. Dry-run TOC pagination to learn how many pages the TOC takes
    3. Number product pages after the TOC; when chapter covers are on, a
       group change inserts a chapter page (only if its design has
       elements) before the product
    4. Paginate the TOC again with the final page numbers
    5. Back cover when the back slot is non-empty

Dependencies:
    - layout: TOC pagination and leader text
    - data.binding: Per-row element resolution

Used By:
    - Export collaborators (rendering is out of scope here)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from doculoom.core.models import CanvasElement, ElementKind, TocSettings
from doculoom.data.binding import ResolvedElement, resolve_elements
from doculoom.data.source import RowDataSource
from doculoom.layout.config import CONTAINER_PADDING, TocMetrics
from doculoom.layout.leaders import format_toc_line
from doculoom.layout.models import TocEntry, TocPage
from doculoom.layout.paginator import paginate_toc

from .models import CatalogSlots, SectionSlot, SectionType

logger = logging.getLogger(__name__)

DEFAULT_TITLE_FIELD = "Name"

# Gap between TOC columns
COLUMN_GAP = 24


@dataclass(frozen=True)
class PlannedPage:
    """
    One page of the exported catalog.

    Attributes:
        number: 1-based page number in the final document
        section: Section the page is rendered from
        background_color: Page background
        elements: Visible elements resolved for this page's row
        row_index: Data row rendered on the page (product and chapter pages)
        group: Group value (chapter pages)
        toc_page: Rows of the TOC on this page (TOC pages)
        toc_lines: Text of each TOC row with leaders and page numbers
    """
    number: int
    section: SectionType
    background_color: str
    elements: Tuple[ResolvedElement, ...] = ()
    row_index: Optional[int] = None
    group: Optional[str] = None
    toc_page: Optional[TocPage] = None
    toc_lines: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CatalogPlan:
    """
    Page plan of a whole catalog.

    Example:
        >>> plan = plan_catalog(slots, source)
        >>> [p.section.value for p in plan.pages][:2]
        ['cover', 'toc']
    """
    pages: Tuple[PlannedPage, ...]
    toc_pages: Tuple[TocPage, ...] = ()
    page_map: Tuple[TocEntry, ...] = ()
    warnings: List[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)


def _toc_element(slots: CatalogSlots) -> Optional[CanvasElement]:
    return slots.sections[SectionType.TOC].find(ElementKind.TOC_LIST)


def _chapter_design(slots: CatalogSlots, group: Optional[str]) -> SectionSlot:
    if group is None:
        return slots.sections[SectionType.CHAPTER]
    return slots.chapter_design_for(group)


def _row_entries(source: RowDataSource, title_field: str, group_field: Optional[str]) -> List[TocEntry]:
    return [
        TocEntry(
            label=row.get(title_field) or f"Product {i + 1}",
            group=(row.get(group_field) or None) if group_field else None,
        )
        for i, row in enumerate(source.rows)
    ]


def _column_width(toc: CanvasElement, settings: TocSettings) -> float:
    columns = settings.column_count
    inner = toc.dimension.width - CONTAINER_PADDING - COLUMN_GAP * (columns - 1)
    return max(0.0, inner / columns)


def _toc_lines(page: TocPage, toc: CanvasElement, settings: TocSettings, column_width: float) -> Tuple[str, ...]:
    style = toc.payload.text_style
    lines = []
    for row in page.rows:
        if row.is_header:
            lines.append(row.text)
            continue
        target = row.entry.target if settings.show_page_numbers else None
        lines.append(format_toc_line(
            row.text, target, column_width,
            font_size=style.font_size, font_name=style.font_family, style=settings.leader_style,
        ))
    return tuple(lines)


def plan_catalog(
    slots: CatalogSlots,
    source: Optional[RowDataSource] = None,
    *,
    column_width: Optional[float] = None,
) -> CatalogPlan:
    """
    Plan every page of a catalog export.

    Args:
        slots: Final section slots (live section already written back)
        source: Product rows; None gives a catalog without products
        column_width: TOC column width for leader text (derived from the
            TOC element when omitted)

    Returns:
        CatalogPlan with pages numbered from 1
    """
    source = source or RowDataSource([])
    sections = slots.sections
    pages: List[PlannedPage] = []
    warnings: List[str] = []

    def add_page(section: SectionType, slot: SectionSlot, row_index: Optional[int] = None, **kwargs) -> None:
        row = source.rows[row_index] if row_index is not None else None
        pages.append(PlannedPage(
            number=len(pages) + 1,
            section=section,
            background_color=slot.background_color,
            elements=tuple(resolve_elements(slot.elements, row)),
            row_index=row_index,
            **kwargs,
        ))

    # Cover
    if not sections[SectionType.COVER].is_empty:
        add_page(SectionType.COVER, sections[SectionType.COVER])

    # TOC settings
    toc = _toc_element(slots)
    settings = toc.payload.toc_settings if toc is not None else None
    title_field = (toc.data_binding if toc is not None else None) or DEFAULT_TITLE_FIELD
    group_field = settings.group_by_field if settings is not None else None
    chapters = settings is not None and settings.chapters_active
    grouped = bool(group_field)

    entries = _row_entries(source, title_field, group_field)
    metrics = TocMetrics.from_element(toc) if toc is not None else None
    toc_page_count = paginate_toc(entries, metrics, grouped=grouped).page_count if metrics else 0

    # Page numbers of products (and chapter pages) after the TOC
    next_number = len(pages) + toc_page_count + 1
    page_map: List[TocEntry] = []
    current_group: Optional[str] = None
    for entry in entries:
        if chapters and entry.group != current_group:
            current_group = entry.group
            if not _chapter_design(slots, entry.group).is_empty:
                next_number += 1
        page_map.append(TocEntry(entry.label, entry.group, next_number))
        next_number += 1

    # TOC pages
    toc_pages: Tuple[TocPage, ...] = ()
    if toc is not None:
        layout = paginate_toc(page_map, metrics, grouped=grouped)
        warnings.extend(layout.warnings)
        toc_pages = layout.pages
        width = column_width if column_width is not None else _column_width(toc, settings)
        for toc_page in toc_pages:
            add_page(
                SectionType.TOC, sections[SectionType.TOC],
                toc_page=toc_page,
                toc_lines=_toc_lines(toc_page, toc, settings, width),
            )

    # Products, with chapter dividers on group change
    current_group = None
    for i, entry in enumerate(entries):
        if chapters and entry.group != current_group:
            current_group = entry.group
            design = _chapter_design(slots, entry.group)
            if not design.is_empty:
                add_page(SectionType.CHAPTER, design, i, group=entry.group)
        add_page(SectionType.PRODUCT, sections[SectionType.PRODUCT], i, group=entry.group)

    # Back cover
    if not sections[SectionType.BACK].is_empty:
        add_page(SectionType.BACK, sections[SectionType.BACK])

    plan = CatalogPlan(pages=tuple(pages), toc_pages=toc_pages, page_map=tuple(page_map), warnings=warnings)
    logger.info(
        f"Planned catalog: {plan.page_count} pages, {len(toc_pages)} TOC, {len(entries)} products"
    )
    return plan
