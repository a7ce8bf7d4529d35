"""
Module: layout.paginator

Purpose:
    Split TOC entries into pages that fit the TOC container. The same
    computation runs for the interactive preview and for export, so it is
    pure and deterministic.

Key Functions:
    - paginate_toc(): Main pagination function
    - group_entries(): Bucket entries by group in first-seen order

Algorithm:
    Greedy, one pass:
    1. Grouped: for each group emit a header row, then its item rows
    2. Before a row that would not fit the current page, start a new page
       (a header therefore never ends a page it cannot share with items)
    3. A new page is never started while the current one is empty
    4. Empty input still gives one empty page

Dependencies:
    - layout.models: TocEntry, TocRow, TocPage, TocLayoutResult
    - layout.config: TocMetrics

Used By:
    - catalog.assembly: TOC pages of an exported catalog
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence

from .config import TocMetrics
from .models import UNGROUPED_LABEL, RowKind, TocEntry, TocLayoutResult, TocPage, TocRow

logger = logging.getLogger(__name__)


def group_entries(entries: Iterable[TocEntry]) -> Dict[str, List[TocEntry]]:
    """
    Bucket entries by group key, preserving first-seen group order.

    Entries without a group share the ``Uncategorized`` bucket.
    """
    groups: Dict[str, List[TocEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.group or UNGROUPED_LABEL, []).append(entry)
    return groups


def paginate_toc(
    entries: Sequence[TocEntry],
    metrics: TocMetrics,
    *,
    grouped: bool = False,
) -> TocLayoutResult:
    """
    Partition TOC entries into pages.

    The first page loses the title height; every page's capacity is
    multiplied by the column count.

    Args:
        entries: Index entries in display order
        metrics: Container geometry and row heights
        grouped: Emit a header row per group when True

    Returns:
        TocLayoutResult with at least one page

    Example:
        >>> result = paginate_toc([], TocMetrics(container_height=600))
        >>> result.page_count, result.pages[0].is_empty
        (1, True)
    """
    pages: List[TocPage] = []
    warnings: List[str] = []

    rows: List[TocRow] = []
    used = 0.0
    capacity = metrics.first_page_capacity

    def flush() -> None:
        nonlocal rows, used, capacity
        if not rows:
            return
        pages.append(TocPage(index=len(pages), rows=tuple(rows), height_used=used, capacity=capacity))
        rows = []
        used = 0.0
        capacity = metrics.page_capacity

    def place(row: TocRow) -> None:
        nonlocal used
        if used + row.height > capacity:
            flush()
        if not rows and row.height > capacity:
            message = (
                f"TOC {row.kind} {row.text!r} overflows page {len(pages)}: "
                f"{row.height:.1f} needed, {capacity:.1f} available"
            )
            logger.warning(message)
            warnings.append(message)
        rows.append(row)
        used += row.height

    if grouped:
        for title, members in group_entries(entries).items():
            place(TocRow(RowKind.HEADER, title, metrics.header_height))
            for entry in members:
                place(TocRow(RowKind.ITEM, entry.label, metrics.item_height, entry))
    else:
        for entry in entries:
            place(TocRow(RowKind.ITEM, entry.label, metrics.item_height, entry))

    flush()
    if not pages:
        pages.append(TocPage(index=0, rows=(), height_used=0.0, capacity=metrics.first_page_capacity))

    logger.debug(f"Paginated {len(entries)} TOC entries onto {len(pages)} page(s)")
    return TocLayoutResult(pages=tuple(pages), warnings=warnings)
