"""
Layout Package

TOC pagination and row measurement.

Public API:
    - paginate_toc: Partition entries into TOC pages
    - TocMetrics: Container geometry and row heights
    - TocEntry, TocRow, TocPage, TocLayoutResult: Layout models
    - leader_fill, format_toc_line: Leader text for TOC rows
"""

from .config import CONTAINER_PADDING, HEADER_MARGIN, ITEM_MARGIN, TITLE_MARGIN, TocMetrics
from .leaders import format_toc_line, leader_fill, text_width
from .models import UNGROUPED_LABEL, RowKind, TocEntry, TocLayoutResult, TocPage, TocRow
from .paginator import group_entries, paginate_toc

__all__ = [
    "CONTAINER_PADDING",
    "HEADER_MARGIN",
    "ITEM_MARGIN",
    "TITLE_MARGIN",
    "TocMetrics",
    "format_toc_line",
    "leader_fill",
    "text_width",
    "UNGROUPED_LABEL",
    "RowKind",
    "TocEntry",
    "TocLayoutResult",
    "TocPage",
    "TocRow",
    "group_entries",
    "paginate_toc",
]
