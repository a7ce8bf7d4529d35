"""
Module: layout.models

Purpose:
    Data models for TOC pagination.
    Immutable dataclasses for index entries, rows and pages.

Key Classes:
    - TocEntry: One index entry (label, group, target)
    - TocRow: A header or item row placed on a page
    - TocPage: Rows of one TOC page
    - TocLayoutResult: Pages plus diagnostics

Dependencies:
    - dataclasses (std)

Used By:
    - layout.paginator: Creates TocPages
    - catalog.assembly: Builds entries, reads pages
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

UNGROUPED_LABEL = "Uncategorized"


class RowKind(str, Enum):
    HEADER = "header"
    ITEM = "item"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TocEntry:
    """
    One index entry.

    Attributes:
        label: Text shown in the TOC
        group: Group key (None for ungrouped entries)
        target: Page reference the entry points at (page number or id)
    """
    label: str
    group: Optional[str] = None
    target: Union[int, str, None] = None


@dataclass(frozen=True)
class TocRow:
    """
    A row placed on a TOC page.

    Headers carry only ``text``; items also carry their entry.
    """
    kind: RowKind
    text: str
    height: float
    entry: Optional[TocEntry] = None

    @property
    def is_header(self) -> bool:
        return self.kind is RowKind.HEADER

    def to_dict(self) -> dict:
        d = {"type": self.kind.value, "text": self.text}
        if self.entry is not None:
            d["group"] = self.entry.group
            d["target"] = self.entry.target
        return d


@dataclass(frozen=True)
class TocPage:
    """
    Rows of one TOC page.

    Attributes:
        index: Page number within the TOC (0-indexed)
        rows: Rows in reading order (column-major when multi-column)
        height_used: Sum of row heights
        capacity: Row height the page could hold

    Example:
        >>> page = TocPage(index=0, rows=(), height_used=0, capacity=500)
        >>> page.is_empty
        True
    """
    index: int
    rows: Tuple[TocRow, ...]
    height_used: float
    capacity: float

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def items(self) -> Tuple[TocRow, ...]:
        return tuple(r for r in self.rows if not r.is_header)


@dataclass(frozen=True)
class TocLayoutResult:
    """
    Pagination output with diagnostics.

    Always holds at least one page.

    Example:
        >>> result.page_count
        2
    """
    pages: Tuple[TocPage, ...]
    warnings: list[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def row_count(self) -> int:
        return sum(len(p.rows) for p in self.pages)

    def to_rows(self) -> list[list[dict]]:
        """Plain nested lists of row records, one list per page."""
        return [[row.to_dict() for row in page.rows] for page in self.pages]
