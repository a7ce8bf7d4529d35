"""
Unit Tests for TOC Pagination

Tests for paginate_toc and group_entries.
"""

import pytest

from doculoom.layout import TocEntry, TocMetrics, group_entries, paginate_toc
from doculoom.layout.models import UNGROUPED_LABEL, RowKind


@pytest.fixture
def metrics():
    # 100 of usable height per page, items 20, headers 30
    return TocMetrics(container_height=132, item_height=20, header_height=30)


def _entries(n, group=None):
    return [TocEntry(f"Item {i}", group, i + 1) for i in range(n)]


class TestGroupEntries:
    """Tests for group_entries."""

    def test_group_when_mixed_then_first_seen_order(self):
        entries = [TocEntry("a", "B"), TocEntry("b", "A"), TocEntry("c", "B")]

        groups = group_entries(entries)

        assert list(groups) == ["B", "A"]
        assert [e.label for e in groups["B"]] == ["a", "c"]

    def test_group_when_no_group_then_uncategorized(self):
        groups = group_entries([TocEntry("a"), TocEntry("b", "")])

        assert list(groups) == [UNGROUPED_LABEL]


class TestPaginateToc:
    """Tests for paginate_toc."""

    def test_paginate_when_empty_then_one_empty_page(self, metrics):
        result = paginate_toc([], metrics)

        assert result.page_count == 1
        assert result.pages[0].is_empty

    def test_paginate_when_fits_then_single_page(self, metrics):
        result = paginate_toc(_entries(5), metrics)

        assert result.page_count == 1
        assert result.pages[0].height_used == 100

    def test_paginate_when_overflow_then_every_page_within_capacity(self, metrics):
        result = paginate_toc(_entries(12), metrics)

        assert [len(p.rows) for p in result.pages] == [5, 5, 2]
        assert all(p.height_used <= p.capacity for p in result.pages)
        assert [p.index for p in result.pages] == [0, 1, 2]

    def test_paginate_when_title_shown_then_first_page_smaller(self):
        metrics = TocMetrics(container_height=132, title_height=40, item_height=20)

        result = paginate_toc(_entries(8), metrics)

        assert [len(p.rows) for p in result.pages] == [3, 5]

    def test_paginate_when_two_columns_then_capacity_doubles(self):
        metrics = TocMetrics(container_height=132, column_count=2, item_height=20)

        result = paginate_toc(_entries(10), metrics)

        assert result.page_count == 1

    def test_paginate_when_grouped_then_header_before_items(self, metrics):
        entries = _entries(1, "Lamps") + _entries(1, "Chairs")

        result = paginate_toc(entries, metrics, grouped=True)

        rows = result.pages[0].rows
        assert [r.kind for r in rows] == [RowKind.HEADER, RowKind.ITEM, RowKind.HEADER, RowKind.ITEM]
        assert rows[0].text == "Lamps"
        assert rows[1].entry.group == "Lamps"

    def test_paginate_when_header_does_not_fit_then_starts_next_page(self, metrics):
        # header (30) + 3 items (60) = 90, so header B (30) no longer fits
        entries = _entries(3, "A") + _entries(1, "B")

        result = paginate_toc(entries, metrics, grouped=True)

        first, second = result.pages
        assert [r.kind for r in first.rows] == [RowKind.HEADER] + [RowKind.ITEM] * 3
        assert second.rows[0].is_header
        assert second.rows[0].text == "B"

    def test_paginate_when_row_taller_than_page_then_placed_with_warning(self):
        metrics = TocMetrics(container_height=50, item_height=40)

        result = paginate_toc(_entries(2), metrics)

        assert result.page_count == 2
        assert len(result.warnings) == 2
        assert "overflows" in result.warnings[0]

    def test_paginate_when_deterministic_then_same_result_twice(self, metrics):
        entries = _entries(7, "A") + _entries(4, "B")

        assert paginate_toc(entries, metrics, grouped=True) == paginate_toc(entries, metrics, grouped=True)

    def test_to_rows_when_called_then_plain_records(self, metrics):
        rows = paginate_toc(_entries(1, "A"), metrics, grouped=True).to_rows()

        assert rows == [[
            {"type": "header", "text": "A"},
            {"type": "item", "text": "Item 0", "group": "A", "target": 1},
        ]]
