"""
Unit Tests for TOC Metrics
"""

import pytest

from doculoom.core.models import TextStyle, TocSettings
from doculoom.editor.factories import create_text_element, create_toc_element
from doculoom.layout import TocMetrics
from doculoom.layout.config import header_height, item_height, title_height


class TestRowHeights:
    """Tests for the row height helpers."""

    def test_title_height_when_hidden_then_zero(self):
        assert title_height(TocSettings(show_title=False)) == 0

    def test_title_height_when_shown_then_line_box_plus_margin(self):
        settings = TocSettings(title_style=TextStyle(font_size=20, line_height=1.5))

        assert title_height(settings) == 40

    def test_header_and_item_height_when_style_given_then_margins_added(self):
        style = TextStyle(font_size=10, line_height=2)

        assert header_height(style) == 32
        assert item_height(style) == 22


class TestTocMetrics:
    """Tests for TocMetrics."""

    def test_capacity_when_title_then_only_first_page_reduced(self):
        metrics = TocMetrics(container_height=600, title_height=40)

        assert metrics.first_page_capacity == 528
        assert metrics.page_capacity == 568

    def test_capacity_when_two_columns_then_doubled(self):
        metrics = TocMetrics(container_height=600, column_count=2)

        assert metrics.page_capacity == 1136

    def test_construct_when_item_height_zero_then_raises(self):
        with pytest.raises(ValueError, match="item_height"):
            TocMetrics(container_height=600, item_height=0)

    def test_from_element_when_toc_then_sizes_from_styles(self):
        toc = create_toc_element(0, 0)

        metrics = TocMetrics.from_element(toc)

        assert metrics.container_height == 600
        assert metrics.column_count == 1
        assert metrics.item_height == pytest.approx(14 * 1.8 + 2)
        assert metrics.header_height == pytest.approx(18 * 1.5 + 12)
        assert metrics.title_height == pytest.approx(24 * 1.2 + 10)

    def test_from_element_when_not_toc_then_raises(self):
        with pytest.raises(ValueError, match="toc-list"):
            TocMetrics.from_element(create_text_element(0, 0))
