"""
Unit Tests for Element Models

Tests for geometry primitives, styles and CanvasElement construction.
"""

import math

import pytest

from doculoom.core.models import (
    MIN_ELEMENT_SIZE,
    CanvasElement,
    Dimension,
    ElementKind,
    LeaderStyle,
    Position,
    ShapeContent,
    TextContent,
    TextStyle,
    TocSettings,
    payload_type_for,
)


class TestGeometry:
    """Tests for Position and Dimension."""

    def test_position_when_nan_then_raises_value_error(self):
        with pytest.raises(ValueError, match="finite"):
            Position(math.nan, 0)

    def test_dimension_when_infinite_then_raises_value_error(self):
        with pytest.raises(ValueError, match="finite"):
            Dimension(math.inf, 10)

    def test_floored_when_below_minimum_then_raises_each_axis(self):
        assert Dimension(3, 50).floored() == Dimension(MIN_ELEMENT_SIZE, 50)

    def test_floored_when_already_large_then_returns_same_instance(self):
        dim = Dimension(100, 100)

        assert dim.floored() is dim

    def test_translated_when_called_then_returns_new_position(self):
        assert Position(10, 20).translated(20, 20) == Position(30, 40)


class TestCanvasElement:
    """Tests for CanvasElement construction and helpers."""

    def test_construct_when_payload_mismatches_kind_then_raises(self):
        with pytest.raises(ValueError, match="requires TextContent"):
            CanvasElement("a", ElementKind.TEXT, Position(0, 0), Dimension(10, 10), ShapeContent())

    def test_construct_when_kind_is_string_then_coerced_to_enum(self):
        el = CanvasElement("a", "shape", Position(0, 0), Dimension(10, 10), ShapeContent())

        assert el.kind is ElementKind.SHAPE

    def test_construct_when_negative_page_then_raises(self):
        with pytest.raises(ValueError, match="page_index"):
            CanvasElement("a", ElementKind.SHAPE, Position(0, 0), Dimension(10, 10), ShapeContent(), page_index=-1)

    def test_box_when_read_then_reports_edges_and_centers(self):
        el = CanvasElement("a", ElementKind.SHAPE, Position(10, 20), Dimension(100, 50), ShapeContent())

        box = el.box

        assert (box.left, box.right, box.top, box.bottom) == (10, 110, 20, 70)
        assert (box.center_x, box.center_y) == (60, 45)

    def test_text_style_when_shape_then_none(self):
        el = CanvasElement("a", ElementKind.SHAPE, Position(0, 0), Dimension(10, 10), ShapeContent())

        assert el.text_style is None

    def test_effective_ratio_when_no_stored_ratio_then_uses_dimension(self):
        el = CanvasElement("a", ElementKind.TEXT, Position(0, 0), Dimension(200, 50), TextContent())

        assert el.effective_ratio == 4.0

    def test_payload_type_for_when_toc_then_toc_payload(self):
        assert payload_type_for(ElementKind.TOC_LIST).__name__ == "TocListContent"


class TestStyles:
    """Tests for style models."""

    def test_text_style_when_unknown_align_then_raises(self):
        with pytest.raises(ValueError, match="text_align"):
            TextStyle(text_align="justify-all")

    def test_text_style_from_dict_when_partial_then_keeps_defaults(self):
        defaults = TextStyle(font_size=14, line_height=1.8)

        style = TextStyle.from_dict({"fontSize": 20}, defaults)

        assert style.font_size == 20
        assert style.line_height == 1.8

    def test_toc_settings_when_three_columns_then_raises(self):
        with pytest.raises(ValueError, match="column_count"):
            TocSettings(column_count=3)

    def test_toc_settings_when_leader_string_then_coerced(self):
        assert TocSettings(leader_style="solid").leader_style is LeaderStyle.SOLID

    def test_chapters_active_when_covers_enabled_without_group_then_false(self):
        assert TocSettings(chapter_covers_enabled=True).chapters_active is False
        assert TocSettings(chapter_covers_enabled=True, group_by_field="Category").chapters_active is True
