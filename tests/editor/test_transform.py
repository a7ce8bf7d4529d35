"""
Unit Tests for Transform Geometry

Tests for snapping, clamping, constrained resize, alignment and distribution.
"""

import pytest

from doculoom.core.models import Dimension, Position
from doculoom.editor.factories import create_shape_element
from doculoom.editor.transform import (
    AlignMode,
    Axis,
    align_positions,
    clamp_position,
    constrain_resize,
    distribute_positions,
    snap_to_grid,
)


def _shape(element_id, x, y, w=50, h=50):
    return create_shape_element(x, y, id=element_id).resized_to(w, h)


class TestSnapAndClamp:
    """Tests for snap_to_grid and clamp_position."""

    @pytest.mark.parametrize("value,expected", [(7, 10), (4, 0), (15, 20), (-6, -10), (30, 30)])
    def test_snap_when_grid_ten_then_nearest_multiple(self, value, expected):
        assert snap_to_grid(value, 10) == expected

    def test_snap_when_grid_not_positive_then_unchanged(self):
        assert snap_to_grid(7.5, 0) == 7.5

    def test_clamp_when_inside_then_unchanged(self):
        assert clamp_position(10, 20, Dimension(50, 50), 816, 1056) == Position(10, 20)

    def test_clamp_when_past_far_edge_then_pinned_to_canvas_minus_size(self):
        assert clamp_position(900, 2000, Dimension(100, 56), 816, 1056) == Position(716, 1000)

    def test_clamp_when_larger_than_canvas_then_zero(self):
        assert clamp_position(50, 50, Dimension(1000, 2000), 816, 1056) == Position(0, 0)


class TestConstrainResize:
    """Tests for constrain_resize."""

    def test_resize_when_unlocked_then_each_axis_floored(self):
        assert constrain_resize(Dimension(100, 100), 5, 300) == Dimension(10, 300)

    def test_resize_when_locked_and_width_dominates_then_height_follows(self):
        result = constrain_resize(Dimension(100, 100), 150, 120, aspect_locked=True, ratio=1.0)

        assert result == Dimension(150, 150)

    def test_resize_when_locked_and_height_dominates_then_width_follows(self):
        result = constrain_resize(Dimension(200, 100), 210, 50, aspect_locked=True, ratio=2.0)

        assert result == Dimension(100, 50)

    def test_resize_when_locked_result_too_small_then_floored(self):
        result = constrain_resize(Dimension(100, 20), 20, 20, aspect_locked=True, ratio=5.0)

        assert result.width >= 10
        assert result.height >= 10


class TestAlignPositions:
    """Tests for align_positions."""

    def test_align_when_single_element_then_empty(self):
        assert align_positions([_shape("a", 0, 0)], AlignMode.LEFT) == {}

    def test_align_left_when_spread_then_all_at_min_left(self):
        els = [_shape("a", 30, 0), _shape("b", 10, 100), _shape("c", 70, 200)]

        positions = align_positions(els, AlignMode.LEFT)

        assert {p.x for p in positions.values()} == {10}
        assert positions["b"].y == 100

    def test_align_right_when_widths_differ_then_right_edges_match(self):
        els = [_shape("a", 0, 0, w=50), _shape("b", 100, 0, w=100)]

        positions = align_positions(els, AlignMode.RIGHT)

        assert positions["a"].x + 50 == positions["b"].x + 100 == 200

    def test_align_middle_when_heights_differ_then_centers_average(self):
        els = [_shape("a", 0, 0, h=20), _shape("b", 0, 100, h=60)]

        positions = align_positions(els, AlignMode.MIDDLE)

        # centers 10 and 130 -> 70
        assert positions["a"].y == 60
        assert positions["b"].y == 40

    def test_align_when_mode_is_string_then_accepted(self):
        els = [_shape("a", 0, 10), _shape("b", 0, 40)]

        assert align_positions(els, "top")["b"].y == 10


class TestDistributePositions:
    """Tests for distribute_positions."""

    def test_distribute_when_two_elements_then_empty(self):
        assert distribute_positions([_shape("a", 0, 0), _shape("b", 100, 0)], Axis.HORIZONTAL) == {}

    def test_distribute_horizontal_when_uneven_then_gaps_equal(self):
        els = [_shape("a", 0, 0), _shape("b", 100, 0), _shape("c", 300, 0)]

        positions = distribute_positions(els, Axis.HORIZONTAL)

        assert [positions[i].x for i in ("a", "b", "c")] == [0, 150, 300]
        gaps = [positions["b"].x - (positions["a"].x + 50), positions["c"].x - (positions["b"].x + 50)]
        assert gaps == [100, 100]

    def test_distribute_vertical_when_heights_differ_then_heights_summed(self):
        els = [_shape("a", 0, 0, h=20), _shape("b", 0, 30, h=40), _shape("c", 0, 200, h=60)]

        positions = distribute_positions(els, Axis.VERTICAL)

        # span 260, sizes 120 -> gap 70
        assert positions["b"].y == 90
        assert positions["c"].y == 200

    def test_distribute_when_unsorted_input_then_ordered_by_leading_edge(self):
        els = [_shape("c", 300, 0), _shape("a", 0, 0), _shape("b", 100, 0)]

        positions = distribute_positions(els, Axis.HORIZONTAL)

        assert positions["a"].x == 0
        assert positions["c"].x == 300
