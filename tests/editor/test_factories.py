"""
Unit Tests for Element Factories
"""

from doculoom.core.models import Dimension, ElementKind, ShapeType
from doculoom.editor.factories import (
    create_data_field_element,
    create_field_element,
    create_image_element,
    create_shape_element,
    create_table_element,
    create_text_element,
    create_toc_element,
    new_element_id,
)


class TestFactories:
    """Tests for default sizes and payloads."""

    def test_new_element_id_when_called_twice_then_distinct(self):
        assert new_element_id() != new_element_id()

    def test_text_when_default_then_new_text_200_by_40(self):
        el = create_text_element(0, 0)

        assert el.content == "New Text"
        assert el.dimension == Dimension(200, 40)

    def test_shape_when_circle_then_rounded_fully(self):
        el = create_shape_element(0, 0, "circle")

        assert el.payload.shape_type is ShapeType.CIRCLE
        assert el.payload.shape_style.corner_radius == 50

    def test_data_field_when_created_then_placeholder_and_binding(self):
        el = create_data_field_element(0, 0, "Price")

        assert el.kind is ElementKind.DATA_FIELD
        assert el.content == "{{Price}}"
        assert el.data_binding == "Price"

    def test_field_when_column_looks_like_image_then_image_field(self):
        el = create_field_element(0, 0, "Product Photo")

        assert el.kind is ElementKind.IMAGE
        assert el.payload.is_image_field is True
        assert el.aspect_ratio_locked is True

    def test_field_when_column_marked_as_image_then_image_field(self):
        el = create_field_element(0, 0, "Hero", image_columns=frozenset({"Hero"}))

        assert el.kind is ElementKind.IMAGE

    def test_field_when_plain_column_then_data_field(self):
        assert create_field_element(0, 0, "Name").kind is ElementKind.DATA_FIELD

    def test_image_when_file_given_then_sized_from_natural_ratio(self, sample_image):
        el = create_image_element(0, 0, "sample.png", image_file=sample_image)

        assert el.dimension == Dimension(200, 100)
        assert el.aspect_ratio == 2.0

    def test_image_when_file_unreadable_then_default_size(self, tmp_path):
        bogus = tmp_path / "bogus.png"
        bogus.write_bytes(b"not an image")

        el = create_image_element(0, 0, image_file=bogus)

        assert el.dimension == Dimension(200, 150)
        assert el.aspect_ratio is None

    def test_toc_when_created_then_500_by_600(self):
        el = create_toc_element(0, 0)

        assert el.kind is ElementKind.TOC_LIST
        assert el.dimension == Dimension(500, 600)

    def test_table_when_columns_given_then_width_grows(self):
        el = create_table_element(0, 0, ("A", "B", "C"))

        assert el.dimension.width == 300
        assert [c.data_field for c in el.payload.table_settings.columns] == ["A", "B", "C"]
