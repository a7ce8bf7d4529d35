"""
Unit Tests for Design Payloads

Tests for building, applying and storing persisted documents.
"""

import json

import pytest

from doculoom.catalog import CatalogSectionManager, SectionType
from doculoom.core.schemas import ValidationError
from doculoom.editor import DocumentEditor, SaveStatus
from doculoom.editor.factories import create_shape_element, create_text_element
from doculoom.persistence import (
    apply_design_payload,
    build_design_payload,
    read_design_file,
    write_design_file,
)


@pytest.fixture
def editor(config):
    return DocumentEditor(config)


class TestBuildDesignPayload:
    """Tests for build_design_payload."""

    def test_build_when_flat_then_elements_inline(self, editor):
        editor.add_element(create_text_element(0, 0, "Hello"))

        payload = build_design_payload(editor)

        assert payload["type"] == "single"
        assert payload["catalogData"] == {}
        assert payload["elements"][0]["content"] == "Hello"
        assert (payload["canvasWidth"], payload["canvasHeight"]) == (816, 1056)

    def test_build_when_catalog_then_live_section_included_without_switch(self, editor):
        catalog = CatalogSectionManager(editor)
        catalog.enable()
        editor.add_element(create_text_element(0, 0, "Cover title"))

        payload = build_design_payload(editor, catalog)

        assert payload["type"] == "catalog"
        assert payload["elements"] == []
        cover = payload["catalogData"]["sections"]["cover"]
        assert cover["elements"][0]["content"] == "Cover title"
        assert catalog.target.section is SectionType.COVER

    def test_build_when_catalog_disabled_then_flat(self, editor):
        catalog = CatalogSectionManager(editor)

        assert build_design_payload(editor, catalog)["type"] == "single"

    def test_build_when_serialized_then_json_safe(self, editor):
        editor.add_element(create_shape_element(0, 0))

        json.dumps(build_design_payload(editor))


class TestApplyDesignPayload:
    """Tests for apply_design_payload."""

    def test_apply_when_flat_payload_then_document_reopened(self, editor, config):
        editor.add_element(create_text_element(0, 0, "Hello"))
        editor.add_page()
        payload = build_design_payload(editor)
        reopened = DocumentEditor(config)

        apply_design_payload(reopened, None, payload, strict=True)

        assert reopened.elements == editor.elements
        assert reopened.page_count == 2
        assert reopened.save_status is SaveStatus.SAVED
        assert reopened.dirty is False

    def test_apply_when_catalog_payload_then_cover_live(self, editor, config):
        catalog = CatalogSectionManager(editor)
        catalog.enable()
        editor.add_element(create_text_element(0, 0, "Cover", id="cover-title"))
        catalog.set_active_section(SectionType.TOC)
        payload = build_design_payload(editor, catalog)

        reopened = DocumentEditor(config)
        reopened_catalog = CatalogSectionManager(reopened)
        apply_design_payload(reopened, reopened_catalog, payload)

        assert reopened_catalog.enabled is True
        assert reopened_catalog.target.section is SectionType.COVER
        assert [el.id for el in reopened.elements] == ["cover-title"]

    def test_apply_when_flat_payload_on_catalog_then_catalog_mode_off(self, editor):
        catalog = CatalogSectionManager(editor)
        catalog.enable()
        payload = {
            "canvasWidth": 816,
            "canvasHeight": 1056,
            "elements": [{
                "id": "flat",
                "type": "text",
                "position": {"x": 0, "y": 0},
                "dimension": {"width": 100, "height": 40},
            }],
        }

        apply_design_payload(editor, catalog, payload)

        assert catalog.enabled is False
        assert [el.id for el in editor.elements] == ["flat"]

    def test_apply_when_invalid_then_document_untouched(self, editor):
        element_id = editor.add_element(create_text_element(0, 0))
        before = editor.elements

        with pytest.raises(ValidationError):
            apply_design_payload(editor, None, {"canvasWidth": 816, "canvasHeight": 1056, "elements": "nope"})

        assert editor.elements == before
        assert element_id in editor.store

    def test_apply_when_bad_style_value_then_validation_error(self, editor):
        payload = build_design_payload(editor)
        payload["elements"] = [{
            "id": "t",
            "type": "text",
            "position": {"x": 0, "y": 0},
            "dimension": {"width": 100, "height": 40},
            "textStyle": {"textAlign": "sideways"},
        }]

        with pytest.raises(ValidationError, match="Invalid design content"):
            apply_design_payload(editor, None, payload)

    def test_apply_when_catalog_without_manager_then_raises(self, editor, config):
        catalog = CatalogSectionManager(editor)
        catalog.enable()
        payload = build_design_payload(editor, catalog)

        with pytest.raises(ValidationError, match="catalog manager"):
            apply_design_payload(DocumentEditor(config), None, payload)


class TestDesignFiles:
    """Tests for write_design_file/read_design_file."""

    def test_write_then_read_when_called_then_same_payload(self, editor, tmp_path):
        editor.add_element(create_text_element(0, 0))
        payload = build_design_payload(editor)
        path = tmp_path / "designs" / "doc.json"

        write_design_file(path, payload)

        assert read_design_file(path) == payload
        assert not path.with_suffix(".json.tmp").exists()

    def test_read_when_missing_then_validation_error(self, tmp_path):
        with pytest.raises(ValidationError, match="Cannot read"):
            read_design_file(tmp_path / "missing.json")

    def test_read_when_corrupt_then_validation_error(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text("{broken")

        with pytest.raises(ValidationError):
            read_design_file(path)
