"""
Unit Tests for CatalogSectionManager

Tests for catalog mode, section switching and slot snapshots against a
real DocumentEditor.
"""

import pytest

from doculoom.catalog import CatalogSectionManager, CatalogSlots, CatalogTarget, SectionSlot, SectionType
from doculoom.core.models import TocSettings
from doculoom.data.source import RowDataSource
from doculoom.editor import DocumentEditor
from doculoom.editor.factories import create_shape_element, create_text_element, create_toc_element


def _grouped_toc(**settings):
    toc = create_toc_element(0, 0, id="toc")
    return toc.with_payload(toc_settings=TocSettings(group_by_field="Category", **settings))


@pytest.fixture
def editor(config):
    return DocumentEditor(config)


@pytest.fixture
def manager(editor):
    manager = CatalogSectionManager(editor)
    manager.enable()
    return manager


@pytest.fixture
def source():
    return RowDataSource(
        ["Name", "Category"],
        [
            {"Name": "Lamp", "Category": "Lighting"},
            {"Name": "Bulb", "Category": "Lighting"},
            {"Name": "Chair", "Category": "Furniture"},
        ],
    )


class TestCatalogMode:
    """Tests for enable/disable."""

    def test_enable_when_flat_document_open_then_kept_aside_and_restored(self, editor):
        flat_id = editor.add_element(create_text_element(0, 0))
        editor.add_page()
        manager = CatalogSectionManager(editor)

        manager.enable()
        assert editor.elements == []
        assert editor.page_count == 1

        manager.disable()
        assert [el.id for el in editor.elements] == [flat_id]
        assert editor.page_count == 2

    def test_enable_when_called_then_document_marked_dirty(self, editor):
        editor.mark_saved()

        CatalogSectionManager(editor).enable()

        assert editor.dirty is True

    def test_switch_when_disabled_then_false(self, editor):
        manager = CatalogSectionManager(editor)

        assert manager.set_active_section(SectionType.TOC) is False

    def test_disable_when_enabled_then_live_section_stored(self, manager, editor):
        editor.add_element(create_text_element(0, 0, "Welcome"))

        manager.disable()

        assert manager.slots.sections[SectionType.COVER].elements[0].content == "Welcome"


class TestSwitching:
    """Tests for switching sections and chapter groups."""

    def test_switch_when_same_target_then_false(self, manager):
        assert manager.set_active_section(SectionType.COVER) is False

    def test_switch_when_round_trip_then_live_elements_identical(self, manager, editor):
        editor.add_element(create_text_element(0, 0, "Cover title"))
        editor.add_element(create_shape_element(100, 100))
        before = editor.elements

        manager.set_active_section(SectionType.TOC)
        assert editor.elements == []
        manager.set_active_section(SectionType.COVER)

        assert editor.elements == before

    def test_switch_when_done_then_history_starts_fresh(self, manager, editor):
        editor.add_element(create_text_element(0, 0))

        manager.set_active_section(SectionType.PRODUCT)

        assert editor.undo() is False

    def test_switch_when_done_then_selection_cleared(self, manager, editor):
        editor.add_element(create_text_element(0, 0))

        manager.set_active_section(SectionType.BACK)

        assert len(editor.selection) == 0

    def test_set_active_group_when_unseen_then_seeded_from_template(self, manager, editor):
        manager.set_active_section(SectionType.CHAPTER)
        heading = editor.add_element(create_text_element(0, 0, "Chapter"))

        manager.set_active_group("Lighting")

        assert [el.id for el in editor.elements] == [heading]
        assert manager.target == CatalogTarget(SectionType.CHAPTER, "Lighting")

    def test_set_active_group_when_edited_then_template_unchanged(self, manager, editor):
        manager.set_active_section(SectionType.CHAPTER)
        heading = editor.add_element(create_text_element(0, 0, "Chapter"))
        manager.set_active_group("Lighting")

        editor.store.update(heading, {"content": "Lighting"})
        manager.set_active_section(SectionType.CHAPTER)

        assert editor.store.get(heading).content == "Chapter"
        assert manager.slots.chapter_designs["Lighting"].elements[0].content == "Lighting"

    def test_set_active_group_when_source_given_then_first_row_of_group_selected(self, editor, source):
        slots = CatalogSlots(sections={SectionType.TOC: SectionSlot((_grouped_toc(),))})
        manager = CatalogSectionManager(editor, slots)
        manager.enable()

        manager.set_active_group("Furniture", source)

        assert source.selected_row_index == 2


class TestQueries:
    """Tests for snapshot and TOC queries."""

    def test_snapshot_when_live_edits_then_included_without_switch(self, manager, editor):
        editor.add_element(create_text_element(0, 0, "Live"))

        snapshot = manager.snapshot_slots()

        assert snapshot.sections[SectionType.COVER].elements[0].content == "Live"
        assert manager.target.section is SectionType.COVER

    def test_toc_element_when_toc_active_then_read_live(self, manager, editor):
        manager.set_active_section(SectionType.TOC)
        toc_id = editor.add_element(create_toc_element(0, 0))

        assert manager.toc_element().id == toc_id

    def test_toc_element_when_other_section_active_then_read_from_slot(self, editor):
        slots = CatalogSlots(sections={SectionType.TOC: SectionSlot((_grouped_toc(),))})
        manager = CatalogSectionManager(editor, slots)
        manager.enable()

        assert manager.toc_settings().group_by_field == "Category"

    def test_chapter_groups_when_covers_enabled_then_sorted_groups(self, editor, source):
        slots = CatalogSlots(sections={
            SectionType.TOC: SectionSlot((_grouped_toc(chapter_covers_enabled=True),)),
        })
        manager = CatalogSectionManager(editor, slots)

        assert manager.chapter_groups(source) == ["Furniture", "Lighting"]

    def test_chapter_groups_when_covers_disabled_then_empty(self, editor, source):
        slots = CatalogSlots(sections={SectionType.TOC: SectionSlot((_grouped_toc(),))})
        manager = CatalogSectionManager(editor, slots)

        assert manager.chapter_groups(source) == []


class TestLoad:
    """Tests for replacing all slots."""

    def test_load_when_called_then_starts_on_cover_with_its_elements(self, manager, editor):
        manager.set_active_section(SectionType.BACK)
        cover = SectionSlot((create_text_element(0, 0, id="loaded"),), "#101010")

        manager.load(CatalogSlots(sections={SectionType.COVER: cover}))

        assert manager.target == CatalogTarget(SectionType.COVER)
        assert [el.id for el in editor.elements] == ["loaded"]
        assert editor.background_color == "#101010"

    def test_load_when_disabled_then_editor_untouched(self, editor):
        flat_id = editor.add_element(create_text_element(0, 0))
        manager = CatalogSectionManager(editor)

        manager.load(CatalogSlots(), enabled=False)

        assert manager.enabled is False
        assert [el.id for el in editor.elements] == [flat_id]
