"""
Unit Tests for Slot Switching
"""

from doculoom.catalog import CatalogSlots, CatalogTarget, SectionSlot, SectionType
from doculoom.catalog.transitions import switch_slot
from doculoom.editor.factories import create_shape_element, create_text_element

COVER = CatalogTarget(SectionType.COVER)
TOC = CatalogTarget(SectionType.TOC)


class TestSwitchSlot:
    """Tests for switch_slot."""

    def test_switch_when_leaving_then_live_written_back(self):
        live = SectionSlot((create_text_element(0, 0, id="title"),), "#222222")

        slots, loaded = switch_slot(CatalogSlots(), COVER, live, TOC)

        assert slots.sections[SectionType.COVER] == live
        assert loaded.is_empty

    def test_switch_when_round_trip_then_contents_come_back(self):
        cover = SectionSlot((create_text_element(0, 0, id="title"),))
        toc = SectionSlot((create_shape_element(10, 10, id="box"),))
        slots = CatalogSlots(sections={SectionType.TOC: toc})

        slots, loaded_toc = switch_slot(slots, COVER, cover, TOC)
        slots, loaded_cover = switch_slot(slots, TOC, loaded_toc, COVER)

        assert loaded_toc == toc
        assert loaded_cover == cover

    def test_switch_when_unseen_group_then_seeded_from_template_copy(self):
        template = SectionSlot((create_text_element(0, 0, id="heading"),))
        slots = CatalogSlots(sections={SectionType.CHAPTER: template})
        lamps = CatalogTarget(SectionType.CHAPTER, "Lamps")

        slots, loaded = switch_slot(slots, COVER, SectionSlot(), lamps)

        assert "Lamps" in slots.chapter_designs
        assert loaded == template
        assert slots.chapter_designs["Lamps"].elements[0] is not template.elements[0]

    def test_switch_when_loaded_copy_edited_then_stored_slot_untouched(self):
        toc = SectionSlot((create_shape_element(10, 10, id="box"),))
        slots = CatalogSlots(sections={SectionType.TOC: toc})

        slots, loaded = switch_slot(slots, COVER, SectionSlot(), TOC)

        assert loaded.elements[0] is not slots.sections[SectionType.TOC].elements[0]

    def test_switch_when_leaving_group_then_design_stored_not_template(self):
        lamps = CatalogTarget(SectionType.CHAPTER, "Lamps")
        live = SectionSlot((create_text_element(0, 0, id="lamp-heading"),))

        slots, _ = switch_slot(CatalogSlots(), lamps, live, COVER)

        assert slots.chapter_designs["Lamps"] == live
        assert slots.sections[SectionType.CHAPTER].is_empty
