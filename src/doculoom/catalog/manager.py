"""
Module: catalog.manager

Purpose:
    Owns every section slot of a catalog and keeps exactly one of them
    live in the document editor. Switching sections writes the live
    collection back, loads the destination and resets the undo history so
    a timeline never spans two sections.

Key Classes:
    - CatalogSectionManager: Section state machine bound to one editor

Dependencies:
    - catalog.transitions.switch_slot: The pure slot switch
    - editor.document.DocumentEditor: The live collection

Used By:
    - persistence.payload: Catalog payload shape
    - catalog.assembly: Final slots for page planning
"""

from __future__ import annotations

import logging
from typing import List, Optional

from doculoom.core.models import CanvasElement, ElementKind, TocSettings
from doculoom.data.source import RowDataSource
from doculoom.editor.document import DocumentEditor

from .models import CatalogSlots, CatalogTarget, SectionSlot, SectionType
from .transitions import switch_slot

logger = logging.getLogger(__name__)


class CatalogSectionManager:
    """
    Section switching for one document editor.

    In flat mode the editor holds an ordinary multi-page document. In
    catalog mode it holds the active section slot; the flat document is
    kept aside untouched and comes back when catalog mode is turned off.

    Example:
        >>> manager = CatalogSectionManager(editor)
        >>> manager.enable()
        >>> manager.set_active_section(SectionType.TOC)
        True
        >>> manager.target
        CatalogTarget(section=<SectionType.TOC: 'toc'>, group=None)
    """

    def __init__(self, editor: DocumentEditor, slots: Optional[CatalogSlots] = None) -> None:
        self.editor = editor
        self.slots = slots or CatalogSlots()
        self.target = CatalogTarget(SectionType.COVER)
        self.enabled = False

        self._flat = SectionSlot()
        self._flat_page_count = 1

    # ─────────────────────────────────────────────────────────────────────────
    # Mode
    # ─────────────────────────────────────────────────────────────────────────

    def live_slot(self) -> SectionSlot:
        return SectionSlot(tuple(self.editor.elements), self.editor.background_color)

    def enable(self) -> None:
        """Switch the editor to the active catalog slot, keeping the flat document aside."""
        if self.enabled:
            return
        self._enter()
        self.editor.mark_changed()

    def disable(self) -> None:
        """Store the live section and bring the flat document back."""
        if not self.enabled:
            return
        self.slots = self.slots.with_slot(self.target, self.live_slot().copy())
        self._leave()
        self.editor.mark_changed()

    def _enter(self) -> None:
        self._flat = self.live_slot()
        self._flat_page_count = self.editor.page_count
        self.enabled = True
        self.editor.set_active_page(0)
        self._load(self.slots.get(self.target).copy())
        logger.info(f"Catalog mode on: editing {self.target}")

    def _leave(self) -> None:
        self.enabled = False
        self.editor.page_count = self._flat_page_count
        self.editor.load_elements(self._flat.elements, background_color=self._flat.background_color)
        logger.info("Catalog mode off")

    def _load(self, slot: SectionSlot) -> None:
        self.editor.page_count = 1
        self.editor.load_elements(slot.elements, background_color=slot.background_color)

    # ─────────────────────────────────────────────────────────────────────────
    # Switching
    # ─────────────────────────────────────────────────────────────────────────

    def switch_to(self, destination: CatalogTarget) -> bool:
        """
        Make ``destination`` the live slot.

        Returns:
            False when catalog mode is off or the target is already live
        """
        if not self.enabled:
            logger.warning(f"Ignoring switch to {destination}: catalog mode is off")
            return False
        if destination == self.target:
            return False
        self.slots, slot = switch_slot(self.slots, self.target, self.live_slot(), destination)
        logger.info(f"Switched section {self.target} -> {destination}")
        self.target = destination
        self._load(slot)
        return True

    def set_active_section(self, section: SectionType) -> bool:
        return self.switch_to(CatalogTarget(SectionType(section)))

    def set_active_group(self, group: str, source: Optional[RowDataSource] = None) -> bool:
        """
        Edit the chapter design of one group.

        With a row source, the first row of the group becomes the
        selected row so bound fields preview that chapter.
        """
        switched = self.switch_to(CatalogTarget(SectionType.CHAPTER, group))
        if switched and source is not None:
            settings = self.toc_settings()
            if settings is not None and settings.group_by_field:
                index = source.first_row_in_group(settings.group_by_field, group)
                if index is not None:
                    source.select_row(index)
        return switched

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def snapshot_slots(self) -> CatalogSlots:
        """Stored slots with the live section written back (no switch)."""
        if not self.enabled:
            return self.slots
        return self.slots.with_slot(self.target, self.live_slot().copy())

    def toc_element(self) -> Optional[CanvasElement]:
        """The TOC list element, read live while the TOC section is active."""
        if self.enabled and self.target.section is SectionType.TOC:
            return next((el for el in self.editor.elements if el.kind is ElementKind.TOC_LIST), None)
        return self.slots.sections[SectionType.TOC].find(ElementKind.TOC_LIST)

    def toc_settings(self) -> Optional[TocSettings]:
        toc = self.toc_element()
        return None if toc is None else toc.payload.toc_settings

    def chapter_groups(self, source: RowDataSource) -> List[str]:
        """Groups that get a chapter divider; empty unless chapter covers are active."""
        settings = self.toc_settings()
        if settings is None or not settings.chapters_active:
            return []
        return source.group_values(settings.group_by_field)

    # ─────────────────────────────────────────────────────────────────────────
    # Persistence
    # ─────────────────────────────────────────────────────────────────────────

    def load(self, slots: CatalogSlots, *, enabled: bool = True) -> None:
        """
        Replace every slot (hard boundary) and start on the cover.

        The editor's flat document is kept; the previous slots are dropped.
        """
        if self.enabled:
            self._leave()
        self.slots = slots
        self.target = CatalogTarget(SectionType.COVER)
        if enabled:
            self._enter()

    def to_payload(self) -> dict:
        return self.snapshot_slots().to_dict()
