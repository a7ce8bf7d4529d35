"""
Module: editor.document

Purpose:
    Document-level editing facade. Composes the element store with the
    selection, page bookkeeping, view settings (zoom, grid) and the save
    status, and runs multi-element transforms on the selection.

Key Classes:
    - SaveStatus: saved / saving / unsaved / error
    - DocumentEditor: One open document

Dependencies:
    - editor.store, editor.selection, editor.transform, editor.config

Used By:
    - catalog.manager: Section switching loads slots into the editor
    - persistence: Payload building and auto-save
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional

from doculoom.core.models import CanvasElement

from .config import MAX_ZOOM, MIN_ZOOM, PAGE_SIZES, EditorConfig
from .history import HistoryManager
from .selection import SelectionSet
from .store import ElementStore
from .transform import (
    MIN_ALIGN_COUNT,
    MIN_DISTRIBUTE_COUNT,
    AlignMode,
    Axis,
    align_positions,
    distribute_positions,
)

logger = logging.getLogger(__name__)

ChangeListener = Callable[[], None]


class SaveStatus(str, Enum):
    SAVED = "saved"
    SAVING = "saving"
    UNSAVED = "unsaved"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


class DocumentEditor:
    """
    One open document: live elements, selection, pages and view state.

    Every committed edit (and every undo/redo) marks the document dirty,
    moves the save status to UNSAVED and notifies change listeners, which
    is what the auto-saver subscribes to.

    Example:
        >>> editor = DocumentEditor()
        >>> a = editor.add_element(create_shape_element(0, 0))
        >>> b = editor.add_element(create_shape_element(200, 50))
        >>> editor.selection.replace([a, b])
        >>> editor.align(AlignMode.TOP)
        True
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        *,
        history: Optional[HistoryManager] = None,
        store: Optional[ElementStore] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.store = store or ElementStore(self.config, history=history)
        self.selection = SelectionSet()

        self.page_count = 1
        self.background_color = self.config.background_color
        self.zoom = 1.0
        self.show_grid = self.config.show_grid

        self.dirty = False
        self.save_status = SaveStatus.SAVED
        self._listeners: List[ChangeListener] = []

        self.store.add_commit_listener(self.mark_changed)

    # ─────────────────────────────────────────────────────────────────────────
    # Listeners and save status
    # ─────────────────────────────────────────────────────────────────────────

    def add_change_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def mark_changed(self) -> None:
        """Mark the document dirty and notify change listeners."""
        self.dirty = True
        self.save_status = SaveStatus.UNSAVED
        for listener in list(self._listeners):
            listener()

    def mark_saving(self) -> None:
        self.save_status = SaveStatus.SAVING

    def mark_saved(self) -> None:
        self.dirty = False
        self.save_status = SaveStatus.SAVED

    def mark_save_failed(self) -> None:
        self.save_status = SaveStatus.ERROR

    # ─────────────────────────────────────────────────────────────────────────
    # Elements and selection
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def elements(self) -> List[CanvasElement]:
        return self.store.elements

    def selected_elements(self) -> List[CanvasElement]:
        """Selected elements in selection order."""
        found = (self.store.get(i) for i in self.selection)
        return [el for el in found if el is not None]

    def add_element(self, element: CanvasElement, *, select: bool = True) -> str:
        element_id = self.store.add(element)
        if select:
            self.selection.select(element_id)
        return element_id

    def select(self, element_id: str, *, additive: bool = False) -> None:
        if element_id in self.store:
            self.selection.select(element_id, additive=additive)

    def select_all(self) -> None:
        """Select every element on the active page."""
        self.selection.replace(el.id for el in self.store.elements_on_page(self.active_page))

    def clear_selection(self) -> None:
        self.selection.clear()

    def delete_selected(self) -> List[str]:
        removed = self.store.delete(self.selection.ids)
        self.selection.clear()
        return removed

    def duplicate_selected(self) -> List[str]:
        """Duplicate the selection as one undoable step; selects the copies."""
        copies = [
            new_id for new_id in (
                self.store.duplicate(i, commit=False) for i in self.selection.ids
            ) if new_id is not None
        ]
        if copies:
            self.store.commit()
            self.selection.replace(copies)
        return copies

    def _transform_targets(self) -> List[CanvasElement]:
        return [el for el in self.selected_elements() if not el.locked]

    def align(self, mode: AlignMode) -> bool:
        """Align the unlocked part of the selection; no-op below two elements."""
        targets = self._transform_targets()
        if len(targets) < MIN_ALIGN_COUNT:
            return False
        self.store.set_positions(align_positions(targets, mode))
        logger.debug(f"Aligned {len(targets)} elements: {mode}")
        return True

    def distribute(self, axis: Axis) -> bool:
        """Distribute the unlocked part of the selection; no-op below three."""
        targets = self._transform_targets()
        if len(targets) < MIN_DISTRIBUTE_COUNT:
            return False
        self.store.set_positions(distribute_positions(targets, axis))
        logger.debug(f"Distributed {len(targets)} elements: {axis}")
        return True

    def undo(self) -> bool:
        if not self.store.undo():
            return False
        self._fit_page_count()
        self.selection.retain(self.store.ids())
        self.mark_changed()
        return True

    def redo(self) -> bool:
        if not self.store.redo():
            return False
        self._fit_page_count()
        self.selection.retain(self.store.ids())
        self.mark_changed()
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Pages
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def active_page(self) -> int:
        return self.store.active_page

    def set_active_page(self, page_index: int) -> None:
        self.store.active_page = max(0, min(page_index, self.page_count - 1))
        self.selection.clear()

    def add_page(self) -> int:
        """Append a page and make it active. Returns its index."""
        self.page_count += 1
        self.set_active_page(self.page_count - 1)
        self.mark_changed()
        return self.page_count - 1

    def remove_page(self, page_index: int) -> bool:
        """Remove a page and its elements; the last page cannot be removed."""
        if self.page_count <= 1 or not 0 <= page_index < self.page_count:
            return False
        self.page_count -= 1
        self.store.remove_page(page_index)
        self.store.active_page = min(self.store.active_page, self.page_count - 1)
        self.selection.retain(self.store.ids())
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Canvas and view
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def canvas_size(self) -> tuple[float, float]:
        return self.store.canvas_width, self.store.canvas_height

    def set_canvas_size(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive: {width}x{height}")
        self.store.canvas_width = width
        self.store.canvas_height = height
        self.mark_changed()

    def set_page_size(self, name: str) -> None:
        try:
            width, height = PAGE_SIZES[name]
        except KeyError:
            raise ValueError(f"Unknown page size: {name!r}") from None
        self.set_canvas_size(width, height)

    def set_background_color(self, color: str) -> None:
        self.background_color = color
        self.mark_changed()

    def set_zoom(self, zoom: float) -> float:
        """Set the zoom factor, clamped to [MIN_ZOOM, MAX_ZOOM]."""
        self.zoom = max(MIN_ZOOM, min(MAX_ZOOM, zoom))
        return self.zoom

    def toggle_grid(self) -> bool:
        self.show_grid = not self.show_grid
        return self.show_grid

    def toggle_snap(self) -> bool:
        self.store.snap_enabled = not self.store.snap_enabled
        return self.store.snap_enabled

    # ─────────────────────────────────────────────────────────────────────────
    # Loading
    # ─────────────────────────────────────────────────────────────────────────

    def load_elements(self, elements: Iterable[CanvasElement], *, background_color: Optional[str] = None) -> None:
        """
        Replace the live elements (hard boundary).

        History restarts from the loaded state and the selection is
        cleared. Save status and page count are left alone; section
        switches use this.
        """
        self.store.load(elements)
        self.selection.clear()
        if background_color is not None:
            self.background_color = background_color
        self._fit_page_count()

    def load_document(
        self,
        elements: Iterable[CanvasElement],
        *,
        page_count: int = 1,
        canvas_size: Optional[tuple[float, float]] = None,
        background_color: Optional[str] = None,
    ) -> None:
        """Open a stored document: replaces everything and marks it saved."""
        if canvas_size is not None:
            self.store.canvas_width, self.store.canvas_height = canvas_size
        self.page_count = max(1, page_count)
        self.store.active_page = 0
        self.load_elements(elements, background_color=background_color)
        self.dirty = False
        self.save_status = SaveStatus.SAVED
        logger.info(f"Loaded document: {len(self.store)} elements on {self.page_count} page(s)")

    def _fit_page_count(self) -> None:
        highest = max((el.page_index for el in self.store.elements), default=0)
        if highest >= self.page_count:
            logger.warning(f"Elements reference page {highest}; extending page count")
            self.page_count = highest + 1
        self.store.active_page = min(self.store.active_page, self.page_count - 1)
