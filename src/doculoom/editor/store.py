"""
Module: editor.store

Purpose:
    The live element collection of one document. Every mutation replaces
    elements with new immutable instances and, when committed, records a
    history snapshot and notifies commit listeners. Live gestures (drag,
    resize handles) call mutations with ``commit=False`` for every frame
    and ``commit()`` once at the end.

Key Classes:
    - ElementStore: Ordered element list + history + canvas constraints

Dependencies:
    - editor.history: Snapshot history (injected)
    - editor.patching: Partial updates
    - editor.transform: Snapping, clamping, constrained resize

Used By:
    - editor.document.DocumentEditor
    - catalog.manager: Loads section slots into the store
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Callable, Iterable, List, Mapping, Optional, Union

from doculoom.core.models import CanvasElement, Position
from doculoom.core.utils import clone_element, clone_elements

from .config import EditorConfig
from .factories import new_element_id
from .history import HistoryManager
from .patching import apply_patch
from .transform import clamp_position, constrain_resize, snap_to_grid

logger = logging.getLogger(__name__)

CommitListener = Callable[[], None]


class ElementStore:
    """
    Ordered collection of canvas elements with committed history.

    The store owns the only live collection; readers get snapshots (new
    lists of immutable elements) and can never alter stored state.

    Example:
        >>> store = ElementStore()
        >>> element_id = store.add(create_text_element(7, 7))
        >>> store.get(element_id).position
        Position(x=10, y=10)
        >>> store.undo()
        True
        >>> store.elements
        []
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        *,
        history: Optional[HistoryManager] = None,
        id_factory: Callable[[], str] = new_element_id,
    ) -> None:
        self.config = config or EditorConfig()
        self.history = history or HistoryManager(self.config.history_capacity)
        self._id_factory = id_factory
        self._elements: List[CanvasElement] = []
        self._listeners: List[CommitListener] = []
        self._uncommitted = False

        self.canvas_width = self.config.canvas_width
        self.canvas_height = self.config.canvas_height
        self.grid_size = self.config.grid_size
        self.snap_enabled = self.config.snap_to_grid
        self.active_page = 0

        self.history.reset(self._elements)

    # ─────────────────────────────────────────────────────────────────────────
    # Read access
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def elements(self) -> List[CanvasElement]:
        """Snapshot of the live collection in insertion order."""
        return list(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element_id: object) -> bool:
        return self._index(element_id) is not None

    def get(self, element_id: str) -> Optional[CanvasElement]:
        index = self._index(element_id)
        return None if index is None else self._elements[index]

    def elements_on_page(self, page_index: int) -> List[CanvasElement]:
        """Elements of one page in paint order (ascending z)."""
        return sorted(
            (el for el in self._elements if el.page_index == page_index),
            key=lambda el: el.z_index,
        )

    def ids(self) -> List[str]:
        return [el.id for el in self._elements]

    @property
    def max_z(self) -> Optional[int]:
        return max((el.z_index for el in self._elements), default=None)

    @property
    def min_z(self) -> Optional[int]:
        return min((el.z_index for el in self._elements), default=None)

    # ─────────────────────────────────────────────────────────────────────────
    # Commit plumbing
    # ─────────────────────────────────────────────────────────────────────────

    def add_commit_listener(self, listener: CommitListener) -> None:
        self._listeners.append(listener)

    def remove_commit_listener(self, listener: CommitListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def commit(self) -> None:
        """Record the current collection as one undoable step."""
        self._uncommitted = False
        self.history.push(self._elements)
        logger.debug(f"Committed {len(self._elements)} elements (history {len(self.history)})")
        for listener in list(self._listeners):
            listener()

    def _finish(self, commit: bool) -> None:
        if commit:
            self.commit()
        else:
            self._uncommitted = True

    def _index(self, element_id: object) -> Optional[int]:
        for i, el in enumerate(self._elements):
            if el.id == element_id:
                return i
        return None

    def _snap(self, value: float) -> float:
        return snap_to_grid(value, self.grid_size) if self.snap_enabled else value

    def _clamp(self, element: CanvasElement) -> CanvasElement:
        position = clamp_position(
            element.position.x, element.position.y, element.dimension,
            self.canvas_width, self.canvas_height,
        )
        return element if position == element.position else replace(element, position=position)

    def _unique_id(self, element_id: Optional[str]) -> str:
        existing = {el.id for el in self._elements}
        if element_id and element_id not in existing:
            return element_id
        new_id = self._id_factory()
        while new_id in existing:
            new_id = self._id_factory()
        return new_id

    # ─────────────────────────────────────────────────────────────────────────
    # Mutations
    # ─────────────────────────────────────────────────────────────────────────

    def add(
        self,
        element: CanvasElement,
        *,
        page_index: Optional[int] = None,
        commit: bool = True,
    ) -> str:
        """
        Insert an element on top of the stack.

        The element gets a fresh id when its own is empty or taken, the
        next z-index, the active page (unless ``page_index`` is given), a
        snapped position clamped into the canvas and a floored size.

        Returns:
            Id of the inserted element
        """
        element_id = self._unique_id(element.id)
        max_z = self.max_z
        position = Position(self._snap(element.position.x), self._snap(element.position.y))
        added = replace(
            element,
            id=element_id,
            z_index=0 if max_z is None else max_z + 1,
            page_index=self.active_page if page_index is None else page_index,
            position=position,
            dimension=element.dimension.floored(),
        )
        added = self._clamp(added)
        self._elements.append(added)
        logger.debug(f"Added {added.kind} element {element_id} on page {added.page_index}")
        self._finish(commit)
        return element_id

    def update(self, element_id: str, patch: Mapping, *, commit: bool = True) -> bool:
        """
        Merge a partial patch into one element.

        Returns:
            True when the element exists and the patch was valid
        """
        index = self._index(element_id)
        if index is None:
            logger.debug(f"update: unknown element {element_id}")
            return False
        current = self._elements[index]
        try:
            updated = apply_patch(current, patch)
            updated = replace(updated, dimension=updated.dimension.floored())
            updated = self._clamp(updated)
        except (TypeError, ValueError) as e:
            logger.warning(f"Rejected patch for {element_id}: {e}")
            return False
        self._elements[index] = updated
        self._finish(commit)
        return True

    def delete(self, element_ids: Union[str, Iterable[str]], *, commit: bool = True) -> List[str]:
        """Remove elements; unknown ids are skipped. Returns the removed ids."""
        targets = {element_ids} if isinstance(element_ids, str) else set(element_ids)
        removed = [el.id for el in self._elements if el.id in targets]
        if not removed:
            return []
        self._elements = [el for el in self._elements if el.id not in targets]
        logger.debug(f"Deleted {len(removed)} element(s)")
        self._finish(commit)
        return removed

    def duplicate(self, element_id: str, *, commit: bool = True) -> Optional[str]:
        """Copy an element, offset it and raise it to the top. Returns the new id."""
        source = self.get(element_id)
        if source is None:
            return None
        offset = self.config.duplicate_offset
        copy = clone_element(source, new_id=self._unique_id(None))
        copy = replace(
            copy,
            position=source.position.translated(offset, offset),
            z_index=self.max_z + 1,
        )
        copy = self._clamp(copy)
        self._elements.append(copy)
        self._finish(commit)
        return copy.id

    def move(self, element_id: str, x: float, y: float, *, commit: bool = True) -> bool:
        """Move an element: snap (when on), then clamp into the canvas."""
        index = self._index(element_id)
        if index is None or not (math.isfinite(x) and math.isfinite(y)):
            return False
        current = self._elements[index]
        if current.locked:
            logger.debug(f"move: {element_id} is locked")
            return False
        position = clamp_position(
            self._snap(x), self._snap(y), current.dimension,
            self.canvas_width, self.canvas_height,
        )
        self._elements[index] = replace(current, position=position)
        self._finish(commit)
        return True

    def set_positions(self, positions: Mapping[str, Position], *, commit: bool = True) -> int:
        """
        Place several elements exactly (no snapping), skipping locked ones.

        Returns:
            Number of elements moved
        """
        moved = 0
        for i, el in enumerate(self._elements):
            position = positions.get(el.id)
            if position is None or el.locked:
                continue
            self._elements[i] = replace(el, position=position)
            moved += 1
        if moved:
            self._finish(commit)
        return moved

    def resize(self, element_id: str, width: float, height: float, *, commit: bool = True) -> bool:
        """Resize an element honouring the size floor and its aspect lock."""
        index = self._index(element_id)
        if index is None or not (math.isfinite(width) and math.isfinite(height)):
            return False
        current = self._elements[index]
        if current.locked:
            logger.debug(f"resize: {element_id} is locked")
            return False
        dimension = constrain_resize(
            current.dimension, width, height,
            aspect_locked=current.aspect_ratio_locked,
            ratio=current.effective_ratio,
        )
        self._elements[index] = replace(current, dimension=dimension)
        self._finish(commit)
        return True

    def bring_to_front(self, element_id: str, *, commit: bool = True) -> bool:
        index = self._index(element_id)
        if index is None:
            return False
        self._elements[index] = replace(self._elements[index], z_index=self.max_z + 1)
        self._finish(commit)
        return True

    def send_to_back(self, element_id: str, *, commit: bool = True) -> bool:
        """
        Move an element below every other element.

        With room below the minimum the target takes ``min - 1``; otherwise
        every other element moves up by one and the target takes the old
        minimum, so z-indices never go negative.
        """
        index = self._index(element_id)
        if index is None:
            return False
        min_z = self.min_z
        if min_z > 0:
            self._elements[index] = replace(self._elements[index], z_index=min_z - 1)
        else:
            self._elements = [
                replace(el, z_index=min_z if el.id == element_id else el.z_index + 1)
                for el in self._elements
            ]
        self._finish(commit)
        return True

    def toggle_aspect_lock(self, element_id: str, *, commit: bool = True) -> bool:
        """Flip the aspect lock; locking captures the current width/height."""
        index = self._index(element_id)
        if index is None:
            return False
        current = self._elements[index]
        if current.aspect_ratio_locked:
            updated = replace(current, aspect_ratio_locked=False)
        else:
            updated = replace(current, aspect_ratio_locked=True, aspect_ratio=current.dimension.ratio)
        self._elements[index] = updated
        self._finish(commit)
        return True

    def remove_page(self, page_index: int, *, commit: bool = True) -> List[str]:
        """Delete a page's elements and shift later pages down by one."""
        removed = [el.id for el in self._elements if el.page_index == page_index]
        self._elements = [
            replace(el, page_index=el.page_index - 1) if el.page_index > page_index else el
            for el in self._elements
            if el.page_index != page_index
        ]
        if self.active_page >= page_index and self.active_page > 0:
            self.active_page -= 1
        logger.debug(f"Removed page {page_index} with {len(removed)} element(s)")
        self._finish(commit)
        return removed

    # ─────────────────────────────────────────────────────────────────────────
    # Replacement and history
    # ─────────────────────────────────────────────────────────────────────────

    def load(self, elements: Iterable[CanvasElement]) -> None:
        """
        Replace the whole collection and reset history with it as baseline.

        Duplicate ids are reassigned; sizes are floored. No listener is
        notified: a load is not an edit.
        """
        loaded: List[CanvasElement] = []
        seen: set[str] = set()
        for el in clone_elements(elements):
            if not el.id or el.id in seen:
                new_id = self._id_factory()
                while new_id in seen:
                    new_id = self._id_factory()
                logger.warning(f"Reassigned duplicate element id {el.id!r} to {new_id!r}")
                el = replace(el, id=new_id)
            seen.add(el.id)
            loaded.append(replace(el, dimension=el.dimension.floored()))
        self._elements = loaded
        self._uncommitted = False
        self.history.reset(self._elements)
        logger.debug(f"Loaded {len(loaded)} elements")

    def undo(self) -> bool:
        """
        Step back one committed state.

        With uncommitted gesture frames pending, only those frames are
        discarded: the collection returns to the last committed snapshot
        and the cursor stays put.
        """
        if self._uncommitted:
            self._uncommitted = False
            restored = self.history.current()
            if restored is not None:
                self._elements = restored
                logger.debug("Undo discarded uncommitted gesture frames")
                return True
        restored = self.history.undo()
        if restored is None:
            return False
        self._elements = restored
        return True

    def redo(self) -> bool:
        restored = self.history.redo()
        if restored is None:
            return False
        self._uncommitted = False
        self._elements = restored
        return True
