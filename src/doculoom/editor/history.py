"""
Module: editor.history

Purpose:
    Bounded, linear undo/redo over element snapshots. One instance per
    document: the catalog manager resets it on every section switch so a
    timeline never spans two sections.

Key Classes:
    - HistoryManager: Snapshot list with a cursor

Dependencies:
    - core.utils.cloning: Structural copies in and out

Used By:
    - editor.store.ElementStore
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from doculoom.core.models import CanvasElement
from doculoom.core.utils import clone_elements

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_CAPACITY = 50

Snapshot = Tuple[CanvasElement, ...]


class HistoryManager:
    """
    Linear undo/redo history with a fixed capacity.

    The cursor points at the snapshot that matches the live collection.
    ``push`` drops everything after the cursor (no branching) and evicts
    the oldest entry once capacity is exceeded. ``undo``/``redo`` hand out
    fresh copies, never the stored snapshot.

    Example:
        >>> history = HistoryManager(capacity=10)
        >>> history.reset([])
        >>> history.push([element])
        >>> history.undo()
        []
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        if capacity < 2:
            raise ValueError(f"capacity must be >= 2: {capacity}")
        self.capacity = capacity
        self._snapshots: List[Snapshot] = []
        self._cursor = -1

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._snapshots)

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def push(self, elements: Iterable[CanvasElement]) -> None:
        """Record a committed state, truncating any redo tail."""
        del self._snapshots[self._cursor + 1:]
        self._snapshots.append(tuple(clone_elements(elements)))
        overflow = len(self._snapshots) - self.capacity
        if overflow > 0:
            del self._snapshots[:overflow]
        self._cursor = len(self._snapshots) - 1

    def reset(self, baseline: Optional[Iterable[CanvasElement]] = None) -> None:
        """Clear history, optionally seeding a baseline snapshot."""
        self._snapshots.clear()
        self._cursor = -1
        if baseline is not None:
            self.push(baseline)

    def current(self) -> Optional[List[CanvasElement]]:
        """Fresh copy of the snapshot at the cursor without moving it."""
        if self._cursor < 0:
            return None
        return clone_elements(self._snapshots[self._cursor])

    def undo(self) -> Optional[List[CanvasElement]]:
        """Step back one snapshot; None when already at the oldest."""
        if not self.can_undo:
            return None
        self._cursor -= 1
        logger.debug(f"Undo to snapshot {self._cursor}/{len(self._snapshots) - 1}")
        return clone_elements(self._snapshots[self._cursor])

    def redo(self) -> Optional[List[CanvasElement]]:
        """Step forward one snapshot; None when already at the newest."""
        if not self.can_redo:
            return None
        self._cursor += 1
        logger.debug(f"Redo to snapshot {self._cursor}/{len(self._snapshots) - 1}")
        return clone_elements(self._snapshots[self._cursor])
