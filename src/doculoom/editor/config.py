"""
Module: editor.config

Purpose:
    Configuration for a document editor instance. Immutable settings with
    validation on construction, plus a tolerant JSON loader.

Key Classes:
    - EditorConfig: Canvas size, grid, history and gesture settings

Key Functions:
    - load_editor_config(path): Read settings from JSON, falling back to
      defaults on any problem

Dependencies:
    - dataclasses (std)
    - json (std)

Used By:
    - editor.document: DocumentEditor construction
    - editor.store: Snapping, clamping and duplicate offset
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

# US Letter at 96 DPI
DEFAULT_CANVAS_WIDTH = 816
DEFAULT_CANVAS_HEIGHT = 1056

PAGE_SIZES: dict[str, tuple[int, int]] = {
    "letter": (816, 1056),
    "a4": (794, 1123),
    "legal": (816, 1344),
}

MIN_ZOOM = 0.25
MAX_ZOOM = 2.0


@dataclass(frozen=True)
class EditorConfig:
    """
    Configuration for a document editor (immutable).

    Attributes:
        canvas_width: Page width in document units
        canvas_height: Page height in document units
        background_color: Initial page background
        grid_size: Snap grid spacing
        snap_to_grid: Whether moves and placements snap initially
        show_grid: Whether the grid is drawn initially (advisory)
        history_capacity: Maximum undo snapshots kept per document
        duplicate_offset: Offset applied to both axes when duplicating
        guide_tolerance: Screen-space alignment guide tolerance
        autosave_delay: Seconds of quiet before an auto-save write

    Example:
        >>> config = EditorConfig(grid_size=8)
        >>> config.snap_to_grid
        True
    """

    canvas_width: float = DEFAULT_CANVAS_WIDTH
    canvas_height: float = DEFAULT_CANVAS_HEIGHT
    background_color: str = "#ffffff"

    # Grid
    grid_size: float = 10
    snap_to_grid: bool = True
    show_grid: bool = True

    # History
    history_capacity: int = 50

    # Gestures
    duplicate_offset: float = 20
    guide_tolerance: float = 5

    # Persistence
    autosave_delay: float = 2.0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.canvas_width <= 0:
            raise ValueError(f"canvas_width must be positive: {self.canvas_width}")
        if self.canvas_height <= 0:
            raise ValueError(f"canvas_height must be positive: {self.canvas_height}")
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive: {self.grid_size}")
        if self.history_capacity < 2:
            raise ValueError(f"history_capacity must be >= 2: {self.history_capacity}")
        if self.guide_tolerance < 0:
            raise ValueError(f"guide_tolerance must be >= 0: {self.guide_tolerance}")
        if self.autosave_delay < 0:
            raise ValueError(f"autosave_delay must be >= 0: {self.autosave_delay}")

    @classmethod
    def for_page_size(cls, name: str, **overrides: Any) -> EditorConfig:
        """Build a config for a named page size ("letter", "a4", "legal")."""
        try:
            width, height = PAGE_SIZES[name]
        except KeyError:
            raise ValueError(f"Unknown page size: {name!r}") from None
        return cls(canvas_width=width, canvas_height=height, **overrides)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_editor_config(path: Optional[Path]) -> EditorConfig:
    """
    Load editor settings from a JSON file.

    Any malformed data results in a graceful fallback to defaults, never
    an exception: unknown keys are ignored, invalid values drop the whole
    file with a warning.

    Args:
        path: JSON file path (None or missing file gives defaults)

    Returns:
        EditorConfig instance
    """
    if path is None or not path.exists():
        return EditorConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Editor settings unreadable at {path}: {e}; using defaults")
        return EditorConfig()

    if not isinstance(data, dict):
        logger.warning(f"Editor settings at {path} are not an object; using defaults")
        return EditorConfig()

    known = {f.name for f in fields(EditorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.debug(f"Ignoring unknown editor settings: {unknown}")

    try:
        return EditorConfig(**{k: v for k, v in data.items() if k in known})
    except (TypeError, ValueError) as e:
        logger.warning(f"Invalid editor settings at {path}: {e}; using defaults")
        return EditorConfig()
