"""
Module: editor.transform

Purpose:
    Pure geometry for element transforms: grid snapping, canvas clamping,
    constrained resizing, multi-element alignment and distribution.
    Functions here never touch the store; they return new positions or
    dimensions for the caller to apply and commit.

Key Functions:
    - snap_to_grid(value, grid_size): Round to the nearest grid multiple
    - clamp_position(...): Keep an element inside the canvas
    - constrain_resize(...): Apply the size floor and aspect lock
    - align_positions(elements, mode): New positions for an alignment
    - distribute_positions(elements, axis): New positions for distribution

Algorithm (distribute):
    1. Sort along the axis by leading edge
    2. span = trailing edge of last - leading edge of first
    3. gap = (span - sum of sizes along the axis) / (count - 1)
    4. Lay elements out from the first one with the uniform gap

Dependencies:
    - core.models: CanvasElement, Dimension, Position

Used By:
    - editor.store: move/resize
    - editor.document: align/distribute on the selection
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Sequence

from doculoom.core.models import MIN_ELEMENT_SIZE, CanvasElement, Dimension, Position

MIN_ALIGN_COUNT = 2
MIN_DISTRIBUTE_COUNT = 3


class AlignMode(str, Enum):
    """Edge or midpoint that alignment equalizes."""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"  # horizontal midpoint
    MIDDLE = "middle"  # vertical midpoint

    def __str__(self) -> str:
        return self.value


class Axis(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def __str__(self) -> str:
        return self.value


# ─────────────────────────────────────────────────────────────────────────────
# Single-element helpers
# ─────────────────────────────────────────────────────────────────────────────

def snap_to_grid(value: float, grid_size: float) -> float:
    """Round ``value`` to the nearest multiple of ``grid_size``."""
    if grid_size <= 0:
        return value
    return round(value / grid_size) * grid_size


def clamp_position(
    x: float,
    y: float,
    dimension: Dimension,
    canvas_width: float,
    canvas_height: float,
) -> Position:
    """
    Clamp a top-left corner into [0, canvas - size] on each axis.

    An element larger than the canvas is pinned to 0.
    """
    return Position(
        max(0.0, min(x, canvas_width - dimension.width)),
        max(0.0, min(y, canvas_height - dimension.height)),
    )


def constrain_resize(
    current: Dimension,
    width: float,
    height: float,
    *,
    aspect_locked: bool = False,
    ratio: Optional[float] = None,
    minimum: float = MIN_ELEMENT_SIZE,
) -> Dimension:
    """
    Compute the size a resize request actually produces.

    Without aspect lock each axis is floored independently. With aspect
    lock, the axis whose request differs more from the current size
    drives; the other axis is derived from ``ratio`` (width / height).
    Both are floored afterwards.

    Example:
        >>> constrain_resize(Dimension(100, 100), 150, 120, aspect_locked=True, ratio=1.0)
        Dimension(width=150, height=150.0)
    """
    if not aspect_locked:
        return Dimension(max(minimum, width), max(minimum, height))

    ratio = ratio or current.ratio
    delta_w = abs(width - current.width)
    delta_h = abs(height - current.height)
    if delta_w >= delta_h:
        new_w = max(minimum, width)
        new_h = max(minimum, new_w / ratio)
    else:
        new_h = max(minimum, height)
        new_w = max(minimum, new_h * ratio)
    return Dimension(new_w, new_h)


# ─────────────────────────────────────────────────────────────────────────────
# Multi-element operations
# ─────────────────────────────────────────────────────────────────────────────

def align_positions(elements: Sequence[CanvasElement], mode: AlignMode) -> Dict[str, Position]:
    """
    Compute aligned positions for a selection.

    Edge modes move every element's named edge to the extreme edge across
    the selection (min for left/top, max for right/bottom). CENTER/MIDDLE
    move each midpoint onto the average midpoint.

    Returns:
        Mapping of element id to new position; empty below two elements
    """
    if len(elements) < MIN_ALIGN_COUNT:
        return {}
    mode = AlignMode(mode)
    boxes = [(el.id, el.box) for el in elements]

    if mode is AlignMode.LEFT:
        left = min(b.left for _, b in boxes)
        return {i: Position(left, b.y) for i, b in boxes}
    if mode is AlignMode.RIGHT:
        right = max(b.right for _, b in boxes)
        return {i: Position(right - b.width, b.y) for i, b in boxes}
    if mode is AlignMode.TOP:
        top = min(b.top for _, b in boxes)
        return {i: Position(b.x, top) for i, b in boxes}
    if mode is AlignMode.BOTTOM:
        bottom = max(b.bottom for _, b in boxes)
        return {i: Position(b.x, bottom - b.height) for i, b in boxes}
    if mode is AlignMode.CENTER:
        center = sum(b.center_x for _, b in boxes) / len(boxes)
        return {i: Position(center - b.width / 2, b.y) for i, b in boxes}
    middle = sum(b.center_y for _, b in boxes) / len(boxes)
    return {i: Position(b.x, middle - b.height / 2) for i, b in boxes}


def distribute_positions(elements: Sequence[CanvasElement], axis: Axis) -> Dict[str, Position]:
    """
    Compute evenly distributed positions for a selection.

    The first and last elements (by leading edge) stay put; the others
    are laid out so that every gap between consecutive elements is equal.
    The occupied size is summed along the distribution axis (heights for
    VERTICAL).

    Returns:
        Mapping of element id to new position; empty below three elements
    """
    if len(elements) < MIN_DISTRIBUTE_COUNT:
        return {}
    horizontal = Axis(axis) is Axis.HORIZONTAL

    if horizontal:
        ordered = sorted(elements, key=lambda el: el.position.x)
        start = ordered[0].box.left
        end = ordered[-1].box.right
        sizes = [el.dimension.width for el in ordered]
    else:
        ordered = sorted(elements, key=lambda el: el.position.y)
        start = ordered[0].box.top
        end = ordered[-1].box.bottom
        sizes = [el.dimension.height for el in ordered]

    gap = (end - start - sum(sizes)) / (len(ordered) - 1)
    positions: Dict[str, Position] = {}
    cursor = start
    for el, size in zip(ordered, sizes):
        if horizontal:
            positions[el.id] = Position(cursor, el.position.y)
        else:
            positions[el.id] = Position(el.position.x, cursor)
        cursor += size + gap
    return positions
