"""
Module: guides.detector

Purpose:
    Alignment guides shown while an element is dragged. Pure geometry:
    called on every intermediate drag position, never recorded in
    history, and never moves or snaps anything itself.

Key Classes:
    - Orientation: vertical (x line) / horizontal (y line)
    - Guide: One alignment line and the siblings on it
    - ActiveGuides: Nearest guide per axis plus every match

Key Functions:
    - detect_alignment_guides(): Main detection function

Algorithm:
    1. Tolerance in document units = screen tolerance / zoom
    2. Per axis, compare each anchor of the moving element (left, center,
       right / top, middle, bottom) with each anchor of each sibling on
       the same page
    3. Matches within tolerance are merged by line position
    4. The line with the smallest distance per axis is the active guide

Dependencies:
    - core.models: CanvasElement, Box, Position

Used By:
    - Drag interaction in the UI layer
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from doculoom.core.models import Box, CanvasElement, Position

logger = logging.getLogger(__name__)

# Screen-space tolerance in pixels
SNAP_DISTANCE = 5


class Orientation(str, Enum):
    VERTICAL = "vertical"      # constant x
    HORIZONTAL = "horizontal"  # constant y

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Guide:
    """
    An alignment line.

    Attributes:
        orientation: VERTICAL lines sit at an x, HORIZONTAL at a y
        position: Line coordinate in document units
        element_ids: Siblings with an anchor on the line
    """
    orientation: Orientation
    position: float
    element_ids: Tuple[str, ...]

    def to_dict(self) -> dict:
        return {"type": self.orientation.value, "position": self.position, "elementIds": list(self.element_ids)}


@dataclass(frozen=True)
class ActiveGuides:
    """
    Detection result.

    Attributes:
        vertical: Nearest vertical guide, if any
        horizontal: Nearest horizontal guide, if any
        alignments: Every matched line, merged by position
    """
    vertical: Optional[Guide] = None
    horizontal: Optional[Guide] = None
    alignments: Tuple[Guide, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.alignments


def _x_anchors(box: Box) -> Tuple[float, float, float]:
    return box.left, box.center_x, box.right


def _y_anchors(box: Box) -> Tuple[float, float, float]:
    return box.top, box.center_y, box.bottom


def _match_axis(
    orientation: Orientation,
    moving: Tuple[float, ...],
    siblings: List[Tuple[str, Tuple[float, ...]]],
    tolerance: float,
) -> Tuple[Optional[Guide], List[Guide]]:
    lines: Dict[float, List[str]] = {}
    nearest: Dict[float, float] = {}
    for sibling_id, anchors in siblings:
        for line in anchors:
            distance = min(abs(a - line) for a in moving)
            if distance >= tolerance:
                continue
            ids = lines.setdefault(line, [])
            if sibling_id not in ids:
                ids.append(sibling_id)
            nearest[line] = min(distance, nearest.get(line, distance))

    guides = [Guide(orientation, line, tuple(ids)) for line, ids in lines.items()]
    if not guides:
        return None, []
    active = min(guides, key=lambda g: nearest[g.position])
    return active, guides


def detect_alignment_guides(
    moving: CanvasElement,
    siblings: Iterable[CanvasElement],
    zoom: float = 1.0,
    tolerance: float = SNAP_DISTANCE,
    *,
    position: Optional[Position] = None,
) -> ActiveGuides:
    """
    Find alignment lines for a dragged element.

    Args:
        moving: Element being dragged
        siblings: Candidate elements (other pages and ``moving`` itself are skipped)
        zoom: Current zoom factor; the tolerance stays constant on screen
        tolerance: Screen-space tolerance in pixels
        position: Tentative drag position (defaults to the element's own)

    Returns:
        ActiveGuides; empty when nothing is within tolerance

    Raises:
        ValueError: If zoom is not positive

    Example:
        >>> a = create_shape_element(100, 0)
        >>> b = create_shape_element(102, 300)
        >>> detect_alignment_guides(a, [b]).vertical.position
        102
    """
    if zoom <= 0:
        raise ValueError(f"zoom must be positive: {zoom}")
    if position is not None:
        moving = replace(moving, position=position)
    doc_tolerance = tolerance / zoom

    candidates = [
        el for el in siblings
        if el.id != moving.id and el.page_index == moving.page_index
    ]
    box = moving.box
    vertical, v_guides = _match_axis(
        Orientation.VERTICAL, _x_anchors(box),
        [(el.id, _x_anchors(el.box)) for el in candidates], doc_tolerance,
    )
    horizontal, h_guides = _match_axis(
        Orientation.HORIZONTAL, _y_anchors(box),
        [(el.id, _y_anchors(el.box)) for el in candidates], doc_tolerance,
    )
    return ActiveGuides(vertical=vertical, horizontal=horizontal, alignments=tuple(v_guides + h_guides))
