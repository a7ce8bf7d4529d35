"""
Module: geometry

Purpose:
    Provides the Position, Dimension and Box dataclasses - the coordinate
    primitives every element carries. All values are unscaled document
    units; zoom is applied only by callers that talk to the screen.

Key Classes:
    - Position: Top-left corner of an element
    - Dimension: Width and height of an element (floored to MIN_ELEMENT_SIZE)
    - Box: Derived edge/center view used by alignment and guide detection

Dependencies:
    - dataclasses (std)
    - math (std)

Used By:
    - core.models.elements.CanvasElement
    - editor.transform
    - guides.detector
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Smallest width/height any element may have, on each axis
MIN_ELEMENT_SIZE = 10.0


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite: {value!r}")


@dataclass(frozen=True, slots=True)
class Position:
    """
    Top-left corner of an element in document units.

    Example:
        >>> Position(10, 20).translated(5, 5)
        Position(x=15, y=25)
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        _require_finite("x", self.x)
        _require_finite("y", self.y)

    def translated(self, dx: float, dy: float) -> Position:
        """Return a new position offset by (dx, dy)."""
        return Position(self.x + dx, self.y + dy)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> Position:
        return cls(x=data.get("x", 0), y=data.get("y", 0))


@dataclass(frozen=True, slots=True)
class Dimension:
    """
    Element size in document units.

    Construction does not floor the values; use ``floored()`` where the
    10-unit minimum must hold (every store operation does).
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        _require_finite("width", self.width)
        _require_finite("height", self.height)

    def floored(self, minimum: float = MIN_ELEMENT_SIZE) -> Dimension:
        """Return a copy with each axis raised to at least ``minimum``."""
        if self.width >= minimum and self.height >= minimum:
            return self
        return Dimension(max(minimum, self.width), max(minimum, self.height))

    @property
    def ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height if self.height else 1.0

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> Dimension:
        return cls(width=data.get("width", MIN_ELEMENT_SIZE), height=data.get("height", MIN_ELEMENT_SIZE))


@dataclass(frozen=True, slots=True)
class Box:
    """
    Axis-aligned rectangle with derived edges and centers.

    Rotation is ignored; guides and alignment work on the unrotated box.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def of(cls, position: Position, dimension: Dimension) -> Box:
        return cls(position.x, position.y, dimension.width, dimension.height)

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def contains(self, px: float, py: float) -> bool:
        """Check whether a point lies inside the box (edges inclusive)."""
        return self.left <= px <= self.right and self.top <= py <= self.bottom
