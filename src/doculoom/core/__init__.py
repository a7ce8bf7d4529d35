"""
doculoom Core Package

Shared data models and utilities for every engine component.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Elements and styles are frozen dataclasses; edits swap instances.

2. **Closed Variant Set**
   - ``CanvasElement.kind`` is the discriminant, ``payload`` the variant
     data. Copy and serialization dispatch on ``kind``.

3. **Structural Copies**
   - Snapshots and slot hand-offs use ``clone_element`` rather than a
     serialize/deserialize round-trip.
"""

from .models import CanvasElement, Dimension, ElementKind, Position
from .utils import clone_element, clone_elements

__all__ = [
    "CanvasElement",
    "Dimension",
    "ElementKind",
    "Position",
    "clone_element",
    "clone_elements",
]
