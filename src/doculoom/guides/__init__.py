"""Alignment guides computed during drag."""

from .detector import SNAP_DISTANCE, ActiveGuides, Guide, Orientation, detect_alignment_guides

__all__ = [
    "SNAP_DISTANCE",
    "ActiveGuides",
    "Guide",
    "Orientation",
    "detect_alignment_guides",
]
