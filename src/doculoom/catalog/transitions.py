"""
Slot switching as a pure function.

The live collection of the section being left is written back into its
slot, a chapter group seen for the first time is seeded from the chapter
template, and a fresh copy of the destination slot is handed out for the
live store. Nothing here touches an editor.
"""

from __future__ import annotations

import logging
from typing import Tuple

from .models import CatalogSlots, CatalogTarget, SectionSlot, SectionType

logger = logging.getLogger(__name__)


def switch_slot(
    slots: CatalogSlots,
    current: CatalogTarget,
    live: SectionSlot,
    destination: CatalogTarget,
) -> Tuple[CatalogSlots, SectionSlot]:
    """
    Move editing from ``current`` to ``destination``.

    Args:
        slots: Stored slots before the switch
        current: Target whose contents are live
        live: The live collection of ``current``
        destination: Target to edit next

    Returns:
        (updated slots, copy of the destination slot to load)

    Example:
        >>> slots, slot = switch_slot(slots, CatalogTarget("cover"), live, CatalogTarget("toc"))
        >>> slots.sections[SectionType.COVER] == live
        True
    """
    updated = slots.with_slot(current, live.copy())

    group = destination.group
    if group is not None and group not in updated.chapter_designs:
        template = updated.sections[SectionType.CHAPTER]
        logger.debug(f"Seeding chapter design for {group!r} from template ({len(template.elements)} elements)")
        updated = updated.with_slot(destination, template.copy())

    return updated, updated.get(destination).copy()
