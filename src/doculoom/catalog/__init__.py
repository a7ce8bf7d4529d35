"""
Catalog Package

Multi-section catalog documents: section slots, switching between them
and planning the exported page sequence.
"""

from .assembly import CatalogPlan, PlannedPage, plan_catalog
from .manager import CatalogSectionManager
from .models import CatalogSlots, CatalogTarget, SectionSlot, SectionType
from .transitions import switch_slot

__all__ = [
    "CatalogPlan",
    "PlannedPage",
    "plan_catalog",
    "CatalogSectionManager",
    "CatalogSlots",
    "CatalogTarget",
    "SectionSlot",
    "SectionType",
    "switch_slot",
]
