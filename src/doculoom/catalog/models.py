"""
Module: catalog.models

Purpose:
    Data model of a multi-section catalog. A catalog is a fixed set of
    section templates (cover, TOC, chapter divider, product page, back
    cover), each with its own element collection, plus per-group chapter
    designs that override the chapter divider template.

Key Classes:
    - SectionType: The five catalog sections
    - SectionSlot: Stored element collection + background of one section
    - CatalogTarget: Which slot is being edited (section, optional group)
    - CatalogSlots: Every slot of a catalog

Dependencies:
    - core.utils: Element cloning and serialization

Used By:
    - catalog.transitions, catalog.manager, catalog.assembly
    - persistence.payload
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional, Tuple

from doculoom.core.models import CanvasElement, ElementKind
from doculoom.core.utils import clone_elements, deserialize_elements, serialize_elements

DEFAULT_BACKGROUND = "#ffffff"


class SectionType(str, Enum):
    COVER = "cover"
    TOC = "toc"
    CHAPTER = "chapter"
    PRODUCT = "product"
    BACK = "back"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _SECTION_LABELS[self]


_SECTION_LABELS = {
    SectionType.COVER: "Cover Page",
    SectionType.TOC: "Table of Contents",
    SectionType.CHAPTER: "Chapter Divider",
    SectionType.PRODUCT: "Product Page",
    SectionType.BACK: "Back Cover",
}


@dataclass(frozen=True)
class SectionSlot:
    """Stored contents of one section or chapter design (immutable)."""

    elements: Tuple[CanvasElement, ...] = ()
    background_color: str = DEFAULT_BACKGROUND

    def __post_init__(self) -> None:
        if not isinstance(self.elements, tuple):
            object.__setattr__(self, "elements", tuple(self.elements))

    @property
    def is_empty(self) -> bool:
        return not self.elements

    def copy(self) -> SectionSlot:
        """Deep copy: the result shares no element with this slot."""
        return SectionSlot(tuple(clone_elements(self.elements)), self.background_color)

    def find(self, kind: ElementKind) -> Optional[CanvasElement]:
        return next((el for el in self.elements if el.kind is kind), None)

    def to_dict(self) -> dict:
        return {
            "elements": serialize_elements(self.elements),
            "backgroundColor": self.background_color,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> SectionSlot:
        if not data:
            return cls()
        return cls(
            elements=tuple(deserialize_elements(data.get("elements") or [])),
            background_color=data.get("backgroundColor") or DEFAULT_BACKGROUND,
        )


@dataclass(frozen=True)
class CatalogTarget:
    """
    The slot being edited.

    ``group`` selects a per-group chapter design and is only valid with
    the chapter section; without it the chapter template is edited.
    """

    section: SectionType
    group: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.section, SectionType):
            object.__setattr__(self, "section", SectionType(self.section))
        if self.group is not None and self.section is not SectionType.CHAPTER:
            raise ValueError(f"group is only valid for the chapter section, not {self.section}")

    def __str__(self) -> str:
        return f"{self.section}:{self.group}" if self.group else str(self.section)


def _empty_sections() -> Dict[SectionType, SectionSlot]:
    return {section: SectionSlot() for section in SectionType}


@dataclass(frozen=True)
class CatalogSlots:
    """
    Every stored slot of a catalog.

    Updates return new instances; the dicts are never mutated after
    construction.
    """

    sections: Dict[SectionType, SectionSlot] = field(default_factory=_empty_sections)
    chapter_designs: Dict[str, SectionSlot] = field(default_factory=dict)

    def __post_init__(self) -> None:
        missing = [s for s in SectionType if s not in self.sections]
        if missing:
            filled = dict(self.sections)
            for section in missing:
                filled[section] = SectionSlot()
            object.__setattr__(self, "sections", filled)

    def get(self, target: CatalogTarget) -> SectionSlot:
        """Stored slot for a target; an unseen chapter group reads as the template."""
        if target.group is not None:
            return self.chapter_designs.get(target.group, self.sections[SectionType.CHAPTER])
        return self.sections[target.section]

    def with_slot(self, target: CatalogTarget, slot: SectionSlot) -> CatalogSlots:
        if target.group is not None:
            return replace(self, chapter_designs={**self.chapter_designs, target.group: slot})
        return replace(self, sections={**self.sections, target.section: slot})

    def chapter_design_for(self, group: str) -> SectionSlot:
        return self.chapter_designs.get(group, self.sections[SectionType.CHAPTER])

    def to_dict(self) -> dict:
        return {
            "sections": {str(s): slot.to_dict() for s, slot in self.sections.items()},
            "chapterDesigns": {g: slot.to_dict() for g, slot in self.chapter_designs.items()},
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> CatalogSlots:
        """Read ``{sections, chapterDesigns}``; unknown section names are rejected."""
        if not data:
            return cls()
        sections = {
            SectionType(name): SectionSlot.from_dict(slot)
            for name, slot in (data.get("sections") or {}).items()
        }
        designs = {
            str(group): SectionSlot.from_dict(slot)
            for group, slot in (data.get("chapterDesigns") or {}).items()
        }
        return cls(sections=sections, chapter_designs=designs)
