"""
Module: editor.patching

Purpose:
    Merge a partial patch into an element. Nested models (styles, TOC and
    table settings, format, position, dimension) merge field by field, so
    ``{"text_style": {"font_size": 20}}`` changes the size and keeps every
    other text style field. Keys may be snake_case or the camelCase used in
    external payloads.

Key Functions:
    - apply_patch(element, patch): New element with the patch merged

Dependencies:
    - dataclasses (std)

Used By:
    - editor.store.ElementStore.update
"""

from __future__ import annotations

import logging
import re
from dataclasses import fields, is_dataclass, replace
from typing import Any, Mapping

from doculoom.core.models import CanvasElement, ElementFormat, TableColumn

logger = logging.getLogger(__name__)

# Element attributes a patch may not touch
_PROTECTED = frozenset({"id", "kind"})

# External names that do not follow the camelCase -> snake_case rule
_ALIASES = {
    "border_radius": "corner_radius",
    "type": "kind",
}

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def normalize_key(key: str) -> str:
    """Convert an external camelCase key to the model's attribute name."""
    snake = _CAMEL.sub("_", key).lower()
    return _ALIASES.get(snake, snake)


def _field_names(obj: Any) -> frozenset[str]:
    return frozenset(f.name for f in fields(obj))


def merge_model(current: Any, changes: Mapping[str, Any]) -> Any:
    """
    Merge ``changes`` into a frozen dataclass instance, recursively.

    Unknown keys are dropped with a warning.
    """
    names = _field_names(current)
    updates: dict[str, Any] = {}
    for raw_key, value in changes.items():
        key = normalize_key(raw_key)
        if key not in names:
            logger.warning(f"Ignoring unknown {type(current).__name__} field {raw_key!r}")
            continue
        updates[key] = _merge_value(getattr(current, key), key, value)
    return replace(current, **updates) if updates else current


def _merge_value(current: Any, key: str, value: Any) -> Any:
    if isinstance(value, Mapping):
        if is_dataclass(current):
            return merge_model(current, value)
        if key == "format":
            return merge_model(ElementFormat(), value)
    if key == "columns" and isinstance(value, (list, tuple)):
        return tuple(
            TableColumn.from_dict(c) if isinstance(c, Mapping) else c for c in value
        )
    return value


def apply_patch(element: CanvasElement, patch: Mapping[str, Any]) -> CanvasElement:
    """
    Merge a partial patch into an element.

    Keys naming element attributes update the element; keys naming
    payload attributes update the variant payload. Every field not named
    in the patch is preserved.

    Args:
        element: Element to update
        patch: Partial mapping of attribute name to new value

    Returns:
        New CanvasElement (``element`` itself when nothing applied)

    Raises:
        ValueError: If a merged value violates a model invariant

    Example:
        >>> updated = apply_patch(text_el, {"textStyle": {"fontSize": 20}})
        >>> updated.payload.text_style.font_family == text_el.payload.text_style.font_family
        True
    """
    element_fields = _field_names(element) - {"payload"}
    payload_fields = _field_names(element.payload)

    element_updates: dict[str, Any] = {}
    payload_updates: dict[str, Any] = {}
    for raw_key, value in patch.items():
        key = normalize_key(raw_key)
        if key in _PROTECTED:
            logger.warning(f"Ignoring patch of protected field {raw_key!r} on {element.id}")
        elif key in element_fields:
            element_updates[key] = _merge_value(getattr(element, key), key, value)
        elif key in payload_fields:
            payload_updates[key] = _merge_value(getattr(element.payload, key), key, value)
        else:
            logger.warning(f"Ignoring unknown field {raw_key!r} for {element.kind} element {element.id}")

    if payload_updates:
        element_updates["payload"] = replace(element.payload, **payload_updates)
    if not element_updates:
        return element
    return replace(element, **element_updates)
