"""
Module: persistence.payload

Purpose:
    Convert an open document to and from its persisted payload.

    Flat documents store their elements directly. Catalog documents store
    ``elements: []`` and every section slot under ``catalogData``.

Key Functions:
    - build_design_payload(editor, catalog): Payload of the open document
    - apply_design_payload(editor, catalog, data): Validate and open a payload
    - write_design_file(path, payload) / read_design_file(path): JSON files

Dependencies:
    - core.schemas.validator: Payload validation
    - core.utils.serialization: Element records

Used By:
    - persistence.autosave: Payload of each auto-save
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from doculoom.catalog.manager import CatalogSectionManager
from doculoom.catalog.models import CatalogSlots
from doculoom.core.schemas import DESIGN_SCHEMA_VERSION, ValidationError, validate_design
from doculoom.core.utils import deserialize_elements, serialize_elements
from doculoom.editor.document import DocumentEditor

logger = logging.getLogger(__name__)

DOC_TYPE_SINGLE = "single"
DOC_TYPE_CATALOG = "catalog"


def build_design_payload(
    editor: DocumentEditor,
    catalog: Optional[CatalogSectionManager] = None,
) -> dict[str, Any]:
    """
    Build the persisted payload of the open document.

    The live section is written into the catalog data without switching
    sections.

    Example:
        >>> payload = build_design_payload(editor)
        >>> payload["type"], payload["catalogData"]
        ('single', {})
    """
    width, height = editor.canvas_size
    payload: dict[str, Any] = {
        "schemaVersion": DESIGN_SCHEMA_VERSION,
        "canvasWidth": width,
        "canvasHeight": height,
        "pageCount": editor.page_count,
        "backgroundColor": editor.background_color,
    }
    if catalog is not None and catalog.enabled:
        payload["type"] = DOC_TYPE_CATALOG
        payload["elements"] = []
        payload["catalogData"] = catalog.to_payload()
    else:
        payload["type"] = DOC_TYPE_SINGLE
        payload["elements"] = serialize_elements(editor.elements)
        payload["catalogData"] = {}
    return payload


def apply_design_payload(
    editor: DocumentEditor,
    catalog: Optional[CatalogSectionManager],
    data: Any,
    *,
    strict: bool = False,
) -> None:
    """
    Validate a payload and open it in the editor.

    Everything is parsed before any state changes, so an invalid payload
    leaves the open document untouched.

    Args:
        editor: Editor to load into
        catalog: Catalog manager bound to ``editor`` (required for catalog payloads)
        data: Parsed payload
        strict: Also run JSON schema validation

    Raises:
        ValidationError: If the payload is malformed
    """
    validate_design(data, strict=strict)
    doc_type = data.get("type", DOC_TYPE_SINGLE)

    try:
        elements = deserialize_elements(data["elements"])
        slots = CatalogSlots.from_dict(data.get("catalogData")) if doc_type == DOC_TYPE_CATALOG else None
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid design content: {e}") from e

    if slots is not None and catalog is None:
        raise ValidationError("Catalog payload requires a catalog manager", path="type")

    if catalog is not None:
        catalog.load(CatalogSlots(), enabled=False)
    editor.load_document(
        elements,
        page_count=data.get("pageCount", 1),
        canvas_size=(data["canvasWidth"], data["canvasHeight"]),
        background_color=data.get("backgroundColor"),
    )
    if slots is not None:
        catalog.load(slots, enabled=True)
    logger.info(f"Opened {doc_type} design")


def write_design_file(path: Path, payload: dict[str, Any]) -> None:
    """Write a payload as JSON, replacing the file only once fully written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    tmp_path.replace(path)
    logger.debug(f"Wrote design to {path}")


def read_design_file(path: Path) -> dict[str, Any]:
    """
    Read a payload from a JSON file.

    Raises:
        ValidationError: If the file is missing or not valid JSON
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValidationError(f"Cannot read design {path}: {e}", path=str(path)) from e
