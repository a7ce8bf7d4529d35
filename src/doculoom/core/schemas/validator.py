"""
Schema Validation Utilities

Validates design payloads before they are loaded into an editor.

Two levels:
- Basic checks (always): required keys, document type, positive canvas
  size, element records with a known type and finite geometry.
- Strict mode: full JSON Schema validation with ``jsonschema`` against
  ``design.schema.json`` shipped beside this module.

Fail fast: the first violation raises ValidationError with a dotted path.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

import jsonschema

# Payload format version written by persistence.payload
DESIGN_SCHEMA_VERSION = 1

ELEMENT_TYPES = ("text", "shape", "image", "table", "dataField", "qrcode", "toc-list")
SECTION_TYPES = ("cover", "toc", "chapter", "product", "back")

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_design(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a design payload (flat or catalog).

    Args:
        data: Payload dictionary as produced by persistence.payload
        strict: If True, also run jsonschema; if False, basic checks only

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Design payload must be an object")

    required = ["canvasWidth", "canvasHeight", "elements"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing],
        )

    for key in ("canvasWidth", "canvasHeight"):
        value = data[key]
        if not _is_number(value) or value <= 0:
            raise ValidationError(f"Invalid {key}: {value!r} (must be positive)", path=key)

    page_count = data.get("pageCount", 1)
    if not isinstance(page_count, int) or page_count < 1:
        raise ValidationError(f"Invalid pageCount: {page_count!r}", path="pageCount")

    doc_type = data.get("type", "single")
    if doc_type not in ("single", "catalog"):
        raise ValidationError(f"Invalid type: {doc_type!r}", path="type")

    validate_elements(data["elements"], "elements")

    if doc_type == "catalog":
        _validate_catalog_data(data.get("catalogData"), "catalogData")

    if strict:
        schema = _load_schema("design")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e


def validate_elements(records: Any, path: str) -> None:
    """Validate a list of element records and their id uniqueness."""
    if not isinstance(records, list):
        raise ValidationError(f"{path} must be a list", path=path)
    seen: set[str] = set()
    for i, record in enumerate(records):
        _validate_element(record, f"{path}[{i}]")
        if record["id"] in seen:
            raise ValidationError(f"Duplicate element id: {record['id']!r}", path=f"{path}[{i}].id")
        seen.add(record["id"])


def _validate_element(data: Any, path: str) -> None:
    if not isinstance(data, dict):
        raise ValidationError("Element must be an object", path=path)
    missing = [f for f in ("id", "type", "position", "dimension") if f not in data]
    if missing:
        raise ValidationError(
            f"Element missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )
    if data["type"] not in ELEMENT_TYPES:
        raise ValidationError(f"Invalid element type: {data['type']!r}", path=f"{path}.type")

    position = data["position"]
    if not isinstance(position, dict) or not all(_is_finite(position.get(k)) for k in ("x", "y")):
        raise ValidationError("position must have finite x and y", path=f"{path}.position")

    dimension = data["dimension"]
    if not isinstance(dimension, dict) or not all(
        _is_finite(dimension.get(k)) for k in ("width", "height")
    ):
        raise ValidationError("dimension must have finite width and height", path=f"{path}.dimension")

    page_index = data.get("pageIndex", 0)
    if not isinstance(page_index, int) or page_index < 0:
        raise ValidationError(f"Invalid pageIndex: {page_index!r}", path=f"{path}.pageIndex")


def _validate_catalog_data(data: Any, path: str) -> None:
    if not isinstance(data, dict):
        raise ValidationError("catalogData must be an object", path=path)
    sections = data.get("sections", {})
    if not isinstance(sections, dict):
        raise ValidationError("sections must be an object", path=f"{path}.sections")
    for name, slot in sections.items():
        if name not in SECTION_TYPES:
            raise ValidationError(f"Unknown section: {name!r}", path=f"{path}.sections.{name}")
        _validate_slot(slot, f"{path}.sections.{name}")
    chapters = data.get("chapterDesigns", {})
    if not isinstance(chapters, dict):
        raise ValidationError("chapterDesigns must be an object", path=f"{path}.chapterDesigns")
    for group, slot in chapters.items():
        _validate_slot(slot, f"{path}.chapterDesigns.{group}")


def _validate_slot(data: Any, path: str) -> None:
    if not isinstance(data, dict):
        raise ValidationError("Section must be an object", path=path)
    validate_elements(data.get("elements", []), f"{path}.elements")
    background = data.get("backgroundColor", "#ffffff")
    if not isinstance(background, str):
        raise ValidationError("backgroundColor must be a string", path=f"{path}.backgroundColor")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite(value: Any) -> bool:
    return _is_number(value) and math.isfinite(value)
