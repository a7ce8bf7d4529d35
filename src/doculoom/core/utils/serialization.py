"""
Serialization Utilities

Converts elements to and from the plain nested records exchanged with
the persistence and render collaborators. Keys are camelCase to match
the external payload; variant fields sit flat on the element record
(``content``, ``textStyle``, ``shapeStyle``, ``tocSettings`` ...) and
are dispatched on ``type`` when reading.

Unknown element types are rejected with ValueError; optional fields
fall back to the same defaults a freshly created element would use.
"""

from __future__ import annotations

from typing import Any, Iterable, List

from ..models.elements import (
    CanvasElement,
    DataFieldContent,
    ElementKind,
    ImageContent,
    QRCodeContent,
    ShapeContent,
    TableContent,
    TextContent,
    TocListContent,
)
from ..models.geometry import Dimension, Position
from ..models.styles import ElementFormat, ShapeStyle, ShapeType, TableSettings, TextStyle, TocSettings


# ─────────────────────────────────────────────────────────────────────────────
# Payload <-> record fields
# ─────────────────────────────────────────────────────────────────────────────

def _payload_fields(element: CanvasElement) -> dict[str, Any]:
    p = element.payload
    kind = element.kind
    if kind is ElementKind.TEXT or kind is ElementKind.DATA_FIELD:
        return {"content": p.content, "textStyle": p.text_style.to_dict()}
    if kind is ElementKind.QRCODE:
        d = {"content": p.content}
        if p.qr_code_id:
            d["qrCodeId"] = p.qr_code_id
        return d
    if kind is ElementKind.SHAPE:
        return {"shapeType": p.shape_type.value, "shapeStyle": p.shape_style.to_dict()}
    if kind is ElementKind.IMAGE:
        d = {"isImageField": p.is_image_field}
        if p.image_src:
            d["imageSrc"] = p.image_src
        return d
    if kind is ElementKind.TOC_LIST:
        return {"textStyle": p.text_style.to_dict(), "tocSettings": p.toc_settings.to_dict()}
    if kind is ElementKind.TABLE:
        return {"tableSettings": p.table_settings.to_dict()}
    raise ValueError(f"Unhandled element kind: {kind}")


def _payload_from(kind: ElementKind, data: dict[str, Any]):
    if kind is ElementKind.TEXT:
        defaults = TextContent()
        return TextContent(
            content=data.get("content", defaults.content),
            text_style=TextStyle.from_dict(data.get("textStyle"), defaults.text_style),
        )
    if kind is ElementKind.DATA_FIELD:
        defaults = DataFieldContent()
        return DataFieldContent(
            content=data.get("content", defaults.content),
            text_style=TextStyle.from_dict(data.get("textStyle"), defaults.text_style),
        )
    if kind is ElementKind.QRCODE:
        return QRCodeContent(content=data.get("content", ""), qr_code_id=data.get("qrCodeId"))
    if kind is ElementKind.SHAPE:
        return ShapeContent(
            shape_type=ShapeType(data.get("shapeType", ShapeType.RECTANGLE)),
            shape_style=ShapeStyle.from_dict(data.get("shapeStyle")),
        )
    if kind is ElementKind.IMAGE:
        return ImageContent(image_src=data.get("imageSrc"), is_image_field=data.get("isImageField", False))
    if kind is ElementKind.TOC_LIST:
        defaults = TocListContent()
        return TocListContent(
            text_style=TextStyle.from_dict(data.get("textStyle"), defaults.text_style),
            toc_settings=TocSettings.from_dict(data.get("tocSettings")),
        )
    if kind is ElementKind.TABLE:
        return TableContent(table_settings=TableSettings.from_dict(data.get("tableSettings")))
    raise ValueError(f"Unhandled element kind: {kind}")


# ─────────────────────────────────────────────────────────────────────────────
# Element records
# ─────────────────────────────────────────────────────────────────────────────

def serialize_element(element: CanvasElement) -> dict[str, Any]:
    """
    Serialize an element to a plain record.

    Args:
        element: Element to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    d: dict[str, Any] = {
        "id": element.id,
        "type": element.kind.value,
        "position": element.position.to_dict(),
        "dimension": element.dimension.to_dict(),
        "rotation": element.rotation,
        "locked": element.locked,
        "visible": element.visible,
        "zIndex": element.z_index,
        "pageIndex": element.page_index,
        "aspectRatioLocked": element.aspect_ratio_locked,
    }
    if element.aspect_ratio is not None:
        d["aspectRatio"] = element.aspect_ratio
    if element.data_binding:
        d["dataBinding"] = element.data_binding
    if element.format is not None:
        d["format"] = element.format.to_dict()
    d.update(_payload_fields(element))
    return d


def deserialize_element(data: dict[str, Any]) -> CanvasElement:
    """
    Deserialize an element from a plain record.

    Args:
        data: Record with at least ``id``, ``type``, ``position``, ``dimension``

    Returns:
        CanvasElement instance

    Raises:
        ValueError: If the type is unknown or geometry is not finite
        KeyError: If a required key is missing
    """
    kind = ElementKind(data["type"])
    fmt = data.get("format")
    return CanvasElement(
        id=str(data["id"]),
        kind=kind,
        position=Position.from_dict(data["position"]),
        dimension=Dimension.from_dict(data["dimension"]).floored(),
        payload=_payload_from(kind, data),
        rotation=data.get("rotation", 0),
        z_index=data.get("zIndex", 0),
        page_index=data.get("pageIndex", 0),
        visible=data.get("visible", True),
        locked=data.get("locked", False),
        data_binding=data.get("dataBinding") or None,
        aspect_ratio=data.get("aspectRatio"),
        aspect_ratio_locked=data.get("aspectRatioLocked", False),
        format=ElementFormat.from_dict(fmt) if fmt else None,
    )


def serialize_elements(elements: Iterable[CanvasElement]) -> List[dict[str, Any]]:
    return [serialize_element(el) for el in elements]


def deserialize_elements(records: Iterable[dict[str, Any]]) -> List[CanvasElement]:
    return [deserialize_element(r) for r in records]
