"""
Module: styles

Purpose:
    Style payloads carried by element variants: text and shape styling,
    data formatting rules, table-of-contents and table settings.
    All are frozen dataclasses so that a style can be shared between a
    live element and a history snapshot without risk of aliasing.

Key Classes:
    - TextStyle: Font, color, alignment and spacing for text-like elements
    - ShapeStyle: Fill/stroke/corner styling for shapes
    - ElementFormat: How a bound value is formatted for display
    - TocSettings: Options of the table-of-contents list element
    - TableColumn / TableSettings: Options of the data table element

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.elements: Variant payloads
    - editor.patching: Field-by-field merges
    - layout.config: TocMetrics derives row heights from these styles
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

TEXT_ALIGNS = frozenset({"left", "center", "right"})
VERTICAL_ALIGNS = frozenset({"top", "middle", "bottom"})


class ShapeType(str, Enum):
    """Geometric primitive drawn by a shape element."""
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    LINE = "line"

    def __str__(self) -> str:
        return self.value


class LeaderStyle(str, Enum):
    """Filler drawn between a TOC label and its page number."""
    DOTTED = "dotted"
    SOLID = "solid"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


class DataType(str, Enum):
    """Interpretation of a bound value before display."""
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"

    def __str__(self) -> str:
        return self.value


class Casing(str, Enum):
    NONE = "none"
    TITLE = "title"
    UPPER = "upper"
    LOWER = "lower"

    def __str__(self) -> str:
        return self.value


class ListStyle(str, Enum):
    NONE = "none"
    DISC = "disc"
    CIRCLE = "circle"
    SQUARE = "square"
    DECIMAL = "decimal"

    def __str__(self) -> str:
        return self.value


def _coerce(obj, name: str, enum_cls) -> None:
    """Normalize a str field to its enum on a frozen dataclass."""
    value = getattr(obj, name)
    if not isinstance(value, enum_cls):
        object.__setattr__(obj, name, enum_cls(value))


# ─────────────────────────────────────────────────────────────────────────────
# Text and shape styles
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class TextStyle:
    """
    Typography for text, dataField, qrcode and TOC rows.

    Attributes:
        font_family: Font family name
        font_size: Size in document units
        font_weight: CSS-style numeric weight (400 regular, 700 bold)
        color: Hex color
        text_align: "left", "center" or "right"
        vertical_align: "top", "middle" or "bottom"
        line_height: Multiplier applied to font_size
        letter_spacing: Extra spacing between characters
    """

    font_family: str = "Inter"
    font_size: float = 16
    font_weight: int = 400
    color: str = "#000000"
    text_align: str = "left"
    vertical_align: str = "middle"
    line_height: float = 1.5
    letter_spacing: float = 0

    def __post_init__(self) -> None:
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive: {self.font_size}")
        if self.line_height <= 0:
            raise ValueError(f"line_height must be positive: {self.line_height}")
        if self.text_align not in TEXT_ALIGNS:
            raise ValueError(f"Unknown text_align: {self.text_align!r}")
        if self.vertical_align not in VERTICAL_ALIGNS:
            raise ValueError(f"Unknown vertical_align: {self.vertical_align!r}")

    @property
    def line_box(self) -> float:
        """Height of one rendered line (font_size * line_height)."""
        return self.font_size * self.line_height

    def to_dict(self) -> dict:
        return {
            "fontFamily": self.font_family,
            "fontSize": self.font_size,
            "fontWeight": self.font_weight,
            "color": self.color,
            "textAlign": self.text_align,
            "verticalAlign": self.vertical_align,
            "lineHeight": self.line_height,
            "letterSpacing": self.letter_spacing,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict], defaults: Optional[TextStyle] = None) -> TextStyle:
        base = defaults or cls()
        if not data:
            return base
        return cls(
            font_family=data.get("fontFamily", base.font_family),
            font_size=data.get("fontSize", base.font_size),
            font_weight=data.get("fontWeight", base.font_weight),
            color=data.get("color", base.color),
            text_align=data.get("textAlign", base.text_align),
            vertical_align=data.get("verticalAlign", base.vertical_align),
            line_height=data.get("lineHeight", base.line_height),
            letter_spacing=data.get("letterSpacing", base.letter_spacing),
        )


@dataclass(frozen=True, slots=True)
class ShapeStyle:
    """Fill and outline for shape elements."""

    fill: str = "#e5e7eb"
    stroke: str = "#9ca3af"
    stroke_width: float = 1
    corner_radius: float = 0
    opacity: float = 1

    def __post_init__(self) -> None:
        if not 0 <= self.opacity <= 1:
            raise ValueError(f"opacity must be within [0, 1]: {self.opacity}")
        if self.stroke_width < 0:
            raise ValueError(f"stroke_width must be >= 0: {self.stroke_width}")

    def to_dict(self) -> dict:
        return {
            "fill": self.fill,
            "stroke": self.stroke,
            "strokeWidth": self.stroke_width,
            "borderRadius": self.corner_radius,
            "opacity": self.opacity,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> ShapeStyle:
        base = cls()
        if not data:
            return base
        return cls(
            fill=data.get("fill", base.fill),
            stroke=data.get("stroke", base.stroke),
            stroke_width=data.get("strokeWidth", base.stroke_width),
            corner_radius=data.get("borderRadius", base.corner_radius),
            opacity=data.get("opacity", base.opacity),
        )


# ─────────────────────────────────────────────────────────────────────────────
# Data formatting
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class ElementFormat:
    """
    Display formatting for a bound value.

    See data.formatter.format_content for how each field is applied.
    """

    data_type: DataType = DataType.TEXT
    casing: Casing = Casing.NONE
    decimal_places: int = 2
    use_fractions: bool = False
    fraction_precision: int = 16
    unit: Optional[str] = None
    date_format: str = "MM/DD/YYYY"
    true_label: Optional[str] = None
    false_label: Optional[str] = None
    list_style: ListStyle = ListStyle.NONE

    def __post_init__(self) -> None:
        _coerce(self, "data_type", DataType)
        _coerce(self, "casing", Casing)
        _coerce(self, "list_style", ListStyle)
        if self.decimal_places < 0:
            raise ValueError(f"decimal_places must be >= 0: {self.decimal_places}")
        if self.fraction_precision <= 0:
            raise ValueError(f"fraction_precision must be positive: {self.fraction_precision}")

    def to_dict(self) -> dict:
        d = {
            "dataType": self.data_type.value,
            "casing": self.casing.value,
            "decimalPlaces": self.decimal_places,
            "useFractions": self.use_fractions,
            "fractionPrecision": self.fraction_precision,
            "dateFormat": self.date_format,
            "listStyle": self.list_style.value,
        }
        if self.unit is not None:
            d["unit"] = self.unit
        if self.true_label is not None:
            d["trueLabel"] = self.true_label
        if self.false_label is not None:
            d["falseLabel"] = self.false_label
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ElementFormat:
        return cls(
            data_type=data.get("dataType", DataType.TEXT),
            casing=data.get("casing", Casing.NONE),
            decimal_places=data.get("decimalPlaces", 2),
            use_fractions=data.get("useFractions", False),
            fraction_precision=data.get("fractionPrecision", 16),
            unit=data.get("unit"),
            date_format=data.get("dateFormat", "MM/DD/YYYY"),
            true_label=data.get("trueLabel"),
            false_label=data.get("falseLabel"),
            list_style=data.get("listStyle", ListStyle.NONE),
        )


# ─────────────────────────────────────────────────────────────────────────────
# Table of contents
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_TOC_TITLE_STYLE = TextStyle(
    font_size=24, font_weight=700, text_align="left", vertical_align="top", line_height=1.2,
)
DEFAULT_TOC_CHAPTER_STYLE = TextStyle(
    font_size=18, font_weight=600, color="#333333", line_height=1.5,
)


@dataclass(frozen=True, slots=True)
class TocSettings:
    """
    Options of a toc-list element.

    Attributes:
        title: Heading shown on the first TOC page
        show_title: Whether the heading is rendered (and reserves space)
        title_style: Typography of the heading
        column_count: Number of columns rows flow into (1 or 2)
        group_by_field: Data column used to group entries, if any
        chapter_covers_enabled: Insert a chapter divider page per group
        chapter_style: Typography of group header rows
        show_page_numbers: Render page numbers after each label
        leader_style: Filler between label and page number
    """

    title: str = "Table of Contents"
    show_title: bool = True
    title_style: TextStyle = DEFAULT_TOC_TITLE_STYLE
    column_count: int = 1
    group_by_field: Optional[str] = None
    chapter_covers_enabled: bool = False
    chapter_style: TextStyle = DEFAULT_TOC_CHAPTER_STYLE
    show_page_numbers: bool = True
    leader_style: LeaderStyle = LeaderStyle.DOTTED

    def __post_init__(self) -> None:
        _coerce(self, "leader_style", LeaderStyle)
        if not 1 <= self.column_count <= 2:
            raise ValueError(f"column_count must be 1 or 2: {self.column_count}")

    @property
    def chapters_active(self) -> bool:
        """Chapter divider pages are only produced when grouping is set."""
        return bool(self.group_by_field) and self.chapter_covers_enabled

    def to_dict(self) -> dict:
        d = {
            "title": self.title,
            "showTitle": self.show_title,
            "titleStyle": self.title_style.to_dict(),
            "columnCount": self.column_count,
            "chapterCoversEnabled": self.chapter_covers_enabled,
            "chapterStyle": self.chapter_style.to_dict(),
            "showPageNumbers": self.show_page_numbers,
            "leaderStyle": self.leader_style.value,
        }
        if self.group_by_field:
            d["groupByField"] = self.group_by_field
        return d

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> TocSettings:
        base = cls()
        if not data:
            return base
        return cls(
            title=data.get("title", base.title),
            show_title=data.get("showTitle", base.show_title),
            title_style=TextStyle.from_dict(data.get("titleStyle"), DEFAULT_TOC_TITLE_STYLE),
            column_count=data.get("columnCount", base.column_count),
            group_by_field=data.get("groupByField") or None,
            chapter_covers_enabled=data.get("chapterCoversEnabled", base.chapter_covers_enabled),
            chapter_style=TextStyle.from_dict(data.get("chapterStyle"), DEFAULT_TOC_CHAPTER_STYLE),
            show_page_numbers=data.get("showPageNumbers", base.show_page_numbers),
            leader_style=data.get("leaderStyle", base.leader_style),
        )


# ─────────────────────────────────────────────────────────────────────────────
# Tables
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_TABLE_HEADER_STYLE = TextStyle(font_size=14, font_weight=700, line_height=1.2)
DEFAULT_TABLE_ROW_STYLE = TextStyle(font_size=12, line_height=1.2)


@dataclass(frozen=True, slots=True)
class TableColumn:
    """One column of a table element."""

    id: str
    header: str
    data_field: Optional[str] = None
    width: float = 100
    header_align: str = "left"
    row_align: str = "left"

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "header": self.header,
            "width": self.width,
            "headerAlign": self.header_align,
            "rowAlign": self.row_align,
        }
        if self.data_field:
            d["dataField"] = self.data_field
        return d

    @classmethod
    def from_dict(cls, data: dict) -> TableColumn:
        return cls(
            id=data["id"],
            header=data.get("header", ""),
            data_field=data.get("dataField"),
            width=data.get("width", 100),
            header_align=data.get("headerAlign", "left"),
            row_align=data.get("rowAlign", "left"),
        )


@dataclass(frozen=True, slots=True)
class TableSettings:
    """Options of a table element."""

    columns: Tuple[TableColumn, ...] = ()
    group_by_field: Optional[str] = None
    header_style: TextStyle = DEFAULT_TABLE_HEADER_STYLE
    row_style: TextStyle = DEFAULT_TABLE_ROW_STYLE
    header_background_color: str = "#f3f4f6"
    row_background_color: str = "#ffffff"
    alternate_row_color: Optional[str] = None
    border_color: str = "#e5e7eb"
    border_width: float = 1
    cell_padding: float = 8
    min_row_height: float = 24
    extra: dict = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.columns, tuple):
            object.__setattr__(self, "columns", tuple(self.columns))

    def to_dict(self) -> dict:
        d = {
            "columns": [c.to_dict() for c in self.columns],
            "headerStyle": self.header_style.to_dict(),
            "rowStyle": self.row_style.to_dict(),
            "headerBackgroundColor": self.header_background_color,
            "rowBackgroundColor": self.row_background_color,
            "borderColor": self.border_color,
            "borderWidth": self.border_width,
            "cellPadding": self.cell_padding,
            "minRowHeight": self.min_row_height,
        }
        if self.group_by_field:
            d["groupByField"] = self.group_by_field
        if self.alternate_row_color:
            d["alternateRowColor"] = self.alternate_row_color
        d.update(self.extra)
        return d

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> TableSettings:
        if not data:
            return cls()
        known = {
            "columns", "groupByField", "headerStyle", "rowStyle", "headerBackgroundColor",
            "rowBackgroundColor", "alternateRowColor", "borderColor", "borderWidth",
            "cellPadding", "minRowHeight",
        }
        base = cls()
        return cls(
            columns=tuple(TableColumn.from_dict(c) for c in data.get("columns", [])),
            group_by_field=data.get("groupByField") or None,
            header_style=TextStyle.from_dict(data.get("headerStyle"), DEFAULT_TABLE_HEADER_STYLE),
            row_style=TextStyle.from_dict(data.get("rowStyle"), DEFAULT_TABLE_ROW_STYLE),
            header_background_color=data.get("headerBackgroundColor", base.header_background_color),
            row_background_color=data.get("rowBackgroundColor", base.row_background_color),
            alternate_row_color=data.get("alternateRowColor"),
            border_color=data.get("borderColor", base.border_color),
            border_width=data.get("borderWidth", base.border_width),
            cell_padding=data.get("cellPadding", base.cell_padding),
            min_row_height=data.get("minRowHeight", base.min_row_height),
            # Settings the engine does not interpret are carried through untouched
            extra={k: v for k, v in data.items() if k not in known},
        )
