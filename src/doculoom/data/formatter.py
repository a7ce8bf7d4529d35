"""
Module: data.formatter

Purpose:
    Display formatting of bound values. A value is interpreted according
    to its ElementFormat (number, date, boolean or text) and rendered to
    the string a data field shows. Values that cannot be parsed for their
    declared type are returned unchanged.

Key Functions:
    - format_content(content, fmt): Format one value
    - to_fraction(value, precision): Mixed-number rendering of a decimal

Dependencies:
    - datetime, math, re (std)

Used By:
    - data.binding: Resolved content of data fields
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Optional

from doculoom.core.models import Casing, DataType, ElementFormat, ListStyle

TRUE_VALUES = frozenset({"true", "1", "yes", "on"})

_NON_NUMERIC = re.compile(r"[^\d.\-]")
_LEADING_NUMBER = re.compile(r"-?(\d+\.?\d*|\.\d+)")
_HTML = re.compile(r"<[a-z][\s\S]*>", re.IGNORECASE)
# Tags and entities are left alone when casing HTML
_MARKUP = re.compile(r"(<[^>]*>|&#?\w+;)")
_WORD = re.compile(r"\w\S*")

_DATE_INPUTS = (
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
)


def is_html(content: str) -> bool:
    return bool(content) and bool(_HTML.search(content))


# ─────────────────────────────────────────────────────────────────────────────
# Numbers
# ─────────────────────────────────────────────────────────────────────────────

def parse_number(content: str) -> Optional[float]:
    """Leading number of ``content`` after dropping non-numeric characters."""
    match = _LEADING_NUMBER.match(_NON_NUMERIC.sub("", content))
    return float(match.group(0)) if match else None


def to_fraction(value: float, precision: int = 16) -> str:
    """
    Render a decimal as a whole number plus a reduced fraction.

    Example:
        >>> to_fraction(2.5, 16)
        '2 1/2'
        >>> to_fraction(0.999, 16)
        '1'
    """
    whole = math.floor(value)
    remainder = value - whole
    if abs(remainder) < 0.0001:
        return str(whole)
    numerator = round(remainder * precision)
    denominator = precision
    divisor = math.gcd(numerator, denominator)
    numerator //= divisor
    denominator //= divisor
    if numerator == denominator:
        return str(whole + 1)
    if numerator == 0:
        return str(whole)
    if whole == 0:
        return f"{numerator}/{denominator}"
    return f"{whole} {numerator}/{denominator}"


def _format_number(content: str, fmt: ElementFormat) -> str:
    value = parse_number(content)
    if value is None:
        return content
    if fmt.use_fractions:
        result = to_fraction(value, fmt.fraction_precision)
    else:
        result = f"{value:.{fmt.decimal_places}f}"
    if fmt.unit:
        result = f"${result}" if fmt.unit == "$" else f"{result} {fmt.unit}"
    return result


# ─────────────────────────────────────────────────────────────────────────────
# Dates
# ─────────────────────────────────────────────────────────────────────────────

def parse_date(content: str) -> Optional[date]:
    text = content.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for pattern in _DATE_INPUTS:
        try:
            return datetime.strptime(text, pattern).date()
        except ValueError:
            continue
    return None


def _format_date(content: str, fmt: ElementFormat) -> str:
    value = parse_date(content)
    if value is None:
        return content
    if fmt.date_format == "DD/MM/YYYY":
        return value.strftime("%d/%m/%Y")
    if fmt.date_format == "YYYY-MM-DD":
        return value.isoformat()
    if fmt.date_format == "MMM D, YYYY":
        return f"{value:%b} {value.day}, {value.year}"
    if fmt.date_format == "MMMM D, YYYY":
        return f"{value:%B} {value.day}, {value.year}"
    return f"{value.month}/{value.day}/{value.year}"


# ─────────────────────────────────────────────────────────────────────────────
# Text
# ─────────────────────────────────────────────────────────────────────────────

def title_case(text: str) -> str:
    return _WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)


def apply_casing(text: str, casing: Casing) -> str:
    if casing is Casing.UPPER:
        return text.upper()
    if casing is Casing.LOWER:
        return text.lower()
    if casing is Casing.TITLE:
        return title_case(text)
    return text


def _apply_casing_to_html(html: str, casing: Casing) -> str:
    parts = _MARKUP.split(html)
    return "".join(
        part if _MARKUP.fullmatch(part) or not part.strip() else apply_casing(part, casing)
        for part in parts
    )


def _as_list(text: str, style: ListStyle) -> str:
    items = [line for line in text.split("\n") if line.strip()]
    if not items:
        return text
    tag = "ol" if style is ListStyle.DECIMAL else "ul"
    return f"<{tag}>" + "".join(f"<li>{item}</li>" for item in items) + f"</{tag}>"


def format_content(content: Optional[str], fmt: Optional[ElementFormat] = None) -> str:
    """
    Format a bound value for display.

    Args:
        content: Raw cell value (None or empty gives "")
        fmt: Formatting rules; None returns the value unchanged

    Returns:
        Display string

    Example:
        >>> format_content("12.5", ElementFormat(data_type=DataType.NUMBER, unit="$"))
        '$12.50'
    """
    if not content:
        return ""
    if fmt is None:
        return content

    if fmt.data_type is DataType.NUMBER:
        return _format_number(content, fmt)
    if fmt.data_type is DataType.DATE:
        return _format_date(content, fmt)
    if fmt.data_type is DataType.BOOLEAN:
        if content.strip().lower() in TRUE_VALUES:
            return fmt.true_label or "Yes"
        return fmt.false_label or "No"

    html = is_html(content)
    if html:
        text = _apply_casing_to_html(content, fmt.casing)
    else:
        text = apply_casing(content, fmt.casing)

    if fmt.list_style is not ListStyle.NONE and not html:
        return _as_list(text, fmt.list_style)
    return text
