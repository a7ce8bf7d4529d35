"""
Module: layout.leaders

Purpose:
    Measure TOC rows with ReportLab font metrics and compute the leader
    fill between an entry label and its page number.

Key Functions:
    - text_width(): Rendered width of a string
    - leader_fill(): Leader characters that fill a column row
    - format_toc_line(): Label + leader + page number as one string

Dependencies:
    - reportlab: Standard font metrics (pdfmetrics.stringWidth)

Used By:
    - catalog.assembly: Leader text of TOC rows
"""

from __future__ import annotations

import logging
from typing import Optional

from reportlab.pdfbase import pdfmetrics

from doculoom.core.models import LeaderStyle

logger = logging.getLogger(__name__)

# Standard PDF font used when the requested face is not registered
FALLBACK_FONT = "Helvetica"

# Gap kept on each side of the leader run
LEADER_GAP = 4

_LEADER_CHARS = {
    LeaderStyle.DOTTED: ".",
    LeaderStyle.SOLID: "_",
}


def _font_name(font_name: str) -> str:
    try:
        pdfmetrics.getFont(font_name)
    except KeyError:
        return FALLBACK_FONT
    return font_name


def text_width(text: str, font_size: float, font_name: str = FALLBACK_FONT) -> float:
    """Rendered width of ``text`` in points for a registered font."""
    return pdfmetrics.stringWidth(text, _font_name(font_name), font_size)


def leader_fill(
    label: str,
    page_label: str,
    column_width: float,
    *,
    font_size: float = 14,
    font_name: str = FALLBACK_FONT,
    style: LeaderStyle = LeaderStyle.DOTTED,
) -> str:
    """
    Leader characters between a label and its page number.

    Args:
        label: Entry text on the left
        page_label: Page number text on the right
        column_width: Width of one TOC column
        font_size: Item font size
        font_name: Item font (falls back to Helvetica when unregistered)
        style: Leader style; NONE gives an empty string

    Returns:
        Run of leader characters (empty when nothing fits)

    Example:
        >>> leader_fill("Widget", "3", 200).startswith(".")
        True
    """
    char = _LEADER_CHARS.get(LeaderStyle(style))
    if char is None:
        return ""
    free = (
        column_width
        - text_width(label, font_size, font_name)
        - text_width(page_label, font_size, font_name)
        - 2 * LEADER_GAP
    )
    char_width = text_width(char, font_size, font_name)
    if free <= 0 or char_width <= 0:
        return ""
    return char * int(free // char_width)


def format_toc_line(
    label: str,
    page_number: Optional[int],
    column_width: float,
    *,
    font_size: float = 14,
    font_name: str = FALLBACK_FONT,
    style: LeaderStyle = LeaderStyle.DOTTED,
) -> str:
    """One TOC row as plain text; without a page number only the label is returned."""
    if page_number is None:
        return label
    page_label = str(page_number)
    leader = leader_fill(
        label, page_label, column_width,
        font_size=font_size, font_name=font_name, style=style,
    )
    if not leader:
        return f"{label} {page_label}"
    return f"{label} {leader} {page_label}"
