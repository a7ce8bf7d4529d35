"""
Data Package

Row data, value formatting and read-time binding of elements to rows.
"""

from .binding import ResolvedElement, resolve_content, resolve_elements, resolve_page
from .formatter import format_content, to_fraction
from .images import fit_image_dimension, read_image_size
from .source import DataSourceError, RowDataSource, load_csv, parse_csv

__all__ = [
    "ResolvedElement",
    "resolve_content",
    "resolve_elements",
    "resolve_page",
    "format_content",
    "to_fraction",
    "fit_image_dimension",
    "read_image_size",
    "DataSourceError",
    "RowDataSource",
    "load_csv",
    "parse_csv",
]
