"""
Module: data.source

Purpose:
    Tabular row data that bound elements resolve against: ordered column
    names, ordered row records and the currently selected row.

Key Classes:
    - RowDataSource: Columns, rows and row selection
    - DataSourceError: Unreadable or headerless input

Key Functions:
    - load_csv(path): Read a CSV file with a header row
    - parse_csv(text): Same for in-memory text

Dependencies:
    - csv (std)

Used By:
    - data.binding: Row lookups
    - catalog.manager / catalog.assembly: Groups and product rows
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

Row = Dict[str, str]


class DataSourceError(Exception):
    """Error reading row data."""
    pass


class RowDataSource:
    """
    Ordered rows with named columns and a selected row.

    Every row carries every column; missing cells read as "".

    Example:
        >>> source = RowDataSource(["Name", "Price"], [{"Name": "Lamp", "Price": "12"}])
        >>> source.selected_row["Name"]
        'Lamp'
    """

    def __init__(
        self,
        columns: Sequence[str],
        rows: Iterable[Mapping[str, object]] = (),
        *,
        name: str = "",
        image_columns: Iterable[str] = (),
    ) -> None:
        self.columns: List[str] = list(columns)
        self.rows: List[Row] = [
            {col: _cell(row.get(col)) for col in self.columns} for row in rows
        ]
        self.name = name
        self.image_columns = frozenset(image_columns)
        self.selected_row_index = 0

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def selected_row(self) -> Optional[Row]:
        if not self.rows:
            return None
        return self.rows[self.selected_row_index]

    def select_row(self, index: int) -> int:
        """Select a row, clamped into range. Returns the selected index."""
        self.selected_row_index = max(0, min(index, len(self.rows) - 1))
        return self.selected_row_index

    def group_values(self, field: str) -> List[str]:
        """Sorted unique non-empty values of one column."""
        return sorted({row.get(field, "") for row in self.rows} - {""})

    def first_row_in_group(self, field: str, value: str) -> Optional[int]:
        return next((i for i, row in enumerate(self.rows) if row.get(field) == value), None)

    def toggle_image_column(self, column: str) -> bool:
        """Mark or unmark a column as holding image URLs. Returns the new state."""
        if column in self.image_columns:
            self.image_columns = self.image_columns - {column}
            return False
        self.image_columns = self.image_columns | {column}
        return True


def _cell(value: object) -> str:
    return "" if value is None else str(value).strip()


def parse_csv(text: str, *, name: str = "") -> RowDataSource:
    """
    Parse CSV text whose first non-blank line is the header row.

    Quoted fields may contain commas, doubled quotes and newlines. Rows
    whose cells are all blank are skipped; headers are trimmed and empty
    headers dropped.

    Raises:
        DataSourceError: If there is no header row
    """
    records = [r for r in csv.reader(io.StringIO(text)) if any(c.strip() for c in r)]
    if not records:
        raise DataSourceError(f"No data in {name or 'CSV input'}")

    header = [h.strip() for h in records[0]]
    columns = [h for h in header if h]
    if not columns:
        raise DataSourceError(f"No column headers found in {name or 'CSV input'}")

    rows = []
    for record in records[1:]:
        rows.append({h: record[i] if i < len(record) else "" for i, h in enumerate(header) if h})
    logger.info(f"Parsed {len(rows)} rows with {len(columns)} columns from {name or 'CSV input'}")
    return RowDataSource(columns, rows, name=name)


def load_csv(path: Path) -> RowDataSource:
    """
    Read a CSV file into a RowDataSource.

    Raises:
        DataSourceError: If the file cannot be read or has no header row
    """
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise DataSourceError(f"Cannot read {path}: {e}") from e
    return parse_csv(text, name=Path(path).name)
