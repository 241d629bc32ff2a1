"""Workbook loading and cell helpers.

The extractor works on a plain mapping of sheet name to row tuples so it
can be fed from a real ``.xlsx`` file or from in-memory rows in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Sequence
from zipfile import BadZipFile

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from src.common.errors import WorkbookLoadError

Row = Sequence[Any]
Workbook = Mapping[str, Sequence[Row]]


def load_workbook(path: Path | str) -> dict[str, list[tuple]]:
    """Read every sheet of an .xlsx file into lists of row tuples.

    Uses openpyxl read-only mode with cached formula values.

    Raises:
        FileNotFoundError: If the file does not exist.
        WorkbookLoadError: If the file is not a readable .xlsx workbook.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"ファイルが見つかりません: {path}")

    try:
        wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    except (BadZipFile, InvalidFileException) as e:
        raise WorkbookLoadError(f"ワークブックを開けません: {path}: {e}") from e

    try:
        return {
            name: list(wb[name].iter_rows(values_only=True))
            for name in wb.sheetnames
        }
    finally:
        wb.close()


def cell(row: Row, index: int) -> Any:
    """Return the raw cell value at index, or None past the end of the row."""
    if row is None or index >= len(row):
        return None
    return row[index]


def cell_text(row: Row, index: int) -> str:
    """Return the cell at index as text ("" for missing or empty cells)."""
    value = cell(row, index)
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_blank(row: Row) -> bool:
    """True for rows with no cells or only empty cells."""
    if not row:
        return True
    return all(v is None or (isinstance(v, str) and v == "") for v in row)
