"""
Decode CSV/Excel files and polars DataFrames into ParsedDataset values
"""

import csv
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import polars as pl

from .exceptions import DatasetParseError, UnsupportedFileTypeError
from .models import ParsedDataset, SheetTable

logger = logging.getLogger(__name__)

CSV_EXTENSIONS = {'.csv'}
EXCEL_EXTENSIONS = {'.xlsx', '.xls'}
SUPPORTED_EXTENSIONS = CSV_EXTENSIONS | EXCEL_EXTENSIONS


def _new_identifier() -> str:
    return uuid.uuid4().hex


def _cell_to_text(cell: Any) -> str:
    """Coerce one cell to text; nulls become empty strings and whole floats drop '.0'"""
    if cell is None:
        return ''
    if isinstance(cell, float) and cell.is_integer():
        return str(int(cell))
    return str(cell)


def _strip_trailing_blank_rows(rows: List[List[str]]) -> List[List[str]]:
    while rows and all(cell == '' for cell in rows[-1]):
        rows.pop()
    return rows


def _frame_to_rows(df: pl.DataFrame) -> List[List[str]]:
    """Convert a DataFrame to text rows with trailing blank rows removed"""
    rows = [[_cell_to_text(cell) for cell in row] for row in df.rows()]
    return _strip_trailing_blank_rows(rows)


def build_dataset(
    display_name: str,
    sheets: Dict[str, List[List[Any]]],
    identifier: Optional[str] = None,
    file_size: int = 0,
    file_type: str = ''
) -> ParsedDataset:
    """
    Assemble a ParsedDataset from already-decoded sheets

    Sheets without rows are dropped. Row totals are summed across sheets and
    column totals are the widest row of any sheet.

    Args:
        display_name: File or table name
        sheets: Mapping of sheet name to rows, in workbook order
        identifier: Optional dataset id (random when omitted)
        file_size: Source size in bytes
        file_type: Source type (derived from the display name when empty)

    Returns:
        Immutable ParsedDataset
    """
    tables = []
    total_rows = 0
    total_columns = 0

    for sheet_name, rows in sheets.items():
        if not rows:
            continue

        columns = max(len(row) for row in rows)
        tables.append(SheetTable(name=sheet_name, rows=rows))
        total_rows += len(rows)
        total_columns = max(total_columns, columns)

    return ParsedDataset(
        identifier=identifier or _new_identifier(),
        display_name=display_name,
        sheets=tables,
        total_row_count=total_rows,
        total_column_count=total_columns,
        file_size=file_size,
        file_type=file_type,
        upload_time=datetime.now(timezone.utc)
    )


def _read_csv(path: Path) -> Dict[str, List[List[str]]]:
    """Read every line of a CSV file, keeping rows longer than the header intact"""
    with open(path, 'r', encoding='utf-8-sig', newline='') as f:
        # Blank lines come back as []
        rows = [row for row in csv.reader(f) if row]
    return {path.stem: _strip_trailing_blank_rows(rows)}


def _read_excel(path: Path) -> Dict[str, List[List[str]]]:
    frames = pl.read_excel(
        path,
        sheet_id=0,
        has_header=False,
        drop_empty_rows=False,
        drop_empty_cols=False,
        raise_if_empty=False
    )
    return {sheet_name: _frame_to_rows(df) for sheet_name, df in frames.items()}


def parse_file(path: Union[str, Path], identifier: Optional[str] = None) -> ParsedDataset:
    """
    Parse a CSV or Excel file into a ParsedDataset

    Every sheet of a workbook is kept in order; a CSV file becomes one sheet
    named after the file stem. All cells are coerced to text.

    Args:
        path: File to parse
        identifier: Optional dataset id (random when omitted)

    Returns:
        ParsedDataset for the file

    Raises:
        UnsupportedFileTypeError: If the extension is not .csv, .xlsx or .xls
        DatasetParseError: If the file cannot be read or decoded
    """
    path = Path(path)
    extension = path.suffix.lower()

    if extension not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFileTypeError(
            f"Unsupported file type '{extension or path.name}'. "
            f"Supported: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
        )

    if not path.is_file():
        raise DatasetParseError(f"File not found: {path}")

    try:
        if extension in CSV_EXTENSIONS:
            sheets = _read_csv(path)
        else:
            sheets = _read_excel(path)
    except Exception as e:
        logger.error(f"Failed to parse {path.name}: {e}")
        raise DatasetParseError(f"Failed to parse '{path.name}': {e}") from e

    dataset = build_dataset(
        display_name=path.name,
        sheets=sheets,
        identifier=identifier,
        file_size=path.stat().st_size
    )
    logger.info(
        f"Parsed {path.name}: {len(dataset.sheets)} sheet(s), "
        f"{dataset.total_row_count} rows × {dataset.total_column_count} columns"
    )
    return dataset


def parse_dataframe(
    df: pl.DataFrame,
    name: str,
    identifier: Optional[str] = None
) -> ParsedDataset:
    """
    Import a database table already loaded as a polars DataFrame

    The DataFrame's column names become the header row.

    Args:
        df: Table contents
        name: Table name used as display name and sheet name
        identifier: Optional dataset id (random when omitted)

    Returns:
        ParsedDataset with a single sheet
    """
    rows = [list(df.columns)] + _frame_to_rows(df) if df.columns else []
    return build_dataset(
        display_name=name,
        sheets={name: rows},
        identifier=identifier,
        file_type='table'
    )
