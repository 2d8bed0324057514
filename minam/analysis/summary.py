"""
Human-readable rendering of relationship evidence and dataset previews
"""

from typing import Any, List

from ..core.models import ConnectionKind, ParsedDataset, RelationshipEvidence


def describe_connection(evidence: RelationshipEvidence) -> str:
    """
    Describe one evidence record without the dataset names

    Args:
        evidence: Relationship evidence

    Returns:
        e.g. "Common columns: Date, Price"

    Examples:
        >>> ev = RelationshipEvidence(dataset_a='a.csv', dataset_b='b.csv',
        ...     dataset_a_id='1', dataset_b_id='2',
        ...     kind=ConnectionKind.COMMON_COLUMNS, detail=['Date', 'Price'])
        >>> describe_connection(ev)
        'Common columns: Date, Price'
    """
    detail = ', '.join(str(value) for value in evidence.detail)

    if evidence.kind == ConnectionKind.COMMON_COLUMNS:
        return f"Common columns: {detail}"
    if evidence.kind == ConnectionKind.COMMON_VALUES:
        return f"Common data patterns: {detail}"
    return "Similar data structure"


def format_connection(evidence: RelationshipEvidence) -> str:
    """
    One-line summary of an evidence record, e.g. "a.csv ↔ b.csv: Common columns: Date"
    """
    return f"{evidence.dataset_a} ↔ {evidence.dataset_b}: {describe_connection(evidence)}"


def _join_row(row: List[Any]) -> str:
    return ' | '.join(str(cell) for cell in row)


def format_dataset_for_ai(dataset: ParsedDataset) -> str:
    """
    Render a dataset as plain text for inclusion in a model prompt

    Every sheet is written in full: a header line underlined with '=' and
    one "Row n:" line per data row.

    Args:
        dataset: Parsed dataset

    Returns:
        Multi-line text block
    """
    lines = [
        f"EXCEL FILE ANALYSIS: {dataset.display_name}",
        f"File Size: {dataset.file_size / 1024:.2f} KB",
        f"Total Sheets: {len(dataset.sheets)}",
        f"Total Rows: {dataset.total_row_count}",
        f"Total Columns: {dataset.total_column_count}",
        "",
    ]

    for index, sheet in enumerate(dataset.sheets, start=1):
        width = max((len(row) for row in sheet.rows), default=0)
        lines.append(f"=== SHEET {index}: {sheet.name} ===")
        lines.append(f"Dimensions: {len(sheet.rows)} rows × {width} columns")
        lines.append("")

        for row_index, row in enumerate(sheet.rows):
            text = _join_row(row)
            if row_index == 0:
                lines.append(f"Headers: {text}")
                lines.append('=' * len(text))
            else:
                lines.append(f"Row {row_index}: {text}")

        lines.append("")

    return '\n'.join(lines) + '\n'


def _is_numeric(cell: Any) -> bool:
    if isinstance(cell, bool):
        return False
    if isinstance(cell, (int, float)):
        return True
    text = str(cell).strip()
    if not text:
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True


def _looks_like_date(cell: Any) -> bool:
    text = str(cell)
    return '/' in text or '-' in text or '2024' in text or '2023' in text


def extract_data_insights(dataset: ParsedDataset) -> List[str]:
    """
    Quick heuristic observations about each sheet

    Reports the record count, columns holding at least one numeric cell, and
    columns holding at least one date-like cell.

    Args:
        dataset: Parsed dataset

    Returns:
        List of insight sentences
    """
    insights = []

    for sheet in dataset.sheets:
        if len(sheet.rows) <= 1:
            continue

        headers = sheet.rows[0]
        data_rows = sheet.rows[1:]
        insights.append(f'Sheet "{sheet.name}" contains {len(data_rows)} data records')

        numeric_columns = []
        date_columns = []
        for index, header in enumerate(headers):
            column = [row[index] for row in data_rows if index < len(row)]
            if any(_is_numeric(cell) for cell in column):
                numeric_columns.append(str(header))
            if any(_looks_like_date(cell) for cell in column):
                date_columns.append(str(header))

        if numeric_columns:
            insights.append(f"Numeric columns found: {', '.join(numeric_columns)}")
        if date_columns:
            insights.append(f"Date columns found: {', '.join(date_columns)}")

    return insights
