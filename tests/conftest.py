"""
Shared pytest fixtures and utilities for testing
"""

import pytest

from minam.core.models import ParsedDataset, SheetTable


def make_dataset(name, rows=None, identifier=None, total_rows=None, total_columns=None, sheets=None):
    """
    Build a ParsedDataset for tests

    Args:
        name: Display name (also the identifier unless one is given)
        rows: Rows of the single primary sheet (header first)
        identifier: Optional identifier
        total_rows: Override total_row_count (default: len(rows))
        total_columns: Override total_column_count (default: widest row)
        sheets: Explicit SheetTable list (overrides rows)
    """
    rows = rows or []
    if sheets is None:
        sheets = [SheetTable(name='Sheet1', rows=rows)] if rows else []

    if total_rows is None:
        total_rows = sum(len(sheet.rows) for sheet in sheets)
    if total_columns is None:
        total_columns = max((len(row) for sheet in sheets for row in sheet.rows), default=0)

    return ParsedDataset(
        identifier=identifier or name,
        display_name=name,
        sheets=sheets,
        total_row_count=total_rows,
        total_column_count=total_columns
    )


@pytest.fixture
def prices_dataset():
    """Crypto prices file: header + 3 data rows, BTC in row 2"""
    return make_dataset('prices.csv', [
        ['Date', 'Price', 'Volume'],
        ['2024-01-01', '42000', '1500000000'],
        ['2024-01-02', 'BTC', '1200000000'],
        ['2024-01-03', '41900', '1800000000'],
    ])


@pytest.fixture
def symbols_dataset():
    """Symbols file: header + 2 data rows containing BTC"""
    return make_dataset('symbols.xlsx', [
        ['Date', 'Symbol'],
        ['2023-12-31', 'BTC'],
        ['2023-12-30', 'ETH'],
    ])


@pytest.fixture
def empty_dataset():
    """Dataset from an empty upload"""
    return make_dataset('empty.csv')


# Helper functions for tests

def assert_no_connections(connections):
    """Assert that nothing was found"""
    assert len(connections) == 0, f"Expected no connections, got {len(connections)}: {connections}"


def kinds_of(connections):
    """Kinds of the evidence records, in order"""
    return [c.kind for c in connections]


def get_evidence_by_kind(connections, kind):
    """Get the first evidence record of a kind"""
    for evidence in connections:
        if evidence.kind == kind:
            return evidence
    return None


class StubCompletions:
    """Records chat.completions.create calls and replies with canned content"""

    def __init__(self, content='', error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = type('Message', (), {'content': self.content})()
        choice = type('Choice', (), {'message': message})()
        return type('Completion', (), {'choices': [choice]})()


class StubClient:
    """Minimal stand-in for openai.OpenAI exposing chat.completions.create"""

    def __init__(self, content='', error=None):
        self.completions = StubCompletions(content, error)
        self.chat = type('Chat', (), {'completions': self.completions})()

    @property
    def calls(self):
        return self.completions.calls
