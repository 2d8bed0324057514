"""
Data models for parsed datasets and relationship evidence
"""

from datetime import datetime
from enum import Enum
from pathlib import PurePath
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class SheetTable(BaseModel):
    """One worksheet or database table

    Attributes:
        name: Sheet or table name
        rows: Ordered rows of cell values; rows[0] is treated as the header row
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    name: str = ''
    rows: List[List[Any]] = Field(default_factory=list)


class ParsedDataset(BaseModel):
    """In-memory representation of one uploaded or imported tabular source

    Attributes:
        identifier: Opaque id, unique per upload session
        display_name: File or table name shown to the user (carries the extension)
        sheets: Worksheets/tables; index 0 is the primary sheet used for comparisons
        total_row_count: Rows summed across sheets (similarity signal only)
        total_column_count: Widest row across sheets (similarity signal only)
        file_type: Lowercase file extension without the dot (e.g., 'csv')
        file_size: Size of the source file in bytes (0 for imported tables)
        upload_time: When the dataset finished parsing
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    identifier: str = Field(..., min_length=1)
    display_name: str
    sheets: List[SheetTable] = Field(default_factory=list)
    total_row_count: int = Field(0, ge=0)
    total_column_count: int = Field(0, ge=0)
    file_type: str = ''
    file_size: int = Field(0, ge=0)
    upload_time: Optional[datetime] = None

    @model_validator(mode='before')
    @classmethod
    def default_file_type(cls, data: Any) -> Any:
        """Derive file_type from the display name's extension when missing"""
        if not isinstance(data, dict):
            return data
        if data.get('file_type') or data.get('fileType'):
            return data

        display_name = data.get('display_name', data.get('displayName')) or ''
        suffix = PurePath(str(display_name)).suffix
        return {**data, 'file_type': suffix.lstrip('.').lower()}

    @property
    def primary_sheet(self) -> Optional[SheetTable]:
        """First sheet, or None when the dataset has no sheets"""
        return self.sheets[0] if self.sheets else None

    @property
    def header(self) -> List[Any]:
        """Header row of the primary sheet ([] when absent)"""
        sheet = self.primary_sheet
        if sheet is None or not sheet.rows:
            return []
        return list(sheet.rows[0])

    def data_rows(self, limit: Optional[int] = None) -> List[List[Any]]:
        """Rows after the header in the primary sheet

        Args:
            limit: Maximum number of data rows to return (None = all)

        Returns:
            List of rows; fewer than limit when the sheet is short
        """
        sheet = self.primary_sheet
        if sheet is None:
            return []

        end = None if limit is None else 1 + max(limit, 0)
        return [list(row) for row in sheet.rows[1:end]]


class ConnectionKind(str, Enum):
    """Kind of evidence relating two datasets"""
    COMMON_COLUMNS = 'CommonColumns'
    COMMON_VALUES = 'CommonValues'
    SIMILAR_SHAPE = 'SimilarShape'


class RelationshipEvidence(BaseModel):
    """One discovered signal that two datasets are related

    Attributes:
        dataset_a: Display name of the earlier dataset in the input sequence
        dataset_b: Display name of the later dataset
        dataset_a_id: Identifier of dataset_a
        dataset_b_id: Identifier of dataset_b
        kind: Which check produced the evidence
        detail: Shared header names, shared values, or [] for SimilarShape
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    dataset_a: str
    dataset_b: str
    dataset_a_id: str
    dataset_b_id: str
    kind: ConnectionKind
    detail: List[Any] = Field(default_factory=list)
