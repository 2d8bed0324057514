"""
Tests for dataset and evidence models
"""

import pytest
from pydantic import ValidationError

from minam.core.models import ConnectionKind, ParsedDataset, RelationshipEvidence, SheetTable
from tests.conftest import make_dataset


class TestParsedDataset:
    """Test suite for ParsedDataset helpers and validation"""

    def test_header_and_data_rows(self, prices_dataset):
        """Row 0 is the header, the rest are data rows"""
        assert prices_dataset.header == ['Date', 'Price', 'Volume']
        assert len(prices_dataset.data_rows()) == 3
        assert prices_dataset.data_rows(2) == [
            ['2024-01-01', '42000', '1500000000'],
            ['2024-01-02', 'BTC', '1200000000'],
        ]

    def test_empty_dataset_helpers(self, empty_dataset):
        """No sheets means no header and no rows"""
        assert empty_dataset.primary_sheet is None
        assert empty_dataset.header == []
        assert empty_dataset.data_rows(4) == []

    def test_sheet_without_rows(self):
        """A sheet with no rows has an empty header"""
        dataset = ParsedDataset(identifier='x', display_name='x.csv',
                                sheets=[SheetTable(name='Sheet1')])

        assert dataset.header == []
        assert dataset.data_rows(4) == []

    def test_data_rows_zero_limit(self, prices_dataset):
        """A zero limit returns nothing"""
        assert prices_dataset.data_rows(0) == []

    def test_file_type_from_extension(self):
        """file_type defaults to the lowercase extension"""
        assert make_dataset('Report.XLSX').file_type == 'xlsx'
        assert make_dataset('table_without_extension').file_type == ''

    def test_explicit_file_type_kept(self):
        """An explicit file_type wins"""
        dataset = ParsedDataset(identifier='t', display_name='orders', file_type='table')

        assert dataset.file_type == 'table'

    def test_camel_case_aliases(self):
        """The upload payload uses camelCase keys"""
        dataset = ParsedDataset.model_validate({
            'identifier': 'f1',
            'displayName': 'trades.csv',
            'sheets': [{'name': 'trades', 'rows': [['Date'], ['2024-01-01']]}],
            'totalRowCount': 2,
            'totalColumnCount': 1,
            'fileSize': 120,
        })

        assert dataset.display_name == 'trades.csv'
        assert dataset.total_row_count == 2
        assert dataset.file_size == 120
        assert dataset.model_dump(by_alias=True)['displayName'] == 'trades.csv'

    def test_negative_counts_rejected(self):
        """Counts cannot be negative"""
        with pytest.raises(ValidationError):
            ParsedDataset(identifier='x', display_name='x.csv', total_row_count=-1)

    def test_frozen(self, prices_dataset):
        """Datasets are immutable after creation"""
        with pytest.raises(ValidationError):
            prices_dataset.display_name = 'renamed.csv'


class TestRelationshipEvidence:
    """Test suite for RelationshipEvidence"""

    def test_serialization(self):
        """kind serializes to its string value with camelCase keys"""
        evidence = RelationshipEvidence(
            dataset_a='a.csv', dataset_b='b.csv',
            dataset_a_id='1', dataset_b_id='2',
            kind=ConnectionKind.COMMON_COLUMNS, detail=['Date']
        )

        payload = evidence.model_dump(mode='json', by_alias=True)

        assert payload == {
            'datasetA': 'a.csv',
            'datasetB': 'b.csv',
            'datasetAId': '1',
            'datasetBId': '2',
            'kind': 'CommonColumns',
            'detail': ['Date'],
        }

    def test_kind_from_string(self):
        """Kinds parse from their string values"""
        evidence = RelationshipEvidence.model_validate({
            'datasetA': 'a', 'datasetB': 'b', 'datasetAId': '1', 'datasetBId': '2',
            'kind': 'SimilarShape'
        })

        assert evidence.kind == ConnectionKind.SIMILAR_SHAPE
        assert evidence.detail == []
