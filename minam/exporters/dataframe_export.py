"""
Export relationship evidence to a Polars DataFrame or CSV
"""

import logging
from typing import Optional, Sequence

import polars as pl

from ..core.models import RelationshipEvidence
from .exceptions import ExporterError, FileExportError
from .utils import validate_connections, validate_file_path, DETAIL_SEPARATOR

logger = logging.getLogger(__name__)


def connections_to_dataframe(connections: Sequence[RelationshipEvidence]) -> pl.DataFrame:
    """
    Convert relationship evidence to a Polars DataFrame with one row per record

    Schema:
        - dataset_a: Display name of the earlier dataset
        - dataset_b: Display name of the later dataset
        - dataset_a_id: Identifier of dataset_a
        - dataset_b_id: Identifier of dataset_b
        - kind: CommonColumns, CommonValues or SimilarShape
        - detail: Detail values joined with ", " (empty for SimilarShape)

    Args:
        connections: Evidence records from the connection finder

    Returns:
        DataFrame (empty with the schema above when there are no connections)

    Raises:
        InvalidResultsError: If connections have an invalid structure
        ExporterError: If the DataFrame cannot be built
    """
    validated = validate_connections(connections)

    if not validated:
        logger.info("No connections found, returning empty DataFrame")
        return pl.DataFrame(schema={
            'dataset_a': pl.Utf8,
            'dataset_b': pl.Utf8,
            'dataset_a_id': pl.Utf8,
            'dataset_b_id': pl.Utf8,
            'kind': pl.Utf8,
            'detail': pl.Utf8
        })

    try:
        df = pl.DataFrame({
            'dataset_a': [e.dataset_a for e in validated],
            'dataset_b': [e.dataset_b for e in validated],
            'dataset_a_id': [e.dataset_a_id for e in validated],
            'dataset_b_id': [e.dataset_b_id for e in validated],
            'kind': [e.kind.value for e in validated],
            'detail': [DETAIL_SEPARATOR.join(str(v) for v in e.detail) for e in validated]
        })
    except Exception as e:
        logger.error(f"Failed to create Polars DataFrame: {e}")
        raise ExporterError(f"Failed to create DataFrame: {e}") from e

    logger.info(f"Created DataFrame with {len(df)} connection rows")
    return df


def export_connections_to_csv(
    connections: Sequence[RelationshipEvidence],
    file_path: Optional[str] = None
) -> str:
    """
    Export relationship evidence to CSV using the DataFrame schema

    Args:
        connections: Evidence records from the connection finder
        file_path: Optional path to save the CSV file. If None, only returns CSV text

    Returns:
        CSV text with a header row

    Raises:
        InvalidResultsError: If connections have an invalid structure
        PathValidationError: If file_path is invalid or unsafe
        FileExportError: If file write operation fails
    """
    csv_str = connections_to_dataframe(connections).write_csv()

    if file_path:
        validated_path = validate_file_path(file_path)
        try:
            validated_path.parent.mkdir(parents=True, exist_ok=True)
            validated_path.write_text(csv_str, encoding='utf-8')
        except OSError as e:
            logger.error(f"Failed to write CSV file: {e}")
            raise FileExportError(f"Failed to write file '{file_path}': {e}") from e

        logger.info(f"CSV connections exported to: {validated_path}")

    return csv_str
