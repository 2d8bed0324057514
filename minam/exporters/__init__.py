"""
Export functionality for relationship evidence

- JSON: Machine-readable format for integration with other tools
- DataFrame: Polars DataFrame for analysis
- CSV: DataFrame rows written as CSV text or file
"""

from .dataframe_export import connections_to_dataframe, export_connections_to_csv
from .json_export import export_connections_to_json

from .exceptions import (
    ExporterError,
    InvalidResultsError,
    FileExportError,
    PathValidationError
)

__all__ = [
    "connections_to_dataframe",
    "export_connections_to_csv",
    "export_connections_to_json",
    "ExporterError",
    "InvalidResultsError",
    "FileExportError",
    "PathValidationError",
]
