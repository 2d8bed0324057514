"""
Dataset relationship discovery and text summaries
"""

from .connection_finder import DatasetConnectionFinder, find_connections, DEFAULT_CHECK_ORDER
from .summary import (
    describe_connection,
    format_connection,
    format_dataset_for_ai,
    extract_data_insights
)

__all__ = [
    'DatasetConnectionFinder',
    'find_connections',
    'DEFAULT_CHECK_ORDER',
    'describe_connection',
    'format_connection',
    'format_dataset_for_ai',
    'extract_data_insights'
]
