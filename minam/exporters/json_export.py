"""
Export relationship evidence to JSON format
"""

import json
import logging
from typing import Optional, Sequence

from ..core.models import RelationshipEvidence
from .exceptions import FileExportError, PathValidationError
from .utils import validate_file_path, validate_connections

logger = logging.getLogger(__name__)


def export_connections_to_json(
    connections: Sequence[RelationshipEvidence],
    file_path: Optional[str] = None,
    indent: int = 2,
    ensure_ascii: bool = False
) -> str:
    """
    Export relationship evidence to JSON format

    Records are serialized with camelCase keys (datasetA, datasetB, kind,
    detail, ...) and written as a JSON array. Unicode is preserved by default.

    Args:
        connections: Evidence records from the connection finder
        file_path: Optional path to save JSON file. If None, only returns JSON string
        indent: Number of spaces for indentation (default: 2)
        ensure_ascii: If True, escape non-ASCII characters (default: False)

    Returns:
        JSON string representation of the connections

    Raises:
        InvalidResultsError: If connections have an invalid structure
        PathValidationError: If file_path is invalid or unsafe
        FileExportError: If file write operation fails

    Examples:
        >>> export_connections_to_json([])
        '[]'
    """
    try:
        validated = validate_connections(connections)
    except Exception as e:
        logger.error(f"Connections validation failed: {e}")
        raise

    payload = [evidence.model_dump(mode='json', by_alias=True) for evidence in validated]

    try:
        json_str = json.dumps(payload, indent=indent, default=str, ensure_ascii=ensure_ascii)
    except (TypeError, ValueError) as e:
        logger.error(f"JSON serialization failed: {e}")
        raise FileExportError(f"Failed to serialize connections to JSON: {e}") from e

    if file_path:
        try:
            validated_path = validate_file_path(file_path)
            validated_path.parent.mkdir(parents=True, exist_ok=True)
            validated_path.write_text(json_str, encoding='utf-8')

            logger.info(f"JSON connections exported to: {validated_path}")

        except PathValidationError:
            raise
        except OSError as e:
            logger.error(f"Failed to write JSON file: {e}")
            raise FileExportError(f"Failed to write file '{file_path}': {e}") from e

    return json_str
