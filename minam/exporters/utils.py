"""
Utility functions for exporters
"""

import os
import logging
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from ..core.models import RelationshipEvidence
from .exceptions import PathValidationError, InvalidResultsError

logger = logging.getLogger(__name__)

# Constants
MAX_FILENAME_LENGTH = 255
DEFAULT_JSON_FILENAME = "connections.json"
DEFAULT_CSV_FILENAME = "connections.csv"
DETAIL_SEPARATOR = ", "

RESERVED_NAMES = {'CON', 'PRN', 'AUX', 'NUL', 'COM1', 'COM2', 'COM3', 'COM4',
                  'COM5', 'COM6', 'COM7', 'COM8', 'COM9', 'LPT1', 'LPT2',
                  'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9'}


def validate_file_path(file_path: str, must_exist: bool = False) -> Path:
    """
    Validate and sanitize file path for export operations

    Args:
        file_path: Path to validate
        must_exist: Whether parent directory must exist

    Returns:
        Validated, resolved Path object

    Raises:
        PathValidationError: If path is invalid or unsafe

    Examples:
        >>> validate_file_path("connections.json").name
        'connections.json'
    """
    if not file_path or not isinstance(file_path, (str, Path)):
        raise PathValidationError(f"File path must be a non-empty string, got: {type(file_path)}")

    filename = os.path.basename(str(file_path))
    if len(filename) > MAX_FILENAME_LENGTH:
        raise PathValidationError(
            f"Filename too long ({len(filename)} chars). Maximum is {MAX_FILENAME_LENGTH}"
        )

    try:
        path = Path(file_path).resolve()
    except (ValueError, OSError) as e:
        raise PathValidationError(f"Invalid file path: {e}")

    try:
        if must_exist:
            parent = path.parent
            if not parent.exists():
                raise PathValidationError(f"Parent directory does not exist: {parent}")
            if not parent.is_dir():
                raise PathValidationError(f"Parent path is not a directory: {parent}")
    except (PermissionError, OSError) as e:
        raise PathValidationError(f"Cannot access path: {e}")

    if path.stem.upper() in RESERVED_NAMES:
        raise PathValidationError(f"Reserved filename: {filename}")

    return path


def validate_connections(connections: Any) -> List[RelationshipEvidence]:
    """
    Validate that connections is a list of evidence records (or their dict form)

    Args:
        connections: Value to validate

    Returns:
        List of RelationshipEvidence

    Raises:
        InvalidResultsError: If the structure is invalid

    Examples:
        >>> validate_connections([])
        []
    """
    if not isinstance(connections, (list, tuple)):
        raise InvalidResultsError(f"Connections must be a list, got: {type(connections)}")

    validated = []
    for index, item in enumerate(connections):
        try:
            validated.append(RelationshipEvidence.model_validate(item))
        except ValidationError as e:
            raise InvalidResultsError(f"Connection {index} is invalid: {e}") from e

    return validated
