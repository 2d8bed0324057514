"""
minam - relate uploaded tabular datasets and build completion prompts over them
"""

from importlib.metadata import version, PackageNotFoundError

from .core.models import ParsedDataset, SheetTable, RelationshipEvidence, ConnectionKind
from .core.config import MinamConfig
from .core.parser import parse_file, parse_dataframe
from .analysis import DatasetConnectionFinder, find_connections

try:
    __version__ = version("minam")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    "ParsedDataset",
    "SheetTable",
    "RelationshipEvidence",
    "ConnectionKind",
    "MinamConfig",
    "parse_file",
    "parse_dataframe",
    "DatasetConnectionFinder",
    "find_connections",
]
