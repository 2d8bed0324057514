"""
Custom exceptions for exporters module
"""

from ..core.exceptions import MinamError


class ExporterError(MinamError):
    """Base exception for all exporter errors"""
    pass


class InvalidResultsError(ExporterError):
    """Raised when the connections to export have an invalid structure"""
    pass


class FileExportError(ExporterError):
    """Raised when file export operations fail"""
    pass


class PathValidationError(ExporterError):
    """Raised when file path is invalid or unsafe"""
    pass
