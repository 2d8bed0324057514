"""
Custom exceptions for dataset parsing and the completion agent
"""


class MinamError(Exception):
    """Base exception for all minam errors"""
    pass


class DatasetParseError(MinamError):
    """Raised when a file cannot be decoded into a dataset"""
    pass


class UnsupportedFileTypeError(DatasetParseError):
    """Raised when the file extension has no parser"""
    pass


class ConfigurationError(MinamError):
    """Raised when required configuration (e.g., an API key) is missing"""
    pass


class AgentError(MinamError):
    """Raised when the completion service call fails"""
    pass


class QueryRequiredError(AgentError):
    """Raised when an agent is asked an empty query"""
    pass


class EmptyCompletionError(AgentError):
    """Raised when the completion service returns no content"""
    pass
