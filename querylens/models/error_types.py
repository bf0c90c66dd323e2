"""Error types for the querylens tool layer.

The analysis engine itself never raises; these errors are only produced by
the tool layer when it validates requests before calling into the engine.
"""

from typing import Iterable


class QueryLensError(Exception):
    """Base error class for querylens tool operations."""

    def __init__(self, message: str, recoverable: bool = True):
        super().__init__(message)
        self.message = message
        self.recoverable = recoverable


class InvalidQueryError(QueryLensError):
    """Error raised when query text is missing or unusable."""

    def __init__(self, query: str, reason: str):
        query = query if isinstance(query, str) else repr(query)
        message = f"Invalid query: {reason}. Query: {query[:100]}{'...' if len(query) > 100 else ''}"
        super().__init__(message, recoverable=False)
        self.query = query
        self.reason = reason


class InvalidTableError(QueryLensError):
    """Error raised when a table name is not a valid identifier."""

    def __init__(self, table_name: str, message: str = None):
        if message is None:
            message = f"Table name '{table_name}' is invalid"
        super().__init__(message, recoverable=False)
        self.table_name = table_name


class InvalidParameterError(QueryLensError):
    """Error raised when a tool argument fails validation."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Invalid parameter '{name}': {reason}", recoverable=True)
        self.name = name
        self.reason = reason


class MissingParameterError(QueryLensError):
    """Error raised when detected placeholders have no supplied value."""

    def __init__(self, names: Iterable[str]):
        self.names = list(names)
        super().__init__(
            f"Missing values for parameters: {', '.join(self.names)}",
            recoverable=True
        )


class ConfigurationError(QueryLensError):
    """Error raised when server configuration is invalid."""

    def __init__(self, message: str):
        super().__init__(message, recoverable=False)
