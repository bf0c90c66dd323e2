"""Data models for querylens."""

from .config import ServerConfig
from .error_types import (
    QueryLensError,
    InvalidQueryError,
    InvalidTableError,
    InvalidParameterError,
    MissingParameterError,
    ConfigurationError
)
from .query_models import Parameter, SubstitutionValue, QuickActionRequest, SavedQueryRecord

__all__ = [
    'ServerConfig',
    'QueryLensError',
    'InvalidQueryError',
    'InvalidTableError',
    'InvalidParameterError',
    'MissingParameterError',
    'ConfigurationError',
    'Parameter',
    'SubstitutionValue',
    'QuickActionRequest',
    'SavedQueryRecord'
]
