"""Supporting services for querylens."""

from .query_utils import (
    validate_table_name,
    validate_column_name,
    get_table_name_without_schema,
    get_schema_from_table_name
)

__all__ = [
    'validate_table_name',
    'validate_column_name',
    'get_table_name_without_schema',
    'get_schema_from_table_name'
]
