"""Identifier utilities for table and column names."""

import re
from typing import Optional


_TABLE_NAME_RE = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_]*(\.[a-zA-Z_][a-zA-Z0-9_]*)?$')
_IDENTIFIER_RE = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_]*$')


def validate_table_name(table_name: str) -> bool:
    """Validate a table name, optionally schema-qualified.

    Args:
        table_name: Table name to validate

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(table_name, str):
        return False
    return bool(_TABLE_NAME_RE.match(table_name))


def validate_column_name(column_name: str) -> bool:
    """Validate a bare column name.

    Args:
        column_name: Column name to validate

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(column_name, str):
        return False
    return bool(_IDENTIFIER_RE.match(column_name))


def get_table_name_without_schema(qualified_name: str) -> str:
    """Return the table part of a possibly schema-qualified name.

    ``public.users`` -> ``users``; ``users`` -> ``users``; empty -> ``''``.
    """
    if not qualified_name:
        return ''
    return qualified_name.split('.')[-1]


def get_schema_from_table_name(qualified_name: str) -> Optional[str]:
    """Return the schema part of a qualified name, or None when unqualified."""
    if not qualified_name:
        return None
    parts = qualified_name.split('.')
    return parts[0] if len(parts) > 1 else None

