"""Canned exploration queries for a single table."""

from typing import Any, Iterable, List, Mapping, Optional

SAMPLE_LIMIT = 100
MAX_STATS_COLUMNS = 10


def _column_name(column: Any) -> Optional[str]:
    if isinstance(column, str):
        return column
    if isinstance(column, Mapping):
        name = column.get('name')
    else:
        name = getattr(column, 'name', None)
    return name if isinstance(name, str) else None


def _column_names(columns: Any) -> List[str]:
    """Resolve usable column names; entries without a name are skipped."""
    if not columns:
        return []
    if isinstance(columns, str):
        columns = [columns]
    elif not isinstance(columns, Iterable):
        return []
    names = []
    for column in columns:
        name = _column_name(column)
        if name:
            names.append(name)
    return names


def generate_quick_action_query(table_name: str, action: str,
                                columns: Optional[Iterable[Any]] = None) -> str:
    """Generate a quick action query for a table.

    Args:
        table_name: Table name, inserted as written
        action: 'sample', 'count' or 'stats'; anything else yields 'sample'
        columns: Column names (or mappings/objects with a ``name``) used by
            'stats'. A single string counts as one column, entries without
            a usable name are skipped, and only the first 10 are used.

    Returns:
        Generated SQL query
    """
    if action == 'count':
        return f"SELECT COUNT(*) as row_count FROM {table_name}"

    if action == 'stats':
        names = _column_names(columns)[:MAX_STATS_COLUMNS]
        if not names:
            return f"SELECT COUNT(*) as total_rows FROM {table_name}"

        stats_expressions = ','.join(
            f"\n          COUNT({name}) as {name}_count,"
            f"\n          COUNT(DISTINCT {name}) as {name}_distinct"
            for name in names
        )
        return f"SELECT\n  COUNT(*) as total_rows,{stats_expressions}\nFROM {table_name}"

    return f"SELECT * FROM {table_name} LIMIT {SAMPLE_LIMIT}"
