"""Matching saved queries to the tables they reference."""

from typing import Any, Iterable, List, Mapping, Optional

from querylens.lib.logging_config import get_logger
from querylens.lib.sql.table_extractor import extract_table_names
from querylens.services.query_utils import get_table_name_without_schema

logger = get_logger(__name__, extra_fields={'component': 'sql'})

# Field names a saved query record may keep its SQL text under, in priority order
QUERY_TEXT_FIELDS = ('query', 'sql', 'content')


def get_query_text(record: Any) -> Optional[str]:
    """Return the SQL text of a saved query record.

    Works with mappings, pydantic models and plain objects; the first
    populated field of ``query``, ``sql``, ``content`` wins.
    """
    for field in QUERY_TEXT_FIELDS:
        if isinstance(record, Mapping):
            text = record.get(field)
        else:
            text = getattr(record, field, None)
        if text:
            return text
    return None


def query_references_table(query: str, table_name: str) -> bool:
    """Check whether a query references a table.

    Matching is case-insensitive and schema-agnostic: ``public.users``
    matches a search for ``users`` and the other way round.

    Args:
        query: SQL text
        table_name: Table to look for, optionally schema-qualified

    Returns:
        True if the table appears among the query's table references
    """
    if not table_name or not isinstance(table_name, str):
        return False

    search = table_name.lower()
    search_table_only = get_table_name_without_schema(search)

    for table in extract_table_names(query):
        if table == search:
            return True
        if get_table_name_without_schema(table) == search_table_only:
            return True
    return False


def find_queries_for_table(queries: Optional[Iterable[Any]], table_name: str) -> List[Any]:
    """Filter saved query records down to those referencing a table.

    Args:
        queries: Saved query records (mappings, models or objects)
        table_name: Table to look for

    Returns:
        The matching records, unchanged and in input order
    """
    if not queries or not table_name:
        return []

    matches = [
        record for record in queries
        if query_references_table(get_query_text(record), table_name)
    ]
    logger.debug(f"Found {len(matches)} saved queries referencing {table_name}")
    return matches
