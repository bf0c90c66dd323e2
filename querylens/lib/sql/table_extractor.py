"""Table reference extraction from free-form SQL.

This is a keyword scan over comment-stripped text, not a parser. It is
good enough for labelling saved queries with the tables they use and has
known gaps: CTE names are only reported if they also appear after
FROM/JOIN, a table followed directly by JOIN hides the joined table, and
quoted identifiers are not recognized.
"""

import re
from typing import Set

from querylens.lib.logging_config import get_logger
from querylens.lib.sql.normalizer import normalize_query

logger = get_logger(__name__, extra_fields={'component': 'sql'})

_IDENT = r'[a-zA-Z_][a-zA-Z0-9_]*'
_QUALIFIED_IDENT = rf'{_IDENT}(?:\.{_IDENT})?'
_FLAGS = re.IGNORECASE | re.ASCII

# FROM/JOIN <table> [AS] [alias]. The alias is consumed and discarded, and
# any identifier qualifies, so in "FROM a JOIN b" the JOIN is taken as the
# alias of a and b is not reported. A subquery ("FROM (") cannot match the
# identifier class.
_FROM_JOIN_RE = re.compile(
    rf'(?:FROM|JOIN)\s+({_QUALIFIED_IDENT})\s*(?:AS\s+)?(?:{_IDENT})?',
    _FLAGS
)
_UPDATE_RE = re.compile(rf'UPDATE\s+({_QUALIFIED_IDENT})', _FLAGS)
_INSERT_RE = re.compile(rf'INSERT\s+INTO\s+({_QUALIFIED_IDENT})', _FLAGS)
_DELETE_RE = re.compile(rf'DELETE\s+FROM\s+({_QUALIFIED_IDENT})', _FLAGS)


def extract_table_names(query: str) -> Set[str]:
    """Extract the tables a SQL statement reads from or writes to.

    Args:
        query: Raw SQL text; comments are stripped internally

    Returns:
        Set of lower-cased table names, schema-qualified where written so.
        Empty for non-string or empty input.
    """
    if not query or not isinstance(query, str):
        return set()

    normalized = normalize_query(query)
    tables = set()

    for pattern in (_FROM_JOIN_RE, _UPDATE_RE, _INSERT_RE, _DELETE_RE):
        for match in pattern.finditer(normalized):
            tables.add(match.group(1).lower())

    logger.debug(f"Extracted table names from query: {sorted(tables)}")
    return tables
