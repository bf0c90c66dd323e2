"""Placeholder substitution with SQL literal formatting.

WARNING: this is a best-effort textual formatter, not prepared-statement
binding. Text values are quoted and their single quotes doubled, but no
dialect-specific escaping is performed. Do not rely on it to neutralize
adversarial input when the resulting SQL runs against a real database.
"""

import re
from decimal import Decimal
from typing import Any, Mapping, Optional

from querylens.lib.logging_config import get_logger
from querylens.models.query_models import SubstitutionValue

logger = get_logger(__name__, extra_fields={'component': 'sql'})


def _format_number(value) -> str:
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return str(int(value))
        return format(value.normalize(), 'f')
    return str(value)


def format_sql_literal(value: Any) -> str:
    """Render a value as a SQL literal.

    Args:
        value: A SubstitutionValue, or a plain Python value to be tagged

    Returns:
        ``NULL`` for null or empty text, bare digits for numbers,
        ``TRUE``/``FALSE`` for booleans, otherwise a single-quoted string
        with embedded quotes doubled (``O'Brien`` -> ``'O''Brien'``).
    """
    value = SubstitutionValue.coerce(value)

    if value.kind == 'null' or (value.kind == 'text' and value.value == ''):
        return 'NULL'
    if value.kind == 'number':
        return _format_number(value.value)
    if value.kind == 'boolean':
        return 'TRUE' if value.value else 'FALSE'
    return "'" + value.value.replace("'", "''") + "'"


def placeholder_patterns(name: str):
    """Patterns matching every syntax form of one placeholder name."""
    escaped = re.escape(name)
    return (
        # Word boundary so that :name never eats the start of :name1
        re.compile(rf':{escaped}\b', re.ASCII),
        re.compile(rf'\$\{{{escaped}\}}'),
        re.compile(rf'\{{\{{{escaped}\}}\}}'),
    )


def substitute_parameters(query: str, values: Optional[Mapping[str, Any]]) -> str:
    """Replace placeholders with formatted SQL literals.

    Every syntax form of each supplied name is replaced, whichever form
    detection recorded for it. Names with no entry in ``values`` are left
    untouched.

    Args:
        query: SQL text containing placeholders
        values: Mapping of placeholder name to SubstitutionValue or plain value

    Returns:
        The substituted text. Non-string queries are returned unchanged.
    """
    if not query or not isinstance(query, str):
        return query
    if not values:
        return query

    result = query
    for name, value in values.items():
        literal = format_sql_literal(value)
        for pattern in placeholder_patterns(str(name)):
            result = pattern.sub(lambda _match: literal, result)

    logger.debug(f"Substituted parameters: {list(values)}")
    return result
