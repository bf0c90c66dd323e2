"""Quick action query tool."""

from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from querylens.lib.logging_config import get_logger
from querylens.lib.sql import generate_quick_action_query
from querylens.models.error_types import InvalidParameterError, InvalidTableError
from querylens.models.query_models import QuickActionRequest
from querylens.models.tool_responses import QuickActionResponse
from querylens.services.query_utils import validate_column_name, validate_table_name

logger = get_logger(__name__, extra_fields={'component': 'tools'})


def build_quick_action(table_name: str, action: str = 'sample',
                       columns: Optional[List[str]] = None) -> Dict[str, Any]:
    """Generate a canned sample/count/stats query for a table.

    Unlike the engine function, which inserts names as written, this tool
    only accepts plain identifiers since the names end up in SQL text.

    Args:
        table_name: Table name, optionally schema-qualified
        action: 'sample', 'count' or 'stats'
        columns: Column names for 'stats' (first 10 are used)

    Returns:
        Dictionary containing table_name, action, query

    Raises:
        InvalidTableError: If table_name is not a valid identifier
        InvalidParameterError: If action or a column name is invalid
    """
    if not validate_table_name(table_name):
        raise InvalidTableError(table_name)

    try:
        request = QuickActionRequest(table_name=table_name, action=action, columns=columns or [])
    except ValidationError as e:
        field = e.errors()[0]['loc'][0] if e.errors() else 'request'
        raise InvalidParameterError(str(field), str(e))

    for column in request.columns:
        if not validate_column_name(column):
            raise InvalidParameterError('columns', f"'{column}' is not a valid column name")

    query = generate_quick_action_query(request.table_name, request.action, request.columns)
    logger.info(f"Generated {request.action} query for {request.table_name}")

    return QuickActionResponse(
        table_name=request.table_name,
        action=request.action,
        query=query
    ).model_dump()
