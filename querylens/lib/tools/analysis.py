"""Query analysis tools.

These wrap the pure engine functions with request validation and return
JSON-able dictionaries built from the response models.
"""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from querylens.lib.logging_config import get_logger
from querylens.lib.sql import (
    extract_table_names,
    detect_parameters,
    substitute_parameters,
    find_queries_for_table
)
from querylens.models.error_types import (
    InvalidQueryError,
    InvalidParameterError,
    InvalidTableError,
    MissingParameterError
)
from querylens.models.query_models import SavedQueryRecord, SubstitutionValue
from querylens.models.tool_responses import (
    QueryAnalysisResponse,
    QueryParametersResponse,
    QueryTablesResponse,
    SavedQueryMatchResponse,
    SubstitutionResponse
)
from querylens.services.query_utils import validate_table_name

logger = get_logger(__name__, extra_fields={'component': 'tools'})


def _require_query(query: Any) -> str:
    if not isinstance(query, str) or not query.strip():
        raise InvalidQueryError(query if isinstance(query, str) else '', "Empty query")
    return query


def analyze_query(query: str) -> Dict[str, Any]:
    """Report the tables and placeholders of a query in one call.

    Args:
        query: SQL query text

    Returns:
        Dictionary containing tables, table_count, parameters, parameter_count

    Raises:
        InvalidQueryError: If the query is empty
    """
    query = _require_query(query)

    tables = sorted(extract_table_names(query))
    parameters = detect_parameters(query)

    return QueryAnalysisResponse(
        tables=tables,
        table_count=len(tables),
        parameters=parameters,
        parameter_count=len(parameters)
    ).model_dump()


def get_query_tables(query: str) -> Dict[str, Any]:
    """List the tables a query references, sorted by name."""
    query = _require_query(query)
    tables = sorted(extract_table_names(query))
    return QueryTablesResponse(tables=tables, count=len(tables)).model_dump()


def get_query_parameters(query: str) -> Dict[str, Any]:
    """List the placeholders in a query with their inferred types."""
    query = _require_query(query)
    parameters = detect_parameters(query)
    return QueryParametersResponse(parameters=parameters, count=len(parameters)).model_dump()


def _to_substitution_value(name: str, raw: Any) -> SubstitutionValue:
    """Accept either a plain JSON value or an explicit {kind, value} object."""
    if isinstance(raw, Mapping) and 'kind' in raw:
        try:
            return SubstitutionValue.model_validate(dict(raw))
        except ValidationError as e:
            raise InvalidParameterError(name, str(e))
    return SubstitutionValue.coerce(raw)


def bind_query_parameters(query: str, values: Optional[Mapping[str, Any]],
                          require_all: bool = False) -> Dict[str, Any]:
    """Substitute values into a query's placeholders.

    The result is literal SQL produced by text replacement. It is not a
    prepared statement and offers no protection against hostile values.

    Args:
        query: SQL query text with placeholders
        values: Placeholder name to value; values may be plain JSON values
            or ``{"kind": ..., "value": ...}`` objects
        require_all: Fail if any detected placeholder has no value

    Returns:
        Dictionary containing query, substituted, missing

    Raises:
        InvalidQueryError: If the query is empty
        InvalidParameterError: If a tagged value is malformed
        MissingParameterError: If require_all is set and values are missing
    """
    query = _require_query(query)
    values = values or {}

    typed_values = {name: _to_substitution_value(name, raw) for name, raw in values.items()}

    detected = [param.name for param in detect_parameters(query)]
    missing = [name for name in detected if name not in typed_values]
    if require_all and missing:
        raise MissingParameterError(missing)

    result = substitute_parameters(query, typed_values)
    substituted = [name for name in detected if name in typed_values]

    logger.info(f"Bound {len(substituted)} parameters, {len(missing)} left unbound")
    return SubstitutionResponse(query=result, substituted=substituted, missing=missing).model_dump()


def match_saved_queries(queries: Optional[List[Any]], table_name: str) -> Dict[str, Any]:
    """Find the saved queries that reference a table.

    Args:
        queries: Saved query records as dictionaries
        table_name: Table to look for, optionally schema-qualified

    Returns:
        Dictionary containing table_name, queries, count

    Raises:
        InvalidTableError: If table_name is not a valid identifier
        InvalidParameterError: If a record cannot be read as a saved query
    """
    if not validate_table_name(table_name):
        raise InvalidTableError(table_name)

    records = []
    for index, record in enumerate(queries or []):
        if isinstance(record, SavedQueryRecord):
            records.append(record)
            continue
        try:
            records.append(SavedQueryRecord.model_validate(record))
        except ValidationError as e:
            raise InvalidParameterError(f"queries[{index}]", str(e))

    matches = [
        record.model_dump(exclude_none=True)
        for record in find_queries_for_table(records, table_name)
    ]
    return SavedQueryMatchResponse(table_name=table_name, queries=matches, count=len(matches)).model_dump()
