"""MCP server entry point for SQL query analysis."""

import sys
import argparse
from typing import Dict, Any, List, Optional

from fastmcp import FastMCP

from querylens.lib.logging_config import setup_logging, get_logger
from querylens.lib.mcp_tools import (
    analyze_query,
    get_query_tables,
    get_query_parameters,
    bind_query_parameters,
    match_saved_queries,
    build_quick_action
)
from querylens.models.config import ServerConfig
from querylens.models.error_types import (
    QueryLensError,
    InvalidTableError,
    MissingParameterError
)
from querylens.models.tool_responses import ErrorResponse

logger = get_logger(__name__, extra_fields={'component': 'server'})


def _error_response(tool: str, error: Exception) -> Dict[str, Any]:
    """Convert an exception raised by a tool into an error payload."""
    if isinstance(error, QueryLensError):
        logger.error(f"Tool error in {tool}: {error}", extra={'tool': tool})
        details = None
        if isinstance(error, InvalidTableError):
            details = {'table_name': error.table_name}
        elif isinstance(error, MissingParameterError):
            details = {
                'missing': error.names,
                'suggestion': 'Use detect_query_parameters to list the placeholders to fill'
            }
        response = ErrorResponse(error=str(error), recoverable=error.recoverable, details=details)
        return response.model_dump(exclude_none=True)

    logger.error(f"Unexpected error in {tool}: {error}", extra={'tool': tool})
    return ErrorResponse(
        error=f"Unexpected error: {str(error)}",
        recoverable=False
    ).model_dump(exclude_none=True)


async def analyze_sql_query(query: str) -> Dict[str, Any]:
    """Analyze a SQL query: referenced tables and named placeholders.

    Args:
        query: SQL query text

    Returns:
        Dictionary containing:
        - tables: Referenced table names (lower-cased, sorted)
        - table_count: Number of tables
        - parameters: Placeholders with name, type, format and placeholder text
        - parameter_count: Number of placeholders
    """
    try:
        return analyze_query(query)
    except Exception as e:
        return _error_response('analyze_sql_query', e)


async def list_query_tables(query: str) -> Dict[str, Any]:
    """List the tables a SQL query reads from or writes to.

    Recognizes FROM, JOIN, UPDATE, INSERT INTO and DELETE FROM clauses.
    Comments are ignored. Subqueries are not reported as tables.
    """
    try:
        return get_query_tables(query)
    except Exception as e:
        return _error_response('list_query_tables', e)


async def detect_query_parameters(query: str) -> Dict[str, Any]:
    """Detect :name, ${name} and {{name}} placeholders in a SQL query.

    Each placeholder gets a type guessed from its name
    (date, number, boolean or text) to help build an input form.
    """
    try:
        return get_query_parameters(query)
    except Exception as e:
        return _error_response('detect_query_parameters', e)


async def substitute_query_parameters(query: str,
                                      values: Dict[str, Any],
                                      require_all: bool = False) -> Dict[str, Any]:
    """Fill placeholders with values, producing literal SQL.

    ⚠️ This is text substitution, not parameter binding. Do not use it to
    make untrusted input safe.

    Args:
        query: SQL query text with placeholders
        values: Mapping of placeholder name to value (string, number,
            boolean or null)
        require_all: Return an error if any placeholder has no value

    Returns:
        Dictionary containing:
        - query: The substituted SQL
        - substituted: Names that received a value
        - missing: Names left as placeholders
    """
    try:
        return bind_query_parameters(query, values, require_all)
    except Exception as e:
        return _error_response('substitute_query_parameters', e)


async def find_queries_for_table(queries: List[Dict[str, Any]], table_name: str) -> Dict[str, Any]:
    """Find saved queries that use a table.

    Args:
        queries: Saved query records, each with its SQL under 'query',
            'sql' or 'content'
        table_name: Table to look for; schema prefixes are ignored when matching

    Returns:
        Dictionary containing table_name, queries and count
    """
    try:
        return match_saved_queries(queries, table_name)
    except Exception as e:
        return _error_response('find_queries_for_table', e)


async def generate_quick_action(table_name: str,
                                action: str = 'sample',
                                columns: Optional[List[str]] = None) -> Dict[str, Any]:
    """Generate a ready-to-run exploration query for a table.

    Args:
        table_name: Table name, optionally schema-qualified
        action: 'sample' (100 rows), 'count' (row count) or 'stats'
            (per-column non-null and distinct counts)
        columns: Column names for 'stats'; only the first 10 are used

    Returns:
        Dictionary containing table_name, action and query
    """
    try:
        return build_quick_action(table_name, action, columns)
    except Exception as e:
        return _error_response('generate_quick_action', e)


TOOLS = (
    analyze_sql_query,
    list_query_tables,
    detect_query_parameters,
    substitute_query_parameters,
    find_queries_for_table,
    generate_quick_action,
)


def create_server(config: Optional[ServerConfig] = None) -> FastMCP:
    """Create the MCP server and register every tool."""
    name = config.server_name if config else 'QueryLens MCP Server'
    mcp = FastMCP(name)
    for tool in TOOLS:
        mcp.tool(name=tool.__name__)(tool)
    return mcp


def main():
    """Main entry point with transport selection."""
    parser = argparse.ArgumentParser(description="QueryLens MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        help="Transport mode: stdio or sse (default: from configuration)"
    )
    parser.add_argument(
        "--host",
        help="Host for SSE server (default: from configuration)"
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Port for SSE server (default: from configuration)"
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML configuration file"
    )

    args = parser.parse_args()

    try:
        config = ServerConfig(args.config)
    except QueryLensError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(
        level=config.log_level,
        json_format=config.log_json,
        log_file=config.log_file
    )

    transport = args.transport or config.transport
    host = args.host or config.host
    port = args.port or config.port

    mcp = create_server(config)

    try:
        if transport == "stdio":
            logger.info("Starting QueryLens MCP Server in stdio mode...")
            mcp.run()
        else:
            logger.info(f"Starting QueryLens MCP Server in SSE mode on {host}:{port}")
            mcp.run(
                transport="sse",
                host=host,
                port=port
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested via keyboard interrupt")
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
