"""MCP tool implementations and utilities."""

from .logging_config import setup_logging, get_logger
from .mcp_tools import (
    analyze_query,
    get_query_tables,
    get_query_parameters,
    bind_query_parameters,
    match_saved_queries,
    build_quick_action
)

__all__ = [
    # Query tools
    'analyze_query',
    'get_query_tables',
    'get_query_parameters',
    'bind_query_parameters',
    'match_saved_queries',
    'build_quick_action',
    # Logging utilities
    'setup_logging',
    'get_logger'
]
