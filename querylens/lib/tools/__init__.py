"""MCP tool implementations organized by concern."""

from .analysis import (
    analyze_query,
    get_query_tables,
    get_query_parameters,
    bind_query_parameters,
    match_saved_queries
)
from .quick_actions import build_quick_action

__all__ = [
    'analyze_query',
    'get_query_tables',
    'get_query_parameters',
    'bind_query_parameters',
    'match_saved_queries',
    'build_quick_action'
]
