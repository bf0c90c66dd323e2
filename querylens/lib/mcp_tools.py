"""MCP Tools Orchestration Layer.

Single entry point for all MCP tools. The implementations live in the
tools package:

- tools/analysis.py: table, placeholder and substitution tools
- tools/quick_actions.py: canned query generation
"""

from .tools import (
    analyze_query,
    get_query_tables,
    get_query_parameters,
    bind_query_parameters,
    match_saved_queries,
    build_quick_action
)

__all__ = [
    'analyze_query',
    'get_query_tables',
    'get_query_parameters',
    'bind_query_parameters',
    'match_saved_queries',
    'build_quick_action'
]
