"""SQL query analysis and parameterization engine.

Every function in this package is pure: no I/O, no shared state, and no
exceptions on malformed input.
"""

from .normalizer import normalize_query
from .table_extractor import extract_table_names
from .parameters import detect_parameters, infer_parameter_type
from .substitution import substitute_parameters, format_sql_literal
from .associations import query_references_table, find_queries_for_table, get_query_text
from .quick_actions import generate_quick_action_query
from querylens.services.query_utils import get_table_name_without_schema, get_schema_from_table_name

__all__ = [
    'normalize_query',
    'extract_table_names',
    'detect_parameters',
    'infer_parameter_type',
    'substitute_parameters',
    'format_sql_literal',
    'query_references_table',
    'find_queries_for_table',
    'get_query_text',
    'generate_quick_action_query',
    'get_table_name_without_schema',
    'get_schema_from_table_name'
]
