"""Comment and whitespace normalization for table extraction."""

import re


_LINE_COMMENT_RE = re.compile(r'--[^\r\n]*')
# Non-nested; an unterminated /* runs to the end of the text
_BLOCK_COMMENT_RE = re.compile(r'/\*.*?(?:\*/|\Z)', re.DOTALL)
_WHITESPACE_RE = re.compile(r'\s+')


def remove_comments(query: str) -> str:
    """Remove SQL comments from query."""
    query = _LINE_COMMENT_RE.sub('', query)
    return _BLOCK_COMMENT_RE.sub('', query)


def normalize_query(query: str) -> str:
    """Strip comments and collapse whitespace.

    Line comments are removed before block comments, then every whitespace
    run becomes a single space and the result is trimmed.

    Args:
        query: Raw SQL text

    Returns:
        Normalized text, or an empty string for non-string input
    """
    if not isinstance(query, str):
        return ''
    return _WHITESPACE_RE.sub(' ', remove_comments(query)).strip()
