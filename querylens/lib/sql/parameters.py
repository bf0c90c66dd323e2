"""Named placeholder detection and type inference.

Three placeholder syntaxes are recognized:

- ``:name``     (colon, standard named parameters)
- ``${name}``   (dollar-brace, template style)
- ``{{name}}``  (mustache)

Detection runs on the raw query text. Unlike table extraction, comments
are not stripped first, so a placeholder inside a comment is still reported.
"""

import re
from typing import Dict, List

from querylens.lib.logging_config import get_logger
from querylens.models.query_models import Parameter

logger = get_logger(__name__, extra_fields={'component': 'sql'})

_IDENT = r'[a-zA-Z_][a-zA-Z0-9_]*'

# Scan order matters: on a name written in several forms, the colon form wins
PLACEHOLDER_PATTERNS = (
    ('colon', re.compile(rf':({_IDENT})'), ':{name}'),
    ('dollar', re.compile(rf'\$\{{({_IDENT})\}}'), '${{{name}}}'),
    ('mustache', re.compile(rf'\{{\{{({_IDENT})\}}\}}'), '{{{{{name}}}}}'),
)

DATE_KEYWORDS = ('date', 'time', '_at', 'created', 'updated', 'deleted')
DATE_NAMES = ('from', 'to', 'start', 'end')

NUMBER_KEYWORDS = (
    'id', 'count', 'num', 'amount', 'price', 'quantity', 'total',
    'limit', 'offset', 'page', 'size', 'age', 'year', 'month', 'day'
)

BOOLEAN_KEYWORDS = (
    'is_', 'has_', 'can_', 'should_', 'active', 'enabled', 'visible', 'deleted'
)
BOOLEAN_NAMES = ('flag', 'status')


def infer_parameter_type(name: str) -> str:
    """Guess the semantic type of a placeholder from its name.

    Categories are tried in order date, number, boolean and the first hit
    wins, so ``is_deleted`` is a date and ``update_id`` is a number.

    Args:
        name: Placeholder name

    Returns:
        One of 'date', 'number', 'boolean', 'text'
    """
    if not isinstance(name, str):
        return 'text'

    name = name.lower()

    if (any(keyword in name for keyword in DATE_KEYWORDS)
            or name.endswith('_on')
            or name in DATE_NAMES):
        return 'date'

    if any(keyword in name for keyword in NUMBER_KEYWORDS):
        return 'number'

    if any(keyword in name for keyword in BOOLEAN_KEYWORDS) or name in BOOLEAN_NAMES:
        return 'boolean'

    return 'text'


def detect_parameters(query: str) -> List[Parameter]:
    """Find the unique named placeholders in a query.

    Args:
        query: Raw SQL text

    Returns:
        Parameters in the order they were first recorded. A name seen in
        more than one syntax keeps the form of the scan that found it first.
    """
    if not query or not isinstance(query, str):
        return []

    params: Dict[str, Parameter] = {}

    for syntax_form, pattern, template in PLACEHOLDER_PATTERNS:
        for match in pattern.finditer(query):
            param_name = match.group(1)
            if param_name in params:
                continue
            params[param_name] = Parameter(
                name=param_name,
                type=infer_parameter_type(param_name),
                format=syntax_form,
                placeholder=template.format(name=param_name)
            )

    logger.debug(f"Detected {len(params)} parameters: {list(params)}")
    return list(params.values())
