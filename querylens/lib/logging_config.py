"""Structured logging configuration with JSON formatter."""

import logging
import json
import sys
from datetime import datetime, timezone
from typing import Dict, Any


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON formatted log string
        """
        log_obj = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info:
            log_obj['exception'] = self.formatException(record.exc_info)

        if hasattr(record, 'extra_fields'):
            log_obj.update(record.extra_fields)

        return json.dumps(log_obj, default=str)


def setup_logging(
    level: str = "INFO",
    json_format: bool = True,
    log_file: str = None
) -> None:
    """Set up structured logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Whether to use JSON formatting
        log_file: Optional log file path
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    # stdout is the JSON-RPC channel in stdio mode, so logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


class ExtraFieldsAdapter(logging.LoggerAdapter):
    """Adapter that attaches fixed extra fields to every record.

    Per-call ``extra`` values (e.g. the tool name) are merged over the
    fixed fields and land in the JSON payload alongside them.
    """

    def process(self, msg, kwargs):
        fields = dict(self.extra)
        fields.update(kwargs.get('extra') or {})
        kwargs['extra'] = {'extra_fields': fields}
        return msg, kwargs


def get_logger(name: str, extra_fields: Dict[str, Any] = None) -> logging.Logger:
    """Get a logger with optional extra fields.

    Args:
        name: Logger name
        extra_fields: Extra fields to include in all logs

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if extra_fields:
        return ExtraFieldsAdapter(logger, extra_fields)

    return logger
