"""Unit tests for structured logging configuration."""

import json
import logging
import sys

import pytest

from querylens.lib.logging_config import JSONFormatter, setup_logging, get_logger


@pytest.fixture
def restore_root_logger():
    """Keep root logger handlers intact across tests."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


class TestJSONFormatter:
    """Tests for the JSON formatter."""

    def test_format_basic_record(self):
        """Test that a record is rendered as JSON with the standard fields."""
        record = logging.LogRecord(
            name="querylens.test", level=logging.INFO, pathname=__file__,
            lineno=10, msg="Found %d tables", args=(2,), exc_info=None
        )
        payload = json.loads(JSONFormatter().format(record))

        assert payload['level'] == 'INFO'
        assert payload['logger'] == 'querylens.test'
        assert payload['message'] == 'Found 2 tables'
        assert payload['line'] == 10
        assert 'timestamp' in payload

    def test_format_includes_extra_fields(self):
        """Test that extra_fields are merged into the payload."""
        record = logging.LogRecord(
            name="querylens.test", level=logging.DEBUG, pathname=__file__,
            lineno=1, msg="msg", args=(), exc_info=None
        )
        record.extra_fields = {'tool': 'analyze_sql_query'}
        payload = json.loads(JSONFormatter().format(record))

        assert payload['tool'] == 'analyze_sql_query'

    def test_format_includes_exception(self):
        """Test that exception info is rendered."""
        try:
            raise ValueError("bad")
        except ValueError:
            import sys
            exc_info = sys.exc_info()

        record = logging.LogRecord(
            name="querylens.test", level=logging.ERROR, pathname=__file__,
            lineno=1, msg="failed", args=(), exc_info=exc_info
        )
        payload = json.loads(JSONFormatter().format(record))

        assert 'ValueError: bad' in payload['exception']


class TestSetupLogging:
    """Tests for setup_logging and get_logger."""

    def test_setup_logging_sets_level_and_handler(self, restore_root_logger):
        setup_logging(level="DEBUG", json_format=False)

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    def test_setup_logging_json_formatter(self, restore_root_logger):
        setup_logging(level="INFO", json_format=True)

        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_setup_logging_unknown_level_defaults_to_info(self, restore_root_logger):
        setup_logging(level="NOISY", json_format=False)

        assert restore_root_logger.level == logging.INFO

    def test_setup_logging_with_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "querylens.log"
        setup_logging(level="INFO", json_format=True, log_file=str(log_file))

        logging.getLogger("querylens.file_test").info("written to file")
        for handler in restore_root_logger.handlers:
            handler.flush()

        line = log_file.read_text().strip().splitlines()[-1]
        assert json.loads(line)['message'] == 'written to file'

    def test_get_logger_returns_same_instance(self):
        assert get_logger("querylens.same") is get_logger("querylens.same")

    def test_get_logger_with_extra_fields(self):
        adapter = get_logger("querylens.extra", extra_fields={'tool': 'x'})

        assert isinstance(adapter, logging.LoggerAdapter)
        msg, kwargs = adapter.process("hello", {})
        assert kwargs['extra'] == {'extra_fields': {'tool': 'x'}}

    def test_adapter_merges_per_call_extra(self):
        adapter = get_logger("querylens.merge", extra_fields={'component': 'server'})

        msg, kwargs = adapter.process("failed", {'extra': {'tool': 'list_query_tables'}})
        assert kwargs['extra'] == {
            'extra_fields': {'component': 'server', 'tool': 'list_query_tables'}
        }
        # the adapter's own fields are not mutated by a call
        assert adapter.extra == {'component': 'server'}

    def test_component_and_tool_reach_json_output(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "querylens.log"
        setup_logging(level="INFO", json_format=True, log_file=str(log_file))

        adapter = get_logger("querylens.fields", extra_fields={'component': 'server'})
        adapter.error("Tool error", extra={'tool': 'analyze_sql_query'})
        for handler in restore_root_logger.handlers:
            handler.flush()

        payload = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert payload['component'] == 'server'
        assert payload['tool'] == 'analyze_sql_query'

    def test_console_handler_writes_to_stderr(self, restore_root_logger):
        setup_logging(level="INFO", json_format=True)

        assert restore_root_logger.handlers[0].stream is sys.stderr
