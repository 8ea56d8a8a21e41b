"""Log level resolution for the store logger."""
import logging

import pytest

from todo_mcp.utils.logger import StructuredLogger, resolve_log_level


@pytest.mark.parametrize("name, expected", [
    ("debug", logging.DEBUG),
    (" WARNING ", logging.WARNING),
    ("VERBOSE", logging.INFO),
    ("", logging.INFO),
])
def test_level_names_resolve_with_info_fallback(name, expected):
    assert resolve_log_level(name) == expected


def test_exception_includes_fields_and_traceback(caplog):
    store_logger = StructuredLogger("todo-service-test", level=logging.INFO)
    store_logger.logger.propagate = True

    with caplog.at_level(logging.INFO, logger="todo-service-test"):
        try:
            raise ValueError("bad row")
        except ValueError:
            store_logger.exception("Insert failed", file_path="/tmp/a.txt")

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert '"file_path": "/tmp/a.txt"' in record.getMessage()
    assert record.exc_info[0] is ValueError
