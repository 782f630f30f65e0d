"""Tests for the unified logging setup."""

import io
import json
import logging

import pytest
import structlog

from grappolo.errors import InvalidInputError
from grappolo.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def _last_record(buffer: io.StringIO) -> dict:
    return json.loads(buffer.getvalue().strip().splitlines()[-1])


def test_structlog_events_rendered_as_json():
    buffer = io.StringIO()
    configure_logging(json_output=True, stream=buffer)

    structlog.get_logger("grappolo.test").info("matrix_built", size=8)

    record = _last_record(buffer)
    assert record["event"] == "matrix_built"
    assert record["size"] == 8
    assert record["level"] == "info"
    assert "timestamp" in record


def test_stdlib_records_share_the_renderer():
    buffer = io.StringIO()
    configure_logging(json_output=True, stream=buffer)

    logging.getLogger("some.library").warning("plain message")

    record = _last_record(buffer)
    assert record["event"] == "plain message"
    assert record["logger"] == "some.library"


def test_level_filters_debug():
    buffer = io.StringIO()
    configure_logging(json_output=True, log_level="warning", stream=buffer)

    structlog.get_logger().debug("cluster_refined")

    assert buffer.getvalue() == ""


def test_parallel_backend_loggers_kept_quiet():
    configure_logging(log_level="DEBUG", stream=io.StringIO())
    assert logging.getLogger("joblib").level == logging.WARNING


def test_console_output():
    buffer = io.StringIO()
    configure_logging(stream=buffer)

    structlog.get_logger().info("clustering_complete", clusters=4)

    assert "clustering_complete" in buffer.getvalue()
    assert "clusters=4" in buffer.getvalue()


def test_unknown_level_rejected():
    with pytest.raises(InvalidInputError, match="unknown log level"):
        configure_logging(log_level="LOUD")
