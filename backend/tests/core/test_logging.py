"""
Tests for structured logging setup.
"""

import pytest
import structlog
from structlog import contextvars as structlog_contextvars

from riot_kernel.core.logging import render_processors, setup_logging


@pytest.fixture(autouse=True)
def restore_structlog():
    config = structlog.get_config()
    yield
    structlog.configure(**config)


def test_json_logs_end_with_json_renderer():
    setup_logging("DEBUG", json_logs=True)

    processors = structlog.get_config()["processors"]
    assert structlog_contextvars.merge_contextvars in processors
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)


def test_console_logs_do_not_preformat_exceptions():
    processors = render_processors(json_logs=False)

    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    assert structlog.processors.format_exc_info not in processors
