"""Unit tests for designlib.logging_config."""

from __future__ import annotations

import logging

import pytest
import structlog

from designlib.config import Settings
from designlib.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_json_format(self) -> None:
        configure_logging(Settings(logging={"level": "DEBUG", "format": "json"}))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.processors.format_exc_info in processors

    def test_text_format(self) -> None:
        configure_logging(Settings(logging={"format": "text"}))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert structlog.processors.format_exc_info not in processors

    def test_uses_stdlib_logger_factory(self) -> None:
        configure_logging(Settings())
        config = structlog.get_config()
        assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
        assert logging.getLogger().handlers
