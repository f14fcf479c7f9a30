"""Tests for logging.py."""

import logging
from unittest.mock import patch

import pytest
import structlog
from watchlayer.logging import bind_context, configure_logging


class TestConfigureLogging:
    """Tests for configure_logging."""

    @patch("watchlayer.logging.logging.basicConfig")
    @patch("watchlayer.logging.structlog.configure")
    def test_json_renderer(self, mock_configure, mock_basic_config):
        configure_logging("debug", json_output=True)

        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert processors[0] is structlog.contextvars.merge_contextvars
        assert mock_basic_config.call_args.kwargs["level"] == "DEBUG"

    @patch("watchlayer.logging.logging.basicConfig")
    @patch("watchlayer.logging.structlog.configure")
    def test_console_renderer(self, mock_configure, mock_basic_config):
        configure_logging(logging.WARNING, json_output=False)

        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert mock_basic_config.call_args.kwargs["level"] == logging.WARNING


class TestBindContext:
    """Tests for bind_context."""

    def test_binds_contextvars_inside_block(self):
        structlog.contextvars.clear_contextvars()
        with bind_context(command="discover", kind="sqs_queue") as log:
            assert structlog.contextvars.get_contextvars() == {
                "command": "discover",
                "kind": "sqs_queue",
            }
            assert log is not None

        assert structlog.contextvars.get_contextvars() == {}

    def test_unbinds_when_block_raises(self):
        structlog.contextvars.clear_contextvars()
        with pytest.raises(RuntimeError):
            with bind_context(command="discover"):
                raise RuntimeError("boom")

        assert structlog.contextvars.get_contextvars() == {}
