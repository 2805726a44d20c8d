"""Tests for form_relay.logging."""

from __future__ import annotations

import logging

import pytest
import structlog

from form_relay.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_json_mode(self):
        setup_logging(json=True, level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_console_mode(self):
        setup_logging(json=False, level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_level_case_insensitive(self):
        setup_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_uvicorn_loggers_propagate_to_root(self):
        uv = logging.getLogger("uvicorn.error")
        uv.addHandler(logging.StreamHandler())
        setup_logging()
        assert uv.handlers == []
        assert uv.propagate is True

    def test_structlog_produces_output(self, capsys):
        setup_logging(json=True, level="DEBUG")
        structlog.get_logger("relay_test").info("email_sent", to="a@b.com")
        out = capsys.readouterr().out
        assert "email_sent" in out
        assert "a@b.com" in out

    def test_stdlib_records_rendered_as_json(self, capsys):
        setup_logging(json=True, level="INFO")
        logging.getLogger("uvicorn.error").info("Application startup complete.")
        out = capsys.readouterr().out
        assert '"event": "Application startup complete."' in out
        assert '"logger": "uvicorn.error"' in out
