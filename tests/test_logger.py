"""Tests for the logging setup"""
import logging
import sys

import pytest

from minigrep.logger import setup_logger


@pytest.fixture
def bare_root(monkeypatch):
    """Root logger with no handlers, restored afterwards"""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    level = root.level
    yield root
    root.setLevel(level)


class TestSetupLogger:
    def test_adds_one_stderr_handler(self, bare_root):
        setup_logger("debug")
        setup_logger("debug")
        assert len(bare_root.handlers) == 1
        assert bare_root.handlers[0].stream is sys.stderr
        assert bare_root.level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self, bare_root):
        setup_logger("chatty")
        assert bare_root.level == logging.WARNING
