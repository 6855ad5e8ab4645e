# Tests for logging_setup.py
# Created: 2026-10-12

import logging

import pytest
from rich.logging import RichHandler

from filejail.logging_setup import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_installs_rich_handler(self, restore_root_logger):
        setup_logging("debug")
        assert restore_root_logger.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in restore_root_logger.handlers)

    def test_quiets_http_client_loggers(self, restore_root_logger):
        setup_logging("INFO")
        assert logging.getLogger("httpx").level == logging.WARNING
