"""
Unit Tests for Logging Setup

Author: DualPane Project
License: MIT
"""

import json
import logging
import pytest
from logging.handlers import RotatingFileHandler

from dualpane.utils.logger import ColoredFormatter, get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("dualpane")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


class TestLogging:
    """Test suite for logger configuration."""

    def test_console_only_by_default(self):
        """Without file logging there is a single console handler."""
        logger = setup_logging("DEBUG")

        assert logger.name == "dualpane"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, ColoredFormatter)
        assert logger.propagate is False

    def test_file_logging(self, tmp_path):
        """File logging writes to a rotating log file."""
        log_file = tmp_path / "logs" / "app.log"
        logger = setup_logging("INFO", log_to_file=True, log_file_path=str(log_file))

        get_logger("dualpane.tests").info("hello file")
        for handler in logger.handlers:
            handler.flush()

        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_json_file_logging(self, tmp_path):
        """JSON format produces one JSON object per line."""
        log_file = tmp_path / "app.log"
        logger = setup_logging("INFO", log_to_file=True, log_file_path=str(log_file), json_format=True)

        get_logger("tests").warning("structured")
        for handler in logger.handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert records[-1]["message"] == "structured"
        assert records[-1]["name"] == "dualpane.tests"

    def test_get_logger_names(self):
        """Module loggers live below the dualpane logger."""
        assert get_logger("dualpane.transfer.engine").name == "dualpane.transfer.engine"
        assert get_logger("gui").name == "dualpane.gui"

    def test_colored_formatter_keeps_record(self):
        """Coloring does not alter the record seen by other handlers."""
        record = logging.LogRecord("dualpane", logging.ERROR, __file__, 1, "msg", None, None)
        formatted = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "ERROR" in formatted
        assert record.levelname == "ERROR"
