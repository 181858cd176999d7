"""
Unit Tests for Application Bootstrap

Author: DualPane Project
License: MIT
"""

import logging
import pytest

from dualpane.app import create_session


@pytest.fixture(autouse=True)
def reset_logger(monkeypatch):
    for name in ("DUALPANE_LOG_LEVEL", "DUALPANE_LOG_FILE", "DUALPANE_WATCH",
                 "DUALPANE_LEFT_PATH", "DUALPANE_RIGHT_PATH"):
        monkeypatch.delenv(name, raising=False)
    yield
    logger = logging.getLogger("dualpane")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


class TestCreateSession:
    """Test suite for building a session from a config file."""

    def test_session_from_config_file(self, tmp_path):
        """Panes, logging and watcher follow the config file."""
        left = tmp_path / "left"
        right = tmp_path / "right"
        left.mkdir()
        right.mkdir()
        log_file = tmp_path / "dualpane.log"
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            "app:\n"
            "  log_level: DEBUG\n"
            "  log_to_file: true\n"
            f"  log_file_path: {log_file}\n"
            "panes:\n"
            f"  left_path: {left}\n"
            f"  right_path: {right}\n"
        )

        session = create_session(str(config_path))

        assert session.left.current_path == left
        assert session.right.current_path == right
        assert session.watcher is None
        assert logging.getLogger("dualpane").level == logging.DEBUG
        assert log_file.exists()

    def test_session_as_context_manager(self, tmp_path):
        """Entering and leaving the session starts and stops the watcher."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            "panes:\n"
            f"  left_path: {tmp_path}\n"
            f"  right_path: {tmp_path}\n"
            "watcher:\n"
            "  enabled: true\n"
        )

        with create_session(str(config_path)) as session:
            assert session.watcher.is_running

        assert not session.watcher.is_running

        with session:
            assert session.watcher.is_running

        assert not session.watcher.is_running
