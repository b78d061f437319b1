"""
Unit Tests for Logging Setup
"""
import logging

import pytest

from urostrat.utils.logging import LEVEL_COLORS, StructuredFormatter, get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord("urostrat.test", level, __file__, 1, msg, None, None)


class TestStructuredFormatter:

    def test_plain_line(self):
        line = StructuredFormatter(use_color=False).format(_record(logging.INFO, "High Risk"))

        assert line.endswith("INFO     [urostrat.test] High Risk")
        assert "\033[" not in line

    def test_colored_line(self):
        line = StructuredFormatter(use_color=True).format(_record(logging.WARNING, "bad date"))

        assert line.startswith(LEVEL_COLORS["WARNING"])
        assert line.endswith("\033[0m")


class TestSetupLogging:

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        setup_logging("chatty")
        assert restore_root_logger.level == logging.INFO

    def test_log_file_receives_records(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "urostrat.log"
        setup_logging("DEBUG", str(log_file))

        get_logger("urostrat.test").info("schedule built")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert "INFO | urostrat.test | schedule built" in log_file.read_text(encoding="utf-8")
