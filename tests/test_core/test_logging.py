"""Tests for logging setup."""

import json
import logging
import sys

import pytest

from zmkview.core.logging import setup_logging
from zmkview.core.structlog_logger import get_struct_logger


@pytest.fixture
def configure_logging():
    """Call setup_logging and remove the handlers it installed afterwards."""
    root = logging.getLogger()
    level = root.level
    installed: list[logging.Handler] = []

    def _configure(**kwargs):
        setup_logging(**kwargs)
        installed.extend(root.handlers)
        return root

    yield _configure

    for handler in installed:
        handler.close()
        root.removeHandler(handler)
    root.setLevel(level)


def _last_json_line(log_file):
    return json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])


class TestSetupLogging:
    def test_sets_root_level(self, configure_logging):
        root = configure_logging(log_level_name="DEBUG")
        assert root.level == logging.DEBUG

    def test_unknown_level_defaults_to_warning(self, configure_logging):
        root = configure_logging(log_level_name="chatty")
        assert root.level == logging.WARNING

    def test_replaces_handlers(self, configure_logging):
        configure_logging()
        root = configure_logging()
        assert len(root.handlers) == 1

    def test_log_file_receives_json_lines(self, configure_logging, tmp_path):
        log_file = tmp_path / "logs" / "zmkview.log"
        root = configure_logging(log_level_name="INFO", log_file=str(log_file))

        logging.getLogger("zmkview.test").info("parsed %d layers", 2)
        for handler in root.handlers:
            handler.flush()

        record = _last_json_line(log_file)
        assert record["event"] == "parsed 2 layers"
        assert record["level"] == "info"
        assert record["logger"] == "zmkview.test"

    def test_structlog_events_reach_log_file(self, configure_logging, tmp_path):
        log_file = tmp_path / "zmkview.log"
        root = configure_logging(log_level_name="INFO", log_file=str(log_file))

        get_struct_logger("zmkview.struct").info("keymap_parsed", layers=3)
        for handler in root.handlers:
            handler.flush()

        record = _last_json_line(log_file)
        assert record["event"] == "keymap_parsed"
        assert record["layers"] == 3

    def test_below_level_is_dropped(self, configure_logging, tmp_path):
        log_file = tmp_path / "zmkview.log"
        configure_logging(log_level_name="ERROR", log_file=str(log_file))

        logging.getLogger("zmkview.test").info("not written")

        assert not log_file.exists()

    def test_exceptions_are_rendered_into_log_file(self, configure_logging, tmp_path):
        log_file = tmp_path / "zmkview.log"
        root = configure_logging(log_level_name="INFO", log_file=str(log_file))

        try:
            raise ValueError("bad binding")
        except ValueError:
            logging.getLogger("zmkview.test").exception("parse failed")
        for handler in root.handlers:
            handler.flush()

        record = _last_json_line(log_file)
        assert record["event"] == "parse failed"
        assert "ValueError: bad binding" in record["exception"]

    def test_console_handler_writes_to_stderr(self, configure_logging):
        root = configure_logging(json_logs=True)
        assert root.handlers[0].stream is sys.stderr
