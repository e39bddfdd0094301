import json
import logging
import sys

import pytest

from netcfg_core.core.logging import (
    ContextFilter,
    JsonFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def restore_logging():
    factory = logging.getLogRecordFactory()
    logging.setLogRecordFactory(logging.LogRecord)
    yield
    configure_logging()
    logging.setLogRecordFactory(factory)


def test_console_only_without_log_dir(restore_logging):
    configure_logging()

    handlers = logging.getLogger().handlers

    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert handlers[0].level == logging.INFO


def test_debug_mode_lowers_console_level(restore_logging):
    configure_logging(debug_mode=True)

    assert logging.getLogger().handlers[0].level == logging.DEBUG


def test_file_handlers_write_json(tmp_path, restore_logging):
    configure_logging(log_dir=tmp_path)

    get_logger("netcfg_core.tests").info("rendered %s interfaces", 3)
    get_logger("netcfg_core.tests").debug("debug only")
    for handler in logging.getLogger().handlers:
        handler.flush()

    app_lines = (tmp_path / "app.log").read_text().splitlines()
    debug_lines = (tmp_path / "debug" / "debug.log").read_text().splitlines()

    assert len(app_lines) == 1
    entry = json.loads(app_lines[0])
    assert entry["message"] == "rendered 3 interfaces"
    assert entry["level"] == "INFO"
    assert entry["logger"] == "netcfg_core.tests"
    assert entry["source_file"] == "test_log_config.py"
    assert len(debug_lines) == 2


def test_context_filter_fills_missing_keys():
    record = logging.makeLogRecord({"msg": "plain"})

    assert ContextFilter().filter(record) is True
    assert record.source_file == "Unknown"
    assert record.line_number == 0


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "netcfg_core", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )

    ContextFilter().filter(record)
    entry = json.loads(JsonFormatter().format(record))

    assert entry["message"] == "failed"
    assert "ValueError: boom" in entry["exc_info"]


def test_installed_factory_accepts_records_without_level():
    configure_logging()

    record = logging.makeLogRecord({"msg": "plain"})

    assert record.levelno is None
    assert record.getMessage() == "plain"
    assert record.source_file == "test_log_config.py"


def test_installed_factory_reports_failing_frame(tmp_path):
    configure_logging(log_dir=tmp_path)

    try:
        raise RuntimeError("render failed")
    except RuntimeError:
        get_logger("netcfg_core.tests").error("could not render", exc_info=True)
    for handler in logging.getLogger().handlers:
        handler.flush()

    entry = json.loads((tmp_path / "app.log").read_text().splitlines()[0])
    assert entry["source_function"] == "test_installed_factory_reports_failing_frame"
    assert "RuntimeError: render failed" in entry["exc_info"]
